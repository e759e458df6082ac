"""Exceptions raised by a conversion.

Every failure carries its own display message; callers only need ``str(e)``.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for everything a conversion can raise."""


class PathError(ConversionError):
    """An I/O failure tied to a specific path."""

    action = "access"

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"Failed to {self.action} {self.path}"
        if self.reason:
            msg += f": {self.reason}"
        return msg


class OpenError(PathError):
    action = "open"


class SizeError(PathError):
    action = "obtain the size of"


class ReadError(PathError):
    action = "read"


class WriteError(PathError):
    action = "write to"


class MalformedPathError(PathError):
    """Empty path, or a path made only of separators."""

    def __init__(self, path: str):
        super().__init__(path, "no file name component")

    def _message(self) -> str:
        # The path may be empty, so quote it.
        return f"Malformed path {self.path!r}: {self.reason}"


class ResourceError(ConversionError):
    """Out of memory while building a buffer."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Failed to allocate {size} bytes")


def os_reason(e: Exception) -> str:
    # ValueError (embedded NUL, unencodable text) has no strerror.
    return getattr(e, "strerror", None) or str(e)
