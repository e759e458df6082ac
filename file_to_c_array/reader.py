from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO

from .errors import OpenError, ReadError, ResourceError, SizeError, os_reason


@dataclass(frozen=True)
class SourceFile:
    path: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def _file_size(f: BinaryIO) -> int:
    # Measure by seeking to the end, then go back to where we were.
    pos = f.tell()
    size = f.seek(0, io.SEEK_END)
    f.seek(pos, io.SEEK_SET)
    return size


def read_source_file(path: str) -> SourceFile:
    """Load the whole of `path` into memory.

    The size is measured up front and the content is read in one pass;
    getting fewer bytes than that is an error even though some were read.
    """
    try:
        f = open(path, "rb")
    except (OSError, ValueError) as e:
        raise OpenError(path, os_reason(e)) from e

    with f:
        try:
            size = _file_size(f)
        except OSError as e:
            raise SizeError(path, os_reason(e)) from e

        # read(size) allocates the result once, at its final size.
        try:
            content = f.read(size)
        except MemoryError as e:
            raise ResourceError(size) from e
        except OSError as e:
            raise ReadError(path, os_reason(e)) from e
        if len(content) != size:
            raise ReadError(path, f"expected {size} bytes, got {len(content)}")

    return SourceFile(path=path, content=content)
