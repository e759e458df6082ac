from __future__ import annotations

import string

from .errors import MalformedPathError, ResourceError


SEPARATORS = "/\\"

_ALNUM = frozenset(string.ascii_letters + string.digits)


def basename(path: str) -> str:
    """Return the last component of `path`, accepting both `/` and `\\`.

    Trailing separators are ignored (`a/b/` -> `b`). Works on the string only;
    the filesystem is never touched.
    """
    name = path.rstrip(SEPARATORS)
    if not name:
        raise MalformedPathError(path)
    cut = max(name.rfind(sep) for sep in SEPARATORS)
    return name[cut + 1 :]


def include_guard(header_path: str) -> str:
    """Derive the include-guard symbol for a header, e.g. `foo/bar.baz.h` -> `_BAR_BAZ_H`.

    Works on the UTF-8 bytes of the basename: ASCII letters are uppercased,
    digits kept, and every other byte becomes `_` (`café.h` -> `_CAF___H`).
    """
    # surrogatepass so names decoded from undecodable argv bytes still map.
    raw = basename(header_path).encode("utf-8", "surrogatepass")
    try:
        return "_" + "".join(chr(b).upper() if chr(b) in _ALNUM else "_" for b in raw)
    except MemoryError as e:
        raise ResourceError(len(raw) + 1) from e
