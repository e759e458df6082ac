"""Writers for the header/source pair.

Header:

    #ifndef _LOGO_PNG_H
    #define _LOGO_PNG_H

    extern char logo[1234];

    #endif

Source:

    char logo[1234] = {
        0x89, 0x50, 0x4e, 0x47, 0x0d, 0x0a, 0x1a, 0x0a, 0x00, 0x00, 0x00, 0x0d,
        ...
        0xae, 0x42, 0x60, 0x82
    };
"""

from __future__ import annotations

import os
from typing import Iterator

from .errors import OpenError, WriteError, os_reason
from .paths import include_guard


BYTES_PER_LINE = 12
INDENT = "    "


def render_header(guard: str, var_name: str, size: int) -> str:
    if size < 0:
        raise ValueError(f"array size must be unsigned, got {size}")
    return (
        f"#ifndef {guard}\n"
        f"#define {guard}\n"
        "\n"
        f"extern char {var_name}[{size}];\n"
        "\n"
        "#endif\n"
    )


def render_source(var_name: str, content: bytes) -> Iterator[str]:
    """Yield the source text one line at a time."""
    size = len(content)
    yield f"char {var_name}[{size}] = {{\n"
    if not size:
        yield "};\n"
        return

    for start in range(0, size, BYTES_PER_LINE):
        chunk = content[start : start + BYTES_PER_LINE]
        line = INDENT + ", ".join(f"0x{b:02x}" for b in chunk)
        # No trailing comma after the very last byte.
        yield line + (",\n" if start + BYTES_PER_LINE < size else "\n")
    yield "};\n"


def remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except (OSError, ValueError):
        pass


def _open_for_write(path: str):
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except (OSError, ValueError) as e:
        raise OpenError(path, os_reason(e)) from e


def write_header(header_path: str, var_name: str, size: int) -> None:
    """Write the extern declaration, guarded by a symbol derived from `header_path`.

    A failed write never leaves a partial header behind.
    """
    text = render_header(include_guard(header_path), var_name, size)
    f = _open_for_write(header_path)
    try:
        with f:
            f.write(text)
    except (OSError, ValueError) as e:
        remove_quietly(header_path)
        raise WriteError(header_path, os_reason(e)) from e


def write_source(source_path: str, var_name: str, content: bytes) -> None:
    """Write the array definition. Cleanup on failure is left to the caller."""
    f = _open_for_write(source_path)
    try:
        with f:
            for chunk in render_source(var_name, content):
                f.write(chunk)
    except (OSError, ValueError) as e:
        raise WriteError(source_path, os_reason(e)) from e
