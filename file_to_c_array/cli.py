"""Embed a binary file in a C program as a `char` array.

Writes a header declaring `extern char <var>[<size>];` and a source file
defining the array with the file's bytes.

Examples:
  file-to-c-array logo.png --var logo
  file-to-c-array logo.png --var logo --header include/logo.h --source src/logo.c
  file-to-c-array file=logo.png var=logo          (original key=value syntax)

When --header/--source are omitted, `.h`/`.c` is appended to the input path
(`logo.png` -> `logo.png.h`, `logo.png.c`).
"""

from __future__ import annotations

import argparse
import re
import string
import sys
from typing import TextIO

from .convert import convert
from .errors import ConversionError, MalformedPathError
from .paths import SEPARATORS


# key=value spellings accepted for compatibility, mapped to their option.
_KEY_VALUE_OPTIONS = {
    "file": "--file",
    "header": "--header",
    "head": "--header",
    "source": "--source",
    "src": "--source",
    "variable": "--variable",
    "var": "--variable",
}
_KEY_VALUE_RE = re.compile(r"^(%s)=(.*)$" % "|".join(_KEY_VALUE_OPTIONS), re.DOTALL)

_ASCII_IDENT_START = frozenset(string.ascii_letters + "_")
_ASCII_IDENT_REST = _ASCII_IDENT_START | frozenset(string.digits)


def default_output_path(path: str, extension: str) -> str:
    """Append `extension` to `path`, ignoring any trailing separators."""
    stripped = path.rstrip(SEPARATORS)
    if not stripped:
        raise MalformedPathError(path)
    return stripped + extension


def is_valid_identifier(name: str, allow_non_ascii: bool = False) -> bool:
    """Check `name` is usable as a C identifier.

    ASCII characters must follow the usual rules (letters, digits, `_`, no
    leading digit). Non-ASCII characters are only accepted with
    `allow_non_ascii`, since not every compiler takes them. Lone surrogates
    (undecodable argv bytes) are never accepted: they cannot be written out.
    """
    if not name:
        return False
    for i, c in enumerate(name):
        if not c.isascii():
            if not allow_non_ascii or "\ud800" <= c <= "\udfff":
                return False
            continue
        allowed = _ASCII_IDENT_REST if i else _ASCII_IDENT_START
        if c not in allowed:
            return False
    return True


def _rewrite_key_value_args(argv: list[str]) -> list[str]:
    out: list[str] = []
    for a in argv:
        m = _KEY_VALUE_RE.match(a)
        if not m:
            out.append(a)
            continue
        key, value = m.groups()
        # An empty value leaves the option unset.
        if value:
            out.extend([_KEY_VALUE_OPTIONS[key], value])
    return out


class _Tee:
    """Write to the console and, optionally, mirror everything into a log file."""

    def __init__(self, file_path: str | None = None):
        self._fp = open(file_path, "w", encoding="utf-8", errors="replace") if file_path else None

    def write(self, s: str, stream: TextIO | None = None) -> None:
        stream = stream or sys.stdout
        stream.write(s)
        stream.flush()
        if self._fp:
            self._fp.write(s)

    def close(self) -> None:
        if self._fp:
            try:
                self._fp.close()
            except Exception:
                pass


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="file-to-c-array",
        description="Convert a binary file into a C header/source pair declaring it as a char array.",
        epilog=__doc__.split("Examples:", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("file", nargs="?", help="Binary file to embed.")
    ap.add_argument("--file", dest="file_opt", metavar="FILE", help="Same as the positional FILE.")
    ap.add_argument(
        "--header",
        "--head",
        dest="header",
        help="Header output path (default: FILE with '.h' appended).",
    )
    ap.add_argument(
        "--source",
        "--src",
        dest="source",
        help="Source output path (default: FILE with '.c' appended).",
    )
    ap.add_argument("--variable", "--var", dest="variable", help="Name of the C array.")
    ap.add_argument("--log", metavar="PATH", help="Also write all output to PATH.")
    return ap


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    ap = _build_parser()
    args = ap.parse_args(_rewrite_key_value_args(argv))

    file_path = args.file_opt or args.file
    if not file_path:
        ap.error("unspecified file")
    if not args.variable:
        ap.error("unspecified variable name")

    try:
        out = _Tee(args.log)
    except OSError as e:
        sys.stderr.write(f"ERROR: failed to open log file {args.log}: {e}\n")
        return 1

    try:
        return _run(out, file_path, args.header, args.source, args.variable)
    finally:
        out.close()


def _run(out: _Tee, file_path: str, header: str | None, source: str | None, variable: str) -> int:
    def die(msg: str) -> int:
        out.write(f"ERROR: {msg}\n", sys.stderr)
        return 1

    if not is_valid_identifier(variable):
        if not is_valid_identifier(variable, allow_non_ascii=True):
            shown = variable.encode("utf-8", "backslashreplace").decode("utf-8")
            return die(f"{shown} is not a valid variable name")
        out.write("[warn] some compilers do not support non ascii variable names\n", sys.stderr)

    try:
        if header is None:
            header = default_output_path(file_path, ".h")
            out.write(f"[info] Auto generated header path: {header}\n")
        if source is None:
            source = default_output_path(file_path, ".c")
            out.write(f"[info] Auto generated source path: {source}\n")

        src = convert(file_path, header, source, variable)
    except ConversionError as e:
        return die(str(e))

    out.write(f"[info] Success: {src.size} bytes from {file_path} -> {header}, {source}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
