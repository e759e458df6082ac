from __future__ import annotations

from .emit import remove_quietly, write_header, write_source
from .errors import ConversionError, WriteError
from .reader import SourceFile, read_source_file


def convert(file_path: str, header_path: str, source_path: str, var_name: str) -> SourceFile:
    """Embed `file_path` as `char var_name[]` in a header/source pair.

    Either both outputs are written or neither is left on disk (best effort).
    Raises a `ConversionError` subclass describing the first failure.
    """
    src = read_source_file(file_path)

    write_header(header_path, var_name, src.size)

    try:
        write_source(source_path, var_name, src.content)
    except ConversionError as e:
        # Only a source we opened (and truncated) is ours to delete.
        if isinstance(e, WriteError):
            remove_quietly(source_path)
        # The header on its own would declare an array nobody defines.
        remove_quietly(header_path)
        raise

    return src
