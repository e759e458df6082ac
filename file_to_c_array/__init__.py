"""Embed binary files in C programs as `char` arrays."""

from .convert import convert
from .errors import (
    ConversionError,
    MalformedPathError,
    OpenError,
    PathError,
    ReadError,
    ResourceError,
    SizeError,
    WriteError,
)
from .reader import SourceFile

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "MalformedPathError",
    "OpenError",
    "PathError",
    "ReadError",
    "ResourceError",
    "SizeError",
    "SourceFile",
    "WriteError",
    "convert",
]
