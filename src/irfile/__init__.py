"""irfile: Reader and writer for the line-oriented IR remote signal file format.

This package provides tools for:
- Parsing signal files into immutable Pydantic models
- Serializing models back to canonical file contents
- Linting parsed libraries for suspicious content

Quick Start:
    >>> from pathlib import Path
    >>> from irfile import parse_signal_file, serialize_signal_file
    >>>
    >>> library = parse_signal_file(Path("tv.ir").read_bytes())
    >>> Path("tv.ir").write_bytes(serialize_signal_file(library))

Modules:
    models: Pydantic models and the little-endian hex byte codec
    converters: Reader and writer for the file format
    validation: Semantic checks beyond the file format
"""

from irfile.converters import (
    IRFileError,
    ParseError,
    parse_signal_file,
    serialize_signal_file,
)
from irfile.models import Signal, SignalKind, SignalLibrary

__version__ = "0.1.0"

__all__ = [
    "IRFileError",
    "ParseError",
    "Signal",
    "SignalKind",
    "SignalLibrary",
    "__version__",
    "parse_signal_file",
    "serialize_signal_file",
]
