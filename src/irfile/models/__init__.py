"""Pydantic models for IR signal files.

Model Hierarchy:
    SignalLibrary (root)
    ├── filetype - free-form Filetype: header
    ├── version - free-form Version: header
    └── signals - ordered Signal records
        ├── parsed: protocol, address, command
        └── raw: frequency, duty_cycle, data

Example:
-------
    >>> from irfile.models import Signal, SignalLibrary, FileKind
    >>> lib = SignalLibrary(
    ...     filetype=FileKind.SIGNALS_FILE,
    ...     version="1",
    ...     signals=[Signal.parsed("Power", "NEC", 0x00, 0x15)],
    ... )
    >>> lib.signals[0].command
    21

"""

from irfile.models.common import (
    UINT32_MAX,
    NonEmptyStr,
    PlainStr,
    UInt32,
    decode_le_hex32,
    encode_le_hex32,
    validate_non_empty,
    validate_uint32,
)
from irfile.models.library import FileKind, SignalLibrary
from irfile.models.signal import KnownProtocol, Signal, SignalKind, SignalType

__all__ = [
    # Common types
    "UINT32_MAX",
    "NonEmptyStr",
    "PlainStr",
    "UInt32",
    "decode_le_hex32",
    "encode_le_hex32",
    "validate_non_empty",
    "validate_uint32",
    # Models
    "FileKind",
    "KnownProtocol",
    "Signal",
    "SignalKind",
    "SignalLibrary",
    "SignalType",
]
