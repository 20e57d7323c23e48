"""Converters between IR signal file bytes and SignalLibrary models.

Primary Classes:
    IRFileReader: Parse file contents into a SignalLibrary
    IRFileWriter: Serialize a SignalLibrary to file contents

Example:
-------
    >>> from irfile.converters import parse_signal_file, serialize_signal_file
    >>>
    >>> library = parse_signal_file(data)
    >>> assert parse_signal_file(serialize_signal_file(library)) == library

"""

from irfile.converters.errors import (
    IRFileError,
    MalformedAddress,
    MalformedCommand,
    MalformedDataSample,
    MalformedDutyCycle,
    MalformedFrequency,
    ParseError,
)
from irfile.converters.ir_reader import IRFileReader, parse_signal_file
from irfile.converters.ir_writer import IRFileWriter, serialize_signal_file

__all__ = [
    "IRFileError",
    "IRFileReader",
    "IRFileWriter",
    "MalformedAddress",
    "MalformedCommand",
    "MalformedDataSample",
    "MalformedDutyCycle",
    "MalformedFrequency",
    "ParseError",
    "parse_signal_file",
    "serialize_signal_file",
]
