"""Reader for the line-oriented IR signal file format.

Layout::

    Filetype: IR signals file
    Version: 1
    #
    name: Power
    type: parsed
    protocol: NEC
    address: 00 00 00 00
    command: 15 00 00 00
    #
    name: Vol_up
    type: raw
    frequency: 38000
    duty_cycle: 0.330000
    data: 9024 4512 579 552

Each record starts after a ``#`` line. Blank lines and surrounding
whitespace carry no meaning; unknown keys are ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from irfile.converters.errors import (
    MalformedAddress,
    MalformedCommand,
    MalformedDataSample,
    MalformedDutyCycle,
    MalformedFrequency,
    ParseError,
)
from irfile.models.common import decode_le_hex32, split_fields, strip_space
from irfile.models.library import SignalLibrary
from irfile.models.signal import Signal

logger = logging.getLogger(__name__)

FILETYPE_PREFIX = "Filetype:"
VERSION_PREFIX = "Version:"
RECORD_DELIMITER = "#"

# Base-10 integer: optional sign followed by ASCII digits
DECIMAL_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_decimal_int(text: str) -> int:
    """Parse a base-10 signed integer.

    Raises
    ------
        ValueError: If the text is not an optionally signed run of digits.

    """
    if not DECIMAL_INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def parse_decimal_float(text: str) -> float:
    """Parse a base-10 floating-point number.

    Raises
    ------
        ValueError: If the text is not an ASCII number.

    """
    # float() is more lenient than the file format
    if "_" in text or not text.isascii() or text != text.strip():
        raise ValueError(f"invalid number {text!r}")
    try:
        return float(text)
    except ValueError as e:
        raise ValueError(f"invalid number {text!r}") from e


# Keys stored verbatim on the record
TEXT_FIELDS = frozenset({"name", "type", "protocol"})

# Keys holding a single numeric value: decoder and the error raised on failure
NUMERIC_FIELDS: dict[str, tuple[Callable[[str], Any], type[ParseError]]] = {
    "address": (decode_le_hex32, MalformedAddress),
    "command": (decode_le_hex32, MalformedCommand),
    "frequency": (parse_decimal_int, MalformedFrequency),
    "duty_cycle": (parse_decimal_float, MalformedDutyCycle),
}


@dataclass
class SignalRecordBuilder:
    """Fields of the record currently being read.

    An empty ``name`` means no record is in progress.
    """

    name: str = ""
    type: str = ""
    protocol: str = ""
    address: int = 0
    command: int = 0
    frequency: int = 0
    duty_cycle: float = 0.0
    data: list[int] = field(default_factory=list)

    @property
    def in_progress(self) -> bool:
        return self.name != ""

    def build(self) -> Signal:
        """Freeze the accumulated fields into a Signal."""
        return Signal(
            name=self.name,
            type=self.type,
            protocol=self.protocol,
            address=self.address,
            command=self.command,
            frequency=self.frequency,
            duty_cycle=self.duty_cycle,
            data=tuple(self.data),
        )


class IRFileReader:
    """Parse IR signal file contents into a SignalLibrary.

    Usage:
        reader = IRFileReader()
        library = reader.read_bytes(path.read_bytes())
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the reader.

        Args:
        ----
            encoding: Text encoding of the input. Undecodable bytes are kept
                as surrogate escapes so they survive a write back.

        """
        self._encoding = encoding

    def read_bytes(self, data: bytes | str) -> SignalLibrary:
        """Parse a complete file.

        Args:
        ----
            data: File contents.

        Returns:
        -------
            The parsed library.

        Raises:
        ------
            ParseError: If a numeric field is malformed. The error carries the
                1-based line number.

        """
        if isinstance(data, str):
            text = data
        else:
            text = bytes(data).decode(self._encoding, errors="surrogateescape")

        filetype = ""
        version = ""
        # The first header line of each kind wins, even if its value is empty
        filetype_captured = False
        version_captured = False

        signals: list[Signal] = []
        record = SignalRecordBuilder()

        for lineno, raw_line in enumerate(text.split("\n"), start=1):
            line = strip_space(raw_line)
            if not line:
                continue

            if not filetype_captured and line.startswith(FILETYPE_PREFIX):
                filetype = strip_space(line[len(FILETYPE_PREFIX) :])
                filetype_captured = True
                continue

            if not version_captured and line.startswith(VERSION_PREFIX):
                version = strip_space(line[len(VERSION_PREFIX) :])
                version_captured = True
                continue

            if line == RECORD_DELIMITER:
                record = self._flush(record, signals)
                continue

            key, sep, value = line.partition(":")
            if not sep:
                logger.debug("Line %d: no key/value separator, skipped", lineno)
                continue

            self._apply_field(record, strip_space(key), strip_space(value), lineno)

        self._flush(record, signals)

        logger.debug("Parsed %d signal(s)", len(signals))
        return SignalLibrary(filetype=filetype, version=version, signals=tuple(signals))

    @staticmethod
    def _flush(record: SignalRecordBuilder, signals: list[Signal]) -> SignalRecordBuilder:
        """Append the record in progress, if any, and return a fresh builder."""
        if not record.in_progress:
            return record
        signals.append(record.build())
        logger.debug("Read signal %r (%s)", record.name, record.type or "no type")
        return SignalRecordBuilder()

    @staticmethod
    def _apply_field(record: SignalRecordBuilder, key: str, value: str, lineno: int) -> None:
        """Store one ``key: value`` line on the record in progress."""
        if key in TEXT_FIELDS:
            setattr(record, key, value)
            return

        if key in NUMERIC_FIELDS:
            decode, error_cls = NUMERIC_FIELDS[key]
            try:
                setattr(record, key, decode(value))
            except ValueError as e:
                raise error_cls(lineno, str(e)) from e
            return

        if key == "data":
            samples: list[int] = []
            for token in split_fields(value):
                try:
                    samples.append(parse_decimal_int(token))
                except ValueError as e:
                    raise MalformedDataSample(lineno, str(e)) from e
            record.data = samples
            return

        logger.debug("Line %d: unknown key %r ignored", lineno, key)


def parse_signal_file(data: bytes | str, encoding: str = "utf-8") -> SignalLibrary:
    """Parse IR signal file contents.

    Args:
    ----
        data: File contents as bytes (or already decoded text).
        encoding: Text encoding used for bytes input.

    Returns:
    -------
        The parsed library.

    Raises:
    ------
        ParseError: If a numeric field is malformed.

    """
    return IRFileReader(encoding=encoding).read_bytes(data)
