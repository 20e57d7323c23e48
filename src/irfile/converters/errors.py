"""Error types raised while reading IR signal files."""

from __future__ import annotations


class IRFileError(Exception):
    """Base class for irfile errors."""


class ParseError(IRFileError):
    """A numeric field could not be decoded.

    Parsing is all-or-nothing: the first malformed value aborts the whole
    input and no partial library is returned.
    """

    field: str = "value"
    """File key of the malformed field (e.g., 'address')."""

    def __init__(self, line: int, reason: str) -> None:
        """Initialize ParseError.

        Args:
        ----
            line: 1-based line number of the offending input line.
            reason: Description of the underlying conversion failure.

        """
        self.line = line
        self.reason = reason
        super().__init__(f"invalid {self.field} at line {line}: {reason}")


class MalformedAddress(ParseError):
    """``address:`` is not four hex bytes."""

    field = "address"


class MalformedCommand(ParseError):
    """``command:`` is not four hex bytes."""

    field = "command"


class MalformedFrequency(ParseError):
    """``frequency:`` is not a base-10 integer."""

    field = "frequency"


class MalformedDutyCycle(ParseError):
    """``duty_cycle:`` is not a base-10 number."""

    field = "duty_cycle"


class MalformedDataSample(ParseError):
    """A ``data:`` token is not a base-10 integer."""

    field = "data"
