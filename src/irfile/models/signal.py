"""Models for a single IR signal definition."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from irfile.models.common import NonEmptyStr, PlainStr, UInt32


class SignalKind(str, Enum):
    """Recognized values of a signal's ``type:`` field."""

    PARSED = "parsed"  # protocol + address + command
    RAW = "raw"  # carrier frequency + duty cycle + mark/space samples


class KnownProtocol(str, Enum):
    """Protocol names conventionally found in parsed signals.

    Informational only: ``Signal.protocol`` accepts any string.
    """

    NEC = "NEC"
    NEC42 = "NEC42"
    NECEXT = "NECext"
    RC5 = "RC5"
    RC5X = "RC5X"
    RC6 = "RC6"
    SAMSUNG32 = "Samsung32"
    SIRC = "SIRC"
    RCA = "RCA"
    PIONEER = "Pioneer"
    KASEIKYO = "Kaseikyo"


# A recognized kind, or the verbatim tag for anything else
SignalType = Annotated[SignalKind | str, Field(union_mode="left_to_right")]


class Signal(BaseModel):
    """One named IR signal, either decoded (parsed) or a raw pulse train.

    Only the fields that belong to ``type`` are written out; the others may
    still hold values in memory.

    Example:
    -------
        ```
        name: Power
        type: parsed
        protocol: NEC
        address: 00 00 00 00
        command: 15 00 00 00
        ```

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Annotated[NonEmptyStr, Field(description="Signal name shown on the remote")]
    type: Annotated[SignalType, Field(description="Signal kind tag")]

    # Parsed signals
    protocol: PlainStr = ""
    address: UInt32 = 0
    command: UInt32 = 0

    # Raw signals
    frequency: Annotated[int, Field(description="Carrier frequency in Hz")] = 0
    duty_cycle: Annotated[float, Field(description="Carrier duty cycle (0-1)")] = 0.0
    data: Annotated[
        tuple[int, ...],
        Field(description="Alternating mark/space durations in microseconds"),
    ] = ()

    @classmethod
    def parsed(
        cls,
        name: str,
        protocol: str | KnownProtocol,
        address: int,
        command: int,
    ) -> Signal:
        """Build a parsed signal."""
        return cls(
            name=name,
            type=SignalKind.PARSED,
            protocol=protocol,
            address=address,
            command=command,
        )

    @classmethod
    def raw(
        cls,
        name: str,
        frequency: int,
        duty_cycle: float,
        data: Iterable[int],
    ) -> Signal:
        """Build a raw signal."""
        return cls(
            name=name,
            type=SignalKind.RAW,
            frequency=frequency,
            duty_cycle=duty_cycle,
            data=tuple(data),
        )

    @property
    def kind_tag(self) -> str:
        """Return the ``type:`` value as written in the file."""
        if isinstance(self.type, SignalKind):
            return self.type.value
        return self.type

    @property
    def is_parsed(self) -> bool:
        return self.type is SignalKind.PARSED

    @property
    def is_raw(self) -> bool:
        return self.type is SignalKind.RAW

    @property
    def is_recognized(self) -> bool:
        """Whether the kind tag is one of the recognized ``SignalKind`` values."""
        return isinstance(self.type, SignalKind)
