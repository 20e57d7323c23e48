"""Root model for an IR signal file."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from irfile.models.common import PlainStr
from irfile.models.signal import Signal


class FileKind(str, Enum):
    """Conventional ``Filetype:`` values.

    The codec copies the header verbatim and never enforces these.
    """

    LIBRARY = "IR library file"  # universal remotes
    SIGNALS_FILE = "IR signals file"  # custom remotes


class SignalLibrary(BaseModel):
    """A parsed IR signal file: two header fields and an ordered list of signals.

    Example:
    -------
        ```
        Filetype: IR signals file
        Version: 1
        #
        name: Power
        ...
        ```

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filetype: Annotated[PlainStr, Field(description="Free-form Filetype: header")] = ""
    version: Annotated[str, Field(description="Free-form Version: header")] = ""
    signals: Annotated[
        tuple[Signal, ...],
        Field(description="Signals in file order"),
    ] = ()

    @property
    def parsed_signals(self) -> list[Signal]:
        """Get only signals of the parsed kind."""
        return [s for s in self.signals if s.is_parsed]

    @property
    def raw_signals(self) -> list[Signal]:
        """Get only signals of the raw kind."""
        return [s for s in self.signals if s.is_raw]
