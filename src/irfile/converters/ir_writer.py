"""Writer for the line-oriented IR signal file format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from irfile.converters.ir_reader import FILETYPE_PREFIX, RECORD_DELIMITER, VERSION_PREFIX
from irfile.models.common import encode_le_hex32
from irfile.models.signal import SignalKind

if TYPE_CHECKING:
    from irfile.models.library import SignalLibrary
    from irfile.models.signal import Signal


class IRFileWriter:
    """Serialize a SignalLibrary back to the IR signal file format.

    Output is canonical: header first, then one ``#``-delimited record per
    signal with fields in a fixed order. Only the fields belonging to the
    signal's kind are written; unrecognized kinds get ``name`` and ``type``
    only.

    Usage:
        writer = IRFileWriter()
        path.write_bytes(writer.write_bytes(library))
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the writer.

        Args:
        ----
            encoding: Text encoding of the output.

        """
        self._encoding = encoding

    def write_bytes(self, library: SignalLibrary) -> bytes:
        """Serialize a library to bytes."""
        return self.write_text(library).encode(self._encoding, errors="surrogateescape")

    def write_text(self, library: SignalLibrary) -> str:
        """Serialize a library to text."""
        lines = [
            f"{FILETYPE_PREFIX} {library.filetype}",
            f"{VERSION_PREFIX} {library.version}",
        ]
        for signal in library.signals:
            lines.extend(self._signal_lines(signal))

        return "".join(f"{line}\n" for line in lines)

    @staticmethod
    def _signal_lines(signal: Signal) -> list[str]:
        lines = [
            RECORD_DELIMITER,
            f"name: {signal.name}",
            f"type: {signal.kind_tag}",
        ]

        if signal.type is SignalKind.PARSED:
            lines.append(f"protocol: {signal.protocol}")
            lines.append(f"address: {encode_le_hex32(signal.address)}")
            lines.append(f"command: {encode_le_hex32(signal.command)}")
        elif signal.type is SignalKind.RAW:
            lines.append(f"frequency: {signal.frequency}")
            lines.append(f"duty_cycle: {signal.duty_cycle:.6f}")
            lines.append("data:" + "".join(f" {sample}" for sample in signal.data))

        return lines


def serialize_signal_file(library: SignalLibrary, encoding: str = "utf-8") -> bytes:
    """Serialize a library to IR signal file bytes."""
    return IRFileWriter(encoding=encoding).write_bytes(library)
