"""Tests for IRFileWriter."""

import pytest
from irfile.converters import IRFileReader, IRFileWriter, serialize_signal_file
from irfile.models import Signal, SignalLibrary
from pydantic import ValidationError

from tests.fixtures.sample_files import MIXED_LIBRARY, SINGLE_PARSED, SINGLE_RAW


class TestHeader:
    """Tests for the header lines."""

    def test_empty_library(self, writer: IRFileWriter) -> None:
        """Should write only the two header lines."""
        library = SignalLibrary(filetype="IR signals file", version="1")
        assert writer.write_bytes(library) == b"Filetype: IR signals file\nVersion: 1\n"

    def test_empty_header_values(self, writer: IRFileWriter) -> None:
        """Should keep the space after the colon for empty values."""
        assert writer.write_bytes(SignalLibrary()) == b"Filetype: \nVersion: \n"


class TestParsedSignals:
    """Tests for decoded signals."""

    def test_nec_example(self, writer: IRFileWriter, power_signal: Signal) -> None:
        """Should produce the byte-exact normalized form."""
        library = SignalLibrary(filetype="IR signals file", version="1", signals=[power_signal])
        assert writer.write_bytes(library) == SINGLE_PARSED

    def test_hex_is_upper_case_little_endian(self, writer: IRFileWriter) -> None:
        """Should write the low byte first in upper-case hex."""
        signal = Signal.parsed("Vol_dn", "NECext", 0xFF86, 0xD52A)
        text = writer.write_text(SignalLibrary(signals=[signal]))
        assert "address: 86 FF 00 00\n" in text
        assert "command: 2A D5 00 00\n" in text

    def test_full_width_values(self, writer: IRFileWriter) -> None:
        """Should write all four bytes of large values."""
        signal = Signal.parsed("A", "Kaseikyo", 0xDEADBEEF, 0xFFFFFFFF)
        text = writer.write_text(SignalLibrary(signals=[signal]))
        assert "address: EF BE AD DE\n" in text
        assert "command: FF FF FF FF\n" in text

    def test_raw_fields_not_written(self, writer: IRFileWriter) -> None:
        """Should omit frequency, duty cycle and data."""
        signal = Signal(name="A", type="parsed", frequency=38000, data=(1, 2))
        text = writer.write_text(SignalLibrary(signals=[signal]))
        assert "frequency" not in text
        assert "data" not in text


class TestRawSignals:
    """Tests for raw captures."""

    def test_raw_example(self, writer: IRFileWriter, raw_signal: Signal) -> None:
        """Should produce the byte-exact normalized form."""
        library = SignalLibrary(filetype="IR signals file", version="1", signals=[raw_signal])
        assert writer.write_bytes(library) == SINGLE_RAW

    def test_duty_cycle_six_decimals(self, writer: IRFileWriter) -> None:
        """Should always write six decimal places."""
        signal = Signal.raw("A", 36000, 0.5, [1])
        assert "duty_cycle: 0.500000\n" in writer.write_text(SignalLibrary(signals=[signal]))

    def test_empty_data(self, writer: IRFileWriter) -> None:
        """Should write a bare 'data:' line when there are no samples."""
        signal = Signal.raw("A", 38000, 0.33, [])
        text = writer.write_text(SignalLibrary(signals=[signal]))
        assert text.endswith("data:\n")

    def test_parsed_fields_not_written(self, writer: IRFileWriter) -> None:
        """Should omit protocol, address and command."""
        signal = Signal(name="A", type="raw", protocol="NEC", address=1)
        text = writer.write_text(SignalLibrary(signals=[signal]))
        assert "protocol" not in text
        assert "address" not in text


class TestOtherSignals:
    """Tests for unrecognized type tags."""

    def test_only_name_and_type(self, writer: IRFileWriter) -> None:
        """Should write nothing but name and type."""
        signal = Signal(name="A", type="pronto", protocol="NEC", frequency=38000)
        library = SignalLibrary(filetype="IR signals file", version="1", signals=[signal])
        assert writer.write_bytes(library) == (
            b"Filetype: IR signals file\nVersion: 1\n#\nname: A\ntype: pronto\n"
        )

    def test_empty_type(self, writer: IRFileWriter) -> None:
        """Should write an empty type line."""
        text = writer.write_text(SignalLibrary(signals=[Signal(name="A", type="")]))
        assert text.endswith("#\nname: A\ntype: \n")


class TestLayout:
    """Tests for overall output structure."""

    def test_mixed_library(
        self, reader: IRFileReader, writer: IRFileWriter, mixed_library_bytes: bytes
    ) -> None:
        """Should reproduce a normalized file byte for byte."""
        assert writer.write_bytes(reader.read_bytes(mixed_library_bytes)) == MIXED_LIBRARY

    def test_one_delimiter_per_signal(self, writer: IRFileWriter, library: SignalLibrary) -> None:
        """Should start every record with a '#' line."""
        lines = writer.write_text(library).split("\n")
        assert lines.count("#") == len(library.signals)

    def test_every_line_terminated(self, writer: IRFileWriter, library: SignalLibrary) -> None:
        """Should end with a newline and contain no blank lines."""
        text = writer.write_text(library)
        assert text.endswith("\n")
        assert "\n\n" not in text

    def test_write_bytes_matches_write_text(
        self, writer: IRFileWriter, library: SignalLibrary
    ) -> None:
        """Should encode the text form."""
        assert writer.write_bytes(library) == writer.write_text(library).encode()

    def test_function_form(self, writer: IRFileWriter, library: SignalLibrary) -> None:
        """Should match the writer class output."""
        assert serialize_signal_file(library) == writer.write_bytes(library)


class TestEncoding:
    """Tests for text encoding of the output."""

    def test_utf8_name(self, writer: IRFileWriter) -> None:
        """Should encode names as UTF-8 by default."""
        library = SignalLibrary(signals=[Signal(name="Télé", type="pronto")])
        assert "name: Télé\n".encode() in writer.write_bytes(library)

    def test_other_encoding(self) -> None:
        """Should honour the configured encoding."""
        library = SignalLibrary(signals=[Signal(name="Télé", type="pronto")])
        data = IRFileWriter(encoding="latin-1").write_bytes(library)
        assert "name: Télé\n".encode("latin-1") in data

    def test_undecodable_bytes_survive(self, reader: IRFileReader, writer: IRFileWriter) -> None:
        """Should write back bytes the reader could not decode."""
        data = b"Filetype: \nVersion: \n#\nname: \xff\xfe\ntype: x\n"
        assert writer.write_bytes(reader.read_bytes(data)) == data


class TestOutOfRange:
    """Tests for values that cannot be written."""

    def test_address_rejected_at_construction(self) -> None:
        """Should refuse addresses wider than 32 bits."""
        with pytest.raises(ValidationError):
            Signal.parsed("A", "NEC", 1 << 32, 0)

    def test_negative_command_rejected(self) -> None:
        """Should refuse negative commands."""
        with pytest.raises(ValidationError):
            Signal.parsed("A", "NEC", 0, -1)
