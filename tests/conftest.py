"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from irfile.models import Signal, SignalLibrary

from tests.fixtures.sample_files import MIXED_LIBRARY, SINGLE_PARSED, SINGLE_RAW


@pytest.fixture
def single_parsed_bytes() -> bytes:
    """Return a normalized file holding one parsed signal."""
    return SINGLE_PARSED


@pytest.fixture
def single_raw_bytes() -> bytes:
    """Return a normalized file holding one raw signal."""
    return SINGLE_RAW


@pytest.fixture
def mixed_library_bytes() -> bytes:
    """Return a normalized library with parsed and raw signals."""
    return MIXED_LIBRARY


@pytest.fixture
def power_signal() -> Signal:
    """Return the parsed NEC power signal used across tests."""
    return Signal.parsed("Power", "NEC", 0x00, 0x15)


@pytest.fixture
def raw_signal() -> Signal:
    """Return a raw 38 kHz capture."""
    return Signal.raw("Vol_up", 38000, 0.33, [100, 200, -300])


@pytest.fixture
def library(power_signal: Signal, raw_signal: Signal) -> SignalLibrary:
    """Return a library holding one signal of each kind."""
    return SignalLibrary(
        filetype="IR signals file",
        version="1",
        signals=[power_signal, raw_signal],
    )


@pytest.fixture
def ir_file(tmp_path: Path, mixed_library_bytes: bytes) -> Path:
    """Write the mixed library to disk and return its path."""
    path = tmp_path / "remote.ir"
    path.write_bytes(mixed_library_bytes)
    return path
