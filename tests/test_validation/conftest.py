"""Fixtures for validation tests."""

from __future__ import annotations

import pytest
from irfile.models import Signal, SignalLibrary


@pytest.fixture
def clean_library() -> SignalLibrary:
    """Return a library that passes every check."""
    return SignalLibrary(
        filetype="IR library file",
        version="1",
        signals=[
            Signal.parsed("Power", "NEC", 0x04, 0x08),
            Signal.raw("Vol_up", 38000, 0.33, [9024, 4512, 579]),
        ],
    )


@pytest.fixture
def library_with_errors() -> SignalLibrary:
    """Return a library with a zero-length sample and a bad frequency."""
    return SignalLibrary(
        filetype="IR signals file",
        version="1",
        signals=[Signal.raw("Broken", 0, 0.33, [100, 0, 200])],
    )


@pytest.fixture
def library_with_warnings() -> SignalLibrary:
    """Return a library with duplicate names but no errors."""
    return SignalLibrary(
        filetype="IR signals file",
        version="1",
        signals=[
            Signal.parsed("Power", "NEC", 0, 1),
            Signal.parsed("Power", "NEC", 0, 2),
        ],
    )
