"""Fixtures for converter tests."""

import pytest
from irfile.converters import IRFileReader, IRFileWriter


@pytest.fixture
def reader() -> IRFileReader:
    """Return a UTF-8 reader."""
    return IRFileReader()


@pytest.fixture
def writer() -> IRFileWriter:
    """Return a UTF-8 writer."""
    return IRFileWriter()
