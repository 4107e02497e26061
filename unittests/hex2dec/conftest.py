import io
import os

import pytest

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))


@pytest.fixture
def fixtures_dir():
    return os.path.join(TESTS_DIR, "fixtures")


@pytest.fixture
def readelf_header(fixtures_dir):
    """Raw bytes of a readelf file header dump."""
    with open(os.path.join(fixtures_dir, "readelf_header.txt"), "rb") as fh:
        return fh.read()


@pytest.fixture
def stdin(monkeypatch):
    """Returns a function replacing the standard input with the given bytes."""

    def _stdin(data):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _stdin
