"""Shared fixtures for letterplay tests."""

import pytest

VALID_CONTENT = b"hello,world!!"


@pytest.fixture
def write_input(tmp_path):
    """Factory writing bytes to a file under tmp_path, returning its path."""
    def _write(content, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return _write


@pytest.fixture
def valid_input(write_input):
    return write_input(VALID_CONTENT)
