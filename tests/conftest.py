"""Shared pytest fixtures for flash image tests."""

import pytest


@pytest.fixture
def write_listing(tmp_path):
    """Factory that writes a hex listing into tmp_path and returns its path."""

    def _write(text: str, name: str = "image.hex", newline: str = "\n"):
        path = tmp_path / name
        path.write_bytes(text.replace("\n", newline).encode("latin-1"))
        return path

    return _write


@pytest.fixture
def deadbeef_listing(write_listing):
    """Four-byte listing DE AD BE EF."""
    return write_listing("DE AD BE EF\n")


@pytest.fixture
def bin_path(tmp_path):
    """Output image path that does not exist yet."""
    return tmp_path / "image.bin"
