"""Test configuration and fixtures for the CHIP-8 disassembler tests."""

import pytest
from c8dc import rom_from_bytes


@pytest.fixture
def write_rom(tmp_path):
    """Write bytes to a ROM file and return its path."""
    def _write(rom_data: bytes, name: str = "test.ch8"):
        path = tmp_path / name
        path.write_bytes(rom_data)
        return path
    return _write


@pytest.fixture
def jump_rom():
    """Two-byte ROM holding a single self-jump (1200)."""
    return rom_from_bytes(bytes([0x12, 0x00]))


@pytest.fixture
def empty_rom():
    return rom_from_bytes(b"")


def words_to_bytes(*words):
    """Helper to lay out instruction words big-endian."""
    return b"".join(word.to_bytes(2, "big") for word in words)


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop shared loggers so a level set in one test does not leak into the next."""
    from c8dc import logging as c8dc_logging
    c8dc_logging._loggers.clear()
    yield
    c8dc_logging._loggers.clear()
