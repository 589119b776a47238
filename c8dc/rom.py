"""CHIP-8 ROM image loading and word access."""

import os
from typing import Union

import jax
import jax.numpy as jnp
import numpy as np
from flax.struct import PyTreeNode, field

from c8dc.constants import LOAD_ADDRESS, WORD_SIZE, EXTENDED_THRESHOLD, memory_size_for
from c8dc.errors import AddressOutOfRangeError, AllocationError, RomNotFoundError, RomUnreadableError
from c8dc.logging import get_logger

PathLike = Union[str, os.PathLike]


class RomImage(PyTreeNode):
    """Address space holding a program image at ``LOAD_ADDRESS``."""
    memory: jnp.ndarray
    size: int = field(pytree_node=False, default=0)

    @property
    def end(self) -> int:
        """First address past the loaded program."""
        return LOAD_ADDRESS + self.size

    @property
    def word_count(self) -> int:
        """Number of complete instruction words in the program."""
        return self.size // WORD_SIZE

    @property
    def is_extended(self) -> bool:
        return self.size >= EXTENDED_THRESHOLD


def _pack_u16(high: jnp.ndarray, low: jnp.ndarray) -> jnp.ndarray:
    """Pack bytes into big-endian uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def rom_from_bytes(rom_data: bytes, path: PathLike = "<bytes>") -> RomImage:
    """Build a ROM image with ``rom_data`` copied to 0x200."""
    size = len(rom_data)
    memory_size = memory_size_for(size)
    try:
        memory = jnp.zeros(memory_size, dtype=jnp.uint8)
        if size:
            rom_array = jnp.asarray(np.frombuffer(bytes(rom_data), dtype=np.uint8))
            memory = memory.at[LOAD_ADDRESS:LOAD_ADDRESS + size].set(rom_array)
    except (MemoryError, jax.errors.JaxRuntimeError) as exc:
        raise AllocationError(os.fspath(path), memory_size) from exc
    return RomImage(memory=memory, size=size)


def load_rom(path: PathLike) -> RomImage:
    """Load a ROM file into a fresh address space starting at 0x200."""
    logger = get_logger()
    try:
        with open(path, "rb") as f:
            file_size = os.fstat(f.fileno()).st_size
            try:
                rom_data = f.read()
            except MemoryError as exc:
                raise AllocationError(os.fspath(path), file_size) from exc
    except FileNotFoundError as exc:
        raise RomNotFoundError(os.fspath(path)) from exc
    except OSError as exc:
        raise RomUnreadableError(
            os.fspath(path), f"could not read rom image ({exc.strerror or exc})"
        ) from exc

    rom = rom_from_bytes(rom_data, path)
    logger.debug(
        f"Loaded {rom.size} bytes from {os.fspath(path)} "
        f"({'extended' if rom.is_extended else 'standard'} layout, "
        f"{rom.memory.shape[0]} byte address space)"
    )
    return rom


def word_at(rom: RomImage, address: int) -> int:
    """Read the big-endian word at ``address``.

    Raises:
        AddressOutOfRangeError: if either byte of the word lies outside memory.
    """
    limit = rom.memory.shape[0]
    if address < 0 or address + WORD_SIZE > limit:
        raise AddressOutOfRangeError(address, limit)
    return int(_pack_u16(rom.memory[address], rom.memory[address + 1]))


def fetch_words(rom: RomImage) -> jnp.ndarray:
    """All complete words of the loaded program as a uint16 array."""
    region = rom.memory[LOAD_ADDRESS:LOAD_ADDRESS + rom.word_count * WORD_SIZE]
    pairs = region.reshape(-1, WORD_SIZE)
    return _pack_u16(pairs[:, 0], pairs[:, 1])
