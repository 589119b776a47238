"""CHIP-8 address space constants."""

# Memory layout
LOAD_ADDRESS = 0x200  # Programs start here, interpreter area precedes it
MEMORY_SIZE = 0x1000  # Standard 4K address space
EXTENDED_THRESHOLD = 0xE00  # Images this large get a buffer sized to fit

# Instruction words
WORD_SIZE = 2
WORD_MASK = 0xFFFF
ADDRESS_MASK = 0x0FFF

CLS_OPCODE = 0x00E0
RET_OPCODE = 0x00EE

USAGE = "usage: c8dc filename"


def memory_size_for(rom_size: int) -> int:
    """Size of the buffer needed to hold an image of ``rom_size`` bytes."""
    if rom_size < EXTENDED_THRESHOLD:
        return MEMORY_SIZE
    return LOAD_ADDRESS + rom_size
