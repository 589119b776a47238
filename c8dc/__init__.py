"""CHIP-8 ROM disassembler package."""

from c8dc.constants import *
from c8dc.fields import OpcodeFields, extract_fields
from c8dc.instruction import DecodedLine, Instruction, InstructionKind
from c8dc.decode import decode
from c8dc.formatter import format_decoded, format_instruction, format_line
from c8dc.rom import RomImage, fetch_words, load_rom, rom_from_bytes, word_at
from c8dc.disassembler import disassemble, disassemble_rom, iter_decoded
from c8dc.errors import (
    AddressOutOfRangeError,
    AllocationError,
    C8dcError,
    RomError,
    RomNotFoundError,
    RomUnreadableError,
)

__all__ = [
    "LOAD_ADDRESS",
    "MEMORY_SIZE",
    "EXTENDED_THRESHOLD",
    "OpcodeFields",
    "extract_fields",
    "Instruction",
    "InstructionKind",
    "DecodedLine",
    "decode",
    "format_line",
    "format_decoded",
    "format_instruction",
    "RomImage",
    "load_rom",
    "rom_from_bytes",
    "word_at",
    "fetch_words",
    "iter_decoded",
    "disassemble",
    "disassemble_rom",
    "C8dcError",
    "RomError",
    "RomNotFoundError",
    "RomUnreadableError",
    "AllocationError",
    "AddressOutOfRangeError",
]
