"""CHIP-8 disassembly driver."""

import os
import sys
from typing import Iterator, TextIO, Union

from c8dc.constants import LOAD_ADDRESS, WORD_SIZE
from c8dc.decode import decode
from c8dc.formatter import format_decoded
from c8dc.instruction import DecodedLine
from c8dc.logging import get_logger
from c8dc.rom import RomImage, fetch_words, load_rom


def iter_decoded(rom: RomImage) -> Iterator[DecodedLine]:
    """Decode every complete word of the program, in address order."""
    if rom.size % WORD_SIZE:
        get_logger().debug(
            f"Ignoring trailing byte at 0x{rom.end - 1:04X}, not a complete word"
        )

    words = fetch_words(rom).tolist()
    for index, word in enumerate(words):
        yield DecodedLine(
            address=LOAD_ADDRESS + index * WORD_SIZE,
            word=word,
            instruction=decode(word),
        )


def disassemble(rom: RomImage) -> Iterator[str]:
    """Listing lines for the whole program."""
    for line in iter_decoded(rom):
        yield format_decoded(line)


def disassemble_rom(path: Union[str, os.PathLike], out: TextIO = None) -> int:
    """Load ``path`` and write its listing to ``out``. Returns the number of lines.

    The image is fully loaded before anything is written, so a load error
    produces no partial output.
    """
    out = out if out is not None else sys.stdout
    rom = load_rom(path)

    count = 0
    for text in disassemble(rom):
        out.write(text + "\n")
        count += 1

    get_logger().debug(f"Wrote {count} lines for {os.fspath(path)}")
    return count
