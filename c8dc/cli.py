"""Command line entry point: ``c8dc filename``."""

import sys
from typing import List, Optional

from c8dc.constants import USAGE
from c8dc.disassembler import disassemble_rom
from c8dc.errors import RomError
from c8dc.logging import get_logger

EXIT_SUCCESS = 0
EXIT_LOAD_FAILURE = 1


def usage():
    print(USAGE)


def main(argv: Optional[List[str]] = None) -> int:
    """Disassemble the ROM named on the command line to stdout."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        usage()
        return EXIT_SUCCESS

    try:
        disassemble_rom(args[0], sys.stdout)
    except RomError as exc:
        get_logger().error(str(exc))
        return EXIT_LOAD_FAILURE
    return EXIT_SUCCESS
