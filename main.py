"""
Disassemble a CHIP-8 ROM to stdout.
"""

import sys

from c8dc.cli import main

if __name__ == "__main__":
    sys.exit(main())
