"""CHIP-8 operand field extraction."""

from chex import dataclass


@dataclass(frozen=True)
class OpcodeFields:
    """Bit fields of a 16-bit instruction word.

    Works for a single Python int or for a whole ``jax.numpy`` array of words,
    since every field is a shift and a mask.
    """
    raw: int
    family: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    kk: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def extract_fields(word) -> OpcodeFields:
    """Split a 16-bit word into its operand fields."""
    return OpcodeFields(
        raw=word,
        family=(word >> 12) & 0xF,
        x=(word >> 8) & 0xF,
        y=(word >> 4) & 0xF,
        n=word & 0xF,
        kk=word & 0xFF,
        nnn=word & 0xFFF,
    )
