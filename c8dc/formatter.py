"""Mnemonic rendering of decoded CHIP-8 instructions."""

from typing import List

from c8dc.instruction import DecodedLine, Instruction


def format_register(index: int) -> str:
    return f"v{index:X}"


def format_byte(value: int) -> str:
    return f"0x{value:02X} ({value})"


def format_address(value: int) -> str:
    return f"0x{value:03X} ({value})"


def format_nibble(value: int) -> str:
    return f"0x{value:X} ({value})"


FIELD_FORMATTERS = {
    "x": format_register,
    "y": format_register,
    "n": format_nibble,
    "kk": format_byte,
    "nnn": format_address,
}


def format_operands(instruction: Instruction) -> List[str]:
    """Render each operand of the instruction's template.

    Field names are looked up on the instruction and formatted by type,
    everything else in the template is a literal operand.
    """
    rendered = []
    for entry in instruction.kind.template:
        formatter = FIELD_FORMATTERS.get(entry)
        if formatter is None:
            rendered.append(entry)
        else:
            rendered.append(formatter(getattr(instruction, entry)))
    return rendered


def format_instruction(instruction: Instruction) -> str:
    """Mnemonic and operands, e.g. ``LD vA, 0x3F (63)``. Empty for unknown words."""
    if instruction.is_unknown:
        return ""
    operands = format_operands(instruction)
    if not operands:
        return instruction.mnemonic
    return f"{instruction.mnemonic} {', '.join(operands)}"


def format_line(address: int, word: int, instruction: Instruction) -> str:
    """Full listing line: address column, raw word column, then the mnemonic.

    Unknown words print as the bare raw word, without address or mnemonic.
    """
    if instruction.is_unknown:
        return f"{word:04X}"
    return f"0x{address:04X}:\t{word:04X}\t{format_instruction(instruction)}"


def format_decoded(line: DecodedLine) -> str:
    return format_line(line.address, line.word, line.instruction)
