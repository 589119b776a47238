"""CHIP-8 instruction decoding."""

from typing import Callable, Dict

from c8dc.constants import CLS_OPCODE, RET_OPCODE, WORD_MASK
from c8dc.fields import OpcodeFields, extract_fields
from c8dc.instruction import Instruction, InstructionKind

Kind = InstructionKind
Selector = Callable[[OpcodeFields], InstructionKind]

# 8xyn, keyed on n
ALU_OPERATIONS: Dict[int, InstructionKind] = {
    0x0: Kind.LD_REG,
    0x1: Kind.OR,
    0x2: Kind.AND,
    0x3: Kind.XOR,
    0x4: Kind.ADD_REG,
    0x5: Kind.SUB,
    0x6: Kind.SHR,
    0x7: Kind.SUBN,
    0xE: Kind.SHL,
}

# Exkk, keyed on kk
KEY_OPERATIONS: Dict[int, InstructionKind] = {
    0x9E: Kind.SKP,
    0xA1: Kind.SKNP,
}

# Fxkk, keyed on kk
MISC_OPERATIONS: Dict[int, InstructionKind] = {
    0x07: Kind.LD_VX_DT,
    0x0A: Kind.LD_VX_K,
    0x15: Kind.LD_DT_VX,
    0x18: Kind.LD_ST_VX,
    0x1E: Kind.ADD_I_VX,
    0x29: Kind.LD_F_VX,
    0x33: Kind.LD_B_VX,
    0x55: Kind.LD_MEM_VX,
    0x65: Kind.LD_VX_MEM,
}


def _select_system(fields: OpcodeFields) -> InstructionKind:
    """0nnn - CLS and RET are exact words, anything else is a machine call."""
    if fields.raw == CLS_OPCODE:
        return Kind.CLS
    if fields.raw == RET_OPCODE:
        return Kind.RET
    return Kind.SYS


def _always(kind: InstructionKind) -> Selector:
    """Family with a single instruction."""
    return lambda fields: kind


def _sub_opcode(table: Dict[int, InstructionKind], selector: str) -> Selector:
    """Family whose instruction is picked by the ``selector`` field."""
    return lambda fields: table.get(getattr(fields, selector), Kind.UNKNOWN)


FAMILIES = [
    _select_system,                       # 0nnn
    _always(Kind.JP),                     # 1nnn
    _always(Kind.CALL),                   # 2nnn
    _always(Kind.SE_BYTE),                # 3xkk
    _always(Kind.SNE_BYTE),               # 4xkk
    _sub_opcode({0x0: Kind.SE_REG}, "n"),   # 5xy0
    _always(Kind.LD_BYTE),                # 6xkk
    _always(Kind.ADD_BYTE),               # 7xkk
    _sub_opcode(ALU_OPERATIONS, "n"),     # 8xyn
    _sub_opcode({0x0: Kind.SNE_REG}, "n"),  # 9xy0
    _always(Kind.LD_I),                   # Annn
    _always(Kind.JP_V0),                  # Bnnn
    _always(Kind.RND),                    # Cxkk
    _always(Kind.DRW),                    # Dxyn
    _sub_opcode(KEY_OPERATIONS, "kk"),    # Exkk
    _sub_opcode(MISC_OPERATIONS, "kk"),   # Fxkk
]


def decode(word: int) -> Instruction:
    """Decode a 16-bit instruction word.

    Never raises: words matching no known encoding come back as
    ``InstructionKind.UNKNOWN`` carrying the raw word.
    """
    word = int(word) & WORD_MASK
    fields = extract_fields(word)
    kind = FAMILIES[fields.family](fields)
    operands = {name: getattr(fields, name) for name in kind.operands}
    return Instruction(kind=kind, raw=word, **operands)
