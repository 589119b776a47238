"""CHIP-8 instruction model."""

from enum import Enum, unique
from typing import Optional, Tuple

from chex import dataclass

# Operand template entries naming an instruction field. Anything else in a
# template is a literal operand (I, DT, K, ...).
OPERAND_FIELDS = ("x", "y", "n", "kk", "nnn")


@unique
class InstructionKind(Enum):
    """Every instruction the decoder can produce, with its mnemonic and operand template."""

    # 0nnn
    CLS = ("CLS", ())
    RET = ("RET", ())
    SYS = ("SYS", ("nnn",))

    # 1nnn - 7xkk
    JP = ("JP", ("nnn",))
    CALL = ("CALL", ("nnn",))
    SE_BYTE = ("SE", ("x", "kk"))
    SNE_BYTE = ("SNE", ("x", "kk"))
    SE_REG = ("SE", ("x", "y"))
    LD_BYTE = ("LD", ("x", "kk"))
    ADD_BYTE = ("ADD", ("x", "kk"))

    # 8xyn
    LD_REG = ("LD", ("x", "y"))
    OR = ("OR", ("x", "y"))
    AND = ("AND", ("x", "y"))
    XOR = ("XOR", ("x", "y"))
    ADD_REG = ("ADD", ("x", "y"))
    SUB = ("SUB", ("x", "y"))
    SHR = ("SHR", ("x",))
    SUBN = ("SUBN", ("x", "y"))
    SHL = ("SHL", ("x",))

    # 9xy0 - Dxyn
    SNE_REG = ("SNE", ("x", "y"))
    LD_I = ("LD", ("I", "nnn"))
    JP_V0 = ("JP", ("v0", "nnn"))
    RND = ("RND", ("x", "kk"))
    DRW = ("DRW", ("x", "y", "n"))

    # Ex9E, ExA1
    SKP = ("SKP", ("x",))
    SKNP = ("SKNP", ("x",))

    # Fxkk
    LD_VX_DT = ("LD", ("x", "DT"))
    LD_VX_K = ("LD", ("x", "K"))
    LD_DT_VX = ("LD", ("DT", "x"))
    LD_ST_VX = ("LD", ("ST", "x"))
    ADD_I_VX = ("ADD", ("I", "x"))
    LD_F_VX = ("LD", ("F", "x"))
    LD_B_VX = ("LD", ("B", "x"))
    LD_MEM_VX = ("LD", ("[I]", "x"))
    LD_VX_MEM = ("LD", ("x", "[I]"))

    UNKNOWN = ("", ())

    def __init__(self, mnemonic: str, template: Tuple[str, ...]):
        self.mnemonic = mnemonic
        self.template = template

    @property
    def operands(self) -> Tuple[str, ...]:
        """Names of the instruction fields this kind uses, in template order."""
        return tuple(entry for entry in self.template if entry in OPERAND_FIELDS)


@dataclass(frozen=True)
class Instruction:
    """Decoded CHIP-8 instruction.

    Only the fields named by ``kind.operands`` are set, the others stay None.
    """
    kind: InstructionKind
    raw: int
    x: Optional[int] = None
    y: Optional[int] = None
    n: Optional[int] = None
    kk: Optional[int] = None
    nnn: Optional[int] = None

    @property
    def mnemonic(self) -> str:
        return self.kind.mnemonic

    @property
    def operands(self) -> Tuple[str, ...]:
        return self.kind.operands

    @property
    def is_unknown(self) -> bool:
        return self.kind is InstructionKind.UNKNOWN


@dataclass(frozen=True)
class DecodedLine:
    """One listing entry: where a word lives, the word, and what it decodes to."""
    address: int
    word: int
    instruction: Instruction
