"""Tests for mnemonic rendering."""

import pytest
from c8dc import DecodedLine, InstructionKind, decode, format_decoded, format_instruction, format_line


RENDERINGS = [
    (0x00E0, "CLS"),
    (0x00EE, "RET"),
    (0x0123, "SYS 0x123 (291)"),
    (0x1ABC, "JP 0xABC (2748)"),
    (0x2DEF, "CALL 0xDEF (3567)"),
    (0x3A12, "SE vA, 0x12 (18)"),
    (0x4B34, "SNE vB, 0x34 (52)"),
    (0x5120, "SE v1, v2"),
    (0x6A3F, "LD vA, 0x3F (63)"),
    (0x7C01, "ADD vC, 0x01 (1)"),
    (0x8AB0, "LD vA, vB"),
    (0x8AB1, "OR vA, vB"),
    (0x8AB2, "AND vA, vB"),
    (0x8AB3, "XOR vA, vB"),
    (0x8AB4, "ADD vA, vB"),
    (0x8AB5, "SUB vA, vB"),
    (0x8AB6, "SHR vA"),
    (0x8AB7, "SUBN vA, vB"),
    (0x8ABE, "SHL vA"),
    (0x9120, "SNE v1, v2"),
    (0xA2F0, "LD I, 0x2F0 (752)"),
    (0xB300, "JP v0, 0x300 (768)"),
    (0xC7FF, "RND v7, 0xFF (255)"),
    (0xD123, "DRW v1, v2, 0x3 (3)"),
    (0xE59E, "SKP v5"),
    (0xE6A1, "SKNP v6"),
    (0xF307, "LD v3, DT"),
    (0xF40A, "LD v4, K"),
    (0xF515, "LD DT, v5"),
    (0xF618, "LD ST, v6"),
    (0xF71E, "ADD I, v7"),
    (0xF829, "LD F, v8"),
    (0xFA33, "LD B, vA"),
    (0xFB55, "LD [I], vB"),
    (0xFC65, "LD vC, [I]"),
]


@pytest.mark.parametrize("word,expected", RENDERINGS)
def test_format_instruction(word, expected):
    assert format_instruction(decode(word)) == expected


class TestLineLayout:
    """Test the address and word columns."""

    def test_format_line_columns(self):
        line = format_line(0x200, 0x1200, decode(0x1200))

        assert line == "0x0200:\t1200\tJP 0x200 (512)"

    def test_format_line_uppercase_hex(self):
        line = format_line(0xABE, 0xFA33, decode(0xFA33))

        assert line == "0x0ABE:\tFA33\tLD B, vA"

    def test_format_line_pads_small_words(self):
        line = format_line(0x202, 0x00E0, decode(0x00E0))

        assert line == "0x0202:\t00E0\tCLS"

    def test_format_decoded_matches_format_line(self):
        entry = DecodedLine(address=0x204, word=0xD123, instruction=decode(0xD123))

        assert format_decoded(entry) == format_line(0x204, 0xD123, decode(0xD123))


class TestUnknownRendering:
    """Test that unknown words print without a mnemonic."""

    @pytest.mark.parametrize("word", [0x85F8, 0xE000, 0xF0FF])
    def test_unknown_has_no_mnemonic(self, word):
        assert format_instruction(decode(word)) == ""

    def test_unknown_line_is_raw_word(self):
        line = format_line(0x200, 0x85F8, decode(0x85F8))

        assert line == "85F8"

    @pytest.mark.parametrize("word,expected", [(0xE000, "E000"), (0x5121, "5121"), (0x0A01, None)])
    def test_unknown_line_ignores_address(self, word, expected):
        """Only unknown words drop the address column; 0nnn is still SYS."""
        line = format_line(0x2FE, word, decode(word))

        if expected is None:
            assert line == "0x02FE:\t0A01\tSYS 0xA01 (2561)"
        else:
            assert line == expected

    def test_eight_xy_zero_is_register_load(self):
        """8xy0 is LD, not an undefined ALU sub-opcode."""
        assert format_line(0x200, 0x85F0, decode(0x85F0)) == "0x0200:\t85F0\tLD v5, vF"


class TestFormatterProperties:
    """Test formatter properties across all instruction kinds."""

    def test_format_is_idempotent(self):
        for word in (0x00E0, 0x6A3F, 0xD123, 0xE000):
            instruction = decode(word)
            assert format_line(0x200, word, instruction) == format_line(0x200, word, instruction)

    def test_every_kind_renders_its_template(self):
        """The first word of every kind renders its mnemonic and one operand per template entry."""
        samples = {}
        for word in range(0x10000):
            samples.setdefault(decode(word).kind, word)

        for kind, word in samples.items():
            text = format_instruction(decode(word))
            if kind is InstructionKind.UNKNOWN:
                assert text == ""
                continue

            assert text.split(" ")[0] == kind.mnemonic
            rendered = text[len(kind.mnemonic):].strip()
            count = len(rendered.split(", ")) if rendered else 0
            assert count == len(kind.template), kind
