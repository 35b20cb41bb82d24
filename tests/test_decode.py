"""Tests for instruction decoding."""

import pytest
from octet import decode, decode_word, format_instruction
from octet.decode import (
    AddImmediate, AddRegister, AddToIndex, And, Call, ClearScreen, Draw, Jump,
    JumpWithOffset, LoadDelayTimer, LoadFontAddress, LoadImmediate, LoadIndex,
    LoadRegister, LoadRegisters, Or, Random, Return, SetDelayTimer, SetSoundTimer,
    ShiftLeft, ShiftRight, SkipIfEqualImmediate, SkipIfEqualRegister, SkipIfKey,
    SkipIfNotEqualImmediate, SkipIfNotEqualRegister, SkipIfNotKey, StoreBCD,
    StoreRegisters, Subtract, SubtractReverse, UnknownInstruction, WaitForKey, Xor,
)


class TestDecodeTable:
    """Every encoding family with boundary operands."""

    @pytest.mark.parametrize("word,expected", [
        (0x00E0, ClearScreen()),
        (0x00EE, Return()),
        (0x1000, Jump(address=0x000)),
        (0x1FFF, Jump(address=0xFFF)),
        (0x2000, Call(address=0x000)),
        (0x2FFF, Call(address=0xFFF)),
        (0x3000, SkipIfEqualImmediate(x=0x0, byte=0x00)),
        (0x3FFF, SkipIfEqualImmediate(x=0xF, byte=0xFF)),
        (0x4000, SkipIfNotEqualImmediate(x=0x0, byte=0x00)),
        (0x4FFF, SkipIfNotEqualImmediate(x=0xF, byte=0xFF)),
        (0x5000, SkipIfEqualRegister(x=0x0, y=0x0)),
        (0x5FF0, SkipIfEqualRegister(x=0xF, y=0xF)),
        (0x6000, LoadImmediate(x=0x0, byte=0x00)),
        (0x6FFF, LoadImmediate(x=0xF, byte=0xFF)),
        (0x7000, AddImmediate(x=0x0, byte=0x00)),
        (0x7FFF, AddImmediate(x=0xF, byte=0xFF)),
        (0x80F0, LoadRegister(x=0x0, y=0xF)),
        (0x8F01, Or(x=0xF, y=0x0)),
        (0x8FF2, And(x=0xF, y=0xF)),
        (0x8003, Xor(x=0x0, y=0x0)),
        (0x8F04, AddRegister(x=0xF, y=0x0)),
        (0x80F5, Subtract(x=0x0, y=0xF)),
        (0x8F06, ShiftRight(x=0xF)),
        (0x8007, SubtractReverse(x=0x0, y=0x0)),
        (0x8F0E, ShiftLeft(x=0xF)),
        (0x9000, SkipIfNotEqualRegister(x=0x0, y=0x0)),
        (0x9FF0, SkipIfNotEqualRegister(x=0xF, y=0xF)),
        (0xA000, LoadIndex(address=0x000)),
        (0xAFFF, LoadIndex(address=0xFFF)),
        (0xB000, JumpWithOffset(address=0x000)),
        (0xBFFF, JumpWithOffset(address=0xFFF)),
        (0xC000, Random(x=0x0, byte=0x00)),
        (0xCFFF, Random(x=0xF, byte=0xFF)),
        (0xD000, Draw(x=0x0, y=0x0, height=0x0)),
        (0xDFFF, Draw(x=0xF, y=0xF, height=0xF)),
        (0xE09E, SkipIfKey(x=0x0)),
        (0xEFA1, SkipIfNotKey(x=0xF)),
        (0xF007, LoadDelayTimer(x=0x0)),
        (0xFF0A, WaitForKey(x=0xF)),
        (0xF015, SetDelayTimer(x=0x0)),
        (0xFF18, SetSoundTimer(x=0xF)),
        (0xF01E, AddToIndex(x=0x0)),
        (0xFF29, LoadFontAddress(x=0xF)),
        (0xF033, StoreBCD(x=0x0)),
        (0xFF55, StoreRegisters(x=0xF)),
        (0xF065, LoadRegisters(x=0x0)),
    ])
    def test_decode_word(self, word, expected):
        """Each encoding decodes to the expected variant and operands."""
        assert decode_word(word) == expected

    def test_decode_from_bytes(self):
        """The high byte comes first."""
        assert decode(0x8A, 0xB4) == AddRegister(x=0xA, y=0xB)
        assert decode(0xD1, 0x25) == Draw(x=1, y=2, height=5)

    def test_variants_are_distinct(self):
        """Same operands in different variants do not compare equal."""
        assert Jump(address=0x200) != Call(address=0x200)


class TestUnknownEncodings:
    """Encodings without a matching instruction."""

    @pytest.mark.parametrize("word", [
        0x0001, 0x00E5, 0x8008, 0x8009, 0x800A, 0x800B, 0x800C, 0x800D, 0x800F,
        0xE000, 0xE19F, 0xF000, 0xF0FF, 0xF156,
    ])
    def test_unknown_encodings(self, word):
        """Decoding never raises; it produces an UnknownInstruction carrying the word."""
        assert decode_word(word) == UnknownInstruction(raw=word)


class TestFormatting:
    """Assembler mnemonics for decoded instructions."""

    @pytest.mark.parametrize("word,text", [
        (0x00E0, "CLS"),
        (0x00EE, "RET"),
        (0x1234, "JP 0x234"),
        (0x6A02, "LD VA, 0x02"),
        (0x8124, "ADD V1, V2"),
        (0x812E, "SHL V1"),
        (0xB300, "JP V0, 0x300"),
        (0xD01F, "DRW V0, V1, 15"),
        (0xF30A, "LD V3, K"),
        (0xF355, "LD [I], V3"),
        (0xF365, "LD V3, [I]"),
        (0xFFFF, "DW 0xFFFF"),
    ])
    def test_format_instruction(self, word, text):
        """Mnemonics follow the usual CHIP-8 assembler syntax."""
        assert format_instruction(decode_word(word)) == text
