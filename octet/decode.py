"""CHIP-8 instruction decoding.

Every two-byte encoding maps to exactly one of 35 instruction variants. The
variants are frozen dataclasses sharing the :class:`Instruction` base, so the
executor can dispatch on the concrete type. Encodings that match no variant
decode to :class:`UnknownInstruction`; decoding itself never fails.
"""

from chex import dataclass


class Instruction:
    """Base class of all decoded instructions."""


def _variant(cls):
    return dataclass(frozen=True, mappable_dataclass=False)(cls)


@_variant
class ClearScreen(Instruction):
    """00E0 - CLS"""


@_variant
class Return(Instruction):
    """00EE - RET"""


@_variant
class Jump(Instruction):
    """1NNN - JP addr"""
    address: int


@_variant
class Call(Instruction):
    """2NNN - CALL addr"""
    address: int


@_variant
class SkipIfEqualImmediate(Instruction):
    """3XKK - SE Vx, byte"""
    x: int
    byte: int


@_variant
class SkipIfNotEqualImmediate(Instruction):
    """4XKK - SNE Vx, byte"""
    x: int
    byte: int


@_variant
class SkipIfEqualRegister(Instruction):
    """5XY0 - SE Vx, Vy"""
    x: int
    y: int


@_variant
class LoadImmediate(Instruction):
    """6XKK - LD Vx, byte"""
    x: int
    byte: int


@_variant
class AddImmediate(Instruction):
    """7XKK - ADD Vx, byte"""
    x: int
    byte: int


@_variant
class LoadRegister(Instruction):
    """8XY0 - LD Vx, Vy"""
    x: int
    y: int


@_variant
class Or(Instruction):
    """8XY1 - OR Vx, Vy"""
    x: int
    y: int


@_variant
class And(Instruction):
    """8XY2 - AND Vx, Vy"""
    x: int
    y: int


@_variant
class Xor(Instruction):
    """8XY3 - XOR Vx, Vy"""
    x: int
    y: int


@_variant
class AddRegister(Instruction):
    """8XY4 - ADD Vx, Vy"""
    x: int
    y: int


@_variant
class Subtract(Instruction):
    """8XY5 - SUB Vx, Vy"""
    x: int
    y: int


@_variant
class ShiftRight(Instruction):
    """8XY6 - SHR Vx"""
    x: int


@_variant
class SubtractReverse(Instruction):
    """8XY7 - SUBN Vx, Vy"""
    x: int
    y: int


@_variant
class ShiftLeft(Instruction):
    """8XYE - SHL Vx"""
    x: int


@_variant
class SkipIfNotEqualRegister(Instruction):
    """9XY0 - SNE Vx, Vy"""
    x: int
    y: int


@_variant
class LoadIndex(Instruction):
    """ANNN - LD I, addr"""
    address: int


@_variant
class JumpWithOffset(Instruction):
    """BNNN - JP V0, addr"""
    address: int


@_variant
class Random(Instruction):
    """CXKK - RND Vx, byte"""
    x: int
    byte: int


@_variant
class Draw(Instruction):
    """DXYN - DRW Vx, Vy, nibble"""
    x: int
    y: int
    height: int


@_variant
class SkipIfKey(Instruction):
    """EX9E - SKP Vx"""
    x: int


@_variant
class SkipIfNotKey(Instruction):
    """EXA1 - SKNP Vx"""
    x: int


@_variant
class LoadDelayTimer(Instruction):
    """FX07 - LD Vx, DT"""
    x: int


@_variant
class WaitForKey(Instruction):
    """FX0A - LD Vx, K"""
    x: int


@_variant
class SetDelayTimer(Instruction):
    """FX15 - LD DT, Vx"""
    x: int


@_variant
class SetSoundTimer(Instruction):
    """FX18 - LD ST, Vx"""
    x: int


@_variant
class AddToIndex(Instruction):
    """FX1E - ADD I, Vx"""
    x: int


@_variant
class LoadFontAddress(Instruction):
    """FX29 - LD F, Vx"""
    x: int


@_variant
class StoreBCD(Instruction):
    """FX33 - LD B, Vx"""
    x: int


@_variant
class StoreRegisters(Instruction):
    """FX55 - LD [I], Vx"""
    x: int


@_variant
class LoadRegisters(Instruction):
    """FX65 - LD Vx, [I]"""
    x: int


@_variant
class UnknownInstruction(Instruction):
    """Encoding with no matching instruction."""
    raw: int


_ALU_OPERATIONS = {
    0x0: LoadRegister,
    0x1: Or,
    0x2: And,
    0x3: Xor,
    0x4: AddRegister,
    0x5: Subtract,
    0x7: SubtractReverse,
}

_KEY_OPERATIONS = {
    0x9E: SkipIfKey,
    0xA1: SkipIfNotKey,
}

_MISC_OPERATIONS = {
    0x07: LoadDelayTimer,
    0x0A: WaitForKey,
    0x15: SetDelayTimer,
    0x18: SetSoundTimer,
    0x1E: AddToIndex,
    0x29: LoadFontAddress,
    0x33: StoreBCD,
    0x55: StoreRegisters,
    0x65: LoadRegisters,
}


def decode(high: int, low: int) -> Instruction:
    """Decode the two bytes of a big-endian instruction."""
    return decode_word((high & 0xFF) << 8 | (low & 0xFF))


def decode_word(word: int) -> Instruction:
    """Decode a 16-bit instruction word into its variant."""
    word = int(word) & 0xFFFF
    opcode = (word & 0xF000) >> 12
    x = (word & 0x0F00) >> 8
    y = (word & 0x00F0) >> 4
    n = word & 0x000F
    byte = word & 0x00FF
    address = word & 0x0FFF

    if opcode == 0x0:
        if n == 0x0:
            return ClearScreen()
        if n == 0xE:
            return Return()
    elif opcode == 0x1:
        return Jump(address=address)
    elif opcode == 0x2:
        return Call(address=address)
    elif opcode == 0x3:
        return SkipIfEqualImmediate(x=x, byte=byte)
    elif opcode == 0x4:
        return SkipIfNotEqualImmediate(x=x, byte=byte)
    elif opcode == 0x5:
        return SkipIfEqualRegister(x=x, y=y)
    elif opcode == 0x6:
        return LoadImmediate(x=x, byte=byte)
    elif opcode == 0x7:
        return AddImmediate(x=x, byte=byte)
    elif opcode == 0x8:
        if n == 0x6:
            return ShiftRight(x=x)
        if n == 0xE:
            return ShiftLeft(x=x)
        if n in _ALU_OPERATIONS:
            return _ALU_OPERATIONS[n](x=x, y=y)
    elif opcode == 0x9:
        return SkipIfNotEqualRegister(x=x, y=y)
    elif opcode == 0xA:
        return LoadIndex(address=address)
    elif opcode == 0xB:
        return JumpWithOffset(address=address)
    elif opcode == 0xC:
        return Random(x=x, byte=byte)
    elif opcode == 0xD:
        return Draw(x=x, y=y, height=n)
    elif opcode == 0xE:
        if byte in _KEY_OPERATIONS:
            return _KEY_OPERATIONS[byte](x=x)
    elif opcode == 0xF and byte in _MISC_OPERATIONS:
        return _MISC_OPERATIONS[byte](x=x)

    return UnknownInstruction(raw=word)


_FORMATS = {
    ClearScreen: "CLS",
    Return: "RET",
    Jump: "JP 0x{address:03X}",
    Call: "CALL 0x{address:03X}",
    SkipIfEqualImmediate: "SE V{x:X}, 0x{byte:02X}",
    SkipIfNotEqualImmediate: "SNE V{x:X}, 0x{byte:02X}",
    SkipIfEqualRegister: "SE V{x:X}, V{y:X}",
    LoadImmediate: "LD V{x:X}, 0x{byte:02X}",
    AddImmediate: "ADD V{x:X}, 0x{byte:02X}",
    LoadRegister: "LD V{x:X}, V{y:X}",
    Or: "OR V{x:X}, V{y:X}",
    And: "AND V{x:X}, V{y:X}",
    Xor: "XOR V{x:X}, V{y:X}",
    AddRegister: "ADD V{x:X}, V{y:X}",
    Subtract: "SUB V{x:X}, V{y:X}",
    ShiftRight: "SHR V{x:X}",
    SubtractReverse: "SUBN V{x:X}, V{y:X}",
    ShiftLeft: "SHL V{x:X}",
    SkipIfNotEqualRegister: "SNE V{x:X}, V{y:X}",
    LoadIndex: "LD I, 0x{address:03X}",
    JumpWithOffset: "JP V0, 0x{address:03X}",
    Random: "RND V{x:X}, 0x{byte:02X}",
    Draw: "DRW V{x:X}, V{y:X}, {height}",
    SkipIfKey: "SKP V{x:X}",
    SkipIfNotKey: "SKNP V{x:X}",
    LoadDelayTimer: "LD V{x:X}, DT",
    WaitForKey: "LD V{x:X}, K",
    SetDelayTimer: "LD DT, V{x:X}",
    SetSoundTimer: "LD ST, V{x:X}",
    AddToIndex: "ADD I, V{x:X}",
    LoadFontAddress: "LD F, V{x:X}",
    StoreBCD: "LD B, V{x:X}",
    StoreRegisters: "LD [I], V{x:X}",
    LoadRegisters: "LD V{x:X}, [I]",
    UnknownInstruction: "DW 0x{raw:04X}",
}


def format_instruction(instruction: Instruction) -> str:
    """Render an instruction as an assembler mnemonic."""
    operands = {name: getattr(instruction, name) for name in instruction.__dataclass_fields__}
    return _FORMATS[type(instruction)].format(**operands)
