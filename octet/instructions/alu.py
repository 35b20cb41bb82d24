"""CHIP-8 ALU operations (8xxx).

Each operation takes the current values of VX and VY and returns the new VX
together with the new VF, or ``None`` when the operation leaves VF alone.
"""

from typing import Optional

from octet.state import EmulatorState
from octet.constants import FLAG_REGISTER
from octet.decode import (
    AddRegister, And, LoadRegister, Or, ShiftLeft, ShiftRight, Subtract, SubtractReverse, Xor,
)


def alu_set(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY4 - Add: VX += VY, VF = 1 on overflow."""
    result = vx + vy
    return result & 0xFF, int(result > 0xFF)


def alu_sub_xy(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY5 - Subtract: VX -= VY, VF = 1 when the subtraction borrows."""
    return (vx - vy) & 0xFF, int(vx < vy)


def alu_shift_right(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY6 - Shift right: VX >>= 1, VF = shifted out bit."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY7 - Subtract: VX = VY - VX, VF = 1 when the subtraction borrows."""
    return (vy - vx) & 0xFF, int(vy < vx)


def alu_shift_left(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XYE - Shift left: VX <<= 1, VF = shifted out bit."""
    return (vx << 1) & 0xFF, (vx >> 7) & 1


ALU_OPERATIONS = {
    LoadRegister: alu_set,
    Or: alu_or,
    And: alu_and,
    Xor: alu_xor,
    AddRegister: alu_add,
    Subtract: alu_sub_xy,
    ShiftRight: alu_shift_right,
    SubtractReverse: alu_sub_yx,
    ShiftLeft: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    vx = int(state.V[instruction.x])
    # SHR and SHL carry no Y operand
    vy = int(state.V[getattr(instruction, "y", instruction.x)])

    result, vf = ALU_OPERATIONS[type(instruction)](vx, vy)

    new_V = state.V.at[instruction.x].set(result)
    if vf is not None:
        new_V = new_V.at[FLAG_REGISTER].set(vf)
    return state.replace(V=new_V)
