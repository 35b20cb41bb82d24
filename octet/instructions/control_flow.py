"""CHIP-8 control flow instructions."""

import jax.numpy as jnp
from octet.state import EmulatorState
from octet.decode import (
    Call, Jump, JumpWithOffset, SkipIfEqualImmediate, SkipIfEqualRegister, SkipIfKey,
    SkipIfNotEqualImmediate, SkipIfNotEqualRegister, SkipIfNotKey,
)
from octet.stack import push


def execute_jump(state: EmulatorState, instruction: Jump) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.astype(instruction.address, jnp.uint16))


def execute_call(state: EmulatorState, instruction: Call) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, int(state.pc)))
    return state.replace(pc=jnp.astype(instruction.address, jnp.uint16))


def execute_jump_with_offset(state: EmulatorState, instruction: JumpWithOffset) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    return state.replace(pc=jnp.astype(instruction.address + int(state.V[0]), jnp.uint16))


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction) -> EmulatorState:
        if condition_fn(state, instruction):
            return state.replace(pc=state.pc + 2)
        return state
    return skip_instruction


def _key_pressed(state: EmulatorState, x: int) -> bool:
    return bool(state.keypad[int(state.V[x]) & 0xF])


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == inst.byte
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != inst.byte
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == int(state.V[inst.y])
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != int(state.V[inst.y])
)

execute_skip_if_key = make_skip_instruction(
    lambda state, inst: _key_pressed(state, inst.x)
)

execute_skip_if_not_key = make_skip_instruction(
    lambda state, inst: not _key_pressed(state, inst.x)
)
