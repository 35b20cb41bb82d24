"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from octet.state import EmulatorState, check_memory_range
from octet.decode import (
    AddToIndex, LoadDelayTimer, LoadFontAddress, LoadRegisters, SetDelayTimer, SetSoundTimer,
    StoreBCD, StoreRegisters, WaitForKey,
)
from octet.constants import FONT_GLYPH_SIZE, FONT_START
from octet.errors import MemoryRangeError

INDEX_LIMIT = 0xFFFF


def execute_get_delay_timer(state: EmulatorState, instruction: LoadDelayTimer) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_set_delay_timer(state: EmulatorState, instruction: SetDelayTimer) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.V[instruction.x])


def execute_set_sound_timer(state: EmulatorState, instruction: SetSoundTimer) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.V[instruction.x])


def execute_add_to_index(state: EmulatorState, instruction: AddToIndex) -> EmulatorState:
    """FX1E - Add VX to I register. VF is left untouched.

    I is not masked to 12 bits, so a sum past 0xFFF is reported by the next
    memory access. A sum that no longer fits the 16-bit register raises here.
    """
    index = int(state.I)
    offset = int(state.V[instruction.x])
    if index + offset > INDEX_LIMIT:
        raise MemoryRangeError(index, offset, INDEX_LIMIT)
    return state.replace(I=jnp.astype(index + offset, jnp.uint16))


def execute_wait_for_key(state: EmulatorState, instruction: WaitForKey) -> EmulatorState:
    """FX0A - Wait for key press.

    The wait is cooperative: with no key down, pc is rewound so the same
    instruction is fetched again on the next cycle. The host has to update
    the keypad between cycles for execution to move on.
    """
    if not bool(jnp.any(state.keypad)):
        return state.replace(pc=state.pc - 2)
    # argmax returns the lowest pressed key
    pressed_key = int(jnp.argmax(state.keypad))
    return state.replace(V=state.V.at[instruction.x].set(pressed_key))


def execute_font_character(state: EmulatorState, instruction: LoadFontAddress) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + int(state.V[instruction.x]) * FONT_GLYPH_SIZE
    return state.replace(I=jnp.astype(font_address, jnp.uint16))


def execute_bcd_conversion(state: EmulatorState, instruction: StoreBCD) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    index = int(state.I)
    check_memory_range(index, 3)
    value = int(state.V[instruction.x])

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    return state.replace(memory=state.memory.at[index:index + 3].set(digits))


def execute_store_registers(state: EmulatorState, instruction: StoreRegisters) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    index = int(state.I)
    count = instruction.x + 1
    check_memory_range(index, count)
    new_memory = state.memory.at[index:index + count].set(state.V[:count])
    return state.replace(memory=new_memory)


def execute_load_registers(state: EmulatorState, instruction: LoadRegisters) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    index = int(state.I)
    count = instruction.x + 1
    check_memory_range(index, count)
    new_V = state.V.at[:count].set(state.memory[index:index + count])
    return state.replace(V=new_V)
