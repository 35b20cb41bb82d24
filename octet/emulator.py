"""Main CHIP-8 emulator execution engine.

The host drives the machine either one instruction at a time with
:func:`cycle`, which also ticks both timers, or one video frame at a time with
:func:`run_frame`, which executes a block of instructions per timer tick.
Every function returns a new state; the input state is never modified, so a
failing instruction leaves the caller's state intact.
"""

from typing import Callable, Optional, Union

import jax.numpy as jnp
from octet.state import EmulatorState, check_memory_range
from octet import decode as ops
from octet.decode import Instruction, decode
from octet.constants import MAX_PROGRAM_SIZE, PROGRAM_START, TICKS_PER_FRAME
from octet.errors import RomTooLargeError
from octet.instructions.system import execute_clear_screen, execute_return, execute_unknown
from octet.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key, execute_skip_if_not_key,
)
from octet.instructions.alu import ALU_OPERATIONS, execute_alu_operation
from octet.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from octet.instructions.display import execute_display
from octet.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers,
)

Tracer = Callable[[int, int, Instruction], None]

HANDLERS = {
    ops.ClearScreen: execute_clear_screen,
    ops.Return: execute_return,
    ops.Jump: execute_jump,
    ops.Call: execute_call,
    ops.SkipIfEqualImmediate: execute_skip_if_equal_immediate,
    ops.SkipIfNotEqualImmediate: execute_skip_if_not_equal_immediate,
    ops.SkipIfEqualRegister: execute_skip_if_equal_register,
    ops.LoadImmediate: execute_set,
    ops.AddImmediate: execute_add,
    **{operation: execute_alu_operation for operation in ALU_OPERATIONS},
    ops.SkipIfNotEqualRegister: execute_skip_if_not_equal_register,
    ops.LoadIndex: execute_set_index,
    ops.JumpWithOffset: execute_jump_with_offset,
    ops.Random: execute_random,
    ops.Draw: execute_display,
    ops.SkipIfKey: execute_skip_if_key,
    ops.SkipIfNotKey: execute_skip_if_not_key,
    ops.LoadDelayTimer: execute_get_delay_timer,
    ops.WaitForKey: execute_wait_for_key,
    ops.SetDelayTimer: execute_set_delay_timer,
    ops.SetSoundTimer: execute_set_sound_timer,
    ops.AddToIndex: execute_add_to_index,
    ops.LoadFontAddress: execute_font_character,
    ops.StoreBCD: execute_bcd_conversion,
    ops.StoreRegisters: execute_store_registers,
    ops.LoadRegisters: execute_load_registers,
    ops.UnknownInstruction: execute_unknown,
}


def execute(state: EmulatorState, instruction: Union[Instruction, int]) -> EmulatorState:
    """Execute single CHIP-8 instruction. Raw words are decoded first."""
    if not isinstance(instruction, Instruction):
        instruction = ops.decode_word(instruction)
    return HANDLERS[type(instruction)](state, instruction)


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction word from memory and advance pc past it."""
    pc = int(state.pc)
    check_memory_range(pc, 2)
    instruction = int(state.memory[pc]) << 8 | int(state.memory[pc + 1])
    return state.replace(pc=state.pc + 2), instruction


def step(state: EmulatorState, tracer: Optional[Tracer] = None) -> EmulatorState:
    """Fetch, decode and execute one instruction without touching the timers."""
    address = int(state.pc)
    state, word = fetch(state)
    instruction = decode(word >> 8, word & 0xFF)
    if tracer is not None:
        tracer(address, word, instruction)
    state = state.replace(last_instruction=instruction)
    return execute(state, instruction)


def tick_timers(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Decrement both timers, saturating at zero.

    Returns the new state and whether a beep is due, which happens exactly when
    the sound timer goes from 1 to 0.
    """
    delay_timer = int(state.delay_timer)
    sound_timer = int(state.sound_timer)
    beep = sound_timer == 1
    state = state.replace(
        delay_timer=jnp.astype(max(delay_timer - 1, 0), jnp.uint8),
        sound_timer=jnp.astype(max(sound_timer - 1, 0), jnp.uint8),
    )
    return state, beep


def cycle(state: EmulatorState, tracer: Optional[Tracer] = None) -> tuple[EmulatorState, bool]:
    """Execute one instruction and tick the timers once."""
    return tick_timers(step(state, tracer))


def run_frame(
    state: EmulatorState,
    instructions_per_frame: int = TICKS_PER_FRAME,
    tracer: Optional[Tracer] = None,
) -> tuple[EmulatorState, bool]:
    """Execute one frame: a block of instructions followed by one timer tick."""
    for _ in range(instructions_per_frame):
        state = step(state, tracer)
    return tick_timers(state)


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Copy a raw program image into memory starting at 0x200."""
    if len(program) > MAX_PROGRAM_SIZE:
        raise RomTooLargeError(len(program), MAX_PROGRAM_SIZE)
    if not program:
        return state
    rom_array = jnp.array(list(program), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(program)].set(rom_array)
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)
