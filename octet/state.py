"""CHIP-8 emulator state structures."""

from typing import Optional

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from octet.constants import (
    FONT_DATA, FONT_START, MEMORY_SIZE, NUM_KEYS, NUM_REGISTERS, PROGRAM_START,
    SCREEN_HEIGHT, SCREEN_WIDTH, STACK_SIZE,
)
from octet.decode import Instruction
from octet.errors import MemoryRangeError


@dataclass(frozen=True)
class StackState:
    """Return address stack for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    The display is stored row-major as ``display[row, column]``.
    ``last_instruction`` and ``halt_on_invalid`` are static metadata: the first
    is kept for debugging displays only, the second is the host's policy for
    unrecognized opcodes.
    """
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    display: jnp.ndarray = field(default_factory=lambda: jnp.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), dtype=jnp.bool_))
    stack: StackState = StackState()
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    last_instruction: Optional[Instruction] = field(pytree_node=False, default=None)
    halt_on_invalid: bool = field(pytree_node=False, default=False)


def create_state(rng: Optional[jax.Array] = None, halt_on_invalid: bool = False) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = EmulatorState(rng, halt_on_invalid=halt_on_invalid)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA))


def reset(state: EmulatorState) -> EmulatorState:
    """Power-cycle the machine, keeping only the random key and host policy."""
    return create_state(state.rng, halt_on_invalid=state.halt_on_invalid)


def check_memory_range(start: int, length: int) -> None:
    """Raise MemoryRangeError unless ``[start, start + length)`` lies in memory."""
    if start < 0 or start + length > MEMORY_SIZE:
        raise MemoryRangeError(start, length, MEMORY_SIZE)
