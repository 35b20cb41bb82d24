"""CHIP-8 memory and register operations."""

import jax
import jax.numpy as jnp
from octet.state import EmulatorState
from octet.decode import AddImmediate, LoadImmediate, LoadIndex, Random


def execute_set(state: EmulatorState, instruction: LoadImmediate) -> EmulatorState:
    """6XKK - Set VX = KK."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.byte))


def execute_add(state: EmulatorState, instruction: AddImmediate) -> EmulatorState:
    """7XKK - Add KK to VX, wrapping, without touching VF."""
    result = (int(state.V[instruction.x]) + instruction.byte) & 0xFF
    return state.replace(V=state.V.at[instruction.x].set(result))


def execute_set_index(state: EmulatorState, instruction: LoadIndex) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return state.replace(I=jnp.astype(instruction.address, jnp.uint16))


def execute_random(state: EmulatorState, instruction: Random) -> EmulatorState:
    """CXKK - Set VX = random & KK."""
    key, subkey = jax.random.split(state.rng)
    random_value = jax.random.randint(subkey, shape=(), minval=0, maxval=256, dtype=jnp.int32)
    return state.replace(V=state.V.at[instruction.x].set(int(random_value) & instruction.byte), rng=key)
