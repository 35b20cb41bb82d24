"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from octet import create_state, load_program


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def strict_state():
    """Provide a fresh state that halts on invalid opcodes."""
    return create_state(halt_on_invalid=True)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def load_words(state, words):
    """Helper to load big-endian instruction words at 0x200."""
    program = b"".join(word.to_bytes(2, "big") for word in words)
    return load_program(state, program)
