"""CHIP-8 display operations."""

import jax.numpy as jnp
from octet.state import EmulatorState, check_memory_range
from octet.decode import Draw
from octet.constants import FLAG_REGISTER, SCREEN_WIDTH, SCREEN_HEIGHT

SPRITE_WIDTH = 8

# Pre-computed coordinate grids for display operations
rows, cols = jnp.meshgrid(jnp.arange(SCREEN_HEIGHT), jnp.arange(SCREEN_WIDTH), indexing='ij')


def sprite_mask(memory: jnp.ndarray, index: int, base_x: int, base_y: int, height: int) -> jnp.ndarray:
    """Boolean screen-sized mask of the pixels a sprite toggles.

    Sprite rows are read from ``memory[index:index + height]``, most
    significant bit leftmost, and wrap around both screen edges.
    """
    if height == 0:
        return jnp.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), dtype=jnp.bool_)

    row_offset = (rows - base_y) % SCREEN_HEIGHT
    col_offset = (cols - base_x) % SCREEN_WIDTH
    covered = (row_offset < height) & (col_offset < SPRITE_WIDTH)

    sprite_bytes = memory[index + jnp.minimum(row_offset, height - 1)].astype(jnp.int32)
    bits = (sprite_bytes >> jnp.clip(SPRITE_WIDTH - 1 - col_offset, 0, SPRITE_WIDTH - 1)) & 1
    return (bits == 1) & covered


def execute_display(state: EmulatorState, instruction: Draw) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N."""
    index = int(state.I)
    check_memory_range(index, instruction.height)

    sprite = sprite_mask(
        state.memory,
        index,
        int(state.V[instruction.x]),
        int(state.V[instruction.y]),
        instruction.height,
    )
    collision = bool(jnp.any(state.display & sprite))

    return state.replace(
        display=state.display ^ sprite,
        V=state.V.at[FLAG_REGISTER].set(int(collision))
    )
