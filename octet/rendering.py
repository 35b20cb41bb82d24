"""CHIP-8 framebuffer projection and rendering utilities."""

from typing import Iterator, Tuple

import jax.numpy as jnp
import numpy as np
from PIL import Image

from octet.state import EmulatorState


class LitPixels:
    """Lazy view of the lit pixels of a display as (row, column) pairs.

    Iterating twice walks the same snapshot again, so hosts can redraw
    from one projection as often as they like.
    """

    def __init__(self, display: jnp.ndarray):
        self._pixels = np.asarray(display, dtype=np.bool_)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        rows, cols = np.nonzero(self._pixels)
        for row, col in zip(rows, cols):
            yield int(row), int(col)

    def __len__(self) -> int:
        return int(np.count_nonzero(self._pixels))


def lit_pixels(display: jnp.ndarray) -> LitPixels:
    """Project a row-major display onto the coordinates of its lit pixels."""
    return LitPixels(display)


def pixel_coordinates(state: EmulatorState) -> LitPixels:
    """Lit pixels of the current frame of a machine state."""
    return lit_pixels(state.display)


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("octet", "classic", "amber", "white", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "octet": ((179, 102, 184), (45, 25, 61)),
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
        "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]


def display_to_rgb(
    display: jnp.ndarray,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (0, 255, 0),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert CHIP-8 boolean display to RGB array with optional upscaling.

    Args:
        display: Boolean array of shape (32, 64), indexed [row, column]
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: green)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (height*scale, width*scale, 3) with uint8 values
    """
    pixels = np.array(display, dtype=np.bool_)
    height, width = pixels.shape

    rgb_frame = np.zeros((height, width, 3), dtype=np.uint8)

    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Apply upscaling using nearest neighbor interpolation
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def display_to_text(display: jnp.ndarray, on: str = "#", off: str = ".") -> str:
    """Render a display as one line of text per screen row."""
    pixels = np.asarray(display, dtype=np.bool_)
    return "\n".join("".join(on if pixel else off for pixel in row) for row in pixels)


def save_frame(
    display: jnp.ndarray,
    filename: str,
    scale: int = 8,
    color_scheme: str = "classic",
) -> None:
    """Save a display as an image file (format chosen from the extension)."""
    on_color, off_color = create_color_scheme(color_scheme)
    rgb = display_to_rgb(display, scale=scale, on_color=on_color, off_color=off_color)
    Image.fromarray(rgb).save(filename)
