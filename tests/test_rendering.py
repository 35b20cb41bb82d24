"""Tests for framebuffer projection and rendering."""

import numpy as np
import pytest
from PIL import Image
from octet import create_color_scheme, display_to_rgb, display_to_text, lit_pixels, pixel_coordinates
from octet.rendering import save_frame


@pytest.fixture
def lit_state(fresh_state):
    display = fresh_state.display.at[0, 63].set(True).at[5, 10].set(True).at[31, 0].set(True)
    return fresh_state.replace(display=display)


class TestLitPixels:
    """Projection of the framebuffer onto coordinates."""

    def test_empty_display(self, fresh_state):
        assert list(pixel_coordinates(fresh_state)) == []

    def test_row_major_pairs(self, lit_state):
        """Pairs are (row, column) in row-major order."""
        assert list(pixel_coordinates(lit_state)) == [(0, 63), (5, 10), (31, 0)]

    def test_restartable(self, lit_state):
        """Iterating twice yields the same sequence."""
        pixels = lit_pixels(lit_state.display)
        assert list(pixels) == list(pixels)
        assert len(pixels) == 3


class TestImages:
    """RGB, text and file rendering."""

    def test_display_to_rgb(self, lit_state):
        rgb = display_to_rgb(lit_state.display, scale=2, on_color=(1, 2, 3), off_color=(0, 0, 0))
        assert rgb.shape == (64, 128, 3)
        assert tuple(rgb[10, 20]) == (1, 2, 3)
        assert tuple(rgb[0, 0]) == (0, 0, 0)

    def test_display_to_text(self, lit_state):
        lines = display_to_text(lit_state.display).splitlines()
        assert len(lines) == 32
        assert lines[0] == "." * 63 + "#"
        assert lines[31] == "#" + "." * 63

    def test_unknown_color_scheme(self):
        with pytest.raises(ValueError):
            create_color_scheme("plaid")

    def test_save_frame(self, lit_state, tmp_path):
        path = tmp_path / "frame.png"
        save_frame(lit_state.display, str(path), scale=4, color_scheme="white")

        image = np.array(Image.open(path))
        assert image.shape == (128, 256, 3)
        assert tuple(image[0, 255]) == (255, 255, 255)
