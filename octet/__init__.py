"""CHIP-8 interpreter package."""

from octet.state import EmulatorState, create_state, reset
from octet.emulator import execute, fetch, step, cycle, tick_timers, run_frame, load_program, load_rom
from octet.decode import Instruction, UnknownInstruction, decode, decode_word, format_instruction
from octet.constants import *
from octet.errors import (
    Chip8Error, ConfigError, InvalidOpcodeError, MemoryRangeError, RomTooLargeError,
    StackOverflowError, StackUnderflowError,
)
from octet.keypad import key_for_symbol, set_key, press_key, release_key, handle_key_event
from octet.rendering import lit_pixels, pixel_coordinates, display_to_rgb, display_to_text, create_color_scheme

__all__ = [
    "EmulatorState",
    "create_state",
    "reset",
    "fetch",
    "execute",
    "step",
    "cycle",
    "tick_timers",
    "run_frame",
    "load_program",
    "load_rom",
    "Instruction",
    "UnknownInstruction",
    "decode",
    "decode_word",
    "format_instruction",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "TICKS_PER_FRAME",
    "KEY_MAP",
    "Chip8Error",
    "ConfigError",
    "InvalidOpcodeError",
    "MemoryRangeError",
    "RomTooLargeError",
    "StackOverflowError",
    "StackUnderflowError",
    "key_for_symbol",
    "set_key",
    "press_key",
    "release_key",
    "handle_key_event",
    "lit_pixels",
    "pixel_coordinates",
    "display_to_rgb",
    "display_to_text",
    "create_color_scheme",
]
