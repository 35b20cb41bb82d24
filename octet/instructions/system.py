"""CHIP-8 system instructions (0x0xxx) and unrecognized encodings."""

import jax.numpy as jnp
from octet.state import EmulatorState
from octet.decode import ClearScreen, Return, UnknownInstruction
from octet.errors import InvalidOpcodeError
from octet.logging import get_logger
from octet.stack import pop

logger = get_logger("octet.core")


def execute_clear_screen(state: EmulatorState, instruction: ClearScreen) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(display=jnp.zeros_like(state.display))


def execute_return(state: EmulatorState, instruction: Return) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=jnp.astype(address, jnp.uint16))


def execute_unknown(state: EmulatorState, instruction: UnknownInstruction) -> EmulatorState:
    """Report an unrecognized encoding, then halt or skip it."""
    # pc was already advanced past the faulting word
    address = (int(state.pc) - 2) & 0xFFFF
    if state.halt_on_invalid:
        raise InvalidOpcodeError(instruction.raw, address)
    logger.warning(f"Skipping invalid opcode 0x{instruction.raw:04X} at 0x{address:03X}")
    return state
