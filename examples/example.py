import time

import jax

from octet import create_state, load_program, run_frame, press_key, pixel_coordinates
from octet.logging import InstructionTracer, get_logger
from octet.rendering import display_to_text

# Wait for a key, then draw its hex glyph in the middle of the screen
PROGRAM = bytes([
    0xF0, 0x0A,  # LD V0, K
    0xF0, 0x29,  # LD F, V0
    0x61, 0x1C,  # LD V1, 28
    0x62, 0x0D,  # LD V2, 13
    0xD1, 0x25,  # DRW V1, V2, 5
    0x12, 0x0A,  # JP 0x20A
])

if __name__ == "__main__":
    logger = get_logger("example")
    tracer = InstructionTracer()
    tracer.logger.set_level("DEBUG")

    state = load_program(create_state(jax.random.PRNGKey(0)), PROGRAM)

    state, _ = run_frame(state, tracer=tracer)
    logger.info(f"Still waiting for a key: pc=0x{int(state.pc):03X}")

    state = press_key(state, 0xA)

    start = time.time()
    state, _ = run_frame(state, tracer=tracer)
    logger.info(f"Frame executed in {time.time() - start:.3f}s, {len(pixel_coordinates(state))} pixels lit")

    print(display_to_text(state.display))
