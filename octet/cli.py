"""Headless command line runner for CHIP-8 programs."""

import argparse
import sys
import time
from typing import Optional, Sequence

import jax
from tqdm import tqdm

from octet.config import load_config
from octet.disassembler import disassemble, format_listing
from octet.emulator import load_rom, run_frame
from octet.errors import Chip8Error
from octet.logging import InstructionTracer, get_logger, set_log_level
from octet.rendering import display_to_text, save_frame
from octet.state import create_state

logger = get_logger("octet")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="octet", description="Headless CHIP-8 interpreter")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run a ROM for a number of frames")
    run.add_argument("rom", help="Path to the CHIP-8 program image")
    run.add_argument(
        "--frames",
        type=int,
        default=60,
        help="Number of frames to run (default: 60)",
    )
    run.add_argument("--config", default=None, help="YAML configuration file")
    run.add_argument(
        "-o",
        "--override",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a configuration value, may be repeated",
    )
    run.add_argument("--png", default=None, help="Save the final frame to this image file")
    run.add_argument("--ascii", action="store_true", help="Print the final frame as text")
    run.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    run.add_argument(
        "--no-throttle",
        action="store_true",
        help="Run frames as fast as possible instead of at frame_rate",
    )

    disasm = subparsers.add_parser("disasm", help="Disassemble a ROM")
    disasm.add_argument("rom", help="Path to the CHIP-8 program image")
    return parser


def run_command(args: argparse.Namespace) -> int:
    config = load_config(args.config, args.override)
    set_log_level(config.log_level)
    tracer = None
    if config.trace:
        tracer = InstructionTracer()
        tracer.logger.set_level("DEBUG")

    state = create_state(
        jax.random.PRNGKey(config.seed),
        halt_on_invalid=config.halt_on_invalid_opcode,
    )
    state = load_rom(state, args.rom)
    logger.info(f"Loaded {args.rom}")

    beeps = 0
    frame_interval = 1.0 / config.frame_rate
    deadline = time.perf_counter()
    frames = tqdm(range(args.frames), desc="Frames", unit="frame", disable=args.no_progress)
    for frame in frames:
        try:
            state, beep = run_frame(state, config.instructions_per_frame, tracer)
        except Chip8Error as e:
            logger.error(f"Halted in frame {frame} near pc=0x{int(state.pc):03X}: {e}")
            return 1
        beeps += int(beep)

        if not args.no_throttle:
            deadline += frame_interval
            delay = deadline - time.perf_counter()
            if delay > 0:
                time.sleep(delay)

    logger.info(
        f"Ran {args.frames} frames ({args.frames * config.instructions_per_frame} instructions), "
        f"{beeps} beep(s), pc=0x{int(state.pc):03X}"
    )
    if tracer is not None:
        logger.info(f"Traced {tracer.count} instructions")

    if args.ascii:
        print(display_to_text(state.display))
    if args.png:
        save_frame(state.display, args.png, scale=config.scale, color_scheme=config.color_scheme)
        logger.info(f"Frame saved: {args.png}")
    return 0


def disasm_command(args: argparse.Namespace) -> int:
    with open(args.rom, "rb") as f:
        program = f.read()
    print(format_listing(disassemble(program)))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "run":
            return run_command(args)
        return disasm_command(args)
    except (Chip8Error, OSError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
