"""Console logging utilities for the Octet emulator.

This module provides a small levelled console logger with optional colors and
timestamps, plus an instruction tracer that reports every executed instruction
through it.
"""

import time
import sys
from typing import Dict, Optional, TextIO

from octet.decode import Instruction, format_instruction

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConsoleLogger:
    """Flexible console logger with level filtering and formatters."""

    def __init__(
        self,
        name: str = "Octet",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.stream = stream
        self.log_level = log_level.upper()
        target = stream or sys.stderr
        self.use_colors = (
            use_colors and hasattr(target, "isatty") and target.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {k: "" for k in (*LEVELS, "RESET")}
        )

        self.level_order = {level: order for order, level in enumerate(LEVELS)}

    def set_level(self, log_level: str):
        """Change the minimum level that gets printed."""
        if log_level.upper() not in self.level_order:
            raise ValueError(f"Unknown log level '{log_level}'. Available: {list(LEVELS)}")
        self.log_level = log_level.upper()

    def is_enabled_for(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order.get(
            self.log_level, 1
        )

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            formatted = self._format_message(level, message)
            print(formatted, file=self.stream or sys.stderr, flush=True)

    def debug(self, message: str):
        """Log debug message."""
        self.log("DEBUG", message)

    def info(self, message: str):
        """Log info message."""
        self.log("INFO", message)

    def warning(self, message: str):
        """Log warning message."""
        self.log("WARNING", message)

    def error(self, message: str):
        """Log error message."""
        self.log("ERROR", message)

    def critical(self, message: str):
        """Log critical message."""
        self.log("CRITICAL", message)


_loggers: Dict[str, ConsoleLogger] = {}


def get_logger(name: str = "octet") -> ConsoleLogger:
    """Return the shared logger registered under ``name``."""
    if name not in _loggers:
        _loggers[name] = ConsoleLogger(name=name)
    return _loggers[name]


def set_log_level(log_level: str):
    """Apply a log level to every logger created so far."""
    for logger in _loggers.values():
        logger.set_level(log_level)


class InstructionTracer:
    """Logs each executed instruction at DEBUG level and counts them."""

    def __init__(self, logger: Optional[ConsoleLogger] = None):
        self.logger = logger or get_logger("octet.trace")
        self.count = 0

    def __call__(self, address: int, word: int, instruction: Instruction):
        self.count += 1
        if self.logger.is_enabled_for("DEBUG"):
            self.logger.debug(f"0x{address:03X}  {word:04X}  {format_instruction(instruction)}")
