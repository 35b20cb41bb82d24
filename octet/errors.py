"""Failure kinds reported by the CHIP-8 interpreter."""


class Chip8Error(Exception):
    """Base class for every emulator failure."""


class InvalidOpcodeError(Chip8Error):
    """Raised when an unrecognized instruction is executed in halting mode."""

    def __init__(self, word: int, address: int):
        self.word = word
        self.address = address
        super().__init__(f"Invalid opcode 0x{word:04X} at 0x{address:03X}")


class MemoryRangeError(Chip8Error):
    """Raised when an instruction would read or write outside of memory."""

    def __init__(self, start: int, length: int, limit: int):
        self.start = start
        self.length = length
        self.limit = limit
        super().__init__(
            f"Memory access [0x{start:03X}, 0x{start + length:03X}) "
            f"exceeds addressable range 0x{limit:03X}"
        )


class StackOverflowError(Chip8Error):
    """Raised on CALL when the return stack is full."""


class StackUnderflowError(Chip8Error):
    """Raised on RET when the return stack is empty."""


class RomTooLargeError(Chip8Error):
    """Raised when a program image does not fit above the program start."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"Program of {size} bytes exceeds {capacity} bytes of program memory")


class ConfigError(Chip8Error, ValueError):
    """Raised for invalid emulator configuration."""
