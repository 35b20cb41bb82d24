"""Linear CHIP-8 disassembler."""

from typing import List, Tuple

from octet.constants import PROGRAM_START
from octet.decode import decode, format_instruction


def disassemble(program: bytes, origin: int = PROGRAM_START) -> List[Tuple[int, int, str]]:
    """Disassemble a program image into (address, word, mnemonic) rows.

    Data is not distinguished from code, so sprite bytes show up as whatever
    instruction they happen to encode. A trailing odd byte is listed as DB.
    """
    results = []
    for offset in range(0, len(program) - 1, 2):
        high, low = program[offset], program[offset + 1]
        word = high << 8 | low
        results.append((origin + offset, word, format_instruction(decode(high, low))))

    if len(program) % 2:
        last = program[-1]
        results.append((origin + len(program) - 1, last, f"DB 0x{last:02X}"))
    return results


def format_listing(rows: List[Tuple[int, int, str]]) -> str:
    """Render disassembly rows as a text listing."""
    return "\n".join(f"0x{address:03X}  {word:04X}  {text}" for address, word, text in rows)
