"""Loader for OMF text object files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from .memory import MemArea, Memory

TAG_DATA = "_DATA "
TAG_SYMBOL = "_SYMBOL "

_AREAS = {
    "X": (MemArea.X, 24),
    "Y": (MemArea.Y, 24),
    "P": (MemArea.P, 24),
    "L": (MemArea.X, 48),
}

_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]+)")


def parse_24bit(text: str) -> int:
    """Parse the first six hex digits of text as a 24 bit word."""
    if len(text) < 6:
        raise ValueError(f"expected six hex digits, got {text!r}")
    result = 0
    for i in range(0, 6, 2):
        result = (result << 8) | int(text[i : i + 2], 16)
    return result


class OmfLoader:
    """Parses OMF data and symbol records into a Memory."""

    def __init__(self) -> None:
        self.current_area: MemArea | None = None
        self.target_address = 0
        self.bit_size = 0
        self.symbol_area = ""

    def load_file(self, path: str | Path, memory: Memory) -> None:
        with open(path, encoding="ascii", errors="replace") as f:
            self.load_lines(f.read().splitlines(), memory)

    def load_text(self, text: str, memory: Memory) -> None:
        self.load_lines(text.splitlines(), memory)

    def load_lines(self, lines: Iterable[str], memory: Memory) -> None:
        self.current_area = None
        self.target_address = 0
        self.bit_size = 0
        for line in lines:
            self._parse_line(line, memory)

    def _parse_line(self, line: str, memory: Memory) -> None:
        if not line:
            return

        if line[0] == "_":
            self.current_area = None
            self.bit_size = 0
            self.target_address = 0
            if line.startswith(TAG_DATA):
                area = _AREAS.get(line[6:7])
                if area is not None:
                    self.current_area, self.bit_size = area
                self.target_address = parse_24bit(line[8:])
            if line.startswith(TAG_SYMBOL):
                self.symbol_area = line[8:9]
            return

        if self.current_area is not None:
            if self.bit_size == 24:
                pos = 0
                while len(line) - pos >= 6:
                    memory.set(self.current_area, self.target_address, parse_24bit(line[pos:]))
                    self.target_address += 1
                    pos += 7
            elif self.bit_size == 48:
                pos = 0
                while len(line) - pos >= 13:
                    memory.set(MemArea.X, self.target_address, parse_24bit(line[pos:]))
                    memory.set(MemArea.Y, self.target_address, parse_24bit(line[pos + 7 :]))
                    self.target_address += 1
                    pos += 14
        elif self.symbol_area:
            first = line.find(" ")
            last = line.rfind(" ")
            if first < 0:
                return
            name = line[:first]
            symbol_type = line[last - 1] if last > 0 else ""
            if symbol_type == "F":
                return
            match = _HEX_PREFIX.match(line[last + 1 :])
            if match:
                memory.set_symbol(self.symbol_area, int(match.group(1), 16), name)