"""X, Y and P memory of the DSP, with symbol bookkeeping."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from array import array
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import BinaryIO

from .errors import MemoryAccessError

DEFAULT_SIZE = 0xC00000
WORD_MASK = 0x00FFFFFF
WRITE_LIMIT = 0xFF0000
INVALID_WORD = 0x00BADBAD
NO_BRIDGE = 0xFFFFFF


class MemArea(IntEnum):
    X = 0
    Y = 1
    P = 2


_AREA_VALUES = frozenset(int(a) for a in MemArea)


class MemoryValidator(ABC):
    """Decides whether an access to memory is allowed."""

    @abstractmethod
    def validate_access(self, area: MemArea, address: int, write: bool) -> bool:
        """Return True if the access may go ahead."""


class DefaultMemoryValidator(MemoryValidator):
    """Allows every access to one of the three memory areas."""

    def validate_access(self, area: MemArea, address: int, write: bool) -> bool:
        return int(area) in _AREA_VALUES


@dataclass
class Symbol:
    address: int
    area: str
    names: set[str] = field(default_factory=set)

    @property
    def name(self) -> str:
        return min(self.names)


def _to_le(words: array) -> bytes:
    if sys.byteorder == "big":
        words = array(words.typecode, words)
        words.byteswap()
    return words.tobytes()


class Memory:
    """Three word-addressed memory areas of 24 bit words."""

    def __init__(self, validator: MemoryValidator | None = None, size: int = DEFAULT_SIZE) -> None:
        self.validator = validator if validator is not None else DefaultMemoryValidator()
        self.size = size
        self._mem = [array("I", [0]) * size for _ in MemArea]
        self._bridged_address = NO_BRIDGE
        self._symbols: dict[str, dict[int, Symbol]] = {}

    def _translate(self, area: MemArea, address: int) -> MemArea:
        if address >= self._bridged_address:
            return MemArea.P
        return MemArea(area)

    def set(self, area: MemArea, offset: int, value: int) -> bool:
        """Write a word; return False if the validator refuses the access."""
        area = self._translate(area, offset)
        if not self.validator.validate_access(area, offset, True):
            return False
        if not 0 <= offset < self.size:
            raise MemoryAccessError(offset, write=True)
        if offset < WRITE_LIMIT:
            self._mem[area][offset] = value & WORD_MASK
        return True

    def get(self, area: MemArea, offset: int) -> int:
        """Read a word; a refused access reads as 0."""
        area = self._translate(area, offset)
        if not self.validator.validate_access(area, offset, False):
            return 0
        if not 0 <= offset < self.size:
            raise MemoryAccessError(offset)
        return self._mem[area][offset]

    def get2(self, area: MemArea, offset: int) -> tuple[int, int]:
        """Read two consecutive words."""
        area = self._translate(area, offset)
        if not self.validator.validate_access(area, offset, False):
            return INVALID_WORD, INVALID_WORD
        if not 0 <= offset < self.size - 1:
            raise MemoryAccessError(offset)
        words = self._mem[area]
        return words[offset], words[offset + 1]

    def save(self, stream: BinaryIO) -> None:
        """Dump all areas (X, Y, P) as little endian 32 bit words."""
        for words in self._mem:
            stream.write(_to_le(words))

    def load(self, stream: BinaryIO) -> None:
        """Read back a dump written by save; a short stream fills what it can."""
        for words in self._mem:
            data = stream.read(self.size * 4)
            count = len(data) // 4
            chunk = array("I")
            chunk.frombytes(data[: count * 4])
            if sys.byteorder == "big":
                chunk.byteswap()
            words[:count] = chunk

    def save_area(self, path: str | Path, area: MemArea) -> None:
        """Write one area as big endian 24 bit words."""
        out = bytearray()
        for i in range(self.size):
            out += self.get(area, i).to_bytes(3, "big")
        Path(path).write_bytes(bytes(out))

    def save_as_text(self, path: str | Path, area: MemArea, offset: int, count: int) -> None:
        """Write a hex dump of eight words per line."""
        last = offset + count
        lines = []
        for start in range(offset, last, 8):
            words = " ".join(f"{self.get(area, j):08x}" for j in range(start, min(start + 8, last)))
            lines.append(f"0x{start:08x}: {words}" if words else f"0x{start:08x}:")
        Path(path).write_text("".join(line + "\n" for line in lines), encoding="ascii")

    def set_symbol(self, area: str, address: int, name: str) -> None:
        """Name an address; the first name given to an address is kept."""
        symbols = self._symbols.setdefault(area, {})
        if address not in symbols:
            symbols[address] = Symbol(address, area, {name})

    def get_symbol(self, area: MemArea, address: int) -> str:
        """Return the name of an address, or an empty string."""
        letter = MemArea(area).name
        for key in (letter.lower(), letter):
            symbol = self._symbols.get(key, {}).get(address)
            if symbol is not None:
                return symbol.name
        return ""

    @property
    def symbols(self) -> dict[str, dict[int, Symbol]]:
        return self._symbols

    def set_external_memory(self, address: int, bridged: bool) -> None:
        """From ``address`` on, X and Y accesses go to P when bridged."""
        self._bridged_address = address if bridged else 0

    def load_omf(self, path: str | Path) -> None:
        """Load an OMF text file into this memory."""
        from .omfloader import OmfLoader

        OmfLoader().load_file(path, self)