"""Exceptions raised by the emulator and the assertion reporter."""

from __future__ import annotations

import sys

from .logsink import hex_word

ASSERT_BANNER = "DSP 56300 Emulator: ASSERTION FAILED"
ERROR_PREFIX = "DSP 56300 ERROR: "


class DspError(Exception):
    """Base class for every error the emulator reports."""

    kind = ""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{ERROR_PREFIX}{self.kind}{detail}")


class NotImplementedFeatureError(DspError):
    """A feature of the DSP that the emulator does not support was used."""

    kind = "Not implemented: "


class MemoryAccessError(DspError):
    """A read or write hit an address outside of the emulated memory."""

    def __init__(self, address: int, *, write: bool = False) -> None:
        self.address = address
        self.write = write
        self.kind = "Memory Write: " if write else "Memory Read: "
        super().__init__(hex_word(address))


class IllegalInstructionError(DspError):
    """An opcode that does not decode to any instruction was executed."""

    kind = "Illegal instruction: "

    def __init__(self, opcode: int) -> None:
        self.opcode = opcode
        super().__init__(hex_word(opcode))


def show_assert(message: str) -> str:
    """Report a failed assertion on stderr and return the reported line."""
    line = f"{ASSERT_BANNER}{message}"
    sys.stderr.write(line + "\n")
    return line