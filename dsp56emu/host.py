"""Host interfaces (HDI08 and HI08) for exchanging words with the host CPU."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Iterable

from .audio import SampleFifo
from .interrupts import InterruptVector56362
from .logsink import hex_word, log_to_console

HOST_FIFO_CAPACITY = 1024
_WORD_MASK = 0x00FFFFFF


class HostAddress(IntEnum):
    HCR = 0xFFFFC2
    HSR = 0xFFFFC3
    HPCR = 0xFFFFC4
    HORX = 0xFFFFC6
    HOTX = 0xFFFFC7


class HostStatusBit(IntEnum):
    HRDF = 0
    HTDE = 1
    HCP = 2
    HF0 = 3
    HF1 = 4
    DMA = 7


class HostPortControlBit(IntEnum):
    HEN = 6


class HostControlBit(IntEnum):
    HRIE = 0
    HTIE = 1


def _with_bit(value: int, bit: int, on) -> int:
    return value | (1 << bit) if on else value & ~(1 << bit)


def _test(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


class Hdi08:
    """HDI08 host port; ``peripherals`` must provide ``inject_interrupt(vector)``."""

    def __init__(self, peripherals) -> None:
        self.peripherals = peripherals
        self.hsr = 0
        self.hcr = 0
        self.hpcr = 0
        self._data = SampleFifo(HOST_FIFO_CAPACITY)
        self._data_tx = SampleFifo(HOST_FIFO_CAPACITY)
        self._pending_lock = threading.Lock()
        self.pending_rx_interrupts = 0

    def read_status_register(self) -> int:
        self.hsr = _with_bit(self.hsr, HostStatusBit.HRDF, not self._data.empty())
        return self.hsr

    def read_control_register(self) -> int:
        return self.hcr

    def read_port_control_register(self) -> int:
        return self.hpcr

    def write_control_register(self, value: int) -> None:
        self.hcr = value

    def write_status_register(self, value: int) -> None:
        log_to_console(f"Write HDI08 HSR {hex_word(value)}")
        self.hsr = value

    def write_port_control_register(self, value: int) -> None:
        log_to_console(f"Write HDI08 HPCR {hex_word(value)}")
        self.hpcr = value

    def has_tx(self) -> bool:
        return not self._data_tx.empty()

    def read_tx(self) -> int:
        """Take the next word the DSP sent, waiting for one."""
        return self._data_tx.pop()

    def write_tx(self, value: int) -> None:
        """Queue a word for the host, waiting while the FIFO is full."""
        self._data_tx.push(value)

    def exec(self) -> None:
        """Raise a receive or transmit interrupt when the host port is enabled."""
        if not _test(self.hpcr, HostPortControlBit.HEN):
            return
        with self._pending_lock:
            receive = self.pending_rx_interrupts > 0 and _test(self.hcr, HostControlBit.HRIE)
            if receive:
                self.pending_rx_interrupts -= 1
        if receive:
            self.peripherals.inject_interrupt(InterruptVector56362.HOST_RECEIVE_DATA_FULL)
        elif _test(self.hcr, HostControlBit.HTIE):
            self.peripherals.inject_interrupt(InterruptVector56362.HOST_TRANSMIT_DATA_EMPTY)

    def read_rx(self) -> int:
        """Take the next word from the host, or 0 if there is none."""
        if self._data.empty():
            log_to_console("Empty read")
            return 0
        return self._data.pop() & _WORD_MASK

    def write_rx(self, data: Iterable[int]) -> None:
        """Queue words from the host, counting a receive interrupt for each."""
        for value in data:
            self._data.push(value & _WORD_MASK)
            if _test(self.hpcr, HostPortControlBit.HEN) and _test(self.hcr, HostControlBit.HRIE):
                with self._pending_lock:
                    self.pending_rx_interrupts += 1

    def clear_rx(self) -> None:
        self._data.clear()

    def has_data_to_send(self) -> bool:
        return not self._data.empty()

    def set_host_flags(self, flag0, flag1) -> None:
        self.hsr = _with_bit(self.hsr, HostStatusBit.HF0, flag0)
        self.hsr = _with_bit(self.hsr, HostStatusBit.HF1, flag1)
        log_to_console(f"Write HostFlags, HSR {hex_word(self.hsr)}")

    def reset(self) -> None:
        """Drop interrupts that are still pending; queued data is kept."""
        with self._pending_lock:
            self.pending_rx_interrupts = 0


class Hi08:
    """The simpler HI08 host port: a receive FIFO and a status register."""

    def __init__(self) -> None:
        self.hsr = 0
        self._data = SampleFifo(HOST_FIFO_CAPACITY)

    def write(self, data: Iterable[int]) -> None:
        for value in data:
            self._data.push(value & _WORD_MASK)

    def read(self) -> int:
        if self._data.empty():
            return 0
        return self._data.pop()

    def read_status_register(self) -> int:
        self.hsr = _with_bit(self.hsr, HostStatusBit.HRDF, not self._data.empty())
        return self.hsr

    def write_status_register(self, value: int) -> None:
        self.hsr = value

    def reset(self) -> None:
        """Bring the receive-data-full flag in line with the FIFO."""
        self.read_status_register()