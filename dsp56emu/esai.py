"""Enhanced Serial Audio Interface of the 56362."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .audio import Audio
from .interrupts import InterruptVector56362
from .logsink import hex_word, log_to_console


class PeripheralHost(ABC):
    """What the ESAI needs from the DSP core it is attached to."""

    @abstractmethod
    def instruction_counter(self) -> int:
        """Number of instructions executed so far."""

    @abstractmethod
    def inject_interrupt(self, vector: int) -> None:
        """Raise the interrupt at the given vector offset."""


class EsaiAddress(IntEnum):
    RSMB = 0xFFFFBC
    RSMA = 0xFFFFBB
    TSMB = 0xFFFFBA
    TSMA = 0xFFFFB9
    RCCR = 0xFFFFB8
    RCR = 0xFFFFB7
    TCCR = 0xFFFFB6
    TCR = 0xFFFFB5
    SAICR = 0xFFFFB4
    SAISR = 0xFFFFB3
    RX3 = 0xFFFFAB
    RX2 = 0xFFFFAA
    RX1 = 0xFFFFA9
    RX0 = 0xFFFFA8
    TSR = 0xFFFFA6
    TX5 = 0xFFFFA5
    TX4 = 0xFFFFA4
    TX3 = 0xFFFFA3
    TX2 = 0xFFFFA2
    TX1 = 0xFFFFA1
    TX0 = 0xFFFFA0


class EsaiTcr(IntEnum):
    """Transmit control register bits and masks."""

    TLIE = 23
    TIE = 22
    TEDIE = 21
    TEIE = 20
    TPR = 19
    PADC = 17
    TFSR = 16
    TFSL = 15
    TSWS = 0x7C00
    TSWS4 = 14
    TSWS3 = 13
    TSWS2 = 12
    TSWS1 = 11
    TSWS0 = 10
    TMOD = 0x300
    TMOD1 = 9
    TMOD0 = 8
    TWA = 7
    TSHFD = 6
    TEM = 0x3F
    TE5 = 5
    TE4 = 4
    TE3 = 3
    TE2 = 2
    TE1 = 1
    TE0 = 0


class EsaiRcr(IntEnum):
    """Receive control register bits and masks."""

    RLIE = 23
    RIE = 22
    REDIE = 21
    REIE = 20
    RPR = 19
    RFSR = 16
    RFSL = 15
    RSWS = 0x7C00
    RSWS4 = 14
    RSWS3 = 13
    RSWS2 = 12
    RSWS1 = 11
    RSWS0 = 10
    RMOD = 0x300
    RMOD1 = 9
    RMOD0 = 8
    RWA = 7
    RSHFD = 6
    RE = 0xF
    RE3 = 3
    RE2 = 2
    RE1 = 1
    RE0 = 0


class EsaiSr(IntEnum):
    """Status register bits."""

    TODE = 17
    TEDE = 16
    TDE = 15
    TUE = 14
    TFS = 13
    RODF = 10
    REDF = 9
    RDF = 8
    ROE = 7
    RFS = 6
    IF2 = 2
    IF1 = 1
    IF0 = 0


_SR_MASK = (1 << 18) - 1
_CR24_MASK = (1 << 24) - 1


def _bit(n: int) -> int:
    return 1 << n


class Esai(Audio):
    """Transfers one frame of samples per sample period while transmitters are enabled."""

    def __init__(self, host: PeripheralHost) -> None:
        super().__init__()
        self.host = host
        self._sr = 0
        self._cr = 0
        self._tcr = 0
        self._rcr = 0
        self._rccr = 0
        self._tccr = 0
        self.tx = [0] * 6
        self.rx = [0] * 6
        self._has_read_status = False
        self.cycles_since_write = 0
        self._written_tx = 0
        self._last_clock = 0
        self.cycles_per_sample = 2133

    def _input_enabled(self, index: int) -> bool:
        return bool(self._rcr & _bit(index))

    def _output_enabled(self, index: int) -> bool:
        return bool(self._tcr & _bit(index))

    def exec(self) -> None:
        """Advance by the instructions executed since the last call."""
        if not (self._tcr & EsaiTcr.TEM):
            return

        clock = self.host.instruction_counter()
        diff = (clock - self._last_clock) & 0xFFFFFFFF
        self._last_clock = clock

        self.cycles_since_write += diff
        if self.cycles_since_write <= self.cycles_per_sample:
            return

        self.cycles_since_write -= self.cycles_per_sample
        for i in range(6):
            if self._output_enabled(i):
                self.write_tx_sample(i, self.tx[i])
        for i in range(4):
            if self._input_enabled(i):
                self.rx[i] = self.read_rx_sample(i)

        self._sr ^= _bit(EsaiSr.TFS)

        if self._tcr & _bit(EsaiTcr.TIE):
            self.host.inject_interrupt(InterruptVector56362.ESAI_TRANSMIT_DATA)
        if self._sr & _bit(EsaiSr.TFS) and self._tcr & _bit(EsaiTcr.TLIE):
            self.host.inject_interrupt(InterruptVector56362.ESAI_TRANSMIT_LAST_SLOT)

        self._sr |= _bit(EsaiSr.TUE) | _bit(EsaiSr.TDE)
        self._written_tx = 0
        self._has_read_status = False

    def read_status_register(self) -> int:
        self._has_read_status = True
        return self._sr

    def write_status_register(self, value: int) -> None:
        self._sr = value & _SR_MASK

    def read_receive_control_register(self) -> int:
        return self._rcr

    def read_transmit_control_register(self) -> int:
        return self._tcr

    def write_receive_control_register(self, value: int) -> None:
        log_to_console(f"Write ESAI RCR {hex_word(value)}")
        self._rcr = value & _CR24_MASK

    def write_transmit_control_register(self, value: int) -> None:
        self._sr &= ~_bit(EsaiSr.TUE)
        log_to_console(f"Write ESAI TCR {hex_word(value)}")
        self._tcr = value & _CR24_MASK

    def write_transmit_clock_control_register(self, value: int) -> None:
        log_to_console(f"Write ESAI TCCR {hex_word(value)}")
        self._tccr = value

    def write_control_register(self, value: int) -> None:
        log_to_console(f"Write ESAI CR {hex_word(value)}")
        self._cr = value

    def write_receive_clock_control_register(self, value: int) -> None:
        log_to_console(f"Write ESAI RCCR {hex_word(value)}")
        self._rccr = value

    def update_pctl(self, value: int) -> None:
        """Recompute the sample period from the PLL control register."""
        pd = ((value >> 20) & 15) + 1
        mf = (value & 0xFFF) + 1
        self.cycles_per_sample = mf * 128 // pd
        speed_mhz = 12.0 * mf / pd
        log_to_console(f"Clock speed changed to: {speed_mhz}Mhz")

    def write_tx(self, index: int, value: int) -> None:
        if not self._output_enabled(index):
            return
        self.tx[index] = value
        self._written_tx |= _bit(index)
        if self._written_tx == (self._tcr & EsaiTcr.TEM):
            if self._has_read_status:
                self._sr &= ~_bit(EsaiSr.TUE)
            self._sr &= ~_bit(EsaiSr.TDE)

    def read_rx(self, index: int) -> int:
        if not self._input_enabled(index):
            return 0
        return self.rx[index]