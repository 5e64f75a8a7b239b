"""Enhanced Synchronous Serial Interface of the 56303."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .audio import Audio
from .interrupts import InterruptVector56303


class EssiPeripherals(ABC):
    """What the ESSI needs from the peripheral block it lives in."""

    @abstractmethod
    def read(self, address: int) -> int:
        """Read a peripheral register."""

    @abstractmethod
    def write(self, address: int, value: int) -> None:
        """Write a peripheral register."""

    @abstractmethod
    def inject_interrupt(self, vector: int) -> None:
        """Raise the interrupt at the given vector offset."""


class EssiCrb(IntEnum):
    """Control register B bits."""

    OF0 = 0
    OF1 = 1
    SCD0 = 2
    SCD1 = 3
    SCD2 = 4
    SCKD = 5
    SHFD = 6
    FSL0 = 7
    FSL1 = 8
    FSR = 9
    FSP = 10
    CKP = 11
    SYN = 12
    MOD = 13
    TE2 = 14
    TE1 = 15
    TE0 = 16
    RE = 17
    TIE = 18
    RIE = 19
    TLIE = 20
    RLIE = 21
    TEIE = 22
    REIE = 23


class EssiStatusBit(IntEnum):
    """Status register (SSISR) bits."""

    IF0 = 0
    IF1 = 1
    TFS = 2
    RFS = 3
    TUE = 4
    ROE = 5
    TDE = 6
    RDF = 7


class EssiRegister(IntEnum):
    """Peripheral addresses of both ESSI units and their GPIO ports."""

    ESSI1_RSMB = 0xFFFFA1
    ESSI1_RSMA = 0xFFFFA2
    ESSI1_TSMB = 0xFFFFA3
    ESSI1_TSMA = 0xFFFFA4
    ESSI1_CRA = 0xFFFFA5
    ESSI1_CRB = 0xFFFFA6
    ESSI1_SSISR = 0xFFFFA7
    ESSI1_RX = 0xFFFFA8
    ESSI1_TSR = 0xFFFFA9
    ESSI1_TX2 = 0xFFFFAA
    ESSI1_TX1 = 0xFFFFAB
    ESSI1_TX0 = 0xFFFFAC

    PDRD = 0xFFFFAD
    PRRD = 0xFFFFAE
    PCRD = 0xFFFFAF

    ESSI0_RSMB = 0xFFFFB1
    ESSI0_RSMA = 0xFFFFB2
    ESSI0_TSMB = 0xFFFFB3
    ESSI0_TSMA = 0xFFFFB4
    ESSI0_CRA = 0xFFFFB5
    ESSI0_CRB = 0xFFFFB6
    ESSI0_SSISR = 0xFFFFB7
    ESSI0_RX = 0xFFFFB8
    ESSI0_TSR = 0xFFFFB9
    ESSI0_TX2 = 0xFFFFBA
    ESSI0_TX1 = 0xFFFFBB
    ESSI0_TX0 = 0xFFFFBC

    PDRC = 0xFFFFBD
    PRRC = 0xFFFFBE
    PCRC = 0xFFFFBF


class EssiIndex(IntEnum):
    ESSI0 = 0x10
    ESSI1 = 0x00


def _with_bit(value: int, bit: int, on: int) -> int:
    return value | (1 << bit) if on else value & ~(1 << bit)


class Essi(Audio):
    """Serial audio port; control registers live in the peripheral block."""

    def __init__(self, peripherals: EssiPeripherals) -> None:
        super().__init__()
        self.peripherals = peripherals
        self.status_register = 0

    @staticmethod
    def address(essi: EssiIndex, register: EssiRegister) -> int:
        """Map a register address onto the given ESSI unit."""
        return (int(register) & ~int(EssiIndex.ESSI0)) | int(essi)

    def _set(self, essi: EssiIndex, register: EssiRegister, value: int) -> None:
        self.peripherals.write(self.address(essi, register), value)

    def _get(self, essi: EssiIndex, register: EssiRegister) -> int:
        return self.peripherals.read(self.address(essi, register))

    def _crb_bit(self, bit: int) -> bool:
        return bool((self._get(EssiIndex.ESSI0, EssiRegister.ESSI0_CRB) >> bit) & 1)

    def reset(self) -> None:
        """Clear the port control and direction registers: all signals become GPIO."""
        for essi in (EssiIndex.ESSI0, EssiIndex.ESSI1):
            self._set(essi, EssiRegister.PRRC, 0)
            self._set(essi, EssiRegister.PCRC, 0)

    def exec(self) -> None:
        """Raise one pending receive interrupt if receive interrupts are enabled."""
        if self.pending_rx_interrupts > 0 and self._crb_bit(EssiCrb.RIE):
            self.pending_rx_interrupts -= 1
            self.peripherals.inject_interrupt(InterruptVector56303.ESSI0_RECEIVE_DATA)

    def set_control_registers(self, essi: EssiIndex, cra: int, crb: int) -> None:
        self._set(essi, EssiRegister.ESSI0_CRA, cra)
        self._set(essi, EssiRegister.ESSI0_CRB, crb)

    def toggle_status_register_bit(self, essi: EssiIndex, bit: int, zero_or_one: int) -> None:
        self.status_register = _with_bit(self.status_register, bit, zero_or_one)

    def read_rx(self, index: int) -> int:
        """Read a received word; 0 while the receiver is disabled."""
        if not self._crb_bit(EssiCrb.RE):
            return 0
        value = self.read_rx_sample(index)
        self.toggle_status_register_bit(EssiIndex.ESSI0, EssiStatusBit.RFS, self.frame_sync_dsp_read)
        return value

    def read_sr(self) -> int:
        """Refresh the data and frame sync flags and return the status register."""
        self.toggle_status_register_bit(
            EssiIndex.ESSI0, EssiStatusBit.RDF, 0 if self.input_fifos[0].empty() else 1
        )
        self.toggle_status_register_bit(
            EssiIndex.ESSI0, EssiStatusBit.TDE, 0 if self.output_fifos[0].full() else 1
        )
        self.toggle_status_register_bit(
            EssiIndex.ESSI0, EssiStatusBit.RFS, self.frame_sync_dsp_status
        )
        self.frame_sync_dsp_status = (self.frame_sync_dsp_status + 1) & 1
        return self.status_register

    def write_sr(self, value: int) -> None:
        self.status_register = value

    def write_tx(self, tx_index: int, value: int) -> None:
        """Queue a word on a transmitter; ignored while it is disabled."""
        if not self._crb_bit(EssiCrb.TE0 - tx_index):
            return
        self.write_tx_sample(tx_index, value)