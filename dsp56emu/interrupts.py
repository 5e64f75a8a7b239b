"""Interrupt vector offsets, relative to the VBA register."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class InterruptVector(IntEnum):
    """Vectors common to the whole family."""

    # Level 3 (non-maskable)
    HARDWARE_RESET = 0x00
    STACK_ERROR = 0x02
    ILLEGAL_INSTRUCTION = 0x04
    DEBUG_REQUEST = 0x06
    TRAP = 0x08
    NMI = 0x0A
    RESERVED_0C = 0x0C
    RESERVED_0E = 0x0E

    # Levels 0-2 (maskable)
    IRQA = 0x10
    IRQB = 0x12
    IRQC = 0x14
    IRQD = 0x16

    DMA_CHANNEL0 = 0x18
    DMA_CHANNEL1 = 0x1A
    DMA_CHANNEL2 = 0x1C
    DMA_CHANNEL3 = 0x1E
    DMA_CHANNEL4 = 0x20
    DMA_CHANNEL5 = 0x22


@unique
class InterruptVector56303(IntEnum):
    """Peripheral vectors of the 56303."""

    TIMER0_COMPARE = 0x24
    TIMER0_OVERFLOW = 0x26
    TIMER1_COMPARE = 0x28
    TIMER1_OVERFLOW = 0x2A
    TIMER2_COMPARE = 0x2C
    TIMER2_OVERFLOW = 0x2E

    ESSI0_RECEIVE_DATA = 0x30
    ESSI0_RECEIVE_DATA_WITH_EXCEPTION_STATUS = 0x32
    ESSI0_RECEIVE_LAST_SLOT = 0x34
    ESSI0_TRANSMIT_DATA = 0x36
    ESSI0_TRANSMIT_DATA_WITH_EXCEPTION_STATUS = 0x38
    ESSI0_TRANSMIT_LAST_SLOT = 0x3A
    RESERVED_3C = 0x3C
    RESERVED_3E = 0x3E

    ESSI1_RECEIVE_DATA = 0x40
    ESSI1_RECEIVE_DATA_WITH_EXCEPTION_STATUS = 0x42
    ESSI1_RECEIVE_LAST_SLOT = 0x44
    ESSI1_TRANSMIT_DATA = 0x46
    ESSI1_TRANSMIT_DATA_WITH_EXCEPTION_STATUS = 0x48
    ESSI1_TRANSMIT_LAST_SLOT = 0x4A
    RESERVED_4C = 0x4C
    RESERVED_4E = 0x4E

    SCI_RECEIVE_DATA = 0x50
    SCI_RECEIVE_DATA_WITH_EXCEPTION_STATUS = 0x52
    SCI_TRANSMIT_DATA = 0x54
    SCI_IDLE_LINE = 0x56
    SCI_TIMER = 0x58
    RESERVED_5A = 0x5A
    RESERVED_5C = 0x5C
    RESERVED_5E = 0x5E

    HOST_RECEIVE_DATA_FULL = 0x60
    HOST_TRANSMIT_DATA_EMPTY = 0x62
    HOST_COMMAND_DEFAULT = 0x64
    RESERVED_66 = 0x66
    RESERVED_FE = 0xFE


@unique
class InterruptVector56362(IntEnum):
    """Peripheral vectors of the 56362."""

    RESERVED_24 = 0x24
    RESERVED_26 = 0x26
    DAX_UNDERRUN_ERROR = 0x28
    DAX_BLOCK_TRANSFERRED = 0x2A
    RESERVED_2C = 0x2C
    DAX_AUDIO_DATA_EMPTY = 0x2E
    ESAI_RECEIVE_DATA = 0x30
    ESAI_RECEIVE_EVEN_DATA = 0x32
    ESAI_RECEIVE_DATA_WITH_EXCEPTION_STATUS = 0x34
    ESAI_RECEIVE_LAST_SLOT = 0x36
    ESAI_TRANSMIT_DATA = 0x38
    ESAI_TRANSMIT_EVEN_DATA = 0x3A
    ESAI_TRANSMIT_DATA_WITH_EXCEPTION_STATUS = 0x3C
    ESAI_TRANSMIT_LAST_SLOT = 0x3E
    SHI_TRANSMIT_DATA = 0x40
    SHI_TRANSMIT_UNDERRUN_ERROR = 0x42
    SHI_RECEIVE_FIFO_NOT_EMPTY = 0x44
    RESERVED_46 = 0x46
    SHI_RECEIVE_FIFO_FULL = 0x48
    SHI_RECEIVE_OVERRUN_ERROR = 0x4A
    SHI_BUS_ERROR = 0x4C
    RESERVED_50 = 0x50
    RESERVED_52 = 0x52
    TIMER0_COMPARE = 0x54
    TIMER0_OVERFLOW = 0x56
    TIMER1_COMPARE = 0x58
    TIMER1_OVERFLOW = 0x5A
    TIMER2_COMPARE = 0x5C
    TIMER2_OVERFLOW = 0x5E
    HOST_RECEIVE_DATA_FULL = 0x60
    HOST_TRANSMIT_DATA_EMPTY = 0x62
    HOST_COMMAND = 0x64
    RESERVED_66 = 0x66