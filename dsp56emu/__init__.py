"""Components of a DSP 56300 family emulator: memory, OMF loading, AGU, instruction cache, audio and host peripherals."""

__version__ = "0.1.0"