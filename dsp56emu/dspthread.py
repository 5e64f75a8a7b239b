"""Runs a DSP core on a background thread."""

from __future__ import annotations

import threading
import time

from .logsink import log_to_console

BATCH_SIZE = 128
IPS_STEP = 0x1000000


class DspThread:
    """Calls ``dsp.exec()`` in batches until joined.

    ``dsp`` must provide ``exec()`` and ``instruction_counter()``. Each batch
    runs with ``mutex`` held, so other threads can pause the core by taking it.
    """

    def __init__(self, dsp) -> None:
        self.dsp = dsp
        self.mutex = threading.Lock()
        self.ips = 0
        self._running = threading.Event()
        self._running.set()
        self._thread: threading.Thread | None = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def join(self) -> None:
        """Stop the core after the current batch and wait for the thread."""
        thread = self._thread
        if thread is None:
            return
        self._running.clear()
        thread.join()
        self._thread = None

    def __enter__(self) -> "DspThread":
        return self

    def __exit__(self, *args) -> None:
        self.join()

    def _run(self) -> None:
        instructions = 0
        counter = 0
        started = time.perf_counter()

        while self._running.is_set():
            with self.mutex:
                begin = self.dsp.instruction_counter()
                for _ in range(BATCH_SIZE):
                    self.dsp.exec()
                instructions += self.dsp.instruction_counter() - begin
                counter += BATCH_SIZE

            if counter & (IPS_STEP - 1) == 0:
                now = time.perf_counter()
                ms = int((now - started) * 1000)
                if ms > 0:
                    self.ips = instructions // ms
                instructions = 0
                started = now
                log_to_console(f"IPS: {self.ips}k")