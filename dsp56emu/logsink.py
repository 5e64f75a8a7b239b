"""Console and file logging helpers."""

from __future__ import annotations

import queue
import sys
import threading
from datetime import datetime
from pathlib import Path

_STOP = object()


def hex_word(value: int, width: int = 6) -> str:
    """Format a value as zero-padded lower-case hexadecimal."""
    return f"{value:0{width}x}"


def build_log_filename(now: datetime | None = None) -> str:
    """Return a log file name built from the given (or current) local time."""
    moment = now if now is not None else datetime.now()
    return moment.strftime("%Y-%m-%d-%H-%M-%S") + ".log"


def log_to_console(message: str) -> None:
    """Write one line to the error stream."""
    sys.stderr.write(message + "\n")


class FileLog:
    """Appends log lines to a file from a background writer thread.

    Every line is echoed to the console as well. The writer starts with the
    first line written.
    """

    def __init__(self, path: str | Path | None = None, *, echo: bool = True) -> None:
        self.path = Path(path) if path is not None else Path(build_log_filename())
        self.echo = echo
        self._queue: queue.Queue = queue.Queue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._closed = False

    def write(self, message: str) -> None:
        """Queue a line for the file and echo it to the console."""
        if self._closed:
            raise ValueError("log is closed")
        if self.echo:
            log_to_console(message)
        self._queue.put(message)
        with self._lock:
            if self._thread is None:
                self._thread = threading.Thread(target=self._run, daemon=True)
                self._thread.start()

    def close(self) -> None:
        """Flush all pending lines and stop the writer."""
        with self._lock:
            self._closed = True
            thread = self._thread
            self._thread = None
        if thread is not None:
            self._queue.put(_STOP)
            thread.join()

    def __enter__(self) -> "FileLog":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _run(self) -> None:
        with open(self.path, "a", encoding="utf-8") as out:
            while True:
                batch = [self._queue.get()]
                while True:
                    try:
                        batch.append(self._queue.get_nowait())
                    except queue.Empty:
                        break
                for item in batch:
                    if item is _STOP:
                        out.flush()
                        return
                    out.write(item + "\n")
                out.flush()