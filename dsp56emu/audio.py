"""Sample conversion and the audio FIFOs shared by the serial audio peripherals."""

from __future__ import annotations

import threading
from collections import deque
from enum import IntEnum
from typing import MutableSequence, Sequence

from .agu import sign_extend
from .fastmath import clamp, floor_int

FLOAT_TO_DSP_SCALE = 8388608.0
DSP_TO_FLOAT_SCALE = 0.00000011920928955078125
DSP_FLOAT_MAX = 8388607.0
DSP_FLOAT_MIN = -8388608.0

FIFO_CAPACITY = 4096


def float_to_dsp(f: float) -> int:
    """Convert a float sample in -1..1 to a 24 bit DSP word."""
    scaled = clamp(f * FLOAT_TO_DSP_SCALE, DSP_FLOAT_MIN, DSP_FLOAT_MAX)
    return floor_int(scaled) & 0x00FFFFFF


def dsp_to_float(d: int) -> float:
    """Convert a 24 bit DSP word to a float sample."""
    return float(sign_extend(d, 24)) * DSP_TO_FLOAT_SCALE


class SampleFifo:
    """A bounded, thread safe FIFO; push waits while full and pop while empty."""

    def __init__(self, capacity: int = FIFO_CAPACITY) -> None:
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._cond = threading.Condition()

    def push(self, value: int) -> None:
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) < self.capacity)
            self._items.append(value)
            self._cond.notify_all()

    def pop(self) -> int:
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) > 0)
            value = self._items.popleft()
            self._cond.notify_all()
            return value

    def clear(self) -> None:
        with self._cond:
            self._items.clear()
            self._cond.notify_all()

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def full(self) -> bool:
        with self._cond:
            return len(self._items) >= self.capacity

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


class FrameSync(IntEnum):
    LEFT = 1
    RIGHT = 0


def _next_frame_sync(value: int) -> int:
    return (value + 1) & 1


class Audio:
    """Moves samples between the host and the DSP's receive and transmit FIFOs."""

    def __init__(self) -> None:
        self.input_fifos = [SampleFifo()]
        self.output_fifos = [SampleFifo() for _ in range(3)]
        self.pending_rx_interrupts = 0
        self.frame_sync_dsp_status = int(FrameSync.LEFT)
        self.frame_sync_dsp_read = int(FrameSync.LEFT)
        self.frame_sync_dsp_write = int(FrameSync.LEFT)
        self.frame_sync_audio = int(FrameSync.LEFT)
        self.latency = 0

    def _fill_latency(self, sample_frames: int, num_dsp_ins: int, latency: int) -> None:
        if latency <= self.latency:
            return
        for _ in range(min(latency - self.latency, sample_frames)):
            for c in range(num_dsp_ins):
                self.input_fifos[c >> 1].push(0)

    def _read_output(self, channel: int) -> int:
        out = channel >> 1
        fifo = self.output_fifos[out]
        if out == 0:
            return fifo.pop()
        if not fifo.empty():
            return fifo.pop()
        return 0

    def process_audio_interleaved(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[MutableSequence[float]],
        sample_frames: int,
        num_dsp_ins: int,
        num_dsp_outs: int,
        latency: int = 0,
    ) -> None:
        """Feed one block of per-channel input and fill per-channel output."""
        if not sample_frames:
            return

        self._fill_latency(sample_frames, num_dsp_ins, latency)

        for i in range(sample_frames):
            for c in range(num_dsp_ins):
                self.input_fifos[c >> 1].push(float_to_dsp(inputs[c][i]))
            self.pending_rx_interrupts += 2

        for i in range(sample_frames):
            if latency > self.latency:
                for c in range(num_dsp_outs):
                    outputs[c][i] = 0.0
                self.latency += 1
            for c in range(num_dsp_outs):
                outputs[c][i] = dsp_to_float(self._read_output(c))

    def process_audio_interleaved_single(
        self,
        inputs: Sequence[float],
        outputs: MutableSequence[float],
        sample_frames: int,
        num_dsp_ins: int,
        num_dsp_outs: int,
        latency: int = 0,
    ) -> None:
        """Like process_audio_interleaved, with flat buffers indexed by channel * frame."""
        if not sample_frames:
            return

        self._fill_latency(sample_frames, num_dsp_ins, latency)

        for i in range(sample_frames):
            for c in range(num_dsp_ins):
                self.input_fifos[c >> 1].push(float_to_dsp(inputs[c * i]))
            self.pending_rx_interrupts += 2

        for i in range(sample_frames):
            if latency > self.latency:
                for c in range(num_dsp_outs):
                    outputs[c * i] = 0.0
                self.latency += 1
            for c in range(num_dsp_outs):
                outputs[c * i] = dsp_to_float(self._read_output(c))

    def process_audio_interleaved_tx0(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[MutableSequence[float]],
        sample_frames: int,
    ) -> None:
        """Stereo in, stereo out on the first transmitter."""
        self.process_audio_interleaved(inputs, outputs, sample_frames, 2, 2)

    def read_rx_sample(self, index: int) -> int:
        """Take the next received word, waiting for one if none is queued."""
        self.frame_sync_dsp_status = self.frame_sync_dsp_read
        self.frame_sync_dsp_read = _next_frame_sync(self.frame_sync_dsp_read)
        return self.input_fifos[index].pop()

    def write_tx_sample(self, index: int, value: int) -> None:
        """Queue a transmitted word, waiting while the FIFO is full."""
        self.frame_sync_dsp_write = _next_frame_sync(self.frame_sync_dsp_write)
        self.output_fifos[index].push(value)