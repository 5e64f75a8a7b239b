# dsp56emu

Building blocks for emulating a DSP 56300 family processor (56303 / 56362):
24-bit word memory with X, Y and P spaces, the address generation unit's
register update rules, an instruction cache model, loading of OMF text
images, and the audio and host peripherals (ESAI, ESSI, HDI08, HI08).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsp56emu.memory` | `Memory`, `MemArea`, `MemoryValidator`, `DefaultMemoryValidator`, `Symbol` |
| `dsp56emu.omfloader` | `OmfLoader` and `parse_24bit` for OMF text images |
| `dsp56emu.agu` | `update_address_register`, `calc_modulo_mask`, `sign_extend`, `bitreverse24` |
| `dsp56emu.instructioncache` | `InstructionCache`: sector tags, locking and LRU order |
| `dsp56emu.audio` | `Audio`, `SampleFifo`, `float_to_dsp`, `dsp_to_float` |
| `dsp56emu.esai` | `Esai` (56362 serial audio interface), `PeripheralHost`, register bit enums |
| `dsp56emu.essi` | `Essi` (56303 serial interface), `EssiPeripherals`, register enums |
| `dsp56emu.host` | `Hdi08` and `Hi08` host interfaces |
| `dsp56emu.interrupts` | `InterruptVector`, `InterruptVector56303`, `InterruptVector56362` |
| `dsp56emu.dspthread` | `DspThread`, runs a core's `exec()` in a background thread |
| `dsp56emu.fastmath` | fast `exp`/`pow2` approximations, `clamp`, `lerp` and the like |
| `dsp56emu.logsink` | `log_to_console`, `hex_word`, `FileLog` |
| `dsp56emu.errors` | `DspError`, `NotImplementedFeatureError`, `MemoryAccessError`, `IllegalInstructionError`, `show_assert` |

## Examples

Memory and address arithmetic:

```python
from dsp56emu.memory import Memory, MemArea, DefaultMemoryValidator
from dsp56emu.agu import update_address_register

mem = Memory(DefaultMemoryValidator(), 0x1000)
mem.set(MemArea.X, 0x10, 0x123456)
assert mem.get(MemArea.X, 0x10) == 0x123456

# modulo-8 addressing: r wraps inside its 8-word block
r = update_address_register(0x107, 1, 7)
assert r == 0x100
```

Values written to memory are masked to 24 bits. Accessing an offset outside
the memory's size raises `MemoryAccessError`; writes to offsets at or above
`0xFF0000` are accepted but not stored. `set_external_memory(address, True)`
redirects X and Y accesses from `address` upward to P memory.

Loading a program image in OMF text form (`_DATA` and `_SYMBOL` records):

```python
from dsp56emu.memory import Memory, MemArea, DefaultMemoryValidator

mem = Memory(DefaultMemoryValidator(), 0x1000)
mem.load_omf("program.lod")
print(mem.get_symbol(MemArea.P, 0x40))
```

`OmfLoader().load_text(text, mem)` and `load_lines(lines, mem)` do the same
for text already in memory.

Converting audio samples between floats and 24-bit fixed point:

```python
from dsp56emu.audio import float_to_dsp, dsp_to_float

word = float_to_dsp(0.5)      # 0x400000
value = dsp_to_float(word)    # 0.5
```

## Attaching peripherals

The peripherals talk to the core through small interfaces that you provide:

- `Esai` takes a `PeripheralHost` with `instruction_counter()` and
  `inject_interrupt(vector)`.
- `Essi` takes an `EssiPeripherals` with `read(address)`,
  `write(address, value)` and `inject_interrupt(vector)`.
- `Hdi08` takes any object with `inject_interrupt(vector)`.
- `DspThread` takes any object with `exec()` and `instruction_counter()`;
  use it as a context manager or call `join()` to stop it.

The sample and host FIFOs block: pushing waits while a FIFO is full and
popping waits while it is empty, so producer and consumer are expected to
run on different threads.

## What this package does not do

It contains no instruction decoder, no execution core and no disassembler,
and no peripheral block that maps register addresses onto the ESAI, ESSI or
host interface methods. Those have to be supplied by the code that uses
these components. `InstructionCache.fetch` reads straight from P memory; the
cache keeps track of sector tags, locks and LRU order but does not hold
fetched words. Multiple wrap-around modulo addressing raises
`NotImplementedFeatureError`. There is no command-line program.