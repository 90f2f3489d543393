# sidez

Pure-Python building blocks for playing Commodore 64 SID tunes. The package
has no dependencies outside the standard library.

## What is inside

- `sidez.md5.MD5`: an incremental MD5 used to fingerprint tune data.
  Call `append(data)` as often as needed, then `finish()`, then read
  `digest()` (16 bytes) or `hexdigest()` (32 lower-case hex digits).
  `reset()` starts over.
- `sidez.sidid.SidId`: identifies the player routine a tune was written
  with. Load a signature file with `load_config(filename)`, or pass its text
  to `load_config_text(text)`; both return `True` if any routine was loaded.
  A line with one word names a routine, a line with several words is one of
  its signatures: hexadecimal bytes, `??` for any byte, `AND` to let any
  number of bytes come between two parts, and `END` (ignored). Then
  `find_player_routines(data)` returns the names of every routine with a
  matching signature, in file order.
- `sidez.chip_selector.ChipSelector`: picks 6581 filter, digi and
  combined-waveform settings (`ChipSettings`, with `CombinedWaveformStrength`)
  for a tune from the `/MUSICIANS/` folder it lives in. The longest matching
  author folder wins, and some files by an author are mapped to the profile
  of another author. The built-in table is `DEFAULT_PROFILES`; pass your own
  mapping to the constructor or to `set_profiles()`. Tunes outside such a
  folder get an empty name and default settings.
- `sidez.tune_info.SidTuneInfo`: a dataclass holding the metadata that
  describes a loaded tune.
- `sidez.flags.Flags`: the 6510 processor status register, with `pack()`
  and `unpack(sr)` to convert to and from a byte.
- `sidez.cpu_alu`: the CPU's arithmetic, including NMOS decimal mode
  (`add_with_carry`, `subtract_with_carry`, `and_rotate_right`, `compare`).
- `sidez.opcodes`: named values of every opcode, documented and
  undocumented.
- `sidez.cpu_table`: `build_instruction_table()` returns the per-cycle
  table of `CycleStep` entries, eight slots per opcode.
- `sidez.cpu_ops.InstructionSet`: registers and every instruction cycle,
  reading and writing a flat 64 KiB `memory`.
- `sidez.cpu.MOS6510`: a cycle-exact 6510 core with RDY, IRQ, NMI and
  reset handling (`set_rdy`, `trigger_irq`, `clear_irq`, `trigger_nmi`,
  `trigger_rst`, `reset`). It runs on an event scheduler and a memory bus
  that you supply, and raises `HaltInstruction` on an opcode that locks up
  the processor.

## Installing

```
pip install .
```

## Examples

Fingerprinting data and choosing a chip profile:

```python
from sidez.md5 import MD5
from sidez.chip_selector import ChipSelector

md5 = MD5()
md5.append(b"tune data")
md5.finish()
print(md5.hexdigest())

selector = ChipSelector()
name, settings = selector.get_chip_profile(
    "/HVSC/MUSICIANS/H/Hubbard_Rob/", "Commando.sid"
)
print(name, settings.flt_cox)   # Rob Hubbard 0.35
```

Running the CPU. The scheduler needs `schedule(event, cycles, phase=None)`
and `cancel(event)`; the bus needs `cpu_read(addr)` and
`cpu_write(addr, data)`. This minimal scheduler counts time in half cycles,
PHI1 on even and PHI2 on odd ones:

```python
from sidez.cpu import MOS6510, HaltInstruction


class Scheduler:
    def __init__(self):
        self.now = 0
        self._pending = []

    def schedule(self, event, cycles, phase=None):
        self.cancel(event)
        when = self.now + 2 * cycles
        if phase is not None:
            when += (self.now & 1) ^ phase
        self._pending.append((when, event))
        self._pending.sort(key=lambda item: item[0])

    def cancel(self, event):
        self._pending = [p for p in self._pending if p[1] != event]

    def step(self):
        self.now, event = self._pending.pop(0)
        event()


class Ram:
    def __init__(self):
        self.memory = bytearray(0x10000)

    def cpu_read(self, addr):
        return self.memory[addr]

    def cpu_write(self, addr, data):
        self.memory[addr] = data


ram = Ram()
# LDA #$05 ; STA $0200 ; then a locking opcode
ram.memory[0x1000:0x1006] = bytes([0xA9, 0x05, 0x8D, 0x00, 0x02, 0x02])
ram.memory[0xFFFC:0xFFFE] = bytes([0x00, 0x10])   # reset vector -> $1000

scheduler = Scheduler()
cpu = MOS6510(scheduler, ram)
cpu.reset()
try:
    while True:
        scheduler.step()
except HaltInstruction:
    pass

print(ram.memory[0x0200], cpu.a)   # 5 5
```

## What it does not do

The package does not load tune files, emulate the SID sound chip, the CIA
timers or the rest of the C64, or produce audio. It provides no event
scheduler and no system bus of its own, and has no command-line program.
`SidTuneInfo` is a plain record: nothing in the package fills it in.

## Running the tests

```
pip install .[test]
pytest
```