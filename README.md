# ultrakit

Small building blocks with no dependencies, written as plain Python objects.
They cover fixed-width integer arithmetic with C wrap-around rules, a
`printf`-style formatter, bounded message queues, delta-ordered timers,
fixed-size buffer pools, sprite state and a few game-state models.

## Modules

- `ultrakit.arith` covers 32- and 64-bit integer helpers.
  - `ldiv` and `lldiv` return a `DivResult(quot, rem)`.
  - Further helpers: `ll_div`, `ll_rem`, `ll_mod` (the result takes the sign of the divisor), `ll_mul`, `ull_div`, `ull_rem` and `ull_divremi`.
  - Shifts: `ll_lshift`, `ll_rshift` and `ull_rshift`. They use the low six bits of the count.
  - Bit-field access on lists of 64-bit words, with bit 0 as the most significant bit: `ll_bit_extract`, `ull_bit_extract` and `ll_bit_insert`.
  - Float/integer conversions: `d_to_ll`, `f_to_ll`, `d_to_ull`, `f_to_ull`, `ll_to_d`, `ll_to_f`, `ull_to_d` and `ull_to_f`. A NaN raises `ValueError`, and an infinity or an out-of-range value raises `OverflowError`.
- `ultrakit.printf` provides two functions.
  - `sprintf(fmt, *args)` returns the formatted string.
  - `xprintf(write, fmt, *args)` passes each piece of output to `write` and returns the number of characters written. It stops early if `write` returns `False`.
  - Supported conversions: `d i u o x X c s p n e E f g G %`.
  - Supported flags: `space + - # 0`. Width and precision may be given as `*`.
  - Length modifiers: `h`, `l`, `L` and `ll`. Plain and `l` integers are 32 bits wide.
  - `%n` takes a callable that receives the count.
  - Too few arguments raise `TypeError`. A format that ends inside a conversion raises `ValueError`.
- `ultrakit.mesgqueue` provides a queue and an event table.
  - `MessageQueue(capacity)` is thread-safe. It has `send`, `recv` and `jam`, which puts a message at the front. Each takes a `block` flag. Non-blocking calls that would have to wait raise `WouldBlock`.
  - `EventTable` maps events to a `(queue, msg)` pair through `set` and `get`.
- `ultrakit.timers` provides `TimerService(clock, set_compare=None)`, which keeps pending `Timer` objects in expiry order.
  - Methods: `set_timer`, `insert`, `stop` (raises `ValueError` if the timer is not pending) and `interrupt`.
  - `interrupt` posts expired timers' messages to their queues and re-arms periodic timers.
  - `get_time` and `set_time` read and set the time.
- `ultrakit.region` provides `Region(length, buffer_size, align_size=0)`, a pool of equal, aligned buffers.
  - Buffers are identified by byte offsets into `memory`.
  - `malloc()` returns an offset and raises `MemoryError` when the pool is exhausted. `free(offset)` gives the buffer back.
- `ultrakit.sprite` provides `Sprite` with `SpriteAttr` flags.
  - Methods: `set_attribute`, `clear_attribute`, `hide`, `show`, `color`, `scale`, `move` and `set_z`.
  - `scale(1.0, 1.0)` clears `SpriteAttr.SCALE`.
- `ultrakit.actor` provides `Actor`. `update_position(delta_time)` adds velocity times `delta_time`, plus the acceleration, to the position.
- `ultrakit.player` provides `SaveData`, `Player`, `Item` and `Sound`.
  - `Player` has `modify_health`, `is_health_low`, `add_magic`, `refill_magic` and `consume_magic`.
  - Sounds are reported to an optional `play_sound` callable.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ultrakit.printf import sprintf
from ultrakit.arith import lldiv, ll_mod

sprintf("%05d|%-6s|%#x|%.3e", 42, "ok", 255, 1234.5)
lldiv(-7, 2)      # DivResult(quot=-3, rem=-1)
ll_mod(-7, 3)     # 2
```

```python
from ultrakit.mesgqueue import MessageQueue, WouldBlock

q = MessageQueue(2)
q.send("a", False)
q.jam("first", False)
q.recv(False)     # "first"
q.recv(False)     # "a"
try:
    q.recv(False)
except WouldBlock:
    pass
```

```python
from ultrakit.mesgqueue import MessageQueue
from ultrakit.timers import Timer, TimerService

now = [0]
service = TimerService(clock=lambda: now[0])
q = MessageQueue(4)
service.set_timer(Timer(), 100, 0, q, "tick")
now[0] = 150
service.interrupt()
q.recv(False)     # "tick"
```

```python
from ultrakit.region import Region

pool = Region(length=1024, buffer_size=60)   # buffers of 64 bytes
offset = pool.malloc()
pool.free(offset)
```

## What it does not do

- Timers do not run by themselves. The caller supplies the clock and calls `TimerService.interrupt` when the compare value is reached.
- `Sprite` holds state only. It builds no display lists and draws nothing.
- There is no thread scheduler. `MessageQueue` blocks on ordinary Python threads.
- The package has no command-line program.