# usracc

Building blocks for a user-access gateway that sits between handset
applications and a service-logic tier. The package uses only the standard
library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `usracc.bcd` | `str_to_bcd(digits, size)` packs a digit string into nibble-swapped BCD, an odd last digit padded with `0xF`; `ntoh64(value)` reverses the byte order of a 64-bit value. |
| `usracc.framing` | `NifHeader`, the fixed header of eight big-endian 32-bit fields, with `pack()` and `unpack(data)`; `FrameReassembler.feed(data)` returns every complete `(header, body)` pair and keeps the rest in `pending`. |
| `usracc.msg_queue` | `MessageRing`, a fixed ring of slots with separate write (`insert_record`, `advance_write`) and read (`front_record`, `advance_read`) steps. `QueueFull` is raised when no slot is free, `ValueError` when a payload exceeds `max_payload`. |
| `usracc.timer` | `IntervalTimer`, whose start time is rounded down to a multiple of its interval and which reports expiry once per start. |
| `usracc.block_pool` | `BlockPool` hands out fixed-size `Block` objects with `acquire()` and takes them back with `release()` in first-in, first-out order; `release_all()` frees and zeroes them all. |
| `usracc.info_mem` | `TransactionRegistry` maps transaction ids to subscriber numbers and sequence numbers; `LogicConnManager` keeps a `LogicConnInfo` per service-logic module id. |
| `usracc.connection` | `CollectionHandler` wraps a socket with exact-length `recvn(size)` and `sendn(data)`; `ConnectionClosed` is raised when the peer goes away or the socket fails. |
| `usracc.file_writer` | `FileWriter` creates or opens a file without truncating it, with `append`, `write_at` and `length`; usable as a context manager. |
| `usracc.stopper` | `LoopStopper` sets its `stopped` flag on SIGINT or SIGTERM and ignores SIGHUP and SIGPIPE. |
| `usracc.worker` | `Worker`, an abstract base for a task whose `svc()` runs in its own thread, with `start`, `cancel`, `cancelled` and `join`. |

## Examples

Encoding a number:

```python
from usracc.bcd import str_to_bcd

str_to_bcd("13800", 8)   # b"1\x08\xf0\x00\x00\x00\x00\x00"
```

Reassembling frames from a stream:

```python
from usracc.framing import FrameReassembler, NifHeader

frame = NifHeader(invoke=1, seq=7, length=3).pack() + b"abc"

reassembler = FrameReassembler()
assert reassembler.feed(frame[:10]) == []
for header, body in reassembler.feed(frame[10:]):
    print(header.invoke, header.seq, body)   # 1 7 b'abc'
```

A bounded message ring:

```python
from usracc.msg_queue import MessageRing

ring = MessageRing(block_num=16, block_size=256)
ring.insert_record(b"hello")
ring.advance_write()
payload = ring.front_record()   # b"hello"
ring.advance_read()
```

An interval timer driven by explicit timestamps:

```python
from usracc.timer import IntervalTimer

timer = IntervalTimer(60)
timer.begin(1000)              # start aligned down to 960
timer.expired(1020)            # False
timer.expired(1021)            # True, and the timer stops
timer.reset(1021)
```

## What the package does not do

There is no command to run and no server. The package does not accept
connections, talk to the service-logic tier, keep a subscriber table or
write to a database; it provides the pieces such a gateway is built from,
and the program that wires them together is left to the user.