"""Fixed-size ring of message slots shared between worker threads."""

from __future__ import annotations

_LENGTH_PREFIX = 4


class QueueFull(Exception):
    """Raised when a record is inserted into a ring with no free slot."""


class MessageRing:
    """Single-producer, single-consumer ring of ``block_num`` message slots.

    Writing is two steps: :meth:`insert_record` fills the current write slot
    and :meth:`advance_write` publishes it. Reading is likewise two steps:
    :meth:`front_record` peeks at the oldest published record and
    :meth:`advance_read` releases its slot. One slot always stays free, so the
    ring holds at most ``block_num - 1`` published records.
    """

    def __init__(self, block_num: int, block_size: int):
        if block_num <= 0:
            raise ValueError("block_num must be positive")
        if block_size < _LENGTH_PREFIX:
            raise ValueError(f"block_size must be at least {_LENGTH_PREFIX}")
        self._block_num = block_num
        self._block_size = block_size
        self._slots: list[bytes] = [b""] * block_num
        self._widx = 0
        self._ridx = 0

    @property
    def block_num(self) -> int:
        """Number of slots in the ring."""
        return self._block_num

    @property
    def block_size(self) -> int:
        """Size of one slot in bytes, including the 4-byte length prefix."""
        return self._block_size

    @property
    def max_payload(self) -> int:
        """Largest payload one slot can hold."""
        return self._block_size - _LENGTH_PREFIX

    def unused_block_num(self) -> int:
        """Number of slots not holding a published record."""
        if self._ridx == self._widx:
            return self._block_num
        return (self._ridx - self._widx + self._block_num) % self._block_num

    def __len__(self) -> int:
        return self._block_num - self.unused_block_num()

    def insert_record(self, payload: bytes) -> None:
        """Copy ``payload`` into the current write slot without publishing it.

        Raises :class:`QueueFull` when no slot is free and ``ValueError``
        when the payload does not fit in one slot.
        """
        if not (self.unused_block_num() > 1 or self._ridx == self._widx):
            raise QueueFull("message ring is full")
        if len(payload) > self.max_payload:
            raise ValueError(
                f"payload of {len(payload)} bytes exceeds slot capacity "
                f"of {self.max_payload} bytes"
            )
        self._slots[self._widx] = bytes(payload)

    def front_record(self) -> bytes | None:
        """Return the oldest published record, or ``None`` when empty."""
        unused = self.unused_block_num()
        if 0 < unused < self._block_num:
            return self._slots[self._ridx]
        return None

    def advance_read(self) -> None:
        """Release the slot of the oldest record."""
        self._ridx = (self._ridx + 1) % self._block_num

    def advance_write(self) -> None:
        """Publish the record in the current write slot."""
        self._widx = (self._widx + 1) % self._block_num