"""Pool of fixed-size memory blocks handed out from a free list."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class Block:
    """One block of the pool."""

    index: int
    data: bytearray = field(repr=False)
    used: bool = False


class BlockPool:
    """Preallocated blocks of ``block_len`` bytes, reused first in, first out."""

    def __init__(self, block_count: int, block_len: int):
        if block_count <= 0:
            raise ValueError("block_count must be positive")
        if block_len < 0:
            raise ValueError("block_len must not be negative")
        self._block_len = block_len
        self._blocks = [Block(i, bytearray(block_len)) for i in range(block_count)]
        self._free: deque[Block] = deque(self._blocks)
        self._used_count = 0

    @property
    def block_count(self) -> int:
        """Total number of blocks."""
        return len(self._blocks)

    @property
    def block_len(self) -> int:
        """Size of each block in bytes."""
        return self._block_len

    @property
    def used_count(self) -> int:
        """Number of blocks currently handed out."""
        return self._used_count

    def acquire(self) -> Block:
        """Take the block at the head of the free list.

        Raises ``LookupError`` when every block is in use.
        """
        if not self._free:
            raise LookupError("no free block left in the pool")
        block = self._free.popleft()
        block.used = True
        self._used_count += 1
        return block

    def release(self, block: Block) -> None:
        """Return ``block`` to the tail of the free list."""
        if not (0 <= block.index < len(self._blocks)) or self._blocks[block.index] is not block:
            raise ValueError("block does not belong to this pool")
        if not block.used:
            raise ValueError(f"block {block.index} is already free")
        block.used = False
        self._free.append(block)
        self._used_count -= 1

    def release_all(self) -> None:
        """Free and zero every block, restoring the initial order."""
        for block in self._blocks:
            block.used = False
            block.data[:] = bytes(self._block_len)
        self._free = deque(self._blocks)
        self._used_count = 0

    def block(self, index: int) -> Block:
        """Return the block at ``index`` whether or not it is in use."""
        if not 0 <= index < len(self._blocks):
            raise IndexError(f"block index {index} out of range")
        return self._blocks[index]