"""In-memory bookkeeping of transactions and service-logic connections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TransactionRegistry:
    """Maps transaction ids to the subscriber number and sequence number."""

    def __init__(self):
        self._msisdn: dict[int, str] = {}
        self._seq: dict[int, int] = {}

    def add_msisdn(self, tid: int, msisdn: str) -> None:
        """Record the subscriber for ``tid``, replacing any earlier one."""
        self._msisdn[tid] = msisdn

    def remove_msisdn(self, tid: int) -> None:
        """Forget the subscriber for ``tid``; unknown ids are ignored."""
        self._msisdn.pop(tid, None)

    def find_msisdn(self, tid: int) -> str:
        """Return the subscriber for ``tid``, or an empty string if unknown."""
        return self._msisdn.get(tid, "")

    def add_seq(self, tid: int, seq: int) -> None:
        """Record the sequence number for ``tid``, replacing any earlier one."""
        self._seq[tid] = seq

    def remove_seq(self, tid: int) -> None:
        """Forget the sequence number for ``tid``; unknown ids are ignored."""
        self._seq.pop(tid, None)

    def find_seq(self, tid: int) -> int:
        """Return the sequence number for ``tid``, or 0 if unknown."""
        return self._seq.get(tid, 0)


@dataclass
class LogicConnInfo:
    """State of the connection to one service-logic module."""

    client: Any = None
    used: bool = False
    reconnect_cnt: int = 0


class LogicConnManager:
    """Fixed table of service-logic connections indexed by module id."""

    def __init__(self, count: int):
        if count < 0:
            raise ValueError("count must not be negative")
        self._conns = [LogicConnInfo() for _ in range(count)]

    @property
    def count(self) -> int:
        """Number of module slots."""
        return len(self._conns)

    @property
    def conns(self) -> list[LogicConnInfo]:
        """All connection slots, in module id order."""
        return list(self._conns)

    def _slot(self, mod_id: int) -> LogicConnInfo:
        if not 0 <= mod_id < len(self._conns):
            raise IndexError(f"module id {mod_id} out of range")
        return self._conns[mod_id]

    def update(self, mod_id: int, client: Any) -> None:
        """Attach ``client`` to module ``mod_id`` and count the reconnection."""
        info = self._slot(mod_id)
        info.client = client
        info.used = True
        info.reconnect_cnt += 1

    def remove(self, mod_id: int) -> None:
        """Detach the client of module ``mod_id``."""
        info = self._slot(mod_id)
        info.client = None
        info.used = False

    def get(self, mod_id: int) -> LogicConnInfo | None:
        """Return the slot of ``mod_id``, or ``None`` when out of range."""
        if not 0 <= mod_id < len(self._conns):
            return None
        return self._conns[mod_id]