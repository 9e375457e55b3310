"""Network message header and stream reassembly for application requests."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_HEADER_FORMAT = "!8I"
HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)


@dataclass(frozen=True)
class NifHeader:
    """Fixed header preceding every message; all fields are big-endian uint32."""

    head: int = 0
    d_ip: int = 0
    s_ip: int = 0
    version: int = 0
    invoke: int = 0
    dialog: int = 0
    seq: int = 0
    length: int = 0

    SIZE = HEADER_SIZE

    def pack(self) -> bytes:
        """Return the header in wire order."""
        return struct.pack(
            _HEADER_FORMAT,
            self.head,
            self.d_ip,
            self.s_ip,
            self.version,
            self.invoke,
            self.dialog,
            self.seq,
            self.length,
        )

    @classmethod
    def unpack(cls, data) -> "NifHeader":
        """Parse a header from the start of ``data``; extra bytes are ignored."""
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"need {HEADER_SIZE} bytes for a header, got {len(data)}"
            )
        return cls(*struct.unpack_from(_HEADER_FORMAT, data))


class FrameReassembler:
    """Splits a byte stream into complete ``(header, body)`` messages.

    Incomplete data is kept until later calls to :meth:`feed` complete it.
    """

    BUFFER_SIZE = 4000

    def __init__(self):
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet part of a complete message."""
        return bytes(self._buffer)

    def feed(self, data: bytes) -> list[tuple[NifHeader, bytes]]:
        """Add received bytes and return every message now complete, in order.

        Raises ``ValueError`` when a message cannot fit in the receive buffer;
        the buffered data is discarded in that case.
        """
        self._buffer.extend(data)
        frames: list[tuple[NifHeader, bytes]] = []
        while len(self._buffer) >= HEADER_SIZE:
            header = NifHeader.unpack(self._buffer)
            end = HEADER_SIZE + header.length
            if end > self.BUFFER_SIZE:
                self._buffer.clear()
                raise ValueError(
                    f"message of {header.length} bytes exceeds the "
                    f"{self.BUFFER_SIZE}-byte receive buffer"
                )
            if len(self._buffer) < end:
                break
            frames.append((header, bytes(self._buffer[HEADER_SIZE:end])))
            del self._buffer[:end]
        return frames