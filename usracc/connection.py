"""Blocking helpers for one accepted client connection."""

from __future__ import annotations

import logging
import socket

_log = logging.getLogger(__name__)


class ConnectionClosed(Exception):
    """Raised when the peer has closed the connection or the socket failed."""


class CollectionHandler:
    """Wraps a client socket with exact-length receive and send helpers.

    Subclasses add the message handling; this class only moves bytes.
    """

    def __init__(self, sock: socket.socket):
        self._sock = sock
        self.client_ip: int = 0
        self.client_port: int = 0

    @property
    def sock(self) -> socket.socket:
        """The underlying socket."""
        return self._sock

    def fileno(self) -> int:
        """File descriptor of the client socket."""
        return self._sock.fileno()

    def recvn(self, size: int) -> bytes:
        """Receive up to ``size`` bytes, looping until all have arrived.

        On a non-blocking socket the bytes available so far are returned as
        soon as a read would block. Raises :class:`ConnectionClosed` when the
        peer closes the connection or the socket reports an error.
        """
        received = bytearray()
        while len(received) < size:
            try:
                chunk = self._sock.recv(size - len(received))
            except InterruptedError:
                continue
            except BlockingIOError:
                break
            except OSError as exc:
                _log.error("recvn failed on fd %d: %s", self.fileno(), exc)
                raise ConnectionClosed(str(exc)) from exc
            if not chunk:
                _log.error("recvn: peer closed fd %d", self.fileno())
                raise ConnectionClosed("peer closed the connection")
            received.extend(chunk)
        return bytes(received)

    def sendn(self, data: bytes) -> int:
        """Send ``data``, looping until every byte is written.

        Returns the number of bytes sent, which is less than ``len(data)``
        only when a non-blocking socket would block. Raises
        :class:`ConnectionClosed` when the socket fails.
        """
        view = memoryview(data)
        sent = 0
        while sent < len(view):
            try:
                count = self._sock.send(view[sent:])
            except InterruptedError:
                continue
            except BlockingIOError:
                break
            except OSError as exc:
                raise ConnectionClosed(str(exc)) from exc
            if count == 0:
                raise ConnectionClosed("socket refused further data")
            sent += count
        return sent