"""Signal handling that tells the main loop when to stop."""

from __future__ import annotations

import signal

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)
_IGNORED_SIGNAL_NAMES = ("SIGHUP", "SIGPIPE")


class LoopStopper:
    """Installs handlers so that SIGINT and SIGTERM request a stop.

    SIGHUP and SIGPIPE are ignored where the platform has them. Must be
    created in the main thread.
    """

    def __init__(self):
        self._stopped = False
        for signum in _STOP_SIGNALS:
            signal.signal(signum, self.handle_signal)
        for name in _IGNORED_SIGNAL_NAMES:
            signum = getattr(signal, name, None)
            if signum is not None:
                signal.signal(signum, signal.SIG_IGN)

    @property
    def stopped(self) -> bool:
        """Whether a stop signal has been received."""
        return self._stopped

    def handle_signal(self, signum, frame) -> None:
        """Mark the loop as stopped when ``signum`` is SIGINT or SIGTERM."""
        if signum in _STOP_SIGNALS:
            self._stopped = True