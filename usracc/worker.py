"""Base class for tasks that run their main loop in a separate thread."""

from __future__ import annotations

import abc
import threading


class Worker(abc.ABC):
    """A task with a setup step and a loop run in its own thread.

    Subclasses implement :meth:`open`, which prepares the task and normally
    calls :meth:`start`, and :meth:`svc`, the body of the thread, which
    should return once :attr:`cancelled` becomes true.
    """

    def __init__(self):
        self._thread: threading.Thread | None = None
        self._cancel = threading.Event()
        self._started = False
        self._detached = True

    @abc.abstractmethod
    def open(self):
        """Prepare the task and start it."""

    @abc.abstractmethod
    def svc(self):
        """Run the task; called in the worker thread."""

    @property
    def started(self) -> bool:
        """Whether the thread has been started and not cancelled."""
        return self._started

    @property
    def detached(self) -> bool:
        """Whether the thread was started as a daemon thread."""
        return self._detached

    @property
    def cancelled(self) -> bool:
        """Whether the task has been asked to stop."""
        return self._cancel.is_set()

    @property
    def thread_id(self) -> int | None:
        """Identifier of the worker thread, or ``None`` before it starts."""
        return self._thread.ident if self._thread is not None else None

    def start(self, detached: bool = True) -> None:
        """Start :meth:`svc` in a new thread.

        A detached thread does not keep the process alive at exit.
        Raises ``RuntimeError`` if the thread is already running.
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker thread is already running")
        self._detached = detached
        self._cancel.clear()
        self._thread = threading.Thread(
            target=self.svc, name=type(self).__name__, daemon=detached
        )
        self._thread.start()
        self._started = True

    def cancel(self) -> None:
        """Ask the task to stop."""
        self._cancel.set()
        self._started = False

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the thread to finish; return whether it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()