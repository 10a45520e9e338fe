"""Input events and the event sources that produce them.

An event source is an async iterator with exactly one consumer. It never
ends on its own: a closed or failing input stream shows up as an
:class:`ErrorEvent` carrying the cause.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from dataclasses import dataclass
from typing import Protocol, Union

from pi.prompts.keys import KeyEvent, parse_key
from pi.prompts.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    rows: int


@dataclass(frozen=True)
class ErrorEvent:
    cause: BaseException


Event = Union[KeyEvent, ResizeEvent, ErrorEvent]


class EventSource(Protocol):
    """Interface for a lazy, non-restartable stream of input events."""

    def __aiter__(self) -> EventSource: ...

    async def __anext__(self) -> Event: ...

    def close(self) -> None: ...


class StdinEventSource:
    """Event source backed by the process's stdin and ``SIGWINCH``.

    Reading starts lazily on the first ``__anext__`` and registers a reader
    on the running asyncio loop. Raw bytes go through a
    :class:`StdinBuffer` so escape sequences split across reads are
    reassembled before decoding.
    """

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._buffer = StdinBuffer(timeout=0.01)
        self._buffer.on_data(self._on_sequence)
        self._loop: asyncio.AbstractEventLoop | None = None
        self._prev_sigwinch_handler: signal.Handlers | None = None
        self._closed = False

    def __aiter__(self) -> StdinEventSource:
        return self

    async def __anext__(self) -> Event:
        if self._closed:
            raise StopAsyncIteration
        if self._loop is None:
            self._start()
        return await self._queue.get()

    def close(self) -> None:
        """Stop reading stdin and restore the previous resize handler."""
        if self._closed:
            return
        self._closed = True
        self._buffer.clear()

        if self._loop is not None:
            try:
                self._loop.remove_reader(self._fd)
            except (RuntimeError, ValueError):
                # Loop already closed
                pass
            self._loop = None

        if self._prev_sigwinch_handler is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch_handler)
            self._prev_sigwinch_handler = None

    # -- private -------------------------------------------------------------

    def _start(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(self._fd, self._on_readable)

        if hasattr(signal, "SIGWINCH"):
            self._prev_sigwinch_handler = signal.getsignal(signal.SIGWINCH)
            signal.signal(signal.SIGWINCH, self._on_sigwinch)

    def _on_readable(self) -> None:
        try:
            raw = os.read(self._fd, 4096)
        except OSError as exc:
            self._queue.put_nowait(ErrorEvent(exc))
            return

        if not raw:
            # EOF: nothing more will ever arrive on this stream
            self._loop.remove_reader(self._fd)
            self._queue.put_nowait(ErrorEvent(EOFError("stdin closed")))
            return

        self._buffer.process(raw.decode("utf-8", errors="replace"))

    def _on_sequence(self, data: str) -> None:
        event = parse_key(data)
        if event is None:
            logger.debug("ignoring unrecognized input %r", data)
            return
        self._queue.put_nowait(event)

    def _on_sigwinch(self, signum: int, frame: object) -> None:
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (ValueError, OSError):
            return
        self._queue.put_nowait(ResizeEvent(size.columns, size.lines))
