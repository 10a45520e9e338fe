"""StdinBuffer buffers raw input and emits complete sequences.

Reads from stdin can split an escape sequence across chunks (``ESC`` in one
read, ``[A`` in the next). Without buffering the halves would be decoded as
an Escape press followed by two characters, and Escape aborts a prompt.
"""

from __future__ import annotations

import asyncio
import re
from typing import Callable, Literal

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

_SGR_MOUSE_RE = re.compile(r"^<\d+;\d+;\d+[Mm]$")

SequenceStatus = Literal["complete", "incomplete", "not-escape"]


def _is_complete_sequence(data: str) -> SequenceStatus:
    """Classify *data* as a complete escape sequence or one needing more bytes."""
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    if after_esc.startswith("["):
        if after_esc.startswith("[M"):
            # X10 mouse report: three payload bytes
            return "complete" if len(data) >= 6 else "incomplete"
        return _is_complete_csi_sequence(data)

    if after_esc.startswith("]"):
        if data.endswith(f"{ESC}\\") or data.endswith("\x07"):
            return "complete"
        return "incomplete"

    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key: ESC followed by a single character
    return "complete"


def _is_complete_csi_sequence(data: str) -> SequenceStatus:
    if len(data) < 3:
        return "incomplete"

    payload = data[2:]
    last_char = payload[-1]

    if 0x40 <= ord(last_char) <= 0x7E:
        if payload.startswith("<") and not _SGR_MOUSE_RE.match(payload):
            return "incomplete"
        return "complete"

    return "incomplete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete sequences.

    Returns ``(sequences, remainder)`` where *remainder* is an unfinished
    escape sequence waiting for more input.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _is_complete_sequence(candidate) == "complete":
                sequences.append(candidate)
                pos += seq_end
                break
            seq_end += 1
        else:
            return sequences, remaining

    return sequences, ""


class StdinBuffer:
    """Buffers stdin input and emits complete sequences.

    A lone trailing ``ESC`` is held for *timeout* seconds; if nothing follows
    it is emitted on its own so a plain Escape press still gets through.
    Bracketed paste content is emitted one character at a time with line
    breaks removed, since prompts edit a single line.
    """

    def __init__(self, *, timeout: float = 0.01) -> None:
        self._buffer: str = ""
        self._timeout_handle: asyncio.TimerHandle | None = None
        self._timeout: float = timeout
        self._paste_mode: bool = False
        self._paste_buffer: str = ""

        self._on_data: Callable[[str], None] | None = None

    def on_data(self, callback: Callable[[str], None]) -> None:
        """Set callback for complete sequences."""
        self._on_data = callback

    def _emit(self, data: str) -> None:
        if self._on_data:
            self._on_data(data)

    def _emit_paste(self, text: str) -> None:
        for ch in text.replace("\r", "").replace("\n", ""):
            self._emit(ch)

    def process(self, data: str) -> None:
        """Feed input data into the buffer."""
        self._cancel_timeout()
        self._buffer += data

        if self._paste_mode:
            self._paste_buffer += self._buffer
            self._buffer = ""
            self._finish_paste()
            return

        start_index = self._buffer.find(BRACKETED_PASTE_START)
        if start_index != -1:
            sequences, _ = _extract_complete_sequences(self._buffer[:start_index])
            for sequence in sequences:
                self._emit(sequence)

            self._paste_mode = True
            self._paste_buffer = self._buffer[start_index + len(BRACKETED_PASTE_START):]
            self._buffer = ""
            self._finish_paste()
            return

        sequences, remainder = _extract_complete_sequences(self._buffer)
        self._buffer = remainder

        for sequence in sequences:
            self._emit(sequence)

        if self._buffer:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                # No event loop - flush immediately
                for sequence in self.flush():
                    self._emit(sequence)
            else:
                self._timeout_handle = loop.call_later(self._timeout, self._flush_timeout)

    def _finish_paste(self) -> None:
        end_index = self._paste_buffer.find(BRACKETED_PASTE_END)
        if end_index == -1:
            return

        pasted = self._paste_buffer[:end_index]
        remaining = self._paste_buffer[end_index + len(BRACKETED_PASTE_END):]
        self._paste_mode = False
        self._paste_buffer = ""

        self._emit_paste(pasted)
        if remaining:
            self.process(remaining)

    def _cancel_timeout(self) -> None:
        if self._timeout_handle is not None:
            self._timeout_handle.cancel()
            self._timeout_handle = None

    def _flush_timeout(self) -> None:
        self._timeout_handle = None
        for sequence in self.flush():
            self._emit(sequence)

    def flush(self) -> list[str]:
        """Return and clear whatever is buffered, complete or not."""
        self._cancel_timeout()
        if not self._buffer:
            return []
        sequences = [self._buffer]
        self._buffer = ""
        return sequences

    def clear(self) -> None:
        self._cancel_timeout()
        self._buffer = ""
        self._paste_mode = False
        self._paste_buffer = ""

    def get_buffer(self) -> str:
        return self._buffer
