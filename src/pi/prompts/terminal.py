"""Terminal output sink for prompts.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode and queues ANSI draw commands until
:meth:`~ProcessTerminal.flush`, so a prompt frame reaches the screen in a
single write.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from typing import Protocol, TextIO

from pi.prompts.settings import get_settings
from pi.prompts.theme import TextStyle

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_SAVE_CURSOR = "\x1b7"
_RESTORE_CURSOR = "\x1b8"
_CLEAR_LINE = "\x1b[2K"
_CLEAR_FROM_CURSOR = "\x1b[0J"
_CURSOR_UP_FMT = "\x1b[{}A"
# CHA is 1-based
_CURSOR_COLUMN_FMT = "\x1b[{}G"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the prompt's output sink.

    Drawing methods only queue output; nothing is visible until ``flush``.
    """

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def move_up(self, lines: int) -> None: ...

    def move_to_column(self, column: int) -> None: ...

    def clear_from_cursor(self) -> None: ...

    def clear_line(self) -> None: ...

    def print(self, text: str) -> None: ...

    def print_styled(self, text: str, style: TextStyle) -> None: ...

    def save_cursor(self) -> None: ...

    def restore_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def flush(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin`` / ``sys.stdout``.

    Raw mode is managed via :mod:`tty` and :mod:`termios`. Output is queued
    in memory and written with one ``write`` + ``flush`` per frame. Write
    errors propagate to the caller.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stdin_fd: int | None = None,
        write_log_path: str | None = None,
    ) -> None:
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stdin_fd = stdin_fd if stdin_fd is not None else sys.stdin.fileno()
        self._pending: list[str] = []
        self._original_termios: list | None = None
        self._write_log_path = (
            write_log_path
            if write_log_path is not None
            else get_settings().write_log
        )

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    @property
    def raw_mode_enabled(self) -> bool:
        return self._original_termios is not None

    # -- raw mode -----------------------------------------------------------

    def enable_raw_mode(self) -> None:
        """Save the current terminal attributes and switch to raw mode."""
        if self._original_termios is not None:
            return
        self._original_termios = termios.tcgetattr(self._stdin_fd)
        tty.setraw(self._stdin_fd)
        logger.debug("raw mode enabled on fd %d", self._stdin_fd)

    def disable_raw_mode(self) -> None:
        """Restore the attributes saved by :meth:`enable_raw_mode`."""
        if self._original_termios is None:
            return
        attrs, self._original_termios = self._original_termios, None
        termios.tcsetattr(self._stdin_fd, termios.TCSADRAIN, attrs)
        logger.debug("raw mode disabled on fd %d", self._stdin_fd)

    # -- queued drawing -----------------------------------------------------

    def move_up(self, lines: int) -> None:
        if lines > 0:
            self._pending.append(_CURSOR_UP_FMT.format(lines))

    def move_to_column(self, column: int) -> None:
        self._pending.append(_CURSOR_COLUMN_FMT.format(column + 1))

    def clear_from_cursor(self) -> None:
        self._pending.append(_CLEAR_FROM_CURSOR)

    def clear_line(self) -> None:
        self._pending.append(_CLEAR_LINE)

    def print(self, text: str) -> None:
        self._pending.append(text)

    def print_styled(self, text: str, style: TextStyle) -> None:
        self._pending.append(style.apply(text))

    def save_cursor(self) -> None:
        self._pending.append(_SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self._pending.append(_RESTORE_CURSOR)

    def hide_cursor(self) -> None:
        self._pending.append(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._pending.append(_SHOW_CURSOR)

    def flush(self) -> None:
        """Write everything queued since the last flush in one go."""
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()

        self._stdout.write(data)
        self._stdout.flush()

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.warning(
                    "disabling write log %s", self._write_log_path, exc_info=True
                )
                self._write_log_path = ""
