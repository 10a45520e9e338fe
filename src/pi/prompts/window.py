"""Scroll window over a list that is taller than the screen."""

from __future__ import annotations


def calc_window(cursor: int, total: int, limit: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of a list of *total* rows to show.

    The window holds at most *limit* rows and is centred on *cursor* when
    possible, pinned to the top near the start of the list and to the bottom
    near its end. An empty list gives ``(0, 0)``.
    """
    start = max(0, min(total - limit, cursor - limit // 2))
    end = min(start + limit, total)
    return start, end


def visible_limit(configured: int, terminal_rows: int) -> int:
    """Rows available for list items: one row is kept for the message line."""
    return max(1, min(configured, terminal_rows - 1))
