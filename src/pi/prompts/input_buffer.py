"""Single-line input buffer with an insertion cursor."""

from __future__ import annotations


class InputBuffer:
    """Text being typed plus the insertion index, kept in ``[0, len(value)]``.

    One character is one column; there is no grapheme handling here.
    """

    def __init__(self, value: str = "") -> None:
        self._value: str = value
        self._cursor: int = len(value)

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_value(self, value: str) -> None:
        self._value = value
        self._cursor = len(value)

    def insert(self, text: str) -> None:
        self._value = self._value[: self._cursor] + text + self._value[self._cursor :]
        self._cursor += len(text)

    def backspace(self) -> bool:
        """Delete the character before the cursor. Returns whether anything changed."""
        if self._cursor == 0:
            return False
        self._value = self._value[: self._cursor - 1] + self._value[self._cursor :]
        self._cursor -= 1
        return True

    def delete(self) -> bool:
        """Delete the character under the cursor."""
        if self._cursor >= len(self._value):
            return False
        self._value = self._value[: self._cursor] + self._value[self._cursor + 1 :]
        return True

    def move_left(self) -> None:
        self._cursor = max(0, self._cursor - 1)

    def move_right(self) -> None:
        self._cursor = min(len(self._value), self._cursor + 1)

    def move_to_start(self) -> None:
        self._cursor = 0

    def move_to_end(self) -> None:
        self._cursor = len(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"InputBuffer(value={self._value!r}, cursor={self._cursor})"
