"""Interactive prompt where the user can pick several options from a list."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from pi.prompts.filters import FilterPredicate, contains_filter
from pi.prompts.keys import KeyEvent
from pi.prompts.prompts.list import ListPrompt
from pi.prompts.render import Frame
from pi.prompts.state import PromptState
from pi.prompts.theme import PLAIN
from pi.prompts.utils import visible_width

T = TypeVar("T")


class MultiSelectPrompt(ListPrompt[T, list[T]]):
    """Space toggles the item under the cursor, Enter submits.

    Typing filters the list (substring match by default). Selection is
    tracked by each item's position in the original list, so it survives
    any amount of filtering, and the answer lists the chosen items in their
    original order. Up/Down wrap around the ends of the list.
    """

    wraps = True

    def __init__(
        self,
        message: str,
        items: Sequence[T],
        filter: FilterPredicate = contains_filter,
        **kwargs,
    ) -> None:
        super().__init__(message, items, filter=filter, **kwargs)
        self._selected: list[bool] = [False] * len(self._items)

    def with_selected(self, indices: Iterable[int]) -> MultiSelectPrompt[T]:
        """Pre-select the items at the given original indices."""
        for index in indices:
            if not 0 <= index < len(self._items):
                raise IndexError(f"no item at index {index}")
            self._selected[index] = True
        return self

    @property
    def selected(self) -> list[bool]:
        return list(self._selected)

    def toggle(self, original_index: int) -> None:
        self._selected[original_index] = not self._selected[original_index]

    def handle_list_key(self, event: KeyEvent) -> bool:
        if not self._keybindings.matches(event, "toggle"):
            return False
        if self._view:
            self.toggle(self._view[self._cursor][0])
        return True

    def _submit(self) -> None:
        # An empty selection is a valid answer, even with nothing matching
        self._set_state(PromptState.SUCCESS)

    def answer(self) -> list[T]:
        return [item for item, chosen in zip(self._items, self._selected) if chosen]

    def summary(self) -> str:
        return ", ".join(str(item) for item in self.answer())

    def draw_row(
        self,
        frame: Frame,
        original_index: int,
        item: T,
        highlighted: bool,
        indicator: str,
    ) -> None:
        chosen = self._selected[original_index]

        if highlighted:
            frame.write(self._figures.pointer, self._theme.pointer)
        else:
            frame.write(" " * visible_width(self._figures.pointer))
        frame.write(f" {indicator} ")
        if chosen:
            frame.write(self._figures.tick, self._theme.checked)
        else:
            frame.write(" ")
        frame.write(" ")

        if highlighted:
            style = self._theme.highlighted
        elif chosen:
            style = self._theme.checked_item
        else:
            style = PLAIN
        frame.write(str(item), style)

    def __repr__(self) -> str:
        base = super().__repr__()
        return f"{base[:-1]}, selected={self.answer()!r})"
