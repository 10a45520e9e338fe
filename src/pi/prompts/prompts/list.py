"""Windowed list engine shared by the select, autocomplete and multi-select prompts."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from pi.prompts.filters import FilteredView, FilterPredicate, filter_items
from pi.prompts.input_buffer import InputBuffer
from pi.prompts.keys import KeyEvent
from pi.prompts.prompts.base import A, Prompt
from pi.prompts.render import Frame, input_icon, scroll_indicator
from pi.prompts.settings import get_settings
from pi.prompts.state import PromptState
from pi.prompts.terminal import Terminal
from pi.prompts.theme import PLAIN
from pi.prompts.utils import visible_width
from pi.prompts.window import calc_window, visible_limit

T = TypeVar("T")

NO_MATCH_TEXT = "Nothing matched your search"


class ListPrompt(Prompt[A], Generic[T, A]):
    """A prompt over a list of items with a cursor and a scroll window.

    With a *filter* predicate the prompt also has a query line: typed
    characters narrow the list on every keystroke. The filtered view is
    recomputed once per query change and reused by key handling and
    rendering. The cursor indexes the filtered view and is clamped into it
    whenever the view changes.
    """

    #: Up/Down wrap around the ends instead of stopping
    wraps: bool = False

    def __init__(
        self,
        message: str,
        items: Sequence[T],
        filter: FilterPredicate | None = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self._items: tuple[T, ...] = tuple(items)
        self._filter = filter
        self._query = InputBuffer()
        self._cursor = 0
        self._limit = get_settings().limit
        self._view: FilteredView[T] = list(enumerate(self._items))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_limit(self, limit: int) -> ListPrompt[T, A]:
        """Show at most *limit* items at once (the terminal height also caps it)."""
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self._limit = limit
        return self

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def query(self) -> str:
        return self._query.value

    @property
    def filtered(self) -> FilteredView[T]:
        return list(self._view)

    @property
    def filterable(self) -> bool:
        return self._filter is not None

    def current_item(self) -> T | None:
        if not self._view:
            return None
        return self._view[self._cursor][1]

    # ------------------------------------------------------------------
    # Filtered view and cursor
    # ------------------------------------------------------------------

    def _refresh_view(self) -> None:
        if self._filter is None:
            self._view = list(enumerate(self._items))
        else:
            self._view = filter_items(self._query.value, self._items, self._filter)
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        self._cursor = max(0, min(self._cursor, len(self._view) - 1))

    def _last_index(self) -> int:
        return max(0, len(self._view) - 1)

    def _move_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1
        elif self.wraps:
            self._cursor = self._last_index()

    def _move_down(self) -> None:
        if self._cursor < self._last_index():
            self._cursor += 1
        elif self.wraps:
            self._cursor = 0

    # ------------------------------------------------------------------
    # Key handling
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        kb = self._keybindings

        if kb.matches(event, "submit"):
            self._submit()
            return

        up, down = ("listUp", "listDown") if self.filterable else ("selectUp", "selectDown")
        if kb.matches(event, up):
            self._move_up()
            return
        if kb.matches(event, down):
            self._move_down()
            return
        if kb.matches(event, "listFirst"):
            self._cursor = 0
            return
        if kb.matches(event, "listLast"):
            self._cursor = self._last_index()
            return

        if self.handle_list_key(event):
            return

        if self.filterable:
            self._handle_query_key(event)

    def handle_list_key(self, event: KeyEvent) -> bool:
        """Hook for prompt-specific keys; return True when consumed."""
        return False

    def _handle_query_key(self, event: KeyEvent) -> None:
        kb = self._keybindings

        if kb.matches(event, "deleteCharBackward"):
            if self._query.backspace():
                self._refresh_view()
        elif kb.matches(event, "cursorLeft"):
            self._query.move_left()
        elif kb.matches(event, "cursorRight"):
            self._query.move_right()
        elif event.char is not None:
            self._query.insert(event.char)
            self._refresh_view()

    def _submit(self) -> None:
        # Nothing to pick from an empty view
        if self._view:
            self._set_state(PromptState.SUCCESS)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def draw_body(self, frame: Frame, terminal: Terminal) -> None:
        if self.state.is_done:
            if self.state is PromptState.SUCCESS:
                frame.write(" ")
                frame.write(input_icon(self.state, self._figures), self._theme.input_icon)
                frame.write(self.summary())
            return

        if self.filterable:
            frame.write(" ")
            frame.write(input_icon(self.state, self._figures), self._theme.input_icon)
            caret_column = frame.column + self._query.cursor
            frame.write(self._query.value)
            frame.mark_caret(caret_column)

        limit = visible_limit(self._limit, terminal.rows)
        total = len(self._view)
        start, end = calc_window(self._cursor, total, limit)

        if start == end:
            frame.newline()
            frame.write(NO_MATCH_TEXT, self._theme.no_match)
            return

        for i in range(start, end):
            original_index, item = self._view[i]
            frame.newline()
            self.draw_row(
                frame,
                original_index,
                item,
                highlighted=i == self._cursor,
                indicator=scroll_indicator(i, start, end, total, self._figures),
            )

    def draw_row(
        self,
        frame: Frame,
        original_index: int,
        item: T,
        highlighted: bool,
        indicator: str,
    ) -> None:
        if highlighted:
            frame.write(self._figures.pointer, self._theme.pointer)
        else:
            frame.write(" " * visible_width(self._figures.pointer))
        frame.write(f" {indicator} ")
        frame.write(str(item), self._theme.highlighted if highlighted else PLAIN)

    def summary(self) -> str:
        """Text shown after the message once the prompt succeeded."""
        item = self.current_item()
        return "" if item is None else str(item)

    def __repr__(self) -> str:
        filter_name = getattr(self._filter, "__name__", repr(self._filter))
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"items={list(self._items)!r}, filter={filter_name})"
        )
