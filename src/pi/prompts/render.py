"""Frame drawing for prompts.

A prompt frame is drawn top to bottom through a :class:`Frame`, which
forwards draw commands to the terminal while tracking which row and column
the terminal cursor is on. Before the next frame the prompt moves the
cursor back up by :attr:`Frame.caret_row` rows; that lands on the first row
of the old frame, and clearing to the end of the screen removes exactly the
rows it drew.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pi.prompts.figures import Figures
from pi.prompts.state import PromptState
from pi.prompts.theme import PLAIN, PromptTheme, TextStyle
from pi.prompts.utils import replace_control_chars, truncate_to_width, visible_width

if TYPE_CHECKING:
    from pi.prompts.terminal import Terminal


class Frame:
    """Draws one prompt frame and records where it left the cursor.

    Text is cut at the right edge (one column short, so the terminal never
    enters its pending-wrap state) to keep every logical row on exactly one
    screen row. Control characters are written as spaces.
    """

    def __init__(self, terminal: Terminal, columns: int) -> None:
        self._terminal = terminal
        self._max_column = max(1, columns - 1)
        self.row = 0
        self.column = 0
        self._caret: tuple[int, int] | None = None

    @property
    def rows_drawn(self) -> int:
        """Rows below the first one; a single-line frame has drawn 0."""
        return self.row

    @property
    def caret_row(self) -> int:
        """Row the caret is left on once the frame is finished."""
        if self._caret is not None:
            return self._caret[0]
        return self.row

    def write(self, text: str, style: TextStyle = PLAIN) -> None:
        remaining = self._max_column - self.column
        if remaining <= 0 or not text:
            return
        # Only newline() may change rows
        text = truncate_to_width(replace_control_chars(text), remaining)
        if style.is_plain:
            self._terminal.print(text)
        else:
            self._terminal.print_styled(text, style)
        self.column += visible_width(text)

    def newline(self) -> None:
        # Raw mode disables output post-processing, so return explicitly
        self._terminal.print("\r\n")
        self.row += 1
        self.column = 0

    def mark_caret(self, column: int | None = None) -> None:
        """Remember the current row (and *column*) as the caret position."""
        col = self.column if column is None else min(column, self._max_column)
        self._caret = (self.row, col)

    def place_caret(self) -> None:
        """Move the terminal cursor back to the position given to :meth:`mark_caret`."""
        if self._caret is None:
            return
        row, column = self._caret
        self._terminal.move_up(self.row - row)
        self._terminal.move_to_column(column)


def state_icon(state: PromptState, figures: Figures, theme: PromptTheme) -> tuple[str, TextStyle]:
    """Cross, tick or question mark depending on the prompt state."""
    if state is PromptState.ABORTED:
        return figures.cross, theme.aborted_icon
    if state is PromptState.SUCCESS:
        return figures.tick, theme.success_icon
    return "?", theme.pending_icon


def input_icon(state: PromptState, figures: Figures) -> str:
    """Pointer while typing, ellipsis before the answer, nothing on abort."""
    if state is PromptState.ABORTED:
        return ""
    if state is PromptState.SUCCESS:
        return f"{figures.ellipsis} "
    return f"{figures.pointer_small} "


def draw_header(
    frame: Frame,
    state: PromptState,
    message: str,
    figures: Figures,
    theme: PromptTheme,
) -> None:
    icon, icon_style = state_icon(state, figures, theme)
    frame.write(icon, icon_style)
    frame.write(" ")
    frame.write(message, theme.message)


def scroll_indicator(index: int, start: int, end: int, total: int, figures: Figures) -> str:
    """Arrow marking rows that have hidden neighbours above or below."""
    if index == start and start > 0:
        return figures.arrow_up
    if index == end - 1 and end < total:
        return figures.arrow_down
    return " "
