"""Free-text prompt with optional masking and validation."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from pi.prompts.input_buffer import InputBuffer
from pi.prompts.keys import KeyEvent
from pi.prompts.prompts.base import Prompt
from pi.prompts.render import Frame, input_icon
from pi.prompts.state import PromptState
from pi.prompts.terminal import Terminal

logger = logging.getLogger(__name__)

#: Returns an error message to reject the value, ``None`` to accept it
Validator = Callable[[str], "str | None"]


class InputStyle(Enum):
    """How typed text is echoed."""

    NORMAL = "normal"
    PASSWORD = "password"
    INVISIBLE = "invisible"

    def transform(self, value: str) -> str:
        if self is InputStyle.PASSWORD:
            return "*" * len(value)
        if self is InputStyle.INVISIBLE:
            return ""
        return value

    def caret_offset(self, cursor: int) -> int:
        # Invisible input never moves the caret
        return 0 if self is InputStyle.INVISIBLE else cursor


class TextPrompt(Prompt[str]):
    """Read one line of text.

    Enter runs the validator. A rejected value keeps the prompt open and
    shows the error under the input until the text is edited.
    """

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self._input = InputBuffer()
        self._style = InputStyle.NORMAL
        self._validator: Validator | None = None
        self._error: str | None = None

    def with_style(self, style: InputStyle) -> TextPrompt:
        self._style = style
        return self

    def with_validator(self, validator: Validator) -> TextPrompt:
        self._validator = validator
        return self

    def with_initial_value(self, text: str) -> TextPrompt:
        self._input.set_value(text)
        return self

    @property
    def value(self) -> str:
        return self._input.value

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def style(self) -> InputStyle:
        return self._style

    def handle_key(self, event: KeyEvent) -> None:
        kb = self._keybindings
        buf = self._input

        if kb.matches(event, "submit"):
            self._set_state(PromptState.VALIDATING)
        elif kb.matches(event, "cursorLeft"):
            buf.move_left()
        elif kb.matches(event, "cursorRight"):
            buf.move_right()
        elif kb.matches(event, "cursorLineStart"):
            buf.move_to_start()
        elif kb.matches(event, "cursorLineEnd"):
            buf.move_to_end()
        elif kb.matches(event, "deleteCharBackward"):
            if buf.backspace():
                self._error = None
        elif kb.matches(event, "deleteCharForward"):
            if buf.delete():
                self._error = None
        elif event.char is not None:
            buf.insert(event.char)
            self._error = None

    def validate(self) -> None:
        if self._validator is not None:
            error = self._validator(self._input.value)
            if error is not None:
                logger.debug("%s: value rejected: %s", type(self).__name__, error)
                self._error = error
                self._set_state(PromptState.RUNNING)
                return
        self._error = None
        self._set_state(PromptState.SUCCESS)

    def answer(self) -> str:
        return self._input.value

    def draw_body(self, frame: Frame, terminal: Terminal) -> None:
        if self.state is PromptState.ABORTED:
            return

        frame.write(" ")
        frame.write(input_icon(self.state, self._figures), self._theme.input_icon)
        if self.state is PromptState.SUCCESS:
            frame.write(self._style.transform(self._input.value))
            return

        caret_column = frame.column + self._style.caret_offset(self._input.cursor)
        frame.write(self._style.transform(self._input.value))
        frame.mark_caret(caret_column)

        if self._error is not None:
            frame.newline()
            frame.write(f"{self._figures.pointer_small} ", self._theme.error)
            frame.write(self._error, self._theme.error)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"style={self._style.name}, validator={self._validator is not None})"
        )
