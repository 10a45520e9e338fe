"""Helpers shared by the prompt tests."""

from __future__ import annotations

from pi.prompts.prompts.base import Prompt

from .scripted_events import keys
from .virtual_terminal import VirtualTerminal

UP = "\x1b[A"
DOWN = "\x1b[B"
RIGHT = "\x1b[C"
LEFT = "\x1b[D"
HOME = "\x1b[H"
END = "\x1b[F"
DELETE = "\x1b[3~"
ENTER = "\r"
ESCAPE = "\x1b"
BACKSPACE = "\x7f"
CTRL_C = "\x03"
CTRL_D = "\x04"
SPACE = " "


def start(prompt: Prompt, rows: int = 24, columns: int = 80) -> VirtualTerminal:
    """Draw the first frame of *prompt* on a fresh virtual terminal."""
    term = VirtualTerminal(rows=rows, columns=columns)
    prompt.render(term)
    return term


def press(prompt: Prompt, term: VirtualTerminal, *sequences: str) -> None:
    """Feed raw key sequences one by one, redrawing after each like ``run`` does."""
    for event in keys(*sequences):
        prompt.handle_event(event)
        prompt.render(term)
