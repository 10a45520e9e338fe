"""Glyph tables used by the renderer.

The table is picked once per process; rendering code only reads named
fields and never checks the platform itself.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from pi.prompts.settings import get_settings


@dataclass(frozen=True)
class Figures:
    arrow_up: str
    arrow_down: str
    arrow_left: str
    arrow_right: str
    radio_on: str
    radio_off: str
    tick: str
    cross: str
    ellipsis: str
    pointer_small: str
    line: str
    pointer: str


UNICODE_FIGURES = Figures(
    arrow_up="↑",
    arrow_down="↓",
    arrow_left="←",
    arrow_right="→",
    radio_on="◉",
    radio_off="◯",
    tick="✔",
    cross="✖",
    ellipsis="…",
    pointer_small="›",
    line="─",
    pointer="❯",
)

# Glyphs that legacy Windows consoles can draw
ASCII_FIGURES = Figures(
    arrow_up="↑",
    arrow_down="↓",
    arrow_left="←",
    arrow_right="→",
    radio_on="(*)",
    radio_off="( )",
    tick="√",
    cross="×",
    ellipsis="...",
    pointer_small="»",
    line="─",
    pointer=">",
)


def detect_figures() -> Figures:
    if get_settings().ascii_figures or sys.platform == "win32":
        return ASCII_FIGURES
    return UNICODE_FIGURES


_global_figures: Figures | None = None


def get_figures() -> Figures:
    global _global_figures
    if _global_figures is None:
        _global_figures = detect_figures()
    return _global_figures


def set_figures(figures: Figures | None) -> None:
    global _global_figures
    _global_figures = figures
