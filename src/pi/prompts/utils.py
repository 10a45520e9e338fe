"""Display-width helpers for prompt rows.

A prompt row must never be wider than the terminal: a wrapped row occupies
two screen lines and the redraw would erase one line too few. These helpers
measure and cut text by terminal columns rather than by code points.
"""

from __future__ import annotations

import re

import grapheme
import wcwidth as _wcwidth

# CSI sequences: ESC[ <params> <final byte>
_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

# C0 and C1 control characters, DEL included
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def replace_control_chars(text: str, replacement: str = " ") -> str:
    """Replace control characters so *text* cannot move the terminal cursor."""
    return _CONTROL_RE.sub(replacement, text)


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    # Emoji presentation selector or ZWJ sequences render double width
    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    return max(_wcwidth.wcswidth(g), _wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI escape sequences are ignored. ASCII text takes a fast path;
    everything else is measured per grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "…") -> str:
    """Cut plain *text* so it fits in *max_width* columns.

    When the text is cut, *ellipsis* is appended and counts towards the
    width. Clusters are never split.
    """
    if max_width <= 0:
        return ""

    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)

    return _take_columns(text, target) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    out: list[str] = []
    used = 0
    for g in grapheme.graphemes(text):
        w = _grapheme_width(g)
        if used + w > max_cols:
            break
        out.append(g)
        used += w
    return "".join(out)
