"""Exceptions raised for prompt API misuse.

Terminal and input failures are not wrapped: they reach the caller as the
original ``OSError`` (or ``EOFError`` when the input stream ends).
"""

from __future__ import annotations


class PromptError(Exception):
    """Raised when a prompt is used incorrectly."""
