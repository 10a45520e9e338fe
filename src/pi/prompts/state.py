"""Prompt lifecycle state."""

from __future__ import annotations

from enum import Enum


class PromptState(Enum):
    """Lifecycle of a prompt.

    ``CREATED`` only exists until the first render. ``ABORTED`` and
    ``SUCCESS`` are terminal: the driver renders once more and returns.
    """

    CREATED = "created"
    RUNNING = "running"
    VALIDATING = "validating"
    ABORTED = "aborted"
    SUCCESS = "success"

    @property
    def is_done(self) -> bool:
        return self in (PromptState.ABORTED, PromptState.SUCCESS)
