"""Environment-driven prompt settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_LIMIT = 10


@dataclass
class PromptSettings:
    """Process-wide defaults for prompts.

    ``limit`` is the default number of visible list rows. ``ascii_figures``
    forces the ASCII glyph table, ``no_color`` selects the plain theme and
    ``write_log`` is a path that receives a copy of all terminal output.
    """

    limit: int = DEFAULT_LIMIT
    ascii_figures: bool = False
    no_color: bool = False
    write_log: str = ""

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> PromptSettings:
        env = os.environ if env is None else env

        limit = DEFAULT_LIMIT
        raw_limit = env.get("PI_PROMPTS_LIMIT", "").strip()
        if raw_limit:
            try:
                limit = int(raw_limit)
            except ValueError:
                raise ValueError(
                    f"PI_PROMPTS_LIMIT must be an integer, got {raw_limit!r}"
                ) from None
            if limit < 1:
                raise ValueError(f"PI_PROMPTS_LIMIT must be >= 1, got {limit}")

        return cls(
            limit=limit,
            ascii_figures=env.get("PI_PROMPTS_ASCII") == "1",
            no_color="NO_COLOR" in env or env.get("PI_PROMPTS_NO_COLOR") == "1",
            write_log=env.get("PI_PROMPTS_WRITE_LOG", ""),
        )


_global_settings: PromptSettings | None = None


def get_settings() -> PromptSettings:
    global _global_settings
    if _global_settings is None:
        _global_settings = PromptSettings.from_env()
    return _global_settings


def set_settings(settings: PromptSettings | None) -> None:
    """Replace the process-wide settings (``None`` re-reads the environment)."""
    global _global_settings
    _global_settings = settings
