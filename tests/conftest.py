"""Shared fixtures: every test starts from the default process-wide state."""

from __future__ import annotations

import pytest

from pi.prompts.figures import UNICODE_FIGURES, set_figures
from pi.prompts.keybindings import set_prompt_keybindings
from pi.prompts.settings import PromptSettings, set_settings


@pytest.fixture(autouse=True)
def _reset_globals():
    set_settings(PromptSettings())
    set_figures(UNICODE_FIGURES)
    set_prompt_keybindings(None)
    yield
    set_settings(None)
    set_figures(None)
    set_prompt_keybindings(None)
