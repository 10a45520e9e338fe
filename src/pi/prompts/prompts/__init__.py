"""Prompt implementations."""

from pi.prompts.prompts.autocomplete import AutocompletePrompt
from pi.prompts.prompts.base import Prompt
from pi.prompts.prompts.confirm import ConfirmPrompt
from pi.prompts.prompts.list import NO_MATCH_TEXT, ListPrompt
from pi.prompts.prompts.multi_select import MultiSelectPrompt
from pi.prompts.prompts.select import SelectPrompt
from pi.prompts.prompts.text import InputStyle, TextPrompt, Validator

__all__ = [
    "AutocompletePrompt",
    "ConfirmPrompt",
    "InputStyle",
    "ListPrompt",
    "MultiSelectPrompt",
    "NO_MATCH_TEXT",
    "Prompt",
    "SelectPrompt",
    "TextPrompt",
    "Validator",
]
