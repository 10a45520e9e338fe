"""Tests for AutocompletePrompt."""

from __future__ import annotations

import pytest

from pi.prompts.errors import PromptError
from pi.prompts.filters import fuzzy_filter
from pi.prompts.prompts.autocomplete import AutocompletePrompt
from pi.prompts.state import PromptState

from .helpers import BACKSPACE, DOWN, END, ENTER, HOME, LEFT, RIGHT, UP, press, start

FRUIT = ["apple", "banana", "blueberry", "cherry"]


def _prompt(**kwargs) -> AutocompletePrompt[str]:
    return AutocompletePrompt("Pick", FRUIT, **kwargs)


class TestAutocompleteRender:
    def test_first_frame_has_query_line(self) -> None:
        term = start(_prompt())
        assert term.screen == [
            "? Pick ›",
            "❯   apple",
            "    banana",
            "    blueberry",
            "    cherry",
        ]

    def test_caret_parked_at_query(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        assert term.cursor == (0, len("? Pick › "))
        press(prompt, term, "b", "l")
        assert term.cursor == (0, len("? Pick › bl"))

    def test_caret_follows_query_cursor(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", "l", LEFT)
        assert term.cursor == (0, len("? Pick › b"))
        press(prompt, term, RIGHT)
        assert term.cursor == (0, len("? Pick › bl"))

    def test_caret_stays_visible(self) -> None:
        term = start(_prompt())
        assert term.cursor_visible


class TestAutocompleteFiltering:
    def test_typing_narrows_list(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b")
        assert prompt.query == "b"
        assert prompt.filtered == [(1, "banana"), (2, "blueberry")]
        assert term.screen == ["? Pick › b", "❯   banana", "    blueberry"]

    def test_no_match_row(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "x")
        assert term.screen == ["? Pick › x", "Nothing matched your search"]

    def test_enter_with_no_match_is_noop(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "x", ENTER)
        assert prompt.state is PromptState.RUNNING

    def test_backspace_widens_list(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", "x", BACKSPACE)
        assert prompt.query == "b"
        assert len(prompt.filtered) == 2

    def test_vi_keys_are_typed(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "j", "k")
        assert prompt.query == "jk"
        assert prompt.cursor == 0

    def test_insert_in_middle_of_query(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", "u", LEFT, "l")
        assert prompt.query == "blu"
        assert prompt.filtered == [(2, "blueberry")]

    def test_cursor_clamped_when_view_shrinks(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, END)
        assert prompt.cursor == 3
        press(prompt, term, "b")
        assert prompt.cursor == 1
        assert prompt.current_item() == "blueberry"

    def test_custom_filter(self) -> None:
        prompt = _prompt(filter=fuzzy_filter)
        term = start(prompt)
        press(prompt, term, "b", "r", "y")
        assert prompt.filtered == [(2, "blueberry")]


class TestAutocompleteNavigation:
    def test_clamps_within_filtered_view(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", DOWN, DOWN, DOWN)
        assert prompt.cursor == 1
        press(prompt, term, UP, UP)
        assert prompt.cursor == 0

    def test_end_uses_filtered_view(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", END)
        assert prompt.cursor == 1
        press(prompt, term, HOME)
        assert prompt.cursor == 0

    def test_enter_returns_filtered_item(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "b", DOWN, ENTER)
        assert prompt.state is PromptState.SUCCESS
        assert prompt.answer() == "blueberry"
        assert term.screen == ["✔ Pick … blueberry"]

    def test_answer_with_nothing_matched_raises(self) -> None:
        prompt = _prompt()
        term = start(prompt)
        press(prompt, term, "z")
        with pytest.raises(PromptError):
            prompt.answer()


def test_repr_names_filter() -> None:
    assert repr(AutocompletePrompt("Pick", ["a"])) == (
        "AutocompletePrompt(message='Pick', items=['a'], filter=prefix_filter)"
    )
