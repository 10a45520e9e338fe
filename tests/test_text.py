"""Tests for TextPrompt."""

from __future__ import annotations

from pi.prompts.prompts.text import InputStyle, TextPrompt
from pi.prompts.state import PromptState
from pi.prompts.theme import default_theme

from .helpers import BACKSPACE, DELETE, END, ENTER, ESCAPE, HOME, LEFT, RIGHT, press, start

PREFIX = "? Name? › "


def _required(value: str) -> str | None:
    return None if value else "You must type something!"


class TestTextEditing:
    def test_first_frame(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        assert term.screen == ["? Name? ›"]
        assert term.cursor == (0, len(PREFIX))
        assert term.cursor_visible

    def test_typing_echoes(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        press(prompt, term, "a", "b", "c")
        assert prompt.value == "abc"
        assert term.screen == [PREFIX + "abc"]
        assert term.cursor == (0, len(PREFIX) + 3)

    def test_cursor_movement_and_insert(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        press(prompt, term, "a", "c", LEFT, "b")
        assert prompt.value == "abc"
        assert term.cursor == (0, len(PREFIX) + 2)
        press(prompt, term, HOME, "_", END, "!")
        assert prompt.value == "_abc!"

    def test_backspace_and_delete(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        press(prompt, term, "a", "b", "c", BACKSPACE, HOME, DELETE)
        assert prompt.value == "b"
        press(prompt, term, RIGHT, RIGHT, DELETE)
        assert prompt.value == "b"

    def test_space_is_typed(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        press(prompt, term, "a", " ", "b")
        assert prompt.value == "a b"

    def test_initial_value(self) -> None:
        prompt = TextPrompt("Name?").with_initial_value("bob")
        term = start(prompt)
        assert term.screen == [PREFIX + "bob"]
        press(prompt, term, "!")
        assert prompt.value == "bob!"


class TestTextStyles:
    def test_password_masks(self) -> None:
        prompt = TextPrompt("Name?").with_style(InputStyle.PASSWORD)
        term = start(prompt)
        press(prompt, term, "p", "w", LEFT)
        assert term.screen == [PREFIX + "**"]
        assert term.cursor == (0, len(PREFIX) + 1)
        press(prompt, term, ENTER)
        assert prompt.answer() == "pw"
        assert term.screen == ["✔ Name? … **"]

    def test_invisible_shows_nothing(self) -> None:
        prompt = TextPrompt("Name?").with_style(InputStyle.INVISIBLE)
        term = start(prompt)
        press(prompt, term, "s", "e", "c")
        assert term.screen == ["? Name? ›"]
        assert term.cursor == (0, len(PREFIX))
        press(prompt, term, ENTER)
        assert prompt.answer() == "sec"
        assert term.screen == ["✔ Name? …"]

    def test_style_transform(self) -> None:
        assert InputStyle.NORMAL.transform("abc") == "abc"
        assert InputStyle.PASSWORD.transform("abc") == "***"
        assert InputStyle.INVISIBLE.transform("abc") == ""


class TestTextValidation:
    def test_no_validator_accepts(self) -> None:
        prompt = TextPrompt("Name?")
        term = start(prompt)
        press(prompt, term, ENTER)
        assert prompt.state is PromptState.SUCCESS
        assert prompt.answer() == ""

    def test_rejection_shows_error_row(self) -> None:
        prompt = TextPrompt("Name?").with_validator(_required)
        term = start(prompt)
        press(prompt, term, ENTER)
        assert prompt.state is PromptState.RUNNING
        assert prompt.error == "You must type something!"
        assert term.screen == ["? Name? ›", "› You must type something!"]
        assert term.cursor == (0, len(PREFIX))

    def test_error_styled(self) -> None:
        prompt = TextPrompt("Name?").with_validator(_required)
        term = start(prompt)
        press(prompt, term, ENTER)
        assert "You must type something!" in term.styled_spans(default_theme().error)

    def test_error_held_until_edit(self) -> None:
        prompt = TextPrompt("Name?").with_validator(_required)
        term = start(prompt)
        press(prompt, term, ENTER, LEFT, HOME)
        assert prompt.error is not None
        press(prompt, term, "a")
        assert prompt.error is None
        assert term.screen == [PREFIX + "a"]

    def test_accepts_after_fix(self) -> None:
        calls: list[str] = []

        def validator(value: str) -> str | None:
            calls.append(value)
            return _required(value)

        prompt = TextPrompt("Name?").with_validator(validator)
        term = start(prompt)
        press(prompt, term, ENTER, "x", ENTER)
        assert calls == ["", "x"]
        assert prompt.state is PromptState.SUCCESS
        assert term.screen == ["✔ Name? … x"]

    def test_abort_while_error_shown(self) -> None:
        prompt = TextPrompt("Name?").with_validator(_required)
        term = start(prompt)
        press(prompt, term, ENTER, ESCAPE)
        assert prompt.state is PromptState.ABORTED
        assert term.screen == ["✖ Name?"]


def test_repr() -> None:
    prompt = TextPrompt("Name?").with_style(InputStyle.PASSWORD).with_validator(_required)
    assert repr(prompt) == "TextPrompt(message='Name?', style=PASSWORD, validator=True)"
