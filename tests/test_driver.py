"""Tests for the async run loop shared by all prompts."""

from __future__ import annotations

import asyncio
import logging

import pytest

from pi.prompts.errors import PromptError
from pi.prompts.events import ErrorEvent, ResizeEvent
from pi.prompts.prompts import base
from pi.prompts.prompts.confirm import ConfirmPrompt
from pi.prompts.prompts.multi_select import MultiSelectPrompt
from pi.prompts.prompts.select import SelectPrompt
from pi.prompts.prompts.text import TextPrompt
from pi.prompts.state import PromptState

from .helpers import CTRL_C, DOWN, ENTER, ESCAPE, SPACE
from .scripted_events import ScriptedEvents, keys, typed
from .virtual_terminal import VirtualTerminal


class BlockingEvents:
    """Event source that never produces an event."""

    def __init__(self) -> None:
        self._gate = asyncio.Event()

    def __aiter__(self) -> BlockingEvents:
        return self

    async def __anext__(self):
        await self._gate.wait()
        raise StopAsyncIteration

    def close(self) -> None:
        pass


def _select(term: VirtualTerminal, events) -> SelectPrompt[str]:
    return SelectPrompt("Pick", ["a", "b", "c"], terminal=term, events=events)


class TestRunResult:
    @pytest.mark.asyncio
    async def test_returns_answer(self) -> None:
        term = VirtualTerminal()
        prompt = _select(term, ScriptedEvents(keys(DOWN, ENTER)))
        assert await prompt.run() == "b"
        assert prompt.state is PromptState.SUCCESS
        assert term.screen == ["✔ Pick … b"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("abort", [CTRL_C, ESCAPE])
    async def test_abort_returns_none(self, abort: str) -> None:
        term = VirtualTerminal()
        prompt = _select(term, ScriptedEvents(keys(DOWN, abort)))
        assert await prompt.run() is None
        assert prompt.state is PromptState.ABORTED

    @pytest.mark.asyncio
    async def test_stops_reading_after_resolution(self) -> None:
        events = ScriptedEvents(keys(ENTER, DOWN))
        await _select(VirtualTerminal(), events).run()
        assert events.remaining == 1

    @pytest.mark.asyncio
    async def test_text_validation_loop(self) -> None:
        events = ScriptedEvents([*keys(ENTER), *typed("hi"), *keys(ENTER)])
        prompt = TextPrompt(
            "Name?", terminal=VirtualTerminal(), events=events
        ).with_validator(lambda v: None if v else "required")
        assert await prompt.run() == "hi"

    @pytest.mark.asyncio
    async def test_multi_select(self) -> None:
        events = ScriptedEvents(keys(SPACE, DOWN, DOWN, SPACE, ENTER))
        prompt = MultiSelectPrompt(
            "Choose", ["cheese", "tomato", "ham"], terminal=VirtualTerminal(), events=events
        )
        assert await prompt.run() == ["cheese", "ham"]

    @pytest.mark.asyncio
    async def test_prompts_in_series(self) -> None:
        term = VirtualTerminal()
        first = TextPrompt("First?", terminal=term, events=ScriptedEvents([*typed("Jo"), *keys(ENTER)]))
        sure = ConfirmPrompt("Sure?", terminal=term, events=ScriptedEvents(keys("y")))
        assert await first.run() == "Jo"
        assert await sure.run() is True
        assert term.screen == ["✔ First? … Jo", "✔ Sure? … yes"]

    @pytest.mark.asyncio
    async def test_resize_rerenders(self) -> None:
        term = VirtualTerminal()
        events = ScriptedEvents([ResizeEvent(40, 10), *keys(ENTER)])
        assert await _select(term, events).run() == "a"
        assert term.flush_count == 3


class TestRunResources:
    @pytest.mark.asyncio
    async def test_raw_mode_released(self) -> None:
        term = VirtualTerminal()
        await _select(term, ScriptedEvents(keys(ENTER))).run()
        assert term.raw_mode_calls == ["enable", "disable"]
        assert not term.raw_mode

    @pytest.mark.asyncio
    async def test_injected_events_left_open(self) -> None:
        events = ScriptedEvents(keys(ENTER))
        await _select(VirtualTerminal(), events).run()
        assert not events.closed

    @pytest.mark.asyncio
    async def test_default_collaborators(self, monkeypatch: pytest.MonkeyPatch) -> None:
        term = VirtualTerminal()
        events = ScriptedEvents(keys(ENTER))
        monkeypatch.setattr(base, "ProcessTerminal", lambda: term)
        monkeypatch.setattr(base, "StdinEventSource", lambda: events)
        assert await SelectPrompt("Pick", ["a"]).run() == "a"
        assert events.closed
        assert term.raw_mode_calls == ["enable", "disable"]

    @pytest.mark.asyncio
    async def test_cancelled_run_restores_caret(self) -> None:
        term = VirtualTerminal()
        task = asyncio.create_task(_select(term, BlockingEvents()).run())
        await asyncio.sleep(0)
        assert not term.cursor_visible
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert not term.raw_mode
        assert term.cursor_visible

    @pytest.mark.asyncio
    async def test_timed_out_run_restores_caret(self) -> None:
        term = VirtualTerminal()
        prompt = ConfirmPrompt("Sure?", terminal=term, events=BlockingEvents())
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(prompt.run(), timeout=0.01)
        assert term.raw_mode_calls == ["enable", "disable"]
        assert term.cursor_visible


class TestRunErrors:
    @pytest.mark.asyncio
    async def test_error_event_propagates(self) -> None:
        term = VirtualTerminal()
        events = ScriptedEvents([*keys(DOWN), ErrorEvent(OSError("read failed"))])
        with pytest.raises(OSError, match="read failed"):
            await _select(term, events).run()
        assert not term.raw_mode
        assert term.cursor_visible

    @pytest.mark.asyncio
    async def test_exhausted_source_raises_eof(self) -> None:
        term = VirtualTerminal()
        with pytest.raises(EOFError):
            await _select(term, ScriptedEvents(keys(DOWN))).run()
        assert not term.raw_mode

    @pytest.mark.asyncio
    async def test_output_error_propagates(self) -> None:
        term = VirtualTerminal()
        term.fail_on_flush = OSError("write failed")
        with pytest.raises(OSError, match="write failed"):
            await _select(term, ScriptedEvents(keys(ENTER))).run()
        assert term.raw_mode_calls == ["enable", "disable"]

    @pytest.mark.asyncio
    async def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pi.prompts")
        with pytest.raises(EOFError):
            await _select(VirtualTerminal(), ScriptedEvents([])).run()
        assert any("run failed" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_second_run_rejected(self) -> None:
        prompt = _select(VirtualTerminal(), ScriptedEvents(keys(ENTER, ENTER)))
        await prompt.run()
        with pytest.raises(PromptError, match="already been run"):
            await prompt.run()

    @pytest.mark.asyncio
    async def test_concurrent_run_rejected(self) -> None:
        term = VirtualTerminal()
        prompt = _select(term, BlockingEvents())
        task = asyncio.create_task(prompt.run())
        await asyncio.sleep(0)
        with pytest.raises(PromptError, match="already in progress"):
            await prompt.run()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert term.raw_mode_calls == ["enable", "disable"]


class TestStateTransitions:
    def test_transitions_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pi.prompts")
        prompt = SelectPrompt("Pick", ["a"])
        prompt.render(VirtualTerminal())
        assert "SelectPrompt: CREATED -> RUNNING" in caplog.text

    def test_is_done(self) -> None:
        assert PromptState.SUCCESS.is_done
        assert PromptState.ABORTED.is_done
        assert not PromptState.VALIDATING.is_done
