"""Prompt base class: lifecycle state, event dispatch and the run loop."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pi.prompts.errors import PromptError
from pi.prompts.events import ErrorEvent, Event, EventSource, ResizeEvent, StdinEventSource
from pi.prompts.figures import Figures, get_figures
from pi.prompts.keybindings import PromptKeybindingsManager, get_prompt_keybindings
from pi.prompts.keys import KeyEvent
from pi.prompts.render import Frame, draw_header
from pi.prompts.settings import get_settings
from pi.prompts.state import PromptState
from pi.prompts.terminal import ProcessTerminal, Terminal
from pi.prompts.theme import PromptTheme, default_theme, plain_theme

logger = logging.getLogger(__name__)

A = TypeVar("A")


class Prompt(ABC, Generic[A]):
    """Base class for all prompts.

    Subclasses implement :meth:`handle_key`, :meth:`draw_body` and
    :meth:`answer`; the base class owns the lifecycle, the redraw protocol
    and the :meth:`run` loop.

    The terminal and event source default to the controlling terminal and
    stdin. Pass ``terminal=`` / ``events=`` to drive a prompt from somewhere
    else; an injected event source is left open when ``run`` returns.
    """

    #: Hide the terminal caret while the prompt runs (prompts without a text field)
    hides_caret: bool = False

    def __init__(
        self,
        message: str,
        *,
        terminal: Terminal | None = None,
        events: EventSource | None = None,
        theme: PromptTheme | None = None,
        figures: Figures | None = None,
        keybindings: PromptKeybindingsManager | None = None,
    ) -> None:
        if not isinstance(message, str):
            raise PromptError(f"message must be a str, got {type(message).__name__}")
        self.message = message
        self.state = PromptState.CREATED

        self._terminal = terminal
        self._events = events
        self._theme = theme or (plain_theme() if get_settings().no_color else default_theme())
        self._figures = figures or get_figures()
        self._keybindings = keybindings or get_prompt_keybindings()

        # Rows between the first row of the last frame and where it left the caret
        self._caret_row = 0
        self._running = False

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def handle_key(self, event: KeyEvent) -> None:
        """Apply a non-abort key press to the prompt state."""

    @abstractmethod
    def draw_body(self, frame: Frame, terminal: Terminal) -> None:
        """Draw everything after the state icon and message."""

    @abstractmethod
    def answer(self) -> A:
        """The resolved value; only called in the ``SUCCESS`` state."""

    def validate(self) -> None:
        """Resolve the ``VALIDATING`` state. Accepts by default."""
        self._set_state(PromptState.SUCCESS)

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _set_state(self, state: PromptState) -> None:
        if state is not self.state:
            logger.debug("%s: %s -> %s", type(self).__name__, self.state.name, state.name)
            self.state = state

    def handle_event(self, event: Event) -> None:
        """Apply one input event.

        Abort keys win over everything else. Resize events change nothing
        here; the following render picks up the new size. An
        :class:`ErrorEvent` re-raises its cause.
        """
        if isinstance(event, ErrorEvent):
            raise event.cause
        if isinstance(event, ResizeEvent):
            return
        if self.state.is_done:
            return
        if self._keybindings.matches(event, "abort"):
            self._set_state(PromptState.ABORTED)
            return
        self.handle_key(event)
        if self.state is PromptState.VALIDATING:
            self.validate()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, terminal: Terminal) -> None:
        """Draw the current state as one flushed batch.

        The first render draws in place. Every later one first returns to
        the first row of the previous frame and clears to the end of the
        screen.
        """
        if self.state is PromptState.CREATED:
            if self.hides_caret:
                terminal.hide_cursor()
            self._set_state(PromptState.RUNNING)
        else:
            terminal.move_up(self._caret_row)
            terminal.move_to_column(0)
            terminal.clear_from_cursor()

        frame = Frame(terminal, terminal.columns)
        draw_header(frame, self.state, self.message, self._figures, self._theme)
        self.draw_body(frame, terminal)

        if self.state.is_done:
            frame.newline()
            terminal.show_cursor()
        else:
            frame.place_caret()

        self._caret_row = frame.caret_row
        terminal.flush()

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    async def run(self) -> A | None:
        """Run the prompt until it is answered or aborted.

        Returns the answer, or ``None`` when the user aborts (Ctrl-C,
        Ctrl-D or Escape). Terminal and input errors, and cancellation of
        the awaiting task, propagate after raw mode and the caret have been
        restored.
        """
        if self._running:
            raise PromptError(f"{type(self).__name__}.run() is already in progress")
        if self.state is not PromptState.CREATED:
            raise PromptError(f"{type(self).__name__} has already been run")

        self._running = True
        terminal = self._terminal if self._terminal is not None else ProcessTerminal()
        owns_events = self._events is None
        events = StdinEventSource() if owns_events else self._events

        try:
            terminal.enable_raw_mode()
            try:
                self.render(terminal)
                while not self.state.is_done:
                    event = await self._next_event(events)
                    self.handle_event(event)
                    self.render(terminal)
            except BaseException:
                # Cancellation included
                logger.debug("%s: run failed", type(self).__name__, exc_info=True)
                self._restore_caret(terminal)
                raise
            finally:
                if owns_events:
                    events.close()
                terminal.disable_raw_mode()
        finally:
            self._running = False

        logger.debug("%s: finished with state %s", type(self).__name__, self.state.name)
        if self.state is PromptState.SUCCESS:
            return self.answer()
        return None

    @staticmethod
    async def _next_event(events: EventSource) -> Event:
        try:
            return await events.__anext__()
        except StopAsyncIteration:
            raise EOFError("event source ended before the prompt finished") from None

    def _restore_caret(self, terminal: Terminal) -> None:
        if not self.hides_caret:
            return
        try:
            terminal.show_cursor()
            terminal.flush()
        except OSError:
            # The original error is already on its way to the caller
            logger.debug("could not restore caret", exc_info=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"
