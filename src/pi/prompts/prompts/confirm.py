"""Yes/no prompt."""

from __future__ import annotations

from pi.prompts.errors import PromptError
from pi.prompts.keys import KeyEvent
from pi.prompts.prompts.base import Prompt
from pi.prompts.render import Frame, input_icon
from pi.prompts.state import PromptState
from pi.prompts.terminal import Terminal


class ConfirmPrompt(Prompt[bool]):
    """Answer with ``y`` or ``n``; Enter takes the initial value if there is one."""

    hides_caret = True

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self._initial: bool | None = None
        self._value: bool | None = None

    def with_initial(self, value: bool) -> ConfirmPrompt:
        self._initial = value
        return self

    @property
    def initial(self) -> bool | None:
        return self._initial

    def hint(self) -> str:
        if self._initial is True:
            return "(Y/n)"
        if self._initial is False:
            return "(y/N)"
        return "(y/n)"

    def handle_key(self, event: KeyEvent) -> None:
        kb = self._keybindings
        if kb.matches(event, "confirmYes"):
            self._value = True
        elif kb.matches(event, "confirmNo"):
            self._value = False
        elif kb.matches(event, "submit") and self._initial is not None:
            self._value = self._initial
        else:
            return
        self._set_state(PromptState.SUCCESS)

    def answer(self) -> bool:
        if self._value is None:
            raise PromptError(f"{type(self).__name__} has not been answered")
        return self._value

    def draw_body(self, frame: Frame, terminal: Terminal) -> None:
        if self.state is PromptState.ABORTED:
            return
        frame.write(" ")
        if self.state is PromptState.SUCCESS:
            frame.write(input_icon(self.state, self._figures), self._theme.input_icon)
            frame.write("yes" if self._value else "no")
            return
        frame.write(self.hint(), self._theme.hint)
        frame.mark_caret()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, initial={self._initial!r})"
