"""Interactive prompt where the user chooses one option from a list."""

from __future__ import annotations

from typing import Sequence, TypeVar

from pi.prompts.errors import PromptError
from pi.prompts.prompts.list import ListPrompt

T = TypeVar("T")


class SelectPrompt(ListPrompt[T, T]):
    """Choose one item with Up/Down (or ``k``/``j``) and Enter.

    Items can be any object; ``str(item)`` is what gets displayed and the
    item itself is returned. The cursor stops at both ends of the list.

    Example::

        prompt = SelectPrompt("Choose a word", ["The", "quick", "brown", "fox"])
        word = await prompt.run()
        if word is None:
            print("Prompt was aborted!")
    """

    hides_caret = True

    def __init__(self, message: str, items: Sequence[T], **kwargs) -> None:
        super().__init__(message, items, filter=None, **kwargs)

    def answer(self) -> T:
        if not self._view:
            raise PromptError(f"{type(self).__name__} has no item under the cursor")
        return self._view[self._cursor][1]
