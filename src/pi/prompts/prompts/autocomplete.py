"""Interactive prompt where the user chooses from a filterable list."""

from __future__ import annotations

from typing import Sequence, TypeVar

from pi.prompts.errors import PromptError
from pi.prompts.filters import FilterPredicate, prefix_filter
from pi.prompts.prompts.list import ListPrompt

T = TypeVar("T")


class AutocompletePrompt(ListPrompt[T, T]):
    """Type to narrow the list, Up/Down to move, Enter to choose.

    The default filter keeps items whose display string starts with the
    typed text; pass ``filter=`` (for example
    :func:`~pi.prompts.filters.fuzzy_filter`) to match differently.
    """

    def __init__(
        self,
        message: str,
        items: Sequence[T],
        filter: FilterPredicate = prefix_filter,
        **kwargs,
    ) -> None:
        super().__init__(message, items, filter=filter, **kwargs)

    def answer(self) -> T:
        if not self._view:
            raise PromptError(f"{type(self).__name__} has no item under the cursor")
        return self._view[self._cursor][1]
