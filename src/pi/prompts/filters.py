"""Filter engine for list prompts.

A filter policy is a predicate ``(query, display_string) -> bool``. The
engine applies it to every candidate and keeps the survivors in their
original order, each paired with its index in the candidate list so that
selection state stays keyed by original position.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from pi.prompts.fuzzy import fuzzy_tokens_match

T = TypeVar("T")

FilterPredicate = Callable[[str, str], bool]

FilteredView = list[tuple[int, T]]


def prefix_filter(query: str, text: str) -> bool:
    return text.startswith(query)


def contains_filter(query: str, text: str) -> bool:
    return query in text


def fuzzy_filter(query: str, text: str) -> bool:
    """Case-insensitive in-order character match, all tokens required."""
    return fuzzy_tokens_match(query, text)


def filter_items(
    query: str,
    items: Sequence[T],
    predicate: FilterPredicate,
) -> FilteredView[T]:
    """Return ``(index, item)`` pairs of *items* whose display string matches."""
    return [(i, item) for i, item in enumerate(items) if predicate(query, str(item))]
