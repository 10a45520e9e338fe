"""Fuzzy matching utilities.

A query matches if all of its characters appear in the text in order, not
necessarily consecutive, ignoring case. Matches are not ranked: list
prompts keep their items in the order they were given.
"""

from __future__ import annotations


def fuzzy_match(query: str, text: str) -> bool:
    query_lower = query.lower()
    text_lower = text.lower()

    if len(query_lower) > len(text_lower):
        return False

    query_index = 0
    for ch in text_lower:
        if query_index >= len(query_lower):
            break
        if ch == query_lower[query_index]:
            query_index += 1

    return query_index == len(query_lower)


def fuzzy_tokens_match(query: str, text: str) -> bool:
    """True when every whitespace-separated token of *query* fuzzy-matches."""
    return all(fuzzy_match(token, text) for token in query.split())
