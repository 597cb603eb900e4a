"""Ordered first-match rule chains shared by the keyword stages."""

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

Predicate = Callable[[str], bool]
Rule = tuple[Predicate, T]


def contains_any(*keywords: str) -> Predicate:
    """Build a predicate that is true when the text contains any keyword.

    Keywords are expected in lower case; the caller lower-cases the text.
    """

    def predicate(text: str) -> bool:
        return any(keyword in text for keyword in keywords)

    return predicate


def first_match(text: str, rules: Sequence[Rule[T]], default: T) -> T:
    """Return the result of the first rule whose predicate accepts text.

    Rules are tried in order; later rules are never evaluated once one
    matches. ``default`` is returned when nothing matches.
    """
    for predicate, result in rules:
        if predicate(text):
            return result
    return default
