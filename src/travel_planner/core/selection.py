"""Ordered selection strategies with first-non-empty semantics."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

Strategy = Callable[..., List[T]]


def select_first(strategies: Sequence[Strategy], *args: Any) -> Tuple[str, List[T]]:
    """Run strategies in order and return the first non-empty result with its name."""
    for strategy in strategies:
        selected = strategy(*args)
        if selected:
            return strategy.__name__, selected
    return "", []
