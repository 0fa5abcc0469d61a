"""Comparator-driven three-way quicksort."""

import logging
from typing import Any, Callable, Iterable, List

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], float]


def ascending(a, b):
    return a - b


def descending(a, b):
    return b - a


def is_sorted(values: Iterable[Any], comparator: Comparator) -> bool:
    """True when ``comparator(a, b) <= 0`` holds for every adjacent pair."""
    items = list(values)
    return all(comparator(a, b) <= 0 for a, b in zip(items, items[1:]))


def _partition(items: List[Any], pivot: Any, comparator: Comparator):
    less, equal, greater = [], [], []
    for x in items:
        order = comparator(x, pivot)
        if order < 0:
            less.append(x)
        elif order > 0:
            greater.append(x)
        else:
            equal.append(x)
    return less, equal, greater


def quick_sort(values: Iterable[Any], comparator: Comparator = ascending) -> List[Any]:
    """
    Return a new list holding ``values`` ordered by ``comparator``.

    ``comparator(a, b)`` returns a negative number when ``a`` goes first, zero
    for ties and a positive number when ``b`` goes first. Ties may be
    reordered. A comparator that is not a consistent ordering still yields a
    permutation of the input, just not a meaningful one.

    Sub-ranges wait on an explicit stack instead of recursing; the worst case
    depth is O(n) and Python's recursion limit is far below the sizes this
    gets used with.
    """
    items = list(values)
    logger.debug(f"quick_sort: {len(items)} items")
    if len(items) <= 1:
        return items

    out: List[Any] = []
    # Each entry is either ("sort", chunk) or ("emit", chunk). Popping from the
    # end means less-than chunks are pushed last so they come out first.
    stack = [("sort", items)]
    while stack:
        action, chunk = stack.pop()
        if action == "emit" or len(chunk) <= 1:
            out.extend(chunk)
            continue
        # The pivot is set aside by position so every pass shrinks, even when
        # comparator(pivot, pivot) != 0.
        mid = len(chunk) // 2
        pivot = chunk[mid]
        less, equal, greater = _partition(chunk[:mid] + chunk[mid + 1:], pivot, comparator)
        equal.insert(0, pivot)
        stack.append(("sort", greater))
        stack.append(("emit", equal))
        stack.append(("sort", less))
    return out
