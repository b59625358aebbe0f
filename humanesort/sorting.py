"""
Humane sorting entry points.

Both functions sort stably: elements that compare equal (for example
"007" and "7") keep their input order, also when reversed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, TypeVar

from humanesort.config import SortOptions
from humanesort.ordering import HumaneKey, StringLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _sort_key(
    key: Callable[[Any], StringLike] | None,
    options: SortOptions,
) -> Callable[[Any], HumaneKey]:
    classifier = options.resolve_classifier()
    if key is None:
        return lambda item: HumaneKey(item, classifier)
    return lambda item: HumaneKey(key(item), classifier)


def humane_sort(
    items: MutableSequence[T],
    *,
    key: Callable[[T], StringLike] | None = None,
    reverse: bool | None = None,
    options: SortOptions | None = None,
) -> None:
    """Sort a mutable sequence in place, in humane order.

    Args:
        items: Sequence to sort. Lists are sorted with list.sort; other
            mutable sequences get the sorted elements written back by index.
        key: Extracts the string-like value to compare from each element.
        reverse: Descending order. Overrides options.reverse when given.
        options: Classifier and direction settings.

    Raises:
        TypeError: If *items* is not a mutable sequence.
        UnsupportedValueError: If an element (or its key) is not string-like.
    """
    if not isinstance(items, MutableSequence):
        raise TypeError(
            f"humane_sort() needs a mutable sequence, got {type(items).__name__}; "
            "use humane_sorted() instead"
        )
    opts = options or SortOptions()
    descending = opts.reverse if reverse is None else reverse
    logger.debug(
        "Sorting %d items (classifier=%s, reverse=%s)",
        len(items),
        opts.classifier,
        descending,
    )

    sort_key = _sort_key(key, opts)
    if isinstance(items, list):
        items.sort(key=sort_key, reverse=descending)
        return

    ordered = sorted(items, key=sort_key, reverse=descending)
    for index, item in enumerate(ordered):
        items[index] = item


def humane_sorted(
    items: Iterable[T],
    *,
    key: Callable[[T], StringLike] | None = None,
    reverse: bool | None = None,
    options: SortOptions | None = None,
) -> list[T]:
    """Return a new list with *items* in humane order.

    Takes the same keyword arguments as humane_sort.
    """
    result = list(items)
    humane_sort(result, key=key, reverse=reverse, options=options)
    return result
