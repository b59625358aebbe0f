"""Convenience re-exports: ``from humanesort.prelude import *``."""

from humanesort.ordering import Ordering, humane_cmp, humane_key
from humanesort.sorting import humane_sort, humane_sorted

__all__ = [
    "Ordering",
    "humane_cmp",
    "humane_key",
    "humane_sort",
    "humane_sorted",
]
