"""Functional primitives for rosterfold.

This module provides the iteration and accumulation helpers that operate on
a :class:`~rosterfold.core.data_models.Roster`. Apart from the enumerator's
action, every helper is stateless and side-effect-free and returns a new
value rather than changing its input, so they compose freely.
"""

from rosterfold.functional.fold import fold
from rosterfold.functional.enumeration import iter_entries, each_entry, print_entry
from rosterfold.functional.transform import transform_values, transform_fold
from rosterfold.functional.resolve import resolve_fold

__all__ = [
    "fold",
    "iter_entries",
    "each_entry",
    "print_entry",
    "transform_values",
    "transform_fold",
    "resolve_fold",
]
