"""Left fold with enforced accumulator threading.

:func:`fold` is the single accumulation primitive used across
:mod:`rosterfold.functional`. Each step receives the running accumulator and
the next element and must *return* the next accumulator. Forgetting that
``return`` is the classic reduce bug: the accumulator silently becomes
``None`` and only the last element seems to count. ``fold`` turns that
mistake into an :class:`~rosterfold.core.errors.AccumulatorError` raised at
the offending step.

Examples:
    >>> from rosterfold.functional.fold import fold
    >>> fold([3, 1, 2], 0, lambda total, n: total + n)
    6
    >>> fold(["b", "a"], (), lambda acc, s: (*acc, s.upper()))
    ('B', 'A')
"""

import typing as tp

from rosterfold.core.errors import AccumulatorError
from rosterfold.logger.logger import get_logger

__all__ = ["fold"]

logger = get_logger(__name__)

T = tp.TypeVar("T")
A = tp.TypeVar("A")


def fold(
    iterable: tp.Iterable[T],
    initial: A,
    step: tp.Callable[[A, T], A],
) -> A:
    """Fold an iterable from the left into a single accumulated value.

    Args:
        iterable: Elements to consume, in order. Consumed exactly once.
        initial: Starting accumulator, returned as-is if iterable is empty.
            It may be ``None``; only the values returned by step are checked.
        step: Function of ``(accumulator, element)`` returning the next
            accumulator.

    Returns:
        The accumulator returned by the last step.

    Raises:
        AccumulatorError: If step returns ``None`` for any element.
    """
    accumulator = initial
    for position, element in enumerate(iterable):
        accumulator = step(accumulator, element)
        if accumulator is None:
            name = getattr(step, "__qualname__", repr(step))
            logger.error(
                "Fold step %s returned None at element %d (%r).",
                name,
                position,
                element,
            )
            raise AccumulatorError(
                f"Fold step {name} returned None at element {position}; "
                "each step must return the accumulator."
            )
    return accumulator
