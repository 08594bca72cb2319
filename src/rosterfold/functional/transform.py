"""Value-wise roster transforms built on :func:`rosterfold.functional.fold.fold`.

Each step of the fold builds a brand new accumulator dict from the previous
one, so no dict is ever mutated in place and the source roster is never
touched. The final dict is validated into a new :class:`Roster`.

Examples:
    >>> from rosterfold.core.data_models import Roster
    >>> from rosterfold.functional.transform import transform_fold
    >>> roster = Roster.from_mapping({"the_cramps": ["lux", "ivy", "nick"]})
    >>> transform_fold(roster).to_dict()
    {'the_cramps': ['ivy', 'lux', 'nick']}
"""

import typing as tp

from rosterfold.core.data_models import Roster, RosterEntry
from rosterfold.core.types import MemberList
from rosterfold.functional.fold import fold
from rosterfold.logger.logger import get_logger

__all__ = [
    "transform_values",
    "transform_fold",
]

logger = get_logger(__name__)


def transform_values(
    roster: Roster,
    fn: tp.Callable[[MemberList], tp.Iterable[str]],
) -> Roster:
    """Apply ``fn`` to every member list, keeping bands and their order.

    Args:
        roster: Source roster. Left unchanged.
        fn: Function mapping a member list to a new iterable of member names.

    Returns:
        New roster with the same bands in the same order and ``fn(members)``
        as each band's members.

    Raises:
        InvalidInputError: If ``fn`` produces something that is not a valid
            member list.
    """

    def step(accumulator: tp.Dict[str, tp.Any], entry: RosterEntry):
        key, value = entry
        return {**accumulator, key: fn(value)}

    transformed = fold(roster.entries(), {}, step)
    logger.debug("Transformed %d band(s).", len(transformed))
    return Roster.from_mapping(transformed)


def transform_fold(roster: Roster) -> Roster:
    """Return a copy of the roster with each member list sorted ascending.

    Args:
        roster: Source roster. Left unchanged.

    Returns:
        New roster with identical band order where ``result[band]`` equals
        ``sorted(roster[band])``.
    """
    return transform_values(roster, sorted)
