"""Reduce a roster to a single member name.

:func:`resolve_fold` walks the roster once and keeps a running memo of the
alphabetically earliest member seen so far:

    1. The memo starts unset.
    2. For each band, in roster order:
        - an empty member list is an error, there is nothing to compare;
        - if the memo is unset it is seeded with the band's *first* member
          (unsorted order);
        - the band's smallest member is compared with the memo and replaces
          it when smaller *or equal*.
    3. An unset memo after the walk means the roster was empty.

The non-strict comparison means an equal candidate overwrites the memo. That
is observable only by identity, never by value.
"""

import typing as tp

from rosterfold.core.data_models import Roster, RosterEntry
from rosterfold.core.errors import EmptyInputError, EmptyMemberListError
from rosterfold.functional.fold import fold
from rosterfold.logger.logger import get_logger

__all__ = ["resolve_fold"]

logger = get_logger(__name__)


def _earliest_member(memo: tp.Optional[str], entry: RosterEntry) -> str:
    key, value = entry
    if not value:
        logger.error("Cannot resolve earliest member: band '%s' has no members.", key)
        raise EmptyMemberListError(key)

    if memo is None:
        memo = value[0]

    candidate = sorted(value)[0]
    if candidate <= memo:
        memo = candidate
    return memo


def resolve_fold(roster: Roster) -> str:
    """Find the lexicographically smallest member name across all bands.

    Args:
        roster: Roster to search. Left unchanged.

    Returns:
        The earliest member name in plain string ordering.

    Raises:
        EmptyInputError: If the roster has no bands.
        EmptyMemberListError: If any band has no members.

    Examples:
        >>> from rosterfold.data.sample import SAMPLE_ROSTER
        >>> resolve_fold(SAMPLE_ROSTER)
        'andy'
    """
    memo = fold(roster.entries(), None, _earliest_member)
    if memo is None:
        logger.error("Cannot resolve earliest member of an empty roster.")
        raise EmptyInputError("Cannot resolve the earliest member of an empty roster.")

    logger.debug("Resolved earliest member '%s' over %d band(s).", memo, len(roster))
    return memo
