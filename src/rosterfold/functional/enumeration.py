"""Visit every pair of a roster for a side effect."""

import sys
import typing as tp

from rosterfold.core.data_models import Roster, RosterEntry
from rosterfold.logger.logger import get_logger

__all__ = [
    "iter_entries",
    "each_entry",
    "print_entry",
]

logger = get_logger(__name__)


def iter_entries(roster: Roster) -> tp.Iterator[RosterEntry]:
    """Lazily yield each (band, members) pair in insertion order."""
    yield from roster.entries()


def print_entry(entry: RosterEntry, file: tp.Optional[tp.TextIO] = None) -> None:
    """Print a pair as ``[key, valueList]`` in Python's repr notation.

    Args:
        entry: Pair to print.
        file: Stream to write to. Defaults to the current ``sys.stdout``.
    """
    key, value = entry
    print([key, list(value)], file=file if file is not None else sys.stdout)


def each_entry(
    roster: Roster,
    action: tp.Callable[[RosterEntry], tp.Any] = print_entry,
) -> None:
    """Call ``action`` once for every pair of the roster, in order.

    Whatever ``action`` returns is discarded. Exceptions raised by it
    propagate and stop the enumeration.

    Args:
        roster: Roster to enumerate.
        action: Side-effecting callable receiving each ``RosterEntry``.
            Prints the pair by default.
    """
    for entry in iter_entries(roster):
        logger.debug("Visiting band '%s' (%d members).", entry.key, len(entry.value))
        action(entry)
