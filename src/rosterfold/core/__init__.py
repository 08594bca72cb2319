"""Core data structures for band rosters."""

from rosterfold.core.data_models import Roster, RosterEntry
from rosterfold.core.errors import (
    RosterError,
    InvalidInputError,
    EmptyInputError,
    EmptyMemberListError,
    AccumulatorError,
)

__all__ = [
    "Roster",
    "RosterEntry",
    "RosterError",
    "InvalidInputError",
    "EmptyInputError",
    "EmptyMemberListError",
    "AccumulatorError",
]
