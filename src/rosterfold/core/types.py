"""Reusable type definitions for roster data.

This module provides type aliases and constrained types shared by the data
models and the functional helpers.

Type Aliases:
    BandName: Name of a band, a strict (non-coerced), non-empty string.
    MemberName: Name of a single band member, a strict string.
    MemberList: Ordered, immutable sequence of member names.
    RosterMap: Mapping from band names to their member lists.
    FrozenRosterMap: RosterMap validated into a read-only mapping proxy.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Tuple
from collections.abc import Iterable, Mapping, Set
import annotated_types as at
from pydantic import StrictStr
from pydantic.functional_validators import AfterValidator, BeforeValidator

__all__ = [
    "BandName",
    "MemberName",
    "MemberList",
    "RosterMap",
    "FrozenRosterMap",
]

# A band name is a non-empty string
BandName = Annotated[StrictStr, at.MinLen(1)]
MemberName = StrictStr


def validate_member_sequence(members: Any) -> Tuple[Any, ...]:
    """Validator to ensure members arrive as a non-string iterable.

    Any ordered, non-string iterable (list, tuple, generator, dict values)
    is materialized into a tuple before the member names are checked. Sets
    and mappings are refused: a set has no stable order and a mapping would
    keep only its keys.

    Args:
        members: Raw value given for a band's member list.

    Returns:
        The members as a tuple, original order preserved.

    Raises:
        ValueError: If members is a string, bytes, set, mapping, or not
            iterable.
    """
    if isinstance(members, (str, bytes)):
        raise ValueError(
            f"Member list must be a sequence of names, not a single string: {members!r}."
        )
    if isinstance(members, (Set, Mapping)):
        raise ValueError(
            f"Member list must be an ordered sequence, got {type(members).__name__}."
        )
    if not isinstance(members, Iterable):
        raise ValueError(
            f"Member list must be iterable, got {type(members).__name__}."
        )
    return tuple(members)


# Member order is significant and kept exactly as given
MemberList = Annotated[
    Tuple[MemberName, ...], BeforeValidator(validate_member_sequence)
]

RosterMap = Dict[BandName, MemberList]

# Item assignment on the validated map raises TypeError
FrozenRosterMap = Annotated[RosterMap, AfterValidator(MappingProxyType)]
