"""Data models for band rosters.

A roster is an ordered mapping from band names to the names of their members.
The models here are read-only containers: once a ``Roster`` is built it is
never changed, and every operation in :mod:`rosterfold.functional` returns a
new value instead of editing the one it was given.

Validation is done by Pydantic v2 at construction time, so every roster that
exists is well-formed:
    - Band names and member names are real strings (no coercion from ints)
    - Member lists are sequences, never a bare string split into characters
    - Insertion order of bands and of members is preserved
    - The band map is a read-only view, item assignment raises TypeError

Empty rosters and bands with no members are valid. Operations that cannot
work on them (see :func:`rosterfold.functional.resolve.resolve_fold`) raise
their own errors.
"""

from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from rosterfold.core.errors import InvalidInputError
from rosterfold.core.types import BandName, FrozenRosterMap, MemberList
from rosterfold.logger.logger import get_logger

__all__ = [
    "RosterEntry",
    "Roster",
]

logger = get_logger(__name__)


class RosterEntry(NamedTuple):
    """One (band, members) pair of a roster.

    Attributes:
        key: Name of the band.
        value: The band's members, in roster order.
    """

    key: BandName
    value: MemberList


class Roster(BaseModel):
    """Ordered, immutable mapping from band names to member lists.

    Attributes:
        band_map: Read-only mapping of band names to their members. Iteration
            order is the order the bands were given in.
    """

    band_map: FrozenRosterMap = Field(
        default_factory=dict,
        validate_default=True,
        description="Read-only mapping of band names to their member lists.",
    )
    _df_cache: Optional[pd.DataFrame] = PrivateAttr(default=None)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def from_mapping(cls, mapping: Any) -> "Roster":
        """Build a roster from a plain mapping of band names to member lists.

        Args:
            mapping: Mapping such as ``{"the_cramps": ["lux", "ivy", "nick"]}``.
                An existing ``Roster`` is returned unchanged.

        Returns:
            Validated roster preserving the mapping's insertion order.

        Raises:
            InvalidInputError: If mapping is not a mapping, or if any band name,
                member list or member name is malformed.
        """
        if isinstance(mapping, Roster):
            return mapping

        if not isinstance(mapping, Mapping):
            logger.error(
                "Cannot build a roster from %s; expected a mapping.",
                type(mapping).__name__,
            )
            raise InvalidInputError(
                f"Roster must be built from a mapping, got {type(mapping).__name__}."
            )

        try:
            roster = cls(band_map=dict(mapping))
        except ValidationError as exc:
            logger.debug("Roster validation failed: %s", exc)
            raise InvalidInputError(
                f"Invalid roster ({exc.error_count()} error(s)): {exc}"
            ) from exc

        logger.debug("Built roster with %d band(s).", len(roster))
        return roster

    @property
    def bands(self) -> List[BandName]:
        """Get the band names in roster order.

        Returns:
            List of band names.
        """
        return list(self.band_map.keys())

    @property
    def df(self) -> pd.DataFrame:
        """Get the roster as a long-format DataFrame.

        Returns:
            DataFrame with MultiIndex (band, position) and a 'member' column,
            one row per member.
        """
        if self._df_cache is not None:
            return self._df_cache

        rows = [
            (band, position, member)
            for band, members in self.band_map.items()
            for position, member in enumerate(members)
        ]
        df = pd.DataFrame(rows, columns=["band", "position", "member"])
        df = df.set_index(["band", "position"])

        self._df_cache = df
        return df

    def entries(self) -> Iterator[RosterEntry]:
        """Lazily yield every (band, members) pair in roster order."""
        for band, members in self.band_map.items():
            yield RosterEntry(band, members)

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a fresh plain-dict copy with member lists as lists."""
        return {band: list(members) for band, members in self.band_map.items()}

    def __getitem__(self, band: str) -> MemberList:
        return self.band_map[band]

    def __contains__(self, band: object) -> bool:
        return band in self.band_map

    def __len__(self) -> int:
        return len(self.band_map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        # dict equality ignores order, band order is part of a roster
        return list(self.band_map.items()) == list(other.band_map.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Roster(bands={len(self.band_map)}, members={sum(map(len, self.band_map.values()))})"
