"""Exceptions raised by roster construction and the fold operations."""

__all__ = [
    "RosterError",
    "InvalidInputError",
    "EmptyInputError",
    "EmptyMemberListError",
    "AccumulatorError",
]


class RosterError(Exception):
    """Base class for every error raised by rosterfold."""


class InvalidInputError(RosterError, ValueError):
    """Raised when a roster is built from a malformed value."""


class EmptyInputError(RosterError, ValueError):
    """Raised when an operation needs at least one pair but got none."""


class EmptyMemberListError(RosterError, ValueError):
    """Raised when a band has no members where at least one is required.

    Attributes:
        band: Name of the band whose member list is empty.
    """

    def __init__(self, band: str):
        self.band = band
        super().__init__(f"Band '{band}' has an empty member list.")


class AccumulatorError(RosterError, TypeError):
    """Raised when a fold step returns ``None`` instead of the accumulator."""
