"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by every layer.
"""

from enum import Enum

from pydantic import field_validator

from midweek.domain.value.common import RootValueObject, ValueObject


class Attendance(str, Enum):
    """A voter's declared participation for one Wednesday.

    This enum is the only definition of the valid set: the database CHECK
    constraint, request validation and vote aggregation all derive from it.
    """

    YES = "yes"
    NO = "no"

    @property
    def counts_toward_total(self) -> bool:
        """Whether votes with this value add to the headcount."""
        return self is Attendance.YES


class MinPlayers(str, Enum):
    """Minimum headcount a voter needs for the game to be worth playing."""

    ANY = "any"
    SIX = "6"
    EIGHT = "8"


class UserName(RootValueObject[str]):
    """Name a voter identifies with.

    Names are trusted as given; there is no account behind them.
    Surrounding whitespace is stripped, 1-100 characters remain.
    """

    @field_validator("root")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        """Strip whitespace and check length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("User name must be 1-100 characters")
        return v


class VoterEntry(ValueObject):
    """One voter as listed inside an attendance group."""

    name: str
    min_players: MinPlayers
    guests: int = 0
