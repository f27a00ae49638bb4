"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SectionId:
    """Unique identifier for a Section."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SignupId:
    """Unique identifier for a Signup."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    @property
    def is_unlimited(self) -> bool:
        return self.value == 0


class EventType(Enum):
    EVENT = "event"
    LEAGUE = "league"
    TOURNAMENT = "tournament"
    WORKSHOP = "workshop"
    SOCIAL = "social"
    COMPETITION = "competition"


class LogoType(Enum):
    JAX = "jax"
    JSL = "jsl"


class SignupStatus(Enum):
    REGISTERED = "registered"
    ATTENDED = "attended"
    CANCELLED = "cancelled"
    WAITLISTED = "waitlisted"
    NO_SHOW = "no_show"


class Direction(Enum):
    """Which neighbour an ordered item swaps places with."""

    UP = "up"
    DOWN = "down"
