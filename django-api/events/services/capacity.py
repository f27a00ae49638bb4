"""Capacity evaluation for event signups.

Pure functions: no I/O and no state beyond their arguments.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from events.domain import Event, Participant


@dataclass(frozen=True)
class Admission:
    """Whether a prospective signup fits within an event's capacity."""

    admit: bool


def count_named_participants(participants: Iterable[Participant]) -> int:
    """Count additional participants whose name is non-empty after trimming."""
    return sum(1 for participant in participants if participant.is_named)


def can_admit(
    event: Event, current_attendee_count: int, additional_participant_count: int
) -> Admission:
    """Decide whether a signup with the given number of extra people fits.

    Capacity is only enforced when the event shows it and has a non-zero
    maximum. The primary registrant always counts as one.
    """
    if not event.show_capacity or not event.max_attendees:
        return Admission(admit=True)
    total = current_attendee_count + 1 + additional_participant_count
    return Admission(admit=total <= event.max_attendees)
