"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self
from uuid import UUID

from events.domain.value_objects import (
    EventId,
    EventType,
    LogoType,
    SectionId,
    SignupId,
    SignupStatus,
)


def _load_json_list(raw: Any) -> list:
    """Return raw as a list, decoding JSON text. Anything else is empty."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    return raw if isinstance(raw, list) else []


def parse_gallery_images(raw: Any) -> tuple[str, ...]:
    """Gallery URLs from a list or its JSON encoding; malformed input is empty."""
    return tuple(url for url in _load_json_list(raw) if isinstance(url, str) and url)


@dataclass(frozen=True)
class Participant:
    """An additional person registered by a single signup."""

    name: str
    email: str = ""

    @property
    def is_named(self) -> bool:
        return bool(self.name.strip())

    @property
    def is_reachable(self) -> bool:
        return self.is_named and bool(self.email.strip())

    @classmethod
    def parse_many(cls, raw: Any) -> tuple[Self, ...]:
        """Parse a list of {name, email} objects, or its JSON encoding."""
        participants = []
        for item in _load_json_list(raw):
            if not isinstance(item, dict):
                continue
            name = item.get("name") or ""
            email = item.get("email") or ""
            participants.append(cls(name=str(name), email=str(email)))
        return tuple(participants)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class Section:
    """Domain representation of a Section."""

    id: SectionId
    title: str
    description: str | None
    order: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str | None
    event_date: datetime | None
    location: str | None
    max_attendees: int | None
    is_active: bool
    show_capacity: bool
    section_id: SectionId | None
    event_type: EventType
    logo_type: LogoType
    allow_signups: bool
    participants_per_signup: int
    featured_image: str | None
    gallery_images: tuple[str, ...]
    detailed_content: str | None
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None

    @property
    def media_urls(self) -> list[str]:
        """Distinct uploaded media referenced by this event, featured image first."""
        urls = [self.featured_image, *self.gallery_images]
        return list(dict.fromkeys(url for url in urls if url))


@dataclass(frozen=True)
class EventFields:
    """Writable fields of an Event. Defaults apply to omitted values."""

    title: str
    description: str | None = None
    event_date: datetime | None = None
    location: str | None = None
    max_attendees: int | None = None
    is_active: bool = True
    show_capacity: bool = True
    section_id: SectionId | None = None
    event_type: EventType = EventType.EVENT
    logo_type: LogoType = LogoType.JSL
    allow_signups: bool = True
    participants_per_signup: int = 1
    featured_image: str | None = None
    gallery_images: tuple[str, ...] = ()
    detailed_content: str | None = None


@dataclass(frozen=True)
class EventListing:
    """An event together with its live attendee count."""

    event: Event
    attendee_count: int


@dataclass(frozen=True)
class QuickLink:
    """Domain representation of a QuickLink."""

    id: UUID
    event_id: EventId
    title: str
    url: str
    order: int


@dataclass(frozen=True)
class Signup:
    """Domain representation of a Signup."""

    id: SignupId
    name: str
    email: str
    phone: str
    event_id: EventId
    notes: str | None
    status: SignupStatus
    additional_participants: tuple[Participant, ...]
    created_at: datetime
    updated_at: datetime

    @property
    def participant_emails(self) -> list[str]:
        """Primary email followed by every additional participant email."""
        emails = [self.email] if self.email else []
        emails.extend(p.email for p in self.additional_participants if p.email)
        return emails


@dataclass(frozen=True)
class SignupInput:
    """A public signup submission before validation."""

    name: str
    email: str
    phone: str
    event_id: str
    notes: str | None = None
    additional_participants: tuple[Participant, ...] = ()


@dataclass(frozen=True)
class ScheduleItem:
    """Domain representation of a ScheduleItem."""

    id: UUID
    event_id: EventId
    order: int
    created_at: datetime
    updated_at: datetime
    event: Event | None = None


@dataclass(frozen=True)
class MessageBanner:
    """Domain representation of the site-wide message banner."""

    id: str
    message: str
    is_active: bool
    background_color: str
    text_color: str
    show_close_button: bool
    updated_at: datetime


@dataclass(frozen=True)
class BannerFields:
    """Writable fields of the message banner."""

    message: str
    is_active: bool = False
    background_color: str = "#3B82F6"
    text_color: str = "#FFFFFF"
    show_close_button: bool = True
