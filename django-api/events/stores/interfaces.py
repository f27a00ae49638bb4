"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from events.domain import (
    BannerFields,
    Event,
    EventFields,
    EventId,
    MessageBanner,
    Participant,
    QuickLink,
    ScheduleItem,
    Section,
    SectionId,
    Signup,
    SignupId,
    SignupStatus,
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, section_id: SectionId | None = None) -> list[Event]:
        """Return all events, optionally limited to one section."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def locked_event(self, event_id: EventId) -> AbstractContextManager[Event | None]:
        """Open a transaction holding a write lock on the event row.

        Yields the event, or None if it does not exist. Writes made through
        other stores inside the block commit or roll back together.
        """
        ...

    @abstractmethod
    def create_event(self, fields: EventFields, created_by: int | None) -> Event:
        """Persist a new event."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, fields: EventFields) -> Event | None:
        """Overwrite all writable fields. Returns None if the event is absent."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event and its dependents. Returns False if absent."""
        ...

    @abstractmethod
    def attendee_counts(self, event_ids: list[EventId]) -> dict[EventId, int]:
        """Return attendee counts per event, as count_for_event. Missing events count zero."""
        ...

    @abstractmethod
    def list_quick_links(self, event_id: EventId) -> list[QuickLink]:
        """Return an event's quick links ordered by order ascending."""
        ...

    @abstractmethod
    def replace_quick_links(
        self, event_id: EventId, links: list[tuple[str, str]]
    ) -> list[QuickLink]:
        """Delete every quick link of the event and insert (title, url) pairs in order."""
        ...


class SignupStore(ABC):
    """Interface for signup persistence operations."""

    @abstractmethod
    def list_signups(self, event_id: EventId | None = None) -> list[Signup]:
        """Return signups newest first, optionally for one event."""
        ...

    @abstractmethod
    def count_for_event(self, event_id: EventId) -> int:
        """Return the people signed up for an event: each signup plus its named guests."""
        ...

    @abstractmethod
    def create_signup(
        self,
        event_id: EventId,
        name: str,
        email: str,
        phone: str,
        notes: str | None,
        additional_participants: tuple[Participant, ...],
    ) -> Signup:
        """Persist a new signup with status registered."""
        ...

    @abstractmethod
    def update_signup(
        self, signup_id: SignupId, status: SignupStatus, notes: str | None
    ) -> Signup | None:
        """Set status and notes. Returns None if the signup is absent."""
        ...

    @abstractmethod
    def delete_signup(self, signup_id: SignupId) -> bool:
        """Delete a signup. Returns False if absent."""
        ...


class SectionStore(ABC):
    """Interface for section persistence operations."""

    @abstractmethod
    def list_sections(self) -> list[Section]:
        """Return all sections ordered by order ascending."""
        ...

    @abstractmethod
    def get_section(self, section_id: SectionId) -> Section | None:
        """Return a section by ID, or None if not found."""
        ...

    @abstractmethod
    def create_section(
        self, title: str, description: str | None, order: int, created_by: int | None
    ) -> Section:
        """Persist a new section."""
        ...

    @abstractmethod
    def update_section(
        self, section_id: SectionId, title: str, description: str | None, order: int
    ) -> Section | None:
        """Overwrite a section. Returns None if absent."""
        ...

    @abstractmethod
    def delete_section(self, section_id: SectionId) -> bool:
        """Delete a section, detaching its events. Returns False if absent."""
        ...

    @abstractmethod
    def swap_order(self, first: SectionId, second: SectionId) -> None:
        """Exchange the order values of two sections."""
        ...


class ScheduleStore(ABC):
    """Interface for schedule persistence operations."""

    @abstractmethod
    def list_items(self, event_id: EventId | None = None) -> list[ScheduleItem]:
        """Return schedule items ordered by order ascending, with events attached."""
        ...

    @abstractmethod
    def get_for_event(self, event_id: EventId) -> ScheduleItem | None:
        """Return the schedule item of an event, or None."""
        ...

    @abstractmethod
    def next_order(self) -> int:
        """Return max(order) + 1, or 0 when the schedule is empty."""
        ...

    @abstractmethod
    def add(self, event_id: EventId, order: int) -> ScheduleItem:
        """Persist a schedule item for an event."""
        ...

    @abstractmethod
    def remove_for_event(self, event_id: EventId) -> bool:
        """Delete the schedule item of an event. Returns False if there was none."""
        ...

    @abstractmethod
    def swap_order(self, first: EventId, second: EventId) -> None:
        """Exchange the order values of two events' schedule items."""
        ...


class BannerStore(ABC):
    """Interface for the message banner row."""

    @abstractmethod
    def get_or_create_default(self) -> MessageBanner:
        """Return the banner, creating the default row when none exists."""
        ...

    @abstractmethod
    def save(self, fields: BannerFields) -> MessageBanner:
        """Create or update the banner row."""
        ...
