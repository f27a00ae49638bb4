"""Event service - all event business logic lives here.

Services:
- Depend only on interfaces (stores and collaborators)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import (
    Capacity,
    Event,
    EventFields,
    EventListing,
    QuickLink,
    SectionId,
)
from events.domain.errors import EventNotFoundError, SectionNotFoundError, ValidationError
from events.services.collaborators import MediaStorage
from events.services.schedule_service import ScheduleService, parse_event_id
from events.stores.interfaces import EventStore, SectionStore

logger = logging.getLogger(__name__)


def _link_pairs(links: list[dict]) -> list[tuple[str, str]]:
    return [
        (str(link["title"]), str(link["url"]))
        for link in links
        if link.get("title") and link.get("url")
    ]


def _date_order(listing: EventListing) -> tuple:
    # Undated events sort after every dated one.
    event_date = listing.event.event_date
    return (event_date is None, event_date.timestamp() if event_date else 0)


class EventService:
    """Service for event catalog and event mutation operations."""

    def __init__(
        self,
        store: EventStore,
        sections: SectionStore,
        schedule: ScheduleService,
        media: MediaStorage,
    ) -> None:
        self._store = store
        self._sections = sections
        self._schedule = schedule
        self._media = media

    def list_events(self, section_id: str | None = None) -> list[EventListing]:
        """Return events with attendee counts, earliest date first.

        An unknown or malformed section_id matches no events.
        """
        if section_id is not None:
            try:
                events = self._store.list_events(SectionId.from_string(section_id))
            except ValueError:
                return []
        else:
            events = self._store.list_events()
        counts = self._store.attendee_counts([event.id for event in events])
        listings = [EventListing(event=e, attendee_count=counts.get(e.id, 0)) for e in events]
        return sorted(listings, key=_date_order)

    def get_event(self, event_id: str) -> EventListing:
        """Return an event by ID with its attendee count.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        event = self._store.get_event(parsed_id)
        if event is None:
            raise EventNotFoundError(event_id)
        count = self._store.attendee_counts([parsed_id]).get(parsed_id, 0)
        return EventListing(event=event, attendee_count=count)

    def create_event(
        self,
        fields: EventFields,
        actor: int | None,
        add_to_schedule: bool | None = None,
        quick_links: list[dict] | None = None,
    ) -> Event:
        """Create an event, optionally placing it on the schedule.

        quick_links, when given, become the event's quick links.

        Raises:
            ValidationError: If a field breaks an event invariant.
            SectionNotFoundError: If section_id names no section.
        """
        self._validate(fields)
        event = self._store.create_event(fields, created_by=actor)
        logger.info("Event %s created by user %s", event.id, actor)
        if add_to_schedule:
            self._schedule.ensure_scheduled(event.id)
        if quick_links is not None:
            self._store.replace_quick_links(event.id, _link_pairs(quick_links))
        return event

    def update_event(
        self,
        event_id: str,
        fields: EventFields,
        add_to_schedule: bool | None = None,
        quick_links: list[dict] | None = None,
    ) -> Event:
        """Overwrite an event's fields.

        add_to_schedule=None leaves the schedule alone; True schedules the
        event if it is not already; False takes it off. quick_links=None
        leaves the links alone; a list replaces them.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            ValidationError: If a field breaks an event invariant.
            SectionNotFoundError: If section_id names no section.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        self._validate(fields)
        event = self._store.update_event(parsed_id, fields)
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Event %s updated", event_id)
        if add_to_schedule is True:
            self._schedule.ensure_scheduled(parsed_id)
        elif add_to_schedule is False:
            self._schedule.remove(parsed_id)
        if quick_links is not None:
            self._store.replace_quick_links(parsed_id, _link_pairs(quick_links))
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event, then release its uploaded media.

        Signups, quick links and the schedule item go with the event. Media
        cleanup is best-effort and never fails the deletion.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        event = self._store.get_event(parsed_id)
        if event is None or not self._store.delete_event(parsed_id):
            raise EventNotFoundError(event_id)
        logger.info("Event %s deleted", event_id)
        self._release_media(event)

    def list_quick_links(self, event_id: str) -> list[QuickLink]:
        """Return an event's quick links in display order."""
        return self._store.list_quick_links(parse_event_id(event_id))

    def replace_quick_links(self, event_id: str, links: list[dict]) -> list[QuickLink]:
        """Replace every quick link of an event with the given list.

        Entries missing a title or url are skipped; order follows the list.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        if not self._store.event_exists(parsed_id):
            raise EventNotFoundError(event_id)
        return self._store.replace_quick_links(parsed_id, _link_pairs(links))

    def _validate(self, fields: EventFields) -> None:
        if not fields.title or not fields.title.strip():
            raise ValidationError("Title is required", field="title")
        if fields.participants_per_signup < 1:
            raise ValidationError(
                "Participants per signup must be at least 1", field="participantsPerSignup"
            )
        if fields.max_attendees is not None:
            try:
                Capacity(fields.max_attendees)
            except ValueError as exc:
                raise ValidationError(str(exc), field="maxAttendees") from None
        if fields.section_id is not None and self._sections.get_section(fields.section_id) is None:
            raise SectionNotFoundError(str(fields.section_id))

    def _release_media(self, event: Event) -> None:
        urls = event.media_urls
        if not urls:
            return
        try:
            results = self._media.delete_urls(urls)
        except Exception:
            logger.exception("Media cleanup failed for deleted event %s", event.id)
            return
        failed = [result.url for result in results if not result.success]
        if failed:
            logger.warning(
                "Could not delete %d of %d media files for event %s: %s",
                len(failed),
                len(urls),
                event.id,
                failed,
            )
