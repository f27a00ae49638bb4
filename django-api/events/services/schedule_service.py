"""Schedule service - which events appear on the public schedule, and in what order."""

import logging

from events.domain import Direction, EventId, ScheduleItem
from events.domain.errors import (
    AlreadyScheduledError,
    EventNotFoundError,
    InvalidEventIdError,
    ScheduleItemNotFoundError,
)
from events.stores.interfaces import EventStore, ScheduleStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None


class ScheduleService:
    """Service for schedule membership and ordering."""

    def __init__(self, store: ScheduleStore, events: EventStore) -> None:
        self._store = store
        self._events = events

    def list_schedule(self, event_id: str | None = None) -> list[ScheduleItem]:
        """Return schedule items ordered by order ascending."""
        if event_id is None:
            return self._store.list_items()
        return self._store.list_items(parse_event_id(event_id))

    def add(self, event_id: str) -> ScheduleItem:
        """Append an event to the end of the schedule.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            AlreadyScheduledError: If the event is already scheduled.
        """
        parsed_id = parse_event_id(event_id)
        if not self._events.event_exists(parsed_id):
            raise EventNotFoundError(event_id)
        if self._store.get_for_event(parsed_id) is not None:
            raise AlreadyScheduledError()
        item = self._store.add(parsed_id, self._store.next_order())
        logger.info("Event %s added to schedule at %d", event_id, item.order)
        return item

    def ensure_scheduled(self, event_id: EventId) -> ScheduleItem:
        """Schedule an event unless it already is."""
        existing = self._store.get_for_event(event_id)
        if existing is not None:
            return existing
        item = self._store.add(event_id, self._store.next_order())
        logger.info("Event %s added to schedule at %d", event_id, item.order)
        return item

    def remove(self, event_id: str | EventId) -> bool:
        """Take an event off the schedule. Returns False if it was not on it."""
        parsed_id = event_id if isinstance(event_id, EventId) else parse_event_id(event_id)
        removed = self._store.remove_for_event(parsed_id)
        if removed:
            logger.info("Event %s removed from schedule", parsed_id)
        return removed

    def move(self, event_id: str, direction: Direction) -> list[ScheduleItem]:
        """Swap an item's order with its neighbour. A no-op at either end.

        Orders are exchanged, never renumbered, so ties and gaps persist.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            ScheduleItemNotFoundError: If the event is not scheduled.
        """
        parsed_id = parse_event_id(event_id)
        items = self._store.list_items()
        position = next(
            (index for index, item in enumerate(items) if item.event_id == parsed_id), None
        )
        if position is None:
            raise ScheduleItemNotFoundError(event_id)
        target = position - 1 if direction is Direction.UP else position + 1
        if 0 <= target < len(items):
            self._store.swap_order(parsed_id, items[target].event_id)
            return self._store.list_items()
        return items
