"""Cache keys for public API responses.

The database is the source of truth; these entries only save queries and are
dropped by events/signals.py whenever the underlying rows change.
"""

from uuid import uuid4

from django.core.cache import cache

EVENT_LIST_GENERATION = "events:list:generation"
SECTIONS = "sections:list"
SCHEDULE = "schedule:list"
BANNER = "banner"


def _event_list_generation() -> str:
    generation = cache.get(EVENT_LIST_GENERATION)
    if generation is None:
        generation = uuid4().hex
        cache.set(EVENT_LIST_GENERATION, generation, timeout=None)
    return generation


def event_list(section_id: str | None = None) -> str:
    """Key for the event list, per section filter, within the current generation."""
    suffix = f"section:{section_id}" if section_id else "all"
    return f"events:list:{_event_list_generation()}:{suffix}"


def event_detail(event_id) -> str:
    return f"events:{event_id}"


def quick_links(event_id) -> str:
    return f"events:{event_id}:links"


def invalidate_event_lists() -> None:
    """Drop every cached event list variant at once."""
    cache.set(EVENT_LIST_GENERATION, uuid4().hex, timeout=None)


def invalidate_event(event_id) -> None:
    invalidate_event_lists()
    cache.delete_many([event_detail(event_id), quick_links(event_id), SCHEDULE])
