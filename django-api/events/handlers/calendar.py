"""Single-event iCalendar (.ics) export."""

from datetime import datetime, timedelta, timezone

from events.domain import Event
from events.domain.errors import ValidationError

DEFAULT_LOCATION = "JAX Darts Bar"
CALENDAR_NAME = "JAX Darts Bar Event"
EVENT_DURATION = timedelta(hours=2)
PRODID = "-//JAX Darts Bar//Venue Events//EN"


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _utc(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def build_calendar(event: Event, base_url: str, now: datetime | None = None) -> str:
    """Render an event as an iCalendar document.

    The event runs two hours from its date. Raises ValidationError when the
    event has no date.
    """
    if event.event_date is None:
        raise ValidationError("Event has no date", field="eventDate")

    stamp = now or datetime.now(timezone.utc)
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{_escape(CALENDAR_NAME)}",
        "BEGIN:VEVENT",
        f"UID:{event.id}@{_host(base_url)}",
        f"DTSTAMP:{_utc(stamp)}",
        f"DTSTART:{_utc(event.event_date)}",
        f"DTEND:{_utc(event.event_date + EVENT_DURATION)}",
        f"SUMMARY:{_escape(event.title)}",
        f"DESCRIPTION:{_escape(event.description or '')}",
        f"LOCATION:{_escape(event.location or DEFAULT_LOCATION)}",
        f"URL:{base_url.rstrip('/')}/events/{event.id}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines) + "\r\n"


def _host(base_url: str) -> str:
    return base_url.split("://", 1)[-1].split("/", 1)[0] or "localhost"
