"""Django ORM implementation of the stores.

Each store queries the ORM and converts rows to domain models.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import transaction
from django.db.models import Max

from events import models
from events.domain import (
    BannerFields,
    Event,
    EventFields,
    EventId,
    EventType,
    LogoType,
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
from events.domain.models import parse_gallery_images
from events.stores.interfaces import (
    BannerStore,
    EventStore,
    ScheduleStore,
    SectionStore,
    SignupStore,
)

DEFAULT_BANNER_MESSAGE = "Welcome to First Jax"


def to_section(row: models.Section) -> Section:
    return Section(
        id=SectionId(row.id),
        title=row.title,
        description=row.description,
        order=row.order,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        event_date=row.event_date,
        location=row.location,
        max_attendees=row.max_attendees,
        is_active=row.is_active,
        show_capacity=row.show_capacity,
        section_id=SectionId(row.section_id) if row.section_id else None,
        event_type=EventType(row.event_type),
        logo_type=LogoType(row.logo_type),
        allow_signups=row.allow_signups,
        participants_per_signup=row.participants_per_signup,
        featured_image=row.featured_image,
        gallery_images=parse_gallery_images(row.gallery_images),
        detailed_content=row.detailed_content,
        created_at=row.created_at,
        updated_at=row.updated_at,
        created_by=row.created_by_id,
    )


def to_quick_link(row: models.QuickLink) -> QuickLink:
    return QuickLink(
        id=row.id,
        event_id=EventId(row.event_id),
        title=row.title,
        url=row.url,
        order=row.order,
    )


def attendee_weight(raw_participants) -> int:
    """People one signup row accounts for: the registrant and each named guest."""
    return 1 + sum(1 for p in Participant.parse_many(raw_participants) if p.is_named)


def to_signup(row: models.Signup) -> Signup:
    return Signup(
        id=SignupId(row.id),
        name=row.name,
        email=row.email,
        phone=row.phone,
        event_id=EventId(row.event_id),
        notes=row.notes,
        status=SignupStatus(row.status),
        additional_participants=Participant.parse_many(row.additional_participants),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_schedule_item(row: models.ScheduleItem) -> ScheduleItem:
    return ScheduleItem(
        id=row.id,
        event_id=EventId(row.event_id),
        order=row.order,
        created_at=row.created_at,
        updated_at=row.updated_at,
        event=to_event(row.event),
    )


def to_banner(row: models.MessageBanner) -> MessageBanner:
    return MessageBanner(
        id=row.id,
        message=row.message,
        is_active=row.is_active,
        background_color=row.background_color,
        text_color=row.text_color,
        show_close_button=row.show_close_button,
        updated_at=row.updated_at,
    )


def _event_values(fields: EventFields) -> dict:
    return {
        "title": fields.title,
        "description": fields.description,
        "event_date": fields.event_date,
        "location": fields.location,
        "max_attendees": fields.max_attendees,
        "is_active": fields.is_active,
        "show_capacity": fields.show_capacity,
        "section_id": fields.section_id.value if fields.section_id else None,
        "event_type": fields.event_type.value,
        "logo_type": fields.logo_type.value,
        "allow_signups": fields.allow_signups,
        "participants_per_signup": fields.participants_per_signup,
        "featured_image": fields.featured_image,
        "gallery_images": list(fields.gallery_images),
        "detailed_content": fields.detailed_content,
    }


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self, section_id: SectionId | None = None) -> list[Event]:
        rows = models.Event.objects.all()
        if section_id is not None:
            rows = rows.filter(section_id=section_id.value)
        return [to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_event(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    @contextmanager
    def locked_event(self, event_id: EventId) -> Iterator[Event | None]:
        with transaction.atomic():
            row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            yield to_event(row) if row else None

    def create_event(self, fields: EventFields, created_by: int | None) -> Event:
        row = models.Event.objects.create(created_by_id=created_by, **_event_values(fields))
        return to_event(row)

    def update_event(self, event_id: EventId, fields: EventFields) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for name, value in _event_values(fields).items():
            setattr(row, name, value)
        row.save()
        return to_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def attendee_counts(self, event_ids: list[EventId]) -> dict[EventId, int]:
        counts = {event_id: 0 for event_id in event_ids}
        rows = models.Signup.objects.filter(
            event_id__in=[e.value for e in event_ids]
        ).values_list("event_id", "additional_participants")
        for event_id, participants in rows:
            counts[EventId(event_id)] += attendee_weight(participants)
        return counts

    def list_quick_links(self, event_id: EventId) -> list[QuickLink]:
        rows = models.QuickLink.objects.filter(event_id=event_id.value).order_by("order")
        return [to_quick_link(row) for row in rows]

    def replace_quick_links(
        self, event_id: EventId, links: list[tuple[str, str]]
    ) -> list[QuickLink]:
        with transaction.atomic():
            models.QuickLink.objects.filter(event_id=event_id.value).delete()
            # Saved one at a time so post_save fires for cache invalidation.
            rows = [
                models.QuickLink.objects.create(
                    event_id=event_id.value, title=title, url=url, order=index
                )
                for index, (title, url) in enumerate(links)
            ]
        return [to_quick_link(row) for row in rows]


class DjangoSignupStore(SignupStore):
    """Relational signup store using Django ORM."""

    def list_signups(self, event_id: EventId | None = None) -> list[Signup]:
        rows = models.Signup.objects.order_by("-created_at")
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        return [to_signup(row) for row in rows]

    def count_for_event(self, event_id: EventId) -> int:
        rows = models.Signup.objects.filter(event_id=event_id.value).values_list(
            "additional_participants", flat=True
        )
        return sum(attendee_weight(participants) for participants in rows)

    def create_signup(
        self,
        event_id: EventId,
        name: str,
        email: str,
        phone: str,
        notes: str | None,
        additional_participants: tuple[Participant, ...],
    ) -> Signup:
        row = models.Signup.objects.create(
            event_id=event_id.value,
            name=name,
            email=email,
            phone=phone,
            notes=notes,
            status=SignupStatus.REGISTERED.value,
            additional_participants=[p.to_dict() for p in additional_participants],
        )
        return to_signup(row)

    def update_signup(
        self, signup_id: SignupId, status: SignupStatus, notes: str | None
    ) -> Signup | None:
        row = models.Signup.objects.filter(pk=signup_id.value).first()
        if row is None:
            return None
        row.status = status.value
        row.notes = notes
        row.save(update_fields=["status", "notes", "updated_at"])
        return to_signup(row)

    def delete_signup(self, signup_id: SignupId) -> bool:
        deleted, _ = models.Signup.objects.filter(pk=signup_id.value).delete()
        return deleted > 0


class DjangoSectionStore(SectionStore):
    """Relational section store using Django ORM."""

    def list_sections(self) -> list[Section]:
        return [to_section(row) for row in models.Section.objects.order_by("order")]

    def get_section(self, section_id: SectionId) -> Section | None:
        row = models.Section.objects.filter(pk=section_id.value).first()
        return to_section(row) if row else None

    def create_section(
        self, title: str, description: str | None, order: int, created_by: int | None
    ) -> Section:
        row = models.Section.objects.create(
            title=title, description=description, order=order, created_by_id=created_by
        )
        return to_section(row)

    def update_section(
        self, section_id: SectionId, title: str, description: str | None, order: int
    ) -> Section | None:
        row = models.Section.objects.filter(pk=section_id.value).first()
        if row is None:
            return None
        row.title = title
        row.description = description
        row.order = order
        row.save()
        return to_section(row)

    def delete_section(self, section_id: SectionId) -> bool:
        deleted, _ = models.Section.objects.filter(pk=section_id.value).delete()
        return deleted > 0

    def swap_order(self, first: SectionId, second: SectionId) -> None:
        with transaction.atomic():
            rows = {
                row.id: row
                for row in models.Section.objects.select_for_update().filter(
                    pk__in=[first.value, second.value]
                )
            }
            a, b = rows[first.value], rows[second.value]
            a.order, b.order = b.order, a.order
            a.save(update_fields=["order", "updated_at"])
            b.save(update_fields=["order", "updated_at"])


class DjangoScheduleStore(ScheduleStore):
    """Relational schedule store using Django ORM."""

    def list_items(self, event_id: EventId | None = None) -> list[ScheduleItem]:
        rows = models.ScheduleItem.objects.select_related("event").order_by("order")
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        return [to_schedule_item(row) for row in rows]

    def get_for_event(self, event_id: EventId) -> ScheduleItem | None:
        row = (
            models.ScheduleItem.objects.select_related("event")
            .filter(event_id=event_id.value)
            .first()
        )
        return to_schedule_item(row) if row else None

    def next_order(self) -> int:
        highest = models.ScheduleItem.objects.aggregate(highest=Max("order"))["highest"]
        return 0 if highest is None else highest + 1

    def add(self, event_id: EventId, order: int) -> ScheduleItem:
        row = models.ScheduleItem.objects.create(event_id=event_id.value, order=order)
        row = models.ScheduleItem.objects.select_related("event").get(pk=row.pk)
        return to_schedule_item(row)

    def remove_for_event(self, event_id: EventId) -> bool:
        deleted, _ = models.ScheduleItem.objects.filter(event_id=event_id.value).delete()
        return deleted > 0

    def swap_order(self, first: EventId, second: EventId) -> None:
        with transaction.atomic():
            rows = {
                row.event_id: row
                for row in models.ScheduleItem.objects.select_for_update().filter(
                    event_id__in=[first.value, second.value]
                )
            }
            a, b = rows[first.value], rows[second.value]
            a.order, b.order = b.order, a.order
            a.save(update_fields=["order", "updated_at"])
            b.save(update_fields=["order", "updated_at"])


class DjangoBannerStore(BannerStore):
    """The banner lives in one row with a fixed primary key."""

    def get_or_create_default(self) -> MessageBanner:
        row, _ = models.MessageBanner.objects.get_or_create(
            pk=models.BANNER_ID, defaults={"message": DEFAULT_BANNER_MESSAGE}
        )
        return to_banner(row)

    def save(self, fields: BannerFields) -> MessageBanner:
        row, _ = models.MessageBanner.objects.update_or_create(
            pk=models.BANNER_ID,
            defaults={
                "message": fields.message,
                "is_active": fields.is_active,
                "background_color": fields.background_color,
                "text_color": fields.text_color,
                "show_close_button": fields.show_close_button,
            },
        )
        return to_banner(row)
