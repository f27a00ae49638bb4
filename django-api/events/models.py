"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from events.domain.value_objects import EventType, LogoType, SignupStatus

BANNER_ID = "default"


def _choices(enum) -> list[tuple[str, str]]:
    return [(member.value, member.name.replace("_", " ").title()) for member in enum]


class Section(models.Model):
    """Persistence model for event sections."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    order = models.IntegerField(default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order"]

    def __str__(self) -> str:
        return self.title


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    event_date = models.DateTimeField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    max_attendees = models.PositiveIntegerField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    show_capacity = models.BooleanField(default=True)
    section = models.ForeignKey(
        Section,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="events",
    )
    event_type = models.CharField(
        max_length=20, choices=_choices(EventType), default=EventType.EVENT.value
    )
    logo_type = models.CharField(
        max_length=10, choices=_choices(LogoType), default=LogoType.JSL.value
    )
    allow_signups = models.BooleanField(default=True)
    participants_per_signup = models.PositiveIntegerField(default=1)
    featured_image = models.URLField(max_length=500, blank=True, null=True)
    gallery_images = models.JSONField(default=list, blank=True)
    detailed_content = models.TextField(blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["section", "event_date"], name="event_section_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class QuickLink(models.Model):
    """Persistence model for an event's external links."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="quick_links")
    title = models.CharField(max_length=255)
    url = models.URLField(max_length=500)
    order = models.IntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["order"]
        indexes = [
            models.Index(fields=["event", "order"], name="quicklink_event_order_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event.title} - {self.title}"


class Signup(models.Model):
    """Persistence model for event registrations."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="signups")
    notes = models.TextField(blank=True, null=True)
    status = models.CharField(
        max_length=20,
        choices=_choices(SignupStatus),
        default=SignupStatus.REGISTERED.value,
    )
    additional_participants = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="signup_event_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.event.title}"


class ScheduleItem(models.Model):
    """Persistence model marking an event as part of the public schedule."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.OneToOneField(
        Event, on_delete=models.CASCADE, related_name="schedule_item"
    )
    order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order"]

    def __str__(self) -> str:
        return f"{self.order}: {self.event.title}"


class MessageBanner(models.Model):
    """Persistence model for the site-wide banner. A single row keyed BANNER_ID."""

    id = models.CharField(primary_key=True, max_length=32, default=BANNER_ID, editable=False)
    message = models.TextField()
    is_active = models.BooleanField(default=False)
    background_color = models.CharField(max_length=7, default="#3B82F6")
    text_color = models.CharField(max_length=7, default="#FFFFFF")
    show_close_button = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.message
