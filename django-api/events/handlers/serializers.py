"""Serializers for transforming domain models to API responses and back.

API payloads use camelCase keys; domain models use snake_case attributes.
"""

from rest_framework import serializers

from events.domain import (
    BannerFields,
    EventFields,
    EventType,
    LogoType,
    Participant,
    SectionId,
    SignupInput,
)
from events.domain.errors import SectionNotFoundError
from events.domain.models import parse_gallery_images


class SectionSerializer(serializers.Serializer):
    """Serializer for Section domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    order = serializers.IntegerField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    eventDate = serializers.DateTimeField(source="event_date", allow_null=True)
    location = serializers.CharField(allow_null=True)
    maxAttendees = serializers.IntegerField(source="max_attendees", allow_null=True)
    isActive = serializers.BooleanField(source="is_active")
    showCapacity = serializers.BooleanField(source="show_capacity")
    sectionId = serializers.CharField(source="section_id", allow_null=True)
    eventType = serializers.CharField(source="event_type.value")
    logoType = serializers.CharField(source="logo_type.value")
    allowSignups = serializers.BooleanField(source="allow_signups")
    participantsPerSignup = serializers.IntegerField(source="participants_per_signup")
    featuredImage = serializers.CharField(source="featured_image", allow_null=True)
    galleryImages = serializers.ListField(source="gallery_images", child=serializers.CharField())
    detailedContent = serializers.CharField(source="detailed_content", allow_null=True)
    createdById = serializers.IntegerField(source="created_by", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventListingSerializer(EventSerializer):
    """An event flattened together with its attendee count."""

    def to_representation(self, instance):
        data = super().to_representation(instance.event)
        data["attendeeCount"] = instance.attendee_count
        return data


class QuickLinkSerializer(serializers.Serializer):
    """Serializer for QuickLink domain model."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    title = serializers.CharField()
    url = serializers.CharField()
    order = serializers.IntegerField()


class ParticipantSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()


class SignupSerializer(serializers.Serializer):
    """Serializer for Signup domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    notes = serializers.CharField(allow_null=True)
    status = serializers.CharField(source="status.value")
    additionalParticipants = ParticipantSerializer(
        source="additional_participants", many=True
    )
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class ScheduleItemSerializer(serializers.Serializer):
    """Serializer for ScheduleItem domain model, with its event embedded."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    order = serializers.IntegerField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    event = EventSerializer(allow_null=True)


class BannerSerializer(serializers.Serializer):
    """Serializer for MessageBanner domain model."""

    message = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    backgroundColor = serializers.CharField(source="background_color")
    textColor = serializers.CharField(source="text_color")
    showCloseButton = serializers.BooleanField(source="show_close_button")
    updatedAt = serializers.DateTimeField(source="updated_at")


# Input serializers check payload shape only. Business rules (required
# titles, capacity, existence) are enforced by the services.


class EventWriteSerializer(serializers.Serializer):
    """Create/update payload for an event."""

    id = serializers.CharField(required=False, allow_blank=True)
    title = serializers.CharField(default="", allow_blank=True)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    eventDate = serializers.DateTimeField(source="event_date", required=False, allow_null=True)
    location = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    maxAttendees = serializers.IntegerField(
        source="max_attendees", required=False, allow_null=True
    )
    isActive = serializers.BooleanField(source="is_active", required=False)
    showCapacity = serializers.BooleanField(source="show_capacity", required=False)
    sectionId = serializers.CharField(
        source="section_id", required=False, allow_null=True, allow_blank=True
    )
    eventType = serializers.ChoiceField(
        source="event_type", choices=[t.value for t in EventType], required=False
    )
    logoType = serializers.ChoiceField(
        source="logo_type", choices=[t.value for t in LogoType], required=False
    )
    allowSignups = serializers.BooleanField(source="allow_signups", required=False)
    participantsPerSignup = serializers.IntegerField(
        source="participants_per_signup", required=False
    )
    featuredImage = serializers.CharField(
        source="featured_image", required=False, allow_null=True, allow_blank=True
    )
    galleryImages = serializers.JSONField(source="gallery_images", required=False, allow_null=True)
    detailedContent = serializers.CharField(
        source="detailed_content", required=False, allow_null=True, allow_blank=True
    )
    addToSchedule = serializers.BooleanField(source="add_to_schedule", required=False)
    quickLinks = serializers.ListField(
        source="quick_links", child=serializers.DictField(), required=False
    )

    def to_fields(self) -> EventFields:
        """Build EventFields from validated data; omitted keys take the defaults."""
        data = {
            key: value
            for key, value in self.validated_data.items()
            if key not in ("id", "add_to_schedule", "quick_links")
        }
        if "event_type" in data:
            data["event_type"] = EventType(data["event_type"])
        if "logo_type" in data:
            data["logo_type"] = LogoType(data["logo_type"])
        if "gallery_images" in data:
            data["gallery_images"] = parse_gallery_images(data["gallery_images"])
        if "section_id" in data:
            data["section_id"] = self._section_id(data["section_id"])
        for key in ("description", "location", "featured_image", "detailed_content"):
            if key in data and not data[key]:
                data[key] = None
        return EventFields(**data)

    @staticmethod
    def _section_id(value: str | None) -> SectionId | None:
        if not value:
            return None
        try:
            return SectionId.from_string(value)
        except ValueError:
            raise SectionNotFoundError(value) from None


class SignupWriteSerializer(serializers.Serializer):
    """Public signup form payload."""

    name = serializers.CharField(default="", allow_blank=True)
    email = serializers.EmailField(default="", allow_blank=True)
    phone = serializers.CharField(default="", allow_blank=True)
    eventId = serializers.CharField(source="event_id", default="", allow_blank=True)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    additionalParticipants = serializers.JSONField(
        source="additional_participants", required=False, allow_null=True
    )

    def to_input(self) -> SignupInput:
        data = self.validated_data
        return SignupInput(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            event_id=data["event_id"],
            notes=data.get("notes"),
            additional_participants=Participant.parse_many(data.get("additional_participants")),
        )


class SignupUpdateSerializer(serializers.Serializer):
    """Admin update of a signup's status and notes."""

    id = serializers.CharField(default="", allow_blank=True)
    status = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class SectionWriteSerializer(serializers.Serializer):
    """Create/update payload for a section."""

    id = serializers.CharField(default="", allow_blank=True)
    title = serializers.CharField(default="", allow_blank=True)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    order = serializers.IntegerField(required=False, allow_null=True)


class QuickLinksWriteSerializer(serializers.Serializer):
    quickLinks = serializers.ListField(
        source="quick_links", child=serializers.DictField(), default=list
    )


class BulkEmailSerializer(serializers.Serializer):
    subject = serializers.CharField(default="", allow_blank=True)
    message = serializers.CharField(default="", allow_blank=True)


class ContactSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2)
    email = serializers.EmailField()
    message = serializers.CharField(min_length=10)


class BannerWriteSerializer(serializers.Serializer):
    message = serializers.CharField(default="", allow_blank=True)
    isActive = serializers.BooleanField(source="is_active", default=False)
    backgroundColor = serializers.CharField(source="background_color", default="#3B82F6")
    textColor = serializers.CharField(source="text_color", default="#FFFFFF")
    showCloseButton = serializers.BooleanField(source="show_close_button", default=True)

    def to_fields(self) -> BannerFields:
        return BannerFields(**self.validated_data)


class ScheduleAddSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id", default="", allow_blank=True)


class MoveSerializer(serializers.Serializer):
    direction = serializers.ChoiceField(choices=["up", "down"])


class UploadSerializer(serializers.Serializer):
    file = serializers.FileField()


class DeleteFilesSerializer(serializers.Serializer):
    fileUrls = serializers.ListField(source="file_urls", child=serializers.CharField())


class DeletionResultSerializer(serializers.Serializer):
    url = serializers.CharField()
    success = serializers.BooleanField()
    error = serializers.CharField(allow_null=True)
