"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from uuid import uuid4

import pytest

from events.domain import Capacity, EventId, Participant, SignupStatus
from events.domain.errors import EventFullError, ValidationError
from events.domain.models import parse_gallery_images

from fakes import make_event


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(12).value == 12

    def test_capacity_zero_is_unlimited(self):
        """A zero capacity means no limit."""
        assert Capacity(0).is_unlimited

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = uuid4()
        assert EventId.from_string(str(raw)).value == raw
        assert str(EventId(raw)) == str(raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestParticipant:
    """Tests for additional participant parsing."""

    def test_parse_many_accepts_list(self):
        participants = Participant.parse_many([{"name": "Bob", "email": "bob@example.com"}])
        assert participants == (Participant("Bob", "bob@example.com"),)

    def test_parse_many_accepts_json_text(self):
        """The public form may send the list JSON-encoded."""
        participants = Participant.parse_many('[{"name": "Bob"}]')
        assert participants == (Participant("Bob", ""),)

    def test_parse_many_malformed_is_empty(self):
        assert Participant.parse_many("{broken") == ()
        assert Participant.parse_many(None) == ()
        assert Participant.parse_many({"name": "Bob"}) == ()

    def test_whitespace_name_is_not_named(self):
        assert not Participant("   ", "x@example.com").is_named
        assert not Participant("   ", "x@example.com").is_reachable

    def test_named_without_email_is_not_reachable(self):
        participant = Participant("Bob")
        assert participant.is_named
        assert not participant.is_reachable


class TestGalleryImages:
    def test_json_text_is_decoded(self):
        assert parse_gallery_images('["a.png", "b.png"]') == ("a.png", "b.png")

    def test_malformed_is_empty(self):
        assert parse_gallery_images("a.png,b.png") == ()
        assert parse_gallery_images(None) == ()

    def test_blank_and_non_string_entries_are_dropped(self):
        assert parse_gallery_images(["a.png", "", 3, None]) == ("a.png",)


class TestEventMediaUrls:
    def test_featured_image_first_and_duplicates_removed(self):
        event = make_event(
            featured_image="https://cdn.example.com/a.png",
            gallery_images=("https://cdn.example.com/b.png", "https://cdn.example.com/a.png"),
        )
        assert event.media_urls == [
            "https://cdn.example.com/a.png",
            "https://cdn.example.com/b.png",
        ]

    def test_no_media(self):
        assert make_event().media_urls == []


class TestSignupStatus:
    def test_values(self):
        assert SignupStatus("no_show") is SignupStatus.NO_SHOW
        with pytest.raises(ValueError):
            SignupStatus("maybe")


class TestDomainErrors:
    def test_str_includes_code(self):
        assert str(EventFullError()) == "EVENT_FULL: Event is full"

    def test_validation_error_keeps_field(self):
        error = ValidationError("Title is required", field="title")
        assert error.field == "title"
        assert error.message == "Title is required"
