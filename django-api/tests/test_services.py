"""Unit tests for the services, against in-memory stores.

These test business rules and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from uuid import uuid4

import pytest

from events.domain import (
    BannerFields,
    Direction,
    EventFields,
    Participant,
    SignupInput,
    SignupStatus,
)
from events.domain.errors import (
    AlreadyScheduledError,
    EventFullError,
    EventNotFoundError,
    InactiveEventError,
    InvalidEventIdError,
    NoRecipientsError,
    RateLimitedError,
    ScheduleItemNotFoundError,
    SectionNotFoundError,
    SignupNotFoundError,
    SignupsClosedError,
    UpstreamError,
    ValidationError,
)
from events.services.banner_service import BannerService
from events.services.event_service import EventService
from events.services.notification_service import NotificationService
from events.services.schedule_service import ScheduleService
from events.services.section_service import SectionService
from events.services.signup_service import SignupService

from fakes import (
    FakeLimiter,
    FakeMailer,
    FakeMedia,
    InMemoryBannerStore,
    InMemoryEventStore,
    InMemoryScheduleStore,
    InMemorySectionStore,
    InMemorySignupStore,
    make_event,
)


class World:
    """Services wired to shared in-memory stores."""

    def __init__(self, limiter=None, mailer=None, media=None) -> None:
        self.signup_store = InMemorySignupStore()
        self.event_store = InMemoryEventStore(self.signup_store)
        self.section_store = InMemorySectionStore()
        self.schedule_store = InMemoryScheduleStore(self.event_store)
        self.limiter = limiter or FakeLimiter()
        self.mailer = mailer or FakeMailer()
        self.media = media or FakeMedia()

        self.notifications = NotificationService(self.event_store, self.signup_store, self.mailer)
        self.schedule = ScheduleService(self.schedule_store, self.event_store)
        self.events = EventService(
            self.event_store, self.section_store, self.schedule, self.media
        )
        self.signups = SignupService(
            self.event_store, self.signup_store, self.limiter, self.notifications
        )
        self.sections = SectionService(self.section_store)


@pytest.fixture
def world() -> World:
    return World()


def signup_input(event_id, **overrides) -> SignupInput:
    values = dict(
        name="Ann",
        email="ann@example.com",
        phone="555-0100",
        event_id=str(event_id),
    )
    values.update(overrides)
    return SignupInput(**values)


class TestSignupAdmission:
    """Tests for SignupService.submit_signup."""

    def test_admits_and_confirms(self, world: World):
        event = world.event_store.add(make_event(max_attendees=10))

        signup = world.signups.submit_signup(signup_input(event.id), "10.0.0.1")

        assert signup.status is SignupStatus.REGISTERED
        assert world.signup_store.count_for_event(event.id) == 1
        assert [r.email for r, _ in world.mailer.confirmations] == ["ann@example.com"]

    def test_capacity_check_runs_under_event_lock(self, world: World):
        event = world.event_store.add(make_event())
        world.signups.submit_signup(signup_input(event.id), "10.0.0.1")
        assert world.event_store.locks_taken == 1

    @pytest.mark.parametrize("missing", ["name", "email", "phone", "event_id"])
    def test_missing_required_field_raises_validation_error(self, world: World, missing):
        event = world.event_store.add(make_event())
        with pytest.raises(ValidationError):
            world.signups.submit_signup(
                signup_input(**{"event_id": event.id, missing: "  "}), "10.0.0.1"
            )
        assert world.limiter.hits == []

    def test_rate_limit_checked_before_event_state(self):
        world = World(limiter=FakeLimiter(remaining=0))
        event = world.event_store.add(make_event(is_active=False))
        with pytest.raises(RateLimitedError):
            world.signups.submit_signup(signup_input(event.id), "10.0.0.1")

    def test_unknown_event_raises_not_found(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.signups.submit_signup(signup_input(uuid4()), "10.0.0.1")

    def test_malformed_event_id_raises_not_found(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.signups.submit_signup(signup_input("nope"), "10.0.0.1")

    def test_inactive_event_rejected_even_with_room(self, world: World):
        event = world.event_store.add(
            make_event(is_active=False, allow_signups=True, max_attendees=None)
        )
        with pytest.raises(InactiveEventError):
            world.signups.submit_signup(signup_input(event.id), "10.0.0.1")

    def test_inactive_checked_before_signups_closed(self, world: World):
        event = world.event_store.add(make_event(is_active=False, allow_signups=False))
        with pytest.raises(InactiveEventError):
            world.signups.submit_signup(signup_input(event.id), "10.0.0.1")

    def test_closed_signups_rejected(self, world: World):
        event = world.event_store.add(make_event(allow_signups=False))
        with pytest.raises(SignupsClosedError):
            world.signups.submit_signup(signup_input(event.id), "10.0.0.1")

    def test_guest_fills_event_then_next_signup_is_full(self, world: World):
        """maxAttendees=2: a signup with one named guest fills the event."""
        event = world.event_store.add(make_event(max_attendees=2, participants_per_signup=1))

        world.signups.submit_signup(
            signup_input(event.id, additional_participants=(Participant("Bob"),)),
            "10.0.0.1",
        )
        assert world.event_store.attendee_counts([event.id])[event.id] == 2

        with pytest.raises(EventFullError):
            world.signups.submit_signup(signup_input(event.id, name="Cara"), "10.0.0.2")

    def test_hidden_capacity_admits_without_limit(self, world: World):
        event = world.event_store.add(make_event(max_attendees=2, show_capacity=False))
        for index in range(5):
            world.signups.submit_signup(signup_input(event.id), f"10.0.0.{index}")
        assert world.signup_store.count_for_event(event.id) == 5

    def test_unnamed_participants_neither_counted_nor_stored(self, world: World):
        event = world.event_store.add(make_event(max_attendees=1))
        signup = world.signups.submit_signup(
            signup_input(
                event.id,
                additional_participants=(Participant("  ", "ghost@example.com"),),
            ),
            "10.0.0.1",
        )
        assert signup.additional_participants == ()

    def test_confirmations_sent_to_reachable_guests(self, world: World):
        event = world.event_store.add(make_event())
        world.signups.submit_signup(
            signup_input(
                event.id,
                additional_participants=(
                    Participant("Bob", "bob@example.com"),
                    Participant("Cara"),
                ),
            ),
            "10.0.0.1",
        )
        emails = [recipient.email for recipient, _ in world.mailer.confirmations]
        assert emails == ["ann@example.com", "bob@example.com"]

    def test_mail_failure_does_not_fail_signup(self):
        world = World(mailer=FakeMailer(fail_all=True))
        event = world.event_store.add(make_event())
        signup = world.signups.submit_signup(signup_input(event.id), "10.0.0.1")
        assert world.signup_store.signups[signup.id] == signup


class TestSignupAdministration:
    def test_list_signups_invalid_event_id(self, world: World):
        with pytest.raises(InvalidEventIdError):
            world.signups.list_signups("nope")

    def test_update_defaults_status_to_registered(self, world: World):
        event = world.event_store.add(make_event())
        signup = world.signups.submit_signup(signup_input(event.id), "10.0.0.1")
        world.signups.update_signup(str(signup.id), "attended", None)

        updated = world.signups.update_signup(str(signup.id), None, "Paid at the bar")

        assert updated.status is SignupStatus.REGISTERED
        assert updated.notes == "Paid at the bar"

    def test_update_unknown_status(self, world: World):
        with pytest.raises(ValidationError):
            world.signups.update_signup(str(uuid4()), "maybe", None)

    def test_update_missing_signup(self, world: World):
        with pytest.raises(SignupNotFoundError):
            world.signups.update_signup(str(uuid4()), "attended", None)

    def test_delete_missing_signup(self, world: World):
        with pytest.raises(SignupNotFoundError):
            world.signups.delete_signup("nope")


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, world: World):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            world.events.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, world: World):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            world.events.get_event(str(uuid4()))

    def test_list_events_sorted_by_date_undated_last(self, world: World):
        from datetime import datetime, timezone

        undated = world.event_store.add(make_event(title="Someday"))
        later = world.event_store.add(
            make_event(title="Later", event_date=datetime(2026, 5, 2, tzinfo=timezone.utc))
        )
        sooner = world.event_store.add(
            make_event(title="Sooner", event_date=datetime(2026, 5, 1, tzinfo=timezone.utc))
        )

        listings = world.events.list_events()

        assert [listing.event.id for listing in listings] == [sooner.id, later.id, undated.id]

    def test_list_events_malformed_section_is_empty(self, world: World):
        world.event_store.add(make_event())
        assert world.events.list_events("nope") == []

    def test_create_requires_title(self, world: World):
        with pytest.raises(ValidationError):
            world.events.create_event(EventFields(title="  "), actor=1)

    def test_create_rejects_negative_capacity(self, world: World):
        with pytest.raises(ValidationError):
            world.events.create_event(EventFields(title="League", max_attendees=-1), actor=1)

    def test_create_rejects_unknown_section(self, world: World):
        from events.domain import SectionId

        with pytest.raises(SectionNotFoundError):
            world.events.create_event(
                EventFields(title="League", section_id=SectionId(uuid4())), actor=1
            )

    def test_create_with_schedule_and_links(self, world: World):
        event = world.events.create_event(
            EventFields(title="League Night"),
            actor=7,
            add_to_schedule=True,
            quick_links=[{"title": "Rules", "url": "https://example.com/rules"}],
        )
        assert event.created_by == 7
        assert world.schedule_store.get_for_event(event.id) is not None
        assert [link.title for link in world.event_store.list_quick_links(event.id)] == ["Rules"]

    def test_add_to_schedule_twice_keeps_one_item(self, world: World):
        event = world.events.create_event(EventFields(title="League"), actor=1)

        world.events.update_event(str(event.id), EventFields(title="League"), add_to_schedule=True)
        world.events.update_event(str(event.id), EventFields(title="League"), add_to_schedule=True)

        assert len(world.schedule.list_schedule(str(event.id))) == 1

    def test_update_without_schedule_flag_leaves_schedule(self, world: World):
        event = world.events.create_event(EventFields(title="League"), actor=1, add_to_schedule=True)
        world.events.update_event(str(event.id), EventFields(title="Renamed"))
        assert world.schedule_store.get_for_event(event.id) is not None

    def test_update_with_false_flag_unschedules(self, world: World):
        event = world.events.create_event(EventFields(title="League"), actor=1, add_to_schedule=True)
        world.events.update_event(str(event.id), EventFields(title="League"), add_to_schedule=False)
        assert world.schedule_store.get_for_event(event.id) is None

    def test_update_missing_event(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.events.update_event(str(uuid4()), EventFields(title="League"))

    def test_replace_quick_links_with_empty_list_removes_all(self, world: World):
        event = world.event_store.add(make_event())
        world.events.replace_quick_links(
            str(event.id), [{"title": "Rules", "url": "https://example.com/rules"}]
        )

        assert world.events.replace_quick_links(str(event.id), []) == []
        assert world.events.list_quick_links(str(event.id)) == []

    def test_replace_quick_links_skips_incomplete_and_orders_by_index(self, world: World):
        event = world.event_store.add(make_event())
        links = world.events.replace_quick_links(
            str(event.id),
            [
                {"title": "Rules", "url": "https://example.com/rules"},
                {"title": "", "url": "https://example.com/blank"},
                {"title": "No url"},
                {"title": "Bracket", "url": "https://example.com/bracket"},
            ],
        )
        assert [(link.title, link.order) for link in links] == [("Rules", 0), ("Bracket", 1)]

    def test_replace_quick_links_missing_event(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.events.replace_quick_links(str(uuid4()), [])

    def test_delete_cascades_and_requests_one_deletion_per_distinct_url(self, world: World):
        event = world.event_store.add(
            make_event(
                featured_image="https://cdn.example.com/a.png",
                gallery_images=(
                    "https://cdn.example.com/a.png",
                    "https://cdn.example.com/b.png",
                    "https://cdn.example.com/b.png",
                ),
            )
        )
        world.signups.submit_signup(signup_input(event.id), "10.0.0.1")
        world.events.replace_quick_links(
            str(event.id), [{"title": "Rules", "url": "https://example.com/rules"}]
        )

        world.events.delete_event(str(event.id))

        assert world.media.deleted == [
            ["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"]
        ]
        assert world.signup_store.list_signups(event.id) == []
        assert world.event_store.list_quick_links(event.id) == []

    def test_delete_without_media_skips_storage(self, world: World):
        event = world.event_store.add(make_event())
        world.events.delete_event(str(event.id))
        assert world.media.deleted == []

    def test_media_failure_does_not_fail_delete(self):
        world = World(media=FakeMedia(fail=True))
        event = world.event_store.add(make_event(featured_image="https://cdn.example.com/a.png"))

        world.events.delete_event(str(event.id))

        assert not world.event_store.event_exists(event.id)

    def test_delete_missing_event(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.events.delete_event(str(uuid4()))


class TestScheduleService:
    def test_add_appends_after_highest_order(self, world: World):
        first = world.event_store.add(make_event())
        second = world.event_store.add(make_event())

        assert world.schedule.add(str(first.id)).order == 0
        assert world.schedule.add(str(second.id)).order == 1

    def test_add_twice_raises(self, world: World):
        event = world.event_store.add(make_event())
        world.schedule.add(str(event.id))
        with pytest.raises(AlreadyScheduledError):
            world.schedule.add(str(event.id))

    def test_add_missing_event(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.schedule.add(str(uuid4()))

    def test_remove_unscheduled_is_not_an_error(self, world: World):
        assert world.schedule.remove(str(uuid4())) is False

    def test_move_swaps_exactly_two_orders(self, world: World):
        events = [world.event_store.add(make_event()) for _ in range(3)]
        for event in events:
            world.schedule.add(str(event.id))

        items = world.schedule.move(str(events[2].id), Direction.UP)

        assert [(item.event_id, item.order) for item in items] == [
            (events[0].id, 0),
            (events[2].id, 1),
            (events[1].id, 2),
        ]

    def test_move_at_edge_is_noop(self, world: World):
        events = [world.event_store.add(make_event()) for _ in range(2)]
        for event in events:
            world.schedule.add(str(event.id))

        items = world.schedule.move(str(events[0].id), Direction.UP)

        assert [item.event_id for item in items] == [events[0].id, events[1].id]

    def test_move_unscheduled_event(self, world: World):
        with pytest.raises(ScheduleItemNotFoundError):
            world.schedule.move(str(uuid4()), Direction.DOWN)


class TestSectionService:
    def test_create_defaults_order_to_zero(self, world: World):
        section = world.sections.create_section("Leagues", None, None, actor=1)
        assert section.order == 0

    def test_update_requires_title(self, world: World):
        section = world.sections.create_section("Leagues", None, 3, actor=1)
        with pytest.raises(ValidationError):
            world.sections.update_section(str(section.id), "", None, None)

    def test_update_omitted_order_resets_to_zero(self, world: World):
        section = world.sections.create_section("Leagues", None, 3, actor=1)
        assert world.sections.update_section(str(section.id), "Leagues", None, None).order == 0

    def test_move_down_swaps_with_next(self, world: World):
        first = world.sections.create_section("Leagues", None, 0, actor=1)
        second = world.sections.create_section("Socials", None, 1, actor=1)

        sections = world.sections.move(str(first.id), Direction.DOWN)

        assert [section.id for section in sections] == [second.id, first.id]

    def test_delete_missing_section(self, world: World):
        with pytest.raises(SectionNotFoundError):
            world.sections.delete_section(str(uuid4()))


class TestNotificationService:
    def test_bulk_email_deduplicates_in_first_seen_order(self, world: World):
        event = world.event_store.add(make_event())
        world.signups.submit_signup(
            signup_input(
                event.id,
                additional_participants=(Participant("Bob", "bob@example.com"),),
            ),
            "10.0.0.1",
        )
        world.signups.submit_signup(
            signup_input(event.id, name="Bob", email="bob@example.com"), "10.0.0.2"
        )

        count = world.notifications.send_bulk_email(str(event.id), "Start time", "We start at 8.")

        recipients, subject, _, _ = world.mailer.bulk[0]
        assert count == 2
        assert sorted(recipients) == ["ann@example.com", "bob@example.com"]
        assert subject == "Start time"

    def test_bulk_email_without_signups(self, world: World):
        event = world.event_store.add(make_event())
        with pytest.raises(NoRecipientsError):
            world.notifications.send_bulk_email(str(event.id), "Hi", "Hello there")

    def test_bulk_email_requires_subject_and_message(self, world: World):
        with pytest.raises(ValidationError):
            world.notifications.send_bulk_email(str(uuid4()), " ", "Hello there")

    def test_bulk_email_missing_event(self, world: World):
        with pytest.raises(EventNotFoundError):
            world.notifications.send_bulk_email(str(uuid4()), "Hi", "Hello there")

    def test_bulk_email_invalid_id(self, world: World):
        with pytest.raises(InvalidEventIdError):
            world.notifications.send_bulk_email("nope", "Hi", "Hello there")

    def test_bulk_email_backend_failure_is_upstream_error(self):
        world = World(mailer=FakeMailer(fail_for={""}))
        event = world.event_store.add(make_event())
        world.signups.submit_signup(signup_input(event.id), "10.0.0.1")
        with pytest.raises(UpstreamError):
            world.notifications.send_bulk_email(str(event.id), "Hi", "Hello there")

    def test_contact_failure_is_upstream_error(self):
        world = World(mailer=FakeMailer(fail_all=True))
        with pytest.raises(UpstreamError):
            world.notifications.send_contact("Ann", "ann@example.com", "Do you run leagues?")

    def test_partial_confirmation_failure_counts_successes(self):
        world = World(mailer=FakeMailer(fail_for={"bob@example.com"}))
        event = world.event_store.add(make_event())
        signup = world.signup_store.create_signup(
            event.id,
            "Ann",
            "ann@example.com",
            "555",
            None,
            (Participant("Bob", "bob@example.com"), Participant("Cara", "cara@example.com")),
        )
        assert world.notifications.notify_signup(signup, event) == 2


class TestBannerService:
    def test_get_creates_default_once(self):
        service = BannerService(InMemoryBannerStore())
        first = service.get_banner()
        second = service.get_banner()
        assert first == second
        assert first.message == "Welcome to First Jax"
        assert first.is_active is False

    def test_update_rejects_bad_colour(self):
        service = BannerService(InMemoryBannerStore())
        with pytest.raises(ValidationError):
            service.update_banner(BannerFields(message="Hi", background_color="blue"))

    def test_update_saves_fields(self):
        service = BannerService(InMemoryBannerStore())
        banner = service.update_banner(BannerFields(message="Closed Monday", is_active=True))
        assert banner.is_active is True
        assert service.get_banner().message == "Closed Monday"
