"""Signup service - admission control for public registrations.

A signup is admitted only when the event exists, is active, accepts signups
and has room for everyone on the submission. The capacity check and the
insert run under one row lock on the event, so two submissions racing for
the last place cannot both get in.
"""

import logging

from events.domain import EventId, Signup, SignupId, SignupInput, SignupStatus
from events.domain.errors import (
    EventFullError,
    EventNotFoundError,
    InactiveEventError,
    InvalidEventIdError,
    RateLimitedError,
    SignupNotFoundError,
    SignupsClosedError,
    ValidationError,
)
from events.services.capacity import can_admit, count_named_participants
from events.services.notification_service import NotificationService
from events.services.rate_limit import RateLimiter
from events.stores.interfaces import EventStore, SignupStore

logger = logging.getLogger(__name__)


class SignupService:
    """Service for creating and administering signups."""

    def __init__(
        self,
        events: EventStore,
        signups: SignupStore,
        limiter: RateLimiter,
        notifications: NotificationService,
    ) -> None:
        self._events = events
        self._signups = signups
        self._limiter = limiter
        self._notifications = notifications

    def submit_signup(self, data: SignupInput, client_identity: str) -> Signup:
        """Admit a public signup.

        Checks run in order and the first failure wins.

        Raises:
            ValidationError: If name, email, phone or event_id is blank.
            RateLimitedError: If the client exceeded its attempts for the window.
            EventNotFoundError: If the event does not exist.
            InactiveEventError: If the event is not active.
            SignupsClosedError: If the event does not accept signups.
            EventFullError: If the signup would exceed the event's capacity.
        """
        required = (data.name, data.email, data.phone, data.event_id)
        if not all(value and value.strip() for value in required):
            raise ValidationError("Name, email, phone, and eventId are required")

        if not self._limiter.hit(client_identity):
            raise RateLimitedError()

        try:
            event_id = EventId.from_string(data.event_id)
        except ValueError:
            raise EventNotFoundError(data.event_id) from None

        additional = tuple(p for p in data.additional_participants if p.is_named)

        with self._events.locked_event(event_id) as event:
            if event is None:
                raise EventNotFoundError(data.event_id)
            if not event.is_active:
                raise InactiveEventError()
            if not event.allow_signups:
                raise SignupsClosedError()

            current = self._signups.count_for_event(event_id)
            admission = can_admit(event, current, count_named_participants(additional))
            if not admission.admit:
                logger.info(
                    "Rejected signup for full event %s (%d registered, max %s)",
                    event_id,
                    current,
                    event.max_attendees,
                )
                raise EventFullError()

            signup = self._signups.create_signup(
                event_id=event_id,
                name=data.name.strip(),
                email=data.email.strip(),
                phone=data.phone.strip(),
                notes=data.notes or None,
                additional_participants=additional,
            )

        logger.info(
            "Signup %s admitted to event %s with %d additional participants",
            signup.id,
            event_id,
            len(additional),
        )
        # The signup is committed; confirmation failures are logged, not raised.
        self._notifications.notify_signup(signup, event)
        return signup

    def list_signups(self, event_id: str | None = None) -> list[Signup]:
        """Return signups newest first.

        Raises:
            InvalidEventIdError: If event_id is given and is not a valid UUID.
        """
        if event_id is None:
            return self._signups.list_signups()
        try:
            parsed_id = EventId.from_string(event_id)
        except ValueError:
            raise InvalidEventIdError() from None
        return self._signups.list_signups(parsed_id)

    def update_signup(
        self, signup_id: str, status: str | None, notes: str | None
    ) -> Signup:
        """Set a signup's status and notes. Status defaults to registered.

        Raises:
            ValidationError: If the status is unknown.
            SignupNotFoundError: If the signup does not exist.
        """
        try:
            new_status = SignupStatus(status) if status else SignupStatus.REGISTERED
        except ValueError:
            raise ValidationError(f"Unknown signup status: {status}", field="status") from None
        parsed_id = self._parse_signup_id(signup_id)
        signup = self._signups.update_signup(parsed_id, new_status, notes)
        if signup is None:
            raise SignupNotFoundError(signup_id)
        logger.info("Signup %s set to %s", signup_id, new_status.value)
        return signup

    def delete_signup(self, signup_id: str) -> None:
        """Delete a signup.

        Raises:
            SignupNotFoundError: If the signup does not exist.
        """
        if not self._signups.delete_signup(self._parse_signup_id(signup_id)):
            raise SignupNotFoundError(signup_id)
        logger.info("Signup %s deleted", signup_id)

    @staticmethod
    def _parse_signup_id(signup_id: str) -> SignupId:
        try:
            return SignupId.from_string(signup_id)
        except ValueError:
            raise SignupNotFoundError(signup_id) from None
