"""Notification dispatch - a thin layer over the Mailer collaborator."""

import logging

from events.domain import Event, EventId, Participant, Signup
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    NoRecipientsError,
    UpstreamError,
    ValidationError,
)
from events.services.collaborators import Mailer
from events.stores.interfaces import EventStore, SignupStore

logger = logging.getLogger(__name__)


class NotificationService:
    """Signup confirmations, admin announcements and contact replies."""

    def __init__(self, events: EventStore, signups: SignupStore, mailer: Mailer) -> None:
        self._events = events
        self._signups = signups
        self._mailer = mailer

    def notify_signup(self, signup: Signup, event: Event) -> int:
        """Confirm a signup to its primary and reachable additional participants.

        Best-effort: a failed send is logged and skipped. Returns how many
        confirmations went out.
        """
        recipients = [Participant(name=signup.name, email=signup.email)]
        recipients.extend(p for p in signup.additional_participants if p.is_reachable)

        sent = 0
        for recipient in recipients:
            try:
                self._mailer.send_signup_confirmation(recipient, event)
            except Exception:
                logger.exception(
                    "Failed to send signup confirmation to %s for event %s",
                    recipient.email,
                    event.id,
                )
                continue
            sent += 1
        return sent

    def send_bulk_email(self, event_id: str, subject: str, message: str) -> int:
        """Email every participant of an event. Returns the recipient count.

        Raises:
            ValidationError: If subject or message is blank.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NoRecipientsError: If the event has no signups or no addresses.
            UpstreamError: If the mail backend fails.
        """
        if not subject.strip() or not message.strip():
            raise ValidationError("Subject and message are required")
        try:
            parsed_id = EventId.from_string(event_id)
        except ValueError:
            raise InvalidEventIdError() from None
        event = self._events.get_event(parsed_id)
        if event is None:
            raise EventNotFoundError(event_id)

        signups = self._signups.list_signups(parsed_id)
        if not signups:
            raise NoRecipientsError()
        emails: list[str] = []
        for signup in signups:
            emails.extend(signup.participant_emails)
        recipients = list(dict.fromkeys(emails))
        if not recipients:
            raise NoRecipientsError("No valid email addresses found")

        try:
            self._mailer.send_bulk(recipients, subject, message, event)
        except Exception as exc:
            logger.exception("Bulk email for event %s failed", event_id)
            raise UpstreamError("Failed to send bulk email") from exc
        logger.info("Bulk email for event %s sent to %d participants", event_id, len(recipients))
        return len(recipients)

    def send_contact(self, name: str, email: str, message: str) -> None:
        """Acknowledge a contact form submission.

        Raises:
            UpstreamError: If the mail backend fails.
        """
        try:
            self._mailer.send_contact_acknowledgement(name, email, message)
        except Exception as exc:
            logger.exception("Contact acknowledgement to %s failed", email)
            raise UpstreamError("Failed to send email") from exc
