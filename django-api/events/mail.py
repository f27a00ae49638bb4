"""Outbound email through Django's mail framework.

Bodies are rendered from templates under events/email/. The transport is
whatever EMAIL_BACKEND settings select (SMTP in production).
"""

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from events.domain import Event, Participant
from events.services.collaborators import Mailer

SIGN_OFF = "JAX Team"


def _admin_copy() -> list[str]:
    return [settings.ADMIN_EMAIL] if settings.ADMIN_EMAIL else []


class DjangoMailer(Mailer):
    """Mailer backed by django.core.mail."""

    def _send(
        self,
        template: str,
        context: dict,
        subject: str,
        to: list[str],
        bcc: list[str],
    ) -> None:
        message = EmailMultiAlternatives(
            subject=subject,
            body=render_to_string(f"events/email/{template}.txt", context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=to,
            bcc=bcc,
        )
        message.attach_alternative(
            render_to_string(f"events/email/{template}.html", context), "text/html"
        )
        message.send()

    def send_signup_confirmation(self, recipient: Participant, event: Event) -> None:
        self._send(
            "signup_confirmation",
            {"name": recipient.name, "event": event, "sign_off": SIGN_OFF},
            subject=f"Registration Confirmed - {event.title}",
            to=[recipient.email],
            bcc=_admin_copy(),
        )

    def send_bulk(
        self, recipients: list[str], subject: str, message: str, event: Event
    ) -> None:
        self._send(
            "bulk_announcement",
            {"message": message, "event": event, "sign_off": SIGN_OFF},
            subject=f"[{event.title}] {subject}",
            to=_admin_copy(),
            bcc=recipients,
        )

    def send_contact_acknowledgement(self, name: str, email: str, message: str) -> None:
        self._send(
            "contact_acknowledgement",
            {"name": name, "message": message, "sign_off": "JAX"},
            subject=f"Thank you for contacting JAX, {name}!",
            to=[email],
            bcc=_admin_copy(),
        )
