"""Interfaces for the external collaborators services talk to.

Mail delivery and blob storage live behind these so services can be tested
without an SMTP server or a storage backend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from events.domain import Event, Participant


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of deleting one stored file."""

    url: str
    success: bool
    error: str | None = None


class Mailer(ABC):
    """Sends the site's outbound email."""

    @abstractmethod
    def send_signup_confirmation(self, recipient: Participant, event: Event) -> None:
        """Confirm a registration to one participant."""
        ...

    @abstractmethod
    def send_bulk(
        self, recipients: list[str], subject: str, message: str, event: Event
    ) -> None:
        """Send one announcement with every recipient in BCC."""
        ...

    @abstractmethod
    def send_contact_acknowledgement(self, name: str, email: str, message: str) -> None:
        """Thank a visitor for a contact form submission."""
        ...


class MediaStorage(ABC):
    """Stores uploaded images and removes them again."""

    @abstractmethod
    def upload(self, file) -> str:
        """Store an image upload and return its public URL."""
        ...

    @abstractmethod
    def delete_urls(self, urls: list[str]) -> list[DeletionResult]:
        """Delete the files behind the given URLs. Never raises per-file failures."""
        ...
