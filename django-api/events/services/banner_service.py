"""Banner service - the site-wide message banner."""

import re

from events.domain import BannerFields, MessageBanner
from events.domain.errors import ValidationError
from events.stores.interfaces import BannerStore

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class BannerService:
    """Reads and upserts the single banner row."""

    def __init__(self, store: BannerStore) -> None:
        self._store = store

    def get_banner(self) -> MessageBanner:
        return self._store.get_or_create_default()

    def update_banner(self, fields: BannerFields) -> MessageBanner:
        """Raises ValidationError for a blank message or a malformed colour."""
        if not fields.message or not fields.message.strip():
            raise ValidationError("Message is required", field="message")
        for field, value in (
            ("backgroundColor", fields.background_color),
            ("textColor", fields.text_color),
        ):
            if not HEX_COLOR.match(value):
                raise ValidationError(f"{field} must be a #RRGGBB colour", field=field)
        return self._store.save(fields)
