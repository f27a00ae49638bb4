"""Section service - display groupings for events."""

import logging

from events.domain import Direction, Section, SectionId
from events.domain.errors import SectionNotFoundError, ValidationError
from events.stores.interfaces import SectionStore

logger = logging.getLogger(__name__)


class SectionService:
    """Service for section CRUD and ordering."""

    def __init__(self, store: SectionStore) -> None:
        self._store = store

    def list_sections(self) -> list[Section]:
        return self._store.list_sections()

    def create_section(
        self, title: str, description: str | None, order: int | None, actor: int | None
    ) -> Section:
        """Raises ValidationError if the title is blank."""
        if not title or not title.strip():
            raise ValidationError("Title is required", field="title")
        section = self._store.create_section(title, description, order or 0, actor)
        logger.info("Section %s created", section.id)
        return section

    def update_section(
        self, section_id: str, title: str, description: str | None, order: int | None
    ) -> Section:
        """Overwrite a section; an omitted order resets to 0.

        Raises:
            ValidationError: If the title is blank.
            SectionNotFoundError: If the section does not exist.
        """
        if not title or not title.strip():
            raise ValidationError("ID and title are required", field="title")
        section = self._store.update_section(
            self._parse(section_id), title, description, order if order is not None else 0
        )
        if section is None:
            raise SectionNotFoundError(section_id)
        return section

    def delete_section(self, section_id: str) -> None:
        """Delete a section. Its events stay, without a section.

        Raises:
            SectionNotFoundError: If the section does not exist.
        """
        if not self._store.delete_section(self._parse(section_id)):
            raise SectionNotFoundError(section_id)
        logger.info("Section %s deleted", section_id)

    def move(self, section_id: str, direction: Direction) -> list[Section]:
        """Swap a section's order with its neighbour. A no-op at either end.

        Raises:
            SectionNotFoundError: If the section does not exist.
        """
        parsed_id = self._parse(section_id)
        sections = self._store.list_sections()
        position = next(
            (index for index, section in enumerate(sections) if section.id == parsed_id), None
        )
        if position is None:
            raise SectionNotFoundError(section_id)
        target = position - 1 if direction is Direction.UP else position + 1
        if 0 <= target < len(sections):
            self._store.swap_order(parsed_id, sections[target].id)
            return self._store.list_sections()
        return sections

    @staticmethod
    def _parse(section_id: str) -> SectionId:
        try:
            return SectionId.from_string(section_id)
        except ValueError:
            raise SectionNotFoundError(section_id) from None
