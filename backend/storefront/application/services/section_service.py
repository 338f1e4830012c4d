"""Application service (use case) for section authoring operations."""

import logging
from typing import Any

from storefront.application import content_codec
from storefront.application.interfaces import SectionRepository
from storefront.application.schemas import SectionCreate, SectionUpdate
from storefront.domain.entities import Section
from storefront.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Columns that cannot hold NULL; an explicit null for these is ignored.
_NON_NULLABLE = frozenset({"page_key", "kind", "content", "layout_variant", "order_index", "is_active"})


class SectionService:
    """Orchestrates section CRUD logic. Depends on the repository port (DI).

    ``update_section`` and ``delete_section`` on an unknown id succeed
    without effect, matching the store adapter.
    """

    def __init__(self, repository: SectionRepository):
        self._repository = repository

    async def get_section(self, section_id: str) -> Section:
        section = await self._repository.get_by_id(section_id)
        if section is None:
            raise EntityNotFoundError("Section", section_id)
        return section

    async def list_sections(
        self, *, page_key: str | None = None, include_inactive: bool = True
    ) -> list[Section]:
        return await self._repository.list_all(
            page_key=page_key, include_inactive=include_inactive
        )

    async def create_section(self, data: SectionCreate) -> Section:
        section = Section(
            page_key=data.page_key,
            kind=data.kind,
            content=content_codec.encode(data.content),
            display_name=data.display_name,
            authoring_prompt=data.authoring_prompt,
            layout_variant=data.layout_variant,
            order_index=data.order_index,
            is_active=data.is_active,
        )
        created = await self._repository.create(section)
        logger.info(
            "Created %s section %s on page '%s'", created.kind, created.id, created.page_key
        )
        return created

    async def update_section(self, section_id: str, data: SectionUpdate) -> None:
        changes: dict[str, Any] = {}
        for name, value in data.model_dump(exclude_unset=True).items():
            if value is None and name in _NON_NULLABLE:
                continue
            changes[name] = value
        if "content" in changes:
            changes["content"] = content_codec.encode(changes["content"])
        await self._repository.update(section_id, changes)

    async def delete_section(self, section_id: str) -> None:
        await self._repository.delete(section_id)
