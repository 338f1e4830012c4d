"""Concrete section repository backed by SQLAlchemy."""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.interfaces import SectionRepository
from storefront.domain.entities import Section
from storefront.infrastructure.database.errors import store_errors
from storefront.infrastructure.database.models import SectionModel

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = frozenset({
    "page_key",
    "kind",
    "display_name",
    "authoring_prompt",
    "content",
    "layout_variant",
    "order_index",
    "is_active",
})


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemySectionRepository(SectionRepository):
    """Implements the SectionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SectionModel) -> Section:
        """Map ORM model → domain entity."""
        return Section(
            id=model.id,
            page_key=model.page_key,
            kind=model.kind,
            content=model.content,
            display_name=model.display_name,
            authoring_prompt=model.authoring_prompt,
            layout_variant=model.layout_variant,
            order_index=model.order_index,
            is_active=model.is_active == 1,
            version=model.version,
            generated_at=as_utc(model.generated_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Section) -> SectionModel:
        """Map domain entity → ORM model (for creation)."""
        return SectionModel(
            id=entity.id,
            page_key=entity.page_key,
            kind=entity.kind,
            content=entity.content,
            display_name=entity.display_name,
            authoring_prompt=entity.authoring_prompt,
            layout_variant=entity.layout_variant,
            order_index=entity.order_index,
            is_active=1 if entity.is_active else 0,
            version=entity.version,
            generated_at=entity.generated_at,
            updated_at=entity.updated_at,
        )

    async def create(self, section: Section) -> Section:
        # Identity is always assigned here; any id on the incoming entity is ignored.
        now = datetime.now(timezone.utc)
        record = replace(section, id=str(uuid4()), generated_at=now, updated_at=now, version=1)
        model = self._to_model(record)
        with store_errors("create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def get_by_id(self, section_id: str) -> Section | None:
        with store_errors("get_by_id"):
            result = await self._session.get(SectionModel, section_id)
        return self._to_entity(result) if result else None

    async def list_by_page(self, page_key: str) -> list[Section]:
        stmt = (
            select(SectionModel)
            .where(SectionModel.page_key == page_key, SectionModel.is_active == 1)
            .order_by(
                SectionModel.order_index.asc(),
                SectionModel.generated_at.asc(),
                SectionModel.id.asc(),
            )
        )
        with store_errors("list_by_page"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def list_all(
        self, *, page_key: str | None = None, include_inactive: bool = True
    ) -> list[Section]:
        stmt = select(SectionModel)
        if page_key is not None:
            stmt = stmt.where(SectionModel.page_key == page_key)
        if not include_inactive:
            stmt = stmt.where(SectionModel.is_active == 1)
        stmt = stmt.order_by(
            SectionModel.page_key.asc(),
            SectionModel.order_index.asc(),
            SectionModel.generated_at.asc(),
            SectionModel.id.asc(),
        )
        with store_errors("list_all"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def update(self, section_id: str, changes: dict[str, Any]) -> None:
        ignored = changes.keys() - _WRITABLE_FIELDS
        if ignored:
            logger.debug("Ignoring non-writable section fields %s", sorted(ignored))
        applicable = {k: v for k, v in changes.items() if k in _WRITABLE_FIELDS}
        if not applicable:
            return

        with store_errors("update"):
            model = await self._session.get(SectionModel, section_id)
            if model is None:
                logger.debug("Update of unknown section %s ignored", section_id)
                return

            for name, value in applicable.items():
                if name == "is_active":
                    value = 1 if value else 0
                setattr(model, name, value)

            model.version += 1
            model.updated_at = datetime.now(timezone.utc)
            await self._session.flush()

    async def delete(self, section_id: str) -> None:
        with store_errors("delete"):
            model = await self._session.get(SectionModel, section_id)
            if model is None:
                logger.debug("Delete of unknown section %s ignored", section_id)
                return
            await self._session.delete(model)
            await self._session.flush()
