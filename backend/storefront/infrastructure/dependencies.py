"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import get_settings
from storefront.application.services import PageComposer, SectionService
from storefront.infrastructure.database.session import get_db_session
from storefront.infrastructure.database.repositories import (
    SQLAlchemyCatalogRepository,
    SQLAlchemySectionRepository,
)


async def get_section_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SectionService, None]:
    """Provides a SectionService instance with its repository wired up."""
    repository = SQLAlchemySectionRepository(session)
    yield SectionService(repository)


async def get_page_composer(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PageComposer, None]:
    """Provides a PageComposer reading sections and catalog data from one session."""
    settings = get_settings()
    yield PageComposer(
        section_repository=SQLAlchemySectionRepository(session),
        catalog_repository=SQLAlchemyCatalogRepository(session),
        site_name=settings.storefront_name,
    )
