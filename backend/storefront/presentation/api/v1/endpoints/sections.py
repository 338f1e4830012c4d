"""Section CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.application.schemas import SectionCreate, SectionResponse, SectionUpdate
from storefront.application.services import SectionService
from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure.dependencies import get_section_service

router = APIRouter(prefix="/sections", tags=["Sections"])


@router.get("", response_model=list[SectionResponse])
async def list_sections(
    page_key: str | None = Query(None, description="Filter by page key"),
    include_inactive: bool = Query(True, description="Include deactivated sections"),
    service: SectionService = Depends(get_section_service),
) -> list[SectionResponse]:
    """Retrieve sections, optionally for one page, in display order."""
    sections = await service.list_sections(page_key=page_key, include_inactive=include_inactive)
    return [SectionResponse.from_entity(s) for s in sections]


@router.get("/{section_id}", response_model=SectionResponse)
async def get_section(
    section_id: str,
    service: SectionService = Depends(get_section_service),
) -> SectionResponse:
    """Retrieve a single section by ID."""
    try:
        section = await service.get_section(section_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SectionResponse.from_entity(section)


@router.post("", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
async def create_section(
    data: SectionCreate,
    service: SectionService = Depends(get_section_service),
) -> SectionResponse:
    """Create a new section."""
    section = await service.create_section(data)
    return SectionResponse.from_entity(section)


@router.patch("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_section(
    section_id: str,
    data: SectionUpdate,
    service: SectionService = Depends(get_section_service),
) -> None:
    """Apply a partial update; an unknown ID is left untouched."""
    await service.update_section(section_id, data)


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section(
    section_id: str,
    service: SectionService = Depends(get_section_service),
) -> None:
    await service.delete_section(section_id)
