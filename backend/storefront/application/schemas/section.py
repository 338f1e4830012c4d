"""Pydantic DTOs (Data Transfer Objects) for sections and composed pages."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from storefront.application import content_codec
from storefront.domain.entities import Section


class SectionCreate(BaseModel):
    """Schema for creating a new section."""

    page_key: str = Field(..., min_length=1, max_length=100, examples=["home"])
    kind: str = Field(..., min_length=1, max_length=100, examples=["hero"])
    content: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"headline": "Minimal Design, Maximum Impact"}],
    )
    display_name: str | None = Field(None, max_length=255)
    authoring_prompt: str | None = None
    layout_variant: str = Field("default", min_length=1, max_length=50)
    order_index: int = 0
    is_active: bool = True


class SectionUpdate(BaseModel):
    """Schema for a partial section update — only fields sent are applied."""

    page_key: str | None = Field(None, min_length=1, max_length=100)
    kind: str | None = Field(None, min_length=1, max_length=100)
    content: dict[str, Any] | None = None
    display_name: str | None = Field(None, max_length=255)
    authoring_prompt: str | None = None
    layout_variant: str | None = Field(None, min_length=1, max_length=50)
    order_index: int | None = None
    is_active: bool | None = None


class SectionResponse(BaseModel):
    """Schema returned to the client, with the stored content decoded."""

    id: str
    page_key: str
    kind: str
    content: dict[str, Any]
    display_name: str | None
    authoring_prompt: str | None
    layout_variant: str
    order_index: int
    is_active: bool
    version: int
    generated_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, section: Section) -> "SectionResponse":
        return cls(
            id=section.id,
            page_key=section.page_key,
            kind=section.kind,
            content=content_codec.decode(section.content),
            display_name=section.display_name,
            authoring_prompt=section.authoring_prompt,
            layout_variant=section.layout_variant,
            order_index=section.order_index,
            is_active=section.is_active,
            version=section.version,
            generated_at=section.generated_at,
            updated_at=section.updated_at,
        )


class RenderedRegionResponse(BaseModel):
    """One rendered region of a composed page."""

    section_id: str
    kind: str
    layout_variant: str
    status: str
    html: str


class PageResponse(BaseModel):
    page_key: str
    regions: list[RenderedRegionResponse]
