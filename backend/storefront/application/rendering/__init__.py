from .dispatch import (
    SECTION_RENDERERS,
    CollaboratorData,
    CollaboratorNeed,
    RegionStatus,
    RenderedRegion,
    SectionRenderer,
    SectionRendererEntry,
    collaborator_need,
    default_content,
)

__all__ = [
    "SECTION_RENDERERS",
    "CollaboratorData",
    "CollaboratorNeed",
    "RegionStatus",
    "RenderedRegion",
    "SectionRenderer",
    "SectionRendererEntry",
    "collaborator_need",
    "default_content",
]
