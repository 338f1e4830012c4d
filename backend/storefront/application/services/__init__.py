from .section_service import SectionService
from .page_composer import PageComposer

__all__ = [
    "SectionService",
    "PageComposer",
]
