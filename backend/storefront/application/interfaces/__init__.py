from .section_repository import SectionRepository
from .catalog_repository import CatalogRepository

__all__ = [
    "SectionRepository",
    "CatalogRepository",
]
