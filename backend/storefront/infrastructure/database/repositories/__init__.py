from .section_repository import SQLAlchemySectionRepository
from .catalog_repository import SQLAlchemyCatalogRepository

__all__ = [
    "SQLAlchemySectionRepository",
    "SQLAlchemyCatalogRepository",
]
