from .base import Base
from .session import build_engine, build_session_factory, get_db_session
from .models import CategoryModel, ProductModel, SectionModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "CategoryModel",
    "ProductModel",
    "SectionModel",
]
