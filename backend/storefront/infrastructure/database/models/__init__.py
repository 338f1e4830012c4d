from .section import SectionModel
from .catalog import CategoryModel, ProductModel

__all__ = [
    "SectionModel",
    "CategoryModel",
    "ProductModel",
]
