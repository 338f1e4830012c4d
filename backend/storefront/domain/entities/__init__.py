from .section import Section, SectionKind
from .catalog import Category, Product

__all__ = [
    "Section",
    "SectionKind",
    "Category",
    "Product",
]
