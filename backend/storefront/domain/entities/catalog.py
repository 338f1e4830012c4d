"""Read-only catalog entities consumed by the product and category sections."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A catalog item as shown in a product showcase."""

    id: int
    name: str
    price: float
    description: str = ""
    image: str = ""
    category: str = ""


@dataclass(frozen=True)
class Category:
    """A product category as shown in the categories section."""

    id: int
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    sort_order: int = 0
    is_active: bool = True
