"""Port for the read-only product catalog."""

from abc import ABC, abstractmethod

from storefront.domain.entities import Category, Product


class CatalogRepository(ABC):
    """Read path for products and categories used by catalog-backed sections."""

    @abstractmethod
    async def get_all_products(self) -> list[Product]:
        ...

    @abstractmethod
    async def get_products_by_category(self, category: str) -> list[Product]:
        ...

    @abstractmethod
    async def get_all_categories(self) -> list[Category]:
        ...

    @abstractmethod
    async def get_active_categories(self) -> list[Category]:
        """Categories shown on storefront pages, ordered by sort_order."""
        ...
