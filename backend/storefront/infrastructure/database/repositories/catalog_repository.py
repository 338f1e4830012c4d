"""Concrete catalog repository backed by SQLAlchemy (read-only)."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.interfaces import CatalogRepository
from storefront.domain.entities import Category, Product
from storefront.infrastructure.database.models import CategoryModel, ProductModel
from storefront.infrastructure.database.errors import store_errors


class SQLAlchemyCatalogRepository(CatalogRepository):
    """Implements the CatalogRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_product(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
            description=model.description or "",
            image=model.image or "",
            category=model.category or "",
        )

    @staticmethod
    def _to_category(model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            image=model.image,
            sort_order=model.sort_order,
            is_active=model.is_active == 1,
        )

    async def get_all_products(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.id.asc())
        with store_errors("get_all_products"):
            result = await self._session.execute(stmt)
        return [self._to_product(row) for row in result.scalars().all()]

    async def get_products_by_category(self, category: str) -> list[Product]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.category == category)
            .order_by(ProductModel.id.asc())
        )
        with store_errors("get_products_by_category"):
            result = await self._session.execute(stmt)
        return [self._to_product(row) for row in result.scalars().all()]

    async def get_all_categories(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(
            CategoryModel.sort_order.asc(), CategoryModel.id.asc()
        )
        with store_errors("get_all_categories"):
            result = await self._session.execute(stmt)
        return [self._to_category(row) for row in result.scalars().all()]

    async def get_active_categories(self) -> list[Category]:
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.is_active == 1)
            .order_by(CategoryModel.sort_order.asc(), CategoryModel.id.asc())
        )
        with store_errors("get_active_categories"):
            result = await self._session.execute(stmt)
        return [self._to_category(row) for row in result.scalars().all()]
