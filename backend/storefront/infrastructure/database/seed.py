"""Demo catalog and home-page sections.

Idempotent: products and categories are inserted only into empty tables,
and the demo sections only when the home page has none.
"""

import logging
import re
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application import content_codec
from storefront.domain.entities import Section
from storefront.infrastructure.database.models import CategoryModel, ProductModel
from storefront.infrastructure.database.repositories import SQLAlchemySectionRepository

logger = logging.getLogger(__name__)

DEMO_PAGE_KEY = "home"

_IMAGE = "https://images.unsplash.com/{photo}?w=800&h=800&auto=format&fit=crop"

DEMO_PRODUCTS: list[dict[str, Any]] = [
    {"id": 1, "name": "Classic White T-Shirt", "price": 29, "category": "Clothing",
     "description": "Premium organic cotton t-shirt with a relaxed fit and timeless design.",
     "image": _IMAGE.format(photo="photo-1618354691373-d851c5c3a990")},
    {"id": 2, "name": "Black Hoodie", "price": 59, "category": "Clothing",
     "description": "Comfortable cotton blend hoodie with kangaroo pocket and drawstring hood.",
     "image": _IMAGE.format(photo="photo-1620799140408-edc6dcb6d633")},
    {"id": 3, "name": "Running Sneakers", "price": 89, "category": "Shoes",
     "description": "Lightweight athletic shoes with breathable mesh and cushioned sole.",
     "image": _IMAGE.format(photo="photo-1595950653106-6c9ebd614d3a")},
    {"id": 4, "name": "Casual Jeans", "price": 79, "category": "Clothing",
     "description": "Classic straight-leg denim jeans with comfortable stretch fabric.",
     "image": _IMAGE.format(photo="photo-1604176354204-9268737828e4")},
    {"id": 5, "name": "Canvas Sneakers", "price": 45, "category": "Shoes",
     "description": "Vintage-style canvas shoes perfect for everyday casual wear.",
     "image": _IMAGE.format(photo="photo-1549298916-b41d501d3772")},
    {"id": 6, "name": "Polo Shirt", "price": 39, "category": "Clothing",
     "description": "Classic polo shirt in soft cotton pique with ribbed collar and cuffs.",
     "image": _IMAGE.format(photo="photo-1586790170083-2f9ceadc732d")},
    {"id": 7, "name": "Leather Boots", "price": 129, "category": "Shoes",
     "description": "Durable leather boots with non-slip sole and comfortable ankle support.",
     "image": _IMAGE.format(photo="photo-1608256246200-53e8b47b2dc1")},
    {"id": 8, "name": "Summer Dress", "price": 69, "category": "Clothing",
     "description": "Lightweight cotton dress with floral print and comfortable fit.",
     "image": _IMAGE.format(photo="photo-1515372039744-b8f02a3ae446")},
    {"id": 9, "name": "Sports Jacket", "price": 99, "category": "Clothing",
     "description": "Water-resistant windbreaker perfect for outdoor activities.",
     "image": _IMAGE.format(photo="photo-1551028719-00167b16eac5")},
    {"id": 10, "name": "High-Top Sneakers", "price": 65, "category": "Shoes",
     "description": "Classic high-top sneakers with durable canvas upper and rubber sole.",
     "image": _IMAGE.format(photo="photo-1552346154-21d32810aba3")},
]

DEMO_SECTIONS: list[dict[str, Any]] = [
    {
        "kind": "hero",
        "display_name": "Main Hero",
        "content": {
            "headline": "Minimal Design, Maximum Impact",
            "subheadline": "Discover our curated collection of premium products "
                           "designed with simplicity and functionality in mind.",
            "features": [
                "Free shipping on orders over $50",
                "30-day return policy",
                "24/7 customer support",
            ],
            "ctaPrimary": {"text": "Shop Collection", "action": "/products"},
            "ctaSecondary": {"text": "Learn More", "action": "/about"},
        },
    },
    {
        "kind": "categories",
        "display_name": "Product Categories",
        "content": {
            "title": "Shop by Category",
            "description": "Browse our carefully curated collections",
        },
    },
    {
        "kind": "product_showcase",
        "display_name": "Featured Products",
        "content": {"title": "Featured Products", "description": "Our most popular items", "maxItems": 4},
    },
    {
        "kind": "cta",
        "display_name": "Summer Sale",
        "content": {
            "title": "Summer Sale - Up to 50% Off",
            "description": "Limited time offer on selected items",
            "ctaPrimary": {"text": "Shop Now", "action": "/products"},
        },
    },
    {
        "kind": "features",
        "display_name": "Our Features",
        "content": {
            "title": "Why Choose Us",
            "description": "We're committed to providing the best shopping experience",
            "features": [
                {"title": "Fast Shipping", "icon": "🚚",
                 "description": "Free shipping on orders over $50, with delivery in 2-3 business days"},
                {"title": "Easy Returns", "icon": "↩️",
                 "description": "30-day return policy with free return shipping"},
                {"title": "Quality Guarantee", "icon": "✅",
                 "description": "All products come with a 1-year quality guarantee"},
            ],
        },
    },
    {
        "kind": "testimonials",
        "display_name": "Customer Reviews",
        "content": {
            "title": "What Our Customers Say",
            "testimonials": [
                {"content": "The quality of these products exceeded my expectations.",
                 "author": "Sarah Johnson", "role": "Customer", "rating": 5},
                {"content": "Impressed with the quality and design of every item I've bought.",
                 "author": "Emma Rodriguez", "role": "Customer", "rating": 4},
            ],
        },
    },
    {
        "kind": "about_story",
        "display_name": "Our Story",
        "content": {
            "title": "Our Story",
            "subtitle": "Crafted with passion and attention to detail",
            "description": "Founded in 2020, our mission has been to provide high-quality, "
                           "thoughtfully designed products that enhance everyday life.",
        },
    },
    {
        "kind": "newsletter",
        "display_name": "Stay Updated",
        "content": {
            "title": "Stay Updated",
            "description": "Subscribe to our newsletter for the latest updates and offers",
            "privacyText": "We respect your privacy. Unsubscribe at any time.",
        },
    },
]


def slugify(name: str) -> str:
    """Lowercase with whitespace runs replaced by '-': "Home Goods" → "home-goods"."""
    return re.sub(r"\s+", "-", name.strip().lower())


async def _count(session: AsyncSession, model: type) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return int(result.scalar_one())


async def seed_catalog(session: AsyncSession) -> None:
    if await _count(session, ProductModel) == 0:
        session.add_all(ProductModel(**product) for product in DEMO_PRODUCTS)
        await session.flush()
        logger.info("Inserted %d products", len(DEMO_PRODUCTS))

    if await _count(session, CategoryModel) == 0:
        names = list(dict.fromkeys(product["category"] for product in DEMO_PRODUCTS))
        session.add_all(
            CategoryModel(id=index + 1, name=name, slug=slugify(name), sort_order=index)
            for index, name in enumerate(names)
        )
        await session.flush()
        logger.info("Inserted %d categories", len(names))


async def seed_sections(session: AsyncSession, page_key: str = DEMO_PAGE_KEY) -> int:
    repository = SQLAlchemySectionRepository(session)
    if await repository.list_all(page_key=page_key):
        logger.debug("Page '%s' already has sections — skipping demo sections", page_key)
        return 0

    for order_index, demo in enumerate(DEMO_SECTIONS):
        await repository.create(
            Section(
                page_key=page_key,
                kind=demo["kind"],
                display_name=demo["display_name"],
                content=content_codec.encode(demo["content"]),
                order_index=order_index,
            )
        )
    logger.info("Created %d demo sections on page '%s'", len(DEMO_SECTIONS), page_key)
    return len(DEMO_SECTIONS)


async def seed_demo_content(session: AsyncSession) -> None:
    """Seed the catalog and the demo home page, then commit."""
    await seed_catalog(session)
    await seed_sections(session)
    await session.commit()
