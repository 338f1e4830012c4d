"""Integration tests for the SQLAlchemy section and catalog repositories (SQLite)."""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Section
from storefront.domain.exceptions import StoreUnavailableError
from storefront.infrastructure.database import Base, build_engine, build_session_factory
from storefront.infrastructure.database.models import CategoryModel
from storefront.infrastructure.database.repositories import (
    SQLAlchemyCatalogRepository,
    SQLAlchemySectionRepository,
)
from storefront.infrastructure.database.seed import DEMO_SECTIONS, seed_catalog, seed_demo_content


@pytest_asyncio.fixture
async def session(tmp_path) -> AsyncSession:
    engine = build_engine(f"sqlite:///{tmp_path / 'sections.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = build_session_factory(engine)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_assigns_version_and_timestamps(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    created = await repo.create(Section(page_key="home", kind="hero", version=7))

    assert created.version == 1
    assert created.generated_at == created.updated_at
    assert created.generated_at.tzinfo is not None

    fetched = await repo.get_by_id(created.id)
    assert fetched is not None
    assert fetched.kind == "hero"
    assert fetched.content == "{}"


@pytest.mark.asyncio
async def test_create_always_assigns_a_new_id(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    draft = Section(id="fixed-id", page_key="home", kind="hero", version=7)

    first = await repo.create(draft)
    second = await repo.create(draft)

    assert len({first.id, second.id, "fixed-id"}) == 3
    assert await repo.get_by_id("fixed-id") is None
    assert {s.id for s in await repo.list_by_page("home")} == {first.id, second.id}
    # The caller's entity is left untouched.
    assert draft.id == "fixed-id"
    assert draft.version == 7


@pytest.mark.asyncio
async def test_get_by_id_missing(session: AsyncSession):
    assert await SQLAlchemySectionRepository(session).get_by_id("missing") is None


@pytest.mark.asyncio
async def test_active_flag_round_trips_as_bool(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    created = await repo.create(Section(page_key="home", kind="cta", is_active=False))
    await session.commit()

    raw = await session.execute(
        text("SELECT is_active FROM content_sections WHERE id = :id"), {"id": created.id}
    )
    assert raw.scalar_one() == 0

    session.expunge_all()
    fetched = await repo.get_by_id(created.id)
    assert fetched.is_active is False


@pytest.mark.asyncio
async def test_list_by_page_is_active_and_ordered(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    await repo.create(Section(page_key="home", kind="newsletter", order_index=2))
    await repo.create(Section(page_key="home", kind="cta", order_index=3, is_active=False))
    await repo.create(Section(page_key="home", kind="hero", order_index=0))
    await repo.create(Section(page_key="about", kind="about_story", order_index=1))
    await repo.create(Section(page_key="home", kind="product_showcase", order_index=1))

    sections = await repo.list_by_page("home")

    assert [s.kind for s in sections] == ["hero", "product_showcase", "newsletter"]


@pytest.mark.asyncio
async def test_equal_order_index_keeps_creation_order(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    first = await repo.create(Section(page_key="home", kind="hero"))
    await asyncio.sleep(0.01)
    second = await repo.create(Section(page_key="home", kind="features"))

    assert {s.id for s in await repo.list_by_page("home")} == {first.id, second.id}


@pytest.mark.asyncio
async def test_list_all_filters(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    await repo.create(Section(page_key="home", kind="hero"))
    await repo.create(Section(page_key="home", kind="cta", is_active=False))
    await repo.create(Section(page_key="about", kind="about_story"))

    assert len(await repo.list_all()) == 3
    assert len(await repo.list_all(page_key="home")) == 2
    assert len(await repo.list_all(page_key="home", include_inactive=False)) == 1


@pytest.mark.asyncio
async def test_update_merges_fields_and_bumps_version(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    created = await repo.create(Section(page_key="home", kind="hero", display_name="Main Hero"))

    await repo.update(created.id, {"order_index": 5, "is_active": False})

    updated = await repo.get_by_id(created.id)
    assert updated.order_index == 5
    assert updated.is_active is False
    assert updated.display_name == "Main Hero"
    assert updated.version == 2
    assert updated.updated_at >= created.updated_at


@pytest.mark.asyncio
async def test_update_without_writable_fields_is_noop(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    created = await repo.create(Section(page_key="home", kind="hero"))

    await repo.update(created.id, {})
    await repo.update(created.id, {"id": "other", "version": 40})

    unchanged = await repo.get_by_id(created.id)
    assert unchanged.version == 1
    assert unchanged.id == created.id


@pytest.mark.asyncio
async def test_update_and_delete_unknown_id_are_noops(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    await repo.update("missing", {"order_index": 1})
    await repo.delete("missing")
    assert await repo.list_all() == []


@pytest.mark.asyncio
async def test_delete_removes_section(session: AsyncSession):
    repo = SQLAlchemySectionRepository(session)
    created = await repo.create(Section(page_key="home", kind="hero"))
    await repo.delete(created.id)
    assert await repo.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_unreachable_store_raises_store_unavailable(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'missing-dir' / 'x.db'}")
    factory = build_session_factory(engine)
    try:
        async with factory() as session:
            with pytest.raises(StoreUnavailableError) as exc_info:
                await SQLAlchemySectionRepository(session).list_by_page("home")
    finally:
        await engine.dispose()
    assert exc_info.value.operation == "list_by_page"


@pytest.mark.asyncio
async def test_catalog_reads_seeded_data(session: AsyncSession):
    await seed_catalog(session)
    catalog = SQLAlchemyCatalogRepository(session)

    products = await catalog.get_all_products()
    categories = await catalog.get_all_categories()
    shoes = await catalog.get_products_by_category("Shoes")

    assert len(products) == 10
    assert [p.id for p in products] == sorted(p.id for p in products)
    assert [(c.name, c.slug) for c in categories] == [("Clothing", "clothing"), ("Shoes", "shoes")]
    assert {p.category for p in shoes} == {"Shoes"}


@pytest.mark.asyncio
async def test_inactive_categories_are_listed_but_not_active(session: AsyncSession):
    await seed_catalog(session)
    session.add(CategoryModel(id=3, name="Archive", slug="archive", sort_order=9, is_active=0))
    await session.flush()
    catalog = SQLAlchemyCatalogRepository(session)

    every = await catalog.get_all_categories()
    active = await catalog.get_active_categories()

    assert [c.slug for c in every] == ["clothing", "shoes", "archive"]
    assert [c.slug for c in active] == ["clothing", "shoes"]


@pytest.mark.asyncio
async def test_seed_is_idempotent(session: AsyncSession):
    await seed_demo_content(session)
    await seed_demo_content(session)

    sections = await SQLAlchemySectionRepository(session).list_by_page("home")
    assert [s.kind for s in sections] == [demo["kind"] for demo in DEMO_SECTIONS]
    assert len(await SQLAlchemyCatalogRepository(session).get_all_products()) == 10
