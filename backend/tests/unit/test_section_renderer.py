"""Unit tests for kind dispatch and the section templates."""

import pytest

from storefront.application import content_codec
from storefront.application.rendering import (
    CollaboratorData,
    CollaboratorNeed,
    RegionStatus,
    SectionRenderer,
    collaborator_need,
)
from storefront.application.rendering.templates import (
    NO_CATEGORIES_MESSAGE,
    NO_PRODUCTS_MESSAGE,
    STAR_GLYPH,
    format_price,
)
from storefront.domain.entities import Category, Product, Section


def _section(kind: str, content: dict | str | None = None, **kwargs) -> Section:
    if isinstance(content, dict):
        content = content_codec.encode(content)
    return Section(page_key="home", kind=kind, content=content if content is not None else "{}", **kwargs)


PRODUCTS = [
    Product(id=1, name="Classic White T-Shirt", price=29, image="/t.jpg", category="Clothing"),
    Product(id=2, name="Running Sneakers", price=89.5, image="/s.jpg", category="Shoes"),
    Product(id=3, name="Black Hoodie", price=59, image="/h.jpg", category="Clothing"),
]


@pytest.fixture
def renderer() -> SectionRenderer:
    return SectionRenderer()


def test_unknown_kind_renders_placeholder(renderer: SectionRenderer):
    region = renderer.render(_section("not_a_real_kind"))
    assert region.status is RegionStatus.UNKNOWN_KIND
    assert "not_a_real_kind" in region.html
    assert "Unknown section type" in region.html


def test_unknown_kind_tag_is_escaped(renderer: SectionRenderer):
    region = renderer.render(_section("<script>"))
    assert "<script>" not in region.html
    assert "&lt;script&gt;" in region.html


def test_region_carries_section_identity(renderer: SectionRenderer):
    section = _section("hero", layout_variant="split")
    region = renderer.render(section)
    assert region.status is RegionStatus.RENDERED
    assert region.section_id == section.id
    assert region.kind == "hero"
    assert region.layout_variant == "split"
    assert f'data-section-id="{section.id}"' in region.html
    assert 'data-layout="split"' in region.html


def test_hero_defaults_render(renderer: SectionRenderer):
    html = renderer.render(_section("hero")).html
    assert "<h1>Default Headline</h1>" in html
    assert "Default subheadline text" in html
    assert "hero-features" not in html
    assert "section-actions" not in html


def test_falsy_actions_render_no_buttons(renderer: SectionRenderer):
    html = renderer.render(_section("cta", {"ctaPrimary": False, "ctaSecondary": 0})).html
    assert "section-actions" not in html


def test_content_is_escaped(renderer: SectionRenderer):
    html = renderer.render(_section("hero", {"headline": "<b>Sale</b> & more"})).html
    assert "&lt;b&gt;Sale&lt;/b&gt; &amp; more" in html


def test_malformed_content_renders_like_empty_content(renderer: SectionRenderer):
    broken = _section("newsletter", "{not json", id="fixed")
    empty = _section("newsletter", "{}", id="fixed")
    assert renderer.render(broken).html == renderer.render(empty).html



def test_deeply_nested_content_renders_hero_defaults(renderer: SectionRenderer):
    nested = _section("hero", '{"a":' * 200000, id="fixed")
    empty = _section("hero", "{}", id="fixed")

    region = renderer.render(nested)

    assert region.status is RegionStatus.RENDERED
    assert "<h1>Default Headline</h1>" in region.html
    assert region.html == renderer.render(empty).html


def test_call_to_action_link_targets(renderer: SectionRenderer):
    html = renderer.render(
        _section(
            "cta",
            {
                "ctaPrimary": {"text": "Shop Now", "action": "/products"},
                "ctaSecondary": {"text": "Lookbook", "action": "https://x.test", "openInNewTab": True},
            },
        )
    ).html
    assert '<a href="/products" class="btn btn-primary" target="_self">Shop Now</a>' in html
    assert 'target="_blank" rel="noopener">Lookbook</a>' in html


def test_testimonial_stars_follow_rating(renderer: SectionRenderer):
    section = _section(
        "testimonials",
        {"testimonials": [{"author": "Sarah Johnson"}, {"author": "Emma Rodriguez", "rating": 3}]},
    )
    html = renderer.render(section).html
    assert f'data-rating="5">{STAR_GLYPH * 5}</div>' in html
    assert f'data-rating="3">{STAR_GLYPH * 3}</div>' in html
    assert html.count(STAR_GLYPH) == 8


def test_features_numbered_titles(renderer: SectionRenderer):
    html = renderer.render(_section("features", {"features": [{}, {"icon": "🚚"}]})).html
    assert "<h3>Feature 1</h3>" in html
    assert "<h3>Feature 2</h3>" in html
    assert '<div class="feature-icon"><span>🚚</span></div>' in html


def test_product_showcase_empty_state(renderer: SectionRenderer):
    html = renderer.render(_section("product_showcase", {"title": "Featured"}), CollaboratorData(products=[])).html
    assert "<h2>Featured</h2>" in html
    assert NO_PRODUCTS_MESSAGE in html
    assert "product-grid" not in html


def test_product_showcase_without_collaborators_is_empty_state(renderer: SectionRenderer):
    assert NO_PRODUCTS_MESSAGE in renderer.render(_section("product_showcase")).html


def test_product_showcase_lists_products(renderer: SectionRenderer):
    html = renderer.render(_section("product_showcase"), CollaboratorData(products=PRODUCTS)).html
    assert "Classic White T-Shirt" in html
    assert "$29<" in html
    assert "$89.50" in html
    assert NO_PRODUCTS_MESSAGE not in html


def test_product_showcase_category_and_limit(renderer: SectionRenderer):
    section = _section("product_showcase", {"category": "clothing", "maxItems": 1})
    html = renderer.render(section, CollaboratorData(products=PRODUCTS)).html
    assert "Classic White T-Shirt" in html
    assert "Black Hoodie" not in html
    assert "Running Sneakers" not in html


def test_categories_render_links_and_placeholder(renderer: SectionRenderer):
    categories = [
        Category(id=1, name="Clothing", slug="clothing", image="/c.jpg"),
        Category(id=2, name="Home Goods", slug="home-goods"),
    ]
    html = renderer.render(_section("categories"), CollaboratorData(categories=categories)).html
    assert "<h2>Shop by Category</h2>" in html
    assert 'href="/products?category=clothing"' in html
    assert 'href="/products?category=home-goods"' in html
    assert "📁" in html


def test_categories_empty_state(renderer: SectionRenderer):
    html = renderer.render(_section("categories"), CollaboratorData(categories=[])).html
    assert NO_CATEGORIES_MESSAGE in html


def test_render_failure_region(renderer: SectionRenderer):
    region = renderer.render_failure(_section("hero"))
    assert region.status is RegionStatus.ERROR
    assert "section-error" in region.html


def test_collaborator_needs():
    assert collaborator_need("product_showcase") is CollaboratorNeed.PRODUCTS
    assert collaborator_need("categories") is CollaboratorNeed.CATEGORIES
    assert collaborator_need("hero") is None
    assert collaborator_need("not_a_real_kind") is None


def test_collaborator_data_only_keeps_one_set():
    data = CollaboratorData(products=PRODUCTS, categories=[Category(id=1, name="A", slug="a")])
    assert data.only(CollaboratorNeed.PRODUCTS).categories is None
    assert data.only(CollaboratorNeed.CATEGORIES).products is None
    assert data.only(None) == CollaboratorData()


@pytest.mark.parametrize("price, expected", [(29, "$29"), (29.0, "$29"), (29.5, "$29.50"), (129.99, "$129.99")])
def test_format_price(price, expected):
    assert format_price(price) == expected
