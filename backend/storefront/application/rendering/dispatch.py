"""Section renderer dispatch — maps a section's kind to its schema and template."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from html import escape

from storefront.application.schemas.section_content import (
    AboutStoryContent,
    CallToActionContent,
    CategoriesContent,
    CustomerTestimonialsContent,
    FeaturesContent,
    HeroContent,
    NewsletterContent,
    ProductShowcaseContent,
    SectionContent,
    fill_defaults,
)
from storefront.application.rendering import templates
from storefront.application import content_codec
from storefront.domain.entities import Category, Product, Section, SectionKind

logger = logging.getLogger(__name__)


class CollaboratorNeed(str, Enum):
    """External read-only data a section kind needs to render."""

    PRODUCTS = "products"
    CATEGORIES = "categories"


class RegionStatus(str, Enum):
    RENDERED = "rendered"
    UNKNOWN_KIND = "unknown_kind"
    ERROR = "error"


@dataclass(frozen=True)
class CollaboratorData:
    """Pre-fetched catalog data handed to the dispatch step.

    ``None`` means the set was not fetched for this section; templates treat
    it the same as an empty sequence.
    """

    products: list[Product] | None = None
    categories: list[Category] | None = None

    def get(self, need: CollaboratorNeed) -> list:
        if need is CollaboratorNeed.PRODUCTS:
            return list(self.products or [])
        return list(self.categories or [])

    def only(self, need: CollaboratorNeed | None) -> "CollaboratorData":
        """Narrow to the single set a kind declares it needs."""
        if need is CollaboratorNeed.PRODUCTS:
            return CollaboratorData(products=self.products)
        if need is CollaboratorNeed.CATEGORIES:
            return CollaboratorData(categories=self.categories)
        return CollaboratorData()


@dataclass(frozen=True)
class RenderedRegion:
    """One rendered page region, in page order."""

    section_id: str
    kind: str
    layout_variant: str
    html: str
    status: RegionStatus = RegionStatus.RENDERED


@dataclass(frozen=True)
class SectionRendererEntry:
    schema: type[SectionContent]
    template: Callable[..., str]
    needs: CollaboratorNeed | None = None


SECTION_RENDERERS: dict[SectionKind, SectionRendererEntry] = {
    SectionKind.HERO: SectionRendererEntry(HeroContent, templates.render_hero),
    SectionKind.FEATURES: SectionRendererEntry(FeaturesContent, templates.render_features),
    SectionKind.TESTIMONIALS: SectionRendererEntry(
        CustomerTestimonialsContent, templates.render_testimonials
    ),
    SectionKind.PRODUCT_SHOWCASE: SectionRendererEntry(
        ProductShowcaseContent,
        templates.render_product_showcase,
        needs=CollaboratorNeed.PRODUCTS,
    ),
    SectionKind.CTA: SectionRendererEntry(CallToActionContent, templates.render_call_to_action),
    SectionKind.NEWSLETTER: SectionRendererEntry(NewsletterContent, templates.render_newsletter),
    SectionKind.ABOUT_STORY: SectionRendererEntry(AboutStoryContent, templates.render_about_story),
    SectionKind.CATEGORIES: SectionRendererEntry(
        CategoriesContent,
        templates.render_categories,
        needs=CollaboratorNeed.CATEGORIES,
    ),
}


def region_attributes(section: Section) -> str:
    """Data attributes identifying a region in the rendered page."""
    return (
        f' data-section-id="{escape(section.id)}"'
        f' data-section-kind="{escape(section.kind)}"'
        f' data-layout="{escape(section.layout_variant or "default")}"'
    )


def collaborator_need(kind: str) -> CollaboratorNeed | None:
    """The collaborator set a kind needs, or None (also for unknown kinds)."""
    known = SectionKind.parse(kind)
    if known is None:
        return None
    return SECTION_RENDERERS[known].needs


@dataclass
class SectionRenderer:
    """Turns one stored section into a page region.

    Decodes the payload, runs the kind's defaulting pass and applies the
    kind's template. Unknown kinds produce a visible placeholder region
    carrying the offending tag.
    """

    renderers: dict[SectionKind, SectionRendererEntry] = field(
        default_factory=lambda: dict(SECTION_RENDERERS)
    )

    def render(
        self,
        section: Section,
        collaborators: CollaboratorData | None = None,
    ) -> RenderedRegion:
        attrs = region_attributes(section)
        kind = SectionKind.parse(section.kind)
        entry = self.renderers.get(kind) if kind is not None else None

        if kind is None or entry is None:
            logger.warning(
                "Unknown section kind '%s' (section %s) — rendering placeholder",
                section.kind,
                section.id,
            )
            return self._region(
                section,
                templates.render_unknown(section.kind, attrs),
                RegionStatus.UNKNOWN_KIND,
            )

        content = fill_defaults(entry.schema, content_codec.decode(section.content))
        extra = []
        if entry.needs is not None:
            extra.append((collaborators or CollaboratorData()).get(entry.needs))
        html = entry.template(content, attrs, *extra)
        return self._region(section, html, RegionStatus.RENDERED)

    def render_failure(self, section: Section) -> RenderedRegion:
        """Error region for a section whose rendering raised unexpectedly."""
        return self._region(
            section,
            templates.render_error(section.kind, region_attributes(section)),
            RegionStatus.ERROR,
        )

    @staticmethod
    def _region(section: Section, html: str, status: RegionStatus) -> RenderedRegion:
        return RenderedRegion(
            section_id=section.id,
            kind=section.kind,
            layout_variant=section.layout_variant,
            html=html,
            status=status,
        )


def default_content(kind: SectionKind, payload: dict) -> SectionContent:
    """Defaulted content for a known kind, using the kind's registered schema."""
    return fill_defaults(SECTION_RENDERERS[kind].schema, payload)
