"""Page composition — turns a page key into an ordered list of rendered regions."""

import logging
from html import escape

from storefront.application.interfaces import CatalogRepository, SectionRepository
from storefront.application.rendering import (
    CollaboratorData,
    CollaboratorNeed,
    RegionStatus,
    RenderedRegion,
    SectionRenderer,
    collaborator_need,
)
from storefront.domain.entities import Category, Product
from storefront.infrastructure.logging.colored_logger import CompositionLogger, CompositionStage

logger = logging.getLogger(__name__)
clog = CompositionLogger("PageComposer")


class PageComposer:
    """Composes a storefront page from its stored sections.

    Steps:
        1. Load the active sections for the page, ordered by order_index.
        2. Fetch each catalog set needed by the kinds present, once per page.
        3. Render every section in order, handing it only the set its kind needs.

    A section that fails to render becomes an error region; the page still
    composes. Store failures (``StoreUnavailableError``) propagate to the caller.
    """

    def __init__(
        self,
        section_repository: SectionRepository,
        catalog_repository: CatalogRepository,
        renderer: SectionRenderer | None = None,
        site_name: str = "Storefront",
    ):
        self._sections = section_repository
        self._catalog = catalog_repository
        self._renderer = renderer or SectionRenderer()
        self._site_name = site_name

    async def compose_page(self, page_key: str) -> list[RenderedRegion]:
        with clog.timed_step(CompositionStage.SECTIONS, "Loading sections", page=page_key):
            sections = await self._sections.list_by_page(page_key)

        needs = {collaborator_need(section.kind) for section in sections}
        needs.discard(None)
        collaborators = await self._fetch_collaborators(needs)

        regions: list[RenderedRegion] = []
        with clog.timed_step(CompositionStage.RENDER, "Rendering sections", count=len(sections)):
            for section in sections:
                scoped = collaborators.only(collaborator_need(section.kind))
                try:
                    region = self._renderer.render(section, scoped)
                except Exception:
                    logger.exception("Rendering section %s failed", section.id)
                    region = self._renderer.render_failure(section)
                clog.region(region.kind, region.status.value, region.section_id)
                regions.append(region)

        degraded = sum(1 for r in regions if r.status is not RegionStatus.RENDERED)
        clog.stats(page=page_key, regions=len(regions), degraded=degraded)
        return regions

    async def render_document(self, page_key: str) -> str:
        """Compose a page and wrap its regions in a standalone HTML document."""
        regions = await self.compose_page(page_key)
        body = "\n".join(region.html for region in regions)
        return (
            "<!doctype html>"
            '<html lang="en"><head><meta charset="utf-8">'
            '<meta name="viewport" content="width=device-width, initial-scale=1">'
            f"<title>{escape(self._site_name)}</title>"
            "</head>"
            f'<body><main data-page="{escape(page_key)}">\n{body}\n</main></body></html>'
        )

    async def _fetch_collaborators(self, needs: set[CollaboratorNeed]) -> CollaboratorData:
        # Reads run one after the other: they share the request's AsyncSession.
        products: list[Product] | None = None
        categories: list[Category] | None = None

        if CollaboratorNeed.PRODUCTS in needs:
            with clog.timed_step(CompositionStage.CATALOG, "Loading products"):
                products = await self._catalog.get_all_products()
            clog.detail("Products loaded", count=len(products))
        if CollaboratorNeed.CATEGORIES in needs:
            with clog.timed_step(CompositionStage.CATALOG, "Loading categories"):
                categories = await self._catalog.get_active_categories()
            clog.detail("Categories loaded", count=len(categories))

        return CollaboratorData(products=products, categories=categories)
