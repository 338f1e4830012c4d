"""Page composition endpoints — rendered regions as JSON or a full HTML document."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from storefront.application.schemas import PageResponse, RenderedRegionResponse
from storefront.application.services import PageComposer
from storefront.infrastructure.dependencies import get_page_composer

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("/{page_key}", response_model=PageResponse)
async def get_page(
    page_key: str,
    composer: PageComposer = Depends(get_page_composer),
) -> PageResponse:
    """Compose a page into its ordered rendered regions."""
    regions = await composer.compose_page(page_key)
    return PageResponse(
        page_key=page_key,
        regions=[
            RenderedRegionResponse(
                section_id=region.section_id,
                kind=region.kind,
                layout_variant=region.layout_variant,
                status=region.status.value,
                html=region.html,
            )
            for region in regions
        ],
    )


@router.get("/{page_key}/html", response_class=HTMLResponse)
async def get_page_html(
    page_key: str,
    composer: PageComposer = Depends(get_page_composer),
) -> HTMLResponse:
    return HTMLResponse(await composer.render_document(page_key))
