"""Catalog API endpoints.

Exposes the catalog query engine over HTTP. Listing requests accept the
same query string the storefront keeps in its address bar, so any
bookmarked catalog URL can be replayed against the API.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from techstore.api.dependencies import get_catalog_store, resolve_language
from techstore.api.schemas import (
    CatalogPageResponse,
    CategoryFacet,
    ErrorResponse,
    FacetsResponse,
    ProductSchema,
    SuggestionSchema,
    SuggestionsResponse,
)
from techstore.catalog.controller import CatalogController, CatalogView
from techstore.catalog.i18n import ActiveLanguage, resolve_name
from techstore.catalog.models import Product
from techstore.catalog.pagination import ELLIPSIS
from techstore.catalog.query_state import QueryState
from techstore.catalog.store import CatalogStore
from techstore.catalog.suggestions import suggest
from techstore.infrastructure.config import settings

router = APIRouter(prefix="/catalog", tags=["Catalog"])

ELLIPSIS_MARKER = "..."


# ============================================================================
# Converters
# ============================================================================


def _fallbacks() -> tuple[str, ...]:
    return (settings.default_language,)


def product_to_schema(product: Product, language: str) -> ProductSchema:
    """Convert Product to response schema."""
    return ProductSchema(
        id=product.id,
        category=product.category.value,
        brand=product.brand,
        name=resolve_name(product, language, _fallbacks()),
        names=dict(product.name),
        price=product.price,
        old_price=product.old_price,
        discount=product.discount,
        rating=product.rating,
        reviews=product.reviews,
        in_stock=product.in_stock,
        image_url=product.images[0] if product.images else None,
        is_new=product.is_new,
        is_hot=product.is_hot,
    )


def view_to_response(view: CatalogView, language: str) -> CatalogPageResponse:
    """Convert a controller view to the page response."""
    return CatalogPageResponse(
        items=[product_to_schema(p, language) for p in view.visible_products],
        total=view.total_count,
        page=view.current_page,
        page_size=settings.page_size,
        total_pages=view.total_pages,
        has_more=view.current_page < view.total_pages,
        page_window=[
            ELLIPSIS_MARKER if item is ELLIPSIS else item for item in view.page_window
        ],
        language=language,
        query=view.query_string,
    )


def _parse_page(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CatalogPageResponse,
    summary="List catalog products",
    description=(
        "Filter, sort and paginate the catalog. Accepts the storefront query "
        "fields (category, search, brands, minPrice, maxPrice, ratings, "
        "inStock, sort) plus page and lang. Malformed values are ignored."
    ),
)
async def list_catalog(
    request: Request,
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    page: Annotated[str | None, Query(description="Page number (1-based)")] = None,
    lang: Annotated[str | None, Query(description="Language code")] = None,
) -> CatalogPageResponse:
    """List one page of catalog results.

    Args:
        request: Incoming request (query fields are read leniently).
        store: Catalog store.
        page: Requested page; out-of-range pages fall back to page 1.
        lang: Language for names, search and name sorting.

    Returns:
        Page of products with navigation data.
    """
    language = resolve_language(lang)
    controller = CatalogController(
        store,
        ActiveLanguage(language, settings.supported_languages),
        page_size=settings.page_size,
        max_visible_pages=settings.max_visible_pages,
        fallbacks=_fallbacks(),
    )

    try:
        controller.start(QueryState.from_params(request.query_params))
        requested = _parse_page(page)
        if requested is not None and requested != 1:
            controller.go_to_page(requested)
        view = controller.view
    finally:
        controller.close()

    return view_to_response(view, language)


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    summary="Search suggestions",
)
async def get_suggestions(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    q: Annotated[str, Query(description="Text typed so far")] = "",
    lang: Annotated[str | None, Query(description="Language code")] = None,
) -> SuggestionsResponse:
    """Suggest products whose name contains the query.

    Returns:
        Up to the configured number of suggestions.
    """
    language = resolve_language(lang)
    products = suggest(
        store.all(),
        q,
        language,
        limit=settings.suggestion_limit,
        fallbacks=_fallbacks(),
    )
    return SuggestionsResponse(
        query=q.strip(),
        items=[
            SuggestionSchema(
                id=p.id,
                category=p.category.value,
                name=resolve_name(p, language, _fallbacks()),
                price=p.price,
            )
            for p in products
        ],
    )


@router.get(
    "/facets",
    response_model=FacetsResponse,
    summary="Filter facets",
)
async def get_facets(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> FacetsResponse:
    """Get categories and brands available for filtering."""
    return FacetsResponse(
        categories=[
            CategoryFacet(category=category, product_count=count)
            for category, count in store.category_counts().items()
        ],
        brands=store.brands(),
    )


@router.get(
    "/products/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    lang: Annotated[str | None, Query(description="Language code")] = None,
) -> ProductSchema:
    """Get product details by ID.

    Raises:
        ProductNotFoundError: If the product is not in the catalog.
    """
    return product_to_schema(store.get(product_id), resolve_language(lang))
