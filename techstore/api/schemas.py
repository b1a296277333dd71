"""API schemas for the TechStore catalog API.

Pydantic models for response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict, description="Additional error context"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as shown on a catalog card."""

    id: str = Field(..., description="Product ID")
    category: str = Field(..., description="Category")
    brand: str | None = Field(default=None, description="Brand name")
    name: str = Field(..., description="Display name in the requested language")
    names: dict[str, str] = Field(
        default_factory=dict, description="Display names by language code"
    )
    price: float = Field(..., ge=0, description="Current price (UAH)")
    old_price: float | None = Field(default=None, description="Price before discount")
    discount: int | None = Field(default=None, description="Discount percentage")
    rating: float | None = Field(default=None, ge=0, le=5, description="Average rating")
    reviews: int = Field(default=0, ge=0, description="Number of reviews")
    in_stock: bool = Field(..., description="Availability")
    image_url: str | None = Field(default=None, description="Cover image")
    is_new: bool = Field(default=False, description="'New' badge")
    is_hot: bool = Field(default=False, description="'Hot' badge")


# ============================================================================
# Catalog Schemas
# ============================================================================


class CatalogPageResponse(BaseModel):
    """One page of catalog results."""

    items: list[ProductSchema] = Field(..., description="Products on the page")
    total: int = Field(..., description="Number of matching products")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    total_pages: int = Field(..., description="Number of pages")
    has_more: bool = Field(..., description="Whether there are more pages")
    page_window: list[int | str] = Field(
        default_factory=list,
        description="Page numbers for navigation; '...' marks skipped pages",
    )
    language: str = Field(..., description="Language used for names")
    query: str = Field(..., description="Canonical query string of the selections")


class SuggestionSchema(BaseModel):
    """Search dropdown entry."""

    id: str
    category: str
    name: str
    price: float


class SuggestionsResponse(BaseModel):
    """Typeahead suggestions for a search query."""

    query: str
    items: list[SuggestionSchema] = Field(default_factory=list)


class CategoryFacet(BaseModel):
    """Category with its product count."""

    category: str
    product_count: int


class FacetsResponse(BaseModel):
    """Values available for the filter sidebar."""

    categories: list[CategoryFacet] = Field(default_factory=list)
    brands: list[str] = Field(default_factory=list)
