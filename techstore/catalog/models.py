"""Product records for the catalog.

Products are loaded once per catalog session and never mutated afterwards.
JSON fixtures use camelCase field names (``oldPrice``, ``inStock``); the
model exposes them as snake_case attributes.
"""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Product categories sold by the storefront."""

    PHONES = "phones"
    LAPTOPS = "laptops"
    HEADPHONES = "headphones"
    SMARTWATCHES = "smartwatches"
    ACCESSORIES = "accessories"


# Sentinel category meaning "no category restriction"
ALL_CATEGORIES = "all"


class Product(BaseModel):
    """Read-only product record.

    Attributes:
        id: Unique product identifier.
        category: Category the product is listed under.
        brand: Brand name as displayed (matching is case-insensitive).
        price: Current price.
        old_price: Price before discount, never below ``price``.
        rating: Average rating (0.0-5.0), if the product has been rated.
        reviews: Number of reviews.
        in_stock: Whether the product is available.
        name: Display name by language code.
        description: Optional description by language code.
        images: Image paths, first one is the cover.
        discount: Discount percentage shown on the card.
        is_new: "New" badge flag.
        is_hot: "Hot" badge flag.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(..., min_length=1)
    category: Category
    brand: str | None = None
    price: float = Field(..., ge=0)
    old_price: float | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    in_stock: bool = False
    name: dict[str, str] = Field(default_factory=dict)

    # Presentational fields, never used for querying
    description: dict[str, str] | None = None
    images: list[str] = Field(default_factory=list)
    discount: int | None = None
    is_new: bool = False
    is_hot: bool = False

    @model_validator(mode="after")
    def _check_old_price(self) -> Self:
        """Reject an old price that is lower than the current one."""
        if self.old_price is not None and self.old_price < self.price:
            raise ValueError(
                f"oldPrice {self.old_price} is lower than price {self.price}"
            )
        return self

    def to_dict(self) -> dict:
        """Convert to the camelCase fixture representation.

        Returns:
            Dictionary representation.
        """
        return self.model_dump(mode="json", by_alias=True)
