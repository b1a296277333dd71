"""Filter predicate engine.

A product passes a FilterState when it passes every active criterion
(AND across criteria). Inside the multi-valued criteria (brands, rating
tiers) a product needs to match only one selected value (OR).
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from techstore.catalog.i18n import DEFAULT_FALLBACKS, DEFAULT_LANGUAGE, resolve_name
from techstore.catalog.models import ALL_CATEGORIES, Product


class RatingTier(IntEnum):
    """Rating filter tiers ("N stars & up").

    Tiers are inclusive lower bounds and overlap: a 4.6 rating passes
    all three tiers.
    """

    THREE = 3
    FOUR = 4
    FIVE = 5

    @property
    def threshold(self) -> float:
        """Minimum rating that passes this tier."""
        return _RATING_THRESHOLDS[self]


_RATING_THRESHOLDS: dict[RatingTier, float] = {
    RatingTier.FIVE: 4.5,
    RatingTier.FOUR: 4.0,
    RatingTier.THREE: 3.0,
}


def normalize_brand(brand: str) -> str:
    """Normalize a brand identifier for case-insensitive matching."""
    return brand.strip().lower()


@dataclass
class FilterState:
    """Active filter criteria.

    Empty ``brands`` or ``ratings`` mean "no restriction", never
    "match nothing".

    Attributes:
        category: Category value, or "all".
        brands: Lower-cased brand identifiers, in selection order.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        ratings: Selected rating tiers.
        in_stock_only: Only show available products.
        search_text: Case-insensitive substring of the display name.
    """

    category: str = ALL_CATEGORIES
    brands: list[str] = field(default_factory=list)
    min_price: float | None = None
    max_price: float | None = None
    ratings: set[RatingTier] = field(default_factory=set)
    in_stock_only: bool = False
    search_text: str = ""

    def is_default(self) -> bool:
        """Check if no criterion is active."""
        return self == FilterState()

    def copy(self) -> "FilterState":
        """Return an independent copy."""
        return FilterState(
            category=self.category,
            brands=list(self.brands),
            min_price=self.min_price,
            max_price=self.max_price,
            ratings=set(self.ratings),
            in_stock_only=self.in_stock_only,
            search_text=self.search_text,
        )


def matches(
    product: Product,
    state: FilterState,
    language: str = DEFAULT_LANGUAGE,
    fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
) -> bool:
    """Check whether a single product passes all active criteria.

    Args:
        product: Product to test.
        state: Filter criteria.
        language: Active language for the text criterion.
        fallbacks: Name fallback chain for the text criterion.

    Returns:
        True if the product passes.
    """
    if state.category != ALL_CATEGORIES and product.category.value != state.category:
        return False

    if state.brands:
        if not product.brand or normalize_brand(product.brand) not in state.brands:
            return False

    if state.min_price is not None and product.price < state.min_price:
        return False

    if state.max_price is not None and product.price > state.max_price:
        return False

    if state.ratings:
        rating = product.rating or 0.0
        if not any(rating >= tier.threshold for tier in state.ratings):
            return False

    if state.in_stock_only and not product.in_stock:
        return False

    if state.search_text:
        name = resolve_name(product, language, fallbacks)
        if state.search_text.casefold() not in name.casefold():
            return False

    return True


def apply(
    products: Iterable[Product],
    state: FilterState,
    language: str = DEFAULT_LANGUAGE,
    fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
) -> list[Product]:
    """Filter products, preserving input order.

    Args:
        products: Products to filter.
        state: Filter criteria.
        language: Active language for the text criterion.
        fallbacks: Name fallback chain for the text criterion.

    Returns:
        Products passing every active criterion.
    """
    return [p for p in products if matches(p, state, language, fallbacks)]
