"""Query-state synchronizer.

Maps catalog selections to a canonical, minimal query string and back.
Only fields that differ from their defaults are written, and the page
number is never part of the query: it resets to 1 whenever filters change.

Query strings are user- and bookmark-editable, so parsing is lenient:
unknown or malformed fields are dropped one by one instead of rejecting
the whole query.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from urllib.parse import parse_qsl, unquote, urlencode

import structlog

from techstore.catalog.filters import FilterState, RatingTier, normalize_brand
from techstore.catalog.models import ALL_CATEGORIES
from techstore.catalog.sorting import SortKey

logger = structlog.get_logger()

# Public category names mapped to internal categories
CATEGORY_ALIASES: dict[str, str] = {
    "smartphones": "phones",
    "watches": "smartwatches",
}

_TRUE_TOKENS = {"1", "true", "yes", "on"}
_FALSE_TOKENS = {"0", "false", "no", "off"}


def resolve_category(token: str) -> str:
    """Map an external category token to the internal category.

    Unmapped tokens pass through unchanged so that categories added later
    keep working.

    Args:
        token: Category token from a link or query string.

    Returns:
        Internal category name.
    """
    token = token.strip()
    return CATEGORY_ALIASES.get(token.lower(), token)


def format_number(value: float) -> str:
    """Render a price bound without a trailing ".0"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class QueryState:
    """Canonical external representation of catalog selections.

    Each field holds its query-string value, or None when the selection
    is at its default.
    """

    category: str | None = None
    search: str | None = None
    brands: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    ratings: str | None = None
    in_stock: str | None = None
    sort: str | None = None

    def to_params(self) -> dict[str, str]:
        """Get present fields keyed by their query-string names."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                params[_PARAM_NAMES[f.name]] = value
        return params

    def to_query_string(self) -> str:
        """Render as a query string without the leading "?"."""
        return urlencode(self.to_params())

    def is_empty(self) -> bool:
        """Check if every selection is at its default."""
        return not self.to_params()

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "QueryState":
        """Build from query-string parameters, ignoring unknown names.

        Args:
            params: Parameter mapping (e.g. parsed request query).

        Returns:
            QueryState holding the raw values.
        """
        values = {
            attr: params[name]
            for attr, name in _PARAM_NAMES.items()
            if name in params
        }
        return cls(**values)

    @classmethod
    def from_query_string(cls, query: str) -> "QueryState":
        """Parse a query string; a leading "?" is allowed.

        When a parameter is repeated the last value wins.

        Args:
            query: Query string.

        Returns:
            QueryState holding the raw values.
        """
        return cls.from_params(dict(parse_qsl(query.lstrip("?"), keep_blank_values=True)))


_PARAM_NAMES: dict[str, str] = {
    "category": "category",
    "search": "search",
    "brands": "brands",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "ratings": "ratings",
    "in_stock": "inStock",
    "sort": "sort",
}


@dataclass
class QueryUpdate:
    """Selections recovered from a query; None means "not given"."""

    category: str | None = None
    search_text: str | None = None
    brands: list[str] | None = None
    min_price: float | None = None
    max_price: float | None = None
    ratings: set[RatingTier] | None = None
    in_stock_only: bool | None = None
    sort: SortKey | None = None

    def apply_to(self, state: FilterState) -> FilterState:
        """Overlay the given selections on a copy of ``state``."""
        result = state.copy()
        if self.category is not None:
            result.category = self.category
        if self.search_text is not None:
            result.search_text = self.search_text
        if self.brands is not None:
            result.brands = list(self.brands)
        if self.min_price is not None:
            result.min_price = self.min_price
        if self.max_price is not None:
            result.max_price = self.max_price
        if self.ratings is not None:
            result.ratings = set(self.ratings)
        if self.in_stock_only is not None:
            result.in_stock_only = self.in_stock_only
        return result

    def to_filter_state(self) -> FilterState:
        """Build a FilterState with defaults for everything not given."""
        return self.apply_to(FilterState())


def serialize(
    state: FilterState,
    sort_key: SortKey = SortKey.DEFAULT,
    page: int | None = None,
) -> QueryState:
    """Serialize selections to their canonical query state.

    Args:
        state: Filter criteria.
        sort_key: Active ordering.
        page: Accepted for call-site symmetry; never serialized.

    Returns:
        QueryState with only non-default fields set.
    """
    return QueryState(
        category=state.category if state.category != ALL_CATEGORIES else None,
        search=state.search_text or None,
        brands=",".join(_escape_brand(b) for b in state.brands) if state.brands else None,
        min_price=format_number(state.min_price) if state.min_price is not None else None,
        max_price=format_number(state.max_price) if state.max_price is not None else None,
        ratings=(
            ",".join(str(int(tier)) for tier in sorted(state.ratings))
            if state.ratings
            else None
        ),
        in_stock="1" if state.in_stock_only else None,
        sort=sort_key.value if sort_key != SortKey.DEFAULT else None,
    )


def deserialize(query: QueryState) -> QueryUpdate:
    """Recover selections from a query state.

    Malformed fields are ignored and logged; this never raises.

    Args:
        query: Query state, typically parsed from a URL.

    Returns:
        The recovered selections.
    """
    update = QueryUpdate()

    if query.category is not None and query.category.strip():
        update.category = resolve_category(query.category)

    if query.search is not None and query.search.strip():
        update.search_text = query.search.strip()

    if query.brands is not None:
        brands = _parse_brands(query.brands)
        if brands:
            update.brands = brands

    if query.min_price is not None:
        update.min_price = _parse_price("minPrice", query.min_price)

    if query.max_price is not None:
        update.max_price = _parse_price("maxPrice", query.max_price)

    if query.ratings is not None:
        ratings = _parse_ratings(query.ratings)
        if ratings:
            update.ratings = ratings

    if query.in_stock is not None:
        token = query.in_stock.strip().lower()
        if token in _TRUE_TOKENS:
            update.in_stock_only = True
        elif token in _FALSE_TOKENS:
            update.in_stock_only = False
        else:
            logger.debug("Ignoring malformed query field", field="inStock", value=query.in_stock)

    if query.sort is not None:
        update.sort = SortKey.parse(query.sort)
        if update.sort is None:
            logger.debug("Ignoring malformed query field", field="sort", value=query.sort)

    return update


def _escape_brand(brand: str) -> str:
    # "," separates ids, so it and the escape character itself are quoted
    return brand.replace("%", "%25").replace(",", "%2C")


def _parse_brands(value: str) -> list[str]:
    brands: list[str] = []
    for token in value.split(","):
        brand = normalize_brand(unquote(token))
        if brand and brand not in brands:
            brands.append(brand)
    return brands


def _parse_price(field_name: str, value: str) -> float | None:
    try:
        price = float(value)
    except ValueError:
        price = None

    if price is None or not math.isfinite(price) or price < 0:
        logger.debug("Ignoring malformed query field", field=field_name, value=value)
        return None
    return price


def _parse_ratings(value: str) -> set[RatingTier]:
    ratings: set[RatingTier] = set()
    for token in value.split(","):
        try:
            ratings.add(RatingTier(int(token.strip())))
        except ValueError:
            logger.debug("Ignoring malformed rating tier", value=token)
    return ratings
