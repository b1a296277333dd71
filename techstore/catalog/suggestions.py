"""Typeahead search suggestions.

Suggestions use the same case-insensitive name containment as the catalog
text filter, capped to a short list for the search dropdown.
"""

from collections.abc import Iterable, Sequence

from techstore.catalog.i18n import DEFAULT_FALLBACKS, DEFAULT_LANGUAGE, resolve_name
from techstore.catalog.models import Product

MAX_SUGGESTIONS = 8
MIN_QUERY_LENGTH = 2


def suggest(
    products: Iterable[Product],
    query: str,
    language: str = DEFAULT_LANGUAGE,
    limit: int = MAX_SUGGESTIONS,
    min_length: int = MIN_QUERY_LENGTH,
    fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
) -> list[Product]:
    """Find products whose display name contains the query.

    Args:
        products: Products to search, in display order.
        query: Text typed so far.
        language: Active language.
        limit: Maximum number of suggestions.
        min_length: Shorter queries (after trimming) yield nothing.
        fallbacks: Name fallback chain.

    Returns:
        Up to ``limit`` matching products in input order.
    """
    needle = query.strip().casefold()
    if len(needle) < min_length:
        return []

    results: list[Product] = []
    for product in products:
        if needle in resolve_name(product, language, fallbacks).casefold():
            results.append(product)
            if len(results) >= limit:
                break
    return results
