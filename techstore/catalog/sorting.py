"""Sort comparator engine.

Orders product sequences by a SortKey. All orderings are stable, so ties
keep their input order. Names are compared with ICU collation keys tailored
to the active language: raw code-point order puts Ukrainian і/ї/є/ґ after я,
and untailored Unicode collation treats ї as a variant of і.
"""

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

import icu

from techstore.catalog.i18n import DEFAULT_FALLBACKS, DEFAULT_LANGUAGE, resolve_name
from techstore.catalog.models import Product


class SortKey(str, Enum):
    """Result orderings offered by the catalog."""

    DEFAULT = "default"
    PRICE_ASCENDING = "price-asc"
    PRICE_DESCENDING = "price-desc"
    NAME_ASCENDING = "name-asc"
    NAME_DESCENDING = "name-desc"
    RATING_DESCENDING = "rating"

    @classmethod
    def parse(cls, token: str) -> "SortKey | None":
        """Parse a sort token, accepting long spellings.

        Args:
            token: Token such as "price-asc" or "price-ascending".

        Returns:
            SortKey, or None if the token is unknown.
        """
        token = token.strip().lower()
        try:
            return cls(token)
        except ValueError:
            return _SORT_ALIASES.get(token)


_SORT_ALIASES: dict[str, SortKey] = {
    "price-ascending": SortKey.PRICE_ASCENDING,
    "price-descending": SortKey.PRICE_DESCENDING,
    "name-ascending": SortKey.NAME_ASCENDING,
    "name-descending": SortKey.NAME_DESCENDING,
    "rating-descending": SortKey.RATING_DESCENDING,
}


@lru_cache(maxsize=None)
def get_collator(language: str = DEFAULT_LANGUAGE) -> icu.Collator:
    """Get the collator for a language, created once per language.

    Args:
        language: Language code used as the ICU locale.

    Returns:
        Collator applying the language's alphabet order.
    """
    return icu.Collator.createInstance(icu.Locale(language))


def sort(
    products: Iterable[Product],
    sort_key: SortKey,
    language: str = DEFAULT_LANGUAGE,
    fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
) -> list[Product]:
    """Sort products into a new list.

    Args:
        products: Products to sort (not modified).
        sort_key: Ordering to apply.
        language: Active language for name orderings.
        fallbacks: Name fallback chain for name orderings.

    Returns:
        Sorted products.
    """
    items = list(products)

    if sort_key == SortKey.DEFAULT:
        return items

    key: Callable[[Product], Any]
    reverse = False

    if sort_key in (SortKey.PRICE_ASCENDING, SortKey.PRICE_DESCENDING):
        key = lambda p: p.price
        reverse = sort_key == SortKey.PRICE_DESCENDING
    elif sort_key in (SortKey.NAME_ASCENDING, SortKey.NAME_DESCENDING):
        collator = get_collator(language)
        key = lambda p: collator.getSortKey(resolve_name(p, language, fallbacks))
        reverse = sort_key == SortKey.NAME_DESCENDING
    else:
        key = lambda p: p.rating or 0.0
        reverse = True

    # sorted() stays stable with reverse=True: equal keys keep input order
    return sorted(items, key=key, reverse=reverse)
