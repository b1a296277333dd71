"""Catalog Query Engine.

Filters, sorts and paginates a resident product collection and keeps the
selections in sync with a canonical, bookmarkable query string.
"""

from techstore.catalog.controller import CatalogController, CatalogEvent, CatalogView
from techstore.catalog.filters import FilterState, RatingTier
from techstore.catalog.generator import CatalogGenerator, GeneratorConfig
from techstore.catalog.i18n import ActiveLanguage, LanguageProvider, resolve_name
from techstore.catalog.loader import load_products
from techstore.catalog.models import ALL_CATEGORIES, Category, Product
from techstore.catalog.navigation import HistoryNavigator, Navigator
from techstore.catalog.pagination import ELLIPSIS, visible_page_window
from techstore.catalog.query_state import QueryState, QueryUpdate, deserialize, serialize
from techstore.catalog.sorting import SortKey
from techstore.catalog.store import CatalogStore
from techstore.catalog.suggestions import suggest

__all__ = [
    # Models
    "ALL_CATEGORIES",
    "Category",
    "Product",
    # Store
    "CatalogStore",
    "CatalogGenerator",
    "GeneratorConfig",
    "load_products",
    # Query engine
    "FilterState",
    "RatingTier",
    "SortKey",
    "ELLIPSIS",
    "visible_page_window",
    "QueryState",
    "QueryUpdate",
    "serialize",
    "deserialize",
    "suggest",
    # Session
    "ActiveLanguage",
    "LanguageProvider",
    "resolve_name",
    "CatalogController",
    "CatalogEvent",
    "CatalogView",
    "HistoryNavigator",
    "Navigator",
]
