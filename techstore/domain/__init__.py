"""Domain layer for the TechStore catalog.

Exports the exception hierarchy shared by the catalog engine and the API.
"""

from techstore.domain.exceptions import (
    CatalogError,
    CatalogLoadError,
    DomainError,
    PageOutOfRangeError,
    ProductNotFoundError,
    UnsupportedLanguageError,
)

__all__ = [
    "DomainError",
    "CatalogError",
    "CatalogLoadError",
    "PageOutOfRangeError",
    "ProductNotFoundError",
    "UnsupportedLanguageError",
]
