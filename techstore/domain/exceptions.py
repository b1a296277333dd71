"""Domain exceptions.

All domain-level errors raised by the catalog query engine. Most catalog
irregularities (malformed query input, missing product fields, empty
results) are recovered locally; these exceptions cover the remaining
cases that callers are expected to handle.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class PageOutOfRangeError(CatalogError):
    """Raised when a page outside the valid range is requested."""

    def __init__(self, page: int, total_pages: int) -> None:
        """Initialize page out of range error.

        Args:
            page: The requested page number.
            total_pages: Number of pages available.
        """
        super().__init__(
            f"Page {page} is out of range (1..{max(1, total_pages)})",
            details={"page": page, "total_pages": total_pages},
        )


class ProductNotFoundError(CatalogError):
    """Raised when a product is not present in the catalog store."""

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID of the missing product.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )


class CatalogLoadError(CatalogError):
    """Raised when a product source cannot be read at all."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize catalog load error.

        Args:
            source: Path or name of the product source.
            reason: Why the source could not be read.
        """
        super().__init__(
            f"Cannot load catalog from {source}: {reason}",
            details={"source": source, "reason": reason},
        )


# ============================================================================
# Localization Errors
# ============================================================================


class UnsupportedLanguageError(DomainError):
    """Raised when switching to a language the storefront does not support."""

    def __init__(self, language: str, supported: list[str]) -> None:
        """Initialize unsupported language error.

        Args:
            language: The rejected language code.
            supported: Supported language codes.
        """
        super().__init__(
            f"Unsupported language: {language}. Supported: {supported}",
            details={"language": language, "supported": supported},
        )
