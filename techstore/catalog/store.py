"""In-memory catalog store.

Holds the product collection for a catalog session. The collection is
replaced wholesale by ``load`` and is read-only otherwise; every filter
pass starts from ``all()``.
"""

from collections import Counter
from collections.abc import Iterable

import structlog

from techstore.catalog.models import Product
from techstore.domain.exceptions import ProductNotFoundError

logger = structlog.get_logger()


class CatalogStore:
    """Product collection in stable input order.

    Example usage:
        store = CatalogStore()
        store.load(load_products("data/products"))
        phones = [p for p in store.all() if p.category == "phones"]
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        """Initialize store.

        Args:
            products: Optional initial collection.
        """
        self._products: list[Product] = []
        self._by_id: dict[str, Product] = {}
        if products is not None:
            self.load(products)

    def load(self, products: Iterable[Product]) -> None:
        """Replace the held collection.

        Records with an id that was already seen are dropped; the first
        occurrence wins.

        Args:
            products: Products in display order.
        """
        ordered: list[Product] = []
        by_id: dict[str, Product] = {}

        for product in products:
            if product.id in by_id:
                logger.warning("Duplicate product skipped", product_id=product.id)
                continue
            by_id[product.id] = product
            ordered.append(product)

        self._products = ordered
        self._by_id = by_id
        logger.info("Catalog loaded", product_count=len(ordered))

    def all(self) -> list[Product]:
        """Get the full collection.

        Returns:
            Copy of the collection in input order.
        """
        return list(self._products)

    def get(self, product_id: str) -> Product:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = self._by_id.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def brands(self) -> list[str]:
        """Get distinct brand names in first-seen order."""
        seen: dict[str, str] = {}
        for product in self._products:
            if product.brand and product.brand.lower() not in seen:
                seen[product.brand.lower()] = product.brand
        return list(seen.values())

    def category_counts(self) -> dict[str, int]:
        """Count products per category.

        Returns:
            Mapping of category value to product count, in first-seen order.
        """
        counts = Counter(product.category.value for product in self._products)
        return dict(counts)

    def __len__(self) -> int:
        return len(self._products)
