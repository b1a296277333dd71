"""Shared API dependencies.

The catalog store is loaded once per process and shared read-only by all
requests; each request builds its own controller on top of it.
"""

import structlog

from techstore.catalog.generator import CatalogGenerator, GeneratorConfig
from techstore.catalog.loader import load_products
from techstore.catalog.store import CatalogStore
from techstore.infrastructure.config import settings

logger = structlog.get_logger()

# Global catalog store instance
_catalog_store: CatalogStore | None = None


def build_catalog_store() -> CatalogStore:
    """Load the catalog from fixtures, or generate the demo catalog.

    Returns:
        Loaded CatalogStore.

    Raises:
        CatalogLoadError: If the configured fixture directory is unusable.
    """
    if settings.products_dir:
        products = load_products(settings.products_dir)
        source = settings.products_dir
    else:
        generator = CatalogGenerator(
            GeneratorConfig(
                seed=settings.demo_seed,
                products_per_category=settings.demo_products_per_category,
            )
        )
        products = generator.generate_list()
        source = "demo"

    logger.info("Catalog source ready", source=source, product_count=len(products))
    return CatalogStore(products)


def get_catalog_store() -> CatalogStore:
    """Get or create the catalog store instance."""
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = build_catalog_store()
    return _catalog_store


def resolve_language(language: str | None) -> str:
    """Pick the requested language, or the default when unsupported."""
    if language and language in settings.supported_languages:
        return language
    return settings.default_language
