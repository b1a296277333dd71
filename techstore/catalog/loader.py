"""JSON fixture loader.

Fixtures are laid out one product per file:

    <root>/phones/iphone15pro.json
    <root>/laptops/macbookAirM3.json

The category comes from the directory name and the id defaults to the
file stem. A record that cannot be read or validated is logged and left
out; it never stops the rest of the catalog from loading.
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from techstore.catalog.models import Category, Product
from techstore.domain.exceptions import CatalogLoadError

logger = structlog.get_logger()

_CATEGORY_ORDER = [category.value for category in Category]


def _category_dirs(root: Path) -> list[Path]:
    """Category directories, known categories first in storefront order."""
    dirs = [path for path in root.iterdir() if path.is_dir()]

    def rank(path: Path) -> tuple[int, str]:
        if path.name in _CATEGORY_ORDER:
            return (_CATEGORY_ORDER.index(path.name), path.name)
        return (len(_CATEGORY_ORDER), path.name)

    return sorted(dirs, key=rank)


def load_product_file(path: Path, category: str) -> Product | None:
    """Load a single product fixture.

    Args:
        path: JSON file with one product record.
        category: Category the file is filed under.

    Returns:
        The product, or None if the record is unreadable or invalid.
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not read product fixture", path=str(path), error=str(e))
        return None

    if not isinstance(data, dict):
        logger.warning("Product fixture is not an object", path=str(path))
        return None

    data = {**data, "category": category}
    data.setdefault("id", path.stem)

    try:
        return Product.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Invalid product fixture",
            path=str(path),
            errors=e.error_count(),
            error=str(e),
        )
        return None


def load_products(root: str | Path) -> list[Product]:
    """Load every product fixture under a directory.

    Args:
        root: Directory holding one sub-directory per category.

    Returns:
        Valid products, grouped by category in storefront order, files
        in name order within a category.

    Raises:
        CatalogLoadError: If ``root`` is not a readable directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise CatalogLoadError(str(root), "not a directory")

    products: list[Product] = []
    skipped = 0

    for category_dir in _category_dirs(root):
        for path in sorted(category_dir.glob("*.json")):
            product = load_product_file(path, category_dir.name)
            if product is None:
                skipped += 1
            else:
                products.append(product)

    logger.info(
        "Product fixtures loaded",
        root=str(root),
        loaded=len(products),
        skipped=skipped,
    )
    return products
