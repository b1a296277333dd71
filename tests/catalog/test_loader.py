"""Tests for the JSON fixture loader."""

import json
from pathlib import Path
from typing import Any

import pytest

from techstore.catalog.loader import load_product_file, load_products
from techstore.catalog.models import Category
from techstore.domain.exceptions import CatalogLoadError


def write_fixture(root: Path, category: str, name: str, data: Any) -> Path:
    """Write one product fixture file."""
    directory = root / category
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def fixture_root(tmp_path: Path) -> Path:
    """Fixture directory with valid and broken product files."""
    write_fixture(
        tmp_path,
        "laptops",
        "macbookAirM3",
        {"brand": "Apple", "price": 52999, "inStock": True, "name": {"uk": "MacBook Air M3"}},
    )
    write_fixture(
        tmp_path,
        "phones",
        "iphone15pro",
        {
            "id": "iphone-15-pro",
            "brand": "Apple",
            "price": 49999,
            "oldPrice": 54999,
            "rating": 4.8,
            "name": {"uk": "iPhone 15 Pro", "en": "iPhone 15 Pro"},
        },
    )
    write_fixture(tmp_path, "phones", "galaxyS24", {"brand": "Samsung", "price": 39999})
    write_fixture(tmp_path, "phones", "broken-price", {"price": "free"})
    write_fixture(tmp_path, "phones", "not-an-object", ["price", 1])
    (tmp_path / "phones" / "truncated.json").write_text("{\"price\": ", encoding="utf-8")
    (tmp_path / "phones" / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


class TestLoadProductFile:
    """Tests for single-file loading."""

    def test_category_from_directory(self, fixture_root: Path) -> None:
        product = load_product_file(fixture_root / "laptops" / "macbookAirM3.json", "laptops")
        assert product is not None
        assert product.category == Category.LAPTOPS
        assert product.in_stock is True

    def test_id_defaults_to_file_stem(self, fixture_root: Path) -> None:
        product = load_product_file(fixture_root / "laptops" / "macbookAirM3.json", "laptops")
        assert product.id == "macbookAirM3"

    def test_explicit_id_kept(self, fixture_root: Path) -> None:
        product = load_product_file(fixture_root / "phones" / "iphone15pro.json", "phones")
        assert product.id == "iphone-15-pro"
        assert product.old_price == 54999

    def test_directory_overrides_record_category(self, tmp_path: Path) -> None:
        path = write_fixture(tmp_path, "headphones", "buds", {"category": "phones", "price": 1})
        assert load_product_file(path, "headphones").category == Category.HEADPHONES

    @pytest.mark.parametrize("name", ["broken-price", "not-an-object", "truncated"])
    def test_invalid_records_skipped(self, fixture_root: Path, name: str) -> None:
        """Unreadable or invalid records yield None instead of raising."""
        assert load_product_file(fixture_root / "phones" / f"{name}.json", "phones") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_product_file(tmp_path / "nope.json", "phones") is None

    def test_unknown_category_directory(self, tmp_path: Path) -> None:
        path = write_fixture(tmp_path, "tablets", "ipad", {"price": 1})
        assert load_product_file(path, "tablets") is None


class TestLoadProducts:
    """Tests for directory loading."""

    def test_loads_valid_products_in_storefront_order(self, fixture_root: Path) -> None:
        """Categories come in storefront order, files by name."""
        products = load_products(fixture_root)
        assert [p.id for p in products] == ["galaxyS24", "iphone-15-pro", "macbookAirM3"]

    def test_accepts_str_path(self, fixture_root: Path) -> None:
        assert len(load_products(str(fixture_root))) == 3

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert load_products(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogLoadError) as exc_info:
            load_products(tmp_path / "missing")
        assert exc_info.value.details["reason"] == "not a directory"
