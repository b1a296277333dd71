"""Tests for shared API dependencies."""

import json
from pathlib import Path

import pytest

from techstore.api.dependencies import build_catalog_store, get_catalog_store, resolve_language
from techstore.domain.exceptions import CatalogLoadError
from techstore.infrastructure.config import settings


class TestBuildCatalogStore:
    """Tests for catalog source selection."""

    def test_demo_catalog_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "products_dir", None)
        monkeypatch.setattr(settings, "demo_products_per_category", 2)

        store = build_catalog_store()

        assert len(store) == 10

    def test_fixture_directory(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        (tmp_path / "phones").mkdir()
        (tmp_path / "phones" / "pixel8.json").write_text(
            json.dumps({"brand": "Google", "price": 29999}), encoding="utf-8"
        )
        monkeypatch.setattr(settings, "products_dir", str(tmp_path))

        store = build_catalog_store()

        assert [p.id for p in store.all()] == ["pixel8"]

    def test_missing_fixture_directory(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setattr(settings, "products_dir", str(tmp_path / "missing"))
        with pytest.raises(CatalogLoadError):
            build_catalog_store()

    def test_store_is_shared(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The store is built once per process."""
        monkeypatch.setattr(settings, "products_dir", None)
        assert get_catalog_store() is get_catalog_store()


class TestResolveLanguage:
    """Tests for request language selection."""

    def test_supported(self) -> None:
        assert resolve_language("ru") == "ru"

    def test_missing_or_unsupported(self) -> None:
        assert resolve_language(None) == "uk"
        assert resolve_language("de") == "uk"
