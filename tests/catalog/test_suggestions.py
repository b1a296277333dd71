"""Tests for typeahead suggestions."""

from techstore.catalog.models import Product
from techstore.catalog.suggestions import suggest


class TestSuggest:
    """Tests for suggest."""

    def test_matches_name_substring(self, sample_products: list[Product]) -> None:
        result = suggest(sample_products, "PRO", language="en")
        assert [p.id for p in result] == ["iphone", "macbook", "buds"]

    def test_short_query_yields_nothing(self, sample_products: list[Product]) -> None:
        """Single characters are too short to suggest for."""
        assert suggest(sample_products, "p") == []
        assert suggest(sample_products, "  p  ") == []
        assert suggest(sample_products, "") == []

    def test_limit(self, make_product) -> None:
        products = [make_product(name={"uk": f"Чохол {n}"}) for n in range(20)]
        result = suggest(products, "чохол", limit=8)
        assert len(result) == 8
        assert result == products[:8]

    def test_uses_fallback_names(self, sample_products: list[Product]) -> None:
        result = suggest(sample_products, "кабель", language="en")
        assert [p.id for p in result] == ["cable"]

    def test_no_match(self, sample_products: list[Product]) -> None:
        assert suggest(sample_products, "nokia") == []
