"""Shared fixtures for catalog tests."""

from typing import Any, Callable, Generator

import pytest

from techstore.catalog.controller import CatalogController
from techstore.catalog.generator import CatalogGenerator, GeneratorConfig
from techstore.catalog.i18n import ActiveLanguage
from techstore.catalog.models import Product
from techstore.catalog.navigation import HistoryNavigator
from techstore.catalog.store import CatalogStore


ProductFactory = Callable[..., Product]


@pytest.fixture
def make_product() -> ProductFactory:
    """Build products with sensible defaults for the fields not under test."""
    counter = {"n": 0}

    def factory(**overrides: Any) -> Product:
        counter["n"] += 1
        n = counter["n"]
        data: dict[str, Any] = {
            "id": f"p{n}",
            "category": "phones",
            "brand": "Acme",
            "price": 1000.0,
            "rating": 4.0,
            "reviews": 10,
            "in_stock": True,
            "name": {"uk": f"Товар {n}", "en": f"Product {n}"},
        }
        data.update(overrides)
        return Product(**data)

    return factory


@pytest.fixture
def sample_products(make_product: ProductFactory) -> list[Product]:
    """Small mixed catalog covering every filter criterion."""
    return [
        make_product(
            id="iphone",
            category="phones",
            brand="Apple",
            price=49999,
            rating=4.8,
            name={"uk": "Смартфон iPhone 15 Pro", "en": "iPhone 15 Pro"},
        ),
        make_product(
            id="galaxy",
            category="phones",
            brand="Samsung",
            price=39999,
            rating=4.3,
            in_stock=False,
            name={"uk": "Смартфон Galaxy S24", "en": "Galaxy S24"},
        ),
        make_product(
            id="macbook",
            category="laptops",
            brand="Apple",
            price=89999,
            rating=4.5,
            name={"uk": "Ноутбук MacBook PRO", "en": "MacBook PRO"},
        ),
        make_product(
            id="buds",
            category="headphones",
            brand="Xiaomi",
            price=1999,
            rating=3.2,
            name={"uk": "Навушники Redmi Buds pro", "en": "Redmi Buds pro"},
        ),
        make_product(
            id="cable",
            category="accessories",
            brand="Anker",
            price=499,
            rating=None,
            name={"uk": "Кабель USB-C"},
        ),
    ]


@pytest.fixture
def sample_store(sample_products: list[Product]) -> CatalogStore:
    """Store holding the sample products."""
    return CatalogStore(sample_products)


@pytest.fixture
def demo_store() -> CatalogStore:
    """Store holding the 50-product demo catalog (10 per category)."""
    return CatalogStore(CatalogGenerator(GeneratorConfig(seed=42)).generate_list())


@pytest.fixture
def language() -> ActiveLanguage:
    """Language provider starting in Ukrainian."""
    return ActiveLanguage("uk")


@pytest.fixture
def history() -> HistoryNavigator:
    """Empty in-memory history."""
    return HistoryNavigator()


@pytest.fixture
def controller(
    demo_store: CatalogStore,
    language: ActiveLanguage,
    history: HistoryNavigator,
) -> Generator[CatalogController, None, None]:
    """Controller over the demo catalog, not yet started."""
    controller = CatalogController(demo_store, language, navigator=history)
    yield controller
    controller.close()
