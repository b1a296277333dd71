"""Demo catalog generator with deterministic seeding.

Generates a multilingual electronics catalog (uk/en/ru names) for demos
and tests when no fixture directory is configured. Uses seeded random
for reproducibility: the same config always yields the same catalog.
"""

import hashlib
import random
from dataclasses import dataclass
from typing import Iterator

from techstore.catalog.models import Category, Product


# ============================================================================
# Constants
# ============================================================================

# Model series appended to names
SERIES = [
    "Pro",
    "Max",
    "Ultra",
    "Lite",
    "Air",
    "Plus",
    "Neo",
    "Prime",
    "Edge",
    "Nova",
]

# Brands, price range (UAH) and localized name templates per category
CATEGORY_TEMPLATES: dict[Category, dict] = {
    Category.PHONES: {
        "brands": ["Apple", "Samsung", "Xiaomi", "Huawei", "Sony"],
        "price_range": (8999, 59999),
        "names": {
            "uk": "Смартфон {brand} {model}",
            "en": "{brand} {model} Smartphone",
            "ru": "Смартфон {brand} {model}",
        },
    },
    Category.LAPTOPS: {
        "brands": ["Apple", "Lenovo", "HP", "Asus", "Acer"],
        "price_range": (24999, 149999),
        "names": {
            "uk": "Ноутбук {brand} {model}",
            "en": "{brand} {model} Laptop",
            "ru": "Ноутбук {brand} {model}",
        },
    },
    Category.HEADPHONES: {
        "brands": ["Sony", "Bose", "JBL", "Sennheiser", "Anker"],
        "price_range": (999, 17999),
        "names": {
            "uk": "Навушники {brand} {model}",
            "en": "{brand} {model} Headphones",
            "ru": "Наушники {brand} {model}",
        },
    },
    Category.SMARTWATCHES: {
        "brands": ["Apple", "Samsung", "Garmin", "Amazfit", "Huawei"],
        "price_range": (3999, 34999),
        "names": {
            "uk": "Годинник {brand} {model}",
            "en": "{brand} {model} Watch",
            "ru": "Часы {brand} {model}",
        },
    },
    Category.ACCESSORIES: {
        "brands": ["Anker", "Logitech", "Belkin", "Baseus", "Ugreen"],
        "price_range": (299, 4999),
        "names": {
            "uk": "Аксесуар {brand} {model}",
            "en": "{brand} {model} Accessory",
            "ru": "Аксессуар {brand} {model}",
        },
    },
}


@dataclass
class GeneratorConfig:
    """Configuration for demo catalog generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Products generated per category.
        in_stock_ratio: Share of products marked in stock.
        discount_ratio: Share of products with an old price.
    """

    seed: int = 42
    products_per_category: int = 10
    in_stock_ratio: float = 0.85
    discount_ratio: float = 0.3

    @classmethod
    def small(cls, seed: int = 42) -> "GeneratorConfig":
        """Create config for a small catalog (3 products per category)."""
        return cls(seed=seed, products_per_category=3)


class CatalogGenerator:
    """Deterministic demo catalog generator.

    Example usage:
        generator = CatalogGenerator(GeneratorConfig(seed=7))
        store = CatalogStore(generator.generate_list())
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize generator.

        Args:
            config: Generation config; defaults to 10 products per category.
        """
        self.config = config or GeneratorConfig()

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments."""
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_product_id(self, category: Category, index: int) -> str:
        """Generate deterministic product ID."""
        data = f"{category.value}:{index}:{self.config.seed}"
        return f"{category.value}-{hashlib.md5(data.encode()).hexdigest()[:8]}"

    def generate(self) -> Iterator[Product]:
        """Generate products category by category.

        Yields:
            Products in storefront order.
        """
        for category, template in CATEGORY_TEMPLATES.items():
            for i in range(self.config.products_per_category):
                rng = random.Random(
                    self._deterministic_seed(self.config.seed, category.value, i)
                )
                yield self._generate_product(category, template, i, rng)

    def generate_list(self) -> list[Product]:
        """Generate the whole catalog as a list."""
        return list(self.generate())

    def _generate_product(
        self,
        category: Category,
        template: dict,
        index: int,
        rng: random.Random,
    ) -> Product:
        brand = rng.choice(template["brands"])
        model = f"{rng.choice(SERIES)} {rng.randint(2, 15)}"

        min_price, max_price = template["price_range"]
        price = rng.randint(min_price, max_price)
        price = (price // 100) * 100 + 99  # Round to .99

        old_price = None
        discount = None
        if rng.random() < self.config.discount_ratio:
            discount = rng.randint(5, 25)
            old_price = float(round(price * 100 / (100 - discount)))

        return Product(
            id=self._generate_product_id(category, index),
            category=category,
            brand=brand,
            price=float(price),
            old_price=old_price,
            rating=round(rng.uniform(3.0, 5.0), 1),
            reviews=rng.randint(0, 500),
            in_stock=rng.random() < self.config.in_stock_ratio,
            name={
                lang: name.format(brand=brand, model=model)
                for lang, name in template["names"].items()
            },
            images=[f"assets/images/products/{category.value}/{index + 1}.jpg"],
            discount=discount,
            is_new=rng.random() < 0.15,
            is_hot=rng.random() < 0.1,
        )
