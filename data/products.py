"""
products.py

Static Sauce Demo product catalog and random product sampling.

The catalog is read-only reference data shared by every session. Sampling draws distinct products with a
system entropy source so each run exercises a different basket; it is deliberately separate from the
seeded generator used for customer data.
"""

import random
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Optional

from utils.errors import SamplingError, UnknownProductError


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal  # listing price as rendered by the application

    @property
    def display_price(self) -> str:
        return f"${self.price:.2f}"


CATALOG: tuple[Product, ...] = (
    Product('sauce-labs-backpack', 'Sauce Labs Backpack', Decimal('29.99')),
    Product('sauce-labs-bike-light', 'Sauce Labs Bike Light', Decimal('9.99')),
    Product('sauce-labs-bolt-t-shirt', 'Sauce Labs Bolt T-Shirt', Decimal('15.99')),
    Product('sauce-labs-fleece-jacket', 'Sauce Labs Fleece Jacket', Decimal('49.99')),
    Product('sauce-labs-onesie', 'Sauce Labs Onesie', Decimal('7.99')),
    Product('test.allthethings()-t-shirt-(red)', 'Test.allTheThings() T-Shirt (Red)', Decimal('15.99')),
)

PRODUCTS_BY_ID = MappingProxyType({product.id: product for product in CATALOG})

# Uniform sampling source; randrange on SystemRandom uses rejection sampling, not modulo reduction
CATALOG_RANDOM = random.SystemRandom()


def product_by_id(product_id: str) -> Product:
    try:
        return PRODUCTS_BY_ID[product_id]
    except KeyError:
        raise UnknownProductError(product_id) from None


class SamplingPolicy(Enum):
    """
    What sample_products does when asked for more products than the catalog holds.
    """
    STRICT = 'strict'  # raise SamplingError
    TRUNCATE = 'truncate'  # return the whole catalog


@dataclass(frozen=True)
class ProductSelection:
    """
    Ordered, duplicate-free products chosen for one scenario.
    """
    products: tuple[Product, ...]

    def __post_init__(self):
        ids = [product.id for product in self.products]
        if len(set(ids)) != len(ids):
            raise SamplingError(f"Product selection contains duplicates: {ids}")
        if len(ids) > len(CATALOG):
            raise SamplingError(f"Product selection is larger than the catalog: {len(ids)} > {len(CATALOG)}")

    @classmethod
    def of(cls, *product_ids: str) -> "ProductSelection":
        return cls(tuple(product_by_id(product_id) for product_id in product_ids))

    @property
    def ids(self) -> list[str]:
        return [product.id for product in self.products]

    @property
    def names(self) -> list[str]:
        return [product.name for product in self.products]

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)


def sample_products(count: int, policy: SamplingPolicy = SamplingPolicy.STRICT,
                    rng: Optional[random.Random] = None) -> ProductSelection:
    """
    Draw ``count`` distinct products from the catalog without replacement.

    Every pick removes a uniformly chosen product from a shrinking pool, so each catalog member is
    equally likely to appear and no product repeats.

    Args:
        count (int): Number of products to draw.
        policy (SamplingPolicy): Behaviour when ``count`` exceeds the catalog size.
        rng (Optional[random.Random]): Random source, defaults to CATALOG_RANDOM.

    Returns:
        ProductSelection: min(count, catalog size) products under TRUNCATE, exactly ``count`` otherwise.

    Raises:
        SamplingError: If ``count`` is negative, or exceeds the catalog size under STRICT.
    """
    if count < 0:
        raise SamplingError(f"Cannot sample a negative number of products: {count}")
    if count > len(CATALOG):
        if policy is SamplingPolicy.STRICT:
            raise SamplingError(f"Requested {count} products but the catalog only has {len(CATALOG)}")
        count = len(CATALOG)

    rng = rng or CATALOG_RANDOM
    pool = list(CATALOG)
    selected = []
    for _ in range(count):
        selected.append(pool.pop(rng.randrange(len(pool))))
    return ProductSelection(tuple(selected))
