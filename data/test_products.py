import random
from collections import Counter
from decimal import Decimal

import pytest

from data.products import (CATALOG, PRODUCTS_BY_ID, ProductSelection, SamplingPolicy, product_by_id,
                           sample_products)
from utils.errors import SamplingError, UnknownProductError


@pytest.mark.unit
class TestCatalog:

    def test_catalog_has_six_unique_products(self):
        assert len(CATALOG) == 6
        assert len(PRODUCTS_BY_ID) == 6

    def test_product_lookup(self):
        backpack = product_by_id('sauce-labs-backpack')

        assert backpack.name == 'Sauce Labs Backpack'
        assert backpack.price == Decimal('29.99')
        assert backpack.display_price == '$29.99'

    def test_unknown_product(self):
        with pytest.raises(UnknownProductError) as exc_info:
            product_by_id('sauce-labs-hoodie')

        assert exc_info.value.product_id == 'sauce-labs-hoodie'

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            PRODUCTS_BY_ID['new-product'] = CATALOG[0]


@pytest.mark.unit
class TestProductSelection:

    def test_of_keeps_order(self):
        selection = ProductSelection.of('sauce-labs-onesie', 'sauce-labs-backpack')

        assert selection.ids == ['sauce-labs-onesie', 'sauce-labs-backpack']
        assert selection.names == ['Sauce Labs Onesie', 'Sauce Labs Backpack']
        assert len(selection) == 2

    def test_duplicates_are_rejected(self):
        with pytest.raises(SamplingError):
            ProductSelection.of('sauce-labs-onesie', 'sauce-labs-onesie')


@pytest.mark.unit
class TestSampleProducts:

    def test_three_distinct_products(self):
        selection = sample_products(3)

        assert len(selection) == 3
        assert len(set(selection.ids)) == 3
        assert all(product in CATALOG for product in selection)

    def test_zero_products(self):
        assert len(sample_products(0)) == 0

    def test_whole_catalog(self):
        assert sorted(sample_products(6).ids) == sorted(product.id for product in CATALOG)

    def test_negative_count(self):
        with pytest.raises(SamplingError):
            sample_products(-1)

    def test_overflow_is_rejected_by_default(self):
        with pytest.raises(SamplingError):
            sample_products(7)

    def test_overflow_is_truncated_on_request(self):
        selection = sample_products(10, policy=SamplingPolicy.TRUNCATE)

        assert len(selection) == len(CATALOG)

    def test_injected_random_source_is_used(self):
        first = sample_products(3, rng=random.Random(7))
        second = sample_products(3, rng=random.Random(7))

        assert first.ids == second.ids

    def test_every_product_can_be_drawn(self):
        rng = random.Random(2024)
        drawn = Counter(product_id for _ in range(600) for product_id in sample_products(3, rng=rng).ids)

        assert set(drawn) == set(PRODUCTS_BY_ID)
        # Each product is expected 300 times
        assert all(200 < count < 400 for count in drawn.values())
