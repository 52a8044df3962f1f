import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from playwright.sync_api import Page

from data.products import product_by_id
from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header import Header
from utils.errors import PageAssertionError
from utils.money import parse_money
from utils.settings import Settings

logger = logging.getLogger(__name__)

PRICE_TOLERANCE = Decimal('0.01')


@dataclass(frozen=True)
class PriceSummary:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


class CheckoutOverviewPage(BasePage):
    """
    Checkout step two: order summary with line items and price breakdown.
    """
    path = '/checkout-step-two.html'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.header = Header(page, self.settings)

    @property
    def finish_button(self) -> BaseElement:
        return self.find_by_test_id('finish')

    @property
    def cancel_button(self) -> BaseElement:
        return self.find_by_test_id('cancel')

    @property
    def line_items(self) -> BaseElement:
        return self.find_by_test_id('inventory-item')

    @property
    def line_item_names(self) -> BaseElement:
        return self.find_by_test_id('inventory-item-name')

    @property
    def subtotal_label(self) -> BaseElement:
        return self.find_by_test_id('subtotal-label')

    @property
    def tax_label(self) -> BaseElement:
        return self.find_by_test_id('tax-label')

    @property
    def total_label(self) -> BaseElement:
        return self.find_by_test_id('total-label')

    def price_summary(self) -> PriceSummary:
        return PriceSummary(
            subtotal=parse_money(self.subtotal_label.wait_until_visible().text),
            tax=parse_money(self.tax_label.wait_until_visible().text),
            total=parse_money(self.total_label.wait_until_visible().text),
        )

    # Actions

    def finish(self) -> None:
        self.act_after_visible(self.finish_button)

    def cancel(self) -> None:
        self.act_after_visible(self.cancel_button)

    # Assertions

    def assert_pricing_calculation(self) -> PriceSummary:
        """
        Assert total == subtotal + tax within one cent.

        Returns:
            PriceSummary: The parsed amounts, for logging by the caller.
        """
        summary = self.price_summary()
        expected_total = summary.subtotal + summary.tax
        logger.info(f"Order pricing: subtotal ${summary.subtotal} + tax ${summary.tax} = total ${summary.total}")
        if abs(summary.total - expected_total) >= PRICE_TOLERANCE:
            raise PageAssertionError('order total (subtotal + tax)', expected_total, summary.total)
        return summary

    def assert_order_summary(self, product_ids: Iterable[str]) -> None:
        """
        Assert the order lists exactly the given products, in any order.
        """
        expected_names = sorted(product_by_id(product_id).name for product_id in product_ids)
        self.line_items.expect_count(len(expected_names))
        actual_names = sorted(self.line_item_names.all_texts())
        if actual_names != expected_names:
            raise PageAssertionError('order line items', expected_names, actual_names)

    def assert_total_contains(self, text: str) -> None:
        self.total_label.expect_contains_text(text)
