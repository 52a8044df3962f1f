import logging
from enum import Enum
from typing import Optional

from playwright.sync_api import Locator, Page

from data.products import CATALOG, ProductSelection, product_by_id
from pages.common.base_component import BaseComponent
from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header import Header
from utils.errors import PageAssertionError
from utils.money import parse_money
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SortOption(Enum):
    NAME_ASC = ('az', 'Name (A to Z)')
    NAME_DESC = ('za', 'Name (Z to A)')
    PRICE_ASC = ('lohi', 'Price (low to high)')
    PRICE_DESC = ('hilo', 'Price (high to low)')

    def __init__(self, option_value: str, label: str):
        self.option_value = option_value
        self.label = label


class ProductCard(BaseComponent):
    """
    One product tile on the inventory page, found by the product id its cart control references.

    A card shows exactly one of its two cart controls: "Add to cart" while the product is not in the
    cart, "Remove" once it is.
    """

    def __init__(self, page: Page, product_id: str, locator: Optional[Locator] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize a ProductCard component.

        Args:
            page (Page): The Playwright page object.
            product_id (str): Catalog id of the product shown on the card.
            locator (Optional[Locator]): An existing locator for this card. If omitted the card is located
                                         by the product id.
            settings (Optional[Settings]): Suite settings.
        """
        settings = settings or get_settings()
        attr = settings.test_id_attribute
        self.product_id = product_id
        if not locator:
            cart_controls = page.locator(f'[{attr}="add-to-cart-{product_id}"], [{attr}="remove-{product_id}"]')
            locator = page.locator(f'[{attr}="inventory-item"]').filter(has=cart_controls)
        super().__init__(locator, page, settings)
        self.selector = f'[{attr}="inventory-item"]({product_id})'

    @property
    def title(self) -> BaseElement:
        return self.child_by_test_id('inventory-item-name')

    @property
    def description(self) -> BaseElement:
        return self.child_by_test_id('inventory-item-desc')

    @property
    def price(self) -> BaseElement:
        return self.child_by_test_id('inventory-item-price')

    @property
    def add_to_cart_button(self) -> BaseElement:
        return self.child_by_test_id(f'add-to-cart-{self.product_id}')

    @property
    def remove_from_cart_button(self) -> BaseElement:
        return self.child_by_test_id(f'remove-{self.product_id}')

    @property
    def is_added_to_cart(self) -> bool:
        return self.remove_from_cart_button.is_visible and not self.add_to_cart_button.is_visible


class InventoryPage(BasePage):
    path = '/inventory.html'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.header = Header(page, self.settings)

    @property
    def sort_dropdown(self) -> BaseElement:
        return self.find_by_test_id('product-sort-container')

    @property
    def sort_options(self) -> BaseElement:
        return self.find_element(f"{self.selector_for_test_id('product-sort-container')} option")

    @property
    def product_items(self) -> BaseElement:
        return self.find_by_test_id('inventory-item')

    @property
    def product_names(self) -> BaseElement:
        return self.find_by_test_id('inventory-item-name')

    @property
    def product_prices(self) -> BaseElement:
        return self.find_by_test_id('inventory-item-price')

    def product_card(self, product_id: str) -> ProductCard:
        return ProductCard(self.page, product_id, settings=self.settings)

    # Actions

    def add_product(self, product_id: str) -> None:
        logger.info(f"Adding '{product_by_id(product_id).name}' to the cart")
        self.act_after_visible(self.product_card(product_id).add_to_cart_button)

    def remove_product(self, product_id: str) -> None:
        logger.info(f"Removing '{product_by_id(product_id).name}' from the cart")
        self.act_after_visible(self.product_card(product_id).remove_from_cart_button)

    def add_products(self, selection: ProductSelection) -> None:
        for index, product in enumerate(selection, start=1):
            logger.info(f"  {index}. {product.name}")
            self.add_product(product.id)

    def select_sort(self, option: SortOption) -> None:
        self.act_after_visible(self.sort_dropdown, lambda el: el.select_option(option.option_value))

    # Assertions

    def assert_product_added(self, product_id: str) -> None:
        card = self.product_card(product_id)
        card.remove_from_cart_button.expect_visible()
        card.add_to_cart_button.expect_absent()

    def assert_product_removed(self, product_id: str) -> None:
        card = self.product_card(product_id)
        card.add_to_cart_button.expect_visible()
        card.remove_from_cart_button.expect_absent()

    def assert_all_products_visible(self) -> None:
        """
        Assert the page lists exactly the catalog, each product with its name and listing price.
        """
        self.product_items.expect_count(len(CATALOG))
        for product in CATALOG:
            card = self.product_card(product.id)
            card.element.expect_visible()
            card.title.expect_text(product.name)
            card.price.expect_text(product.display_price)

    def assert_sorting_options(self) -> None:
        self.sort_dropdown.expect_visible()
        self.sort_options.expect_text([option.label for option in SortOption])

    def assert_sorted_by(self, option: SortOption) -> None:
        """
        Assert the product list is ordered as ``option`` requires.
        """
        by_name = option in (SortOption.NAME_ASC, SortOption.NAME_DESC)
        descending = option in (SortOption.NAME_DESC, SortOption.PRICE_DESC)
        self.product_items.expect_count(len(CATALOG))

        # The list re-renders after selection; wait until the expected product leads it
        first = (max if descending else min)(CATALOG, key=lambda p: p.name if by_name else p.price)
        self.find_element(self.product_names.raw.nth(0)).expect_text(first.name)

        if by_name:
            values = self.product_names.all_texts()
        else:
            values = [parse_money(text) for text in self.product_prices.all_texts()]
        expected = sorted(values, reverse=descending)
        if values != expected:
            raise PageAssertionError(f"product order for '{option.label}'", expected, values)
