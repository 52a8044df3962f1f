import logging
from typing import Optional

from playwright.sync_api import Locator, Page

from data.products import ProductSelection, product_by_id
from pages.common.base_component import BaseComponent
from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header import Header
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class CartItem(BaseComponent):
    """
    One line of the cart, located by structure: the item container whose remove control references
    the product id. Line order is not assumed.
    """

    def __init__(self, page: Page, product_id: str, locator: Optional[Locator] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize a CartItem component.

        Args:
            page (Page): The Playwright page object.
            product_id (str): Catalog id of the product on this line.
            locator (Optional[Locator]): An existing locator for this line. If omitted the line is located
                                         by the product id.
            settings (Optional[Settings]): Suite settings.
        """
        settings = settings or get_settings()
        attr = settings.test_id_attribute
        self.product_id = product_id
        if not locator:
            remove_control = page.locator(f'[{attr}="remove-{product_id}"]')
            locator = page.locator(f'[{attr}="inventory-item"]').filter(has=remove_control)
        super().__init__(locator, page, settings)
        self.selector = f'[{attr}="inventory-item"]({product_id})'

    @property
    def title(self) -> BaseElement:
        return self.child_by_test_id('inventory-item-name')

    @property
    def price(self) -> BaseElement:
        return self.child_by_test_id('inventory-item-price')

    @property
    def quantity(self) -> BaseElement:
        return self.child_by_test_id('item-quantity')

    @property
    def remove_button(self) -> BaseElement:
        return self.child_by_test_id(f'remove-{self.product_id}')


class CartPage(BasePage):
    path = '/cart.html'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.header = Header(page, self.settings)

    @property
    def continue_shopping_button(self) -> BaseElement:
        return self.find_by_test_id('continue-shopping')

    @property
    def checkout_button(self) -> BaseElement:
        return self.find_by_test_id('checkout')

    @property
    def cart_items(self) -> BaseElement:
        return self.find_by_test_id('inventory-item')

    def cart_item(self, product_id: str) -> CartItem:
        return CartItem(self.page, product_id, settings=self.settings)

    # Actions

    def proceed_to_checkout(self) -> None:
        self.act_after_visible(self.checkout_button)

    def continue_shopping(self) -> None:
        self.act_after_visible(self.continue_shopping_button)

    def remove_item(self, product_id: str) -> None:
        logger.info(f"Removing '{product_by_id(product_id).name}' from the cart page")
        self.act_after_visible(self.cart_item(product_id).remove_button)

    # Assertions

    def assert_cart_item_count(self, count: int) -> None:
        self.cart_items.expect_count(count)

    def assert_cart_item(self, product_id: str, quantity: int = 1) -> None:
        """
        Assert the product is in the cart with its catalog name and the given quantity.
        """
        item = self.cart_item(product_id)
        item.element.expect_visible()
        item.title.expect_text(product_by_id(product_id).name)
        item.quantity.expect_text(str(quantity))

    def assert_cart_contains(self, selection: ProductSelection) -> None:
        """
        Assert the cart holds exactly the selected products, in any order.
        """
        self.assert_cart_item_count(len(selection))
        for product in selection:
            self.assert_cart_item(product.id)
