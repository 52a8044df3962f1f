from typing import Optional

from playwright.sync_api import Page

from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header import Header
from utils.settings import Settings

THANK_YOU_TEXT = 'Thank you for your order'
DISPATCH_TEXT = 'Your order has been dispatched, and will arrive just as fast as the pony can get there!'


class CheckoutCompletePage(BasePage):
    path = '/checkout-complete.html'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.header = Header(page, self.settings)

    @property
    def complete_header(self) -> BaseElement:
        return self.find_by_test_id('complete-header')

    @property
    def complete_text(self) -> BaseElement:
        return self.find_by_test_id('complete-text')

    @property
    def pony_express_image(self) -> BaseElement:
        return self.find_by_test_id('pony-express')

    @property
    def back_home_button(self) -> BaseElement:
        return self.find_by_test_id('back-to-products')

    def back_home(self) -> None:
        self.act_after_visible(self.back_home_button)

    def assert_thank_you(self) -> None:
        self.complete_header.expect_contains_text(THANK_YOU_TEXT)

    def assert_order_completion(self) -> None:
        """
        Assert the confirmation screen and that the finished order left the cart empty.
        """
        self.assert_thank_you()
        self.complete_text.expect_text(DISPATCH_TEXT)
        self.pony_express_image.expect_visible()
        self.back_home_button.expect_visible()
        self.header.assert_cart_badge(0)
