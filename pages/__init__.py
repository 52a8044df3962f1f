from functools import cached_property
from typing import Optional

from playwright.sync_api import Page

from pages.login.login_page import LoginPage
from pages.shop.cart_page import CartPage
from pages.shop.checkout_complete_page import CheckoutCompletePage
from pages.shop.checkout_info_page import CheckoutInfoPage
from pages.shop.checkout_overview_page import CheckoutOverviewPage
from pages.shop.inventory_page import InventoryPage
from utils.settings import Settings, get_settings


class Pages:
    """
    Provides access to all page objects of one browser page, created on first use.
    """

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        self.page = page
        self.settings = settings or get_settings()

    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.page, self.settings)

    @cached_property
    def inventory_page(self) -> InventoryPage:
        return InventoryPage(self.page, self.settings)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.page, self.settings)

    @cached_property
    def checkout_info_page(self) -> CheckoutInfoPage:
        return CheckoutInfoPage(self.page, self.settings)

    @cached_property
    def checkout_overview_page(self) -> CheckoutOverviewPage:
        return CheckoutOverviewPage(self.page, self.settings)

    @cached_property
    def checkout_complete_page(self) -> CheckoutCompletePage:
        return CheckoutCompletePage(self.page, self.settings)
