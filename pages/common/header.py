import logging
from typing import Optional

from playwright.sync_api import Page

from pages.common.base_component import BaseComponent
from pages.common.base_element import BaseElement
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Header(BaseComponent):
    """
    Chrome shown on every authenticated page: the cart link with its item badge and the
    slide-out navigation drawer.

    The application removes the badge when the cart is empty instead of showing "0", so an empty
    cart is asserted as badge absence.
    """

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.selector = f'[{settings.test_id_attribute}="primary-header"]'
        super().__init__(page.locator(self.selector), page, settings)

    @property
    def cart_link(self) -> BaseElement:
        return self.child_by_test_id('shopping-cart-link')

    @property
    def cart_badge(self) -> BaseElement:
        return self.child_by_test_id('shopping-cart-badge')

    @property
    def menu_button(self) -> BaseElement:
        return self.child_el('#react-burger-menu-btn')

    @property
    def close_menu_button(self) -> BaseElement:
        return self.child_el('#react-burger-cross-btn')

    @property
    def menu(self) -> BaseElement:
        return self.child_el('.bm-menu-wrap')

    @property
    def all_items_link(self) -> BaseElement:
        return self.child_by_test_id('inventory-sidebar-link')

    @property
    def about_link(self) -> BaseElement:
        return self.child_by_test_id('about-sidebar-link')

    @property
    def logout_link(self) -> BaseElement:
        return self.child_by_test_id('logout-sidebar-link')

    @property
    def reset_link(self) -> BaseElement:
        return self.child_by_test_id('reset-sidebar-link')

    @property
    def is_menu_open(self) -> bool:
        return self.menu.get_attribute('aria-hidden') == 'false'

    def cart_badge_count(self) -> int:
        """
        Number shown on the cart badge, 0 when the badge is absent.
        """
        if self.cart_badge.count == 0:
            return 0
        return int(self.cart_badge.text)

    # Actions

    def click_cart(self) -> None:
        self.act_after_visible(self.cart_link)

    def open_menu(self) -> None:
        self.act_after_visible(self.menu_button)
        self.assert_menu_open()

    def close_menu(self) -> None:
        self.act_after_visible(self.close_menu_button)
        self.assert_menu_closed()

    def _click_menu_link(self, link: BaseElement) -> None:
        if not self.is_menu_open:
            self.open_menu()
        self.act_after_visible(link)

    def click_all_items(self) -> None:
        self._click_menu_link(self.all_items_link)

    def click_about(self) -> None:
        self._click_menu_link(self.about_link)

    def click_logout(self) -> None:
        self._click_menu_link(self.logout_link)

    def click_reset(self) -> None:
        """
        Reset the application state, which empties the cart.
        """
        self._click_menu_link(self.reset_link)
        logger.info("Application state reset from the navigation menu")

    # Assertions

    def assert_cart_badge(self, expected_count: int) -> None:
        """
        Assert the badge shows ``expected_count``; for 0 assert the badge is not rendered at all.
        """
        if expected_count == 0:
            self.cart_badge.expect_absent()
        else:
            self.cart_badge.expect_text(str(expected_count))

    def assert_menu_open(self) -> None:
        self.menu.expect_attribute('aria-hidden', 'false')

    def assert_menu_closed(self) -> None:
        self.menu.expect_attribute('aria-hidden', 'true')
