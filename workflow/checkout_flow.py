"""
checkout_flow.py

Drives the Sauce Demo checkout through its state machine using the page objects.

Each public method is one edge of the workflow graph. It refuses to run from the wrong state,
performs the page actions, asserts the invariants of the state it lands in and returns the page
object for that state, so scenario code reads as a walk along the graph.
"""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

import allure

from data.customers import CustomerInfo
from data.products import ProductSelection
from data.users import STANDARD_USER, Credentials
from pages import Pages
from pages.common.header import Header
from pages.login.login_page import LoginPage
from pages.shop.cart_page import CartPage
from pages.shop.checkout_complete_page import CheckoutCompletePage
from pages.shop.checkout_info_page import CheckoutInfoPage, first_missing_field
from pages.shop.checkout_overview_page import CheckoutOverviewPage
from pages.shop.inventory_page import InventoryPage
from utils.errors import WorkflowError
from utils.track_time import track_execution_time
from workflow.states import WorkflowAction, WorkflowState, next_state

logger = logging.getLogger(__name__)


class CheckoutFlow:
    """
    State-tracking driver for one scenario in one browser session.
    """

    def __init__(self, pages: Pages, state: WorkflowState = WorkflowState.LOGGED_OUT):
        self.pages = pages
        self.state = state

    def __repr__(self) -> str:
        return f"CheckoutFlow(state={self.state.value})"

    @contextmanager
    def _edge(self, action: WorkflowAction) -> Iterator[WorkflowState]:
        """
        Run one transition: validate it, report it as an allure step and commit the new state only
        if every action and assertion inside succeeded.
        """
        target = next_state(self.state, action)
        label = f"{self.state.value} --{action.value}--> {target.value}"
        logger.info(label)
        with allure.step(label):
            try:
                yield target
            except Exception:
                logger.error(f"Checkout failed in state '{self.state.value}' on edge '{action.value}'")
                raise
        self.state = target

    def _require(self, state: WorkflowState, action: str) -> None:
        if self.state is not state:
            raise WorkflowError(self.state, action)

    @property
    def header(self) -> Header:
        """
        The header of the current page; every authenticated page renders the same one.
        """
        if self.state is WorkflowState.LOGGED_OUT:
            raise WorkflowError(self.state, 'use the header')
        return self.pages.inventory_page.header

    # Edges

    @track_execution_time
    def login(self, credentials: Credentials = STANDARD_USER) -> InventoryPage:
        with self._edge(WorkflowAction.LOGIN):
            self.pages.login_page.login(credentials.username, credentials.password)
            inventory = self.pages.inventory_page
            # Slow accounts can outlast the expect timeout
            inventory.sort_dropdown.wait_until_visible()
            inventory.assert_on_page()
        return inventory

    @track_execution_time
    def add_products(self, selection: ProductSelection) -> InventoryPage:
        inventory = self.pages.inventory_page
        with self._edge(WorkflowAction.ADD_PRODUCTS):
            in_cart = inventory.header.cart_badge_count()
            inventory.add_products(selection)
            for product in selection:
                inventory.assert_product_added(product.id)
            inventory.header.assert_cart_badge(in_cart + len(selection))
        return inventory

    @track_execution_time
    def remove_products(self, product_ids: Iterable[str]) -> InventoryPage:
        inventory = self.pages.inventory_page
        product_ids = list(product_ids)
        with self._edge(WorkflowAction.REMOVE_PRODUCTS):
            in_cart = inventory.header.cart_badge_count()
            for product_id in product_ids:
                inventory.remove_product(product_id)
                inventory.assert_product_removed(product_id)
            inventory.header.assert_cart_badge(in_cart - len(product_ids))
        return inventory

    @track_execution_time
    def open_cart(self) -> CartPage:
        cart = self.pages.cart_page
        with self._edge(WorkflowAction.OPEN_CART):
            self.pages.inventory_page.header.click_cart()
            cart.assert_on_page()
            cart.continue_shopping_button.wait_until_visible()
            # Badge and cart lines must agree
            cart.assert_cart_item_count(cart.header.cart_badge_count())
        return cart

    @track_execution_time
    def continue_shopping(self) -> InventoryPage:
        inventory = self.pages.inventory_page
        with self._edge(WorkflowAction.CONTINUE_SHOPPING):
            self.pages.cart_page.continue_shopping()
            inventory.assert_on_page()
        return inventory

    @track_execution_time
    def remove_cart_item(self, product_id: str) -> CartPage:
        cart = self.pages.cart_page
        with self._edge(WorkflowAction.REMOVE_CART_ITEM):
            in_cart = cart.header.cart_badge_count()
            cart.remove_item(product_id)
            cart.assert_cart_item_count(in_cart - 1)
            cart.header.assert_cart_badge(in_cart - 1)
        return cart

    @track_execution_time
    def checkout(self) -> CheckoutInfoPage:
        info = self.pages.checkout_info_page
        with self._edge(WorkflowAction.CHECKOUT):
            self.pages.cart_page.proceed_to_checkout()
            info.assert_on_page()
        return info

    @track_execution_time
    def submit_info(self, customer: CustomerInfo, expected_products: Optional[Iterable[str]] = None
                    ) -> CheckoutOverviewPage:
        overview = self.pages.checkout_overview_page
        with self._edge(WorkflowAction.SUBMIT_INFO):
            self.pages.checkout_info_page.submit_customer(customer)
            overview.assert_on_page()
            if expected_products is not None:
                overview.assert_order_summary(expected_products)
            overview.assert_pricing_calculation()
        return overview

    @track_execution_time
    def submit_invalid_info(self, first_name: str, last_name: str, postal_code: str) -> CheckoutInfoPage:
        """
        Submit a form with at least one blank field and assert the application keeps the user on step one.
        """
        self._require(WorkflowState.SHIPPING_INFO, 'submit_invalid_info')
        missing = first_missing_field(first_name, last_name, postal_code)
        if missing is None:
            raise ValueError('submit_invalid_info needs at least one blank field')
        info = self.pages.checkout_info_page
        with allure.step(f"{self.state.value} --submit_invalid_info({missing.label})--> {self.state.value}"):
            info.submit_info(first_name, last_name, postal_code)
            info.assert_required_field_validation(missing)
        return info

    @track_execution_time
    def cancel_info(self) -> CartPage:
        cart = self.pages.cart_page
        with self._edge(WorkflowAction.CANCEL_INFO):
            self.pages.checkout_info_page.cancel()
            cart.assert_on_page()
        return cart

    @track_execution_time
    def finish(self) -> CheckoutCompletePage:
        complete = self.pages.checkout_complete_page
        with self._edge(WorkflowAction.FINISH):
            self.pages.checkout_overview_page.finish()
            complete.assert_on_page()
            complete.assert_order_completion()
        return complete

    @track_execution_time
    def cancel_order(self) -> InventoryPage:
        inventory = self.pages.inventory_page
        with self._edge(WorkflowAction.CANCEL_ORDER):
            self.pages.checkout_overview_page.cancel()
            inventory.assert_on_page()
        return inventory

    @track_execution_time
    def back_home(self) -> InventoryPage:
        inventory = self.pages.inventory_page
        with self._edge(WorkflowAction.BACK_HOME):
            self.pages.checkout_complete_page.back_home()
            inventory.assert_on_page()
            inventory.header.assert_cart_badge(0)
        return inventory

    @track_execution_time
    def logout(self) -> LoginPage:
        login_page = self.pages.login_page
        header = self.header
        with self._edge(WorkflowAction.LOGOUT):
            header.click_logout()
            login_page.login_button.expect_visible()
        return login_page

    # Scenarios

    def complete_purchase(self, credentials: Credentials, selection: ProductSelection,
                          customer: CustomerInfo) -> CheckoutCompletePage:
        """
        Walk the happy path from login to the confirmation screen.
        """
        logger.info(f"Purchasing {selection.names} for {customer.full_name}")
        self.login(credentials)
        self.add_products(selection)
        self.open_cart().assert_cart_contains(selection)
        self.checkout()
        self.submit_info(customer, expected_products=selection.ids)
        return self.finish()
