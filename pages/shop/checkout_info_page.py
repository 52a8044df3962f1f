import logging
from enum import Enum
from typing import Optional

from playwright.sync_api import Page

from data.customers import CustomerInfo
from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header import Header
from utils.settings import Settings

logger = logging.getLogger(__name__)


class CheckoutField(Enum):
    FIRST_NAME = ('firstName', 'First Name')
    LAST_NAME = ('lastName', 'Last Name')
    POSTAL_CODE = ('postalCode', 'Postal Code')

    def __init__(self, test_id: str, label: str):
        self.test_id = test_id
        self.label = label

    @property
    def required_message(self) -> str:
        return f"Error: {self.label} is required"


def first_missing_field(first_name: str, last_name: str, postal_code: str) -> Optional[CheckoutField]:
    """
    The field the application complains about: it validates first name, last name, then postal code,
    and reports only the first empty one.
    """
    for field, value in zip(CheckoutField, (first_name, last_name, postal_code)):
        if not value:
            return field
    return None


class CheckoutInfoPage(BasePage):
    """
    Checkout step one: shipping information form.
    """
    path = '/checkout-step-one.html'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.header = Header(page, self.settings)

    def field_input(self, field: CheckoutField) -> BaseElement:
        return self.find_by_test_id(field.test_id)

    @property
    def first_name_input(self) -> BaseElement:
        return self.field_input(CheckoutField.FIRST_NAME)

    @property
    def last_name_input(self) -> BaseElement:
        return self.field_input(CheckoutField.LAST_NAME)

    @property
    def postal_code_input(self) -> BaseElement:
        return self.field_input(CheckoutField.POSTAL_CODE)

    @property
    def continue_button(self) -> BaseElement:
        return self.find_by_test_id('continue')

    @property
    def cancel_button(self) -> BaseElement:
        return self.find_by_test_id('cancel')

    @property
    def error_message(self) -> BaseElement:
        return self.find_by_test_id('error')

    # Actions

    def fill_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        """
        Fill the shipping form without submitting it.
        """
        for field_input, value in ((self.first_name_input, first_name),
                                   (self.last_name_input, last_name),
                                   (self.postal_code_input, postal_code)):
            self.act_after_visible(field_input, lambda el, text=value: el.fill(text))

    def continue_checkout(self) -> None:
        self.act_after_visible(self.continue_button)

    def submit_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        """
        Fill the shipping form and continue to the order overview.
        """
        self.fill_info(first_name, last_name, postal_code)
        self.continue_checkout()

    def submit_customer(self, customer: CustomerInfo) -> None:
        logger.info(f"Submitting shipping info for {customer.full_name} ({customer.address})")
        self.submit_info(customer.first_name, customer.last_name, customer.postal_code)

    def cancel(self) -> None:
        self.act_after_visible(self.cancel_button)

    # Assertions

    def assert_required_field_validation(self, missing_field: Optional[CheckoutField] = None) -> None:
        """
        Assert submission was blocked by validation.

        The exact message is only checked when the caller knows which field is missing; otherwise the
        presence of the error is enough.
        """
        self.error_message.expect_visible()
        if missing_field is not None:
            self.error_message.expect_text(missing_field.required_message)
        self.assert_on_page()
