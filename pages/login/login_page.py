import logging
import re
from typing import Optional

from data.users import ACCOUNTS, SHARED_PASSWORD
from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    path = '/'

    def assert_on_page(self, fragment: Optional[str] = None) -> None:
        """
        Assert the browser shows the login page, or a URL containing ``fragment`` when given.

        The login route is the site root, which every URL contains, so the whole URL is matched.
        """
        if fragment:
            super().assert_on_page(fragment)
            return
        self.expect_url(re.compile(rf'^{re.escape(self.settings.base_url.rstrip("/"))}/?$'), self.url)

    @property
    def username_input(self) -> BaseElement:
        return self.find_by_test_id('username')

    @property
    def password_input(self) -> BaseElement:
        return self.find_by_test_id('password')

    @property
    def login_button(self) -> BaseElement:
        return self.find_by_test_id('login-button')

    @property
    def error_message(self) -> BaseElement:
        return self.find_by_test_id('error')

    @property
    def error_container(self) -> BaseElement:
        return self.find_element('.error-message-container')

    @property
    def login_container(self) -> BaseElement:
        return self.find_by_test_id('login-container')

    @property
    def login_logo(self) -> BaseElement:
        return self.find_element('.login_logo')

    @property
    def login_credentials(self) -> BaseElement:
        return self.find_by_test_id('login-credentials')

    @property
    def login_password(self) -> BaseElement:
        return self.find_by_test_id('login-password')

    def login(self, username: str, password: str) -> None:
        """
        Open the login page, enter the credentials and submit them as one step.

        Works for every account kind; whether the application lets the user in is asserted by the caller.
        """
        logger.info(f"Logging in as '{username}'")
        self.goto()
        self.act_after_visible(self.username_input, lambda el: el.fill(username))
        self.act_after_visible(self.password_input, lambda el: el.fill(password))
        self.act_after_visible(self.login_button)

    def assert_login_error(self, text: str) -> None:
        """
        Assert the login error reads exactly ``text``.
        """
        self.error_message.expect_text(text)

    def assert_error_visible(self) -> None:
        self.error_message.expect_visible()

    def assert_error_hidden(self) -> None:
        # The container stays in the DOM; only its message is removed
        self.error_container.expect_text('')

    def assert_empty_form(self) -> None:
        self.username_input.expect_value('')
        self.password_input.expect_value('')

    def assert_page_elements(self) -> None:
        """
        Assert the login form, branding and the published demo credentials are all rendered.
        """
        self.login_container.expect_visible()
        self.login_logo.expect_contains_text('Swag Labs')

        for field, placeholder, field_type in ((self.username_input, 'Username', 'text'),
                                               (self.password_input, 'Password', 'password')):
            field.expect_visible()
            field.expect_enabled()
            field.expect_attribute('placeholder', placeholder)
            field.expect_attribute('type', field_type)

        self.login_button.expect_enabled()
        self.login_button.expect_value('Login')

        self.login_credentials.expect_contains_text('Accepted usernames are:')
        for credentials in ACCOUNTS.values():
            self.login_credentials.expect_contains_text(credentials.username)
        self.login_password.expect_contains_text('Password for all users:')
        self.login_password.expect_contains_text(SHARED_PASSWORD)
