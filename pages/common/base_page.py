import re
from typing import Callable, Optional, Pattern, Protocol, TypeVar, Union, runtime_checkable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from pages.common.base_element import BaseElement, act_after_visible
from utils.errors import NavigationError, PageAssertionError
from utils.settings import Settings, get_settings
from utils.track_time import track_execution_time

T = TypeVar('T')


@runtime_checkable
class PageContract(Protocol):
    """
    The capability set every page object offers to the workflow: a canonical route, navigation to it,
    a URL assertion and the wait-then-act helper.
    """
    path: str

    def goto(self, suffix: str = '') -> None: ...

    def assert_on_page(self, fragment: Optional[str] = None) -> None: ...

    def act_after_visible(self, element: BaseElement, action: Optional[Callable[[BaseElement], T]] = None) -> T: ...


class BasePage:
    """
    Shared implementation of PageContract for Playwright pages.
    Provides navigation, URL assertions and element lookup by selector or test id.

    Concrete pages set ``path`` and build their own element map on top of it.
    """
    path: str = '/'

    def __init__(self, page: Page, settings: Optional[Settings] = None):
        """
        Initialize the BasePage with a given Playwright page object.

        Args:
            page (Page): The Playwright page object.
            settings (Optional[Settings]): Suite settings, defaults to the environment-derived ones.
        """
        self.page = page
        self.settings = settings or get_settings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path})"

    @property
    def url(self) -> str:
        return f"{self.settings.base_url}{self.path}"

    @track_execution_time
    def goto(self, suffix: str = '') -> None:
        """
        Navigate to the page route plus an optional suffix (query string, anchor).

        Args:
            suffix (str): Appended to the page URL as-is.

        Raises:
            NavigationError: If the route does not load within the navigation timeout.
        """
        url = f"{self.url}{suffix}"
        try:
            self.page.goto(url, timeout=self.settings.navigation_timeout)
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e

    def assert_on_page(self, fragment: Optional[str] = None) -> None:
        """
        Assert the current URL contains the page route, or ``fragment`` when given.

        Raises:
            PageAssertionError: With the expected fragment and the actual URL.
        """
        fragment = fragment or self.path
        self.expect_url(re.compile(re.escape(fragment)), fragment)

    def expect_url(self, pattern: Pattern[str], expected: str) -> None:
        try:
            expect(self.page).to_have_url(pattern, timeout=self.settings.expect_timeout)
        except AssertionError as e:
            raise PageAssertionError('page location', expected, self.page.url, str(e)) from e

    def act_after_visible(self, element: BaseElement, action: Optional[Callable[[BaseElement], T]] = None) -> T:
        """
        Wait for the element to become visible and then act on it (click by default).
        """
        return act_after_visible(element, action)

    def find_element(self, selector: Union[str, Locator]) -> BaseElement:
        """
        Find a single element on the page.

        Args:
            selector (Union[str, Locator]): CSS or XPath selector, or a Playwright Locator object.

        Returns:
            BaseElement: A BaseElement object wrapping the located element.
        """
        if isinstance(selector, str):
            return BaseElement(self.page.locator(selector), self.page, selector=selector, settings=self.settings)
        return BaseElement(selector, self.page, settings=self.settings)

    def selector_for_test_id(self, test_id: str) -> str:
        return f'[{self.settings.test_id_attribute}="{test_id}"]'

    def find_by_test_id(self, test_id: str) -> BaseElement:
        """
        Find an element by the application's stable test-id attribute (``data-test`` by default).
        """
        return self.find_element(self.selector_for_test_id(test_id))
