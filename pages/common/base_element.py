from typing import Any, Callable, Optional, Pattern, TypeVar, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from utils.errors import ElementNotFoundError, NotInteractableError, PageAssertionError
from utils.settings import Settings, get_settings
from utils.track_time import track_execution_time

T = TypeVar('T')


class BaseElement:
    """
    BaseElement is a wrapper class for Playwright's Locator object, providing
    the interaction, wait and assertion primitives the page objects are built from.

    Engine timeouts are translated into the suite's error types so a failure names the selector
    and the state or action that was expected.

    :param locator: Locator to target the specific web element.
    :param page: Playwright Page object, representing the browser tab.
    :param selector: Human-readable selector used in diagnostics (defaults to the locator's repr).
    :param settings: Suite settings supplying the action and expect timeouts.
    :param default_timeout: Timeout for element interactions in milliseconds (defaults to ACTION_TIMEOUT).
    """

    def __init__(self, locator: Locator, page: Page, selector: Optional[str] = None,
                 settings: Optional[Settings] = None, default_timeout: Optional[int] = None):
        settings = settings or get_settings()
        self.raw: Locator = locator
        self.page = page
        self.selector = selector or str(locator)
        self._default_timeout = default_timeout or settings.action_timeout
        self._expect_timeout = settings.expect_timeout

    def __repr__(self) -> str:
        return f"BaseElement({self.selector})"

    @property
    def text(self) -> str:
        """
        Get the text content of the element.

        :return: The text content as a string.
        """
        return (self.raw.text_content(timeout=self._default_timeout) or '').strip()

    @property
    def value(self) -> str:
        """
        Get the value of the element, usually for input elements.
        """
        return self.raw.input_value(timeout=self._default_timeout)

    @property
    def is_enabled(self) -> bool:
        """
        Check if the element is both visible and enabled (clickable).
        """
        return not self.raw.is_disabled() and self.raw.is_visible()

    @property
    def is_visible(self) -> bool:
        return self.raw.is_visible()

    @property
    def count(self) -> int:
        return self.raw.count()

    def all_texts(self) -> list[str]:
        """
        Text of every element matched by the locator, without waiting.
        """
        return [text.strip() for text in self.raw.all_text_contents()]

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of a specified attribute of the element.

        :param name: The name of the attribute to retrieve.
        :return: The attribute value as a string or None if not found.
        """
        return self.raw.get_attribute(name, timeout=self._default_timeout)

    # Actions

    @track_execution_time
    def click(self, force: bool = False) -> None:
        """
        Click the element. Optionally force the click, bypassing visibility and interaction constraints.

        :param force: If True, forces the click even if the element is not interactable (default is False).
        :raises NotInteractableError: If the click cannot be performed within the timeout.
        """
        try:
            self.raw.click(timeout=self._default_timeout, force=force)
        except PlaywrightError as e:
            raise NotInteractableError(self.selector, 'click', self._default_timeout) from e

    @track_execution_time
    def fill(self, text: str) -> None:
        """
        Clear any existing content and fill the element with the provided text.

        Args:
            text (str): The text to fill into the element.

        Raises:
            NotInteractableError: If the field cannot be filled within the timeout.
        """
        try:
            self.raw.fill(text, timeout=self._default_timeout)
        except PlaywrightError as e:
            raise NotInteractableError(self.selector, 'fill', self._default_timeout) from e

    @track_execution_time
    def select_option(self, value: Optional[str] = None, label: Optional[str] = None) -> None:
        """
        Select an option of a <select> element by value or by visible label.
        """
        try:
            if label is not None:
                self.raw.select_option(label=label, timeout=self._default_timeout)
            else:
                self.raw.select_option(value, timeout=self._default_timeout)
        except PlaywrightError as e:
            raise NotInteractableError(self.selector, 'select option in', self._default_timeout) from e

    # Waits

    @track_execution_time
    def wait_until_hidden(self, timeout: Optional[int] = None) -> "BaseElement":
        """
        Wait until the element is hidden, either removed from the DOM or made invisible.

        :param timeout: Time to wait in milliseconds (defaults to the action timeout).
        :raises ElementNotFoundError: If the element is still visible after the timeout.
        """
        timeout = timeout or self._default_timeout
        try:
            self.raw.wait_for(state="hidden", timeout=timeout)
        except PlaywrightError as e:
            raise ElementNotFoundError(self.selector, 'hidden', timeout) from e
        return self

    @track_execution_time
    def wait_until_visible(self, timeout: Optional[int] = None) -> "BaseElement":
        """
        Wait until the element becomes visible on the page.

        This method ensures that the element is present in the DOM and is not hidden
        (e.g., has `display: none` or `visibility: hidden` styles applied).

        Args:
            timeout (int): Maximum time to wait in milliseconds. Defaults to the action timeout.

        Returns:
            BaseElement: self, so an action can be chained after the wait.

        Raises:
            ElementNotFoundError: If the element does not become visible within the specified timeout.
        """
        timeout = timeout or self._default_timeout
        try:
            self.raw.wait_for(state="visible", timeout=timeout)
        except PlaywrightError as e:
            raise ElementNotFoundError(self.selector, 'visible', timeout) from e
        return self

    @track_execution_time
    def wait_until_enabled(self, timeout: Optional[int] = None) -> "BaseElement":
        """
        Wait until the element becomes enabled (interactive) using Playwright's expect logic.

        Raises:
            NotInteractableError: If the element does not become enabled within the timeout.
        """
        timeout = timeout or self._default_timeout
        try:
            expect(self.raw).to_be_enabled(timeout=timeout)
        except AssertionError as e:
            raise NotInteractableError(self.selector, 'enable', timeout) from e
        return self

    # Assertions

    def _expect(self, description: str, expected: Any, assertion: Callable[[Any], None],
                actual: Callable[[], Any]) -> None:
        """
        Run a Playwright ``expect`` assertion and re-raise its failure with expected and actual values.

        ``actual`` is only evaluated on failure and must not wait on the page.
        """
        try:
            assertion(expect(self.raw))
        except AssertionError as e:
            raise PageAssertionError(f"{description} of {self.selector}", expected, actual(), str(e)) from e

    def expect_visible(self) -> None:
        self._expect('visibility', 'visible', lambda e: e.to_be_visible(timeout=self._expect_timeout),
                     lambda: 'visible' if self.raw.is_visible() else 'not visible')

    def expect_hidden(self) -> None:
        self._expect('visibility', 'hidden', lambda e: e.to_be_hidden(timeout=self._expect_timeout),
                     lambda: 'visible' if self.raw.is_visible() else 'not visible')

    def expect_absent(self) -> None:
        """
        Assert the element is not in the DOM at all (stricter than hidden).
        """
        self.expect_count(0)

    def expect_count(self, count: int) -> None:
        self._expect('count', count, lambda e: e.to_have_count(count, timeout=self._expect_timeout),
                     self.raw.count)

    def expect_text(self, text: Union[str, Pattern[str], list[str]]) -> None:
        """
        Assert the full text of the element (or of every matched element, for a list) equals ``text``.
        """
        self._expect('text', text, lambda e: e.to_have_text(text, timeout=self._expect_timeout),
                     self.all_texts)

    def expect_contains_text(self, text: Union[str, Pattern[str]]) -> None:
        self._expect('text', text, lambda e: e.to_contain_text(text, timeout=self._expect_timeout),
                     self.all_texts)

    def expect_attribute(self, name: str, value: Union[str, Pattern[str]]) -> None:
        self._expect(f"attribute '{name}'", value,
                     lambda e: e.to_have_attribute(name, value, timeout=self._expect_timeout),
                     lambda: self.raw.evaluate_all("(els, name) => els.map(e => e.getAttribute(name))", name))

    def expect_value(self, value: str) -> None:
        self._expect('value', value, lambda e: e.to_have_value(value, timeout=self._expect_timeout),
                     lambda: self.raw.evaluate_all("els => els.map(e => e.value)"))

    def expect_enabled(self) -> None:
        self._expect('state', 'enabled', lambda e: e.to_be_enabled(timeout=self._expect_timeout),
                     lambda: 'enabled' if self.raw.is_enabled() else 'disabled')


def act_after_visible(element: BaseElement, action: Optional[Callable[[BaseElement], T]] = None) -> T:
    """
    Wait for ``element`` to be visible, then perform ``action`` on it (a click by default).

    Every state-changing interaction in the page objects goes through this helper so the wait
    always precedes the action.
    """
    element.wait_until_visible()
    if action is None:
        return element.click()
    return action(element)
