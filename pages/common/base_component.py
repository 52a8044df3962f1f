from functools import lru_cache
from typing import Callable, Optional, TypeVar

from playwright.sync_api import Locator, Page

from pages.common.base_element import BaseElement, act_after_visible
from utils.settings import Settings, get_settings

T = TypeVar('T')


class BaseComponent:
    """
    A group of elements scoped to one root element (the header, a product card, a cart line).

    Components are held by the pages that show them rather than inherited, so a page opts into a
    component by creating it.
    """

    def __init__(self, locator: Locator, page: Page, settings: Optional[Settings] = None):
        """
        :param locator: The root element that defines the component's scope.
        :param page: The Playwright Page instance.
        :param settings: Suite settings, defaults to the environment-derived ones.
        """
        self.root = locator
        self.page = page
        self.settings = settings or get_settings()

    @property
    def element(self) -> BaseElement:
        """
        Get the root base element of the component.
        """
        return BaseElement(self.root, self.page, selector=self._root_selector, settings=self.settings)

    @property
    def _root_selector(self) -> str:
        return getattr(self, 'selector', None) or str(self.root)

    @property
    def is_visible(self) -> bool:
        return self.root.is_visible()

    def selector_for_test_id(self, test_id: str) -> str:
        return f'[{self.settings.test_id_attribute}="{test_id}"]'

    @lru_cache(maxsize=32)
    def child_el(self, selector: str) -> BaseElement:
        """
        Find an element within the component's scope.
        """
        return BaseElement(self.root.locator(selector), self.page, selector=f"{self._root_selector} >> {selector}",
                           settings=self.settings)

    def child_by_test_id(self, test_id: str) -> BaseElement:
        return self.child_el(self.selector_for_test_id(test_id))

    def child_elements(self, selector: str) -> list[BaseElement]:
        """
        Find multiple elements within the component's scope.

        :param selector: CSS or XPath selector for elements within the component.
        :return: A list of BaseElement objects.
        """
        return [BaseElement(locator, self.page, selector=f"{self._root_selector} >> {selector}",
                            settings=self.settings)
                for locator in self.root.locator(selector).all()]

    def act_after_visible(self, element: BaseElement, action: Optional[Callable[[BaseElement], T]] = None) -> T:
        return act_after_visible(element, action)
