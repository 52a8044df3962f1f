"""
Fixtures for page-object unit tests.

The fake page hands out one MagicMock locator per selector chain, so a test can look up the exact
locator a page object acted on, e.g. ``locators['[data-test="primary-header"] >> [data-test="shopping-cart-badge"]']``.
"""

from unittest.mock import MagicMock, patch

import pytest

from utils.settings import Settings


class FakeLocators(dict):
    """Registry of mock locators keyed by selector chain."""

    def __missing__(self, key: str) -> MagicMock:
        locator = MagicMock(name=key)
        locator.fake_key = key
        locator.locator.side_effect = lambda selector: self[f"{key} >> {selector}"]
        locator.filter.side_effect = lambda has=None, **kwargs: self[f"{key} >> has({has.fake_key})"]
        locator.nth.side_effect = lambda index: self[f"{key} >> nth={index}"]
        locator.__str__.return_value = key
        self[key] = locator
        return locator


@pytest.fixture
def locators() -> FakeLocators:
    return FakeLocators()


@pytest.fixture
def fake_page(locators):
    page = MagicMock(name='page')
    page.locator.side_effect = lambda selector: locators[selector]
    page.url = 'https://www.saucedemo.com/inventory.html'
    return page


@pytest.fixture
def suite_settings() -> Settings:
    return Settings()


@pytest.fixture
def mock_expect():
    """
    Replace Playwright's ``expect`` in the page-object modules; returns the shared mock.
    """
    expect = MagicMock(name='expect')
    with patch('pages.common.base_element.expect', expect), patch('pages.common.base_page.expect', expect):
        yield expect
