"""
conftest.py

Pytest configuration for the Sauce Demo checkout suite: command-line options, Playwright fixtures,
scenario fixtures, allure reporting of failures and browser process cleanup.
"""

import logging
import os

import allure
import pytest
from _pytest.runner import CallInfo
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, expect, sync_playwright

from data.customers import CustomerInfo, generate_seeded_customer
from data.products import ProductSelection, sample_products
from pages import Pages
from utils.settings import Settings, get_settings
from utils.track_time import track_execution_time
from workflow.checkout_flow import CheckoutFlow

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 3


# Pytest Configuration
def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption("--headless", action="store", default=None, help="Run tests in headless mode (true/false)")
    parser.addoption("--browser-name", action="store", default=None,
                     help="Browser engine to use: chromium, firefox or webkit")
    parser.addoption("--e2e", action="store_true", default=False,
                     help="Run end-to-end tests against the live site")


@pytest.hookimpl
def pytest_configure(config):
    config.screenshots_amount = 0  # Limit the number of screenshots attached to reports.

    # Options override the environment; settings are read from it on first use
    if config.getoption("headless") is not None:
        os.environ["HEADLESS"] = config.getoption("headless")
    if config.getoption("browser_name") is not None:
        os.environ["BROWSER"] = config.getoption("browser_name")
    get_settings.cache_clear()


def _e2e_enabled(config) -> bool:
    return config.getoption("e2e") or os.getenv("E2E", "false").lower() == "true"


def pytest_collection_modifyitems(config, items):
    """
    Skip end-to-end tests unless they are enabled and copy ``meta`` marker data onto the items.
    """
    skip_e2e = pytest.mark.skip(reason="end-to-end tests need --e2e or E2E=true")
    run_e2e = _e2e_enabled(config)
    for item in items:
        if "e2e" in item.keywords and not run_e2e:
            item.add_marker(skip_e2e)
        meta = item.get_closest_marker("meta")
        if meta:
            item.test_case_id = meta.kwargs.get("case_id")
            item.test_case_title = meta.kwargs.get("case_title")
            item.test_case_link = meta.kwargs.get("case_link")


@pytest.fixture(autouse=True)
def _allure_meta(request):
    """
    Publish ``meta`` marker data (title, case id and link) to the allure report.
    """
    item = request.node
    if getattr(item, "test_case_title", None):
        allure.dynamic.title(item.test_case_title)
    if getattr(item, "test_case_id", None):
        allure.dynamic.label("case_id", item.test_case_id)
    if getattr(item, "test_case_link", None):
        allure.dynamic.link(item.test_case_link, name=item.test_case_id or item.test_case_link)
    yield


# Configuration Fixtures
@pytest.fixture(scope="session")
def settings() -> Settings:
    """
    Settings for the session, read from the environment after the command-line options were applied.
    """
    return get_settings()


# Playwright Fixtures
@pytest.fixture(scope="session")
def playwright_instance() -> Playwright:
    """
    Set up the Playwright instance for the test session.

    Returns:
        Playwright: A configured Playwright instance with browser engines.
    """
    with sync_playwright() as playwright:
        yield playwright


@pytest.fixture(scope="session")
def browser(playwright_instance, settings) -> Browser:
    """
    Launch the configured browser engine once per session.

    Environment Variables:
        HEADLESS: When 'true', runs the browser without a visible UI
        BROWSER: chromium (default), firefox or webkit
    """
    browser_type = getattr(playwright_instance, settings.browser_name)
    if settings.headless:
        browser = browser_type.launch(headless=True)
    else:
        # Launch with visible browser window and maximize it
        browser = browser_type.launch(headless=False, args=["--start-maximized"])
    logger.info(f"Launched {settings.browser_name} (headless={settings.headless})")
    yield browser
    browser.close()


@pytest.fixture
def browser_context(browser, settings) -> BrowserContext:
    """
    Create an isolated browser context per test.

    Sauce Demo keeps the cart in local storage, so sharing a context would leak cart contents
    between scenarios.
    """
    if settings.headless:
        # Fixed viewport size for consistent testing in headless mode
        context = browser.new_context(viewport={"width": 1920, "height": 1080}, screen={"width": 1920, "height": 1080})
    else:
        context = browser.new_context(no_viewport=True)
    context.set_default_timeout(settings.action_timeout)
    context.set_default_navigation_timeout(settings.navigation_timeout)
    yield context
    context.close()


@pytest.fixture
def page(request, browser_context, settings) -> Page:
    """
    Create a new page within the browser context and attach it to the test item for failure reporting.
    """
    page = browser_context.new_page()
    expect.set_options(timeout=settings.expect_timeout)
    request.node.page = page
    yield page
    page.close()


# Scenario Fixtures
@pytest.fixture
def pages(page, settings) -> Pages:
    return Pages(page, settings)


@pytest.fixture
def flow(pages) -> CheckoutFlow:
    """
    A checkout workflow driver starting logged out.
    """
    return CheckoutFlow(pages)


@pytest.fixture
@track_execution_time
def product_selection(settings) -> ProductSelection:
    """
    A fresh random selection of distinct catalog products for the scenario.
    """
    selection = sample_products(DEFAULT_SAMPLE_SIZE, policy=settings.sampling_policy)
    logger.info(f"Selected products: {', '.join(selection.names)}")
    allure.dynamic.parameter("products", ", ".join(selection.ids))
    return selection


@pytest.fixture
def customer() -> CustomerInfo:
    """
    Checkout form data generated from the configured seed.
    """
    return generate_seeded_customer()


# Pytest Hooks
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call: CallInfo) -> None:
    """
    Attach a screenshot, the final URL and the execution log to allure when a test fails.

    Args:
        item: The pytest test item being run
        call: Information about the test function call
    """
    outcome = yield
    report = outcome.get_result()

    if report.when not in ("setup", "call") or not report.failed:
        return

    page = getattr(item, "page", None)
    if page is not None and not page.is_closed():
        allure.attach(page.url, name="end_url", attachment_type=allure.attachment_type.URI_LIST)
        if item.config.screenshots_amount < 5:
            try:
                screenshot = page.screenshot(type="png", full_page=False)
            except Exception as e:
                logger.warning(f"Failed to capture screenshot: {e}")
            else:
                allure.attach(screenshot, name="screenshot", attachment_type=allure.attachment_type.PNG)
                item.config.screenshots_amount += 1

    if getattr(item, "execution_log", None):
        log = "\n".join(entry for _, entry in sorted(item.execution_log, key=lambda x: x[0]))
        allure.attach(log, name="execution_log", attachment_type=allure.attachment_type.TEXT)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_protocol(item, nextitem):
    """
    Hook to track the currently running test item throughout the test framework.

    Sets a global reference to the current test item that can be accessed
    by utilities that don't receive the test item directly.
    """
    pytest.current_item = item
    yield
    pytest.current_item = None


@pytest.hookimpl
def pytest_sessionfinish(session):
    """
    Clean up orphaned Playwright browser processes after all tests finish.
    """
    import psutil
    current_pid = os.getpid()

    # Only clean processes related to current worker to avoid affecting other test runs
    for proc in psutil.process_iter():
        try:
            if proc.ppid() == current_pid and 'playwright' in proc.name().lower():
                proc.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue


@pytest.hookimpl(tryfirst=True, optionalhook=True)
def pytest_configure_node(node):
    """
    Logs when a worker node is configured in distributed testing mode.
    """
    node.log.info(f"Worker {node.gateway.id} is configured and starting")


@pytest.hookimpl(tryfirst=True, optionalhook=True)
def pytest_testnodedown(node, error):
    """
    Logs the status of a worker node when it completes testing.
    """
    if error:
        node.log.error(f"Worker {node.gateway.id} failed: {error}")
    else:
        node.log.info(f"Worker {node.gateway.id} finished successfully")
