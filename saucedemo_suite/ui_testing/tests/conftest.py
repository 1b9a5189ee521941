"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser scenarios against the live SauceDemo shop.

Key Features:
- A fresh browser, context and page per scenario, always released
- Page Object fixtures, with the login page already opened
- Screenshot capture on failure (attached to Allure)

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page

from saucedemo_suite.ui_testing.data import SauceDemoData
from saucedemo_suite.ui_testing.framework.browser_manager import BrowserManager
from saucedemo_suite.ui_testing.framework.config_loader import UiSettings
from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage
from saucedemo_suite.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(ui_settings: UiSettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager fixture.

    Each scenario gets its own browser so no state can leak between them.
    Skips the scenario when the Playwright browser is not installed.
    """
    manager = BrowserManager(settings=ui_settings)
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Playwright browser '{manager.browser_type}' unavailable: {e}")
    try:
        yield manager
    finally:
        await manager.close()


@pytest.fixture
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Closed by the manager on teardown.
    """
    yield await browser_manager.new_context()


@pytest.fixture
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Captures a screenshot into the Allure report when the scenario failed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            login = LoginPage(page)
            await login.capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def login_page(page: Page, ui_settings: UiSettings) -> LoginPage:
    """
    Provides LoginPage instance, already navigated to the login URL.
    """
    login = LoginPage(page, settings=ui_settings)
    await login.open()
    return login


@pytest.fixture
def inventory_page(page: Page, ui_settings: UiSettings) -> InventoryPage:
    """
    Provides InventoryPage instance bound to the same page.
    """
    return InventoryPage(page, settings=ui_settings)


@pytest.fixture
async def logged_in_inventory(
    login_page: LoginPage,
    inventory_page: InventoryPage,
    test_data: SauceDemoData,
) -> InventoryPage:
    """
    Provides InventoryPage after logging in as the standard user.
    """
    user = test_data.valid_user
    await login_page.login(user.username, user.password)
    assert await login_page.is_login_successful(), "Standard user should reach the inventory"
    return inventory_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Expose each phase's report on the item (`rep_setup`, `rep_call`, ...)
    so fixtures can react to the outcome during teardown.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
