"""
Fixtures for browser-free unit tests: an in-memory SauceDemo behind a fake
Playwright page, and page objects bound to it.
"""

import pytest

from saucedemo_suite.ui_testing.framework.config_loader import UiSettings
from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage
from saucedemo_suite.ui_testing.pages.login_page import LoginPage
from saucedemo_suite.unit.fake_saucedemo import BASE_URL, FakePage, FakeSauceDemo


@pytest.fixture
def fake_settings() -> UiSettings:
    # Distinct values so tests can tell which budget a wait used
    return UiSettings(
        base_url=BASE_URL,
        navigation_timeout=30000,
        element_timeout=10000,
        error_probe_timeout=3000,
        inventory_url_timeout=5000,
        post_login_marker_timeout=2500,
    )


@pytest.fixture
def fake_app() -> FakeSauceDemo:
    return FakeSauceDemo()


@pytest.fixture
def fake_page(fake_app: FakeSauceDemo) -> FakePage:
    return FakePage(fake_app)


@pytest.fixture
async def login_page(fake_page: FakePage, fake_settings: UiSettings) -> LoginPage:
    login = LoginPage(fake_page, settings=fake_settings)
    await login.open()
    return login


@pytest.fixture
def inventory_page(fake_page: FakePage, fake_settings: UiSettings) -> InventoryPage:
    return InventoryPage(fake_page, settings=fake_settings)
