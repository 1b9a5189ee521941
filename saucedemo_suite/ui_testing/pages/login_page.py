"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Login page of the SauceDemo shop.

Design goals:
  - Scenarios never touch selectors; every interaction goes through a
    user-intent method
  - Predicates (`is_*`) are non-failing probes with an internal bounded
    wait, so scenarios can use plain boolean asserts
  - Text retrieval (`get_error_message`) lets the timeout surface, because
    callers only ask for the text when they expect it to exist

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from saucedemo_suite.ui_testing.framework.config_loader import UiSettings
from saucedemo_suite.ui_testing.framework.driver import PageDriver
from saucedemo_suite.ui_testing.framework.page_base import PageBase
from saucedemo_suite.ui_testing.framework.waits import probe, require


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    INVENTORY_URL_PATTERN = "**/inventory.html"

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = '[data-test="error"]'
    ERROR_CLOSE_BUTTON = ".error-button"
    INVENTORY_LOGO = ".app_logo"

    def __init__(
        self,
        page: PageDriver,
        base_url: str = "",
        settings: Optional[UiSettings] = None,
    ):
        super().__init__(page, base_url=base_url, settings=settings)
        self.username_input = page.locator(self.USERNAME_INPUT)
        self.password_input = page.locator(self.PASSWORD_INPUT)
        self.login_button = page.locator(self.LOGIN_BUTTON)
        self.error_message = page.locator(self.ERROR_MESSAGE)
        self.error_close_button = page.locator(self.ERROR_CLOSE_BUTTON)
        # Only rendered on the inventory page
        self.inventory_logo = page.locator(self.INVENTORY_LOGO)

    @property
    def login_urls(self) -> tuple:
        """Both URLs the login page is served from."""
        return (f"{self.base_url}/", f"{self.base_url}/index.html")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    async def login(self, username: str, password: str) -> None:
        """
        Fill the form and submit it.

        Empty strings are valid input (negative scenarios). The outcome is
        inspected afterwards through the observer methods.

        Args:
            username: Username to type (replaces existing content)
            password: Password to type (replaces existing content)
        """
        with allure.step(f"Login as '{username}'"):
            await self.username_input.fill(username)
            await self.password_input.fill(password)
            await self.login_button.click()
        logger.debug(f"Submitted login form for user '{username}'")

    @allure.step("Read login error message")
    async def get_error_message(self) -> str:
        """
        Wait for the error banner and return its text.

        Raises:
            playwright.async_api.TimeoutError: If the banner never shows up
        """
        await require(
            lambda t: self.error_message.wait_for(state="visible", timeout=t),
            self.settings.element_timeout,
            "login error message",
        )
        text = await self.error_message.text_content()
        return text or ""

    async def is_error_visible(self) -> bool:
        """Whether the error banner shows up within the short probe budget."""
        return await self.is_element_visible(
            self.error_message,
            timeout=self.settings.error_probe_timeout,
            description="login error message",
        )

    @allure.step("Check login succeeded")
    async def is_login_successful(self) -> bool:
        """
        Login counts as successful once the browser is on the inventory page
        and the app logo is rendered. Each check has its own time budget.
        """
        reached_inventory = await probe(
            lambda t: self.page.wait_for_url(self.INVENTORY_URL_PATTERN, timeout=t),
            self.settings.inventory_url_timeout,
            "redirect to inventory page",
        )
        if not reached_inventory:
            return False
        return await self.is_element_visible(
            self.inventory_logo,
            timeout=self.settings.post_login_marker_timeout,
            description="inventory app logo",
        )

    def is_on_login_page(self) -> bool:
        """Current URL is one of the login URLs (no waiting)."""
        return self.current_url in self.login_urls

    @allure.step("Clear login inputs")
    async def clear_inputs(self) -> None:
        """Empty both inputs without submitting."""
        await self.username_input.clear()
        await self.password_input.clear()

    @allure.step("Close login error message")
    async def close_error_message(self) -> None:
        """Dismiss the error banner if one is shown; no-op otherwise."""
        if await self.is_error_visible():
            await self.error_close_button.click()
            logger.debug("Dismissed login error message")
