"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Bounded wait helpers shared by page objects
    - Screenshot and failure-capture utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger

from .config_loader import UiSettings
from .driver import ElementHandle, PageDriver
from .waits import probe


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Subclasses bind their element handles in `__init__` and expose
    user-intent methods built on top of them.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            def __init__(self, page, **kwargs):
                super().__init__(page, **kwargs)
                self.username_input = page.locator("#user-name")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: PageDriver,
        base_url: str = "",
        settings: Optional[UiSettings] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page (or any PageDriver)
            base_url: Base URL for the application, defaults to `ui.base_url`
            settings: UI settings, loaded from configuration when omitted
        """
        self.page = page
        self.settings = settings or UiSettings.from_config()
        self.base_url = (base_url or self.settings.base_url).rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        """URL the browser is currently on."""
        return self.page.url

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Navigation errors and timeouts propagate to the caller.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.url}"):
            await self.page.goto(
                self.url,
                wait_until=wait_for,
                timeout=self.settings.navigation_timeout,
            )
            logger.debug(f"Navigated to: {self.url}")

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(
                url_pattern,
                timeout=timeout or self.settings.navigation_timeout,
            )

    async def is_element_visible(
        self,
        element: ElementHandle,
        timeout: Optional[int] = None,
        description: str = "element",
    ) -> bool:
        """Non-failing visibility probe for a bound element."""
        return await probe(
            lambda t: element.wait_for(state="visible", timeout=t),
            timeout if timeout is not None else self.settings.element_timeout,
            description,
        )

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves a full-page screenshot and the current URL.
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
    "SCREENSHOT_DIR",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
