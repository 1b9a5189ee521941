"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Product listing shown after a successful login.

Highlights:
  - Sorting driven by `SortOption` (machine value in, rendered label out)
  - Product names and prices read back as plain Python values

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger

from saucedemo_suite.ui_testing.data.saucedemo_data import SortOption
from saucedemo_suite.ui_testing.framework.config_loader import UiSettings
from saucedemo_suite.ui_testing.framework.driver import PageDriver
from saucedemo_suite.ui_testing.framework.page_base import PageBase
from saucedemo_suite.ui_testing.framework.waits import require


def parse_price(text: str) -> float:
    """Parse a rendered price such as '$29.99'."""
    return round(float(text.strip().lstrip("$").replace(",", "")), 2)


class InventoryPage(PageBase):
    """Inventory page object (async)."""

    URL_PATH = "/inventory.html"
    PAGE_TITLE = "Products"

    TITLE = ".title"
    APP_LOGO = ".app_logo"
    SORT_SELECT = '[data-test="product-sort-container"]'
    ACTIVE_SORT_OPTION = '[data-test="active-option"]'
    ITEM_NAMES = '[data-test="inventory-item-name"]'
    ITEM_PRICES = '[data-test="inventory-item-price"]'

    def __init__(
        self,
        page: PageDriver,
        base_url: str = "",
        settings: Optional[UiSettings] = None,
    ):
        super().__init__(page, base_url=base_url, settings=settings)
        self.title = page.locator(self.TITLE)
        self.app_logo = page.locator(self.APP_LOGO)
        self.sort_select = page.locator(self.SORT_SELECT)
        self.active_sort_option = page.locator(self.ACTIVE_SORT_OPTION)
        self.item_names = page.locator(self.ITEM_NAMES)
        self.item_prices = page.locator(self.ITEM_PRICES)

    async def is_loaded(self) -> bool:
        """Whether the app logo is rendered."""
        return await self.is_element_visible(
            self.app_logo,
            timeout=self.settings.post_login_marker_timeout,
            description="inventory app logo",
        )

    async def get_title(self) -> str:
        """Text of the page heading ('Products')."""
        await require(
            lambda t: self.title.wait_for(state="visible", timeout=t),
            self.settings.element_timeout,
            "inventory page title",
        )
        return (await self.title.text_content() or "").strip()

    async def sort_by(self, option: SortOption) -> None:
        """Select a sort order in the dropdown."""
        with allure.step(f"Sort products by {option.label}"):
            await self.sort_select.select_option(option.value)
        logger.debug(f"Sorted inventory by '{option.label}'")

    async def get_active_sort_label(self) -> str:
        """Label the sort control currently renders."""
        return (await self.active_sort_option.text_content() or "").strip()

    async def get_product_names(self) -> List[str]:
        """Product names in display order."""
        return [name.strip() for name in await self.item_names.all_text_contents()]

    async def get_product_prices(self) -> List[float]:
        """Product prices in display order."""
        return [parse_price(price) for price in await self.item_prices.all_text_contents()]
