"""
In-memory stand-in for the SauceDemo shop and the Playwright page driving it.

`FakeSauceDemo` holds the application state (current URL, form fields,
error banner, sort order) and applies the shop's login rules.
`FakePage` / `FakeLocator` expose it through the `PageDriver` /
`ElementHandle` protocols, raising Playwright's `TimeoutError` where a real
bounded wait would give up. Every wait is recorded with its timeout.
"""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


BASE_URL = "https://www.saucedemo.com"

USERNAME = "#user-name"
PASSWORD = "#password"
LOGIN_BUTTON = "#login-button"
ERROR = '[data-test="error"]'
ERROR_CLOSE = ".error-button"
APP_LOGO = ".app_logo"
TITLE = ".title"
SORT_SELECT = '[data-test="product-sort-container"]'
ACTIVE_SORT = '[data-test="active-option"]'
ITEM_NAMES = '[data-test="inventory-item-name"]'
ITEM_PRICES = '[data-test="inventory-item-price"]'

ACCEPTED_USERS = ("standard_user", "problem_user", "performance_glitch_user", "visual_user")
SHOP_PASSWORD = "secret_sauce"

CATALOG: List[Tuple[str, float]] = [
    ("Sauce Labs Backpack", 29.99),
    ("Sauce Labs Bike Light", 9.99),
    ("Sauce Labs Bolt T-Shirt", 15.99),
    ("Sauce Labs Fleece Jacket", 49.99),
    ("Sauce Labs Onesie", 7.99),
    ("Test.allTheThings() T-Shirt (Red)", 15.99),
]

SORT_LABELS = {
    "az": "Name (A to Z)",
    "za": "Name (Z to A)",
    "lohi": "Price (low to high)",
    "hilo": "Price (high to low)",
}


class FakeSauceDemo:
    """Application state and rules."""

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.url = "about:blank"
        self.fields: Dict[str, str] = {USERNAME: "", PASSWORD: ""}
        self.error: Optional[str] = None
        self.sort = "az"
        self.offline = False
        self.logo_rendered = True
        self.waits: List[Tuple[str, str, Optional[float]]] = []
        self.clicks: List[str] = []

    @property
    def on_login_page(self) -> bool:
        return self.url in (f"{self.base_url}/", f"{self.base_url}/index.html")

    @property
    def on_inventory(self) -> bool:
        return self.url == f"{self.base_url}/inventory.html"

    def load(self, url: str) -> None:
        if self.offline:
            raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.url = url
        self.fields = {USERNAME: "", PASSWORD: ""}
        self.error = None
        self.sort = "az"

    def is_visible(self, selector: str) -> bool:
        if selector in (USERNAME, PASSWORD, LOGIN_BUTTON):
            return self.on_login_page
        if selector in (ERROR, ERROR_CLOSE):
            return self.on_login_page and self.error is not None
        if selector == APP_LOGO:
            return self.on_inventory and self.logo_rendered
        if selector in (TITLE, SORT_SELECT, ACTIVE_SORT, ITEM_NAMES, ITEM_PRICES):
            return self.on_inventory
        return False

    def text_of(self, selector: str) -> Optional[str]:
        if not self.is_visible(selector):
            return None
        if selector == ERROR:
            return self.error
        if selector == TITLE:
            return "Products"
        if selector == APP_LOGO:
            return "Swag Labs"
        if selector == ACTIVE_SORT:
            return SORT_LABELS[self.sort]
        if selector == LOGIN_BUTTON:
            return ""
        return None

    def listing(self) -> List[Tuple[str, float]]:
        if self.sort == "az":
            return sorted(CATALOG, key=lambda item: item[0])
        if self.sort == "za":
            return sorted(CATALOG, key=lambda item: item[0], reverse=True)
        if self.sort == "lohi":
            return sorted(CATALOG, key=lambda item: item[1])
        return sorted(CATALOG, key=lambda item: item[1], reverse=True)

    def all_texts(self, selector: str) -> List[str]:
        if not self.on_inventory:
            return []
        if selector == ITEM_NAMES:
            return [name for name, _ in self.listing()]
        if selector == ITEM_PRICES:
            return [f"${price:.2f}" for _, price in self.listing()]
        return []

    def click(self, selector: str) -> None:
        if not self.is_visible(selector):
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {selector} to be clickable")
        self.clicks.append(selector)
        if selector == LOGIN_BUTTON:
            self.submit()
        elif selector == ERROR_CLOSE:
            self.error = None

    def submit(self) -> None:
        username = self.fields[USERNAME]
        password = self.fields[PASSWORD]
        if not username:
            self.error = "Epic sadface: Username is required"
        elif not password:
            self.error = "Epic sadface: Password is required"
        elif username == "locked_out_user" and password == SHOP_PASSWORD:
            self.error = "Epic sadface: Sorry, this user has been locked out."
        elif username in ACCEPTED_USERS and password == SHOP_PASSWORD:
            self.error = None
            self.url = f"{self.base_url}/inventory.html"
        else:
            self.error = (
                "Epic sadface: Username and password do not match any user in this service"
            )


class FakeLocator:
    """ElementHandle over FakeSauceDemo."""

    def __init__(self, app: FakeSauceDemo, selector: str):
        self.app = app
        self.selector = selector

    async def fill(self, value: str) -> None:
        if self.selector not in self.app.fields or not self.app.is_visible(self.selector):
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {self.selector} to be editable")
        self.app.fields[self.selector] = value

    async def clear(self) -> None:
        await self.fill("")

    async def click(self) -> None:
        self.app.click(self.selector)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.app.waits.append((self.selector, state, timeout))
        visible = self.app.is_visible(self.selector)
        if (state == "visible" and not visible) or (state == "hidden" and visible):
            raise PlaywrightTimeoutError(
                f"Locator.wait_for: Timeout {timeout}ms exceeded waiting for "
                f"{self.selector} to be {state}"
            )

    async def text_content(self) -> Optional[str]:
        return self.app.text_of(self.selector)

    async def all_text_contents(self) -> List[str]:
        return self.app.all_texts(self.selector)

    async def input_value(self) -> str:
        return self.app.fields[self.selector]

    async def select_option(self, value: Any = None) -> List[str]:
        if self.selector != SORT_SELECT or value not in SORT_LABELS:
            raise PlaywrightError(f"Cannot select option {value!r} in {self.selector}")
        self.app.sort = value
        return [value]


class FakePage:
    """PageDriver over FakeSauceDemo."""

    def __init__(self, app: FakeSauceDemo):
        self.app = app
        self.goto_calls: List[Dict[str, Any]] = []

    @property
    def url(self) -> str:
        return self.app.url

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self.app, selector)

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        self.app.load(url)

    async def wait_for_url(self, url: str, timeout: Optional[float] = None) -> None:
        self.app.waits.append(("url:" + url, "matched", timeout))
        if not fnmatch(self.app.url, url):
            raise PlaywrightTimeoutError(
                f"Page.wait_for_url: Timeout {timeout}ms exceeded waiting for {url}"
            )

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG\r\n\x1a\n"
        if path:
            Path(path).write_bytes(data)
        return data
