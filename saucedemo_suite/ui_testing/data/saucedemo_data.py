"""
================================================================================
SauceDemo Test Data
================================================================================

Single source of truth for fixture values used by page objects and scenarios:
credentials, product names and prices, sort options, error strings and URLs.

Everything here is read-only. Mappings are exposed as `MappingProxyType`
views and records as frozen dataclasses, so scenarios can share them freely.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from saucedemo_suite.ui_testing.framework.config_loader import DEFAULT_BASE_URL


class TestDataError(Exception):
    """Raised when derived catalogs disagree with their source catalog."""
    __test__ = False


# ==================== USER CREDENTIALS ====================

@dataclass(frozen=True)
class Credential:
    """Username/password pair."""
    username: str
    password: str


VALID_PASSWORD = "secret_sauce"
INVALID_PASSWORD = "wrong_password"

VALID_USER = Credential(username="standard_user", password=VALID_PASSWORD)

# Same object as VALID_USER, not a copy
STANDARD_USER = VALID_USER

LOCKED_USER = Credential(username="locked_out_user", password=VALID_PASSWORD)

# Not registered in the shop
INVALID_USER = Credential(username="invalid_user", password=INVALID_PASSWORD)


# ==================== PRODUCT DATA ====================

PRODUCTS: Mapping[str, str] = MappingProxyType({
    "BACKPACK": "Sauce Labs Backpack",
    "BIKE_LIGHT": "Sauce Labs Bike Light",
    "BOLT_TSHIRT": "Sauce Labs Bolt T-Shirt",
    "FLEECE_JACKET": "Sauce Labs Fleece Jacket",
    "ONESIE": "Sauce Labs Onesie",
    "TSHIRT_RED": "Test.allTheThings() T-Shirt (Red)",
})

PRODUCT_PRICES: Mapping[str, float] = MappingProxyType({
    PRODUCTS["ONESIE"]: 7.99,
    PRODUCTS["BIKE_LIGHT"]: 9.99,
    PRODUCTS["BOLT_TSHIRT"]: 15.99,
    PRODUCTS["TSHIRT_RED"]: 15.99,
    PRODUCTS["BACKPACK"]: 29.99,
    PRODUCTS["FLEECE_JACKET"]: 49.99,
})


# ==================== SORT OPTIONS ====================

class SortOption(Enum):
    """
    Inventory sort dropdown options.

    `value` is the <option> value used to drive the control,
    `label` is the text the control renders once selected.
    """

    NAME_ASC = ("az", "Name (A to Z)")
    NAME_DESC = ("za", "Name (Z to A)")
    PRICE_ASC = ("lohi", "Price (low to high)")
    PRICE_DESC = ("hilo", "Price (high to low)")

    def __new__(cls, option_value: str, label: str):
        member = object.__new__(cls)
        member._value_ = option_value
        member.label = label
        return member

    @classmethod
    def from_value(cls, value: str) -> "SortOption":
        """Look up a member by its <option> value."""
        return cls(value)


SORT_OPTIONS: Mapping[str, str] = MappingProxyType(
    {option.name: option.value for option in SortOption}
)

SORT_LABELS: Mapping[str, str] = MappingProxyType(
    {option.name: option.label for option in SortOption}
)


# ==================== ERROR MESSAGES ====================

# Compare with `in`, never `==`: the app's punctuation is not stable.
ERROR_MESSAGES: Mapping[str, str] = MappingProxyType({
    "LOCKED_USER": "Epic sadface: Sorry, this user has been locked out.",
    "INVALID_CREDENTIALS": "Epic sadface: Username and password do not match any user in this service",
    "MISSING_USERNAME": "Epic sadface: Username is required",
    "MISSING_PASSWORD": "Epic sadface: Password is required",
})


# ==================== URLS ====================

def build_urls(base_url: str = DEFAULT_BASE_URL) -> Mapping[str, str]:
    """Build the URL catalog for a given deployment."""
    base = base_url.rstrip("/")
    return MappingProxyType({
        "BASE": base,
        "LOGIN": f"{base}/",
        "LOGIN_INDEX": f"{base}/index.html",
        "INVENTORY": f"{base}/inventory.html",
        "CART": f"{base}/cart.html",
    })


URLS = build_urls()


# ==================== VALIDATION ====================

def validate_catalogs(
    products: Mapping[str, str] = PRODUCTS,
    prices: Mapping[str, float] = PRODUCT_PRICES,
) -> None:
    """
    Check that every priced product is a known product name.

    Raises:
        TestDataError: When a price entry has no matching name entry
    """
    known = set(products.values())
    unknown = [name for name in prices if name not in known]
    if unknown:
        raise TestDataError(f"Prices defined for unknown products: {unknown}")


@dataclass(frozen=True)
class SauceDemoData:
    """Read-only bundle of all fixture values, handed to scenarios by reference."""

    valid_user: Credential
    standard_user: Credential
    locked_user: Credential
    invalid_user: Credential
    valid_password: str
    invalid_password: str
    products: Mapping[str, str]
    product_prices: Mapping[str, float]
    error_messages: Mapping[str, str]
    urls: Mapping[str, str]


@lru_cache(maxsize=None)
def get_test_data(base_url: Optional[str] = None) -> SauceDemoData:
    """Build (once per base URL) the test data bundle."""
    validate_catalogs(PRODUCTS, PRODUCT_PRICES)
    return SauceDemoData(
        valid_user=VALID_USER,
        standard_user=STANDARD_USER,
        locked_user=LOCKED_USER,
        invalid_user=INVALID_USER,
        valid_password=VALID_PASSWORD,
        invalid_password=INVALID_PASSWORD,
        products=PRODUCTS,
        product_prices=PRODUCT_PRICES,
        error_messages=ERROR_MESSAGES,
        urls=URLS if base_url is None else build_urls(base_url),
    )


__all__ = [
    "Credential",
    "TestDataError",
    "VALID_USER",
    "STANDARD_USER",
    "LOCKED_USER",
    "INVALID_USER",
    "VALID_PASSWORD",
    "INVALID_PASSWORD",
    "PRODUCTS",
    "PRODUCT_PRICES",
    "SortOption",
    "SORT_OPTIONS",
    "SORT_LABELS",
    "ERROR_MESSAGES",
    "URLS",
    "build_urls",
    "validate_catalogs",
    "SauceDemoData",
    "get_test_data",
]
