"""
================================================================================
Test Data
================================================================================

Read-only fixture values for SauceDemo scenarios.

================================================================================
"""

from .saucedemo_data import (
    Credential,
    ERROR_MESSAGES,
    INVALID_PASSWORD,
    INVALID_USER,
    LOCKED_USER,
    PRODUCT_PRICES,
    PRODUCTS,
    SORT_LABELS,
    SORT_OPTIONS,
    STANDARD_USER,
    SauceDemoData,
    SortOption,
    TestDataError,
    URLS,
    VALID_PASSWORD,
    VALID_USER,
    build_urls,
    get_test_data,
    validate_catalogs,
)

__all__ = [
    "Credential",
    "ERROR_MESSAGES",
    "INVALID_PASSWORD",
    "INVALID_USER",
    "LOCKED_USER",
    "PRODUCT_PRICES",
    "PRODUCTS",
    "SORT_LABELS",
    "SORT_OPTIONS",
    "STANDARD_USER",
    "SauceDemoData",
    "SortOption",
    "TestDataError",
    "URLS",
    "VALID_PASSWORD",
    "VALID_USER",
    "build_urls",
    "get_test_data",
    "validate_catalogs",
]
