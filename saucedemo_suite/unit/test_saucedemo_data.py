import dataclasses

import pytest

from saucedemo_suite.ui_testing.data import (
    ERROR_MESSAGES,
    INVALID_PASSWORD,
    INVALID_USER,
    LOCKED_USER,
    PRODUCT_PRICES,
    PRODUCTS,
    SORT_LABELS,
    SORT_OPTIONS,
    STANDARD_USER,
    URLS,
    VALID_PASSWORD,
    VALID_USER,
    Credential,
    SortOption,
    TestDataError,
    build_urls,
    get_test_data,
    validate_catalogs,
)


def test_standard_user_is_alias_of_valid_user():
    assert STANDARD_USER is VALID_USER
    assert VALID_USER == Credential("standard_user", "secret_sauce")


def test_named_credentials():
    assert LOCKED_USER == Credential("locked_out_user", VALID_PASSWORD)
    assert INVALID_USER == Credential("invalid_user", INVALID_PASSWORD)


def test_credentials_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        VALID_USER.password = "changed"


@pytest.mark.parametrize("catalog", [PRODUCTS, PRODUCT_PRICES, ERROR_MESSAGES, URLS, SORT_OPTIONS])
def test_catalogs_are_read_only(catalog):
    with pytest.raises(TypeError):
        catalog["NEW"] = "value"


def test_every_priced_product_has_a_name():
    assert set(PRODUCT_PRICES) <= set(PRODUCTS.values())
    validate_catalogs()


def test_validate_catalogs_rejects_unknown_product():
    with pytest.raises(TestDataError, match="Sauce Labs Toaster"):
        validate_catalogs(PRODUCTS, {"Sauce Labs Toaster": 1.0})


def test_error_messages_cover_all_failure_kinds():
    assert set(ERROR_MESSAGES) == {
        "LOCKED_USER",
        "INVALID_CREDENTIALS",
        "MISSING_USERNAME",
        "MISSING_PASSWORD",
    }
    assert all(message.startswith("Epic sadface: ") for message in ERROR_MESSAGES.values())


@pytest.mark.parametrize(
    "option,value,label",
    [
        (SortOption.NAME_ASC, "az", "Name (A to Z)"),
        (SortOption.NAME_DESC, "za", "Name (Z to A)"),
        (SortOption.PRICE_ASC, "lohi", "Price (low to high)"),
        (SortOption.PRICE_DESC, "hilo", "Price (high to low)"),
    ],
)
def test_sort_options(option, value, label):
    assert option.value == value
    assert option.label == label
    assert SortOption.from_value(value) is option
    assert SORT_OPTIONS[option.name] == value
    assert SORT_LABELS[option.name] == label


def test_build_urls_strips_trailing_slash():
    urls = build_urls("http://localhost:8080/")

    assert urls["LOGIN"] == "http://localhost:8080/"
    assert urls["LOGIN_INDEX"] == "http://localhost:8080/index.html"
    assert urls["INVENTORY"] == "http://localhost:8080/inventory.html"
    assert urls["CART"] == "http://localhost:8080/cart.html"


def test_default_urls_point_at_saucedemo():
    assert URLS["BASE"] == "https://www.saucedemo.com"
    assert URLS["LOGIN"] == "https://www.saucedemo.com/"


def test_get_test_data_is_built_once():
    assert get_test_data() is get_test_data()
    data = get_test_data()
    assert data.standard_user is data.valid_user
    assert data.urls is URLS


def test_get_test_data_for_other_deployment():
    data = get_test_data("http://localhost:8080")

    assert data.urls["INVENTORY"] == "http://localhost:8080/inventory.html"
    assert data.error_messages is ERROR_MESSAGES
