"""
Repository-level pytest configuration.

Why this exists:
  - Put the repo root on sys.path so `saucedemo_suite` imports without install
  - Provide session-wide settings and test data shared by unit and e2e tests

Values come from `config/config.yaml`, overridable through environment
variables (UI_BASE_URL, UI_BROWSER, UI_HEADLESS, TIMEOUTS_*).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from saucedemo_suite.ui_testing.data import SauceDemoData, get_test_data
from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader, UiSettings


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session")
def ui_settings() -> UiSettings:
    """Typed UI settings loaded once per session."""
    return UiSettings.from_config(ConfigLoader())


@pytest.fixture(scope="session")
def test_data(ui_settings: UiSettings) -> SauceDemoData:
    """Read-only SauceDemo fixture values for the configured deployment."""
    return get_test_data(ui_settings.base_url)
