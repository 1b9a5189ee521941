"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with default values
    - Typed UI settings (base URL, browser, timeouts) for page objects

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (<repo>/config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://www.saucedemo.com")
        'https://www.saucedemo.com'

        >>> config.get("timeouts.element", 10000)
        10000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.headless -> UI_HEADLESS
        - timeouts.error_probe -> TIMEOUTS_ERROR_PROBE
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Singleton pattern - return existing instance if available.

        Configuration is loaded only once per process.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "ui", "timeouts")

        Returns:
            Section dictionary or empty dict if not found
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class UiSettings:
    """
    Typed view of the UI section of the configuration.

    All timeouts are in milliseconds, matching Playwright.
    """
    base_url: str = DEFAULT_BASE_URL
    browser: str = "chromium"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720
    navigation_timeout: int = 30000
    element_timeout: int = 10000
    error_probe_timeout: int = 3000
    inventory_url_timeout: int = 5000
    post_login_marker_timeout: int = 3000

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UiSettings":
        """Build settings from a ConfigLoader, falling back to the dataclass defaults."""
        config = config or ConfigLoader()
        defaults = cls()
        base_url = str(config.get("ui.base_url", defaults.base_url)).rstrip("/")
        browser = str(config.get("ui.browser", defaults.browser)).lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(f"Unsupported browser type: {browser}")
        return cls(
            base_url=base_url,
            browser=browser,
            headless=config.get("ui.headless", defaults.headless),
            viewport_width=config.get("ui.viewport_width", defaults.viewport_width),
            viewport_height=config.get("ui.viewport_height", defaults.viewport_height),
            navigation_timeout=config.get("timeouts.navigation", defaults.navigation_timeout),
            element_timeout=config.get("timeouts.element", defaults.element_timeout),
            error_probe_timeout=config.get("timeouts.error_probe", defaults.error_probe_timeout),
            inventory_url_timeout=config.get("timeouts.inventory_url", defaults.inventory_url_timeout),
            post_login_marker_timeout=config.get(
                "timeouts.post_login_marker", defaults.post_login_marker_timeout
            ),
        )

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "DEFAULT_BASE_URL",
    "SUPPORTED_BROWSERS",
]
