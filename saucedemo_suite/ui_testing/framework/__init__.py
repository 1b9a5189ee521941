"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - config_loader: YAML/env configuration and typed UI settings
    - driver: capability protocols page objects are typed against
    - waits: bounded wait primitives (probe / require)
    - page_base: base page object for common operations
    - browser_manager: browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, UiSettings
from .driver import ElementHandle, PageDriver
from .waits import PlaywrightTimeoutError, probe, require
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "ElementHandle",
    "PageDriver",
    "PlaywrightTimeoutError",
    "probe",
    "require",
    "BasePage",
    "BrowserManager",
]
