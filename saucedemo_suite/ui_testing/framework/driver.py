"""
================================================================================
Driver Capability Protocols
================================================================================

Structural types describing the part of the async Playwright API that page
objects rely on. Page objects are typed against these protocols instead of
`playwright.async_api.Page`, so an in-memory fake can stand in for a browser
in unit tests.

A real `playwright.async_api.Page` / `Locator` satisfies both protocols.

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol


class ElementHandle(Protocol):
    """A lazily-resolved element reference (Playwright `Locator` subset)."""

    async def fill(self, value: str) -> None: ...

    async def clear(self) -> None: ...

    async def click(self) -> None: ...

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None: ...

    async def text_content(self) -> Optional[str]: ...

    async def all_text_contents(self) -> List[str]: ...

    async def select_option(self, value: Any = None) -> List[str]: ...


class PageDriver(Protocol):
    """A browser page (Playwright `Page` subset)."""

    @property
    def url(self) -> str: ...

    def locator(self, selector: str) -> ElementHandle: ...

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None) -> Any: ...

    async def wait_for_url(self, url: str, timeout: Optional[float] = None) -> None: ...

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes: ...


__all__ = [
    "ElementHandle",
    "PageDriver",
]
