# ================================================================================
# Bounded Wait Primitives
# ================================================================================
#
# Two helpers around Playwright's own bounded waits:
#
#   probe(condition, timeout)   -> bool   never raises on timeout
#   require(condition, timeout) -> T      re-raises the timeout
#
# A condition is an async callable receiving the timeout in milliseconds,
# e.g. `lambda t: locator.wait_for(state="visible", timeout=t)`.
#
# Only Playwright's TimeoutError is converted by `probe`; every other error
# propagates. Nothing here retries.
#
# Usage:
#   visible = await probe(lambda t: banner.wait_for(timeout=t), 3000, "error banner")
#   text = await require(read_banner, 10000, "error banner text")
#
# ================================================================================

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


T = TypeVar("T")

Condition = Callable[[float], Awaitable[Any]]


async def probe(
    condition: Condition,
    timeout: float,
    description: str = "condition",
) -> bool:
    """
    Wait for a condition and report whether it held within the time budget.

    Args:
        condition: Async callable receiving the timeout in milliseconds
        timeout: Time budget in milliseconds
        description: Human-readable description for logging

    Returns:
        True if the condition completed, False if it timed out
    """
    try:
        await condition(timeout)
    except PlaywrightTimeoutError:
        logger.debug(f"Probe negative after {timeout}ms: {description}")
        return False
    return True


async def require(
    condition: Callable[[float], Awaitable[T]],
    timeout: float,
    description: str = "condition",
) -> T:
    """
    Wait for a condition that must hold, returning its result.

    Raises:
        playwright.async_api.TimeoutError: If the condition did not hold in time
    """
    try:
        return await condition(timeout)
    except PlaywrightTimeoutError:
        logger.error(f"Timed out after {timeout}ms waiting for: {description}")
        raise


__all__ = [
    "Condition",
    "PlaywrightTimeoutError",
    "probe",
    "require",
]
