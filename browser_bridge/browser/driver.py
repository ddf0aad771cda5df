"""Automation driver backed by Playwright Chromium."""

from typing import Any, Protocol

from playwright.async_api import Browser, Playwright, async_playwright

from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)


class AutomationDriver(Protocol):
    """Launches browsers that expose contexts and pages."""

    async def launch(self, headless: bool, args: list[str]) -> Any: ...

    async def stop(self) -> None: ...


class PlaywrightDriver:
    """Launches Chromium through Playwright, starting Playwright on first use."""

    def __init__(self) -> None:
        self._playwright: Playwright | None = None

    async def launch(self, headless: bool, args: list[str]) -> Browser:
        """
        Launch a Chromium process.

        Args:
            headless: Run without a visible window
            args: Extra Chromium command line arguments

        Returns:
            Connected Playwright Browser
        """
        if self._playwright is None:
            self._playwright = await async_playwright().start()

        logger.debug("Launching Chromium", headless=headless, args=args)
        return await self._playwright.chromium.launch(headless=headless, args=args)

    async def stop(self) -> None:
        """Stop Playwright if it was started."""
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
