"""
Shared headless Chromium for the whole process
"""
import asyncio
import logging
from typing import Optional

from playwright.async_api import Browser, Playwright, async_playwright

from src import config

logger = logging.getLogger(__name__)


class BrowserManager:
    """Launches Chromium on first use and hands out the same instance afterwards."""

    def __init__(self, headless: bool = config.HEADLESS, args: Optional[list] = None):
        self.headless = headless
        self.args = list(config.BROWSER_ARGS if args is None else args)
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._browser is not None

    async def get_browser(self) -> Browser:
        async with self._lock:
            if self._browser is None:
                logger.info("Launching browser (headless=%s)", self.headless)
                self._playwright = await async_playwright().start()
                try:
                    self._browser = await self._playwright.chromium.launch(
                        headless=self.headless,
                        args=self.args,
                    )
                except Exception:
                    await self._playwright.stop()
                    self._playwright = None
                    raise
        return self._browser

    async def close(self):
        """Close the browser and stop the Playwright driver, if they were started."""
        async with self._lock:
            if self._browser is not None:
                logger.info("Closing browser")
                await self._browser.close()
                self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
