"""Headless browser lifecycle"""

import logging
from typing import Optional

from playwright.async_api import async_playwright

from ..config import Config, config
from .page import PlaywrightPage

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--window-size=1920,1080",
    "--disable-dev-shm-usage",
]


class BrowserSession:
    """One browser and one page, owned by a single extraction call

    Usage:
        async with BrowserSession() as page:
            await page.goto(...)

    The browser is closed and Playwright stopped on exit, whether the body
    succeeded or raised.
    """

    def __init__(self, settings: Optional[Config] = None):
        self.settings = settings or config
        self.browser = None
        self.context = None
        self._playwright = None

    async def __aenter__(self) -> PlaywrightPage:
        self._playwright = await async_playwright().start()
        try:
            launch_opts = {"headless": self.settings.headless, "args": LAUNCH_ARGS}
            if self.settings.browser_executable_path:
                launch_opts["executable_path"] = self.settings.browser_executable_path

            self.browser = await self._playwright.chromium.launch(**launch_opts)
            self.context = await self.browser.new_context(
                viewport={
                    "width": self.settings.viewport_width,
                    "height": self.settings.viewport_height,
                },
                user_agent=self.settings.user_agent,
            )
            page = await self.context.new_page()
        except BaseException:
            await self._teardown()
            raise

        logger.debug("Browser session started")
        return PlaywrightPage(page)

    async def __aexit__(self, *args) -> None:
        await self._teardown()

    async def _teardown(self) -> None:
        try:
            if self.browser:
                await self.browser.close()
        finally:
            self.browser = None
            self.context = None
            if self._playwright:
                await self._playwright.stop()
                self._playwright = None
        logger.debug("Browser session closed")
