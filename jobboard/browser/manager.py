import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    Playwright,
)
from jobboard.browser.launch import create_browser
from jobboard.browser.context import create_context
from jobboard.browser.session import BrowserSession

logger = logging.getLogger(__name__)


class BrowserManager:
    """
    Manages the lifecycle of the Playwright driver and browser.
    The browser is shared process-wide; sessions are not.
    """

    _playwright: Optional[Playwright] = None
    _browser: Optional[Browser] = None
    # Guards concurrent first-time launches from parallel render jobs
    _lock = asyncio.Lock()

    @classmethod
    async def initialize(cls):
        """
        Starts Playwright and the browser if not already running.
        """
        async with cls._lock:
            if cls._playwright is None:
                cls._playwright = await async_playwright().start()
                logger.info("Playwright started.")

            if cls._browser is None or not cls._browser.is_connected():
                cls._browser = await create_browser(cls._playwright)

    @classmethod
    async def get_browser(cls) -> Browser:
        """
        Returns the shared browser. Initializes if necessary.
        """
        if cls._browser is None or not cls._browser.is_connected():
            await cls.initialize()
        return cls._browser

    @classmethod
    @asynccontextmanager
    async def session(cls) -> AsyncIterator[BrowserSession]:
        """
        Yields a fresh, isolated session (own context and page).
        The context is closed on every exit path.
        """
        browser = await cls.get_browser()
        context = await create_context(browser)
        try:
            page = await context.new_page()
            yield BrowserSession(context, page)
        finally:
            await context.close()
            logger.debug("Browser context closed.")

    @classmethod
    async def close(cls):
        """
        Closes the browser and stops Playwright.
        """
        if cls._browser:
            await cls._browser.close()
            cls._browser = None
            logger.info("Browser closed.")

        if cls._playwright:
            await cls._playwright.stop()
            cls._playwright = None
            logger.info("Playwright stopped.")
