"""
Browser Launch Module

Either attaches to a remote browser over the Chrome DevTools Protocol or
launches a local headless Chromium.
"""

import logging
from playwright.async_api import Browser, Playwright

from jobboard.config.settings import settings

logger = logging.getLogger(__name__)

# Minimal launch arguments for running inside containers
LAUNCH_ARGS = [
    "--disable-dev-shm-usage",
    "--no-sandbox",
    "--disable-gpu",
    "--hide-scrollbars",
    "--mute-audio",
]


async def create_browser(playwright: Playwright) -> Browser:
    """
    Return a Browser for the configured browser-control channel.

    Args:
        playwright: Playwright instance

    Returns:
        Browser instance
    """
    if settings.BROWSER_CDP_URL:
        browser = await playwright.chromium.connect_over_cdp(
            settings.BROWSER_CDP_URL,
            timeout=settings.NAVIGATION_TIMEOUT,
        )
        logger.info(f"Connected to remote browser at {settings.BROWSER_CDP_URL}")
        return browser

    browser = await playwright.chromium.launch(
        headless=settings.HEADLESS,
        args=LAUNCH_ARGS,
    )
    logger.info(f"Browser launched (Chromium, Headless: {settings.HEADLESS})")
    return browser
