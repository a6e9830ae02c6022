"""
Browser Context Factory

Every render job gets its own context, so cookies, storage and the
announced identity never leak between requests.
"""

import logging
from playwright.async_api import Browser, BrowserContext

from jobboard.config.settings import settings

logger = logging.getLogger(__name__)


async def create_context(browser: Browser) -> BrowserContext:
    """
    Create an isolated browser context with minimal overrides.

    The user agent is deliberately not set here: it is announced on the
    page by the render pipeline before navigation.

    Args:
        browser: Browser instance

    Returns:
        BrowserContext instance
    """
    context = await browser.new_context(
        locale="en-US",
        ignore_https_errors=settings.IGNORE_HTTPS_ERRORS,
    )
    logger.debug("Browser context created")
    return context
