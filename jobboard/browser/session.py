"""
Browser Session

Thin adapter over one Playwright page exposing the four browser-control
commands the render pipeline issues. Each call returns once the browser
has acknowledged the command.
"""

from typing import Optional
from playwright.async_api import BrowserContext, CDPSession, Page


class BrowserSession:
    def __init__(self, context: BrowserContext, page: Page):
        self.context = context
        self.page = page
        self._cdp: Optional[CDPSession] = None

    async def set_user_agent(self, user_agent: str) -> None:
        """
        Override the identity via CDP Emulation.setUserAgentOverride.
        The CDP session stays attached: detaching it drops the override.
        """
        if self._cdp is None:
            self._cdp = await self.context.new_cdp_session(self.page)
        await self._cdp.send("Emulation.setUserAgentOverride", {"userAgent": user_agent})

    async def navigate(self, url: str, timeout: int) -> None:
        await self.page.goto(url, timeout=timeout)

    async def wait_visible(self, selector: str, timeout: int) -> None:
        await self.page.wait_for_selector(selector, state="visible", timeout=timeout)

    async def print_to_pdf(self) -> bytes:
        return await self.page.pdf(print_background=True)
