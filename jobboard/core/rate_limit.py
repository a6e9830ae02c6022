import asyncio
import logging

from jobboard.config.settings import settings

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Caps concurrent work using asyncio.Semaphore.
    """

    def __init__(self, max_concurrent: int):
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def acquire(self):
        await self._semaphore.acquire()

    def release(self):
        self._semaphore.release()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()


# Limits how many browser sessions are open at once
render_limiter = RateLimiter(settings.MAX_CONCURRENT_RENDERS)
