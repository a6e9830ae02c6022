"""
Render Service

Binds the pipeline to a real browser: acquires a scoped session, runs the
job under the concurrency cap, and persists the PDF on success.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from playwright.async_api import Error as PlaywrightError

from jobboard.browser.manager import BrowserManager
from jobboard.browser.user_agent import UserAgentProvider
from jobboard.config.settings import settings
from jobboard.core.rate_limit import render_limiter
from jobboard.render.pipeline import (
    TERMINAL_STATES,
    RenderError,
    RenderJob,
    RenderPipeline,
)

logger = logging.getLogger(__name__)


async def render_url(url: str, selector: Optional[str] = None) -> RenderJob:
    """
    Render a URL to PDF bytes. Never raises for browser failures;
    inspect job.state / job.error instead.
    """
    job = RenderJob(url=url, selector=selector or settings.READY_SELECTOR)

    async with render_limiter:
        try:
            async with BrowserManager.session() as session:
                pipeline = RenderPipeline(session, user_agent=UserAgentProvider.get())
                await pipeline.run(job)
        except (PlaywrightError, OSError) as e:
            # The channel itself is unavailable (launch/connect/context failure)
            logger.error(f"Browser session unavailable for {url}: {e}")
            if job.state not in TERMINAL_STATES:
                job.fail(f"browser session unavailable: {e}")

    return job


async def render_to_file(
    url: str,
    output_path: Optional[Union[str, Path]] = None,
    selector: Optional[str] = None,
) -> RenderJob:
    """
    Render a URL and write the PDF to output_path (default: OUTPUT_PATH).
    Nothing is written when the job fails.
    """
    path = Path(output_path) if output_path is not None else settings.OUTPUT_PATH
    job = await render_url(url, selector=selector)

    if not job.succeeded:
        return job

    try:
        await asyncio.to_thread(path.write_bytes, job.pdf or b"")
    except OSError as e:
        logger.exception(f"Failed to write {path}: {e}")
        raise RenderError(f"Failed to write PDF to {path}: {e}") from e

    logger.info(f"Saved {url} to {path}")
    return job
