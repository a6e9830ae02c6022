"""
Render Pipeline

Turns one URL into a PDF by driving a browser session through four
strictly ordered steps:

    created -> announced -> navigated -> ready -> captured -> done

Any step error moves the job to the single terminal state "failed".
There are no retries: a failed step fails the whole job, and the error is
recorded on the job instead of being raised.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

from jobboard.browser.session import BrowserSession
from jobboard.config.settings import settings

logger = logging.getLogger(__name__)


class RenderState(str, Enum):
    CREATED = "created"
    ANNOUNCED = "announced"
    NAVIGATED = "navigated"
    READY = "ready"
    CAPTURED = "captured"
    DONE = "done"
    FAILED = "failed"


# Forward edges only; FAILED is reachable from any non-terminal state.
NEXT_STATE = {
    RenderState.CREATED: RenderState.ANNOUNCED,
    RenderState.ANNOUNCED: RenderState.NAVIGATED,
    RenderState.NAVIGATED: RenderState.READY,
    RenderState.READY: RenderState.CAPTURED,
    RenderState.CAPTURED: RenderState.DONE,
}

TERMINAL_STATES = {RenderState.DONE, RenderState.FAILED}


class RenderError(Exception):
    """Raised when a render job cannot be completed or persisted."""


class InvalidTransition(RenderError):
    """Raised on an attempt to skip a state or leave a terminal state."""


@dataclass
class RenderJob:
    url: str
    selector: str = "body"
    state: RenderState = RenderState.CREATED
    history: List[RenderState] = field(default_factory=lambda: [RenderState.CREATED])
    pdf: Optional[bytes] = None
    error: Optional[str] = None
    failed_step: Optional[RenderState] = None
    elapsed: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.state is RenderState.DONE

    def advance(self, target: RenderState) -> None:
        if NEXT_STATE.get(self.state) is not target:
            raise InvalidTransition(f"Cannot move from {self.state.value} to {target.value}")
        self.state = target
        self.history.append(target)

    def fail(self, error: str) -> None:
        if self.state in TERMINAL_STATES:
            raise InvalidTransition(f"Job already finished as {self.state.value}")
        self.failed_step = self.state
        self.error = error
        self.state = RenderState.FAILED
        self.history.append(RenderState.FAILED)


class RenderPipeline:
    """
    Runs one RenderJob against one session.
    """

    def __init__(
        self,
        session: BrowserSession,
        user_agent: Optional[str] = None,
        navigation_timeout: Optional[int] = None,
        ready_timeout: Optional[int] = None,
    ):
        self.session = session
        self.user_agent = user_agent or settings.USER_AGENT
        self.navigation_timeout = (
            navigation_timeout if navigation_timeout is not None else settings.NAVIGATION_TIMEOUT
        )
        self.ready_timeout = ready_timeout if ready_timeout is not None else settings.READY_TIMEOUT

    def steps(self) -> List[Tuple[RenderState, Callable[[RenderJob], Awaitable[None]]]]:
        return [
            (RenderState.ANNOUNCED, self._announce),
            (RenderState.NAVIGATED, self._navigate),
            (RenderState.READY, self._await_ready),
            (RenderState.CAPTURED, self._capture),
        ]

    async def run(self, job: RenderJob) -> RenderJob:
        """
        Execute every step in order. Returns the job in DONE or FAILED.
        """
        start = time.perf_counter()
        logger.info(f"Rendering {job.url} (ready selector: {job.selector!r})")

        for target, step in self.steps():
            try:
                await step(job)
            except Exception as e:
                job.elapsed = time.perf_counter() - start
                job.fail(f"{step.__name__.lstrip('_')} step failed: {e}")
                logger.error(
                    f"Render of {job.url} failed after {job.failed_step.value}: {e}"
                )
                return job
            job.advance(target)

        job.elapsed = time.perf_counter() - start
        job.advance(RenderState.DONE)
        logger.info(f"Took: {job.elapsed:f} secs ({len(job.pdf or b'')} bytes) for {job.url}")
        return job

    async def _announce(self, job: RenderJob) -> None:
        await self.session.set_user_agent(self.user_agent)

    async def _navigate(self, job: RenderJob) -> None:
        await self.session.navigate(job.url, timeout=self.navigation_timeout)

    async def _await_ready(self, job: RenderJob) -> None:
        # Bounded: a selector that never shows up must not hang the request
        await self.session.wait_visible(job.selector, timeout=self.ready_timeout)

    async def _capture(self, job: RenderJob) -> None:
        job.pdf = await self.session.print_to_pdf()
