import asyncio

import pytest

from conftest import FakeSession
from jobboard.render.pipeline import (
    InvalidTransition,
    RenderJob,
    RenderPipeline,
    RenderState,
)

HAPPY_PATH = [
    RenderState.CREATED,
    RenderState.ANNOUNCED,
    RenderState.NAVIGATED,
    RenderState.READY,
    RenderState.CAPTURED,
    RenderState.DONE,
]


async def test_successful_render_visits_every_state(fake_session):
    job = RenderJob(url="https://example.com")
    pipeline = RenderPipeline(
        fake_session, user_agent="WebScraper 1.0", navigation_timeout=1000, ready_timeout=500
    )

    result = await pipeline.run(job)

    assert result is job
    assert job.state is RenderState.DONE
    assert job.history == HAPPY_PATH
    assert job.pdf == b"%PDF-1.4 fake"
    assert job.error is None
    assert job.elapsed is not None and job.elapsed >= 0


async def test_commands_are_issued_in_order(fake_session):
    job = RenderJob(url="https://example.com", selector="#main")
    await RenderPipeline(
        fake_session, user_agent="WebScraper 1.0", navigation_timeout=1000, ready_timeout=500
    ).run(job)

    assert fake_session.calls == [
        ("set_user_agent", "WebScraper 1.0"),
        ("navigate", "https://example.com", 1000),
        ("wait_visible", "#main", 500),
        ("print_to_pdf",),
    ]


async def test_navigation_failure_never_reaches_ready():
    session = FakeSession(fail_on="navigate")
    job = RenderJob(url="https://unreachable.invalid")

    await RenderPipeline(session).run(job)

    assert job.state is RenderState.FAILED
    assert job.history == [RenderState.CREATED, RenderState.ANNOUNCED, RenderState.FAILED]
    assert RenderState.READY not in job.history
    assert job.failed_step is RenderState.ANNOUNCED
    assert "navigate exploded" in job.error
    assert job.pdf is None
    # Nothing after the failed step is attempted
    assert [call[0] for call in session.calls] == ["set_user_agent", "navigate"]


@pytest.mark.parametrize(
    "command, failed_step",
    [
        ("set_user_agent", RenderState.CREATED),
        ("wait_visible", RenderState.NAVIGATED),
        ("print_to_pdf", RenderState.READY),
    ],
)
async def test_any_step_failure_is_terminal(command, failed_step):
    job = RenderJob(url="https://example.com")
    await RenderPipeline(FakeSession(fail_on=command)).run(job)

    assert job.state is RenderState.FAILED
    assert job.failed_step is failed_step
    assert job.history[-1] is RenderState.FAILED
    assert job.history.count(RenderState.FAILED) == 1


async def test_readiness_timeout_fails_the_job():
    class SlowSession(FakeSession):
        async def wait_visible(self, selector, timeout):
            raise asyncio.TimeoutError(f"{selector} not visible after {timeout}ms")

    job = RenderJob(url="https://example.com", selector="footer")
    await RenderPipeline(SlowSession(), ready_timeout=10).run(job)

    assert job.state is RenderState.FAILED
    assert job.failed_step is RenderState.NAVIGATED
    assert "footer not visible after 10ms" in job.error


async def test_default_timeouts_and_identity_come_from_settings(fake_session, monkeypatch):
    from jobboard.config.settings import settings

    monkeypatch.setattr(settings, "USER_AGENT", "Custom/2.0")
    monkeypatch.setattr(settings, "NAVIGATION_TIMEOUT", 1234)
    monkeypatch.setattr(settings, "READY_TIMEOUT", 56)

    await RenderPipeline(fake_session).run(RenderJob(url="https://example.com"))

    assert fake_session.calls[0] == ("set_user_agent", "Custom/2.0")
    assert fake_session.calls[1][2] == 1234
    assert fake_session.calls[2][2] == 56


def test_states_cannot_be_skipped():
    job = RenderJob(url="https://example.com")
    with pytest.raises(InvalidTransition):
        job.advance(RenderState.NAVIGATED)
    assert job.state is RenderState.CREATED


def test_terminal_states_are_final():
    job = RenderJob(url="https://example.com")
    job.fail("boom")
    with pytest.raises(InvalidTransition):
        job.fail("again")
    with pytest.raises(InvalidTransition):
        job.advance(RenderState.ANNOUNCED)
