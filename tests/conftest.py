"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


@pytest.fixture
def sample_jobs() -> List[Dict[str, Any]]:
    """Two postings at the same company, as stored in the snapshot."""
    return [
        {
            "id": 1,
            "position": "Engineer",
            "company": "Acme",
            "description": "Builds things",
            "skillsRequired": ["Python", "SQL"],
            "location": "Remote",
            "employmentType": "Full-time",
        },
        {
            "id": 2,
            "position": "Designer",
            "company": "Acme",
            "description": "Draws things",
            "skillsRequired": ["Figma"],
            "location": "Berlin",
            "employmentType": "Part-time",
        },
    ]


@pytest.fixture
def data_file(tmp_path: Path, sample_jobs) -> Path:
    """Snapshot file holding sample_jobs."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_jobs), encoding="utf-8")
    return path


class FakeSession:
    """
    Records the browser-control commands issued by the pipeline.
    fail_on names a command that raises instead of succeeding.
    """

    def __init__(self, pdf: bytes = b"%PDF-1.4 fake", fail_on: Optional[str] = None):
        self.pdf = pdf
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def _record(self, name: str, *args):
        self.calls.append((name,) + args)
        if self.fail_on == name:
            raise RuntimeError(f"{name} exploded")

    async def set_user_agent(self, user_agent: str) -> None:
        self._record("set_user_agent", user_agent)

    async def navigate(self, url: str, timeout: int) -> None:
        self._record("navigate", url, timeout)

    async def wait_visible(self, selector: str, timeout: int) -> None:
        self._record("wait_visible", selector, timeout)

    async def print_to_pdf(self) -> bytes:
        self._record("print_to_pdf")
        return self.pdf


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
