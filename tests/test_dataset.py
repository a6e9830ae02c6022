import json

import pytest

from jobboard.core.dataset import DatasetError, load_jobs, parse_job
from jobboard.core.models import Job


def test_load_jobs_keeps_file_order(data_file):
    jobs = load_jobs(data_file)

    assert [job.id for job in jobs] == [1, 2]
    assert jobs[0] == Job(
        id=1,
        position="Engineer",
        company="Acme",
        description="Builds things",
        skills_required=("Python", "SQL"),
        location="Remote",
        employment_type="Full-time",
    )


def test_missing_optional_fields_default_to_empty():
    job = parse_job({"id": 7})
    assert job.position == ""
    assert job.skills_required == ()
    assert job.employment_type == ""


def test_empty_snapshot(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[]", encoding="utf-8")
    assert load_jobs(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(DatasetError, match="Failed to open"):
        load_jobs(tmp_path / "nope.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(DatasetError, match="Failed to parse"):
        load_jobs(path)


def test_non_array_snapshot_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")
    with pytest.raises(DatasetError, match="JSON array"):
        load_jobs(path)


@pytest.mark.parametrize(
    "record",
    [
        {"position": "No id"},
        {"id": "1"},
        {"id": True},
        {"id": 1, "position": 5},
        {"id": 1, "skillsRequired": "Python"},
        {"id": 1, "skillsRequired": ["Python", 3]},
        "not an object",
    ],
)
def test_malformed_records_raise(record):
    with pytest.raises(DatasetError):
        parse_job(record)


def test_jobs_are_immutable(data_file):
    job = load_jobs(data_file)[0]
    with pytest.raises(AttributeError):
        job.position = "Changed"
