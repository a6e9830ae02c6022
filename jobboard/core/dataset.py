"""
Dataset Loader

Reads the read-only JSON snapshot of job postings into memory.
The snapshot is a JSON array of objects using camelCase keys:
id, position, company, description, skillsRequired, location, employmentType.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jobboard.config.settings import settings
from jobboard.core.models import Job

logger = logging.getLogger(__name__)

STRING_FIELDS = {
    "position": "position",
    "company": "company",
    "description": "description",
    "location": "location",
    "employmentType": "employment_type",
}


class DatasetError(Exception):
    """Raised when the snapshot is missing, unreadable or malformed."""


def parse_job(record: Any, index: int = 0) -> Job:
    """
    Build a Job from one decoded snapshot entry.
    Missing text fields default to empty values; wrong types are rejected.
    """
    if not isinstance(record, dict):
        raise DatasetError(f"Record {index} is not an object")

    job_id = record.get("id")
    # bool is a subclass of int, but true/false is never a valid identifier
    if isinstance(job_id, bool) or not isinstance(job_id, int):
        raise DatasetError(f"Record {index} has an invalid id: {job_id!r}")

    values: Dict[str, Any] = {"id": job_id}
    for key, attr in STRING_FIELDS.items():
        value = record.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise DatasetError(f"Record {index} field '{key}' must be a string")
        values[attr] = value

    skills = record.get("skillsRequired")
    if skills is None:
        skills = []
    if not isinstance(skills, list) or not all(isinstance(s, str) for s in skills):
        raise DatasetError(
            f"Record {index} field 'skillsRequired' must be a list of strings"
        )
    values["skills_required"] = tuple(skills)

    return Job(**values)


def load_jobs(path: Optional[Union[str, Path]] = None) -> List[Job]:
    """
    Load every job record from the snapshot file, in file order.
    """
    data_file = Path(path) if path is not None else settings.DATA_FILE

    try:
        with open(data_file, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        logger.error(f"Failed to open snapshot {data_file}: {e}")
        raise DatasetError(f"Failed to open job snapshot: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse snapshot {data_file}: {e}")
        raise DatasetError(f"Failed to parse job snapshot: {e}") from e

    if not isinstance(raw, list):
        raise DatasetError("Job snapshot must be a JSON array")

    jobs = [parse_job(record, i) for i, record in enumerate(raw)]
    logger.debug(f"Loaded {len(jobs)} jobs from {data_file}")
    return jobs
