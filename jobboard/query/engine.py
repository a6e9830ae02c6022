from typing import Any, List, Optional, Sequence

from jobboard.core.models import Job


class QueryEngine:
    """
    Resolves the two read operations against one dataset snapshot.
    Pure: never mutates the snapshot and never raises on lookups.
    """

    def __init__(self, jobs: Sequence[Job]):
        self._jobs = tuple(jobs)

    def list_all(self) -> List[Job]:
        """Every record, in snapshot order."""
        return list(self._jobs)

    def get_by_id(self, job_id: Any) -> Optional[Job]:
        """
        First record whose id equals job_id, or None.
        Non-integer ids never match.
        """
        if isinstance(job_id, bool) or not isinstance(job_id, int):
            return None
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None
