from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Job:
    """
    Canonical Job model representing one posting of the dataset snapshot.
    """

    id: int
    position: str = ""
    company: str = ""
    description: str = ""
    skills_required: Tuple[str, ...] = field(default_factory=tuple)
    location: str = ""
    employment_type: str = ""

