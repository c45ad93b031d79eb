"""Core matching contracts shared by the services and the API."""

from models.schemas.candidate import Candidate
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult

__all__ = [
    "Candidate",
    "JobPosting",
    "MatchResult",
]
