from pydantic import BaseModel, Field, StrictInt

from models.schemas.candidate import Candidate
from models.schemas.job_posting import JobPosting


class MatchRequest(BaseModel):
    candidate: Candidate
    jobs: list[JobPosting] = Field(default_factory=list, max_length=500)
    top_k: StrictInt | None = Field(None, description="Return only the best k jobs; omit for all")
