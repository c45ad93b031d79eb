"""Ranking output: one scored, explained result per job."""

from pydantic import BaseModel, Field


class MatchResult(BaseModel):
    job_id: str
    score: float = Field(0.0, ge=0.0, le=100.0)
    matched_skills: list[str] = []  # sorted intersection of both skill sets
    explanation: str = ""  # e.g. "skill_jaccard=0.600 experience=0.000 education=0.000"
