"""A job posting to be ranked against a candidate."""

from pydantic import BaseModel, Field, field_validator


class JobPosting(BaseModel):
    """Job with either declared skills or a description to infer them from.

    Non-empty ``required_skills`` take precedence over ``description``.
    """
    id: str
    title: str
    description: str = Field(..., max_length=10000)
    required_skills: list[str] = []

    @field_validator("required_skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
