"""Candidate submitted for matching: a name and free-form text."""

from pydantic import BaseModel, Field


class Candidate(BaseModel):
    name: str = ""
    raw_text: str = Field(..., max_length=50000, description="Plain text resume content")
