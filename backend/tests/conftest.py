"""Shared test fixtures."""

import pytest

from services.skill_vocabulary import SkillVocabulary


@pytest.fixture
def small_vocabulary() -> SkillVocabulary:
    """A tiny vocabulary independent of the built-in table."""
    return SkillVocabulary.from_mapping({
        "rust": ["rust"],
        "docker": ["docker"],
        "postgresql": ["postgresql", "postgres"],
        "python": ["python"],
        "javascript": ["javascript", "js"],
        "react": ["react"],
    })
