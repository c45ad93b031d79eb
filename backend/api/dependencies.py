"""Shared dependencies for API routes."""

from services.skill_vocabulary import SkillVocabulary, get_vocabulary


def get_skill_vocabulary() -> SkillVocabulary:
    return get_vocabulary()
