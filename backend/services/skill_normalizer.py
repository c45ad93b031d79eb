"""Skill normalization: free text or declared skill lists -> canonical SkillSet.

Both candidates and jobs go through the same vocabulary, so the two sides
of a match always speak the same identifiers.
"""

import logging
from collections.abc import Iterable

from models.schemas.job_posting import JobPosting
from services.skill_vocabulary import SkillVocabulary, _normalize_token, get_vocabulary

logger = logging.getLogger(__name__)

SkillSet = frozenset[str]


def normalize(text: str, vocabulary: SkillVocabulary | None = None) -> SkillSet:
    """Extract the canonical skills mentioned anywhere in ``text``.

    A skill is present when any of its patterns occurs at least once as a
    whole token, case-insensitively. A mention that sits inside a longer
    mention of another skill does not count: "js" in "Node.js" or "node js"
    is Node.js only. Empty or punctuation-only text yields an empty set.
    """
    if not text or not text.strip():
        return frozenset()

    vocab = vocabulary if vocabulary is not None else get_vocabulary()
    spans = [
        (canonical, m.start(), m.end())
        for canonical, matcher in vocab.matchers
        for m in matcher.finditer(text)
    ]
    return frozenset(
        canonical
        for canonical, start, end in spans
        if not _inside_other_skill(canonical, start, end, spans)
    )


def _inside_other_skill(
    canonical: str, start: int, end: int, spans: list[tuple[str, int, int]]
) -> bool:
    return any(
        other != canonical and s <= start and end <= e and e - s > end - start
        for other, s, e in spans
    )


def normalize_declared(
    skills: Iterable[str], vocabulary: SkillVocabulary | None = None
) -> SkillSet:
    """Normalize an explicit skill list as literal identifiers.

    Entries are lowercased and whitespace-collapsed; known aliases resolve to
    their canonical id ("JS" -> "javascript"). Unknown entries are kept
    verbatim and blank entries dropped.
    """
    vocab = vocabulary if vocabulary is not None else get_vocabulary()
    found: set[str] = set()
    for skill in skills:
        token = _normalize_token(skill)
        if token:
            found.add(vocab.canonical_for(token) or token)
    return frozenset(found)


def resolve_job_skills(
    job: JobPosting, vocabulary: SkillVocabulary | None = None
) -> SkillSet:
    """Declared ``required_skills`` win; otherwise infer from the description."""
    declared = normalize_declared(job.required_skills, vocabulary)
    if declared:
        return declared
    return normalize(job.description, vocabulary)
