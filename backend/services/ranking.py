"""Ranking engine: score every job against a candidate skill set and order them.

Pure and stateless; safe to call from concurrent request handlers.
"""

import logging
from collections.abc import Sequence

from models.schemas.candidate import Candidate
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult
from services.errors import InvalidTopK
from services.scoring import DEFAULT_WEIGHTING, ScoringContext, WeightingConfig
from services.skill_normalizer import normalize, resolve_job_skills
from services.skill_vocabulary import SkillVocabulary

logger = logging.getLogger(__name__)

SCORE_DECIMALS = 3


def _validate_top_k(top_k: int | None) -> None:
    if top_k is not None and top_k < 0:
        raise InvalidTopK(top_k)


def format_explanation(sub_scores: dict[str, float]) -> str:
    """Render sub-scores as ``name=0.000`` pairs, space separated, in order."""
    return " ".join(f"{name}={format(value, '.3f')}" for name, value in sub_scores.items())


def score_job(
    candidate_skills: frozenset[str],
    job: JobPosting,
    *,
    vocabulary: SkillVocabulary | None = None,
    weighting: WeightingConfig = DEFAULT_WEIGHTING,
) -> MatchResult:
    """Score a single job against the candidate's skills."""
    job_skills = resolve_job_skills(job, vocabulary)
    context = ScoringContext(candidate_skills=candidate_skills, job_skills=job_skills, job=job)
    sub_scores = weighting.evaluate(context)

    return MatchResult(
        job_id=job.id,
        score=round(weighting.composite(sub_scores), SCORE_DECIMALS),
        matched_skills=sorted(candidate_skills & job_skills),
        explanation=format_explanation(sub_scores),
    )


def rank(
    candidate_skills: frozenset[str] | set[str],
    jobs: Sequence[JobPosting],
    top_k: int | None = None,
    *,
    vocabulary: SkillVocabulary | None = None,
    weighting: WeightingConfig | None = None,
) -> list[MatchResult]:
    """Score all jobs and return them best first.

    Equal scores keep their input order. ``top_k`` truncates the result when
    smaller than the number of jobs; ``None`` returns everything and ``0``
    returns nothing. Negative ``top_k`` raises ``InvalidTopK``.
    """
    _validate_top_k(top_k)
    if top_k == 0 or not jobs:
        return []

    candidate = frozenset(candidate_skills)
    weights = weighting if weighting is not None else DEFAULT_WEIGHTING

    results = [
        score_job(candidate, job, vocabulary=vocabulary, weighting=weights)
        for job in jobs
    ]
    # list.sort is stable: ties stay in input order
    results.sort(key=lambda r: r.score, reverse=True)

    if top_k is not None:
        results = results[:top_k]

    logger.debug(
        "Ranked %d jobs for %d candidate skills, returning %d (best=%.3f)",
        len(jobs), len(candidate), len(results), results[0].score,
    )
    return results


def rank_candidate(
    candidate: Candidate,
    jobs: Sequence[JobPosting],
    top_k: int | None = None,
    *,
    vocabulary: SkillVocabulary | None = None,
    weighting: WeightingConfig | None = None,
) -> list[MatchResult]:
    """Normalize the candidate's raw text, then rank ``jobs`` against it."""
    _validate_top_k(top_k)
    candidate_skills = normalize(candidate.raw_text, vocabulary)
    logger.debug(
        "Candidate %r: %d skills (%s)",
        candidate.name, len(candidate_skills), ", ".join(sorted(candidate_skills)),
    )
    return rank(candidate_skills, jobs, top_k, vocabulary=vocabulary, weighting=weighting)
