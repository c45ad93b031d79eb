"""Weighted scoring dimensions for candidate-job matching.

The composite score is a weighted sum over named dimensions:

    score = 100 * sum(weight_i * score_fn_i(context))

Only skill overlap (Jaccard) is computed today. Experience and education are
registered with their final weights but score a constant 0.0 until their
extractors exist; filling one in means swapping its ``score_fn``.
"""

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from models.schemas.job_posting import JobPosting
from services.errors import VocabularyConfigError

logger = logging.getLogger(__name__)


def jaccard(a: frozenset[str] | set[str], b: frozenset[str] | set[str]) -> float:
    """Jaccard index |a & b| / |a | b|; 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


@dataclass(frozen=True)
class ScoringContext:
    """Everything a dimension may look at when scoring one job."""

    candidate_skills: frozenset[str]
    job_skills: frozenset[str]
    job: JobPosting | None = None


@dataclass(frozen=True)
class ScoringDimension:
    name: str
    weight: float
    score_fn: Callable[[ScoringContext], float]


def skill_jaccard(context: ScoringContext) -> float:
    return jaccard(context.candidate_skills, context.job_skills)


def not_yet_scored(context: ScoringContext) -> float:
    """Placeholder for dimensions whose extraction is not built yet."""
    return 0.0


class WeightingConfig:
    """Ordered, validated set of scoring dimensions.

    Raises ``VocabularyConfigError`` on construction if there are no
    dimensions, names repeat, a weight is negative, or the weights do not
    sum to 1.0.
    """

    __slots__ = ("_dimensions",)

    def __init__(self, dimensions: Iterable[ScoringDimension]):
        dims = tuple(dimensions)
        if not dims:
            raise VocabularyConfigError("Weighting config needs at least one dimension")

        names = [d.name for d in dims]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise VocabularyConfigError(f"Duplicate scoring dimensions: {', '.join(duplicates)}")

        for d in dims:
            if d.weight < 0:
                raise VocabularyConfigError(f"Weight for {d.name!r} is negative: {d.weight}")

        total = math.fsum(d.weight for d in dims)
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=1e-9):
            raise VocabularyConfigError(
                f"Scoring weights must sum to 1.0, got {total:.6f} "
                f"({', '.join(f'{d.name}={d.weight}' for d in dims)})"
            )

        self._dimensions = dims

    @property
    def dimensions(self) -> tuple[ScoringDimension, ...]:
        return self._dimensions

    def evaluate(self, context: ScoringContext) -> dict[str, float]:
        """Sub-score per dimension, in dimension order."""
        return {d.name: float(d.score_fn(context)) for d in self._dimensions}

    def composite(self, sub_scores: dict[str, float]) -> float:
        """Weighted sum of sub-scores on a 0-100 scale (unrounded)."""
        return 100.0 * math.fsum(d.weight * sub_scores[d.name] for d in self._dimensions)

    def __repr__(self) -> str:
        terms = ", ".join(f"{d.name}={d.weight}" for d in self._dimensions)
        return f"WeightingConfig({terms})"


W_SKILLS = 0.60
W_EXPERIENCE = 0.25
W_EDUCATION = 0.15

DEFAULT_WEIGHTING = WeightingConfig([
    ScoringDimension("skill_jaccard", W_SKILLS, skill_jaccard),
    ScoringDimension("experience", W_EXPERIENCE, not_yet_scored),
    ScoringDimension("education", W_EDUCATION, not_yet_scored),
])
