"""Canonical skill vocabulary: skill identifiers and their recognition patterns.

The vocabulary is plain data, a mapping of canonical identifier to the
literal tokens that mention it. The built-in table below can be replaced at
startup with a JSON file of the same shape (``SKILL_VOCABULARY_PATH``)::

    {"javascript": ["javascript", "js"], "rust": ["rust"]}

A ``SkillVocabulary`` is validated and compiled once, then shared read-only
by every request.
"""

import json
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from config import settings
from services.errors import VocabularyConfigError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in vocabulary: canonical id -> recognition patterns (case-insensitive)
# Short English words ("go", "r", "rest", "swift") are left out on purpose:
# they match ordinary prose far more often than they mean the skill.
# ---------------------------------------------------------------------------
DEFAULT_SKILLS: dict[str, list[str]] = {
    # Programming languages
    "rust": ["rust"],
    "c++": ["c++", "cpp"],
    "c#": ["c#", "csharp"],
    "python": ["python"],
    "java": ["java"],
    "javascript": ["javascript", "js", "ecmascript"],
    "typescript": ["typescript"],
    "golang": ["golang"],
    "ruby": ["ruby"],
    "php": ["php"],
    "kotlin": ["kotlin"],
    "scala": ["scala"],
    "sql": ["sql"],
    "bash": ["bash", "shell scripting"],
    # Frontend
    "html": ["html", "html5"],
    "css": ["css", "css3"],
    "react": ["react", "react.js", "reactjs"],
    "angular": ["angular", "angularjs"],
    "vue": ["vue", "vue.js", "vuejs"],
    # Backend
    "node.js": ["node.js", "nodejs", "node js"],
    "django": ["django"],
    "flask": ["flask"],
    "fastapi": ["fastapi"],
    "graphql": ["graphql"],
    # Databases
    "postgresql": ["postgresql", "postgres"],
    "mysql": ["mysql"],
    "mongodb": ["mongodb", "mongo"],
    "redis": ["redis"],
    "elasticsearch": ["elasticsearch"],
    "kafka": ["kafka"],
    # Cloud & DevOps
    "docker": ["docker"],
    "kubernetes": ["kubernetes", "k8s"],
    "linux": ["linux"],
    "aws": ["aws", "amazon web services"],
    "azure": ["azure"],
    "gcp": ["gcp", "google cloud"],
    "terraform": ["terraform"],
    "git": ["git"],
    "ci/cd": ["ci/cd", "cicd"],
    # Data & ML
    "nlp": ["nlp", "natural language processing"],
    "machine learning": ["machine learning"],
    "deep learning": ["deep learning"],
    "pandas": ["pandas"],
    "numpy": ["numpy"],
    "pytorch": ["pytorch"],
    "tensorflow": ["tensorflow"],
    "scikit-learn": ["scikit-learn", "sklearn"],
    "spark": ["spark", "pyspark"],
}


def _normalize_token(token: str) -> str:
    """Lowercase and collapse internal whitespace."""
    return re.sub(r"\s+", " ", token.strip().lower())


def _compile_patterns(patterns: Iterable[str]) -> re.Pattern:
    """Build one whole-token, case-insensitive regex for a skill's patterns.

    A match may not touch a word character (Unicode-aware) on either side:
    "java" stays out of "javascript", "sql" out of "postgresql", "rust" out
    of "rusté". Punctuation such as "." or "#" is a boundary.
    """
    alternatives = sorted(
        (r"\s+".join(re.escape(part) for part in p.split(" ")) for p in patterns),
        key=len,
        reverse=True,
    )
    return re.compile(
        rf"(?<!\w)(?:{'|'.join(alternatives)})(?!\w)",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class SkillEntry:
    """One canonical skill and the literal tokens that recognize it."""

    canonical: str
    patterns: tuple[str, ...]


class SkillVocabulary:
    """Ordered, immutable set of canonical skills with compiled matchers.

    Construction validates the entries and raises ``VocabularyConfigError``
    for duplicate identifiers, empty or blank patterns, or an alias claimed
    by two different skills.
    """

    __slots__ = ("_entries", "_index", "_matchers")

    def __init__(self, entries: Iterable[SkillEntry]):
        checked: list[SkillEntry] = []
        index: dict[str, str] = {}

        for entry in entries:
            if not isinstance(entry.canonical, str) or not entry.canonical.strip():
                raise VocabularyConfigError(
                    f"Skill identifier must be a non-empty string, got {entry.canonical!r}"
                )
            canonical = _normalize_token(entry.canonical)
            if any(e.canonical == canonical for e in checked):
                raise VocabularyConfigError(f"Duplicate skill identifier: {canonical!r}")
            if not entry.patterns:
                raise VocabularyConfigError(f"Skill {canonical!r} has no recognition patterns")

            patterns: list[str] = []
            for pattern in entry.patterns:
                if not isinstance(pattern, str) or not pattern.strip():
                    raise VocabularyConfigError(
                        f"Skill {canonical!r} has a blank or non-string pattern: {pattern!r}"
                    )
                norm = _normalize_token(pattern)
                if norm not in patterns:
                    patterns.append(norm)

            for token in [canonical, *patterns]:
                owner = index.setdefault(token, canonical)
                if owner != canonical:
                    raise VocabularyConfigError(
                        f"Token {token!r} is claimed by both {owner!r} and {canonical!r}"
                    )

            checked.append(SkillEntry(canonical, tuple(patterns)))

        self._entries = tuple(checked)
        self._index = MappingProxyType(index)
        self._matchers = tuple(
            (e.canonical, _compile_patterns(e.patterns)) for e in self._entries
        )

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "SkillVocabulary":
        """Build a vocabulary from ``{canonical: [pattern, ...]}``."""
        if not isinstance(mapping, Mapping):
            raise VocabularyConfigError(
                f"Vocabulary must be a mapping of skill -> patterns, got {type(mapping).__name__}"
            )
        entries = []
        for canonical, patterns in mapping.items():
            if isinstance(patterns, str) or not isinstance(patterns, Iterable):
                raise VocabularyConfigError(
                    f"Patterns for skill {canonical!r} must be a list of strings"
                )
            entries.append(SkillEntry(canonical, tuple(patterns)))
        return cls(entries)

    @classmethod
    def from_file(cls, path: str | Path) -> "SkillVocabulary":
        """Load a vocabulary from a JSON file of ``{canonical: [patterns]}``."""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError as e:
            raise VocabularyConfigError(f"Cannot read skill vocabulary {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise VocabularyConfigError(f"Invalid JSON in skill vocabulary {path}: {e}") from e
        return cls.from_mapping(data)

    # -- queries ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SkillEntry]:
        return iter(self._entries)

    def __contains__(self, skill: object) -> bool:
        if not isinstance(skill, str):
            return False
        token = _normalize_token(skill)
        return self._index.get(token) == token

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self)} skills)"

    @property
    def canonical_ids(self) -> tuple[str, ...]:
        return tuple(e.canonical for e in self._entries)

    @property
    def matchers(self) -> tuple[tuple[str, re.Pattern], ...]:
        """``(canonical, compiled_regex)`` pairs in vocabulary order."""
        return self._matchers

    def canonical_for(self, token: str) -> str | None:
        """Map a canonical id or alias (any case) to its canonical id."""
        return self._index.get(_normalize_token(token))


# ---------------------------------------------------------------------------
# Process-wide vocabulary, built once on first use (or at app startup)
# ---------------------------------------------------------------------------
_vocabulary: SkillVocabulary | None = None


def load_vocabulary(path: str | Path | None = None) -> SkillVocabulary:
    """Build a vocabulary from ``path`` or, when empty, the built-in table."""
    if path:
        vocabulary = SkillVocabulary.from_file(path)
        logger.info("Loaded skill vocabulary from %s (%d skills)", path, len(vocabulary))
    else:
        vocabulary = SkillVocabulary.from_mapping(DEFAULT_SKILLS)
        logger.info("Loaded built-in skill vocabulary (%d skills)", len(vocabulary))
    return vocabulary


def get_vocabulary() -> SkillVocabulary:
    """Return the shared vocabulary, loading it from settings on first call."""
    global _vocabulary
    if _vocabulary is None:
        _vocabulary = load_vocabulary(settings.skill_vocabulary_path)
    return _vocabulary


def reset_vocabulary() -> None:
    """Drop the shared vocabulary so the next call reloads it. Useful for testing."""
    global _vocabulary
    _vocabulary = None
