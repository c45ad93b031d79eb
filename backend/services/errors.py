"""Error taxonomy for skill normalization, ranking and text extraction."""


class SkillMatchError(Exception):
    """Base class for all errors raised by the matching services."""


class InvalidTopK(SkillMatchError, ValueError):
    """Raised when a ranking request asks for a negative number of results."""

    def __init__(self, top_k: int):
        self.top_k = top_k
        super().__init__(f"top_k must be a non-negative integer, got {top_k}")


class VocabularyConfigError(SkillMatchError):
    """Raised at startup when the vocabulary or scoring weights are malformed."""


class ExtractionFailure(SkillMatchError):
    """Raised when an uploaded document cannot be turned into text."""
