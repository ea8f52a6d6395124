"""Base class for category scorers."""

from abc import ABC, abstractmethod
from typing import Any

from .models import AnalysisReport, ScorerKind


class CategoryScorer(ABC):
    """A strategy that turns one kind of signal into six category scores.

    Implementations declare their scale through ``kind``; reports from
    different scorers are never rescaled into each other.
    """

    kind: ScorerKind

    @abstractmethod
    def score_signal(self, signal: Any) -> AnalysisReport:
        """Score a complete signal payload. Must not raise on malformed input."""
        pass

    @property
    def max_score(self) -> int:
        return self.kind.max_score
