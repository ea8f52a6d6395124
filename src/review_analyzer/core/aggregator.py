"""Overall score and improvement suggestions."""

import logging
import math
from enum import Enum
from typing import Dict, List, Optional

from .models import AnalysisReport, Category, ScorerKind

logger = logging.getLogger(__name__)


class AggregationMode(Enum):
    """WEIGHTED pairs with the annotation scorer, UNWEIGHTED with the critique parser."""
    WEIGHTED = "weighted"
    UNWEIGHTED = "unweighted"

    @classmethod
    def for_scorer(cls, scorer: ScorerKind) -> "AggregationMode":
        return cls.WEIGHTED if scorer is ScorerKind.ANNOTATION else cls.UNWEIGHTED


CATEGORY_WEIGHTS: Dict[Category, float] = {
    Category.CLARITY: 1.0,
    Category.ENGAGEMENT: 1.5,
    Category.RELEVANCE: 1.5,
    Category.INFORMATIVE_CONTENT: 1.5,
    Category.VISUALS_AND_AUDIO: 2.0,
    Category.PRESENTATION: 1.5,
}

# A category scoring below the threshold gets its suggestion.
SUGGESTION_THRESHOLDS: Dict[AggregationMode, int] = {
    AggregationMode.WEIGHTED: 4,
    AggregationMode.UNWEIGHTED: 8,
}

SUGGESTIONS: Dict[Category, str] = {
    Category.CLARITY: "Enhance the introduction with a clear purpose statement and product overview.",
    Category.ENGAGEMENT: "Enhance viewer engagement with more visual variety and verbal cues.",
    Category.RELEVANCE: "Provide more relevant and targeted content.",
    Category.INFORMATIVE_CONTENT: "Include more specific data points and technical details.",
    Category.VISUALS_AND_AUDIO: "Improve visuals and audio quality.",
    Category.PRESENTATION: "Enhance presentation with better visual variety and verbal cues.",
}


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like ``Math.round`` does: halves go up, not to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class ScoreAggregator:
    """Fills in ``overall_score`` and ``suggestions`` on a scored report."""

    def __init__(self, weights: Optional[Dict[Category, float]] = None,
                 thresholds: Optional[Dict[AggregationMode, int]] = None):
        self.weights = dict(weights or CATEGORY_WEIGHTS)
        self.thresholds = dict(thresholds or SUGGESTION_THRESHOLDS)

    def aggregate(self, report: AnalysisReport,
                  mode: Optional[AggregationMode] = None) -> AnalysisReport:
        mode = mode or AggregationMode.for_scorer(report.scorer)
        report.overall_score = self.overall_score(report, mode)
        report.suggestions = self.suggestions(report, mode)
        logger.info("Overall score %.1f (%s), %d suggestion(s)",
                    report.overall_score, mode.value, len(report.suggestions))
        return report

    def overall_score(self, report: AnalysisReport, mode: AggregationMode) -> float:
        if mode is AggregationMode.WEIGHTED:
            return self._weighted(report)
        return self._unweighted(report)

    def suggestions(self, report: AnalysisReport, mode: AggregationMode) -> List[str]:
        threshold = self.thresholds[mode]
        return [
            SUGGESTIONS[category]
            for category in Category
            if report[category].score < threshold
        ]

    def _weighted(self, report: AnalysisReport) -> float:
        total_weight = sum(self.weights.values())
        if not total_weight:
            return 0.0
        weighted_sum = sum(
            report[category].score * weight
            for category, weight in self.weights.items()
        )
        return round_half_up(weighted_sum / total_weight)

    def _unweighted(self, report: AnalysisReport) -> float:
        # Categories at 0 count as absent, matching the published scores.
        present = [report[category].score for category in Category
                   if report[category].score > 0]
        if not present:
            return 0.0
        return round_half_up(sum(present) / len(present))
