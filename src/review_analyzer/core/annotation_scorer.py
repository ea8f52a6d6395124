"""Heuristic scoring of vision-service annotations.

Each category is a short list of additive rules over the transcript, shot
list, labels, on-screen text and person detections, clamped to 5 points.
Every rule that fires leaves a note in the category's ``details``.
"""

import logging
from typing import List, Sequence

from .base import CategoryScorer
from .models import (
    AnalysisReport, AnnotationBundle, Category, CategoryAnalysis,
    DetectedObject, Label, PersonDetection, ScorerKind, Shot,
)

logger = logging.getLogger(__name__)


MAX_SCORE = ScorerKind.ANNOTATION.max_score

# Clarity
INTRO_FRACTION = 0.2

# Engagement
ENGAGEMENT_MARKERS = [
    "you can see", "let me show", "as you can see", "check this out",
    "take a look", "notice how", "what you'll find", "interesting",
]
STRONG_ENGAGEMENT_COUNT = 3

# Relevance
RELEVANT_TOPICS = [
    "product", "review", "recommendation", "features", "quality",
    "experience", "opinion",
]
RELEVANCE_LABEL_DIVERSITY = 5

# Informative content
INFORMATIVE_MARKERS = [
    "product", "review", "recommendation", "features", "quality",
    "experience", "opinion",
]
INFORMATIVE_LABEL_DIVERSITY = 5

# Visuals and audio
SHOTS_EXCELLENT = 10
SHOTS_GOOD = 5
AUDIO_MIN_WORDS = 10
AUDIO_WORD_LENGTH_RANGE = (3, 10)
GESTURE_CONFIDENCE = 0.7

# Presentation
PRESENTATION_MARKERS = [
    "you can see", "let me show", "as you can see", "check this out",
    "take a look", "notice how", "what you'll find", "interesting",
]
PRESENTATION_STRONG_COUNT = 3
PRESENTATION_SHOTS_EXCELLENT = 10
PRESENTATION_SHOTS_GOOD = 5


def count_markers(text: str, markers: Sequence[str]) -> int:
    """Number of distinct markers found in ``text`` (case-insensitive)."""
    lowered = text.lower()
    return sum(1 for marker in markers if marker in lowered)


def distinct_labels(labels: Sequence[Label]) -> int:
    return len({label.description for label in labels if label.description})


def estimate_audio_quality(transcript: str) -> int:
    """0-2 points from transcript word count and average word length."""
    word_count = len(transcript.split())
    if word_count == 0:
        return 0
    avg_word_length = len(transcript) / word_count
    low, high = AUDIO_WORD_LENGTH_RANGE
    if word_count > AUDIO_MIN_WORDS and low < avg_word_length < high:
        return 2
    return 1


def has_confident_gesture(persons: Sequence[PersonDetection]) -> bool:
    return any(
        attr.name == "gesture" and attr.confidence > GESTURE_CONFIDENCE
        for person in persons
        for attr in person.attributes
    )


class AnnotationHeuristicScorer(CategoryScorer):
    """Deterministic 0-5 scorer over vision annotations."""

    kind = ScorerKind.ANNOTATION

    def score_signal(self, signal: AnnotationBundle) -> AnalysisReport:
        return self.score_bundle(signal)

    def score(
        self,
        transcript: str,
        shots: Sequence[Shot],
        labels: Sequence[Label],
        text_detections: Sequence[str],
        objects: Sequence[DetectedObject],
        persons: Sequence[PersonDetection],
    ) -> AnalysisReport:
        """Score all six categories. Aggregation is left to ScoreAggregator."""
        transcript = transcript or ""
        logger.debug(
            "Scoring annotations: %d chars transcript, %d shots, %d labels, "
            "%d text detections, %d objects, %d persons",
            len(transcript), len(shots), len(labels), len(text_detections),
            len(objects), len(persons),
        )

        report = AnalysisReport(scorer=self.kind)
        report.categories[Category.CLARITY] = self._analyze_clarity(transcript, text_detections)
        report.categories[Category.ENGAGEMENT] = self._analyze_engagement(transcript, text_detections)
        report.categories[Category.RELEVANCE] = self._analyze_relevance(transcript, labels)
        report.categories[Category.INFORMATIVE_CONTENT] = self._analyze_informative_content(transcript, labels)
        report.categories[Category.VISUALS_AND_AUDIO] = self._analyze_visuals_and_audio(shots, transcript, persons)
        report.categories[Category.PRESENTATION] = self._analyze_presentation(shots, transcript, persons)

        logger.info("Scored annotations: %s", ", ".join(
            f"{c.value}={s}" for c, s in report.scores().items()
        ))
        return report

    def score_bundle(self, bundle: AnnotationBundle) -> AnalysisReport:
        return self.score(
            bundle.transcript, bundle.shots, bundle.labels,
            bundle.text_detections, bundle.objects, bundle.persons,
        )

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def _analyze_clarity(self, transcript: str, text_detections: Sequence[str]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        intro = transcript[:int(len(transcript) * INTRO_FRACTION)]
        if intro:
            score += 3
            details.append("Subject introduced early in the video")

        if text_detections:
            score += 2
            details.append("Product name or title shown")

        return self._finish(Category.CLARITY, score, details)

    def _analyze_engagement(self, transcript: str, text_detections: Sequence[str]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        cues = count_markers(transcript, ENGAGEMENT_MARKERS)
        if cues >= STRONG_ENGAGEMENT_COUNT:
            score += 2
            details.append("Strong viewer engagement through verbal cues")
        elif cues > 0:
            score += 1
            details.append("Basic viewer engagement detected")

        if any(count_markers(text, ENGAGEMENT_MARKERS) for text in text_detections):
            score += 1
            details.append("Engagement detected in on-screen text")

        return self._finish(Category.ENGAGEMENT, score, details)

    def _analyze_relevance(self, transcript: str, labels: Sequence[Label]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        if count_markers(transcript, RELEVANT_TOPICS) > 0:
            score += 2
            details.append("Relevant topics covered")

        if distinct_labels(labels) >= RELEVANCE_LABEL_DIVERSITY:
            score += 2
            details.append("Comprehensive feature coverage detected")

        return self._finish(Category.RELEVANCE, score, details)

    def _analyze_informative_content(self, transcript: str, labels: Sequence[Label]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        if count_markers(transcript, INFORMATIVE_MARKERS) > 0:
            score += 2
            details.append("Informative content present")

        if distinct_labels(labels) >= INFORMATIVE_LABEL_DIVERSITY:
            score += 2
            details.append("Comprehensive feature coverage detected")

        return self._finish(Category.INFORMATIVE_CONTENT, score, details)

    def _analyze_visuals_and_audio(self, shots: Sequence[Shot], transcript: str,
                                   persons: Sequence[PersonDetection]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        if len(shots) >= SHOTS_EXCELLENT:
            score += 2
            details.append("Excellent visual variety with multiple camera angles")
        elif len(shots) >= SHOTS_GOOD:
            score += 1
            details.append("Good visual variety")

        audio = estimate_audio_quality(transcript)
        if audio > 0:
            score += audio
            details.append(f"Good audio quality ({audio} points)")

        if has_confident_gesture(persons):
            score += 1
            details.append("Effective use of gestures and body language")

        return self._finish(Category.VISUALS_AND_AUDIO, score, details)

    def _analyze_presentation(self, shots: Sequence[Shot], transcript: str,
                              persons: Sequence[PersonDetection]) -> CategoryAnalysis:
        details: List[str] = []
        score = 0

        if len(shots) >= PRESENTATION_SHOTS_EXCELLENT:
            score += 2
            details.append("Excellent visual variety with multiple camera angles")
        elif len(shots) >= PRESENTATION_SHOTS_GOOD:
            score += 1
            details.append("Good visual variety")

        cues = count_markers(transcript, PRESENTATION_MARKERS)
        if cues >= PRESENTATION_STRONG_COUNT:
            score += 2
            details.append("Strong viewer engagement through verbal cues")
        elif cues > 0:
            score += 1
            details.append("Basic viewer engagement detected")

        if has_confident_gesture(persons):
            score += 1
            details.append("Effective use of gestures and body language")

        return self._finish(Category.PRESENTATION, score, details)

    def _finish(self, category: Category, score: int, details: List[str]) -> CategoryAnalysis:
        analysis = CategoryAnalysis(details=details)
        analysis.set_score(score, MAX_SCORE)
        logger.debug("%s: %d (raw %d) %s", category.value, analysis.score, score, details)
        return analysis
