"""Critique parser for Video Review Analyzer.

Parses the six-section critique written by the generative-text service into
an AnalysisReport on the 0-10 scale. The expected template is:

    **Clarity (7/10)**
    Good Points:
    - ...
    Improvement Points:
    - ...
    Overall Assessment: ...

Parsing never fails. A section that cannot be located leaves its category
unscored with a score of 0 and empty point lists.
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from .base import CategoryScorer
from .models import AnalysisReport, Category, ScorerKind

logger = logging.getLogger(__name__)


# Header names as they appear in critiques, normalised to lower case with
# single spaces. Anything outside this table is not a header.
HEADER_NAMES = {
    "clarity": Category.CLARITY,
    "engagement": Category.ENGAGEMENT,
    "relevance": Category.RELEVANCE,
    "informative content": Category.INFORMATIVE_CONTENT,
    "visuals and audio quality": Category.VISUALS_AND_AUDIO,
    "visuals and audio": Category.VISUALS_AND_AUDIO,
    "presentation": Category.PRESENTATION,
}

# Optional markup and ordinal, a known category name, then an "N/10" score
# somewhere later on the line: "### 1. **Clarity (7/10)**", "Clarity: 7/10".
# A lone "*" followed by a space is a bullet, never header markup.
HEADER_PATTERN = re.compile(
    r'^(?!\*\s)[#*_\s]*(?:\d+\s*[.)]?\s*)?[*_\s]*'
    r'(clarity|engagement|relevance|informative\s+content'
    r'|visuals\s+(?:and|&)\s+audio(?:\s+quality)?|presentation)(?![a-z])'
    r'.*?(\d+)\s*/\s*10(?!\d)',
    re.IGNORECASE,
)

BULLET_PATTERN = re.compile(r'^(?:[-–•]|\*(?!\*))\s*')

GOOD_POINTS_MARKER = "good points:"
IMPROVEMENT_POINTS_MARKER = "improvement points:"
ASSESSMENT_MARKER = "overall assessment:"


class ParseState(Enum):
    SEEKING_SECTION = "seeking_section"
    COLLECTING_GOOD_POINTS = "collecting_good_points"
    COLLECTING_IMPROVEMENT_POINTS = "collecting_improvement_points"


def match_header(line: str) -> Optional[tuple]:
    """Return ``(category, score)`` if ``line`` is a category header."""
    match = HEADER_PATTERN.match(line)
    if not match:
        return None
    name = re.sub(r'\s+', ' ', match.group(1).lower()).replace('&', 'and')
    category = HEADER_NAMES.get(name)
    if category is None:
        return None
    return category, int(match.group(2))


def check_conformance(text: str) -> List[Category]:
    """Return the categories whose header does not appear in ``text``.

    A result listing all six categories means the critique template has
    most likely changed upstream.
    """
    found = set()
    for line in (text or "").split("\n"):
        header = match_header(line.strip())
        if header:
            found.add(header[0])
    return [category for category in Category if category not in found]


class NarrativeResponseParser(CategoryScorer):
    """Line-oriented state machine over critique text."""

    kind = ScorerKind.NARRATIVE

    def score_signal(self, signal: str) -> AnalysisReport:
        return self.parse(signal)

    def parse(self, text: str) -> AnalysisReport:
        """Parse critique text into a report with scores and points filled in.

        ``overall_score`` and ``suggestions`` are left for the aggregator.
        """
        report = AnalysisReport(scorer=self.kind)
        if not text or not text.strip():
            logger.warning("Empty critique text; all categories left unscored")
            return report

        state = ParseState.SEEKING_SECTION
        current: Optional[Category] = None
        headers_matched = 0

        for line in text.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue
            lowered = stripped.lower()

            header = match_header(stripped)
            if header:
                current, score = header
                report[current].set_score(score, self.max_score)
                state = ParseState.SEEKING_SECTION
                headers_matched += 1
                logger.debug("Found section %s with score %d", current.value, score)
                continue

            if GOOD_POINTS_MARKER in lowered:
                state = ParseState.COLLECTING_GOOD_POINTS
                continue

            if IMPROVEMENT_POINTS_MARKER in lowered:
                state = ParseState.COLLECTING_IMPROVEMENT_POINTS
                continue

            if state is not ParseState.SEEKING_SECTION and current is not None:
                bullet = BULLET_PATTERN.match(stripped)
                if bullet:
                    point = stripped[bullet.end():].strip()
                    if ASSESSMENT_MARKER in point.lower():
                        state = ParseState.SEEKING_SECTION
                    elif point:
                        self._add_point(report, current, state, point)
                    continue

            if ASSESSMENT_MARKER in lowered:
                state = ParseState.SEEKING_SECTION

        if headers_matched == 0:
            logger.warning(
                "No category headers recognised in critique (%d chars); "
                "the critique template may have changed", len(text)
            )
        else:
            missing = report.unscored_categories()
            if missing:
                logger.info("Critique missing sections: %s",
                            ", ".join(c.value for c in missing))

        logger.info("Parsed critique: %s", ", ".join(
            f"{c.value}={s}" for c, s in report.scores().items()
        ))
        return report

    @staticmethod
    def _add_point(report: AnalysisReport, category: Category,
                   state: ParseState, point: str) -> None:
        if state is ParseState.COLLECTING_GOOD_POINTS:
            report[category].good_points.append(point)
        else:
            report[category].improvement_points.append(point)
