"""Analysis pipeline: pick a scorer, score, aggregate, return the report."""

import logging
from typing import Any, Dict, Optional

from ..exceptions import NoSignalError
from .aggregator import ScoreAggregator
from .annotation_scorer import AnnotationHeuristicScorer
from .models import AnalysisReport, AnnotationBundle, ReportMetadata
from .parser import NarrativeResponseParser

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Runs one signal source through its scorer and the aggregator.

    The pipeline holds no per-request state; each call builds a fresh report,
    seals it and hands it back.
    """

    def __init__(self, parser: Optional[NarrativeResponseParser] = None,
                 scorer: Optional[AnnotationHeuristicScorer] = None,
                 aggregator: Optional[ScoreAggregator] = None):
        self.parser = parser or NarrativeResponseParser()
        self.scorer = scorer or AnnotationHeuristicScorer()
        self.aggregator = aggregator or ScoreAggregator()

    def analyze(self, narrative_text: Optional[str] = None,
                annotations: Optional[AnnotationBundle] = None,
                metadata: Optional[ReportMetadata] = None) -> AnalysisReport:
        """Analyze whichever signal is available, critique text first.

        Blank critique text does not count as a signal when annotations are
        given. Without annotations it is still parsed into an empty report.

        Raises:
            NoSignalError: if neither critique text nor annotations are given.
        """
        if narrative_text and narrative_text.strip():
            return self.analyze_narrative(narrative_text, metadata)
        if annotations is not None:
            return self.analyze_annotations(annotations, metadata)
        if narrative_text is not None:
            logger.warning("Blank critique text and no annotations")
            return self.analyze_narrative(narrative_text, metadata)
        raise NoSignalError("No critique text or annotations to analyze")

    def analyze_narrative(self, text: str,
                          metadata: Optional[ReportMetadata] = None,
                          prompt: str = "") -> AnalysisReport:
        report = self.parser.score_signal(text)
        raw_data: Dict[str, Any] = {
            "narrativeResponse": text,
            "labels": [],
            "transcript": "",
            "shots": [],
            "textDetection": [],
            "objectDetection": [],
        }
        if prompt:
            raw_data["prompt"] = prompt
        return self._finish(report, metadata, raw_data)

    def analyze_annotations(self, bundle: AnnotationBundle,
                            metadata: Optional[ReportMetadata] = None) -> AnalysisReport:
        report = self.scorer.score_signal(bundle)
        raw_data = {
            "narrativeResponse": "",
            "labels": [label.description for label in bundle.labels if label.description],
            "transcript": bundle.transcript,
            "shots": [shot.to_dict() for shot in bundle.shots],
            "textDetection": list(bundle.text_detections),
            "objectDetection": [obj.description for obj in bundle.objects if obj.description],
        }
        return self._finish(report, metadata, raw_data)

    def analyze_with_critic(self, critic, material: str,
                            metadata: Optional[ReportMetadata] = None) -> AnalysisReport:
        """Ask ``critic`` for a critique of ``material`` and analyze it.

        Upstream failures propagate as UpstreamServiceError; the core is only
        invoked with a complete critique.
        """
        text = critic.critique(material)
        return self.analyze_narrative(text, metadata, prompt=critic.last_prompt)

    def _finish(self, report: AnalysisReport, metadata: Optional[ReportMetadata],
                raw_data: Dict[str, Any]) -> AnalysisReport:
        self.aggregator.aggregate(report)
        report.metadata = metadata or ReportMetadata()
        report.raw_data = raw_data
        report.seal()
        return report
