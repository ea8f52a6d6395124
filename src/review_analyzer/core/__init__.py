from .models import (
    Category, ScorerKind, CategoryAnalysis, AnalysisReport, ReportMetadata,
    AnnotationBundle, Shot, Label, DetectedObject, PersonAttribute, PersonDetection,
)
from .base import CategoryScorer
from .parser import NarrativeResponseParser, check_conformance
from .annotation_scorer import AnnotationHeuristicScorer
from .aggregator import ScoreAggregator, AggregationMode
from .pipeline import AnalysisPipeline

__all__ = [
    "Category", "ScorerKind", "CategoryAnalysis", "AnalysisReport", "ReportMetadata",
    "AnnotationBundle", "Shot", "Label", "DetectedObject", "PersonAttribute", "PersonDetection",
    "CategoryScorer", "NarrativeResponseParser", "check_conformance",
    "AnnotationHeuristicScorer",
    "ScoreAggregator", "AggregationMode",
    "AnalysisPipeline",
]
