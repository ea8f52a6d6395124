"""Data models shared by the scorers, the aggregator and the pipeline."""

import logging
from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping

logger = logging.getLogger(__name__)


def list_items(items: Any, key: str = "") -> List[Any]:
    """``items`` as a list; a missing or non-list value gives an empty list."""
    if isinstance(items, (list, tuple)):
        return list(items)
    if items:
        logger.warning("Ignoring %s: expected a list, got %s", key or "entry", type(items).__name__)
    return []


def mapping_items(items: Any, key: str = "") -> Iterator[Mapping[str, Any]]:
    """Yield the mapping entries of ``items``, skipping anything else."""
    for item in list_items(items, key):
        if isinstance(item, Mapping):
            yield item
        else:
            logger.warning("Ignoring malformed %s entry: %r", key or "list", item)


def as_float(value: Any, default: float = 0.0) -> float:
    """``float(value)``, or ``default`` for missing and non-numeric values."""
    if isinstance(value, bool) or value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class _Sealable:
    """Rejects attribute assignment once ``_sealed`` is set."""

    _sealed = False

    def __setattr__(self, name, value):
        if self._sealed:
            raise FrozenInstanceError(f"cannot assign to {name!r} on a sealed {type(self).__name__}")
        super().__setattr__(name, value)

    def _mark_sealed(self) -> None:
        object.__setattr__(self, "_sealed", True)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value


class Category(Enum):
    """The six review dimensions. Values are the report's JSON keys."""
    CLARITY = "clarity"
    ENGAGEMENT = "engagement"
    RELEVANCE = "relevance"
    INFORMATIVE_CONTENT = "informativeContent"
    VISUALS_AND_AUDIO = "visualsAndAudio"
    PRESENTATION = "presentation"

    @property
    def label(self) -> str:
        """Human-readable name, as used in critique headers."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.CLARITY: "Clarity",
    Category.ENGAGEMENT: "Engagement",
    Category.RELEVANCE: "Relevance",
    Category.INFORMATIVE_CONTENT: "Informative Content",
    Category.VISUALS_AND_AUDIO: "Visuals and Audio Quality",
    Category.PRESENTATION: "Presentation",
}


class ScorerKind(Enum):
    """Which scorer produced a report. The two use different scales."""
    ANNOTATION = "annotation"
    NARRATIVE = "narrative"

    @property
    def max_score(self) -> int:
        return 5 if self is ScorerKind.ANNOTATION else 10


@dataclass
class CategoryAnalysis(_Sealable):
    """Score and notes for one category.

    ``scored`` records whether the category was actually assessed. A narrative
    section that never appeared keeps ``scored=False`` and a score of 0.
    """
    score: int = 0
    details: List[str] = field(default_factory=list)
    good_points: List[str] = field(default_factory=list)
    improvement_points: List[str] = field(default_factory=list)
    scored: bool = False

    def set_score(self, value: int, maximum: int) -> None:
        """Record a score, clamped into ``[0, maximum]``."""
        self.score = max(0, min(int(value), maximum))
        self.scored = True

    def seal(self) -> None:
        """Freeze the record once the report is complete."""
        if self._sealed:
            return
        self.details = tuple(self.details)
        self.good_points = tuple(self.good_points)
        self.improvement_points = tuple(self.improvement_points)
        self._mark_sealed()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "details": list(self.details),
            "goodPoints": list(self.good_points),
            "improvementPoints": list(self.improvement_points),
        }


# ---------------------------------------------------------------------------
# Vision annotation input
# ---------------------------------------------------------------------------

@dataclass
class Shot:
    """A shot boundary, offsets in seconds."""
    start: float = 0.0
    end: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"start": self.start, "end": self.end}


@dataclass
class Label:
    description: str
    category: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"description": self.description, "category": self.category}


@dataclass
class DetectedObject:
    description: str
    confidence: float = 0.0


@dataclass
class PersonAttribute:
    name: str
    value: str = ""
    confidence: float = 0.0


@dataclass
class PersonDetection:
    attributes: List[PersonAttribute] = field(default_factory=list)


@dataclass
class AnnotationBundle:
    """Everything the heuristic scorer reads from the vision service."""
    transcript: str = ""
    shots: List[Shot] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    text_detections: List[str] = field(default_factory=list)
    objects: List[DetectedObject] = field(default_factory=list)
    persons: List[PersonDetection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnnotationBundle":
        """Build a bundle from its camelCase JSON layout.

        Missing keys default to empty. Labels, text detections and objects may
        be given as plain strings. Entries of the wrong shape are skipped with
        a warning.
        """
        labels = []
        for item in list_items(data.get("labels"), "labels"):
            if isinstance(item, str):
                labels.append(Label(description=item))
            elif isinstance(item, Mapping):
                labels.append(Label(
                    description=as_text(item.get("description")),
                    category=as_text(item.get("category")),
                ))
            else:
                logger.warning("Ignoring malformed labels entry: %r", item)

        objects = []
        for item in list_items(data.get("objects"), "objects"):
            if isinstance(item, str):
                objects.append(DetectedObject(description=item))
            elif isinstance(item, Mapping):
                objects.append(DetectedObject(
                    description=as_text(item.get("description")),
                    confidence=as_float(item.get("confidence")),
                ))
            else:
                logger.warning("Ignoring malformed objects entry: %r", item)

        persons = [
            PersonDetection(attributes=[
                PersonAttribute(
                    name=as_text(attr.get("name")),
                    value=as_text(attr.get("value")),
                    confidence=as_float(attr.get("confidence")),
                )
                for attr in mapping_items(person.get("attributes"), "attributes")
            ])
            for person in mapping_items(data.get("persons"), "persons")
        ]

        return cls(
            transcript=as_text(data.get("transcript")),
            shots=[
                Shot(start=as_float(s.get("start")), end=as_float(s.get("end")))
                for s in mapping_items(data.get("shots"), "shots")
            ],
            labels=labels,
            text_detections=[
                t for t in list_items(data.get("textDetections"), "textDetections")
                if isinstance(t, str) and t
            ],
            objects=objects,
            persons=persons,
        )


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportMetadata:
    """Caller-supplied information, carried through unchanged."""
    file_size: str = ""
    duration: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"fileSize": self.file_size, "duration": self.duration}


def _empty_categories() -> Dict[Category, CategoryAnalysis]:
    return {category: CategoryAnalysis() for category in Category}


@dataclass
class AnalysisReport(_Sealable):
    """The six category analyses plus the aggregated result."""
    scorer: ScorerKind
    categories: Dict[Category, CategoryAnalysis] = field(default_factory=_empty_categories)
    overall_score: float = 0.0
    suggestions: List[str] = field(default_factory=list)
    metadata: ReportMetadata = field(default_factory=ReportMetadata)
    raw_data: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, category: Category) -> CategoryAnalysis:
        return self.categories[category]

    def scores(self) -> Dict[Category, int]:
        return {category: self.categories[category].score for category in Category}

    def unscored_categories(self) -> List[Category]:
        """Categories for which no score was recorded."""
        return [c for c in Category if not self.categories[c].scored]

    def seal(self) -> None:
        """Freeze the report, its categories and its raw data.

        Any later assignment raises ``dataclasses.FrozenInstanceError``.
        """
        if self._sealed:
            return
        for analysis in self.categories.values():
            analysis.seal()
        self.categories = MappingProxyType(dict(self.categories))
        self.suggestions = tuple(self.suggestions)
        self.raw_data = _freeze(self.raw_data)
        self._mark_sealed()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            category.value: self.categories[category].to_dict()
            for category in Category
        }
        result["overallScore"] = self.overall_score
        result["suggestions"] = list(self.suggestions)
        result["metadata"] = self.metadata.to_dict()
        result["rawData"] = _thaw(self.raw_data)
        return result

    def category_rows(self) -> List[Dict[str, Any]]:
        """Flatten categories for tabular display."""
        rows = []
        for category in Category:
            analysis = self.categories[category]
            rows.append({
                "category": category.label,
                "score": analysis.score,
                "max": self.scorer.max_score,
                "scored": analysis.scored,
                "notes": list(analysis.details) or list(analysis.good_points),
                "improvements": list(analysis.improvement_points),
            })
        return rows
