"""Adapter for Video Intelligence annotation payloads.

Converts the JSON form of an ``AnnotateVideoResponse`` into an
AnnotationBundle, and derives the duration, file size and API cost figures
reported alongside an analysis.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.models import (
    AnnotationBundle, DetectedObject, Label, PersonAttribute,
    PersonDetection, ReportMetadata, Shot, as_float, as_text, mapping_items,
)

logger = logging.getLogger(__name__)


# USD per minute after the free tier, per feature.
FEATURE_RATES = {
    "Label Detection": 0.10,
    "Shot Detection": 0.05,
    "Speech Transcription": 0.048,
    "Object Tracking": 0.15,
    "Text Detection": 0.15,
    "Logo Detection": 0.15,
    "Person Detection": 0.10,
}
FREE_MINUTES_PER_FEATURE = 1000


def is_annotation_response(payload: Dict[str, Any]) -> bool:
    """True if ``payload`` looks like a raw AnnotateVideoResponse."""
    return isinstance(payload, dict) and "annotationResults" in payload


def offset_seconds(offset: Union[str, Dict[str, Any], int, float, None]) -> float:
    """Seconds from a duration given as ``"12.5s"`` or ``{seconds, nanos}``."""
    if isinstance(offset, str):
        return as_float(offset.rstrip("s") or 0)
    if isinstance(offset, Mapping):
        return as_float(offset.get("seconds")) + as_float(offset.get("nanos")) / 1e9
    return as_float(offset)


def _first_result(payload: Dict[str, Any]) -> Mapping[str, Any]:
    return next(mapping_items(payload.get("annotationResults"), "annotationResults"), {})


def _transcript(result: Mapping[str, Any]) -> str:
    transcription = next(mapping_items(result.get("speechTranscriptions"), "speechTranscriptions"), None)
    if transcription is None:
        logger.info("No speech transcription in annotations")
        return ""
    alternative = next(mapping_items(transcription.get("alternatives"), "alternatives"), None)
    if alternative is None:
        logger.info("Speech transcription has no alternatives")
        return ""
    logger.debug("Transcript confidence: %s", alternative.get("confidence", 0))
    return as_text(alternative.get("transcript"))


def _description(annotation: Mapping[str, Any], key: str = "entity") -> str:
    entity = annotation.get(key)
    return as_text(entity.get("description")) if isinstance(entity, Mapping) else ""


def _shots(result: Mapping[str, Any]) -> List[Shot]:
    return [
        Shot(
            start=offset_seconds(shot.get("startTimeOffset")),
            end=offset_seconds(shot.get("endTimeOffset")),
        )
        for shot in mapping_items(result.get("shotAnnotations"), "shotAnnotations")
    ]


def _labels(result: Mapping[str, Any]) -> List[Label]:
    labels = []
    for annotation in mapping_items(result.get("shotLabelAnnotations"), "shotLabelAnnotations"):
        category = next(mapping_items(annotation.get("categoryEntities"), "categoryEntities"), {})
        labels.append(Label(
            description=_description(annotation),
            category=as_text(category.get("description")),
        ))
    return labels


def _text_detections(result: Mapping[str, Any]) -> List[str]:
    return [
        as_text(t.get("text"))
        for t in mapping_items(result.get("textAnnotations"), "textAnnotations")
        if as_text(t.get("text"))
    ]


def _objects(result: Mapping[str, Any]) -> List[DetectedObject]:
    return [
        DetectedObject(
            description=_description(obj),
            confidence=as_float(obj.get("confidence")),
        )
        for obj in mapping_items(result.get("objectAnnotations"), "objectAnnotations")
    ]


def _attributes(items: Any) -> List[PersonAttribute]:
    return [
        PersonAttribute(
            name=as_text(attr.get("name")),
            value=as_text(attr.get("value")),
            confidence=as_float(attr.get("confidence")),
        )
        for attr in mapping_items(items, "attributes")
    ]


def _persons(result: Mapping[str, Any]) -> List[PersonDetection]:
    persons = []
    for annotation in mapping_items(result.get("personDetectionAnnotations"), "personDetectionAnnotations"):
        attributes = _attributes(annotation.get("attributes"))
        # Attributes normally sit on each timestamped object of each track.
        for track in mapping_items(annotation.get("tracks"), "tracks"):
            attributes.extend(_attributes(track.get("attributes")))
            for obj in mapping_items(track.get("timestampedObjects"), "timestampedObjects"):
                attributes.extend(_attributes(obj.get("attributes")))
        persons.append(PersonDetection(attributes=attributes))
    return persons


def bundle_from_response(payload: Dict[str, Any]) -> AnnotationBundle:
    """Build an AnnotationBundle from the first annotation result of a response."""
    result = _first_result(payload)
    bundle = AnnotationBundle(
        transcript=_transcript(result),
        shots=_shots(result),
        labels=_labels(result),
        text_detections=_text_detections(result),
        objects=_objects(result),
        persons=_persons(result),
    )
    logger.info(
        "Annotations: %d chars transcript, %d shots, %d labels, %d text, "
        "%d objects, %d persons",
        len(bundle.transcript), len(bundle.shots), len(bundle.labels),
        len(bundle.text_detections), len(bundle.objects), len(bundle.persons),
    )
    return bundle


def duration_seconds(shots: List[Shot]) -> float:
    return shots[-1].end if shots else 0.0


def video_duration(shots: List[Shot]) -> str:
    """``m:ss`` taken from the end of the last shot."""
    total = int(duration_seconds(shots))
    return f"{total // 60}:{total % 60:02d}"


def format_file_size(num_bytes: Optional[int]) -> str:
    if num_bytes is None:
        return "N/A"
    return f"{num_bytes / (1024 * 1024):.2f} MB"


def build_metadata(shots: List[Shot], num_bytes: Optional[int] = None) -> ReportMetadata:
    return ReportMetadata(file_size=format_file_size(num_bytes), duration=video_duration(shots))


def estimate_api_cost(seconds: float) -> Dict[str, Any]:
    """Per-feature cost estimate for annotating a video of ``seconds`` length.

    Minutes are rounded up; the first 1000 minutes of each feature are free.
    """
    minutes = math.ceil(seconds / 60) if seconds > 0 else 0
    features = {}
    for feature, rate in FEATURE_RATES.items():
        billable = max(0, minutes - FREE_MINUTES_PER_FEATURE)
        features[feature] = {
            "minutes": minutes,
            "rate": rate,
            "cost": round(billable * rate, 2),
        }
    total = round(sum(f["cost"] for f in features.values()), 2)
    return {"minutes": minutes, "features": features, "total": total}
