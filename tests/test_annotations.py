"""Tests for the Video Intelligence payload adapter."""

from review_analyzer.ai.annotations import (
    build_metadata, bundle_from_response, estimate_api_cost, format_file_size,
    is_annotation_response, offset_seconds, video_duration,
)
from review_analyzer.core.models import Shot


RESPONSE = {
    "annotationResults": [{
        "speechTranscriptions": [{
            "alternatives": [{
                "transcript": "Let me show you this camera.",
                "confidence": 0.91,
            }],
        }],
        "shotAnnotations": [
            {"startTimeOffset": "0s", "endTimeOffset": "4.5s"},
            {"startTimeOffset": {"seconds": 4, "nanos": 500000000},
             "endTimeOffset": {"seconds": 65}},
        ],
        "shotLabelAnnotations": [
            {"entity": {"description": "camera"},
             "categoryEntities": [{"description": "electronics"}]},
            {"entity": {"description": "lens"}},
        ],
        "textAnnotations": [{"text": "ZoomMaster X"}, {"text": ""}],
        "objectAnnotations": [{"entity": {"description": "tripod"}, "confidence": 0.8}],
        "personDetectionAnnotations": [{
            "tracks": [{
                "timestampedObjects": [{
                    "attributes": [{"name": "gesture", "value": "pointing", "confidence": 0.85}],
                }],
            }],
        }],
    }],
}


class TestOffsets:
    def test_string_offset(self):
        assert offset_seconds("12.5s") == 12.5

    def test_proto_offset(self):
        assert offset_seconds({"seconds": 3, "nanos": 250000000}) == 3.25

    def test_missing_offset(self):
        assert offset_seconds(None) == 0.0
        assert offset_seconds({}) == 0.0
        assert offset_seconds("garbage") == 0.0


class TestBundleFromResponse:
    def test_fields(self):
        bundle = bundle_from_response(RESPONSE)

        assert bundle.transcript == "Let me show you this camera."
        assert bundle.shots == [Shot(0.0, 4.5), Shot(4.5, 65.0)]
        assert [label.description for label in bundle.labels] == ["camera", "lens"]
        assert bundle.labels[0].category == "electronics"
        assert bundle.text_detections == ["ZoomMaster X"]
        assert bundle.objects[0].description == "tripod"
        assert bundle.persons[0].attributes[0].name == "gesture"
        assert bundle.persons[0].attributes[0].confidence == 0.85

    def test_empty_response(self):
        bundle = bundle_from_response({"annotationResults": []})
        assert bundle.transcript == ""
        assert bundle.shots == []

    def test_transcription_without_alternatives(self):
        bundle = bundle_from_response({"annotationResults": [{"speechTranscriptions": [{}]}]})
        assert bundle.transcript == ""

    def test_malformed_entries_skipped(self):
        bundle = bundle_from_response({"annotationResults": [{
            "speechTranscriptions": ["hello"],
            "shotAnnotations": [3, {"startTimeOffset": "1s", "endTimeOffset": {"seconds": "x"}}],
            "shotLabelAnnotations": [{"entity": "camera", "categoryEntities": [None]}],
            "textAnnotations": "ZoomMaster",
            "objectAnnotations": [{"entity": {"description": "tripod"}, "confidence": "high"}],
            "personDetectionAnnotations": ["x", {"tracks": [{"timestampedObjects": [7]}]}],
        }]})

        assert bundle.transcript == ""
        assert bundle.shots == [Shot(1.0, 0.0)]
        assert bundle.labels[0].description == ""
        assert bundle.text_detections == []
        assert bundle.objects[0].confidence == 0.0
        assert len(bundle.persons) == 1
        assert bundle.persons[0].attributes == []

    def test_non_mapping_result(self):
        assert bundle_from_response({"annotationResults": ["oops"]}).shots == []

    def test_detection(self):
        assert is_annotation_response(RESPONSE)
        assert not is_annotation_response({"transcript": "hi"})


class TestMetadata:
    def test_duration_from_last_shot(self):
        assert video_duration([Shot(0, 4.5), Shot(4.5, 65.0)]) == "1:05"
        assert video_duration([]) == "0:00"

    def test_file_size(self):
        assert format_file_size(5 * 1024 * 1024) == "5.00 MB"
        assert format_file_size(None) == "N/A"

    def test_build_metadata(self):
        metadata = build_metadata([Shot(0, 125)], 1536 * 1024)
        assert metadata.to_dict() == {"fileSize": "1.50 MB", "duration": "2:05"}


class TestApiCost:
    def test_within_free_tier(self):
        cost = estimate_api_cost(65)
        assert cost["minutes"] == 2
        assert cost["total"] == 0
        assert cost["features"]["Label Detection"]["cost"] == 0

    def test_beyond_free_tier(self):
        cost = estimate_api_cost(1010 * 60)
        assert cost["features"]["Shot Detection"]["cost"] == 0.5
        assert cost["total"] == 7.48

    def test_zero_length(self):
        assert estimate_api_cost(0)["minutes"] == 0
