"""Tests for the shared data models."""

import pytest

from review_analyzer.core.models import (
    AnalysisReport, AnnotationBundle, Category, CategoryAnalysis, DetectedObject,
    ScorerKind, Shot,
)


class TestCategory:
    def test_wire_keys(self):
        assert [c.value for c in Category] == [
            "clarity", "engagement", "relevance",
            "informativeContent", "visualsAndAudio", "presentation",
        ]

    def test_labels(self):
        assert Category.VISUALS_AND_AUDIO.label == "Visuals and Audio Quality"
        assert Category.INFORMATIVE_CONTENT.label == "Informative Content"


class TestScorerKind:
    def test_scales(self):
        assert ScorerKind.ANNOTATION.max_score == 5
        assert ScorerKind.NARRATIVE.max_score == 10


class TestCategoryAnalysis:
    def test_defaults(self):
        analysis = CategoryAnalysis()
        assert analysis.score == 0
        assert analysis.scored is False

    @pytest.mark.parametrize("value,maximum,expected", [
        (7, 10, 7), (12, 10, 10), (-3, 10, 0), (6, 5, 5),
    ])
    def test_set_score_clamps(self, value, maximum, expected):
        analysis = CategoryAnalysis()
        analysis.set_score(value, maximum)
        assert analysis.score == expected
        assert analysis.scored is True

    def test_seal(self):
        analysis = CategoryAnalysis(good_points=["a"])
        analysis.seal()
        with pytest.raises(AttributeError):
            analysis.good_points.append("b")
        assert analysis.to_dict()["goodPoints"] == ["a"]


class TestAnalysisReport:
    def test_fresh_categories(self):
        first = AnalysisReport(scorer=ScorerKind.NARRATIVE)
        second = AnalysisReport(scorer=ScorerKind.NARRATIVE)
        first[Category.CLARITY].good_points.append("x")
        assert second[Category.CLARITY].good_points == []

    def test_category_rows(self):
        report = AnalysisReport(scorer=ScorerKind.ANNOTATION)
        report[Category.CLARITY].set_score(3, 5)
        report[Category.CLARITY].details.append("Subject introduced early in the video")

        rows = report.category_rows()
        assert len(rows) == 6
        assert rows[0]["category"] == "Clarity"
        assert rows[0]["max"] == 5
        assert rows[0]["notes"] == ["Subject introduced early in the video"]
        assert rows[1]["scored"] is False


class TestAnnotationBundle:
    def test_from_dict(self):
        bundle = AnnotationBundle.from_dict({
            "transcript": "hello",
            "shots": [{"start": 0, "end": 2.5}],
            "labels": ["phone", {"description": "case", "category": "accessory"}],
            "textDetections": ["Brand", ""],
            "objects": ["phone", {"description": "box", "confidence": 0.6}],
            "persons": [{"attributes": [{"name": "gesture", "confidence": 0.9}]}],
        })
        assert bundle.transcript == "hello"
        assert bundle.shots[0].end == 2.5
        assert bundle.labels[1].category == "accessory"
        assert bundle.text_detections == ["Brand"]
        assert bundle.objects[1].confidence == 0.6
        assert bundle.persons[0].attributes[0].confidence == 0.9

    def test_from_empty_dict(self):
        bundle = AnnotationBundle.from_dict({})
        assert bundle == AnnotationBundle()

    def test_malformed_entries_skipped(self):
        bundle = AnnotationBundle.from_dict({
            "transcript": 42,
            "shots": [3, 4, {"start": "soon", "end": 2}],
            "labels": [7, "phone"],
            "textDetections": "not a list",
            "objects": [None, {"description": "box", "confidence": "high"}],
            "persons": ["x", {"attributes": ["gesture", {"name": "gesture", "confidence": 0.8}]}],
        })
        assert bundle.transcript == ""
        assert bundle.shots == [Shot(start=0.0, end=2.0)]
        assert [label.description for label in bundle.labels] == ["phone"]
        assert bundle.text_detections == []
        assert bundle.objects == [DetectedObject(description="box", confidence=0.0)]
        assert len(bundle.persons) == 1
        assert bundle.persons[0].attributes[0].confidence == 0.8
