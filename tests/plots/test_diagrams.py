"""Tests for chart packaging of ROC and PR curves."""

from __future__ import annotations

import json

import pytest

from aucflow.metrics import compute_areas
from aucflow.plots import (
    TICK_VALUES,
    CurveChart,
    CurveDiagrams,
    CurveKind,
    build_curve_chart,
    compute_areas_diagrams,
    save_chart,
)


class TestBuildCurveChart:
    """Tests for build_curve_chart function."""

    def test_payload_layout(self):
        chart = build_curve_chart([(0.0, 0.5), (1.0, 1.0)], CurveKind.ROC)

        assert chart.to_dict() == {
            "data": {
                "x": "x",
                "rows": [["x", "ROC"], [0.0, 0.5], [1.0, 1.0]],
            },
            "axis": {
                "x": {
                    "min": 0.0,
                    "max": 1.0,
                    "padding": 0.0,
                    "tick": {"values": TICK_VALUES},
                },
                "y": {
                    "min": 0.0,
                    "max": 1.0,
                    "padding": {"bottom": 0.0, "top": 0.0},
                    "tick": {"values": TICK_VALUES},
                },
            },
        }

    def test_tick_values(self):
        assert TICK_VALUES == [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]

    def test_label_and_points(self):
        chart = build_curve_chart([(0.0, 1.0), (1.0, 0.5)], "PR")

        assert chart.label == "PR"
        assert chart.points == [(0.0, 1.0), (1.0, 0.5)]

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            build_curve_chart([(0.0, 0.0)], "DET")


class TestComputeAreasDiagrams:
    """Tests for compute_areas_diagrams function."""

    def test_wraps_compute_areas(self, alternating_examples):
        auc_roc, roc, auc_pr, pr = compute_areas(alternating_examples)

        result = compute_areas_diagrams(alternating_examples)

        assert isinstance(result, CurveDiagrams)
        assert isinstance(result.roc, CurveChart)
        assert result.auc_roc == auc_roc
        assert result.auc_pr == auc_pr
        assert result.roc.label == "ROC"
        assert result.pr.label == "PR"
        assert result.roc.points == roc
        assert result.pr.points == pr

    def test_repeated_calls_are_identical(self, alternating_examples):
        first = compute_areas_diagrams(alternating_examples)
        second = compute_areas_diagrams(alternating_examples)

        assert first.auc_roc == second.auc_roc
        assert first.auc_pr == second.auc_pr
        assert first.roc.to_dict() == second.roc.to_dict()
        assert first.pr.to_dict() == second.pr.to_dict()
        assert first.roc is not second.roc


def test_save_chart(temp_outdir, alternating_examples):
    result = compute_areas_diagrams(alternating_examples)
    output_path = temp_outdir / "nested" / "roc.json"

    save_chart(result.roc, output_path)

    with open(output_path) as f:
        saved = json.load(f)
    assert saved == result.roc.to_dict()
    assert saved["data"]["rows"][0] == ["x", "ROC"]
