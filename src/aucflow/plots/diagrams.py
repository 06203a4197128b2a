"""Curve packaging into chart payloads and JSON export."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NamedTuple, Sequence, Tuple

from aucflow.metrics.areas import compute_areas
from aucflow.plots.schemas import (
    AxisPadding,
    AxisTick,
    ChartAxes,
    ChartAxis,
    ChartData,
    CurveChart,
    CurveKind,
)

logger = logging.getLogger(__name__)

# 0.0, 0.1, ..., 1.0
TICK_VALUES = [round(i / 10, 1) for i in range(11)]


class CurveDiagrams(NamedTuple):
    """ROC and PR areas with their curves packaged as charts."""

    auc_roc: float
    roc: CurveChart
    auc_pr: float
    pr: CurveChart


def build_curve_chart(
    points: Sequence[Tuple[float, float]],
    kind: CurveKind,
) -> CurveChart:
    """
    Wrap curve points in a chart with both axes fixed to [0, 1].

    Parameters
    ----------
    points : Sequence[Tuple[float, float]]
        Curve points in emission order
    kind : CurveKind
        Series label of the chart

    Returns
    -------
    CurveChart
        Chart model; ``to_dict()`` gives the renderer payload
    """
    kind = CurveKind(kind)
    rows: list = [["x", kind.value]]
    rows.extend([float(x), float(y)] for x, y in points)

    return CurveChart(
        data=ChartData(x="x", rows=rows),
        axis=ChartAxes(
            x=ChartAxis(
                min=0.0,
                max=1.0,
                padding=0.0,
                tick=AxisTick(values=TICK_VALUES),
            ),
            y=ChartAxis(
                min=0.0,
                max=1.0,
                padding=AxisPadding(bottom=0.0, top=0.0),
                tick=AxisTick(values=TICK_VALUES),
            ),
        ),
    )


def compute_areas_diagrams(examples: Any) -> CurveDiagrams:
    """
    Compute ROC and PR areas and package both curves as charts.

    Takes the same input and raises the same errors as
    ``aucflow.metrics.compute_areas``.
    """
    auc_roc, roc, auc_pr, pr = compute_areas(examples)
    return CurveDiagrams(
        auc_roc=auc_roc,
        roc=build_curve_chart(roc, CurveKind.ROC),
        auc_pr=auc_pr,
        pr=build_curve_chart(pr, CurveKind.PR),
    )


def save_chart(chart: CurveChart, output_path: Path) -> None:
    """
    Save a chart to a JSON file.

    Parameters
    ----------
    chart : CurveChart
        Chart to save
    output_path : Path
        Output file path; parent directories are created
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(chart.to_dict(), f, indent=2)

    logger.info(f"Saved {chart.label} chart to {output_path}")
