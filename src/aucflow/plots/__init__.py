"""Chart packaging for ROC and PR curves."""

from aucflow.plots.diagrams import (
    TICK_VALUES,
    CurveDiagrams,
    build_curve_chart,
    compute_areas_diagrams,
    save_chart,
)
from aucflow.plots.schemas import (
    AxisPadding,
    AxisTick,
    ChartAxes,
    ChartAxis,
    ChartData,
    CurveChart,
    CurveKind,
)

__all__ = [
    "TICK_VALUES",
    "CurveDiagrams",
    "build_curve_chart",
    "compute_areas_diagrams",
    "save_chart",
    # Schema classes
    "AxisPadding",
    "AxisTick",
    "ChartAxes",
    "ChartAxis",
    "ChartData",
    "CurveChart",
    "CurveKind",
]
