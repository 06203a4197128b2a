"""ROC/PR curves, their areas and maximum accuracy."""

from aucflow.metrics.accuracy import compute_accuracy_list, compute_max_accuracy
from aucflow.metrics.areas import CurveAreas, compute_areas
from aucflow.metrics.pr import PRPoint, compute_pr_points, interpolate_pr
from aucflow.metrics.roc import compute_roc_points, roc_hull_area

__all__ = [
    "compute_accuracy_list",
    "compute_max_accuracy",
    "CurveAreas",
    "compute_areas",
    "PRPoint",
    "compute_pr_points",
    "interpolate_pr",
    "compute_roc_points",
    "roc_hull_area",
]
