"""
aucflow: ROC and Precision-Recall curves for binary classifiers.

This package provides:
- ROC curve points and area by trapezoid summation over the threshold sweep
- PR curve points and exact area with Davis & Goadrich interpolation
- Maximum accuracy over all decision thresholds
- Chart payloads for C3-compatible renderers
- A CLI for scored-example tables
"""

__version__ = "0.1.0"

from aucflow.exceptions import AucflowError, InvalidInputError, DegenerateDatasetError
from aucflow.data.examples import ScoredExample
from aucflow.metrics.areas import CurveAreas, compute_areas
from aucflow.metrics.accuracy import compute_max_accuracy
from aucflow.plots.diagrams import CurveDiagrams, compute_areas_diagrams
from aucflow.config import EvalConfig

__all__ = [
    "__version__",
    "AucflowError",
    "InvalidInputError",
    "DegenerateDatasetError",
    "ScoredExample",
    "CurveAreas",
    "compute_areas",
    "compute_max_accuracy",
    "CurveDiagrams",
    "compute_areas_diagrams",
    "EvalConfig",
]
