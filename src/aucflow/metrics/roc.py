"""ROC curve points and area."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from aucflow.data.examples import PreparedExamples

Point = Tuple[float, float]

# Above every finite score, so the first example always emits.
THRESHOLD_SENTINEL = math.inf


def compute_roc_points(prepared: PreparedExamples) -> List[Point]:
    """
    Sweep the threshold down the sorted scores and collect (FPR, TPR) points.

    A point is emitted whenever the score drops below the last threshold,
    using the counts before that example is applied, so every distinct score
    yields exactly one point and a block of tied scores moves the curve in a
    single step. The first point is always ``(0.0, 0.0)`` and the curve is
    closed with ``(1.0, 1.0)``.
    """
    tp, fp = 0, 0
    fn, tn = prepared.n_pos, prepared.n_neg
    threshold = THRESHOLD_SENTINEL

    points: List[Point] = []
    for ex in prepared.examples:
        if ex.score < threshold:
            points.append((fp / (fp + tn), tp / (tp + fn)))
            threshold = ex.score
        if ex.label:
            tp += 1
            fn -= 1
        else:
            fp += 1
            tn -= 1

    points.append((1.0, 1.0))
    return points


def roc_hull_area(points: Sequence[Point]) -> float:
    """
    Area under the ROC points by trapezoid summation from (0, 0) to (1, 1).

    The sweep already yields points on a monotone staircase, so no hull
    construction is needed beyond the running sum.
    """
    area = 0.0
    prev_x, prev_y = 0.0, 0.0
    for x, y in points:
        area += (x - prev_x) * (y + prev_y) / 2
        prev_x, prev_y = x, y
    # closing segment; zero width when the curve already ends at (1, 1)
    area += (1 - prev_x) * (1 + prev_y) / 2
    return area
