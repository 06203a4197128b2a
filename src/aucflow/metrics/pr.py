"""Precision-Recall curve points, interpolation and area.

Interpolation between two PR points follows Davis & Goadrich, "The
relationship between Precision-Recall and ROC curves", ICML 2006: false
positives are interpolated linearly per additional true positive and
precision is recomputed from the interpolated counts, since precision does
not vary linearly with recall.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from aucflow.data.examples import PreparedExamples

Point = Tuple[float, float]


class PRPoint(NamedTuple):
    """A raw PR point with the confusion counts that produced it."""

    recall: float
    precision: float
    tp: int
    fp: int


def compute_pr_points(prepared: PreparedExamples) -> List[PRPoint]:
    """
    Sweep the threshold down the sorted scores and collect raw PR points.

    Counts are seeded from the highest-scoring example, whose score becomes
    the first threshold. Afterwards a point is emitted, with the counts
    before the current example, whenever the score drops below the
    threshold. The sweep ends with a point at recall 1.0 carrying the
    precision of the final counts.
    """
    n_pos, n_neg = prepared.n_pos, prepared.n_neg
    head, rest = prepared.examples[0], prepared.examples[1:]

    if head.label:
        tp, fp, fn, tn = 1, 0, n_pos - 1, n_neg
    else:
        tp, fp, fn, tn = 0, 1, n_pos, n_neg - 1
    threshold = head.score

    points: List[PRPoint] = []
    for ex in rest:
        if ex.score < threshold:
            points.append(PRPoint(tp / (tp + fn), tp / (tp + fp), tp, fp))
            threshold = ex.score
        if ex.label:
            tp += 1
            fn -= 1
        else:
            fp += 1
            tn -= 1

    points.append(PRPoint(1.0, tp / (tp + fp), tp, fp))
    return points


def interpolate_pr(points: Sequence[PRPoint], n_pos: int) -> Tuple[float, List[Point]]:
    """
    Interpolate the raw PR points and compute the exact area under them.

    Between consecutive points A and B with ``tp_B > tp_A`` one point is
    inserted per additional true positive:

        recall    = (tp_A + i) / n_pos
        precision = (tp_A + i) / (tp_A + i + fp_A + i * (fp_B - fp_A) / (tp_B - tp_A))

    for ``i = 1 .. tp_B - tp_A``; the last of them coincides with B. The area
    is the sum of the trapezoids between successive interpolated points.

    Points at zero recall are passed through unchanged and reset the
    carried false-positive count. The curve is anchored at recall 0 before
    the first point with a true positive: with precision 0.0 when the very
    first raw point is ``(0, 0)``, otherwise with the precision of that point.

    Parameters
    ----------
    points : Sequence[PRPoint]
        Raw points from ``compute_pr_points``
    n_pos : int
        Number of positive examples

    Returns
    -------
    area : float
        Area under the interpolated PR curve
    curve : List[Tuple[float, float]]
        Interpolated (recall, precision) points in increasing recall
    """
    if not points:
        return 0.0, []

    starts_at_origin = points[0].recall == 0 and points[0].precision == 0

    area = 0.0
    curve: List[Point] = []
    tp_a, fp_a = 0, 0
    for point in points:
        tp_b, fp_b = point.tp, point.fp

        if tp_b == 0:
            curve.append((point.recall, point.precision))
            tp_a, fp_a = 0, 0
            continue

        prev_r = tp_a / n_pos
        if tp_a == 0:
            prev_p = 0.0 if starts_at_origin else point.precision
            curve.append((0.0, prev_p))
        else:
            prev_p = tp_a / (tp_a + fp_a)

        if tp_b == tp_a:
            curve.append((point.recall, point.precision))
        else:
            fp_per_tp = (fp_b - fp_a) / (tp_b - tp_a)
            for i in range(1, tp_b - tp_a + 1):
                r = (tp_a + i) / n_pos
                p = (tp_a + i) / (tp_a + i + fp_a + fp_per_tp * i)
                area += (r - prev_r) * (p + prev_p) / 2
                curve.append((r, p))
                prev_r, prev_p = r, p

        tp_a, fp_a = tp_b, fp_b

    return area, curve
