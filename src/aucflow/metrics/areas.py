"""Area under the ROC and PR curves of a list of scored examples."""

from __future__ import annotations

import logging
from typing import Any, List, NamedTuple, Tuple

from aucflow.data.examples import prepare_examples
from aucflow.metrics.pr import compute_pr_points, interpolate_pr
from aucflow.metrics.roc import compute_roc_points, roc_hull_area

logger = logging.getLogger(__name__)


class CurveAreas(NamedTuple):
    """ROC and PR areas with their curves; unpacks as a 4-tuple."""

    auc_roc: float
    roc: List[Tuple[float, float]]
    auc_pr: float
    pr: List[Tuple[float, float]]


def compute_areas(examples: Any) -> CurveAreas:
    """
    Compute the ROC and PR curves and the areas under them.

    Parameters
    ----------
    examples : Sequence
        ScoredExample instances or ``(score, label)`` pairs in any order,
        where ``label`` is a bool or 0/1 and 1 marks a positive example

    Returns
    -------
    CurveAreas
        ``(auc_roc, roc, auc_pr, pr)``; ROC points are (FPR, TPR) and PR
        points are (recall, precision)

    Raises
    ------
    InvalidInputError
        If the input is malformed or empty
    DegenerateDatasetError
        If there are no positive or no negative examples

    Examples
    --------
    >>> auc_roc, roc, auc_pr, pr = compute_areas([(0.9, 1), (0.2, 0)])
    >>> auc_roc, auc_pr
    (1.0, 1.0)
    """
    prepared = prepare_examples(examples)

    roc = compute_roc_points(prepared)
    auc_roc = roc_hull_area(roc)

    auc_pr, pr = interpolate_pr(compute_pr_points(prepared), prepared.n_pos)

    logger.debug(
        f"AUC-ROC={auc_roc:.4f} ({len(roc)} points), "
        f"AUC-PR={auc_pr:.4f} ({len(pr)} points)"
    )
    return CurveAreas(auc_roc=auc_roc, roc=roc, auc_pr=auc_pr, pr=pr)
