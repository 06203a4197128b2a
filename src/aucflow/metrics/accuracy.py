"""Maximum accuracy over all decision thresholds."""

from __future__ import annotations

import logging
from typing import Any, List

from aucflow.data.examples import PreparedExamples, prepare_examples

logger = logging.getLogger(__name__)


def compute_accuracy_list(prepared: PreparedExamples) -> List[float]:
    """
    Sweep the sorted examples and collect the accuracy at every cut.

    The sweep starts with every example predicted negative. Each entry is the
    accuracy before the current example is moved to the positive side; the
    last entry is the accuracy with every example predicted positive, so the
    list has ``len(prepared) + 1`` entries.
    """
    tp, fp = 0, 0
    fn, tn = prepared.n_pos, prepared.n_neg
    total = tp + fp + fn + tn

    accuracies: List[float] = []
    for ex in prepared.examples:
        accuracies.append((tp + tn) / total)
        if ex.label:
            tp += 1
            fn -= 1
        else:
            fp += 1
            tn -= 1
    accuracies.append((tp + tn) / total)
    return accuracies


def compute_max_accuracy(examples: Any) -> float:
    """
    Return the maximum accuracy obtainable by thresholding the scores.

    Parameters
    ----------
    examples : Sequence
        ScoredExample instances or ``(score, label)`` pairs

    Returns
    -------
    float
        Best accuracy over the accuracy list

    Raises
    ------
    InvalidInputError
        If the input is malformed or empty
    """
    prepared = prepare_examples(examples, require_both_classes=False)
    max_acc = max(compute_accuracy_list(prepared))
    logger.debug(f"Max accuracy over {len(prepared)} examples: {max_acc:.4f}")
    return max_acc
