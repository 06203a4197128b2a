"""Scored examples and their preparation for threshold sweeps."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from aucflow.exceptions import DegenerateDatasetError, InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredExample:
    """A predicted probability paired with its ground-truth label."""

    score: float
    label: bool  # True for a positive example


@dataclass(frozen=True)
class PreparedExamples:
    """Examples sorted by descending score together with the class counts."""

    examples: Tuple[ScoredExample, ...]
    n_pos: int
    n_neg: int

    def __len__(self) -> int:
        return len(self.examples)

    def __iter__(self) -> Iterator[ScoredExample]:
        return iter(self.examples)


def _coerce_label(label: Any, index: int) -> bool:
    # bool is a subclass of int; numpy bools are neither
    if isinstance(label, (bool, np.bool_)):
        return bool(label)
    if isinstance(label, Real) and label in (0, 1):
        return bool(label)
    raise InvalidInputError(
        f"Example {index}: label must be a bool or 0/1, got {label!r}"
    )


def _coerce_score(score: Any, index: int) -> float:
    if isinstance(score, (bool, np.bool_)) or not isinstance(score, Real):
        raise InvalidInputError(
            f"Example {index}: score must be a real number, got {score!r}"
        )
    value = float(score)
    if not math.isfinite(value):
        raise InvalidInputError(f"Example {index}: score must be finite, got {value}")
    return value


def as_scored_examples(items: Any) -> List[ScoredExample]:
    """
    Normalise raw input into a list of ScoredExample.

    Parameters
    ----------
    items : Sequence
        ScoredExample instances or ``(score, label)`` pairs, where ``label`` is a
        bool or 0/1 (1 marks a positive example)

    Returns
    -------
    List[ScoredExample]
        New list; the caller's sequence is left untouched

    Raises
    ------
    InvalidInputError
        If ``items`` is not a sequence or an item is not a valid pair
    """
    if isinstance(items, (str, bytes, dict)) or not isinstance(
        items, (Sequence, np.ndarray)
    ):
        raise InvalidInputError(
            f"Expected a list of (score, label) pairs, got {type(items).__name__}"
        )

    examples: List[ScoredExample] = []
    for i, item in enumerate(items):
        if isinstance(item, ScoredExample):
            examples.append(item)
            continue
        try:
            score, label = item
        except (TypeError, ValueError):
            raise InvalidInputError(
                f"Example {i}: expected a (score, label) pair, got {item!r}"
            ) from None
        examples.append(ScoredExample(_coerce_score(score, i), _coerce_label(label, i)))
    return examples


def examples_from_arrays(
    y_true: np.ndarray,
    scores: np.ndarray,
    pos_label: Any = 1,
) -> List[ScoredExample]:
    """
    Build scored examples from parallel label and score arrays.

    Parameters
    ----------
    y_true : np.ndarray
        True labels of any dtype
    scores : np.ndarray
        Predicted scores or probabilities of the positive class
    pos_label : Any
        Value of ``y_true`` marking a positive example

    Returns
    -------
    List[ScoredExample]
        One example per row, in input order
    """
    y_true = np.asarray(y_true).ravel()
    scores = np.asarray(scores, dtype=float).ravel()
    if y_true.shape != scores.shape:
        raise InvalidInputError(
            f"y_true and scores differ in length ({len(y_true)} vs {len(scores)})"
        )
    if not np.all(np.isfinite(scores)):
        raise InvalidInputError("scores must be finite")

    positive = y_true == pos_label
    return [ScoredExample(float(s), bool(p)) for s, p in zip(scores, positive)]


def count_labels(examples: Iterable[ScoredExample]) -> Tuple[int, int]:
    """Return ``(n_pos, n_neg)``."""
    n_pos = 0
    n_neg = 0
    for ex in examples:
        if ex.label:
            n_pos += 1
        else:
            n_neg += 1
    return n_pos, n_neg


def prepare_examples(
    items: Any,
    require_both_classes: bool = True,
) -> PreparedExamples:
    """
    Sort examples by descending score and count positives and negatives.

    Sorting is a stable ascending sort that is then reversed, so examples
    sharing a score end up in reverse input order. Curve sweeps treat a run
    of equal scores as one block; only the intermediate accuracy list can
    observe the order inside it.

    Parameters
    ----------
    items : Sequence
        ScoredExample instances or ``(score, label)`` pairs, in any order
    require_both_classes : bool
        Reject input without positives or without negatives

    Returns
    -------
    PreparedExamples
        Sorted examples with ``n_pos`` and ``n_neg``

    Raises
    ------
    InvalidInputError
        If the input is malformed or empty
    DegenerateDatasetError
        If ``require_both_classes`` and one class is missing
    """
    examples = as_scored_examples(items)
    if not examples:
        raise InvalidInputError("Example list is empty")

    n_pos, n_neg = count_labels(examples)
    if require_both_classes and (n_pos == 0 or n_neg == 0):
        raise DegenerateDatasetError(n_pos, n_neg)

    ordered = sorted(examples, key=lambda ex: ex.score)
    ordered.reverse()

    logger.debug(f"Prepared {len(ordered)} examples ({n_pos} positive, {n_neg} negative)")
    return PreparedExamples(examples=tuple(ordered), n_pos=n_pos, n_neg=n_neg)
