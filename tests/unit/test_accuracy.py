"""Tests for the maximum accuracy sweep."""

from __future__ import annotations

import numpy as np
import pytest

from aucflow.data import examples_from_arrays, prepare_examples
from aucflow.exceptions import InvalidInputError
from aucflow.metrics import compute_accuracy_list, compute_max_accuracy


def test_accuracy_list_known_values(alternating_examples):
    prepared = prepare_examples(alternating_examples)

    accuracies = compute_accuracy_list(prepared)

    assert accuracies == [0.5, 0.75, 0.5, 0.75, 0.5]
    assert len(accuracies) == len(prepared) + 1


def test_max_accuracy_known_value(alternating_examples):
    assert compute_max_accuracy(alternating_examples) == 0.75


def test_max_accuracy_perfect_separation():
    examples = [(0.9, 1), (0.8, 1), (0.3, 0), (0.1, 0), (0.05, 0)]

    assert compute_max_accuracy(examples) == 1.0


def test_max_accuracy_single_class_is_defined():
    assert compute_max_accuracy([(0.9, 1), (0.4, 1)]) == 1.0
    assert compute_max_accuracy([(0.9, 0), (0.4, 0)]) == 1.0


def test_max_accuracy_empty_rejected():
    with pytest.raises(InvalidInputError):
        compute_max_accuracy([])


def test_max_accuracy_matches_list_and_beats_majority(sample_scored_data):
    y_true, scores = sample_scored_data
    examples = examples_from_arrays(y_true, scores)

    accuracies = compute_accuracy_list(prepare_examples(examples))
    max_acc = compute_max_accuracy(examples)

    majority = max(np.mean(y_true), 1 - np.mean(y_true))
    assert max_acc == max(accuracies)
    assert max_acc >= majority
    assert 0 <= min(accuracies) <= max_acc <= 1


def test_max_accuracy_repeated_calls_are_identical(sample_scored_data):
    y_true, scores = sample_scored_data
    examples = examples_from_arrays(y_true, scores)

    assert compute_max_accuracy(examples) == compute_max_accuracy(examples)
