"""Scored examples: construction, preparation and loading."""

from aucflow.data.examples import (
    ScoredExample,
    PreparedExamples,
    as_scored_examples,
    examples_from_arrays,
    count_labels,
    prepare_examples,
)
from aucflow.data.loaders import load_table, load_scored_examples

__all__ = [
    "ScoredExample",
    "PreparedExamples",
    "as_scored_examples",
    "examples_from_arrays",
    "count_labels",
    "prepare_examples",
    "load_table",
    "load_scored_examples",
]
