"""Exception types raised by aucflow."""

from __future__ import annotations


class AucflowError(Exception):
    """Base class for all aucflow errors."""


class InvalidInputError(AucflowError, ValueError):
    """The example list is malformed: not a sequence, empty, or holding bad items."""


class DegenerateDatasetError(AucflowError, ValueError):
    """The example list lacks positives or negatives, so rates are undefined."""

    def __init__(self, n_pos: int, n_neg: int):
        self.n_pos = n_pos
        self.n_neg = n_neg
        super().__init__(
            f"Curves need at least one positive and one negative example "
            f"(got {n_pos} positive, {n_neg} negative)"
        )
