"""Loading scored examples from CSV and Parquet tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import numpy as np
import pandas as pd

from aucflow.data.examples import ScoredExample, examples_from_arrays

logger = logging.getLogger(__name__)


def load_table(path: Path, columns: Optional[List[str]] = None) -> pd.DataFrame:
    """
    Load a table from a ``.csv`` or ``.parquet`` file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the suffix is neither .csv nor .parquet
    ImportError
        If a .parquet file is given and PyArrow is not installed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data path not found: {path}")

    suffix = path.suffix.lower()
    logger.info(f"Loading table from {path}")

    if suffix == ".csv":
        return pd.read_csv(path, usecols=columns)
    elif suffix == ".parquet":
        try:
            import pyarrow  # noqa: F401
        except ImportError:
            raise ImportError(
                "Reading .parquet files needs PyArrow: pip install aucflow[parquet]"
            ) from None
        return pd.read_parquet(path, columns=columns)
    else:
        raise ValueError(
            f"Cannot infer data format from path: {path}. Expected .csv or .parquet file."
        )


def _resolve_pos_label(labels: pd.Series, pos_label: Any) -> Any:
    """Pick the positive label value, converting CLI strings to the column dtype."""
    if pos_label is None:
        values = set(pd.unique(labels))
        if not values <= {0, 1}:
            raise ValueError(
                f"Labels {sorted(map(str, values))[:10]} are not 0/1; pass pos_label explicitly"
            )
        return 1

    if pd.api.types.is_bool_dtype(labels) and isinstance(pos_label, str):
        return pos_label.strip().lower() in ("1", "true", "yes")
    if pd.api.types.is_numeric_dtype(labels) and isinstance(pos_label, str):
        try:
            return float(pos_label)
        except ValueError:
            raise ValueError(
                f"pos_label {pos_label!r} does not match numeric label column"
            ) from None
    return pos_label


def load_scored_examples(
    path: Path,
    score_col: str = "score",
    label_col: str = "label",
    pos_label: Any = None,
) -> List[ScoredExample]:
    """
    Load scored examples from a table with a score and a label column.

    Parameters
    ----------
    path : Path
        CSV or Parquet file
    score_col : str
        Column holding predicted scores
    label_col : str
        Column holding ground-truth labels
    pos_label : Any, optional
        Label value marking positives. If None the label column must be 0/1
        or boolean.

    Returns
    -------
    List[ScoredExample]
        Examples in file order

    Raises
    ------
    ValueError
        If a column is missing or the labels cannot be mapped
    """
    df = load_table(path)

    missing = [c for c in (score_col, label_col) if c not in df.columns]
    if missing:
        raise ValueError(
            f"Columns not found: {missing}. Available: {sorted(map(str, df.columns))[:10]}"
        )

    df = df[[score_col, label_col]]
    n_missing = int(df.isna().any(axis=1).sum())
    if n_missing:
        logger.warning(f"Dropping {n_missing} rows with missing score or label")
        df = df.dropna()

    labels = df[label_col]
    positive = _resolve_pos_label(labels, pos_label)
    scores = pd.to_numeric(df[score_col], errors="raise").to_numpy(dtype=float)

    examples = examples_from_arrays(labels.to_numpy(), scores, pos_label=positive)
    n_pos = int(np.sum(labels.to_numpy() == positive))
    logger.info(f"Loaded {len(examples)} examples ({n_pos} positive) from {path}")
    return examples
