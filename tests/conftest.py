"""Pytest configuration and fixtures."""

import pytest
import numpy as np


@pytest.fixture
def alternating_examples():
    """Four examples alternating positive/negative by descending score."""
    return [(0.9, True), (0.8, False), (0.7, True), (0.6, False)]


@pytest.fixture
def negative_first_examples():
    """Four examples alternating negative/positive by descending score."""
    return [(0.9, False), (0.8, True), (0.7, False), (0.6, True)]


@pytest.fixture
def sample_scored_data():
    """Generate noisy binary scores with ties."""
    np.random.seed(42)
    n_samples = 200

    y_true = np.random.choice([0, 1], size=n_samples, p=[0.6, 0.4])
    # Rounded so that many scores are tied
    scores = np.round(np.clip(0.3 * y_true + 0.7 * np.random.rand(n_samples), 0, 1), 2)

    return y_true, scores


@pytest.fixture
def temp_outdir(tmp_path):
    """Provide temporary output directory."""
    outdir = tmp_path / "curves"
    outdir.mkdir()
    return outdir
