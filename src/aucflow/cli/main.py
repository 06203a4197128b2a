"""Main CLI entrypoint using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from aucflow import __version__
from aucflow.config import EvalConfig
from aucflow.data.examples import ScoredExample
from aucflow.data.loaders import load_scored_examples
from aucflow.exceptions import AucflowError
from aucflow.metrics.accuracy import compute_max_accuracy
from aucflow.plots.diagrams import compute_areas_diagrams, save_chart

app = typer.Typer(
    name="aucflow",
    help="ROC and Precision-Recall curves, their areas and maximum accuracy.",
    add_completion=False,
)

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"aucflow {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """aucflow: evaluation curves for binary classifiers."""
    pass


def _load(config: EvalConfig) -> List[ScoredExample]:
    try:
        return load_scored_examples(
            config.resolved_data_path,
            score_col=config.score_col,
            label_col=config.label_col,
            pos_label=config.pos_label,
        )
    except (FileNotFoundError, ValueError, ImportError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def areas(
    data: Path = typer.Option(..., "--data", help="Path to data file (.csv or .parquet)"),
    score_col: str = typer.Option("score", "--score-col", help="Name of score column"),
    label_col: str = typer.Option("label", "--label-col", help="Name of label column"),
    pos_label: Optional[str] = typer.Option(
        None,
        "--pos-label",
        help="Positive class label (default: label column is 0/1 or boolean)",
    ),
    outdir: Optional[Path] = typer.Option(
        None,
        "--outdir",
        help="Write areas.json and the roc.json/pr.json charts here",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose logging"),
):
    """
    Compute AUC-ROC and AUC-PR for a table of scored examples.

    Examples:
        aucflow areas --data predictions.csv --score-col proba --label-col y

        aucflow areas --data predictions.parquet --label-col diagnosis --pos-label tumor --outdir curves/
    """
    if verbose:
        logging.getLogger("aucflow").setLevel(logging.DEBUG)

    config = EvalConfig(
        data_path=data,
        score_col=score_col,
        label_col=label_col,
        pos_label=pos_label,
        outdir=outdir,
    )
    examples = _load(config)

    try:
        result = compute_areas_diagrams(examples)
    except AucflowError as e:
        typer.secho(f"\n✗ Evaluation failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"AUC-ROC: {result.auc_roc:.6f}")
    typer.echo(f"AUC-PR:  {result.auc_pr:.6f}")

    if config.outdir is not None:
        config.outdir.mkdir(parents=True, exist_ok=True)
        payload = {
            "auc_roc": result.auc_roc,
            "roc": [list(p) for p in result.roc.points],
            "auc_pr": result.auc_pr,
            "pr": [list(p) for p in result.pr.points],
            "n_examples": len(examples),
        }
        with open(config.outdir / "areas.json", "w") as f:
            json.dump(payload, f, indent=2)
        save_chart(result.roc, config.outdir / "roc.json")
        save_chart(result.pr, config.outdir / "pr.json")
        config.save(config.outdir / "config.json")
        typer.secho(f"\n✓ Results saved to {config.outdir}", fg=typer.colors.GREEN)


@app.command()
def maxacc(
    data: Path = typer.Option(..., "--data", help="Path to data file (.csv or .parquet)"),
    score_col: str = typer.Option("score", "--score-col", help="Name of score column"),
    label_col: str = typer.Option("label", "--label-col", help="Name of label column"),
    pos_label: Optional[str] = typer.Option(
        None,
        "--pos-label",
        help="Positive class label (default: label column is 0/1 or boolean)",
    ),
):
    """Compute the maximum accuracy over all score thresholds."""
    config = EvalConfig(
        data_path=data,
        score_col=score_col,
        label_col=label_col,
        pos_label=pos_label,
    )
    examples = _load(config)

    try:
        max_acc = compute_max_accuracy(examples)
    except AucflowError as e:
        typer.secho(f"\n✗ Evaluation failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Max accuracy: {max_acc:.6f}")


if __name__ == "__main__":
    app()
