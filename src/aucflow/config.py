"""Configuration dataclass for curve evaluation runs."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class EvalConfig:
    """Configuration for evaluating a table of scored examples."""

    # Data
    data_path: Optional[Path] = None
    score_col: str = "score"
    label_col: str = "label"
    pos_label: Optional[str] = None  # None means the label column is 0/1 or boolean

    # Output
    outdir: Optional[Path] = None  # No files are written when None

    def __post_init__(self):
        """Convert string paths to Path objects."""
        if self.data_path is not None:
            self.data_path = Path(self.data_path)
        if self.outdir is not None:
            self.outdir = Path(self.outdir)

    @property
    def resolved_data_path(self) -> Path:
        """Get the data path, failing if none was configured."""
        if self.data_path is None:
            raise ValueError("No data path configured. Set data_path.")
        return self.data_path

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dict with Path objects as strings."""
        d = asdict(self)
        d["data_path"] = str(self.data_path) if self.data_path else None
        d["outdir"] = str(self.outdir) if self.outdir else None
        return d

    def save(self, path: Path) -> None:
        """Save config to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
