from __future__ import annotations

# movie_joins/services/report_svc.py
import logging
import os
from typing import Dict, Iterable, Optional

import pandas as pd

from ..repository import EXERCISES

logger = logging.getLogger(__name__)

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))


def results_frame(name: str) -> pd.DataFrame:
    """Run one exercise and return its rows as a DataFrame (KeyError if unknown)."""
    if name not in EXERCISES:
        raise KeyError(f"unknown exercise: {name}")
    rows = EXERCISES[name]()
    # keep the header even for an empty result
    columns = getattr(rows, "columns", None) or None
    return pd.DataFrame(rows, columns=columns)


def export_results(out_dir: Optional[str] = None, names: Optional[Iterable[str]] = None) -> Dict[str, str]:
    """
    Export each exercise's result set to <out_dir>/<name>.csv.
    Defaults: all exercises, <project>/exports. Returns name -> csv path.
    """
    out_dir = out_dir or os.path.join(_PROJECT_ROOT, "exports")
    os.makedirs(out_dir, exist_ok=True)
    selected = list(names) if names is not None else list(EXERCISES)

    out: Dict[str, str] = {}
    for name in selected:
        df = results_frame(name)
        path = os.path.join(out_dir, f"{name}.csv")
        df.to_csv(path, index=False, encoding="utf-8-sig")
        out[name] = path
        logger.info("exported %s (%d rows) to %s", name, len(df), path)
    return out
