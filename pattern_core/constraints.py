# pattern_core/constraints.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Set, Tuple
import pandas as pd

from .constants import FALLBACK_COLOR
from .distribution import compute_quotas, symbols_for, tally
from .models import GridConfig
from .placement import can_place


def conflict_cells(grid: Sequence[Sequence[str]]) -> Set[Tuple[int, int]]:
    """Cells with at least one same-symbol 8-neighbour."""
    out: Set[Tuple[int, int]] = set()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if not can_place(grid, r, c, cell):
                out.add((r, c))
    return out


def conflict_ratio(grid: Sequence[Sequence[str]]) -> float:
    total = sum(len(row) for row in grid)
    if total == 0:
        return 0.0
    return len(conflict_cells(grid)) / total


def validate_grid(grid: Sequence[Sequence[str]], config: GridConfig) -> List[str]:
    """Problems that make a stored grid unusable for its config. Empty list means ok."""
    errs = []
    if len(grid) != config.rows:
        errs.append(f"Expected {config.rows} rows, found {len(grid)}")
    bad_rows = [i + 1 for i, row in enumerate(grid) if len(row) != config.cols]
    if bad_rows:
        errs.append(f"Rows with wrong length (expected {config.cols}): {', '.join(map(str, bad_rows))}")
    if errs:
        return errs

    allowed = set(symbols_for(config.num_values))
    unknown = sorted({cell for row in grid for cell in row if cell not in allowed})
    if unknown:
        errs.append(f"Unknown symbols: {', '.join(repr(u) for u in unknown)}")
        return errs

    expected = dict(zip(symbols_for(config.num_values), compute_quotas(config.num_values, config.total_cells)))
    expected = {k: v for k, v in expected.items() if v}
    if tally(grid) != expected:
        errs.append("Symbol counts do not match an even distribution")
    return errs


def distribution_df(grid: Sequence[Sequence[str]], colors: Optional[Dict[str, str]] = None) -> pd.DataFrame:
    """Legend table: one row per symbol present, in alphabet order."""
    colors = colors or {}
    counts = tally(grid)
    rows = [{"symbol": s, "count": n, "color": colors.get(s, FALLBACK_COLOR)} for s, n in counts.items()]
    return pd.DataFrame(rows, columns=["symbol", "count", "color"])
