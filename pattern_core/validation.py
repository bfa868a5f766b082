# FILE: pattern_core/validation.py
from __future__ import annotations
from typing import Sequence
import numpy as np

from pattern_core.constants import MAX_VALUES


class InvalidConfiguration(ValueError):
    """Grid configuration the generator refuses to work with."""


def _is_int(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)


def validate_config(rows, cols, num_values) -> None:
    """
    Reject anything that cannot produce a full grid.
    Any positive integer size is fine; UI limits are not applied here.
    """
    for name, v in (("rows", rows), ("cols", cols), ("num_values", num_values)):
        if not _is_int(v):
            raise InvalidConfiguration(f"{name} must be an integer, got {v!r}")
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration(f"Grid size must be positive, got {rows}x{cols}")
    if num_values <= 0:
        raise InvalidConfiguration(f"num_values must be at least 1, got {num_values}")
    if num_values > MAX_VALUES:
        raise InvalidConfiguration(f"num_values must be at most {MAX_VALUES}, got {num_values}")


def check_multiset(rows: int, cols: int, multiset: Sequence[str]) -> None:
    for name, v in (("rows", rows), ("cols", cols)):
        if not _is_int(v):
            raise InvalidConfiguration(f"{name} must be an integer, got {v!r}")
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration(f"Grid size must be positive, got {rows}x{cols}")
    if len(multiset) != rows * cols:
        raise InvalidConfiguration(
            f"Expected {rows * cols} symbols for a {rows}x{cols} grid, got {len(multiset)}"
        )


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from pattern_core.distribution import compute_quotas, check_evenness, distribute, tally
    quotas = compute_quotas(9, 19 * 24)
    results["tests"].append(("Quotas sum to 456", sum(quotas) == 456))
    results["tests"].append(("Evenness check", check_evenness(quotas)))
    try:
        distribute(2, 2, 0)
        results["tests"].append(("Zero values rejected", False))
    except InvalidConfiguration:
        results["tests"].append(("Zero values rejected", True))
    from pattern_core.placement import place
    from pattern_core.constraints import conflict_ratio
    rng = np.random.default_rng(0)
    grid = place(1, 5, distribute(1, 5, 5), rng=rng)
    results["tests"].append(("Row of distinct symbols has no conflicts", conflict_ratio(grid) == 0.0))
    grid = place(10, 10, distribute(10, 10, 9), rng=rng)
    results["tests"].append(("Placement conserves counts", tally(grid) == dict(zip("abcdefghi", compute_quotas(9, 100)))))
    return results
