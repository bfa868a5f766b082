# FILE: pattern_core/distribution.py
from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List

from pattern_core.constants import ALPHABET, EMPTY
from pattern_core.validation import validate_config


def symbols_for(num_values: int) -> List[str]:
    """First num_values letters, in alphabet order."""
    return ALPHABET[:num_values]


def compute_quotas(num_values: int, total_cells: int) -> List[int]:
    """Even share per symbol; the first `remainder` symbols get one extra."""
    if num_values <= 0:
        return []
    base = total_cells // num_values
    remainder = total_cells % num_values
    quotas = [base] * num_values
    for i in range(remainder):
        quotas[i] += 1
    return quotas


def distribute(rows: int, cols: int, num_values: int) -> List[str]:
    """
    Flat symbol multiset for a rows x cols grid, grouped in alphabet order.
    Deterministic; shuffling happens in placement.
    """
    validate_config(rows, cols, num_values)
    out: List[str] = []
    for symbol, count in zip(symbols_for(num_values), compute_quotas(num_values, rows * cols)):
        out.extend([symbol] * count)
    return out


def check_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) <= 1)


def tally(grid: Iterable[Iterable[str]]) -> Dict[str, int]:
    """Per-symbol counts of a grid, sorted by symbol. Empty cells are skipped."""
    c = Counter(cell for row in grid for cell in row if cell != EMPTY)
    return {k: c[k] for k in sorted(c)}
