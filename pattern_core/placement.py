# pattern_core/placement.py
from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from pattern_core.constants import DIRECTIONS, EMPTY
from pattern_core.models import Grid
from pattern_core.validation import check_multiset

logger = logging.getLogger(__name__)


def neighbors(row: int, col: int, rows: int, cols: int) -> Iterator[Tuple[int, int]]:
    """Up to 8 in-bounds cells sharing an edge or corner with (row, col)."""
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def can_place(grid: Sequence[Sequence[str]], row: int, col: int, symbol: str) -> bool:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return all(grid[r][c] != symbol for r, c in neighbors(row, col, rows, cols))


def place_with_stats(
    rows: int,
    cols: int,
    multiset: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> Tuple[Grid, int]:
    """
    Shuffle the multiset, then put each symbol on a random empty cell that has
    no same-symbol 8-neighbour. When no such cell exists the symbol goes to the
    first empty cell in row-major order.

    Returns (grid, number of symbols that used the row-major fallback).
    """
    check_multiset(rows, cols, multiset)
    rng = rng if rng is not None else np.random.default_rng()

    order: List[str] = list(multiset)
    rng.shuffle(order)

    cells: List[List[str]] = [[EMPTY] * cols for _ in range(rows)]
    empty = np.ones((rows, cols), dtype=bool)
    # symbol -> cells touching an already placed copy of that symbol
    blocked: Dict[str, np.ndarray] = {}
    fallbacks = 0

    for symbol in order:
        near = blocked.get(symbol)
        if near is None:
            near = blocked[symbol] = np.zeros((rows, cols), dtype=bool)

        # The working grid only changes when a symbol is placed, so one scan
        # per symbol gives the same candidates a retry would.
        candidates = np.flatnonzero(empty & ~near)
        if candidates.size:
            idx = int(candidates[rng.integers(candidates.size)])
        else:
            idx = int(np.argmax(empty))
            fallbacks += 1

        r, c = divmod(idx, cols)
        cells[r][c] = symbol
        empty[r, c] = False
        near[max(r - 1, 0):r + 2, max(c - 1, 0):c + 2] = True

    if fallbacks:
        logger.debug(f"{rows}x{cols}: {fallbacks} of {len(order)} symbols used row-major fallback")
    return tuple(tuple(row) for row in cells), fallbacks


def place(
    rows: int,
    cols: int,
    multiset: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    grid, _ = place_with_stats(rows, cols, multiset, rng=rng)
    return grid
