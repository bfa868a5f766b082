"""
Small HTML/text helpers shared by app.py and pages.
"""
from __future__ import annotations
from html import escape
from typing import Dict, Optional, Sequence

from .constants import DIM_OPACITY, FALLBACK_COLOR
from .distribution import symbols_for
from .models import GridConfig, SavedConfiguration


def _opacity(symbol: str, highlight: Optional[str]) -> float:
    return DIM_OPACITY if highlight and highlight != symbol else 1.0


def grid_html(grid: Sequence[Sequence[str]], colors: Dict[str, str], highlight: Optional[str] = None) -> str:
    """Coloured grid; when `highlight` is set every other symbol is dimmed."""
    cols = len(grid[0]) if grid else 0
    cells = []
    for row in grid:
        for s in row:
            cells.append(
                f'<div class="pattern-cell" title="{escape(s)}" style="background:{escape(colors.get(s, FALLBACK_COLOR))};'
                f'opacity:{_opacity(s, highlight)}">{escape(s)}</div>'
            )
    return (
        f'<div class="pattern-grid" style="grid-template-columns:repeat({cols}, 32px)">'
        + "".join(cells)
        + "</div>"
    )


def legend_html(counts: Dict[str, int], colors: Dict[str, str], highlight: Optional[str] = None) -> str:
    chips = []
    for s, n in counts.items():
        chips.append(
            f'<div class="chip" style="opacity:{_opacity(s, highlight)}">'
            f'<div class="swatch" style="background:{escape(colors.get(s, FALLBACK_COLOR))}">{escape(s)}</div>'
            f"<b>{n}</b></div>"
        )
    return '<div class="legend">' + "".join(chips) + "</div>"


def summary_line(config: GridConfig) -> str:
    last = symbols_for(config.num_values)[-1] if config.num_values > 0 else "?"
    return f"Grid size: {config.rows} × {config.cols} | Colors: {config.num_values} (A-{last.upper()})"


def snapshot_label(snap: SavedConfiguration) -> str:
    g = snap.grid_config
    return f"{snap.timestamp} | {g.rows} × {g.cols} | {g.num_values} colors"
