# pattern_core/io.py
from __future__ import annotations
import io
import json
import logging
import os
import re
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd
import yaml
from pydantic import ValidationError

from .constants import MAX_SAVED_CONFIGS
from .models import GridConfig, SavedConfiguration

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

# ---------- Palette (YAML) ----------
def parse_palette_yaml(text: str) -> List[str]:
    try:
        obj = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Palette is not valid YAML: {e}") from e
    palette = obj.get("palette") if isinstance(obj, dict) else None
    if not isinstance(palette, list) or not palette:
        raise ValueError("'palette' must be a non-empty list of colours.")
    bad = [c for c in palette if not (isinstance(c, str) and HEX_COLOR.match(c))]
    if bad:
        raise ValueError(f"Palette colours must look like #RRGGBB, got: {', '.join(repr(c) for c in bad)}")
    return list(palette)

def load_palette_yaml(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_palette_yaml(f.read())

def save_palette_yaml(path: str, text: str):
    parse_palette_yaml(text)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

# ---------- Snapshots ----------
def make_snapshot(
    config: GridConfig,
    colors: Dict[str, str],
    grid: Sequence[Sequence[str]],
    now: Optional[datetime] = None,
) -> SavedConfiguration:
    """Copy config, colours and grid into a new history entry."""
    now = now or datetime.now()
    return SavedConfiguration(
        id=str(int(now.timestamp() * 1000)),
        timestamp=now.strftime("%m/%d/%Y, %I:%M:%S %p"),
        grid_config=config,
        colors=dict(colors),
        grid_data=[list(row) for row in grid],
    )

def push_snapshot(
    history: List[SavedConfiguration],
    snapshot: SavedConfiguration,
    keep: int = MAX_SAVED_CONFIGS,
) -> List[SavedConfiguration]:
    """Newest first, only the `keep` most recent survive. Clashing ids get a -N suffix."""
    kept = list(history[: max(0, keep - 1)])
    ids = {s.id for s in kept}
    if snapshot.id in ids:
        n = 1
        while f"{snapshot.id}-{n}" in ids:
            n += 1
        snapshot = snapshot.model_copy(update={"id": f"{snapshot.id}-{n}"})
    return [snapshot] + kept

def delete_snapshot(history: List[SavedConfiguration], snapshot_id: str) -> List[SavedConfiguration]:
    return [s for s in history if s.id != snapshot_id]

def snapshots_to_json(history: List[SavedConfiguration]) -> str:
    return json.dumps([s.model_dump(by_alias=True) for s in history], ensure_ascii=False, indent=2)

def snapshots_from_json(text: Union[str, bytes]) -> List[SavedConfiguration]:
    """Parse a saved history. A corrupt payload is logged and treated as empty."""
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        raw = json.loads(text)
        if not isinstance(raw, list):
            raise ValueError("saved history must be a JSON list")
        return [SavedConfiguration.model_validate(item) for item in raw]
    except (ValueError, ValidationError) as e:
        logger.error(f"Error loading saved configurations: {e}")
        return []

def load_history(path: str) -> List[SavedConfiguration]:
    if not os.path.exists(path):
        return []
    with open(path, "rb") as f:
        return snapshots_from_json(f.read())

def save_history(path: str, history: List[SavedConfiguration]):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(snapshots_to_json(history))

# ---------- Grid exports ----------
def grid_to_dataframe(grid: Sequence[Sequence[str]]) -> pd.DataFrame:
    cols = len(grid[0]) if grid else 0
    df = pd.DataFrame([list(r) for r in grid], columns=[str(c + 1) for c in range(cols)])
    df.index = [str(r + 1) for r in range(len(grid))]
    return df

def grid_to_csv_bytes(grid: Sequence[Sequence[str]]) -> bytes:
    buf = io.StringIO()
    grid_to_dataframe(grid).to_csv(buf, index=False, header=False)
    return buf.getvalue().encode("utf-8")
