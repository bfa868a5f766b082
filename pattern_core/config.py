# pattern_core/config.py
from __future__ import annotations
import os
import textwrap
from typing import Dict, List, Optional

from .distribution import symbols_for

# ===== App defaults =====
DEFAULT_CONFIG = {
    "rows": 19,
    "cols": 24,
    "num_values": 9,
    "random_seed": None,       # None = fresh randomness on every Generate
}

ASSETS_DIR = "assets"
PALETTE_PATH = os.path.join(ASSETS_DIR, "palette.yaml")
DATA_DIR = ".data"
HISTORY_PATH = os.path.join(DATA_DIR, "saved_patterns.json")

# ===== Neutral yarn palette (first N used, cycled past the end) =====
DEFAULT_PALETTE = [
    "#8B7355",  # Brown
    "#696969",  # Dim Gray
    "#556B2F",  # Dark Olive Green
    "#2F4F4F",  # Dark Slate Gray
    "#654321",  # Dark Brown
    "#708090",  # Slate Gray
    "#8B4513",  # Saddle Brown
    "#4B064B",  # Dark Magenta
    "#B8860B",  # Dark Goldenrod
    "#CD853F",  # Peru
    "#8B0000",  # Dark Red
    "#006400",  # Dark Green
    "#191970",  # Midnight Blue
    "#8B6914",  # Goldenrod 4
    "#8B7355",  # Brown
    "#696969",  # Dim Gray
    "#2F4F4F",  # Dark Slate Gray
    "#654321",  # Dark Brown
    "#708090",  # Slate Gray
]

DEFAULT_PALETTE_YAML = "palette:\n" + "".join(f'  - "{c}"\n' for c in DEFAULT_PALETTE)


def ensure_assets_exist():
    os.makedirs(ASSETS_DIR, exist_ok=True)
    if not os.path.exists(PALETTE_PATH):
        with open(PALETTE_PATH, "w", encoding="utf-8") as f:
            f.write(DEFAULT_PALETTE_YAML)


def default_colors(num_values: int, palette: Optional[List[str]] = None) -> Dict[str, str]:
    """symbol -> colour for the first num_values symbols."""
    pal = palette or DEFAULT_PALETTE
    return {s: pal[i % len(pal)] for i, s in enumerate(symbols_for(num_values))}


def merge_colors(current: Dict[str, str], num_values: int, palette: Optional[List[str]] = None) -> Dict[str, str]:
    """Keep user-picked colours, fill any missing symbol from the palette."""
    out = default_colors(num_values, palette)
    out.update({k: v for k, v in current.items() if k in out})
    return out


# ===== Theme (wrapped in <style>) =====
def ui_css() -> str:
    return textwrap.dedent("""
<style>
:root{
  --line:#d0d4dc; --text:#1b1f27; --sub:#5b6474;
  --accent:#7b3fe4; --radius:14px;
}
.block-container { padding-top: 1rem; max-width: 1200px; }
.card{ background:#f7f7fa; border:1px solid var(--line); border-radius:var(--radius); padding:18px; }
.small{color:var(--sub);font-size:12px}

.pattern-grid{ display:grid; gap:6px; padding:12px; width:fit-content; background:#fff;
  border:1px solid #333; border-radius:10px; }
.pattern-cell{ width:32px; height:32px; border-radius:50%; display:flex; align-items:center;
  justify-content:center; font:700 13px ui-monospace, monospace; color:#fff;
  text-transform:uppercase; transition:opacity .2s ease-in-out; }
.legend{ display:flex; flex-wrap:wrap; gap:10px; margin:8px 0 14px; }
.chip{ display:flex; gap:8px; align-items:center; padding:6px 10px; border-radius:10px; background:#eef0f4; }
.swatch{ width:22px; height:22px; border-radius:4px; border:1px solid var(--line); color:#fff;
  display:flex; align-items:center; justify-content:center; font-weight:700; text-transform:uppercase; }

@media print {
  header, footer, [data-testid="stSidebar"], .stButton, .stDownloadButton { display:none !important; }
  .pattern-grid{ gap:0; border-color:#000; }
  .pattern-cell{ border-radius:0; border:1px solid #000; color:#000; }
}
</style>
""")
