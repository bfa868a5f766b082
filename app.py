# app.py
import logging
from typing import Optional

import numpy as np
import streamlit as st

from pattern_core.config import (
    DEFAULT_CONFIG,
    PALETTE_PATH,
    HISTORY_PATH,
    ensure_assets_exist,
    merge_colors,
    ui_css,
)
from pattern_core.constants import UI_MIN_SIZE, UI_MAX_SIZE, UI_MIN_VALUES, UI_MAX_VALUES
from pattern_core.distribution import tally
from pattern_core.export_pdf import render_pdf
from pattern_core.generator import generate_grid
from pattern_core.io import load_palette_yaml, load_history, save_history, make_snapshot, push_snapshot
from pattern_core.models import GridConfig
from pattern_core.ui_helpers import grid_html, legend_html, summary_line
from pattern_core.validation import InvalidConfiguration

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ---------- Page & Theme ----------
st.set_page_config(page_title="Pattern Mapper", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("grid_config", GridConfig(
        rows=DEFAULT_CONFIG["rows"], cols=DEFAULT_CONFIG["cols"], num_values=DEFAULT_CONFIG["num_values"],
    ))
    ss.setdefault("grid", None)                # tuple-of-tuples once generated
    ss.setdefault("colors", {})                # symbol -> hex
    ss.setdefault("palette", load_palette_yaml(PALETTE_PATH))
    ss.setdefault("saved_configs", load_history(HISTORY_PATH))
    ss.setdefault("last_result", None)
    ss.setdefault("highlight", None)
    ss.setdefault("random_seed", DEFAULT_CONFIG["random_seed"])

_init_state()
ss = st.session_state


def _rng() -> np.random.Generator:
    seed: Optional[int] = ss.random_seed
    return np.random.default_rng(seed)


# ---------- Sidebar ----------
with st.sidebar:
    st.header("Grid Configuration")
    rows = st.number_input("Rows (N)", UI_MIN_SIZE, UI_MAX_SIZE, ss.grid_config.rows, step=1)
    cols = st.number_input("Columns (M)", UI_MIN_SIZE, UI_MAX_SIZE, ss.grid_config.cols, step=1)
    num_values = st.number_input("Colors", UI_MIN_VALUES, UI_MAX_VALUES, ss.grid_config.num_values, step=1)
    use_seed = st.checkbox("Fixed seed", value=ss.random_seed is not None,
                           help="Same seed and size give the same pattern.")
    seed_val = st.number_input("Seed", 0, 1_000_000, ss.random_seed or 0, step=1, disabled=not use_seed)
    ss.random_seed = int(seed_val) if use_seed else None

    go = st.button("Generate Grid", type="primary", use_container_width=True)

if go:
    try:
        cfg = GridConfig(rows=int(rows), cols=int(cols), num_values=int(num_values))
        result = generate_grid(cfg, rng=_rng())
    except InvalidConfiguration as e:
        st.error(str(e))
        st.stop()
    ss.grid_config = cfg
    ss.grid = result.grid
    ss.last_result = result
    ss.colors = merge_colors(ss.colors, cfg.num_values, ss.palette)
    ss.highlight = None

# ---------- Header ----------
st.title("Pattern Mapper")

if ss.grid is None:
    st.info("Set the grid size and number of colors, then press **Generate Grid**.")
    st.stop()

cfg: GridConfig = ss.grid_config
grid = ss.grid
counts = tally(grid)
st.caption(summary_line(cfg))

c1, c2 = st.columns(2)
with c1:
    if st.button("Save Configuration", use_container_width=True):
        snap = make_snapshot(cfg, ss.colors, grid)
        ss.saved_configs = push_snapshot(ss.saved_configs, snap)
        save_history(HISTORY_PATH, ss.saved_configs)
        st.success(f"Saved ({snap.timestamp}).")
with c2:
    st.download_button(
        "Print Grid (PDF)",
        data=render_pdf(grid, ss.colors, cfg),
        file_name="pattern.pdf",
        mime="application/pdf",
        use_container_width=True,
    )

res = ss.last_result
if res is not None and res.grid == grid and res.fallbacks:
    st.warning(
        f"{res.fallbacks} cells could not avoid a same-color neighbour "
        f"({res.conflict_ratio:.0%} of cells touch a matching color). Try more colors."
    )

# ---------- Distribution legend & colour pickers ----------
st.subheader("Distribution")
pick_cols = st.columns(min(len(counts), 9) or 1)
for i, (s, n) in enumerate(counts.items()):
    with pick_cols[i % len(pick_cols)]:
        new = st.color_picker(f"{s.upper()} ({n})", ss.colors.get(s, "#cccccc"), key=f"color_{s}")
        ss.colors[s] = new

options = ["(none)"] + list(counts)
hl = st.radio("Highlight", options, horizontal=True,
              index=options.index(ss.highlight) if ss.highlight in options else 0)
ss.highlight = None if hl == "(none)" else hl

st.markdown(legend_html(counts, ss.colors, ss.highlight), unsafe_allow_html=True)

# ---------- Grid ----------
st.subheader("Generated Pattern Grid")
st.markdown(grid_html(grid, ss.colors, ss.highlight), unsafe_allow_html=True)
