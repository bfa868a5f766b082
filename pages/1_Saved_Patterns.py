# FILE: pages/1_Saved_Patterns.py
import streamlit as st

from pattern_core.config import HISTORY_PATH, merge_colors
from pattern_core.constraints import validate_grid
from pattern_core.io import delete_snapshot, save_history
from pattern_core.ui_helpers import snapshot_label

st.title("1. Recent Saves")

if "saved_configs" not in st.session_state:
    st.warning("Open the main **Pattern Mapper** page first.")
    st.stop()

ss = st.session_state
if not ss.saved_configs:
    st.write("No saved patterns yet.")
    st.stop()

for snap in list(ss.saved_configs):
    c1, c2, c3 = st.columns([6, 1, 1])
    with c1:
        st.write(snapshot_label(snap))
    with c2:
        if st.button("Load", key=f"load_{snap.id}"):
            problems = validate_grid(snap.grid_data, snap.grid_config)
            if problems:
                st.error("; ".join(problems))
            else:
                ss.grid_config = snap.grid_config
                ss.grid = snap.grid()
                ss.colors = merge_colors(snap.colors, snap.grid_config.num_values, ss.palette)
                ss.last_result = None
                ss.highlight = None
                st.success("Loaded. Switch to the main page to view it.")
    with c3:
        if st.button("Delete", key=f"del_{snap.id}"):
            ss.saved_configs = delete_snapshot(ss.saved_configs, snap.id)
            save_history(HISTORY_PATH, ss.saved_configs)
            st.rerun()
