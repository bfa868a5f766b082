# FILE: pages/2_Reports_Exports.py
import streamlit as st

from pattern_core.constraints import conflict_ratio, distribution_df
from pattern_core.export_pdf import render_pdf
from pattern_core.io import grid_to_csv_bytes, grid_to_dataframe, snapshots_to_json

st.title("2. Reports & Exports")
if st.session_state.get("grid") is None:
    st.warning("No grid generated yet. Please generate one first.")
    st.stop()

ss = st.session_state
grid = ss.grid

st.subheader("Distribution")
st.dataframe(distribution_df(grid, ss.colors), hide_index=True)
st.metric("Cells touching a same-color neighbour", f"{conflict_ratio(grid):.1%}")

st.download_button("Download Grid CSV", data=grid_to_csv_bytes(grid), file_name="pattern.csv", mime="text/csv")
st.download_button("Download Printable Grid (PDF)", data=render_pdf(grid, ss.colors, ss.grid_config),
                   file_name="pattern.pdf", mime="application/pdf")
st.download_button("Download Saved History JSON", data=snapshots_to_json(ss.get("saved_configs", [])),
                   file_name="saved_patterns.json", mime="application/json")

st.subheader("Grid")
st.dataframe(grid_to_dataframe(grid))
