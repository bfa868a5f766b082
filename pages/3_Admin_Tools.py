# FILE: pages/3_Admin_Tools.py
import streamlit as st

from pattern_core.config import PALETTE_PATH
from pattern_core.io import load_palette_yaml, save_palette_yaml
from pattern_core.validation import run_self_test

st.title("3. Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    st.write(results)

st.subheader("Default palette (palette.yaml)")
with open(PALETTE_PATH, "r", encoding="utf-8") as f:
    text = st.text_area("palette.yaml", f.read(), height=300)
if st.button("Save palette"):
    try:
        save_palette_yaml(PALETTE_PATH, text)
        st.session_state.palette = load_palette_yaml(PALETTE_PATH)
        st.success("Palette saved. New colors apply to symbols without a picked color.")
    except ValueError as e:
        st.error(f"Invalid palette: {e}")
