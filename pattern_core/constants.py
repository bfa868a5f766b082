# FILE: pattern_core/constants.py
from __future__ import annotations
import string

# --- Symbols ---
ALPHABET = list(string.ascii_lowercase)
MAX_VALUES = len(ALPHABET)

# --- 8-neighbourhood (row delta, col delta) ---
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

# Empty marker for the working grid
EMPTY = ""

# --- UI bounds (enforced by widgets only, never by the core) ---
UI_MIN_SIZE = 1
UI_MAX_SIZE = 50
UI_MIN_VALUES = 1
UI_MAX_VALUES = MAX_VALUES

# Saved pattern history
MAX_SAVED_CONFIGS = 5

# Highlight dimming for non-selected symbols
DIM_OPACITY = 0.3
FALLBACK_COLOR = "#cccccc"
