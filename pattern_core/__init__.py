# FILE: pattern_core/__init__.py
"""
pattern_core package: grid config models, symbol distribution, placement,
adjacency checks, snapshots IO, PDF export, and validation.
"""
__all__ = [
    "constants",
    "models",
    "config",
    "distribution",
    "placement",
    "constraints",
    "generator",
    "io",
    "export_pdf",
    "ui_helpers",
    "validation",
]
