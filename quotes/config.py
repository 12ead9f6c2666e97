"""
Calculator Configuration

Defaults and input limits for the interactive calculator and dashboard.
The engine itself takes every value as an argument.
"""

# Pair count range offered by the preset cartons
MIN_PAIRS = 1
MAX_PAIRS = 10

# Form defaults
DEFAULT_PAIR_COUNT = 2
DEFAULT_TOTAL_WEIGHT_KG = 3.2
DEFAULT_CARTON_MODE = "Preset"
DEFAULT_CUSTOM_DIMS_CM = (37.0, 26.0, 28.0)

# RMB per USD. 0 disables the USD column.
DEFAULT_FX_RATE = 0.0

# Placeholder for absent values (out of range, no billed weight)
MISSING = "—"
