"""
Preset Cartons

Standard shipping cartons by pair count (cm). Each preset is the smallest
stock carton that fits the given number of shoe boxes.
"""

# pair_count: (length_cm, width_cm, height_cm)
PRESET_CARTONS = {
    1: (37.0, 27.0, 14.5),
    2: (37.0, 27.0, 27.5),
    3: (37.0, 27.0, 40.5),
    4: (37.0, 52.5, 27.5),
    5: (37.0, 27.0, 66.5),
    6: (37.0, 52.5, 40.5),
    7: (37.0, 27.0, 92.5),
    8: (37.0, 52.5, 53.5),
    9: (37.0, 78.0, 40.5),
    10: (37.0, 52.5, 66.5),
}

# Used when a preset index has no entry
FALLBACK_PRESET = 1
