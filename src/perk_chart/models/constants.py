"""Summary keys and fixed chart defaults.

Key strings double as column names in exported rows and as series names in
the chart legend, so they are kept human-readable.
"""

TOTAL_PERKS_KEY = "Total Perks"
SOURCE_KEY_PREFIX = "Perks via "

# Levels 0..60 inclusive.
DEFAULT_MAX_LEVEL_EXCLUSIVE = 61

CHART_Y_LABEL = "Perks"


def source_key(name: str) -> str:
    """Summary key for a perk source display name."""
    return f"{SOURCE_KEY_PREFIX}{name}"
