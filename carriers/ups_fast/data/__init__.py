"""
UPS Fast Data

Reference data for rates and billable weight.
"""

from pathlib import Path

from .reference.billable_weight import DIM_FACTOR, MAX_BILLABLE_WEIGHT_KG


REFERENCE_DIR = Path(__file__).parent / "reference"
RATES_PATH = REFERENCE_DIR / "base_rates.csv"

__all__ = [
    "REFERENCE_DIR",
    "RATES_PATH",
    "DIM_FACTOR",
    "MAX_BILLABLE_WEIGHT_KG",
]
