"""
USPS Singles Data

Formula coefficients for per-pair pricing.
"""

from .reference.formula import RATE_PER_KG, BASE_PER_PAIR, MAX_WEIGHT_KG_PER_PAIR

__all__ = [
    "RATE_PER_KG",
    "BASE_PER_PAIR",
    "MAX_WEIGHT_KG_PER_PAIR",
]
