"""
Shared Rate Tables

Tiered price schedules and lookup.
"""

from .rate_table import EPSILON, RateTable, RateTier, read_rate_table

__all__ = [
    "EPSILON",
    "RateTable",
    "RateTier",
    "read_rate_table",
]
