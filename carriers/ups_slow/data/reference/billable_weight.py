"""
Billable Weight Configuration

UPS Slow uses the same divisor as UPS Fast, at economy prices.
"""

DIM_FACTOR = 6000
MAX_BILLABLE_WEIGHT_KG = 20.0
