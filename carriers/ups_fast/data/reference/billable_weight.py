"""
Billable Weight Configuration

UPS Fast (yellow rate column) dimensional weight rules.
"""

DIM_FACTOR = 6000               # cm3 per kg
MAX_BILLABLE_WEIGHT_KG = 20.0   # Rate card ends at 20 kg
