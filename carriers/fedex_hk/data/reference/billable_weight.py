"""
Billable Weight Configuration

FedEx International Priority from Hong Kong. Smaller divisor than UPS,
so bulky cartons reach DIM weight sooner.
"""

DIM_FACTOR = 5000               # cm3 per kg
MAX_BILLABLE_WEIGHT_KG = 15.0   # Heavier shipments are not accepted on this account
