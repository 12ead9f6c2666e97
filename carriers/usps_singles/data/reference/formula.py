"""
Per-Pair Formula Configuration

USPS singles are shipped one pair per parcel. The consolidator quotes a
linear price per parcel, fitted from past invoices:

    cost_per_pair (RMB) = RATE_PER_KG * kg_per_pair + BASE_PER_PAIR
"""

RATE_PER_KG = 100.0     # RMB per kg of pair weight
BASE_PER_PAIR = 64.0    # RMB fixed fee per parcel

# No weight cap on singles
MAX_WEIGHT_KG_PER_PAIR = None
