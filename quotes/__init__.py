"""
Quotes

Compares carrier prices for a shipment of pairs and picks the cheapest.

    from quotes import quote_shipment, calculate_costs
"""

from .calculate_costs import calculate_costs
from .quote import QuoteResult, quote, quote_shipment
from .version import VERSION

__all__ = [
    "QuoteResult",
    "calculate_costs",
    "quote",
    "quote_shipment",
    "VERSION",
]
