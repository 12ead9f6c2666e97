"""
FedEx (HK) Carrier Module

Rate table calculator for FedEx shipments handed over in Hong Kong.
"""

from .carrier import FedEx_HK

__all__ = ["FedEx_HK"]
