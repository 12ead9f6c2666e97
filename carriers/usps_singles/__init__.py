"""
USPS Singles Carrier Module

Per-pair formula calculator for USPS single-parcel shipping.
"""

from .carrier import USPS_Singles

__all__ = ["USPS_Singles"]
