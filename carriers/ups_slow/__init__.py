"""
UPS Slow Carrier Module

Rate table calculator for UPS economy.
"""

from .carrier import UPS_Slow

__all__ = ["UPS_Slow"]
