"""
UPS Fast Carrier Module

Rate table calculator for UPS express (yellow rates).
"""

from .carrier import UPS_Fast

__all__ = ["UPS_Fast"]
