"""
Shared Carriers

Base classes for DIM-based and formula-based carriers.
"""

from .base import (
    KIND_DIM,
    KIND_FORMULA,
    Carrier,
    DimCarrier,
    FormulaCarrier,
    QuoteRow,
)

__all__ = [
    "KIND_DIM",
    "KIND_FORMULA",
    "Carrier",
    "DimCarrier",
    "FormulaCarrier",
    "QuoteRow",
]
