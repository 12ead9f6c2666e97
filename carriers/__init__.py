"""
Carriers Package

Exports all carrier classes and the comparison order.

Declaration order is the display order of a quote and breaks ties when two
carriers cost exactly the same: the carrier listed first wins.

Usage:
    from carriers import ALL, get_carrier
"""

from shared.carriers import KIND_DIM, KIND_FORMULA, Carrier
from .usps_singles import USPS_Singles
from .ups_fast import UPS_Fast
from .ups_slow import UPS_Slow
from .fedex_hk import FedEx_HK


# All carriers in comparison order - add classes here as they are implemented
ALL: list[type[Carrier]] = [USPS_Singles, UPS_Fast, UPS_Slow, FedEx_HK]


# =============================================================================
# HELPERS
# =============================================================================

def get_carrier(code: str) -> type[Carrier]:
    """Look up a carrier by code (e.g., "ups_fast")."""
    for carrier in ALL:
        if carrier.code == code:
            return carrier
    raise ValueError(
        f"Unknown carrier '{code}'. Available: {', '.join(c.code for c in ALL)}"
    )


# =============================================================================
# VALIDATION
# =============================================================================

def validate_carriers(carriers: list[type[Carrier]] | None = None) -> None:
    """
    Validate carrier configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    if carriers is None:
        carriers = ALL

    errors = []
    seen_names = set()
    seen_codes = set()

    for c in carriers:
        label = getattr(c, "name", c.__name__)

        # Identity must be unique
        if label in seen_names:
            errors.append(f"{label}: duplicate carrier name")
        seen_names.add(label)

        code = getattr(c, "code", None)
        if not code or not code.isidentifier() or code.lower() != code:
            errors.append(f"{label}: code must be a lowercase identifier, got {code!r}")
        elif code in seen_codes:
            errors.append(f"{label}: duplicate carrier code '{code}'")
        seen_codes.add(code)

        kind = getattr(c, "kind", None)

        if kind == KIND_DIM:
            if getattr(c, "dim_factor", 0) <= 0:
                errors.append(f"{label}: dim_factor must be positive")
            if not c.rates_path.exists():
                errors.append(f"{label}: rate table not found at {c.rates_path}")
            if c.max_billable_weight_kg is not None and c.max_billable_weight_kg <= 0:
                errors.append(f"{label}: max_billable_weight_kg must be positive")

        elif kind == KIND_FORMULA:
            if getattr(c, "rate_per_kg", None) is None or getattr(c, "base_per_pair", None) is None:
                errors.append(f"{label}: formula carriers require rate_per_kg and base_per_pair")
            if c.max_weight_kg_per_pair is not None and c.max_weight_kg_per_pair <= 0:
                errors.append(f"{label}: max_weight_kg_per_pair must be positive")

        else:
            errors.append(f"{label}: unknown kind {kind!r}")

    if errors:
        raise ValueError("Carrier configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_carriers()

__all__ = [
    # Carrier classes
    "FedEx_HK",
    "UPS_Fast",
    "UPS_Slow",
    "USPS_Singles",
    # Lists
    "ALL",
    # Helpers
    "get_carrier",
    "validate_carriers",
]
