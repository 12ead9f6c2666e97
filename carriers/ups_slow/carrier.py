"""UPS Slow - economy service."""

from shared.carriers import DimCarrier

from .data import RATES_PATH, DIM_FACTOR, MAX_BILLABLE_WEIGHT_KG


class UPS_Slow(DimCarrier):
    # Identity
    name = "UPS Slow"
    code = "ups_slow"

    # Pricing
    dim_factor = DIM_FACTOR
    rates_path = RATES_PATH

    # Limits
    max_billable_weight_kg = MAX_BILLABLE_WEIGHT_KG
