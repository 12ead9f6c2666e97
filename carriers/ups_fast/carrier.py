"""UPS Fast - express service, yellow rate column."""

from shared.carriers import DimCarrier

from .data import RATES_PATH, DIM_FACTOR, MAX_BILLABLE_WEIGHT_KG


class UPS_Fast(DimCarrier):
    """UPS express, billed on max(actual, volume / 6000)."""

    # Identity
    name = "UPS Fast"
    code = "ups_fast"

    # Pricing
    dim_factor = DIM_FACTOR
    rates_path = RATES_PATH

    # Limits
    max_billable_weight_kg = MAX_BILLABLE_WEIGHT_KG
