"""FedEx (HK) - International Priority ex Hong Kong."""

from shared.carriers import DimCarrier

from .data import RATES_PATH, DIM_FACTOR, MAX_BILLABLE_WEIGHT_KG


class FedEx_HK(DimCarrier):
    """FedEx from Hong Kong, billed on max(actual, volume / 5000), up to 15 kg."""

    # Identity
    name = "FedEx (HK)"
    code = "fedex_hk"

    # Pricing
    dim_factor = DIM_FACTOR
    rates_path = RATES_PATH

    # Limits
    max_billable_weight_kg = MAX_BILLABLE_WEIGHT_KG
