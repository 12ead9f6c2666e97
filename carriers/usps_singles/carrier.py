"""USPS singles - every pair ships as its own parcel."""

from shared.carriers import FormulaCarrier

from .data import RATE_PER_KG, BASE_PER_PAIR, MAX_WEIGHT_KG_PER_PAIR


class USPS_Singles(FormulaCarrier):
    """
    Priced per pair on the average pair weight. No carton, so no DIM
    weight and no single billed weight.
    """

    # Identity
    name = "USPS (singles)"
    code = "usps_singles"

    # Pricing
    rate_per_kg = RATE_PER_KG
    base_per_pair = BASE_PER_PAIR

    # Limits
    max_weight_kg_per_pair = MAX_WEIGHT_KG_PER_PAIR
