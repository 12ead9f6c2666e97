"""
Quote Engine

Prices one shipment with every carrier and picks the cheapest.

    from quotes.quote import quote_shipment
    result = quote_shipment(pair_count=2, total_weight_kg=3.2)
    result.best.carrier, result.best.cost_rmb

Out-of-range carriers stay in the result with cost_rmb=None. If no carrier
can take the shipment, best is None. Neither case raises.
"""

import math
from typing import NamedTuple

from carriers import ALL
from shared.carriers import Carrier, QuoteRow
from shared.cartons import CartonDimensions, carton_volume_cm3, resolve_carton


class QuoteResult(NamedTuple):
    """
    All carrier rows in declaration order plus the cheapest priced row.

    volume_cm3 and avg_weight_kg_per_pair echo the derived inputs.
    """
    rows: tuple[QuoteRow, ...]
    best: QuoteRow | None
    volume_cm3: float
    avg_weight_kg_per_pair: float

    def row(self, carrier: str) -> QuoteRow:
        """Row for a carrier display name."""
        for r in self.rows:
            if r.carrier == carrier:
                return r
        raise KeyError(carrier)


def validate_inputs(total_weight_kg: float, pair_count: int) -> None:
    """
    Check engine preconditions.

    Raises:
        ValueError: pair_count below 1, or weight negative / not finite
    """
    if pair_count < 1:
        raise ValueError(f"pair_count must be at least 1, got {pair_count}")
    if not math.isfinite(total_weight_kg) or total_weight_kg < 0:
        raise ValueError(
            f"total_weight_kg must be a non-negative number, got {total_weight_kg}"
        )


def select_best(rows) -> QuoteRow | None:
    """
    Cheapest priced row. Rows without a cost are skipped; on an exact tie
    the earliest row wins. None if no row is priced.
    """
    priced = [r for r in rows if r.cost_rmb is not None]
    if not priced:
        return None
    # min() keeps the first of equal keys
    return min(priced, key=lambda r: r.cost_rmb)


def quote(
    total_weight_kg: float,
    pair_count: int,
    carton: CartonDimensions,
    carriers: list[type[Carrier]] | None = None,
) -> QuoteResult:
    """
    Quote a shipment with each carrier.

    Args:
        total_weight_kg: Actual weight of all pairs combined
        pair_count: Number of pairs (>= 1)
        carton: Resolved carton dimensions
        carriers: Carriers to compare, in display order (default: carriers.ALL)

    Returns:
        QuoteResult with one row per carrier and the cheapest row
    """
    validate_inputs(total_weight_kg, pair_count)

    if carriers is None:
        carriers = ALL

    rows = tuple(c.quote(total_weight_kg, pair_count, carton) for c in carriers)

    return QuoteResult(
        rows=rows,
        best=select_best(rows),
        volume_cm3=carton_volume_cm3(carton),
        avg_weight_kg_per_pair=total_weight_kg / pair_count,
    )


def quote_shipment(
    pair_count: int,
    total_weight_kg: float,
    mode: str = "Preset",
    preset_index: int | None = None,
    custom_dims: tuple[float, float, float] | None = None,
    carriers: list[type[Carrier]] | None = None,
) -> QuoteResult:
    """
    Resolve the carton and quote in one call.

    In Preset mode the preset defaults to the one for pair_count.
    """
    if preset_index is None:
        preset_index = pair_count

    carton = resolve_carton(mode, preset_index, custom_dims)
    return quote(total_weight_kg, pair_count, carton, carriers)


__all__ = [
    "QuoteResult",
    "quote",
    "quote_shipment",
    "select_best",
    "validate_inputs",
]
