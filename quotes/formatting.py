"""
Display Formatting

Turns a QuoteResult into display strings. Costs stay in RMB everywhere
else; USD appears only here, as RMB divided by a caller supplied rate.
"""

import polars as pl

from .config import MISSING
from .quote import QuoteResult


def money(value: float | None) -> str:
    """RMB amount without decimals, or the placeholder when absent."""
    if value is None:
        return MISSING
    return f"¥{value:.0f}"


def usd(value: float | None, fx_rate: float) -> str:
    """USD amount for an RMB value, empty when FX is off or value absent."""
    if fx_rate <= 0 or value is None:
        return ""
    return f"${value / fx_rate:.2f}"


def weight(value: float | None, absent: str = MISSING) -> str:
    """Billed weight with one decimal."""
    if value is None:
        return absent
    return f"{value:.1f}"


def quote_table(result: QuoteResult, fx_rate: float = 0.0) -> pl.DataFrame:
    """
    One display row per carrier plus a trailing "Best price" row.

    Returns:
        DataFrame with string columns: Carrier, Billed kg, Cost (RMB),
        Cost (USD) (only when fx_rate > 0), Notes
    """
    records = [
        {
            "Carrier": row.carrier,
            "Billed kg": weight(row.billable_weight_kg, absent=f"{MISSING} (per-pair)"),
            "Cost (RMB)": money(row.cost_rmb),
            "Cost (USD)": usd(row.cost_rmb, fx_rate),
            "Notes": row.note,
        }
        for row in result.rows
    ]

    best = result.best
    records.append({
        "Carrier": "Best price",
        "Billed kg": weight(best.billable_weight_kg) if best else MISSING,
        "Cost (RMB)": money(best.cost_rmb if best else None),
        "Cost (USD)": usd(best.cost_rmb if best else None, fx_rate),
        "Notes": best.carrier if best else MISSING,
    })

    table = pl.DataFrame(records)
    if fx_rate <= 0:
        table = table.drop("Cost (USD)")
    return table


__all__ = ["money", "usd", "weight", "quote_table"]
