"""
Billable Weight

Greater-of rule shared by all DIM-based carriers:

    dim_weight_kg       = volume_cm3 / dim_factor
    billable_weight_kg  = ceil_to_half_kg(max(actual_kg, dim_weight_kg))

Rounding is a strict ceiling to the next 0.5 kg step. A weight already on
a step (3.0) stays put, anything above it (3.01) moves up (3.5).

Scalar functions serve single quotes, the *_expr functions build the same
rule as polars expressions for DataFrames.
"""

import math

import polars as pl


# Billing granularity: 0.5 kg, i.e. two steps per kg
STEPS_PER_KG = 2

# Step counts this close to a whole number snap to it instead of taking the
# ceiling. Products such as 3.0000000000000004 come out of float arithmetic
# on exact inputs and must not bump a step; 3.0000000001 still does.
SNAP_TOLERANCE = 1e-12


def round_up_to_half_kg(weight_kg: float) -> float:
    """Round up to the next 0.5 kg (exact multiples are unchanged)."""
    steps = weight_kg * STEPS_PER_KG
    # inf has no step; it falls outside every rate table
    if not math.isfinite(steps):
        return steps / STEPS_PER_KG

    nearest = round(steps)
    if abs(steps - nearest) < SNAP_TOLERANCE:
        return nearest / STEPS_PER_KG
    return math.ceil(steps) / STEPS_PER_KG


def dim_weight(volume_cm3: float, dim_factor: float) -> float:
    """Dimensional weight in kg for a carton volume."""
    return volume_cm3 / dim_factor


def billable_weight(actual_kg: float, dim_factor: float, volume_cm3: float) -> float:
    """
    Billed weight for a DIM-based carrier.

    Args:
        actual_kg: Actual (scale) weight of the shipment
        dim_factor: Carrier DIM divisor (cm3 per kg)
        volume_cm3: Carton volume

    Returns:
        max(actual, DIM) rounded up to the next 0.5 kg
    """
    return round_up_to_half_kg(max(actual_kg, dim_weight(volume_cm3, dim_factor)))


# =============================================================================
# POLARS EXPRESSIONS
# =============================================================================

def round_up_to_half_kg_expr(expr: pl.Expr) -> pl.Expr:
    """Expression form of round_up_to_half_kg."""
    steps = expr * STEPS_PER_KG
    nearest = steps.round(0)
    return (
        pl.when((steps - nearest).abs() < SNAP_TOLERANCE)
        .then(nearest)
        .otherwise(steps.ceil())
    ) / STEPS_PER_KG


def dim_weight_expr(dim_factor: float, volume_col: str = "volume_cm3") -> pl.Expr:
    """Expression for dimensional weight in kg."""
    return pl.col(volume_col) / dim_factor


def billable_weight_expr(
    dim_factor: float,
    weight_col: str = "weight_kg",
    volume_col: str = "volume_cm3",
) -> pl.Expr:
    """Expression for billed weight (greater of actual and DIM, rounded up)."""
    return round_up_to_half_kg_expr(
        pl.max_horizontal(pl.col(weight_col), dim_weight_expr(dim_factor, volume_col))
    )


__all__ = [
    "STEPS_PER_KG",
    "SNAP_TOLERANCE",
    "round_up_to_half_kg",
    "dim_weight",
    "billable_weight",
    "round_up_to_half_kg_expr",
    "dim_weight_expr",
    "billable_weight_expr",
]
