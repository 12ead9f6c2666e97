"""
Batch Shipping Cost Comparison

DataFrame in, DataFrame out. The input can come from any source (CSV,
spreadsheet export, manual creation) as long as it contains the required
columns. The output is the same DataFrame with carton, weight and cost
columns appended for every carrier, plus the cheapest option.

REQUIRED INPUT COLUMNS
----------------------
    pair_count          - Number of pairs in the shipment (>= 1)
    weight_kg           - Total actual weight of all pairs (kg)

OPTIONAL INPUT COLUMNS
----------------------
    length_cm           - Custom carton length
    width_cm            - Custom carton width
    height_cm           - Custom carton height
    preset_pairs        - Preset carton to use (defaults to pair_count)

    A row uses its custom carton when all three dimensions are set,
    otherwise the preset carton. Unknown presets fall back to the 1-pair
    carton.

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - carton_length_cm, carton_width_cm, carton_height_cm, uses_custom_carton
        - volume_cm3, avg_weight_kg_per_pair

    calculate() adds, per carrier:
        - dim_weight_kg_<code>, billable_weight_kg_<code>
        - cost_<code> (null when out of range)
    and:
        - cost_best, best_carrier, billable_weight_kg_best
        - calculator_version

USAGE
-----
    from quotes.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from carriers import ALL
from shared.carriers import Carrier
from shared.cartons import FALLBACK_PRESET, presets_frame

from .version import VERSION


REQUIRED_COLUMNS = ["pair_count", "weight_kg"]
CUSTOM_DIM_COLUMNS = ["length_cm", "width_cm", "height_cm"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    carriers: list[type[Carrier]] | None = None,
) -> pl.DataFrame:
    """
    Calculate and compare shipping costs for a shipment DataFrame.

    This is the main entry point. Takes raw shipment data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)
        carriers: Carriers to compare, in tie-break order (default: carriers.ALL)

    Returns:
        DataFrame with supplemented data, per-carrier costs and best option
    """
    df = supplement_shipments(df)
    df = calculate(df, carriers)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Supplement shipment data with carton and per-pair weight calculations.

    Args:
        df: Raw shipment DataFrame

    Returns:
        DataFrame with added columns:
            - carton_length_cm, carton_width_cm, carton_height_cm, uses_custom_carton
            - volume_cm3, avg_weight_kg_per_pair

    Raises:
        ValueError: Missing required columns, pair_count < 1 or negative weight
    """
    _validate_shipments(df)

    df = _resolve_cartons(df)
    df = _add_calculated_dimensions(df)

    return df


def _validate_shipments(df: pl.DataFrame) -> None:
    """Check required columns and engine preconditions."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {', '.join(missing)}")

    bad_pairs = df.filter(
        pl.col("pair_count").is_null() | (pl.col("pair_count") < 1)
    ).height
    if bad_pairs > 0:
        raise ValueError(
            f"{bad_pairs} shipment(s) have pair_count below 1. "
            f"Per-pair pricing needs at least one pair."
        )

    bad_weights = df.filter(
        pl.col("weight_kg").is_null() |
        pl.col("weight_kg").cast(pl.Float64).is_nan() |
        pl.col("weight_kg").cast(pl.Float64).is_infinite() |
        (pl.col("weight_kg") < 0)
    ).height
    if bad_weights > 0:
        raise ValueError(
            f"{bad_weights} shipment(s) have a missing, infinite or negative weight_kg."
        )


def _resolve_cartons(df: pl.DataFrame) -> pl.DataFrame:
    """
    Pick the custom or preset carton for each row.

    Custom dimensions win only when all three are present. The preset is
    chosen by preset_pairs if given, else pair_count, with unknown presets
    falling back to the 1-pair carton.
    """
    # Optional columns default to null
    for col in CUSTOM_DIM_COLUMNS:
        if col not in df.columns:
            df = df.with_columns(pl.lit(None, dtype=pl.Float64).alias(col))
    if "preset_pairs" not in df.columns:
        df = df.with_columns(pl.lit(None, dtype=pl.Int64).alias("preset_pairs"))

    # Empty CSV columns are read as strings
    df = df.with_columns(
        [pl.col(c).cast(pl.Float64, strict=False) for c in CUSTOM_DIM_COLUMNS] +
        [pl.col("preset_pairs").cast(pl.Int64, strict=False)]
    )

    presets = presets_frame().rename({"preset_pairs": "_preset_key"})
    fallback = presets.filter(pl.col("_preset_key") == FALLBACK_PRESET).row(0, named=True)

    df = df.with_columns(
        pl.coalesce([pl.col("preset_pairs"), pl.col("pair_count")])
        .cast(pl.Int64)
        .alias("_preset_key")
    )
    df = df.with_row_index("_carton_row")
    df = df.join(presets, on="_preset_key", how="left").sort("_carton_row")

    uses_custom = pl.all_horizontal([pl.col(c).is_not_null() for c in CUSTOM_DIM_COLUMNS])

    df = df.with_columns(uses_custom.alias("uses_custom_carton"))
    df = df.with_columns([
        pl.when(pl.col("uses_custom_carton"))
        .then(pl.col(custom))
        .otherwise(pl.coalesce([pl.col(preset), pl.lit(fallback[preset])]))
        .alias(out)
        for custom, preset, out in [
            ("length_cm", "_preset_length_cm", "carton_length_cm"),
            ("width_cm", "_preset_width_cm", "carton_width_cm"),
            ("height_cm", "_preset_height_cm", "carton_height_cm"),
        ]
    ])

    return df.drop([
        "_carton_row", "_preset_key",
        "_preset_length_cm", "_preset_width_cm", "_preset_height_cm",
    ])


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Add carton volume and average weight per pair."""
    return df.with_columns([
        # Volume in cm3
        (
            pl.col("carton_length_cm") *
            pl.col("carton_width_cm") *
            pl.col("carton_height_cm")
        ).alias("volume_cm3"),

        # Average weight per pair (formula carriers)
        (pl.col("weight_kg") / pl.col("pair_count")).alias("avg_weight_kg_per_pair"),
    ])


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(
    df: pl.DataFrame,
    carriers: list[type[Carrier]] | None = None,
) -> pl.DataFrame:
    """
    Calculate every carrier's cost for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        carriers: Carriers to compare, in tie-break order (default: carriers.ALL)

    Returns:
        DataFrame with per-carrier weights and costs, best option and version

    Processing order:
        1. Each carrier appends its own columns (independent of the others)
        2. Cheapest priced carrier is selected
        3. Version is stamped
    """
    if carriers is None:
        carriers = ALL

    df = df.with_row_index("_row_id")

    # Phase 1: Per-carrier weights and costs
    for carrier in carriers:
        df = carrier.calculate(df)

    # Phase 2: Cheapest option
    df = _select_best(df, carriers)

    # Phase 3: Stamp version
    df = _stamp_version(df)

    return df.drop("_row_id")


def _select_best(df: pl.DataFrame, carriers: list[type[Carrier]]) -> pl.DataFrame:
    """
    Add the cheapest priced carrier per row.

    Null costs are ignored. On an exact tie the carrier declared first
    wins. Rows where no carrier is priced get nulls.
    """
    if not carriers:
        return df.with_columns([
            pl.lit(None, dtype=pl.Float64).alias("cost_best"),
            pl.lit(None, dtype=pl.Utf8).alias("best_carrier"),
            pl.lit(None, dtype=pl.Float64).alias("billable_weight_kg_best"),
        ])

    df = df.with_columns(
        pl.min_horizontal([c.cost_col() for c in carriers]).alias("cost_best")
    )

    # First matching branch wins, so declaration order breaks ties
    best_name = pl.when(pl.lit(False)).then(pl.lit(None, dtype=pl.Utf8))
    best_weight = pl.when(pl.lit(False)).then(pl.lit(None, dtype=pl.Float64))
    for carrier in carriers:
        is_best = pl.col(carrier.cost_col()) == pl.col("cost_best")
        best_name = best_name.when(is_best).then(pl.lit(carrier.name))
        best_weight = best_weight.when(is_best).then(pl.col(carrier.billable_weight_col()))

    return df.with_columns([
        best_name.otherwise(pl.lit(None, dtype=pl.Utf8)).alias("best_carrier"),
        best_weight.otherwise(pl.lit(None, dtype=pl.Float64)).alias("billable_weight_kg_best"),
    ])


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
]
