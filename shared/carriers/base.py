"""
Carrier Base Classes

Shared base classes for all carrier price calculators.

Two kinds of carrier exist:
    - DIM-based:     billed weight from the greater-of rule, price from a
                     tiered rate table
    - Formula-based: price from a linear function of the average weight
                     per pair, no billed weight
"""

from abc import ABC, abstractmethod
import math
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

import polars as pl

from shared.billable_weight import (
    billable_weight,
    billable_weight_expr,
    dim_weight,
    dim_weight_expr,
)
from shared.cartons import CartonDimensions, carton_volume_cm3
from shared.rates import EPSILON, RateTable, read_rate_table


KIND_DIM = "dim"
KIND_FORMULA = "formula"


# =============================================================================
# QUOTE ROW
# =============================================================================

class QuoteRow(NamedTuple):
    """
    One carrier's price for a shipment.

    billable_weight_kg and dim_weight_kg are None for formula-based carriers.
    cost_rmb is None when the shipment is out of the carrier's range.
    """
    carrier: str
    billable_weight_kg: float | None
    cost_rmb: float | None
    note: str
    dim_weight_kg: float | None = None

    @property
    def is_priced(self) -> bool:
        return self.cost_rmb is not None


@lru_cache(maxsize=None)
def _load_rate_table(path: Path) -> RateTable:
    return read_rate_table(path)


# =============================================================================
# BASE CLASS
# =============================================================================

class Carrier(ABC):
    """
    Base class for all carriers.

    Attributes:
        IDENTITY
            name    - Display name (e.g., "UPS Fast")
            code    - Snake-case identifier used in column names (e.g., "ups_fast")
            kind    - KIND_DIM or KIND_FORMULA

    Column naming in calculate():
        dim_weight_kg_<code>, billable_weight_kg_<code>, cost_<code>
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    code: str
    kind: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def cost_col(cls) -> str:
        return f"cost_{cls.code}"

    @classmethod
    def billable_weight_col(cls) -> str:
        return f"billable_weight_kg_{cls.code}"

    @classmethod
    def dim_weight_col(cls) -> str:
        return f"dim_weight_kg_{cls.code}"

    @classmethod
    def output_cols(cls) -> list[str]:
        """Columns calculate() appends, replaced if already present."""
        return [cls.dim_weight_col(), cls.billable_weight_col(), cls.cost_col()]

    @classmethod
    @abstractmethod
    def quote(
        cls,
        total_weight_kg: float,
        pair_count: int,
        carton: CartonDimensions,
    ) -> QuoteRow:
        """Price a single shipment."""
        raise NotImplementedError(f"{cls.__name__} does not implement quote()")

    @classmethod
    @abstractmethod
    def calculate(cls, df: pl.DataFrame) -> pl.DataFrame:
        """
        Append this carrier's weight and cost columns to a supplemented
        shipment DataFrame (see quotes.calculate_costs).
        """
        raise NotImplementedError(f"{cls.__name__} does not implement calculate()")


# =============================================================================
# DIM-BASED CARRIERS
# =============================================================================

class DimCarrier(Carrier):
    """
    Carrier billed on the greater of actual and dimensional weight.

    Attributes:
        PRICING
            dim_factor              - DIM divisor (cm3 per kg)
            rates_path              - Reference CSV with weight_kg_upper, rate

        LIMITS
            max_billable_weight_kg  - Explicit cap; takes precedence over the
                                      table extent when set
    """

    kind = KIND_DIM

    dim_factor: float
    rates_path: Path
    max_billable_weight_kg: float | None = None

    @classmethod
    def rates(cls) -> RateTable:
        """Rate table, loaded once per process."""
        return _load_rate_table(cls.rates_path)

    @classmethod
    def note(cls) -> str:
        note = f"DIM /{cls.dim_factor:g}"
        if cls.max_billable_weight_kg is not None:
            note += f" (≤{cls.max_billable_weight_kg:g} kg)"
        return note

    @classmethod
    def exceeds_cap(cls, billable_weight_kg: float) -> bool:
        cap = cls.max_billable_weight_kg
        return cap is not None and billable_weight_kg > cap + EPSILON

    @classmethod
    def price(cls, billable_weight_kg: float) -> int | None:
        """Rate for a billed weight, None if over the cap or the table."""
        if cls.exceeds_cap(billable_weight_kg):
            return None
        return cls.rates().lookup(billable_weight_kg)

    @classmethod
    def quote(
        cls,
        total_weight_kg: float,
        pair_count: int,
        carton: CartonDimensions,
    ) -> QuoteRow:
        volume = carton_volume_cm3(carton)
        billable = billable_weight(total_weight_kg, cls.dim_factor, volume)
        rate = cls.price(billable)

        return QuoteRow(
            carrier=cls.name,
            billable_weight_kg=billable,
            cost_rmb=None if rate is None else float(rate),
            note=cls.note(),
            dim_weight_kg=dim_weight(volume, cls.dim_factor),
        )

    @classmethod
    def calculate(cls, df: pl.DataFrame) -> pl.DataFrame:
        """
        Adds columns:
            - dim_weight_kg_<code>
            - billable_weight_kg_<code>
            - cost_<code> (null when out of range)

        Requires weight_kg, volume_cm3 and _row_id.
        """
        df = df.drop(cls.output_cols(), strict=False)
        df = df.with_columns([
            dim_weight_expr(cls.dim_factor).alias(cls.dim_weight_col()),
            billable_weight_expr(cls.dim_factor).alias(cls.billable_weight_col()),
        ])
        df = cls._lookup_rate(df)
        df = cls._apply_cap(df)
        return df

    @classmethod
    def _lookup_rate(cls, df: pl.DataFrame) -> pl.DataFrame:
        """
        Look up the rate bracket for each row.

        Rows that match no bracket keep a null cost instead of being
        dropped, so one carrier's out-of-range shipments never affect
        the rest of the DataFrame.
        """
        billable_col = cls.billable_weight_col()
        cost_col = cls.cost_col()
        brackets = cls.rates().to_brackets()

        matched = (
            df
            .select(["_row_id", billable_col])
            .join(brackets, how="cross")
            .filter(
                (
                    pl.col("weight_kg_lower").is_null() |
                    (pl.col(billable_col) > pl.col("weight_kg_lower") + EPSILON)
                ) &
                (pl.col(billable_col) <= pl.col("weight_kg_upper") + EPSILON)
            )
            .select([
                "_row_id",
                pl.col("rate").cast(pl.Float64).alias(cost_col),
            ])
        )

        df = df.join(matched, on="_row_id", how="left")
        return df.sort("_row_id")

    @classmethod
    def _apply_cap(cls, df: pl.DataFrame) -> pl.DataFrame:
        if cls.max_billable_weight_kg is None:
            return df

        cost_col = cls.cost_col()
        return df.with_columns(
            pl.when(pl.col(cls.billable_weight_col()) > cls.max_billable_weight_kg + EPSILON)
            .then(pl.lit(None, dtype=pl.Float64))
            .otherwise(pl.col(cost_col))
            .alias(cost_col)
        )


# =============================================================================
# FORMULA-BASED CARRIERS
# =============================================================================

class FormulaCarrier(Carrier):
    """
    Carrier priced per pair from the average weight per pair:

        cost_per_pair = rate_per_kg * avg_kg_per_pair + base_per_pair
        cost_total    = pair_count * cost_per_pair

    Attributes:
        PRICING
            rate_per_kg             - Coefficient a (RMB per kg)
            base_per_pair           - Coefficient b (RMB per pair)

        LIMITS
            max_weight_kg_per_pair  - Optional cap on the average pair weight
    """

    kind = KIND_FORMULA

    rate_per_kg: float
    base_per_pair: float
    max_weight_kg_per_pair: float | None = None

    @classmethod
    def cost_per_pair(cls, avg_weight_kg_per_pair: float) -> float:
        return cls.rate_per_kg * avg_weight_kg_per_pair + cls.base_per_pair

    @classmethod
    def note(cls, pair_count: int, avg_weight_kg_per_pair: float) -> str:
        return (
            f"= {pair_count} × ({cls.rate_per_kg:g}×{avg_weight_kg_per_pair:.2f}"
            f" + {cls.base_per_pair:g})"
        )

    @classmethod
    def quote(
        cls,
        total_weight_kg: float,
        pair_count: int,
        carton: CartonDimensions,
    ) -> QuoteRow:
        if pair_count < 1:
            raise ValueError(f"pair_count must be at least 1, got {pair_count}")

        avg = total_weight_kg / pair_count
        cap = cls.max_weight_kg_per_pair

        cost = round(pair_count * cls.cost_per_pair(avg), 2)
        # Overflowed totals have no price
        if not math.isfinite(cost) or (cap is not None and avg > cap + EPSILON):
            cost = None

        return QuoteRow(
            carrier=cls.name,
            billable_weight_kg=None,
            cost_rmb=cost,
            note=cls.note(pair_count, avg),
        )

    @classmethod
    def calculate(cls, df: pl.DataFrame) -> pl.DataFrame:
        """
        Adds columns:
            - dim_weight_kg_<code>, billable_weight_kg_<code> (always null)
            - cost_<code>

        Requires pair_count and avg_weight_kg_per_pair.
        """
        cost = (
            pl.col("pair_count") *
            (cls.rate_per_kg * pl.col("avg_weight_kg_per_pair") + cls.base_per_pair)
        ).cast(pl.Float64).round(2)
        cost = pl.when(cost.is_infinite()).then(pl.lit(None, dtype=pl.Float64)).otherwise(cost)

        if cls.max_weight_kg_per_pair is not None:
            cost = (
                pl.when(pl.col("avg_weight_kg_per_pair") > cls.max_weight_kg_per_pair + EPSILON)
                .then(pl.lit(None, dtype=pl.Float64))
                .otherwise(cost)
            )

        return df.with_columns([
            pl.lit(None, dtype=pl.Float64).alias(cls.dim_weight_col()),
            pl.lit(None, dtype=pl.Float64).alias(cls.billable_weight_col()),
            cost.alias(cls.cost_col()),
        ])
