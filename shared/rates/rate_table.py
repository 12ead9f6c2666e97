"""
Rate Table

Stepwise price schedule mapping a billed-weight ceiling to a flat price.

Tiers are closed on the upper bound: a tier with ceiling 3.5 kg covers
billed weights in (previous ceiling, 3.5]. Anything above the highest
ceiling has no price (out of range), it is never charged the top tier.
"""

from pathlib import Path
from typing import NamedTuple

import polars as pl


# Tolerance for comparing billed weight against a tier ceiling
EPSILON = 1e-9


class RateTier(NamedTuple):
    """One row of a rate table."""
    weight_kg_upper: float
    rate: int


class RateTable:
    """
    Immutable, ascending sequence of rate tiers.

    Tiers are sorted on construction, so the source order does not matter.
    Duplicate ceilings and empty tables are rejected.
    """

    __slots__ = ("_tiers",)

    def __init__(self, tiers):
        ordered = tuple(sorted(
            (RateTier(float(upper), int(rate)) for upper, rate in tiers),
            key=lambda t: t.weight_kg_upper,
        ))

        if not ordered:
            raise ValueError("Rate table has no tiers")

        for previous, current in zip(ordered, ordered[1:]):
            if current.weight_kg_upper - previous.weight_kg_upper <= EPSILON:
                raise ValueError(
                    f"Duplicate rate tier ceiling: {current.weight_kg_upper} kg"
                )

        self._tiers = ordered

    @property
    def tiers(self) -> tuple[RateTier, ...]:
        return self._tiers

    @property
    def max_weight_kg(self) -> float:
        """Highest priceable billed weight."""
        return self._tiers[-1].weight_kg_upper

    def lookup(self, billable_weight_kg: float) -> int | None:
        """
        Price for a billed weight, or None if it exceeds every tier.

        Args:
            billable_weight_kg: Billed weight in kg (already rounded)

        Returns:
            Rate of the first tier whose ceiling covers the weight
        """
        for tier in self._tiers:
            if billable_weight_kg <= tier.weight_kg_upper + EPSILON:
                return tier.rate
        return None

    def to_brackets(self) -> pl.DataFrame:
        """
        Rate table as a bracket DataFrame, ready for joining.

        Returns:
            DataFrame with columns:
                - weight_kg_lower: Lower bound of bracket (exclusive, null for first)
                - weight_kg_upper: Upper bound of bracket (inclusive)
                - rate: Price for this bracket
        """
        uppers = [t.weight_kg_upper for t in self._tiers]
        return pl.DataFrame(
            {
                "weight_kg_lower": [None] + uppers[:-1],
                "weight_kg_upper": uppers,
                "rate": [t.rate for t in self._tiers],
            },
            schema={
                "weight_kg_lower": pl.Float64,
                "weight_kg_upper": pl.Float64,
                "rate": pl.Int64,
            },
        )

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self):
        return iter(self._tiers)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        return hash(self._tiers)

    def __repr__(self) -> str:
        return f"RateTable({len(self._tiers)} tiers, max {self.max_weight_kg} kg)"


def read_rate_table(path: Path) -> RateTable:
    """
    Load a rate table from a reference CSV.

    The CSV must have columns weight_kg_upper and rate. Row order is
    irrelevant, tiers are sorted on construction.
    """
    rates = pl.read_csv(path)

    missing = {"weight_kg_upper", "rate"} - set(rates.columns)
    if missing:
        raise ValueError(f"{path.name}: missing columns {sorted(missing)}")

    return RateTable(
        rates.select([
            pl.col("weight_kg_upper").cast(pl.Float64),
            pl.col("rate").cast(pl.Int64),
        ]).iter_rows()
    )
