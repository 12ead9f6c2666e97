"""
Batch Quote
===========

Compares carrier costs for every shipment in a CSV and writes the result.

Input CSV columns:
    pair_count, weight_kg                   (required)
    length_cm, width_cm, height_cm          (optional custom carton)
    preset_pairs                            (optional preset carton)

Usage:
    python -m quotes.scripts.quote_batch shipments.csv
    python -m quotes.scripts.quote_batch shipments.csv -o quotes.csv
    python -m quotes.scripts.quote_batch shipments.csv --fx 7.1
    python -m quotes.scripts.quote_batch shipments.csv --carriers ups_fast,fedex_hk
"""

import argparse
import sys
from pathlib import Path

import polars as pl

from carriers import ALL, get_carrier
from quotes.calculate_costs import calculate_costs
from quotes.version import VERSION


# =============================================================================
# CONFIGURATION
# =============================================================================

OUTPUT_SUFFIX = "_quoted"


# =============================================================================
# PIPELINE
# =============================================================================

def run_pipeline(
    input_path: Path,
    carriers: list | None = None,
    fx_rate: float = 0.0,
) -> pl.DataFrame:
    """
    Load shipments, calculate costs and add USD columns.

    Returns the quoted DataFrame.
    """
    print(f"  Loading shipments from {input_path}...")
    df = pl.read_csv(input_path)
    print(f"  Loaded {len(df):,} shipments")

    if len(df) == 0:
        return pl.DataFrame()

    print("  Calculating costs...")
    df = calculate_costs(df, carriers)

    if fx_rate > 0:
        cost_cols = [c for c in df.columns if c.startswith("cost_")]
        df = df.with_columns([
            (pl.col(c) / fx_rate).round(2).alias(f"{c}_usd")
            for c in cost_cols
        ])

    return df


def print_summary(df: pl.DataFrame, carriers: list) -> None:
    """Print how often each carrier wins and the total best cost."""
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"  Shipments:          {len(df):,}")

    unroutable = df.filter(pl.col("best_carrier").is_null()).height
    print(f"  No viable carrier:  {unroutable:,}")
    print(f"  Total best cost:    ¥{df['cost_best'].sum():,.0f}")

    print("\n  Carrier            Priced    Best    Total (RMB)")
    for carrier in carriers:
        cost_col = carrier.cost_col()
        priced = df.filter(pl.col(cost_col).is_not_null()).height
        wins = df.filter(pl.col("best_carrier") == carrier.name).height
        total = df[cost_col].sum()
        print(f"  {carrier.name:<16} {priced:>8,} {wins:>7,} {total:>14,.0f}")


# =============================================================================
# MAIN
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Compare carrier shipping costs for a CSV of shipments"
    )
    parser.add_argument("input", type=Path, help="Input shipments CSV")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help=f"Output CSV (default: <input>{OUTPUT_SUFFIX}.csv)"
    )
    parser.add_argument(
        "--fx", type=float, default=0.0,
        help="RMB per USD; adds *_usd cost columns when > 0"
    )
    parser.add_argument(
        "--carriers", type=str, default=None,
        help="Comma-separated carrier codes in tie-break order (default: all)"
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Calculate and print the summary without writing output"
    )
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Input file not found: {args.input}")
        sys.exit(1)

    if args.fx < 0:
        print("--fx must not be negative")
        sys.exit(1)

    carriers = ALL
    if args.carriers:
        try:
            carriers = [get_carrier(code.strip()) for code in args.carriers.split(",")]
        except ValueError as e:
            print(e)
            sys.exit(1)

    output_path = args.output or args.input.with_name(
        f"{args.input.stem}{OUTPUT_SUFFIX}.csv"
    )

    print("=" * 60)
    print("BATCH QUOTE")
    print("=" * 60)
    print(f"  Version:  {VERSION}")
    print(f"  Carriers: {', '.join(c.name for c in carriers)}")
    if args.fx > 0:
        print(f"  FX:       {args.fx} RMB/USD")

    df = run_pipeline(args.input, carriers, args.fx)

    if len(df) == 0:
        print("\nNo shipments to quote.")
        return

    print_summary(df, carriers)

    if args.dry_run:
        print(f"\n  [DRY RUN] Would write {len(df):,} rows to {output_path}")
        return

    df.write_csv(output_path)
    print(f"\n  Wrote {len(df):,} rows to {output_path}")


if __name__ == "__main__":
    main()
