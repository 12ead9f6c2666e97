"""
Shipping Cost Calculator
========================

Interactive CLI tool to compare carrier costs for a single shipment.

Usage:
    python -m quotes.scripts.calculator
"""

from shared.cartons import MODE_CUSTOM, MODE_PRESET, preset_carton
from quotes.config import (
    DEFAULT_CUSTOM_DIMS_CM,
    DEFAULT_FX_RATE,
    DEFAULT_PAIR_COUNT,
    DEFAULT_TOTAL_WEIGHT_KG,
    MAX_PAIRS,
    MIN_PAIRS,
)
from quotes.formatting import quote_table
from quotes.quote import QuoteResult, quote_shipment
from quotes.version import VERSION


def _ask_float(prompt: str, default: float) -> float:
    value = input(f"{prompt} [default: {default:g}]: ").strip()
    return float(value) if value else default


def get_user_input() -> dict:
    """Prompt user for shipment details."""
    print("\n=== Shipping Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    pairs = int(_ask_float(f"Pairs ({MIN_PAIRS}-{MAX_PAIRS})", DEFAULT_PAIR_COUNT))
    if not MIN_PAIRS <= pairs <= MAX_PAIRS:
        clamped = max(MIN_PAIRS, min(MAX_PAIRS, pairs))
        print(f"Warning: pairs must be {MIN_PAIRS}-{MAX_PAIRS}, using {clamped}")
        pairs = clamped

    weight = max(0.0, _ask_float("Total actual weight (kg, all pairs)", DEFAULT_TOTAL_WEIGHT_KG))

    # Carton
    print("\nCarton:")
    print("  1. Preset for pair count")
    print("  2. Custom L x W x H")
    mode = MODE_CUSTOM if input("Select (1 or 2): ").strip() == "2" else MODE_PRESET

    custom_dims = None
    if mode == MODE_CUSTOM:
        length = _ask_float("Length (cm)", DEFAULT_CUSTOM_DIMS_CM[0])
        width = _ask_float("Width (cm)", DEFAULT_CUSTOM_DIMS_CM[1])
        height = _ask_float("Height (cm)", DEFAULT_CUSTOM_DIMS_CM[2])
        custom_dims = (length, width, height)

    fx_rate = max(0.0, _ask_float("\nFX (RMB per USD, 0 = off)", DEFAULT_FX_RATE))

    return {
        "pair_count": pairs,
        "total_weight_kg": weight,
        "mode": mode,
        "custom_dims": custom_dims,
        "fx_rate": fx_rate,
    }


def print_results(result: QuoteResult, shipment: dict) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    # Input summary
    if shipment["mode"] == MODE_PRESET:
        dims = preset_carton(shipment["pair_count"])
        carton = f"preset for {shipment['pair_count']} pair(s)"
    else:
        dims = shipment["custom_dims"]
        carton = "custom"
    print(f"\nShipment: {shipment['pair_count']} pair(s), {shipment['total_weight_kg']} kg")
    print(f"Carton: {dims[0]:g} x {dims[1]:g} x {dims[2]:g} cm ({carton})")
    print(f"Volume: {result.volume_cm3:,.2f} cm3")
    print(f"Average per pair: {result.avg_weight_kg_per_pair:.2f} kg")

    # DIM weights
    print("\n--- Weights ---")
    for row in result.rows:
        if row.dim_weight_kg is None:
            continue
        print(
            f"{row.carrier:<16} DIM {row.dim_weight_kg:>6.2f} kg"
            f"   billed {row.billable_weight_kg:>5.1f} kg"
        )

    # Cost table
    print("\n--- Costs ---")
    table = quote_table(result, shipment["fx_rate"])
    for record in table.iter_rows(named=True):
        cells = [f"{record['Carrier']:<16}", f"{record['Billed kg']:>14}", f"{record['Cost (RMB)']:>8}"]
        if "Cost (USD)" in record:
            cells.append(f"{record['Cost (USD)']:>10}")
        cells.append(f"  {record['Notes']}")
        print(" ".join(cells))
    print()


def main():
    """Main entry point."""
    try:
        shipment = get_user_input()

        result = quote_shipment(
            pair_count=shipment["pair_count"],
            total_weight_kg=shipment["total_weight_kg"],
            mode=shipment["mode"],
            custom_dims=shipment["custom_dims"],
        )

        print_results(result, shipment)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
