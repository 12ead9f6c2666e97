"""
Unit Tests for the Batch Cost Comparison

Tests carton resolution, per-carrier columns, best selection and agreement
with the single-shipment engine.

Run with: pytest quotes/tests/test_calculate_costs.py -v
"""

import pytest
import polars as pl

from carriers import ALL, FedEx_HK, UPS_Fast, UPS_Slow
from shared.carriers import DimCarrier
from shared.cartons import CartonDimensions
from quotes.calculate_costs import calculate, calculate_costs, supplement_shipments
from quotes.quote import quote
from quotes.version import VERSION


class UPS_Slow_Twin(DimCarrier):
    """Same rates as UPS Slow under another name, for tie tests."""
    name = "UPS Slow Twin"
    code = "ups_slow_twin"
    dim_factor = UPS_Slow.dim_factor
    rates_path = UPS_Slow.rates_path
    max_billable_weight_kg = UPS_Slow.max_billable_weight_kg


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def shipments():
    """Mixed batch: presets, a custom carton, an unknown preset, a heavy box."""
    return pl.DataFrame({
        "pair_count": [2, 1, 2, 10, 3],
        "weight_kg": [3.2, 0.8, 3.2, 30.0, 4.5],
        "length_cm": [None, None, 37.0, None, None],
        "width_cm": [None, None, 27.0, None, None],
        "height_cm": [None, None, 14.5, None, None],
        "preset_pairs": [None, None, None, None, 42],
    }, schema={
        "pair_count": pl.Int64,
        "weight_kg": pl.Float64,
        "length_cm": pl.Float64,
        "width_cm": pl.Float64,
        "height_cm": pl.Float64,
        "preset_pairs": pl.Int64,
    })


# =============================================================================
# SUPPLEMENT TESTS
# =============================================================================

class TestSupplementShipments:

    def test_preset_from_pair_count(self, shipments):
        df = supplement_shipments(shipments)
        row = df.row(0, named=True)
        assert (row["carton_length_cm"], row["carton_width_cm"], row["carton_height_cm"]) == (37.0, 27.0, 27.5)
        assert row["uses_custom_carton"] is False

    def test_custom_carton(self, shipments):
        df = supplement_shipments(shipments)
        assert df["uses_custom_carton"][2] is True
        assert df["volume_cm3"][2] == pytest.approx(14485.5)

    def test_unknown_preset_falls_back(self, shipments):
        df = supplement_shipments(shipments)
        assert df["volume_cm3"][4] == pytest.approx(37 * 27 * 14.5)

    def test_average_weight_per_pair(self, shipments):
        df = supplement_shipments(shipments)
        assert df["avg_weight_kg_per_pair"][0] == pytest.approx(1.6)
        assert df["avg_weight_kg_per_pair"][3] == pytest.approx(3.0)

    def test_row_order_preserved(self, shipments):
        df = supplement_shipments(shipments)
        assert df["weight_kg"].to_list() == shipments["weight_kg"].to_list()

    def test_only_required_columns(self):
        df = supplement_shipments(pl.DataFrame({"pair_count": [4], "weight_kg": [5.0]}))
        assert df["volume_cm3"][0] == pytest.approx(37 * 52.5 * 27.5)

    def test_partial_custom_dims_use_preset(self):
        df = supplement_shipments(pl.DataFrame({
            "pair_count": [1], "weight_kg": [1.0], "length_cm": [50.0],
        }))
        assert df["uses_custom_carton"][0] is False
        assert df["carton_length_cm"][0] == 37.0

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="weight_kg"):
            supplement_shipments(pl.DataFrame({"pair_count": [1]}))

    def test_zero_pairs_raises(self):
        with pytest.raises(ValueError, match="pair_count"):
            supplement_shipments(pl.DataFrame({"pair_count": [2, 0], "weight_kg": [1.0, 1.0]}))

    def test_negative_weight_raises(self):
        with pytest.raises(ValueError, match="weight_kg"):
            supplement_shipments(pl.DataFrame({"pair_count": [2], "weight_kg": [-0.5]}))

    def test_infinite_weight_raises(self):
        with pytest.raises(ValueError, match="weight_kg"):
            supplement_shipments(pl.DataFrame({"pair_count": [2], "weight_kg": [float("inf")]}))


# =============================================================================
# COST TESTS
# =============================================================================

class TestCalculateCosts:

    def test_per_carrier_columns(self, shipments):
        df = calculate_costs(shipments)
        for carrier in ALL:
            assert carrier.cost_col() in df.columns
            assert carrier.billable_weight_col() in df.columns
            assert carrier.dim_weight_col() in df.columns

    def test_preset_two_pairs(self, shipments):
        row = calculate_costs(shipments).row(0, named=True)
        assert row["billable_weight_kg_ups_fast"] == 5.0
        assert row["cost_ups_fast"] == 656
        assert row["cost_ups_slow"] == 482
        assert row["billable_weight_kg_fedex_hk"] == 5.5
        assert row["cost_fedex_hk"] == 577
        assert row["cost_usps_singles"] == pytest.approx(448.0)
        assert row["best_carrier"] == "USPS (singles)"
        assert row["cost_best"] == pytest.approx(448.0)
        assert row["billable_weight_kg_best"] is None

    def test_custom_carton_ups_slow_wins(self, shipments):
        row = calculate_costs(shipments).row(2, named=True)
        assert row["cost_ups_fast"] == 510
        assert row["cost_ups_slow"] == 360
        assert row["best_carrier"] == "UPS Slow"
        assert row["billable_weight_kg_best"] == 3.5

    def test_over_cap_is_null(self, shipments):
        """10-pair carton bills 22 kg on UPS and 26 kg on FedEx."""
        row = calculate_costs(shipments).row(3, named=True)
        assert row["billable_weight_kg_ups_fast"] == 22.0
        assert row["cost_ups_fast"] is None
        assert row["cost_ups_slow"] is None
        assert row["billable_weight_kg_fedex_hk"] == 26.0
        assert row["cost_fedex_hk"] is None
        assert row["cost_usps_singles"] == pytest.approx(3640.0)
        assert row["best_carrier"] == "USPS (singles)"

    def test_no_viable_carrier(self):
        df = calculate_costs(
            pl.DataFrame({"pair_count": [2], "weight_kg": [25.0]}),
            carriers=[UPS_Fast, UPS_Slow, FedEx_HK],
        )
        assert df["cost_best"][0] is None
        assert df["best_carrier"][0] is None

    def test_no_carriers(self):
        df = calculate_costs(pl.DataFrame({"pair_count": [2], "weight_kg": [3.2]}), carriers=[])
        assert df["cost_best"][0] is None
        assert df["best_carrier"][0] is None

    def test_tie_goes_to_first_declared(self):
        df = pl.DataFrame({"pair_count": [2], "weight_kg": [3.2]})
        first = calculate_costs(df, carriers=[UPS_Slow, UPS_Slow_Twin])
        second = calculate_costs(df, carriers=[UPS_Slow_Twin, UPS_Slow])
        assert first["best_carrier"][0] == "UPS Slow"
        assert second["best_carrier"][0] == "UPS Slow Twin"

    def test_requote_replaces_previous_costs(self):
        """Output fed back in with a new weight is priced from scratch."""
        first = calculate_costs(pl.DataFrame({"pair_count": [2], "weight_kg": [3.2]}))
        second = calculate_costs(first.with_columns(pl.lit(10.0).alias("weight_kg")))

        row = second.row(0, named=True)
        assert row["billable_weight_kg_ups_fast"] == 10.0
        assert row["cost_ups_fast"] == 1161
        assert row["cost_ups_slow"] == 872
        assert row["cost_fedex_hk"] == 953
        assert not [c for c in second.columns if c.endswith("_right")]
        assert sorted(second.columns) == sorted(first.columns)

    def test_overflowing_weight_is_out_of_range(self):
        df = calculate_costs(pl.DataFrame({"pair_count": [2], "weight_kg": [1e308]}))
        row = df.row(0, named=True)
        for carrier in ALL:
            assert row[carrier.cost_col()] is None
        assert row["best_carrier"] is None

    def test_version_stamped(self, shipments):
        df = calculate_costs(shipments)
        assert df["calculator_version"].unique().to_list() == [VERSION]

    def test_internal_columns_dropped(self, shipments):
        df = calculate_costs(shipments)
        assert not [c for c in df.columns if c.startswith("_")]

    def test_idempotent(self, shipments):
        assert calculate_costs(shipments).equals(calculate_costs(shipments))

    def test_calculate_on_supplemented(self, shipments):
        df = calculate(supplement_shipments(shipments))
        assert df.height == shipments.height


# =============================================================================
# CONSISTENCY TESTS
# =============================================================================

class TestMatchesSingleQuote:
    """Every batch row agrees with quote() for the same inputs."""

    def test_rows_match(self, shipments):
        df = calculate_costs(shipments)

        for row in df.iter_rows(named=True):
            carton = CartonDimensions(
                row["carton_length_cm"], row["carton_width_cm"], row["carton_height_cm"]
            )
            result = quote(row["weight_kg"], row["pair_count"], carton)

            for carrier, quoted in zip(ALL, result.rows):
                assert row[carrier.billable_weight_col()] == quoted.billable_weight_kg
                if quoted.cost_rmb is None:
                    assert row[carrier.cost_col()] is None
                else:
                    assert row[carrier.cost_col()] == pytest.approx(quoted.cost_rmb)

            assert row["best_carrier"] == (result.best.carrier if result.best else None)
