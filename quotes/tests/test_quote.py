"""
Unit Tests for the Quote Engine

Tests carrier comparison, best selection and the reference scenarios.

Run with: pytest quotes/tests/test_quote.py -v
"""

import pytest

from carriers import ALL, FedEx_HK, UPS_Fast, UPS_Slow, USPS_Singles
from shared.carriers import DimCarrier, QuoteRow
from shared.cartons import CartonDimensions
from quotes.quote import QuoteResult, quote, quote_shipment, select_best


SMALL_CARTON = CartonDimensions(37.0, 27.0, 14.5)


class UPS_Slow_Twin(DimCarrier):
    """Same rates as UPS Slow under another name, for tie tests."""
    name = "UPS Slow Twin"
    code = "ups_slow_twin"
    dim_factor = UPS_Slow.dim_factor
    rates_path = UPS_Slow.rates_path
    max_billable_weight_kg = UPS_Slow.max_billable_weight_kg


# =============================================================================
# SCENARIO TESTS
# =============================================================================

class TestScenarios:
    """Worked examples for the default carriers."""

    def test_scenario_a_dim_carriers(self):
        """37 x 27 x 14.5 cm, 3.2 kg, 2 pairs: UPS bills 3.5 kg."""
        result = quote(3.2, 2, SMALL_CARTON)

        assert result.volume_cm3 == pytest.approx(14485.5)
        fast = result.row("UPS Fast")
        slow = result.row("UPS Slow")
        assert fast.dim_weight_kg == pytest.approx(2.41425)
        assert fast.billable_weight_kg == 3.5
        assert fast.cost_rmb == 510
        assert slow.billable_weight_kg == 3.5
        assert slow.cost_rmb == 360

    def test_scenario_a_fedex(self):
        """FedEx /5000 DIM is 2.90 kg, actual 3.2 kg wins, bills 3.5 kg."""
        row = quote(3.2, 2, SMALL_CARTON).row("FedEx (HK)")
        assert row.billable_weight_kg == 3.5
        assert row.cost_rmb == 392

    def test_scenario_a_best(self):
        """UPS Slow at 360 beats USPS singles at 448."""
        result = quote(3.2, 2, SMALL_CARTON)
        assert result.best.carrier == "UPS Slow"
        assert result.best.cost_rmb == 360

    def test_scenario_b_formula(self):
        """2 pairs, 3.2 kg: 1.6 kg per pair, 224 per pair, 448 total."""
        result = quote(3.2, 2, SMALL_CARTON)
        row = result.row("USPS (singles)")
        assert result.avg_weight_kg_per_pair == pytest.approx(1.6)
        assert row.cost_rmb == pytest.approx(448.0)
        assert row.billable_weight_kg is None

    def test_scenario_c_all_dim_carriers_out_of_range(self):
        """25 kg is over the UPS 20 kg and FedEx 15 kg caps."""
        result = quote(25.0, 2, SMALL_CARTON, carriers=[UPS_Fast, UPS_Slow, FedEx_HK])
        assert [r.cost_rmb for r in result.rows] == [None, None, None]
        assert [r.billable_weight_kg for r in result.rows] == [25.0, 25.0, 25.0]
        assert result.best is None

    def test_scenario_c_formula_still_priced(self):
        """Out-of-range carriers never block the others."""
        result = quote(25.0, 2, SMALL_CARTON)
        assert result.best.carrier == "USPS (singles)"
        assert result.best.cost_rmb == pytest.approx(2 * (100 * 12.5 + 64))


# =============================================================================
# ENGINE TESTS
# =============================================================================

class TestQuote:

    def test_rows_in_declaration_order(self):
        result = quote(3.2, 2, SMALL_CARTON)
        assert [r.carrier for r in result.rows] == [c.name for c in ALL]

    def test_custom_carrier_order_kept(self):
        carriers = [FedEx_HK, USPS_Singles]
        result = quote(3.2, 2, SMALL_CARTON, carriers=carriers)
        assert [r.carrier for r in result.rows] == ["FedEx (HK)", "USPS (singles)"]

    def test_idempotent(self):
        first = quote(7.3, 4, CartonDimensions(40.0, 30.0, 30.0))
        second = quote(7.3, 4, CartonDimensions(40.0, 30.0, 30.0))
        assert first == second

    def test_zero_pairs_rejected(self):
        with pytest.raises(ValueError, match="pair_count"):
            quote(3.2, 0, SMALL_CARTON)

    def test_zero_pairs_rejected_without_formula_carrier(self):
        with pytest.raises(ValueError, match="pair_count"):
            quote(3.2, 0, SMALL_CARTON, carriers=[UPS_Fast])

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError, match="total_weight_kg"):
            quote(-1.0, 2, SMALL_CARTON)

    def test_overflowing_weight_is_out_of_range(self):
        """1e308 kg is finite but too heavy for every carrier."""
        result = quote(1e308, 2, SMALL_CARTON)
        assert all(r.cost_rmb is None for r in result.rows)
        assert result.best is None

    def test_overflowing_carton_is_out_of_range(self):
        """A carton whose volume overflows prices no DIM carrier."""
        result = quote(3.2, 2, CartonDimensions(1e103, 1e103, 1e103))
        for carrier in (UPS_Fast, UPS_Slow, FedEx_HK):
            assert result.row(carrier.name).cost_rmb is None
        assert result.best.carrier == USPS_Singles.name

    def test_infinite_weight_rejected(self):
        with pytest.raises(ValueError, match="total_weight_kg"):
            quote(float("inf"), 2, SMALL_CARTON)

    def test_no_carriers(self):
        result = quote(3.2, 2, SMALL_CARTON, carriers=[])
        assert result.rows == ()
        assert result.best is None

    def test_unknown_row_raises(self):
        with pytest.raises(KeyError):
            quote(3.2, 2, SMALL_CARTON).row("DHL")


class TestTieBreak:
    """Exact ties go to the carrier listed first."""

    def test_first_declared_wins(self):
        result = quote(3.2, 2, SMALL_CARTON, carriers=[UPS_Slow, UPS_Slow_Twin])
        assert result.best.carrier == "UPS Slow"

    def test_reversed_order_flips_winner(self):
        result = quote(3.2, 2, SMALL_CARTON, carriers=[UPS_Slow_Twin, UPS_Slow])
        assert result.best.carrier == "UPS Slow Twin"

    def test_repeated_calls_same_winner(self):
        winners = {
            quote(3.2, 2, SMALL_CARTON, carriers=[UPS_Slow, UPS_Slow_Twin]).best.carrier
            for _ in range(20)
        }
        assert winners == {"UPS Slow"}


class TestSelectBest:

    def test_skips_unpriced_rows(self):
        rows = [
            QuoteRow("A", 3.0, None, ""),
            QuoteRow("B", 3.0, 500.0, ""),
            QuoteRow("C", None, 450.0, ""),
        ]
        assert select_best(rows).carrier == "C"

    def test_none_when_nothing_priced(self):
        assert select_best([QuoteRow("A", 30.0, None, "")]) is None

    def test_zero_cost_is_a_price(self):
        rows = [QuoteRow("A", 1.0, 10.0, ""), QuoteRow("B", 1.0, 0.0, "")]
        assert select_best(rows).carrier == "B"


# =============================================================================
# CONVENIENCE ENTRY POINT
# =============================================================================

class TestQuoteShipment:

    def test_preset_defaults_to_pair_count(self):
        """2-pair preset is 37 x 27 x 27.5, DIM pushes UPS to 5.0 kg."""
        result = quote_shipment(pair_count=2, total_weight_kg=3.2)
        assert result.volume_cm3 == pytest.approx(37 * 27 * 27.5)
        assert result.row("UPS Fast").billable_weight_kg == 5.0
        assert result.row("UPS Fast").cost_rmb == 656
        assert result.row("FedEx (HK)").billable_weight_kg == 5.5
        assert result.row("FedEx (HK)").cost_rmb == 577
        assert result.best.carrier == "USPS (singles)"

    def test_explicit_preset(self):
        result = quote_shipment(pair_count=2, total_weight_kg=3.2, preset_index=1)
        assert result.volume_cm3 == pytest.approx(37 * 27 * 14.5)

    def test_custom_carton(self):
        result = quote_shipment(
            pair_count=2, total_weight_kg=3.2, mode="Custom", custom_dims=(37, 27, 14.5)
        )
        assert result.best.carrier == "UPS Slow"

    def test_returns_quote_result(self):
        assert isinstance(quote_shipment(1, 0.8), QuoteResult)
