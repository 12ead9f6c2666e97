"""
Unit Tests for Display Formatting

Run with: pytest quotes/tests/test_formatting.py -v
"""

from carriers import FedEx_HK, UPS_Fast
from shared.cartons import CartonDimensions
from quotes.formatting import money, quote_table, usd, weight
from quotes.quote import quote


SMALL_CARTON = CartonDimensions(37.0, 27.0, 14.5)


class TestFormatters:

    def test_money(self):
        assert money(448.0) == "¥448"
        assert money(None) == "—"

    def test_usd(self):
        assert usd(710.0, 7.1) == "$100.00"
        assert usd(710.0, 0) == ""
        assert usd(None, 7.1) == ""

    def test_weight(self):
        assert weight(3.5) == "3.5"
        assert weight(None) == "—"


class TestQuoteTable:

    def test_rows_and_best(self):
        table = quote_table(quote(3.2, 2, SMALL_CARTON))
        assert table["Carrier"].to_list() == [
            "USPS (singles)", "UPS Fast", "UPS Slow", "FedEx (HK)", "Best price",
        ]
        assert table["Billed kg"][0] == "— (per-pair)"
        assert table["Cost (RMB)"][0] == "¥448"
        assert table.row(4, named=True) == {
            "Carrier": "Best price",
            "Billed kg": "3.5",
            "Cost (RMB)": "¥360",
            "Notes": "UPS Slow",
        }

    def test_usd_column_only_with_fx(self):
        result = quote(3.2, 2, SMALL_CARTON)
        assert "Cost (USD)" not in quote_table(result).columns
        table = quote_table(result, fx_rate=7.2)
        assert table["Cost (USD)"][4] == "$50.00"

    def test_no_viable_carrier(self):
        table = quote_table(quote(25.0, 2, SMALL_CARTON, carriers=[UPS_Fast, FedEx_HK]))
        assert table["Cost (RMB)"].to_list() == ["—", "—", "—"]
        assert table["Notes"][2] == "—"
