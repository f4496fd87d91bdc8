"""
Tests for Trade records: cost model, profit and encoding.
"""
import json
from decimal import localcontext

from gridtrap.trade.models import Trade, TradeSide
from tests.conftest import dec


class TestTradeConstruction:
    """Test trade constructors."""

    def test_buy_and_sell_sides(self):
        assert Trade.buy(dec("50"), dec("0.4"), dec("20")).side is TradeSide.BUY
        assert Trade.sell(dec("200"), dec("0.4"), dec("80")).side is TradeSide.SELL

    def test_timestamp_is_milliseconds(self):
        trade = Trade.buy(dec("50"), dec("0.4"), dec("20"))
        # Milliseconds since epoch are 13 digits until the year 2286
        assert len(str(trade.timestamp)) == 13

    def test_equality_ignores_timestamp(self):
        first = Trade.buy(dec("50"), dec("0.4"), dec("20"), timestamp=1)
        second = Trade.buy(dec("50"), dec("0.40"), dec("20.0"), timestamp=2)
        assert first == second

    def test_side_matters_for_equality(self):
        assert Trade.buy(dec("50"), dec("0.4"), dec("20")) != Trade.sell(dec("50"), dec("0.4"), dec("20"))


class TestCosts:
    """Test the slippage/fee cost model."""

    def test_exact_buy_has_no_cost(self):
        assert Trade.buy(dec("10"), dec("5"), dec("50")).costs() == dec("0")

    def test_buy_with_commission(self):
        assert Trade.buy(dec("50"), dec("0.3996"), dec("20.0")).costs() == dec("0.02")

    def test_sell_with_commission(self):
        assert Trade.sell(dec("200"), dec("0.3996"), dec("79.84008")).costs() == dec("0.07992")

    def test_buy_with_long_fractions(self):
        # 50 / price has no finite expansion; the ideal base is kept to 28 places
        trade = Trade.buy(dec("507.545135202621"), dec("0.09841489"), dec("50"))
        assert str(trade.costs()) == "0.0500013489989265733099999825"

    def test_buy_cost_does_not_depend_on_context_precision(self):
        trade = Trade.buy(dec("507.545135202621"), dec("0.09841489"), dec("50"))
        with localcontext() as ctx:
            ctx.prec = 10
            assert trade.costs() == dec("0.0500013489989265733099999825")

    def test_sell_with_long_fractions(self):
        trade = Trade.sell(dec("509.067770608228"), dec("0.098"), dec("49.8387528781"))
        assert trade.costs() == dec("0.049888641506344")

    def test_exact_sell_has_no_cost(self):
        assert Trade.sell(dec("210"), dec("5"), dec("1050")).costs() == dec("0")


class TestProfit:
    """Test the signed (base, quote) delta of a history."""

    def test_round_trip_from_holding(self):
        trades = [
            Trade.sell(dec("210"), dec("5"), dec("1050")),
            Trade.buy(dec("80"), dec("13.375"), dec("1070")),
            Trade.sell(dec("210"), dec("13.375"), dec("2808.75")),
        ]
        assert Trade.profit(trades) == (dec("-5"), dec("2788.75"))

    def test_round_trip_from_short(self):
        trades = [
            Trade.buy(dec("50"), dec("0.3996"), dec("20.0")),
            Trade.sell(dec("200"), dec("0.3996"), dec("79.8400800")),
        ]
        assert Trade.profit(trades) == (dec("0"), dec("59.8400800"))

    def test_open_buy_at_the_end(self):
        trades = [
            Trade.buy(dec("50"), dec("0.3996"), dec("20.0")),
            Trade.sell(dec("200"), dec("0.3996"), dec("79.8400800")),
            Trade.buy(dec("50"), dec("9.99"), dec("500.0")),
        ]
        assert Trade.profit(trades) == (dec("9.99"), dec("-440.1599200"))

    def test_two_round_trips(self):
        trades = [
            Trade.buy(dec("50"), dec("0.3996"), dec("20.0")),
            Trade.sell(dec("200"), dec("0.3996"), dec("79.8400800")),
            Trade.buy(dec("50"), dec("9.99"), dec("500.0")),
            Trade.sell(dec("200"), dec("9.99"), dec("1996.002")),
        ]
        assert Trade.profit(trades) == (dec("0"), dec("1555.8420800"))

    def test_empty_history(self):
        assert Trade.profit([]) == (dec("0"), dec("0"))


class TestTradeEncoding:
    """Test dictionary encoding."""

    def test_side_tokens(self):
        assert Trade.buy(dec("1"), dec("1"), dec("1")).to_dict()["side"] == "BUY"
        assert Trade.sell(dec("1"), dec("1"), dec("1")).to_dict()["side"] == "SELL"

    def test_decode_restores_equal_trade(self):
        trade = Trade.sell(dec("200"), dec("0.3996"), dec("79.8400800"), timestamp=1700000000000)
        data = json.loads(json.dumps(trade.to_dict()))
        restored = Trade.from_dict(data)
        assert restored == trade
        assert restored.timestamp == trade.timestamp
        assert restored.to_dict() == trade.to_dict()

    def test_field_names(self):
        data = Trade.buy(dec("50"), dec("0.4"), dec("20"), timestamp=5).to_dict()
        assert data == {
            "side": "BUY",
            "price": "50",
            "base_quantity": "0.4",
            "quote_quantity": "20",
            "timestamp": 5,
        }
