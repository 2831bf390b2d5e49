"""Tests for engine data models and formatting."""

import math

import pytest

from src.engine.models import (
    NOT_APPLICABLE,
    DividendProjection,
    HedgeStrategy,
    Holding,
    MarginCallInfo,
    MetricsResult,
    Portfolio,
    StressScenario,
    VaRResult,
    coerce_holdings,
    coerce_portfolio,
    format_amount,
    format_number,
    format_optional_amount,
    is_number,
    portfolio_holdings,
    round_half_away,
    total_market_value,
)
from src.engine.models.formatting import format_horizon, format_percent


class TestFormatting:
    """Tests for the 2-decimal formatting boundary."""

    def test_fixed_two_decimals(self):
        assert format_amount(80000) == "80000.00"
        assert format_amount(1.6) == "1.60"
        assert format_amount(-10000) == "-10000.00"

    def test_half_away_from_zero(self):
        assert format_amount(0.125) == "0.13"
        assert format_amount(-0.125) == "-0.13"
        assert format_amount(2.5, 0) == "3"

    def test_negative_zero(self):
        assert format_amount(-0.0) == "0.00"
        assert format_amount(-0.001) == "-0.00"

    def test_non_finite(self):
        assert format_amount(math.inf) == "Infinity"
        assert format_amount(-math.inf) == "-Infinity"
        assert format_amount(math.nan) == "NaN"

    def test_custom_places(self):
        assert format_amount(60, 1) == "60.0"

    def test_optional(self):
        assert format_optional_amount(None) == NOT_APPLICABLE
        assert format_optional_amount(33.333) == "33.33"

    def test_round_half_away(self):
        assert round_half_away(1100.0000000000002) == 1100.0
        assert round_half_away(1276.2815625) == 1276.28
        assert round_half_away(math.inf) == math.inf

    def test_number_labels(self):
        assert format_number(95.0) == "95"
        assert format_number(-3) == "-3"
        assert format_number(12.5) == "12.5"
        assert format_number(math.inf) == "Infinity"
        assert format_number(math.nan) == "NaN"

    def test_percent_keeps_all_digits(self):
        assert format_percent(0.95) == "95%"
        assert format_percent(0.975) == "97.5%"
        assert format_percent(0.123456789) == f"{0.123456789 * 100!r}%"

    def test_horizon_from_float(self):
        assert format_horizon(2.0) == "2 day(s)"
        assert format_horizon(10) == "10 day(s)"


class TestIsNumber:
    def test_numbers(self):
        assert is_number(1)
        assert is_number(1.5)
        assert is_number(-0.0)

    def test_not_numbers(self):
        assert not is_number(True)
        assert not is_number("100")
        assert not is_number(None)


class TestHolding:
    """Tests for Holding.from_dict."""

    def test_camel_case_keys(self):
        h = Holding.from_dict(
            {
                "ticker": "AAPL",
                "quantity": 150,
                "marketValue": 28500,
                "costBasis": 22500,
                "annualDividend": 144,
                "sector": "Technology",
            }
        )
        assert h == Holding(
            market_value=28500,
            cost_basis=22500,
            annual_dividend=144,
            sector="Technology",
            ticker="AAPL",
            quantity=150,
        )

    def test_snake_case_keys(self):
        h = Holding.from_dict({"market_value": 100, "cost_basis": 80, "annual_dividend": 4})
        assert (h.market_value, h.cost_basis, h.annual_dividend) == (100, 80, 4)

    def test_defaults(self):
        h = Holding.from_dict({})
        assert h.market_value == 0
        assert h.sector == "Uncategorized"
        assert h.ticker == "N/A"

    def test_non_numeric_value_treated_as_zero(self):
        assert Holding.from_dict({"marketValue": "lots"}).market_value == 0

    def test_direct_construction_normalises_amounts(self):
        h = Holding(market_value=None, cost_basis="12", annual_dividend=None, quantity=None, sector="")
        assert (h.market_value, h.cost_basis, h.annual_dividend, h.quantity) == (0.0, 0.0, 0.0, 0.0)
        assert h.sector == "Uncategorized"
        assert total_market_value((h, Holding(market_value=5.0))) == 5.0


class TestPortfolio:
    """Tests for Portfolio and snapshot coercion."""

    def test_from_dict(self):
        p = Portfolio.from_dict({"cash": 100, "marginUsed": 50, "holdings": [{"marketValue": 10}]})
        assert p.cash == 100
        assert p.margin_used == 50
        assert p.market_value == 10

    def test_coerce_valid_mapping(self):
        p = coerce_portfolio({"cash": 100, "margin_used": 50, "holdings": [{"marketValue": 10}]})
        assert isinstance(p, Portfolio)
        assert p.holdings == (Holding(market_value=10),)

    def test_coerce_portfolio_instance(self):
        original = Portfolio(cash=1, margin_used=0, holdings=(Holding(market_value=5),))
        assert coerce_portfolio(original) == original

    @pytest.mark.parametrize(
        "snapshot",
        [
            None,
            {},
            {"cash": 0, "marginUsed": 0},
            {"cash": 0, "marginUsed": 0, "holdings": "AAPL"},
            {"cash": "0", "marginUsed": 0, "holdings": []},
            {"cash": 0, "marginUsed": None, "holdings": []},
            {"cash": False, "marginUsed": 0, "holdings": []},
            "not a portfolio",
        ],
    )
    def test_coerce_malformed(self, snapshot):
        assert coerce_portfolio(snapshot) is None

    def test_non_mapping_holding_entries_carry_no_value(self):
        assert coerce_holdings([None, 5, {"marketValue": 10}]) == (
            Holding(),
            Holding(),
            Holding(market_value=10),
        )

    def test_holdings_without_cash_validation(self):
        """Holdings can be read from a snapshot whose cash is invalid."""
        holdings = portfolio_holdings({"cash": "x", "holdings": [{"marketValue": 10}]})
        assert holdings == (Holding(market_value=10),)
        assert portfolio_holdings({"cash": 0}) is None
        assert portfolio_holdings(None) is None

    def test_total_market_value(self):
        assert total_market_value([{"marketValue": 10}, {"marketValue": 5.5}, {}]) == 15.5
        assert total_market_value(None) == 0.0
        assert total_market_value([]) == 0.0


class TestResults:
    """Tests for result export keys."""

    def test_metrics_keys(self):
        assert list(MetricsResult().to_dict()) == [
            "netLiquidationValue",
            "totalEquity",
            "marketValue",
            "leverage",
            "maintenanceMargin",
            "excessLiquidity",
            "buyingPower",
            "marginHealth",
        ]

    def test_var_labels(self):
        result = VaRResult(value_at_risk=1234.567, confidence_level=0.99, time_horizon_days=10)
        assert result.to_dict() == {"VaR": "1234.57", "confidenceLevel": "99%", "timeHorizon": "10 day(s)"}

    def test_margin_call_not_applicable(self):
        info = MarginCallInfo()
        assert not info.is_applicable
        assert info.to_dict() == {"dropPercentage": "N/A", "marketValueDrop": "N/A"}

    def test_stress_label(self):
        scenario = StressScenario(drop_percent=0.3, metrics=MetricsResult())
        assert scenario.label == "-30%"
        assert scenario.to_dict()["name"] == "-30%"
        assert StressScenario(drop_percent=0.15, metrics=MetricsResult()).label == "-15%"
        assert StressScenario(drop_percent=0.125, metrics=MetricsResult()).label == "-12.5%"

    def test_dividend_projection(self):
        assert DividendProjection(year=2025, income=1100.0).to_dict() == {"year": 2025, "income": 1100.0}

    def test_hedge_strategy_values(self):
        assert [s.value for s in HedgeStrategy] == [
            "Long Put",
            "Bear Put Spread",
            "Cash-Secured Put",
            "Covered Call",
        ]
        assert HedgeStrategy.CASH_SECURED_PUT.description == (
            "A neutral to bullish strategy used to acquire stock at a lower price or generate income."
        )
