"""Tests for portfolio risk metrics (VaR and concentration)."""

import math
import random

import numpy as np
import pytest

from src.engine.models import ConcentrationLevel, Holding
from src.engine.portfolio import (
    analyze_correlation,
    box_muller,
    calc_sector_weights,
    calculate_var,
    classify_concentration,
)
from src.engine.portfolio.risk_metrics import calc_var_index, simulate_losses

# Draw that makes sqrt(-2 ln u1) == 1 once mapped through u1 = 1 - draw
UNIT_RADIUS_DRAW = 1 - math.exp(-0.5)


class FakeUniform:
    """Deterministic uniform source cycling through fixed draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def portfolio():
    return {
        "cash": 10000,
        "marginUsed": 40000,
        "holdings": [{"marketValue": 60000}, {"marketValue": 40000}],
    }


class TestBoxMuller:
    def test_unit_radius(self):
        """u1 = e^-0.5 gives radius 1; u2 = 0 / 0.5 gives ±1."""
        assert box_muller(math.exp(-0.5), 0.0) == pytest.approx(1.0)
        assert box_muller(math.exp(-0.5), 0.5) == pytest.approx(-1.0)

    def test_u1_of_one_is_zero(self):
        assert box_muller(1.0, 0.3) == 0.0


class TestVarIndex:
    def test_index(self):
        assert calc_var_index(1000, 0.95) == 950
        assert calc_var_index(1000, 0.99) == 990

    def test_clamped(self):
        assert calc_var_index(1000, 1.0) == 999
        assert calc_var_index(1000, 0.0) == 0
        assert calc_var_index(10, -0.5) == 0

    def test_non_finite_confidence(self):
        assert calc_var_index(10, math.nan) == 0
        assert calc_var_index(10, math.inf) == 9
        assert calc_var_index(10, -math.inf) == 0


class TestSimulateLosses:
    def test_one_draw_pair_per_day(self):
        rng = FakeUniform([0.0])
        losses = simulate_losses(100000, 3, 0.02, 5, rng)
        assert rng.calls == 2 * 3 * 5
        # draw 0 -> u1 = 1 -> z = 0 -> no loss
        assert losses.tolist() == [0.0] * 5

    def test_known_paths(self):
        rng = FakeUniform([UNIT_RADIUS_DRAW, 0.0, UNIT_RADIUS_DRAW, 0.5])
        losses = simulate_losses(100000, 1, 0.02, 2, rng)
        # z = +1 -> gain of 2%, z = -1 -> loss of 2%
        assert losses[0] == pytest.approx(-2000, rel=1e-6)
        assert losses[1] == pytest.approx(2000, rel=1e-6)


class TestCalculateVar:
    """Tests for calculate_var."""

    def test_known_draws(self, portfolio):
        """Two paths (+2%, -2%) at 95% -> index 1 -> VaR = 2,000."""
        rng = FakeUniform([UNIT_RADIUS_DRAW, 0.0, UNIT_RADIUS_DRAW, 0.5])
        result = calculate_var(portfolio, 0.95, 1, simulations=2, rng=rng)
        assert result.value_at_risk == pytest.approx(2000, rel=1e-6)
        assert result.to_dict() == {"VaR": "2000.00", "confidenceLevel": "95%", "timeHorizon": "1 day(s)"}

    def test_negative_quantile_reported_as_zero(self, portfolio):
        rng = FakeUniform([UNIT_RADIUS_DRAW, 0.0, UNIT_RADIUS_DRAW, 0.5])
        result = calculate_var(portfolio, 0.4, 1, simulations=2, rng=rng)
        assert result.value_at_risk == 0.0

    def test_full_confidence_uses_largest_loss(self, portfolio):
        rng = FakeUniform([UNIT_RADIUS_DRAW, 0.0, UNIT_RADIUS_DRAW, 0.5])
        result = calculate_var(portfolio, 1.0, 1, simulations=2, rng=rng)
        assert result.value_at_risk == pytest.approx(2000, rel=1e-6)

    def test_never_negative(self, portfolio):
        for seed in range(5):
            result = calculate_var(portfolio, 0.95, 1, simulations=200, seed=seed)
            assert result.value_at_risk >= 0

    def test_seed_is_reproducible(self, portfolio):
        a = calculate_var(portfolio, 0.95, 1, seed=42)
        b = calculate_var(portfolio, 0.95, 1, seed=42)
        assert a == b

    def test_monotone_in_confidence(self, portfolio):
        """Same draws, higher confidence -> VaR does not decrease."""
        values = [
            calculate_var(portfolio, c, 1, rng=np.random.default_rng(7)).value_at_risk
            for c in (0.5, 0.9, 0.95, 0.99)
        ]
        assert values == sorted(values)

    def test_plausible_magnitude(self, portfolio):
        """1-day 95% VaR of 100,000 at 2% daily vol is about 1.645 × 2,000."""
        result = calculate_var(portfolio, 0.95, 1, simulations=5000, seed=1)
        assert 2500 < result.value_at_risk < 4100

    def test_accepts_stdlib_random(self, portfolio):
        result = calculate_var(portfolio, 0.95, 2, simulations=100, rng=random.Random(3))
        assert result.time_horizon_days == 2
        assert result.to_dict()["timeHorizon"] == "2 day(s)"

    def test_degenerate_portfolio_skips_simulation(self):
        rng = FakeUniform([0.5])
        assert calculate_var(None, 0.95, 1, rng=rng).value_at_risk == 0.0
        assert calculate_var({"cash": 0, "marginUsed": 0, "holdings": []}, 0.95, 1, rng=rng).value_at_risk == 0.0
        assert rng.calls == 0

    def test_no_simulations(self, portfolio):
        assert calculate_var(portfolio, 0.95, 1, simulations=0).value_at_risk == 0.0

    def test_whole_number_float_counts(self, portfolio):
        """Counts given as floats (e.g. read from JSON) run like their integer values."""
        rng = FakeUniform([UNIT_RADIUS_DRAW, 0.0, UNIT_RADIUS_DRAW, 0.5])
        result = calculate_var(portfolio, 0.95, 2.0, simulations=10.0, rng=rng)
        assert rng.calls == 2 * 2 * 10
        assert result.value_at_risk >= 0
        assert result.to_dict()["timeHorizon"] == "2 day(s)"

    def test_fractional_counts_floored(self, portfolio):
        rng = FakeUniform([0.0])
        calculate_var(portfolio, 0.95, 1.9, simulations=3.7, rng=rng)
        assert rng.calls == 2 * 1 * 3

    @pytest.mark.parametrize("simulations", [math.nan, math.inf, "100"])
    def test_unusable_simulation_count(self, portfolio, simulations):
        rng = FakeUniform([0.5])
        result = calculate_var(portfolio, 0.95, 1, simulations=simulations, rng=rng)
        assert result.value_at_risk == 0.0
        assert rng.calls == 0


class TestSectorWeights:
    def test_weights_descending(self):
        weights = calc_sector_weights(
            [{"marketValue": 40000, "sector": "Tech"}, {"marketValue": 60000, "sector": "Finance"}]
        )
        assert list(weights) == ["Finance", "Tech"]
        assert weights["Finance"] == pytest.approx(60.0)
        assert weights["Tech"] == pytest.approx(40.0)

    def test_missing_sector_grouped(self):
        weights = calc_sector_weights([{"marketValue": 100}, {"marketValue": 100, "sector": ""}])
        assert weights == {"Uncategorized": pytest.approx(100.0)}

    def test_no_market_value(self):
        assert calc_sector_weights([{"marketValue": 0}]) == {}
        assert calc_sector_weights(None) == {}

    def test_holding_without_market_value(self):
        weights = calc_sector_weights(
            (Holding(market_value=None, sector="A"), Holding(market_value=10.0, sector="B"))
        )
        assert weights == {"B": pytest.approx(100.0), "A": pytest.approx(0.0)}


class TestClassifyConcentration:
    def test_levels(self):
        assert classify_concentration(60) == ConcentrationLevel.HIGH
        assert classify_concentration(50) == ConcentrationLevel.MODERATE
        assert classify_concentration(31) == ConcentrationLevel.MODERATE
        assert classify_concentration(30) == ConcentrationLevel.DIVERSIFIED


class TestAnalyzeCorrelation:
    """Tests for analyze_correlation."""

    def test_no_assets(self):
        assert analyze_correlation([]) == "No assets to analyze."
        assert analyze_correlation(None) == "No assets to analyze."

    def test_no_market_value(self):
        assert analyze_correlation([{"marketValue": 0}, {"marketValue": 0}]) == "No market value to analyze."

    def test_single_asset(self):
        result = analyze_correlation([{"marketValue": 1000, "sector": "Tech"}])
        assert result == "Portfolio is 100% concentrated in a single asset."

    def test_high_concentration(self):
        result = analyze_correlation(
            [{"marketValue": 40000, "sector": "Tech"}, {"marketValue": 60000, "sector": "Finance"}]
        )
        assert result == "High concentration risk: 60.0% in Finance."

    def test_moderate_concentration(self):
        result = analyze_correlation(
            [
                {"marketValue": 40, "sector": "Tech"},
                {"marketValue": 30, "sector": "Energy"},
                {"marketValue": 30, "sector": "Utilities"},
            ]
        )
        assert result == "Moderate concentration risk: 40.0% in Tech."

    def test_same_sector_holdings_combined(self):
        result = analyze_correlation(
            [{"marketValue": 50, "sector": "Tech"}, {"marketValue": 50, "sector": "Tech"}]
        )
        assert result == "High concentration risk: 100.0% in Tech."

    def test_holding_without_market_value(self):
        result = analyze_correlation(
            (Holding(market_value=None, sector="A"), Holding(market_value=10.0, sector="B"))
        )
        assert result == "High concentration risk: 100.0% in B."

    def test_diversified(self):
        holdings = [{"marketValue": 25, "sector": s} for s in ("A", "B", "C", "D")]
        assert analyze_correlation(holdings) == "Portfolio appears reasonably diversified across sectors."
