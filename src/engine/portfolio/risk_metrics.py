"""Portfolio risk metrics calculations.

Portfolio-level module for Monte-Carlo Value at Risk and sector
concentration on a portfolio snapshot.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Protocol

import numpy as np

from src.engine.models.enums import ConcentrationLevel
from src.engine.models.formatting import format_amount
from src.engine.models.portfolio import (
    DEFAULT_SECTOR,
    coerce_holdings,
    is_number,
    portfolio_holdings,
    total_market_value,
)
from src.engine.models.result import VaRResult

logger = logging.getLogger(__name__)

DEFAULT_DAILY_VOLATILITY = 0.02
DEFAULT_SIMULATIONS = 1000

HIGH_CONCENTRATION_PCT = 50.0
MODERATE_CONCENTRATION_PCT = 30.0


class UniformSource(Protocol):
    """Anything with ``random()`` returning floats in [0, 1).

    ``numpy.random.Generator`` and ``random.Random`` both qualify.
    """

    def random(self) -> float: ...


def box_muller(u1: float, u2: float) -> float:
    """Transform two uniforms into one standard normal variate.

    Formula: z = sqrt(-2 × ln(u1)) × cos(2π × u2)

    Args:
        u1: Uniform draw in (0, 1].
        u2: Uniform draw in [0, 1).
    """
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def simulate_losses(
    market_value: float,
    time_horizon_days: int,
    daily_volatility: float,
    simulations: int,
    rng: UniformSource,
) -> np.ndarray:
    """Simulate end-of-horizon losses for a single-factor normal return model.

    Each path starts from the current market value and applies one
    multiplicative shock (1 + z × σ) per day, with fresh uniform draws per
    day and path.

    Returns:
        Array of losses (market value - simulated value), one per path,
        in simulation order.
    """
    losses = np.empty(simulations, dtype=float)
    for i in range(simulations):
        sim_value = market_value
        for _ in range(time_horizon_days):
            # 1 - draw maps [0, 1) onto (0, 1] so ln(u1) is always defined
            u1 = 1.0 - rng.random()
            u2 = rng.random()
            sim_value *= 1 + box_muller(u1, u2) * daily_volatility
        losses[i] = market_value - sim_value
    return losses


def calc_var_index(simulations: int, confidence_level: float) -> int:
    """Index of the VaR quantile in the ascending loss array.

    floor(simulations × confidence), clamped to a valid index.

    Example:
        >>> calc_var_index(1000, 0.95)
        950
    """
    scaled = simulations * confidence_level
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return simulations - 1 if scaled > 0 else 0
    index = math.floor(scaled)
    return min(max(index, 0), simulations - 1)


def _as_count(value: Any) -> int:
    """Whole number of paths or days, floored; 0 for non-numeric or non-finite input."""
    if not is_number(value) or not math.isfinite(value):
        return 0
    return math.floor(value)


def calculate_var(
    portfolio: Any,
    confidence_level: float,
    time_horizon_days: int,
    daily_volatility: float = DEFAULT_DAILY_VOLATILITY,
    simulations: int = DEFAULT_SIMULATIONS,
    rng: UniformSource | None = None,
    seed: int | None = None,
) -> VaRResult:
    """Calculate Value at Risk (VaR) with a Monte-Carlo simulation.

    Physical meaning:
    - Loss that is not exceeded with the given confidence over the horizon
    - VaR of $5,000 at 95% / 1 day means 95% chance the daily loss stays
      below $5,000

    Args:
        portfolio: Portfolio or mapping with holdings.
        confidence_level: Confidence level (e.g. 0.95).
        time_horizon_days: Horizon in days.
        daily_volatility: Assumed daily market volatility (default 2%).
        simulations: Number of simulated paths.
        rng: Uniform random source. Defaults to a numpy Generator.
        seed: Seed for the default numpy Generator (ignored if rng is given).

    Returns:
        VaRResult with VaR >= 0. Returns 0 without simulating when the
        portfolio is absent or has no market value.

    Example:
        # 1000 paths at 95% -> VaR is the 951st smallest loss (index 950)
    """
    holdings = portfolio_holdings(portfolio)
    market_value = total_market_value(holdings)
    path_count = _as_count(simulations)
    day_count = _as_count(time_horizon_days)

    if holdings is None or market_value == 0 or path_count < 1:
        return VaRResult(
            value_at_risk=0.0,
            confidence_level=confidence_level,
            time_horizon_days=time_horizon_days,
        )

    if rng is None:
        rng = np.random.default_rng(seed)

    losses = np.sort(
        simulate_losses(market_value, day_count, daily_volatility, path_count, rng)
    )
    value_at_risk = float(losses[calc_var_index(path_count, confidence_level)])

    logger.debug(
        f"VaR: {path_count} paths x {day_count} day(s), "
        f"confidence={confidence_level}, loss={value_at_risk:.2f}"
    )

    return VaRResult(
        value_at_risk=value_at_risk if value_at_risk > 0 else 0.0,
        confidence_level=confidence_level,
        time_horizon_days=time_horizon_days,
    )


def calc_sector_weights(holdings: Any) -> dict[str, float]:
    """Calculate each sector's share of total market value.

    Holdings without a sector are grouped under "Uncategorized".

    Returns:
        Mapping sector -> weight in percent, largest first (ties keep
        first-seen order). Empty if there is no market value.

    Example:
        # Tech 40,000 + Finance 60,000
        # -> {"Finance": 60.0, "Tech": 40.0}
    """
    normalized = coerce_holdings(holdings)
    total = total_market_value(normalized)
    if not normalized or total == 0:
        return {}

    sectors: dict[str, float] = {}
    for h in normalized:
        sector = h.sector or DEFAULT_SECTOR
        sectors[sector] = sectors.get(sector, 0.0) + h.market_value

    ranked = sorted(sectors.items(), key=lambda item: item[1], reverse=True)
    return {sector: value / total * 100 for sector, value in ranked}


def classify_concentration(top_sector_pct: float) -> ConcentrationLevel:
    """Classify the weight of the largest sector.

    - > 50%: HIGH
    - > 30%: MODERATE
    - otherwise: DIVERSIFIED
    """
    if top_sector_pct > HIGH_CONCENTRATION_PCT:
        return ConcentrationLevel.HIGH
    if top_sector_pct > MODERATE_CONCENTRATION_PCT:
        return ConcentrationLevel.MODERATE
    return ConcentrationLevel.DIVERSIFIED


def analyze_correlation(holdings: Any) -> str:
    """Describe portfolio concentration by sector.

    A sector-level proxy for correlation: holdings in the same sector are
    assumed to move together.

    Args:
        holdings: Sequence of holdings.

    Returns:
        Human-readable assessment:
        - "No assets to analyze." for empty/absent holdings
        - "No market value to analyze." when total market value is 0
        - single-asset message for fewer than 2 holdings
        - high / moderate concentration message naming the top sector
        - diversified message otherwise
    """
    normalized = coerce_holdings(holdings)
    if not normalized:
        return "No assets to analyze."
    if total_market_value(normalized) == 0:
        return "No market value to analyze."
    if len(normalized) < 2:
        return "Portfolio is 100% concentrated in a single asset."

    weights = calc_sector_weights(normalized)
    top_sector, top_pct = next(iter(weights.items()))
    level = classify_concentration(top_pct)

    if level is ConcentrationLevel.HIGH:
        return f"High concentration risk: {format_amount(top_pct, 1)}% in {top_sector}."
    if level is ConcentrationLevel.MODERATE:
        return f"Moderate concentration risk: {format_amount(top_pct, 1)}% in {top_sector}."
    return "Portfolio appears reasonably diversified across sectors."
