"""Stress scenarios on portfolio market value.

A scenario applies the same relative drop to every holding while cash and
the margin loan stay unchanged, then recomputes the account metrics.
"""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from src.engine.account.metrics import calculate_all_metrics
from src.engine.models.portfolio import Portfolio, coerce_portfolio, portfolio_holdings
from src.engine.models.result import MetricsResult, StressScenario

DEFAULT_STRESS_DROPS = (0.1, 0.2, 0.3, 0.4, 0.5)


def shock_portfolio(portfolio: Portfolio, drop_percent: float) -> Portfolio:
    """Return a copy of the portfolio with every market value scaled by (1 - drop)."""
    stressed = tuple(
        replace(h, market_value=h.market_value * (1 - drop_percent)) for h in portfolio.holdings
    )
    return replace(portfolio, holdings=stressed)


def run_single_scenario(portfolio: Any, drop_percent: float) -> MetricsResult | None:
    """Run a single market-drop scenario.

    Args:
        portfolio: Portfolio or mapping with cash, margin used and holdings.
        drop_percent: Drop as a fraction (0.2 = 20% drop).

    Returns:
        Metrics of the shocked portfolio, or None if the portfolio or its
        holdings are absent. A snapshot whose cash or margin is invalid
        yields the zero-result from the metrics calculator.

    Example:
        # MV=80,000 with a 20% drop -> stressed MV=64,000
    """
    if portfolio_holdings(portfolio) is None:
        return None

    snapshot = coerce_portfolio(portfolio)
    if snapshot is None:
        return MetricsResult.zero()

    return calculate_all_metrics(shock_portfolio(snapshot, drop_percent))


def run_stress_scenarios(
    portfolio: Any,
    drops: Sequence[float] = DEFAULT_STRESS_DROPS,
) -> list[StressScenario]:
    """Run the standard ladder of market-drop scenarios.

    Returns:
        One StressScenario per drop, in the given order.
        Empty list if the portfolio or its holdings are absent.
    """
    scenarios = []
    for drop in drops:
        metrics = run_single_scenario(portfolio, drop)
        if metrics is None:
            return []
        scenarios.append(StressScenario(drop_percent=drop, metrics=metrics))
    return scenarios
