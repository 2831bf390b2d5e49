"""Account-level calculations for margin and dividend income.

This module provides calculations at the account level:
- Margin metrics (NLV, leverage, excess liquidity, buying power)
- Margin call threshold
- Dividend income (yield on cost, projection, margin coverage)
"""

from src.engine.account.dividends import (
    calc_yield_on_cost,
    dividend_margin_coverage,
    margin_payoff_time,
    project_dividends,
)
from src.engine.account.margin import calc_threshold_market_value, get_margin_call_threshold
from src.engine.account.metrics import (
    calc_buying_power,
    calc_leverage,
    calc_margin_health,
    calc_net_liquidation_value,
    calculate_all_metrics,
)

__all__ = [
    # Metrics
    "calculate_all_metrics",
    "calc_net_liquidation_value",
    "calc_leverage",
    "calc_margin_health",
    "calc_buying_power",
    # Margin call
    "get_margin_call_threshold",
    "calc_threshold_market_value",
    # Dividends
    "calc_yield_on_cost",
    "project_dividends",
    "dividend_margin_coverage",
    "margin_payoff_time",
]
