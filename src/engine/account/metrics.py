"""Account margin metrics - unified entry point.

This module turns a portfolio snapshot into the core margin figures
(net liquidation value, leverage, maintenance margin, excess liquidity,
buying power, margin health). Requirements are flat fractions of market
value, not instrument-specific broker rules.

Example:
    >>> from src.engine.account.metrics import calculate_all_metrics
    >>> metrics = calculate_all_metrics(
    ...     {"cash": 10000, "marginUsed": 40000, "holdings": [{"marketValue": 80000}]}
    ... )
    >>> metrics.to_dict()["leverage"]
    '1.60'
"""

from __future__ import annotations

import logging
import math
from typing import Any

from src.engine.models.portfolio import coerce_portfolio, total_market_value
from src.engine.models.result import MetricsResult

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_MARGIN_REQ = 0.5  # Reg T
DEFAULT_MAINT_MARGIN_REQ = 0.25


def calc_net_liquidation_value(market_value: float, cash: float, margin_used: float) -> float:
    """Calculate net liquidation value (NLV).

    Formula: NLV = market value + cash - margin used

    Physical meaning:
    - Account value if every position were closed right now
    - Negative NLV means the margin loan exceeds assets
    """
    return market_value + cash - margin_used


def calc_leverage(market_value: float, net_liquidation_value: float) -> float:
    """Calculate gross leverage.

    Formula: Leverage = market value / NLV

    Returns:
        Leverage ratio. Returns 0 when NLV <= 0 or the ratio is not finite,
        so an underwater account never reports negative or infinite leverage.
    """
    if net_liquidation_value <= 0:
        return 0.0
    leverage = market_value / net_liquidation_value
    return leverage if math.isfinite(leverage) else 0.0


def calc_margin_health(excess_liquidity: float, net_liquidation_value: float) -> float:
    """Calculate margin health as excess liquidity in percent of NLV.

    Returns:
        Margin health in percent (60.0 = 60%). Returns 0 when NLV <= 0.
    """
    if net_liquidation_value <= 0:
        return 0.0
    return excess_liquidity / net_liquidation_value * 100


def calc_buying_power(excess_liquidity: float, initial_margin_req: float) -> float:
    """Calculate buying power from excess liquidity.

    Formula: Buying Power = max(0, excess liquidity / initial requirement)

    Example:
        >>> calc_buying_power(30000, 0.5)
        60000.0
    """
    if initial_margin_req <= 0:
        return 0.0
    return max(0.0, excess_liquidity / initial_margin_req)


def calculate_all_metrics(
    portfolio: Any,
    initial_margin_req: float = DEFAULT_INITIAL_MARGIN_REQ,
    maint_margin_req: float = DEFAULT_MAINT_MARGIN_REQ,
) -> MetricsResult:
    """Calculate all margin metrics of a portfolio snapshot.

    Args:
        portfolio: Portfolio or mapping with cash, margin used and holdings.
        initial_margin_req: Initial margin requirement (default 50%, Reg T).
        maint_margin_req: Maintenance margin requirement (default 25%).

    Returns:
        MetricsResult. Missing or malformed snapshots yield the zero-result
        (every field 0) instead of an error.

    Example:
        # cash=10,000, margin=40,000, holdings 50,000 + 30,000
        # NLV = 80,000 + 10,000 - 40,000 = 50,000
        # Maintenance = 80,000 x 0.25 = 20,000, excess = 30,000
        # Buying power = 30,000 / 0.5 = 60,000, leverage = 1.6
    """
    snapshot = coerce_portfolio(portfolio)
    if snapshot is None:
        return MetricsResult.zero()

    market_value = total_market_value(snapshot.holdings)
    nlv = calc_net_liquidation_value(market_value, snapshot.cash, snapshot.margin_used)

    maintenance_margin = market_value * maint_margin_req
    excess_liquidity = nlv - maintenance_margin

    logger.debug(
        f"Metrics: market_value={market_value:.2f}, nlv={nlv:.2f}, "
        f"excess_liquidity={excess_liquidity:.2f}"
    )

    return MetricsResult(
        net_liquidation_value=nlv,
        market_value=market_value,
        leverage=calc_leverage(market_value, nlv),
        maintenance_margin=maintenance_margin,
        excess_liquidity=excess_liquidity,
        buying_power=calc_buying_power(excess_liquidity, initial_margin_req),
        margin_health=calc_margin_health(excess_liquidity, nlv),
    )
