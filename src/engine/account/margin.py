"""Margin call threshold calculations.

Account-level module answering "how far can the market fall before the
account hits its maintenance requirement?".
"""

import logging
from typing import Any

from src.engine.account.metrics import (
    DEFAULT_INITIAL_MARGIN_REQ,
    DEFAULT_MAINT_MARGIN_REQ,
    calculate_all_metrics,
)
from src.engine.models.portfolio import coerce_portfolio
from src.engine.models.result import MarginCallInfo

logger = logging.getLogger(__name__)


def calc_threshold_market_value(margin_loan: float, maint_margin_req: float) -> float | None:
    """Calculate the market value at which excess liquidity reaches zero.

    With equity = MV - loan and requirement = MV x m, excess liquidity is
    zero when MV - loan = MV x m, i.e. MV = loan / (1 - m).

    Returns:
        Threshold market value. Returns None if m >= 1 (no market value
        satisfies the requirement).

    Example:
        >>> calc_threshold_market_value(30000, 0.25)
        40000.0
    """
    if maint_margin_req >= 1:
        return None
    return margin_loan / (1 - maint_margin_req)


def get_margin_call_threshold(
    portfolio: Any,
    maint_margin_req: float = DEFAULT_MAINT_MARGIN_REQ,
) -> MarginCallInfo:
    """Determine the market drop that would trigger a margin call.

    The margin loan is derived from the metrics identity
    (loan = MV + cash - NLV), which reduces to the margin used.

    Args:
        portfolio: Portfolio or mapping with cash, margin used and holdings.
        maint_margin_req: Maintenance margin requirement (default 25%).

    Returns:
        MarginCallInfo with drop percentage and market value drop.
        - Both None ("N/A") if the snapshot is missing, there is no margin
          loan, or there is no market value to fall.
        - Both 0 if the account is already at or past the threshold.

    Example:
        # MV=80,000, cash=10,000, margin=40,000 -> NLV=50,000, loan=40,000
        # Threshold MV = 40,000 / 0.75 = 53,333.33
        # Drop = 26,666.67 (33.33% of MV)
    """
    snapshot = coerce_portfolio(portfolio)
    if snapshot is None:
        return MarginCallInfo()

    metrics = calculate_all_metrics(snapshot, DEFAULT_INITIAL_MARGIN_REQ, maint_margin_req)
    market_value = metrics.market_value
    margin_loan = market_value + snapshot.cash - metrics.net_liquidation_value

    if margin_loan <= 0 or market_value == 0:
        return MarginCallInfo()

    threshold = calc_threshold_market_value(margin_loan, maint_margin_req)
    if threshold is None or market_value <= threshold:
        logger.debug(f"Account at or past margin call threshold: mv={market_value:.2f}")
        return MarginCallInfo(drop_percentage=0.0, market_value_drop=0.0)

    market_value_drop = market_value - threshold
    drop_percentage = market_value_drop / market_value * 100

    return MarginCallInfo(
        drop_percentage=drop_percentage,
        market_value_drop=market_value_drop,
    )
