"""Engine layer data models.

Models:
    Holding: One position in a snapshot
    Portfolio: Cash, margin used and holdings of an account
    MetricsResult: Margin metrics of a snapshot
    VaRResult: Monte-Carlo Value-at-Risk estimate
    MarginCallInfo: Drop that triggers a margin call
    HedgePayoff: Payoff profile of an options strategy
    DividendProjection: Projected dividend income per year
    StressScenario: Metrics after a uniform market drop

Enums:
    HedgeStrategy: Supported options strategies
    ConcentrationLevel: Sector concentration classification
"""

from src.engine.models.enums import ConcentrationLevel, HedgeStrategy
from src.engine.models.formatting import (
    NOT_APPLICABLE,
    format_amount,
    format_number,
    format_optional_amount,
    round_half_away,
)
from src.engine.models.portfolio import (
    DEFAULT_SECTOR,
    Holding,
    Portfolio,
    coerce_holdings,
    coerce_portfolio,
    is_number,
    portfolio_holdings,
    total_market_value,
)
from src.engine.models.result import (
    DividendProjection,
    HedgePayoff,
    MarginCallInfo,
    MetricsResult,
    StressScenario,
    VaRResult,
)

__all__ = [
    # Enums
    "ConcentrationLevel",
    "HedgeStrategy",
    # Formatting
    "NOT_APPLICABLE",
    "format_amount",
    "format_number",
    "format_optional_amount",
    "round_half_away",
    # Snapshot
    "DEFAULT_SECTOR",
    "Holding",
    "Portfolio",
    "coerce_holdings",
    "coerce_portfolio",
    "is_number",
    "portfolio_holdings",
    "total_market_value",
    # Results
    "DividendProjection",
    "HedgePayoff",
    "MarginCallInfo",
    "MetricsResult",
    "StressScenario",
    "VaRResult",
]
