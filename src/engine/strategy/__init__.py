"""Option hedge strategy module."""

# Models (re-exported for convenience)
from src.engine.models.enums import HedgeStrategy
from src.engine.models.result import HedgePayoff

# Strategy payoffs
from src.engine.strategy.hedges import (
    CONTRACT_MULTIPLIER,
    bear_put_spread_payoff,
    cash_secured_put_payoff,
    covered_call_payoff,
    long_put_payoff,
)

__all__ = [
    # Models (re-exported for convenience)
    "HedgeStrategy",
    "HedgePayoff",
    # Strategies
    "CONTRACT_MULTIPLIER",
    "long_put_payoff",
    "bear_put_spread_payoff",
    "cash_secured_put_payoff",
    "covered_call_payoff",
]
