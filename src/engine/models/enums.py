"""Engine layer enumerations.

Centralized location for all enums used in the engine layer.
"""

from enum import Enum


class HedgeStrategy(Enum):
    """Options hedge/income strategies with closed-form payoff profiles."""

    LONG_PUT = "Long Put"
    BEAR_PUT_SPREAD = "Bear Put Spread"
    CASH_SECURED_PUT = "Cash-Secured Put"
    COVERED_CALL = "Covered Call"

    @property
    def description(self) -> str:
        """Fixed one-line description of the strategy."""
        return _HEDGE_DESCRIPTIONS[self]


_HEDGE_DESCRIPTIONS = {
    HedgeStrategy.LONG_PUT: "Profit when the underlying asset's price falls below the breakeven point.",
    HedgeStrategy.BEAR_PUT_SPREAD: "A bearish strategy with limited risk and limited profit potential.",
    HedgeStrategy.CASH_SECURED_PUT: (
        "A neutral to bullish strategy used to acquire stock at a lower price or generate income."
    ),
    HedgeStrategy.COVERED_CALL: (
        "Generate income from owned stock, with upside potential capped at the strike price."
    ),
}


class ConcentrationLevel(Enum):
    """Sector concentration classification."""

    HIGH = "high"  # top sector > 50% of market value
    MODERATE = "moderate"  # top sector > 30%
    DIVERSIFIED = "diversified"
