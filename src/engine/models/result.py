"""Result models for analysis outputs.

Results keep numeric values. ``to_dict()`` is the export boundary: it renders
amounts as fixed 2-decimal strings under the keys consumers already use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.engine.models.enums import HedgeStrategy
from src.engine.models.formatting import (
    format_amount,
    format_horizon,
    format_number,
    format_optional_amount,
    format_percent,
)


@dataclass(frozen=True)
class MetricsResult:
    """Account margin metrics for one snapshot.

    Attributes:
        net_liquidation_value: Market value + cash - margin used.
            Exposed a second time as ``total_equity``.
        market_value: Total market value of holdings.
        leverage: Market value / NLV, 0 when NLV <= 0.
        maintenance_margin: Market value x maintenance requirement.
        excess_liquidity: NLV - maintenance margin.
        buying_power: Excess liquidity / initial requirement, floored at 0.
        margin_health: Excess liquidity as % of NLV, 0 when NLV <= 0.
    """

    net_liquidation_value: float = 0.0
    market_value: float = 0.0
    leverage: float = 0.0
    maintenance_margin: float = 0.0
    excess_liquidity: float = 0.0
    buying_power: float = 0.0
    margin_health: float = 0.0

    @property
    def total_equity(self) -> float:
        """Total equity; the same quantity as net liquidation value."""
        return self.net_liquidation_value

    @classmethod
    def zero(cls) -> MetricsResult:
        """Result returned for missing or malformed snapshots."""
        return cls()

    def to_dict(self) -> dict[str, str]:
        return {
            "netLiquidationValue": format_amount(self.net_liquidation_value),
            "totalEquity": format_amount(self.total_equity),
            "marketValue": format_amount(self.market_value),
            "leverage": format_amount(self.leverage),
            "maintenanceMargin": format_amount(self.maintenance_margin),
            "excessLiquidity": format_amount(self.excess_liquidity),
            "buyingPower": format_amount(self.buying_power),
            "marginHealth": format_amount(self.margin_health),
        }


@dataclass(frozen=True)
class VaRResult:
    """Monte-Carlo Value-at-Risk estimate.

    Attributes:
        value_at_risk: Loss not exceeded at the confidence level (>= 0).
        confidence_level: Confidence as a fraction (e.g. 0.95).
        time_horizon_days: Horizon of the simulated paths in days.
    """

    value_at_risk: float
    confidence_level: float
    time_horizon_days: int

    def to_dict(self) -> dict[str, str]:
        return {
            "VaR": format_amount(self.value_at_risk),
            "confidenceLevel": format_percent(self.confidence_level),
            "timeHorizon": format_horizon(self.time_horizon_days),
        }


@dataclass(frozen=True)
class MarginCallInfo:
    """Market drop that would bring excess liquidity to zero.

    Both fields are None when a drop can never trigger a margin call.
    """

    drop_percentage: float | None = None
    market_value_drop: float | None = None

    @property
    def is_applicable(self) -> bool:
        return self.drop_percentage is not None

    def to_dict(self) -> dict[str, str]:
        return {
            "dropPercentage": format_optional_amount(self.drop_percentage),
            "marketValueDrop": format_optional_amount(self.market_value_drop),
        }


@dataclass(frozen=True)
class HedgePayoff:
    """Payoff profile of an options strategy (all amounts for the full position)."""

    strategy: HedgeStrategy
    max_loss: float
    max_profit: float
    breakeven: float

    @property
    def description(self) -> str:
        return self.strategy.description

    def to_dict(self) -> dict[str, str]:
        return {
            "strategy": self.strategy.value,
            "maxLoss": format_amount(self.max_loss),
            "maxProfit": format_amount(self.max_profit),
            "breakeven": format_amount(self.breakeven),
            "description": self.description,
        }


@dataclass(frozen=True)
class DividendProjection:
    """Projected dividend income for one calendar year."""

    year: int
    income: float

    def to_dict(self) -> dict[str, Any]:
        return {"year": self.year, "income": self.income}


@dataclass(frozen=True)
class StressScenario:
    """Metrics after a uniform market-value drop.

    Attributes:
        drop_percent: Applied drop as a fraction (0.2 = 20%).
        metrics: Metrics of the shocked snapshot.
    """

    drop_percent: float
    metrics: MetricsResult

    @property
    def label(self) -> str:
        return f"-{format_number(self.drop_percent * 100)}%"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.label, "dropPercent": self.drop_percent, **self.metrics.to_dict()}
