"""Portfolio snapshot data models.

This module defines the input structures for all engine calculations.
A snapshot is treated as immutable: calculations build shocked copies
with ``dataclasses.replace`` and never write back into the caller's data.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SECTOR = "Uncategorized"
DEFAULT_TICKER = "N/A"

_NUMERIC_FIELDS = ("market_value", "cost_basis", "annual_dividend", "quantity")


def is_number(value: Any) -> bool:
    """Check for a real number (bool is not treated as numeric)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first non-None value among alternative keys."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _pick_number(data: Mapping[str, Any], *keys: str) -> float:
    value = _pick(data, *keys)
    return value if is_number(value) else 0.0


@dataclass(frozen=True)
class Holding:
    """One position in the portfolio.

    Attributes:
        market_value: Current value of the position.
        cost_basis: Original cost of the position.
        annual_dividend: Annual dividend cash amount paid by the position.
        sector: Free-text sector label used for concentration analysis.
        ticker: Ticker symbol (display only).
        quantity: Number of shares (display only).
    """

    market_value: float = 0.0
    cost_basis: float = 0.0
    annual_dividend: float = 0.0
    sector: str = DEFAULT_SECTOR
    ticker: str = DEFAULT_TICKER
    quantity: float = 0.0

    def __post_init__(self):
        # Missing or non-numeric amounts count as 0 everywhere downstream
        for name in _NUMERIC_FIELDS:
            if not is_number(getattr(self, name)):
                object.__setattr__(self, name, 0.0)
        if not self.sector:
            object.__setattr__(self, "sector", DEFAULT_SECTOR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Holding:
        """Create a holding from a mapping.

        Accepts both camelCase (``marketValue``) and snake_case
        (``market_value``) keys. Missing numeric fields default to 0,
        missing text fields to "N/A" / "Uncategorized".
        """
        return cls(
            market_value=_pick_number(data, "marketValue", "market_value"),
            cost_basis=_pick_number(data, "costBasis", "cost_basis"),
            annual_dividend=_pick_number(data, "annualDividend", "annual_dividend"),
            sector=str(_pick(data, "sector", default=DEFAULT_SECTOR) or DEFAULT_SECTOR),
            ticker=str(_pick(data, "ticker", "symbol", default=DEFAULT_TICKER)),
            quantity=_pick_number(data, "quantity"),
        )


@dataclass(frozen=True)
class Portfolio:
    """Snapshot of a leveraged brokerage account.

    Attributes:
        cash: Cash balance (may be negative).
        margin_used: Outstanding margin loan.
        holdings: Positions; order is irrelevant and duplicates are allowed.
    """

    cash: float = 0.0
    margin_used: float = 0.0
    holdings: tuple[Holding, ...] = field(default_factory=tuple)

    @property
    def market_value(self) -> float:
        """Total market value of all holdings."""
        return total_market_value(self.holdings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Portfolio:
        """Create a portfolio from a mapping (camelCase or snake_case keys)."""
        holdings = data.get("holdings") or []
        return cls(
            cash=_pick(data, "cash", default=0.0),
            margin_used=_pick(data, "marginUsed", "margin_used", default=0.0),
            holdings=tuple(_as_holding(h) for h in holdings),
        )


def total_market_value(holdings: Any) -> float:
    """Sum market value over holdings, treating missing values as 0.

    Args:
        holdings: Sequence of Holding objects or holding mappings.

    Returns:
        Total market value, 0.0 for empty or absent holdings.
    """
    if not holdings:
        return 0.0
    values = (_as_holding(h).market_value for h in holdings)
    return sum((v for v in values if is_number(v)), 0.0)


def _as_holding(item: Any) -> Holding:
    if isinstance(item, Holding):
        return item
    if isinstance(item, Mapping):
        return Holding.from_dict(item)
    # Unknown entries carry no value
    return Holding()


def coerce_holdings(holdings: Any) -> tuple[Holding, ...] | None:
    """Normalize a holdings sequence into Holding objects.

    Returns:
        Tuple of holdings, or None if ``holdings`` is absent or not a list/tuple.
    """
    if holdings is None or not isinstance(holdings, (list, tuple)):
        return None
    return tuple(_as_holding(h) for h in holdings)


def coerce_portfolio(portfolio: Any) -> Portfolio | None:
    """Validate a snapshot and return it as a Portfolio.

    A snapshot is well-formed only if ``holdings`` is a list/tuple and both
    ``cash`` and ``margin_used`` are numeric. Malformed snapshots are
    reported as None rather than raising.

    Args:
        portfolio: Portfolio instance, mapping, or None.

    Returns:
        Portfolio, or None if the snapshot is missing or malformed.
    """
    if portfolio is None:
        return None

    if isinstance(portfolio, Portfolio):
        cash, margin_used, holdings = portfolio.cash, portfolio.margin_used, portfolio.holdings
    elif isinstance(portfolio, Mapping):
        cash = portfolio.get("cash")
        margin_used = _pick(portfolio, "marginUsed", "margin_used")
        holdings = portfolio.get("holdings")
    else:
        logger.debug(f"Unsupported portfolio type: {type(portfolio).__name__}")
        return None

    normalized = coerce_holdings(holdings)
    if normalized is None or not is_number(cash) or not is_number(margin_used):
        logger.debug("Malformed portfolio snapshot: holdings/cash/margin_used invalid")
        return None

    return Portfolio(cash=cash, margin_used=margin_used, holdings=normalized)


def portfolio_holdings(portfolio: Any) -> tuple[Holding, ...] | None:
    """Extract holdings from a snapshot without validating cash or margin.

    Returns:
        Tuple of holdings, or None if the snapshot or its holdings are absent.
    """
    if portfolio is None:
        return None
    if isinstance(portfolio, Mapping):
        return coerce_holdings(portfolio.get("holdings"))
    return coerce_holdings(getattr(portfolio, "holdings", None))
