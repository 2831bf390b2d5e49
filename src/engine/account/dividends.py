"""Dividend income calculations.

Account-level module relating dividend income to cost basis and to the
interest carried on the margin loan.
"""

import math
from datetime import date
from typing import Any

from src.engine.models.formatting import NOT_APPLICABLE, round_half_away
from src.engine.models.portfolio import coerce_holdings, is_number
from src.engine.models.result import DividendProjection

DEFAULT_PROJECTION_YEARS = 5
DEFAULT_DIVIDEND_GROWTH = 0.05
DEFAULT_MARGIN_RATE = 0.06


def _total_annual_dividend(holdings: Any) -> float:
    normalized = coerce_holdings(holdings) or ()
    return sum(h.annual_dividend for h in normalized)


def calc_yield_on_cost(holdings: Any) -> float:
    """Calculate dividend yield on original cost.

    Formula: YoC = Σ annual dividend / Σ cost basis × 100

    Args:
        holdings: Sequence of holdings.

    Returns:
        Yield on cost in percent (4.0 = 4%).
        Returns 0 if holdings are empty or total cost basis <= 0.

    Example:
        >>> calc_yield_on_cost([{"costBasis": 10000, "annualDividend": 400}])
        4.0
    """
    normalized = coerce_holdings(holdings)
    if not normalized:
        return 0.0

    total_cost = sum(h.cost_basis for h in normalized)
    if total_cost <= 0:
        return 0.0

    return _total_annual_dividend(normalized) / total_cost * 100


def project_dividends(
    holdings: Any,
    years: int = DEFAULT_PROJECTION_YEARS,
    growth_rate: float = DEFAULT_DIVIDEND_GROWTH,
    today: date | None = None,
) -> list[DividendProjection]:
    """Project dividend income over the coming calendar years.

    Formula: income(i) = D0 × (1 + g)^i, i = 1..years

    D0 is the current total annual dividend; every year compounds from
    that same base.

    Args:
        holdings: Sequence of holdings.
        years: Number of years to project.
        growth_rate: Annual dividend growth rate (0.05 = 5%).
        today: Reference date; year i is labelled today.year + i.
            Defaults to the current date.

    Returns:
        List of DividendProjection, income rounded to 2 decimals.
        Empty list if holdings are absent.
    """
    normalized = coerce_holdings(holdings)
    if normalized is None:
        return []

    base_year = (today or date.today()).year
    initial_dividend = _total_annual_dividend(normalized)

    return [
        DividendProjection(
            year=base_year + i,
            income=round_half_away(initial_dividend * math.pow(1 + growth_rate, i)),
        )
        for i in range(1, years + 1)
    ]


def dividend_margin_coverage(
    holdings: Any,
    margin_used: float,
    margin_rate: float = DEFAULT_MARGIN_RATE,
) -> float:
    """Calculate how many times dividends cover margin interest.

    Formula: Coverage = Σ annual dividend / (margin used × margin rate)

    Physical meaning:
    - Coverage > 1: dividends pay the full interest bill
    - Coverage < 1: interest is partly funded from elsewhere

    Returns:
        Coverage ratio. Returns 0 if holdings are absent and infinity if
        there is no interest to cover.

    Example:
        >>> dividend_margin_coverage([{"annualDividend": 1000}], 20000, 0.05)
        1.0
    """
    normalized = coerce_holdings(holdings)
    if normalized is None:
        return 0.0

    annual_interest = margin_used * margin_rate if is_number(margin_used) else 0.0
    if annual_interest <= 0:
        return math.inf

    return _total_annual_dividend(normalized) / annual_interest


def margin_payoff_time(holdings: Any, margin_used: float) -> float | str:
    """Estimate years needed to repay the margin loan from dividends alone.

    Formula: Years = margin used / Σ annual dividend

    Returns:
        Payoff time in years, or "N/A" if holdings are absent, there is no
        dividend income or no margin loan, or the result is not finite.

    Example:
        >>> margin_payoff_time([{"annualDividend": 1000}], 25000)
        25.0
    """
    normalized = coerce_holdings(holdings)
    if normalized is None or not is_number(margin_used):
        return NOT_APPLICABLE

    total_dividend = _total_annual_dividend(normalized)
    if total_dividend <= 0 or margin_used <= 0:
        return NOT_APPLICABLE

    years = margin_used / total_dividend
    return years if math.isfinite(years) else NOT_APPLICABLE
