"""Calculation Engine Layer.

This module turns a portfolio snapshot (cash, margin used, holdings) into
margin, risk, dividend and options-hedge analytics. Every function is pure:
no file access, no rendering, no state kept between calls. The only
non-deterministic routine is the Monte-Carlo VaR, whose random source is
injectable.

Architecture:
- models/: Snapshot inputs (Holding, Portfolio) and result value objects

- account/: Account-level calculations
    - metrics: NLV, leverage, maintenance margin, buying power
    - margin: Margin call threshold
    - dividends: Yield on cost, projection, margin interest coverage

- portfolio/: Portfolio-level calculations
    - stress: Uniform market-drop scenarios
    - risk_metrics: Monte-Carlo VaR, sector concentration

- strategy/: Options hedge payoff profiles
"""

# Base types (from models)
from src.engine.models import (
    ConcentrationLevel,
    DividendProjection,
    HedgePayoff,
    HedgeStrategy,
    Holding,
    MarginCallInfo,
    MetricsResult,
    Portfolio,
    StressScenario,
    VaRResult,
)

# ===== Account Level =====
from src.engine.account import (
    calc_yield_on_cost,
    calculate_all_metrics,
    dividend_margin_coverage,
    get_margin_call_threshold,
    margin_payoff_time,
    project_dividends,
)

# ===== Portfolio Level =====
from src.engine.portfolio import (
    analyze_correlation,
    calc_sector_weights,
    calculate_var,
    run_single_scenario,
    run_stress_scenarios,
)

# ===== Strategy =====
from src.engine.strategy import (
    bear_put_spread_payoff,
    cash_secured_put_payoff,
    covered_call_payoff,
    long_put_payoff,
)

__all__ = [
    # Models
    "Holding",
    "Portfolio",
    "MetricsResult",
    "VaRResult",
    "MarginCallInfo",
    "HedgePayoff",
    "DividendProjection",
    "StressScenario",
    "HedgeStrategy",
    "ConcentrationLevel",
    # Account
    "calculate_all_metrics",
    "get_margin_call_threshold",
    "calc_yield_on_cost",
    "project_dividends",
    "dividend_margin_coverage",
    "margin_payoff_time",
    # Portfolio
    "run_single_scenario",
    "run_stress_scenarios",
    "calculate_var",
    "calc_sector_weights",
    "analyze_correlation",
    # Strategy
    "long_put_payoff",
    "bear_put_spread_payoff",
    "cash_secured_put_payoff",
    "covered_call_payoff",
]
