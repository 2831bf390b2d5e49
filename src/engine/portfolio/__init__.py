"""Portfolio-level calculations for stress testing and risk analysis.

This module provides calculations at the portfolio level:
- Stress scenarios (uniform market-value drops)
- Risk metrics (Monte-Carlo VaR, sector concentration)
"""

from src.engine.portfolio.risk_metrics import (
    analyze_correlation,
    box_muller,
    calc_sector_weights,
    calculate_var,
    classify_concentration,
)
from src.engine.portfolio.stress import (
    DEFAULT_STRESS_DROPS,
    run_single_scenario,
    run_stress_scenarios,
    shock_portfolio,
)

__all__ = [
    # Stress
    "DEFAULT_STRESS_DROPS",
    "run_single_scenario",
    "run_stress_scenarios",
    "shock_portfolio",
    # Risk metrics
    "calculate_var",
    "box_muller",
    "calc_sector_weights",
    "classify_concentration",
    "analyze_correlation",
]
