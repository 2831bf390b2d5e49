"""Dashboard module for CLI report visualization.

This module provides a terminal-based rendering of the portfolio
report: margin, dividends, risk, stress scenarios and hedges.
"""

from src.business.cli.dashboard.renderer import ReportRenderer

__all__ = ["ReportRenderer"]
