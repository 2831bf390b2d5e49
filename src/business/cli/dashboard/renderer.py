"""Report renderer for CLI.

Renders the portfolio report with multiple panels:
- Margin (NLV, leverage, excess liquidity, buying power, margin call)
- Dividends (yield on cost, interest coverage, payoff time, projection)
- Risk (VaR, sector weights, concentration)
- Stress Scenarios Table
- Hedge Strategies Table
"""

from datetime import datetime

from src.business.cli.dashboard.components import (
    concentration_icon,
    health_bar,
    panel,
    side_by_side,
    table,
)
from src.business.report import PortfolioReport
from src.engine.models import DividendProjection, MarginCallInfo, MetricsResult, format_amount

PANEL_WIDTH = 46

STRESS_COLUMNS = [
    ("Scenario", 10),
    ("Market Value", 15),
    ("NLV", 15),
    ("Leverage", 10),
    ("Excess Liq.", 15),
    ("Buying Power", 15),
    ("Health%", 10),
]

HEDGE_COLUMNS = [
    ("Strategy", 20),
    ("Max Loss", 15),
    ("Max Profit", 15),
    ("Breakeven", 12),
]


class ReportRenderer:
    """Portfolio report renderer for terminal output."""

    def render(self, report: PortfolioReport) -> str:
        """Render complete report.

        Args:
            report: PortfolioReport from build_portfolio_report

        Returns:
            Formatted report string
        """
        lines = []

        # Title
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        holdings = len(report.portfolio.holdings)
        lines.append(f"{'═' * 94}")
        lines.append(f"  组合分析报告  |  {timestamp}  |  持仓: {holdings}")
        lines.append(f"{'═' * 94}")
        lines.append("")

        # Row 1: Margin + Dividends
        margin_panel = self._render_margin_panel(report.metrics, report.margin_call)
        dividend_panel = self._render_dividend_panel(report)
        lines.extend(side_by_side(margin_panel, dividend_panel, gap=2))
        lines.append("")

        # Row 2: Risk + Projection
        risk_panel = self._render_risk_panel(report)
        projection_panel = self._render_projection_panel(report.dividend_projections)
        lines.extend(side_by_side(risk_panel, projection_panel, gap=2))
        lines.append("")

        # Row 3: Stress scenarios
        if report.stress_scenarios:
            lines.extend(self._render_stress_table(report))
            lines.append("")

        # Row 4: Hedge strategies
        if report.hedges:
            lines.extend(self._render_hedge_table(report))
            lines.append("")

        lines.append(f"{'─' * 94}")
        lines.append(f"  {concentration_icon(report.concentration_level)} {report.concentration}")
        lines.append(f"{'═' * 94}")

        return "\n".join(lines)

    def _render_margin_panel(self, metrics: MetricsResult, margin_call: MarginCallInfo) -> list[str]:
        """Render Margin panel.

        Margin health drives the bar: 100% means no maintenance
        requirement is used, 0% means a margin call.
        """
        rows = [
            f"{name:17}: {value:>14}"
            for name, value in [
                ("Net Liquidation", format_amount(metrics.net_liquidation_value)),
                ("Market Value", format_amount(metrics.market_value)),
                ("Leverage", f"{format_amount(metrics.leverage)}x"),
                ("Maint. Margin", format_amount(metrics.maintenance_margin)),
                ("Excess Liquidity", format_amount(metrics.excess_liquidity)),
                ("Buying Power", format_amount(metrics.buying_power)),
            ]
        ]
        bar = health_bar(metrics.margin_health)
        rows.append(f"{'Margin Health':17}: {format_amount(metrics.margin_health):>9}% {bar}")

        drop = margin_call.to_dict()["dropPercentage"]
        if margin_call.is_applicable:
            drop += "%"
        rows.append(f"{'Margin Call Drop':17}: {drop:>14}")
        return panel("保证金 Margin", rows, PANEL_WIDTH)

    def _render_dividend_panel(self, report: PortfolioReport) -> list[str]:
        """Render Dividend panel, padded to the margin panel's height."""
        dividends = report.to_dict()["dividends"]
        payoff = dividends["payoffTime"]
        if not isinstance(report.payoff_time, str):
            payoff += " yrs"
        rows = [
            f"{'Yield on Cost':17}: {dividends['yieldOnCost'] + '%':>14}",
            f"{'Interest Coverage':17}: {dividends['coverageRatio'] + 'x':>14}",
            f"{'Margin Payoff':17}: {payoff:>14}",
        ]
        return panel("股息 Dividends", rows, PANEL_WIDTH, height=10)

    def _render_risk_panel(self, report: PortfolioReport) -> list[str]:
        """Render Risk panel with VaR and the top five sectors."""
        if report.var is not None:
            var = report.var.to_dict()
            rows = [f"VaR {var['confidenceLevel']} / {var['timeHorizon']}: {var['VaR']}"]
        else:
            rows = ["VaR: -"]

        if not report.sector_weights:
            rows.append("无市值")
        for sector, pct in list(report.sector_weights.items())[:5]:
            rows.append(f"{sector[:16]:16} {format_amount(pct, 1):>5}% {health_bar(pct)}")
        return panel("风险 Risk", rows, PANEL_WIDTH)

    def _render_projection_panel(self, projections: list[DividendProjection]) -> list[str]:
        rows = [f"{p.year}: {format_amount(p.income):>14}" for p in projections] or ["无数据"]
        return panel("股息预测 Projection", rows, PANEL_WIDTH)

    def _render_stress_table(self, report: PortfolioReport) -> list[str]:
        """Render Stress Scenarios table, one row per market drop."""
        rows = []
        for scenario in report.stress_scenarios:
            m = scenario.metrics
            rows.append([
                scenario.label,
                format_amount(m.market_value),
                format_amount(m.net_liquidation_value),
                format_amount(m.leverage),
                format_amount(m.excess_liquidity),
                format_amount(m.buying_power),
                format_amount(m.margin_health),
            ])
        return table("压力测试 Stress Scenarios", STRESS_COLUMNS, rows)

    def _render_hedge_table(self, report: PortfolioReport) -> list[str]:
        """Render Hedge Strategies table followed by strategy descriptions."""
        rows = [
            [
                payoff.strategy.value,
                format_amount(payoff.max_loss),
                format_amount(payoff.max_profit),
                format_amount(payoff.breakeven),
            ]
            for payoff in report.hedges
        ]
        lines = table("对冲策略 Hedge Strategies", HEDGE_COLUMNS, rows)
        for payoff in report.hedges:
            lines.append(f"  • {payoff.strategy.value}: {payoff.description}")
        return lines
