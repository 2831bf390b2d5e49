"""
Portfolio Report - 组合分析报告

对一个账户快照运行全部分析，汇总为一份报告：
- 保证金指标（NLV、杠杆、超额流动性、购买力）
- 股息分析（成本收益率、利息覆盖、还款年限、未来股息预测）
- 压力测试（-10% ~ -50% 市值下跌）
- 风险分析（Monte-Carlo VaR、追保阈值、行业集中度）
- 示例对冲策略收益结构

除 VaR 的随机抽样外，报告计算不依赖外部状态。
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from src.business.config.analytics_config import AnalyticsConfig
from src.business.snapshot import SnapshotError
from src.engine.account import (
    calc_yield_on_cost,
    calculate_all_metrics,
    dividend_margin_coverage,
    get_margin_call_threshold,
    margin_payoff_time,
    project_dividends,
)
from src.engine.models import (
    NOT_APPLICABLE,
    ConcentrationLevel,
    DividendProjection,
    HedgePayoff,
    MarginCallInfo,
    MetricsResult,
    Portfolio,
    StressScenario,
    VaRResult,
    coerce_portfolio,
    format_amount,
)
from src.engine.portfolio import (
    analyze_correlation,
    calc_sector_weights,
    calculate_var,
    classify_concentration,
    run_stress_scenarios,
)
from src.engine.portfolio.risk_metrics import UniformSource
from src.engine.strategy import (
    bear_put_spread_payoff,
    cash_secured_put_payoff,
    covered_call_payoff,
    long_put_payoff,
)

logger = logging.getLogger(__name__)


@dataclass
class PortfolioReport:
    """组合分析报告

    数值字段保持原始数字，to_dict() 时统一格式化为两位小数字符串。
    """

    portfolio: Portfolio
    metrics: MetricsResult
    yield_on_cost: float
    coverage_ratio: float  # math.inf 表示无融资利息
    payoff_time: float | str  # "N/A" 表示无法用股息还清
    dividend_projections: list[DividendProjection] = field(default_factory=list)
    stress_scenarios: list[StressScenario] = field(default_factory=list)
    var: VaRResult | None = None
    margin_call: MarginCallInfo = field(default_factory=MarginCallInfo)
    sector_weights: dict[str, float] = field(default_factory=dict)
    concentration: str = ""
    hedges: list[HedgePayoff] = field(default_factory=list)

    @property
    def concentration_level(self) -> ConcentrationLevel | None:
        """最大行业的集中度分级，无市值时为 None"""
        if not self.sector_weights:
            return None
        return classify_concentration(next(iter(self.sector_weights.values())))

    def to_dict(self) -> dict[str, Any]:
        """转换为可 JSON 序列化的字典"""
        level = self.concentration_level
        return {
            "metrics": self.metrics.to_dict(),
            "dividends": {
                "yieldOnCost": format_amount(self.yield_on_cost),
                "coverageRatio": (
                    format_amount(self.coverage_ratio)
                    if math.isfinite(self.coverage_ratio)
                    else NOT_APPLICABLE
                ),
                "payoffTime": (
                    self.payoff_time
                    if isinstance(self.payoff_time, str)
                    else format_amount(self.payoff_time)
                ),
                "projections": [p.to_dict() for p in self.dividend_projections],
            },
            "stressScenarios": [s.to_dict() for s in self.stress_scenarios],
            "risk": {
                "var": self.var.to_dict() if self.var else None,
                "marginCall": self.margin_call.to_dict(),
                "sectorWeights": {
                    sector: format_amount(pct) for sector, pct in self.sector_weights.items()
                },
                "concentrationLevel": level.value if level else None,
                "concentration": self.concentration,
            },
            "hedges": [h.to_dict() for h in self.hedges],
        }


def build_sample_hedges(config: AnalyticsConfig) -> list[HedgePayoff]:
    """按配置计算四种示例对冲策略的收益结构"""
    h = config.hedges
    return [
        long_put_payoff(*h.long_put, contracts=h.contracts),
        bear_put_spread_payoff(*h.bear_put_spread, contracts=h.contracts),
        cash_secured_put_payoff(*h.cash_secured_put, contracts=h.contracts),
        covered_call_payoff(*h.covered_call, contracts=h.contracts),
    ]


def build_portfolio_report(
    portfolio: Any,
    config: AnalyticsConfig | None = None,
    today: date | None = None,
    rng: UniformSource | None = None,
) -> PortfolioReport:
    """对账户快照生成完整分析报告

    Args:
        portfolio: Portfolio 实例或快照字典
        config: 分析配置，默认 AnalyticsConfig.load()
        today: 股息预测的参考日期，默认今天
        rng: VaR 的均匀分布随机源，默认按 config.var.seed 创建 numpy Generator

    Returns:
        PortfolioReport

    Raises:
        SnapshotError: 快照缺失或结构不合法
    """
    snapshot = coerce_portfolio(portfolio)
    if snapshot is None:
        raise SnapshotError("快照结构不合法: 需要数字 cash / marginUsed 与 holdings 列表")

    config = config or AnalyticsConfig.load()
    holdings = snapshot.holdings

    metrics = calculate_all_metrics(
        snapshot,
        initial_margin_req=config.margin.initial_margin_req,
        maint_margin_req=config.margin.maint_margin_req,
    )
    logger.info(
        f"Report: {len(holdings)} holdings, NLV={metrics.net_liquidation_value:.2f}, "
        f"leverage={metrics.leverage:.2f}"
    )

    var = calculate_var(
        snapshot,
        confidence_level=config.var.confidence_level,
        time_horizon_days=config.var.time_horizon_days,
        daily_volatility=config.var.daily_volatility,
        simulations=config.var.simulations,
        rng=rng,
        seed=config.var.seed,
    )

    return PortfolioReport(
        portfolio=snapshot,
        metrics=metrics,
        yield_on_cost=calc_yield_on_cost(holdings),
        coverage_ratio=dividend_margin_coverage(
            holdings, snapshot.margin_used, config.dividends.margin_rate
        ),
        payoff_time=margin_payoff_time(holdings, snapshot.margin_used),
        dividend_projections=project_dividends(
            holdings,
            years=config.dividends.projection_years,
            growth_rate=config.dividends.growth_rate,
            today=today,
        ),
        stress_scenarios=run_stress_scenarios(snapshot, config.stress.drops),
        var=var,
        margin_call=get_margin_call_threshold(snapshot, config.margin.maint_margin_req),
        sector_weights=calc_sector_weights(holdings),
        concentration=analyze_correlation(holdings),
        hedges=build_sample_hedges(config),
    )
