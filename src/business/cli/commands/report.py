"""
Report Command - 组合分析报告

对账户快照运行完整分析并输出报告，包括：
- 保证金指标（NLV、杠杆、超额流动性、购买力、追保阈值）
- 股息分析（成本收益率、利息覆盖倍数、还款年限、未来股息预测）
- 压力测试（-10% ~ -50%）
- 风险分析（Monte-Carlo VaR、行业集中度）
- 示例对冲策略收益结构
"""

import json
import logging
import sys
from typing import Optional

import click

from src.business.cli.dashboard import ReportRenderer
from src.business.config.analytics_config import AnalyticsConfig
from src.business.report import build_portfolio_report
from src.business.snapshot import load_snapshot, sample_portfolio

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--snapshot",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="账户快照文件（JSON 或 YAML），默认使用内置示例快照",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="分析配置文件路径，默认 config/analytics.yaml",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="VaR 模拟随机种子（覆盖配置文件）",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="显示详细日志",
)
def report(
    snapshot: Optional[str],
    config_path: Optional[str],
    seed: Optional[int],
    output: str,
    verbose: bool,
) -> None:
    """组合分析报告

    计算保证金指标、股息分析、压力测试、VaR 与示例对冲策略。

    \b
    示例：
      # 使用内置示例快照
      margin-tracker report

      # 分析自己的快照，固定随机种子
      margin-tracker report -s portfolio.yaml --seed 42

      # 输出 JSON
      margin-tracker report -s portfolio.json -o json
    """
    # 配置日志
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = AnalyticsConfig.load(config_path, overrides={"var": {"seed": seed}})

        if snapshot:
            portfolio = load_snapshot(snapshot)
        else:
            # 使用示例数据
            portfolio = sample_portfolio()

        result = build_portfolio_report(portfolio, config=config)

        if output == "json":
            click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            click.echo(ReportRenderer().render(result))

    except Exception as e:
        logger.exception("生成报告出错")
        click.echo(f"❌ 错误: {e}", err=True)
        sys.exit(1)
