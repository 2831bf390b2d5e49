"""
Portfolio Snapshot - 组合快照加载

从 JSON / YAML 文件加载账户快照（现金、融资余额、持仓列表），
并提供内置示例快照用于演示。

快照格式::

    cash: 5000
    marginUsed: 45000          # 或 margin_used
    holdings:
      - ticker: AAPL
        quantity: 150
        marketValue: 28500     # 或 market_value
        costBasis: 22500
        annualDividend: 144
        sector: Technology
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from src.engine.models.portfolio import Holding, Portfolio, coerce_portfolio

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """快照文件读取或格式错误"""
    pass


def load_snapshot(path: str | Path) -> Portfolio:
    """从文件加载组合快照

    .json 文件按 JSON 解析，其他扩展名（.yaml/.yml）按 YAML 解析。

    Args:
        path: 快照文件路径

    Returns:
        Portfolio 实例

    Raises:
        SnapshotError: 文件不存在或无法读取、编码错误、解析失败或快照结构不合法
    """
    path = Path(path)
    if not path.exists():
        raise SnapshotError(f"快照文件不存在: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise SnapshotError(f"快照文件格式错误: {path}: {e}") from e
    except OSError as e:
        raise SnapshotError(f"快照文件读取失败: {path}: {e}") from e

    return parse_snapshot(data)


def parse_snapshot(data: Any) -> Portfolio:
    """将已解析的文档转换为 Portfolio

    Raises:
        SnapshotError: 顶层不是映射、holdings 不是列表或 cash/marginUsed 不是数字
    """
    if not isinstance(data, dict):
        raise SnapshotError("快照顶层必须是映射")

    portfolio = coerce_portfolio(data)
    if portfolio is None:
        raise SnapshotError("快照结构不合法: 需要数字 cash / marginUsed 与 holdings 列表")

    logger.debug(
        f"Loaded snapshot: {len(portfolio.holdings)} holdings, "
        f"cash={portfolio.cash}, margin_used={portfolio.margin_used}"
    )
    return portfolio


def sample_portfolio() -> Portfolio:
    """内置示例快照

    现金 5,000，融资 45,000，五只股息股共市值 84,000。
    NLV = 84,000 + 5,000 - 45,000 = 44,000，杠杆 1.91。
    """
    return Portfolio(
        cash=5000.0,
        margin_used=45000.0,
        holdings=(
            Holding(
                ticker="AAPL",
                quantity=150,
                market_value=28500.0,
                cost_basis=22500.0,
                annual_dividend=144.0,
                sector="Technology",
            ),
            Holding(
                ticker="MSFT",
                quantity=60,
                market_value=25200.0,
                cost_basis=18000.0,
                annual_dividend=180.0,
                sector="Technology",
            ),
            Holding(
                ticker="JNJ",
                quantity=100,
                market_value=15500.0,
                cost_basis=16000.0,
                annual_dividend=496.0,
                sector="Healthcare",
            ),
            Holding(
                ticker="O",
                quantity=200,
                market_value=11000.0,
                cost_basis=12000.0,
                annual_dividend=630.0,
                sector="Real Estate",
            ),
            Holding(
                ticker="XOM",
                quantity=30,
                market_value=3800.0,
                cost_basis=3000.0,
                annual_dividend=114.0,
                sector="Energy",
            ),
        ),
    )
