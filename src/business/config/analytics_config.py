"""
Analytics Configuration - 分析参数配置管理

加载和管理组合分析的参数：保证金比例、VaR 模拟参数、股息预测参数、
压力测试跌幅以及示例对冲策略。

配置来源优先级: 调用方 overrides > YAML 文件 > dataclass 默认值
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.business.config.config_utils import merge_overrides

logger = logging.getLogger(__name__)

# 默认配置文件路径
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "analytics.yaml"


class ConfigError(Exception):
    """配置相关错误"""
    pass


@dataclass
class MarginConfig:
    """保证金比例配置（统一比例，非逐品种）"""

    initial_margin_req: float = 0.5
    maint_margin_req: float = 0.25


@dataclass
class VaRConfig:
    """Monte-Carlo VaR 配置"""

    confidence_level: float = 0.95
    time_horizon_days: int = 1
    daily_volatility: float = 0.02
    simulations: int = 1000
    seed: int | None = None


@dataclass
class DividendConfig:
    """股息分析配置"""

    projection_years: int = 5
    growth_rate: float = 0.05
    margin_rate: float = 0.06


@dataclass
class StressConfig:
    """压力测试配置"""

    drops: tuple[float, ...] = (0.1, 0.2, 0.3, 0.4, 0.5)


@dataclass
class HedgeExamplesConfig:
    """示例对冲策略参数（每股价格，1 张合约）"""

    long_put: tuple[float, float] = (170.0, 5.50)  # strike, premium
    bear_put_spread: tuple[float, float, float] = (220.0, 210.0, 2.50)  # long, short, net premium
    cash_secured_put: tuple[float, float] = (190.0, 4.20)  # strike, premium
    covered_call: tuple[float, float, float] = (180.0, 3.80, 150.0)  # strike, premium, cost basis
    contracts: int = 1


@dataclass
class AnalyticsConfig:
    """组合分析配置"""

    margin: MarginConfig = field(default_factory=MarginConfig)
    var: VaRConfig = field(default_factory=VaRConfig)
    dividends: DividendConfig = field(default_factory=DividendConfig)
    stress: StressConfig = field(default_factory=StressConfig)
    hedges: HedgeExamplesConfig = field(default_factory=HedgeExamplesConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AnalyticsConfig":
        """从 YAML 文件加载配置

        Raises:
            ConfigError: 文件不存在、YAML 格式错误或顶层不是映射
        """
        return cls.from_dict(_read_yaml(Path(path)))

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AnalyticsConfig":
        """从字典创建配置，缺失字段使用默认值"""
        config = cls()
        if not data:
            return config

        try:
            if "margin" in data:
                m = data["margin"]
                config.margin = MarginConfig(
                    initial_margin_req=float(m.get("initial_margin_req", 0.5)),
                    maint_margin_req=float(m.get("maint_margin_req", 0.25)),
                )

            if "var" in data:
                v = data["var"]
                seed = v.get("seed")
                config.var = VaRConfig(
                    confidence_level=float(v.get("confidence_level", 0.95)),
                    time_horizon_days=int(v.get("time_horizon_days", 1)),
                    daily_volatility=float(v.get("daily_volatility", 0.02)),
                    simulations=int(v.get("simulations", 1000)),
                    seed=int(seed) if seed is not None else None,
                )

            if "dividends" in data:
                d = data["dividends"]
                config.dividends = DividendConfig(
                    projection_years=int(d.get("projection_years", 5)),
                    growth_rate=float(d.get("growth_rate", 0.05)),
                    margin_rate=float(d.get("margin_rate", 0.06)),
                )

            if "stress" in data:
                s = data["stress"]
                config.stress = StressConfig(
                    drops=tuple(float(x) for x in s.get("drops", [0.1, 0.2, 0.3, 0.4, 0.5])),
                )

            if "hedges" in data:
                h = data["hedges"]
                default = HedgeExamplesConfig()
                config.hedges = HedgeExamplesConfig(
                    long_put=_float_tuple(h.get("long_put"), default.long_put),
                    bear_put_spread=_float_tuple(h.get("bear_put_spread"), default.bear_put_spread),
                    cash_secured_put=_float_tuple(h.get("cash_secured_put"), default.cash_secured_put),
                    covered_call=_float_tuple(h.get("covered_call"), default.covered_call),
                    contracts=int(h.get("contracts", default.contracts)),
                )
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"配置字段格式错误: {e}") from e

        return config

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> "AnalyticsConfig":
        """加载配置

        Args:
            path: 配置文件路径，默认使用 config/analytics.yaml（不存在则使用默认值）
            overrides: 覆盖字典，递归合并到文件配置之上

        Returns:
            AnalyticsConfig 实例
        """
        config_file = Path(path) if path else DEFAULT_CONFIG_PATH
        if path or config_file.exists():
            data = _read_yaml(config_file)
        else:
            logger.debug(f"配置文件不存在，使用默认值: {config_file}")
            data = {}

        if overrides:
            data = merge_overrides(data, overrides)
        return cls.from_dict(data)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"配置文件不存在: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"配置文件格式错误: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"配置文件顶层必须是映射: {path}")
    return data


def _float_tuple(value: list | None, default: tuple[float, ...]) -> tuple[float, ...]:
    if value is None:
        return default
    if len(value) != len(default):
        raise ValueError(f"期望 {len(default)} 个参数，实际 {len(value)} 个: {value}")
    return tuple(float(x) for x in value)
