"""
Configuration Management - 配置管理

加载和管理业务层配置：
- AnalyticsConfig: 组合分析参数配置
- merge_overrides: 配置覆盖合并
"""

from src.business.config.analytics_config import (
    AnalyticsConfig,
    ConfigError,
    DividendConfig,
    HedgeExamplesConfig,
    MarginConfig,
    StressConfig,
    VaRConfig,
)
from src.business.config.config_utils import merge_overrides

__all__ = [
    "AnalyticsConfig",
    "ConfigError",
    "MarginConfig",
    "VaRConfig",
    "DividendConfig",
    "StressConfig",
    "HedgeExamplesConfig",
    "merge_overrides",
]
