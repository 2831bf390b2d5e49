"""
Business Layer CLI - 业务层命令行工具

提供命令：
- report: 组合分析报告
"""

from src.business.cli.main import cli

__all__ = ["cli"]
