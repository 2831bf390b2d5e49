"""
CLI Commands - 命令行子命令
"""

from src.business.cli.commands.report import report

__all__ = ["report"]
