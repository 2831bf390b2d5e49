"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。
"""

import click

from src.business.cli.commands.report import report


@click.group()
@click.version_option(version="0.1.0", prog_name="margin-tracker")
def cli() -> None:
    """融资组合分析工具 - 业务层命令行工具

    提供保证金、股息、压力测试、VaR 与对冲策略分析。
    """
    pass


# 注册子命令
cli.add_command(report)


if __name__ == "__main__":
    cli()
