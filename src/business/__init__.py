"""
Business Layer - 业务模块层

融资组合分析系统的业务逻辑层，包含：
- config: 配置管理
- snapshot: 账户快照加载
- report: 组合分析报告
- cli: 命令行工具
"""
