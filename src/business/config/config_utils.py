"""
Config Utilities - 配置工具函数

配置模块共享的工具函数。
"""

from typing import Any


def merge_overrides(
    base: dict[str, Any],
    overrides: dict[str, Any],
) -> dict[str, Any]:
    """将覆盖项深合并到 YAML 配置字典上

    典型用法是命令行选项覆盖配置文件，例如 ``--seed``::

        merge_overrides(data, {"var": {"seed": seed}})

    规则：
    - 两边都是 dict 的键递归合并
    - 覆盖值为 None 表示命令行未指定，保留原值
    - 其余情况以覆盖值为准

    Returns:
        新字典，base 与 overrides 均不被修改
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_overrides(current, value)
        else:
            merged[key] = value
    return merged
