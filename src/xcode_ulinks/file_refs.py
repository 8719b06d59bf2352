"""
确保 `.entitlements` 文件出现在 `PBXFileReference` 表中。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .comments import strip_comments
from .console import log_step


def has_file_reference(file_references: Mapping[str, Any], file_name: str) -> bool:
    """
    扫描文件引用表，判断是否已有记录的 `path` 包含 `file_name`。

    采用子串匹配而非相等比较：不同工程生成器写入的路径前缀不一致。
    """
    for entry in strip_comments(file_references).values():
        path = entry.get("path")
        if path and file_name in path:
            return True
    return False


def ensure_file_reference(project, file_name: str) -> bool:
    """文件引用缺失时添加，返回是否发生了插入。"""
    if has_file_reference(project.file_references(), file_name):
        log_step("Entitlements file is in reference section.")
        return False

    log_step("Entitlements file is not in references section, adding it")
    project.add_resource_file(file_name)
    return True
