"""
工程描述文件（`project.pbxproj`）表格中“注释条目”的过滤工具。

解析后的每个以标识符为键的记录旁，都有一个共享派生键 `<id>_comment` 的伪条目，
保存人类可读的标签；遍历数据记录前必须先把它们剔除。
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

COMMENT_KEY = re.compile(r"_comment$")


def is_comment_key(key: str) -> bool:
    """判断键是否为注释伪条目。"""
    return bool(COMMENT_KEY.search(key))


def strip_comments(table: Mapping[str, Any]) -> dict[str, Any]:
    """返回去掉全部注释条目后的新映射，不修改输入。"""
    return {key: value for key, value in table.items() if not is_comment_key(key)}
