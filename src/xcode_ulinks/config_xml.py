"""
从 Cordova 工程根目录的 `config.xml` 读取工程名（`<widget><name>`）。
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET


def _local_name(tag: str) -> str:
    # 去掉 `{http://www.w3.org/ns/widgets}` 这类命名空间前缀。
    return tag.rsplit("}", 1)[-1]


def read_project_name(project_root: str) -> str:
    """解析 `config.xml` 并返回工程名；文件缺失或名称为空时抛出异常。"""
    path = os.path.join(project_root, "config.xml")
    if not os.path.isfile(path):
        raise RuntimeError(f"config.xml not found: {path}")

    root = ET.parse(path).getroot()
    for child in root:
        if _local_name(child.tag) == "name":
            name = (child.text or "").strip()
            if name:
                return name
            break
    raise RuntimeError(f"Failed to read project name from {path}")
