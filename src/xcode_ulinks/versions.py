"""
点分数字版本号比较（如 `IPHONEOS_DEPLOYMENT_TARGET` 的 `9.0`、`10.3.1`）。
"""

from __future__ import annotations


def parse_version(version: str) -> list[int]:
    """把 `9.0` 解析为 `[9, 0]`；含非数字分量时抛出 `ValueError`。"""
    s = version.strip()
    parts = s.split(".")
    if not s or any(not p.isdigit() for p in parts):
        raise ValueError(f"invalid version: {version!r}")
    return [int(p) for p in parts]


def compare_versions(a: str, b: str) -> int:
    """
    逐段按数值比较两个版本号，较短的一方以 0 补齐。

    返回 -1 / 0 / 1，分别表示 `a < b`、`a == b`、`a > b`。
    """
    pa = parse_version(a)
    pb = parse_version(b)
    width = max(len(pa), len(pb))
    pa += [0] * (width - len(pa))
    pb += [0] * (width - len(pb))
    if pa < pb:
        return -1
    if pa > pb:
        return 1
    return 0
