from __future__ import annotations

import re

# 不需要包裹引号即可写入描述文件的字符集；路径分隔符不在其中。
_BARE_RE = re.compile(r"^[A-Za-z0-9_$.]+$")


def needs_quoting(value: str) -> bool:
    """空串或含有非安全字符（如 `/`、空格）的值必须加引号。"""
    return not _BARE_RE.match(value)


def quote(value: str) -> str:
    """
    将文本包装成带引号的描述文件字面量。

    `MyApp/Resources/MyApp.entitlements` -> `"MyApp/Resources/MyApp.entitlements"`
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def quote_if_needed(value: str) -> str:
    return quote(value) if needs_quoting(value) else value


def is_quoted(value: str) -> bool:
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


def unquote(value: str) -> str:
    """去掉包裹引号并还原转义；未加引号的值原样返回。"""
    if not is_quoted(value):
        return value
    out: list[str] = []
    chars = iter(value[1:-1])
    for ch in chars:
        if ch == "\\":
            out.append(next(chars, "\\"))
        else:
            out.append(ch)
    return "".join(out)
