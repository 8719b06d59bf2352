#!/usr/bin/env python3
"""
Source-checkout entrypoint.

Allows running the tool without installing it:
  python3 xcode_ulinks.py -r path/to/cordova/project
"""

import os
import sys

# `src/` 加入 sys.path，未安装时也可直接运行。
_HERE = os.path.dirname(os.path.abspath(__file__))
_SRC = os.path.join(_HERE, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

# 被当作 `xcode_ulinks` 导入时表现为包，避免遮蔽 `src/xcode_ulinks/`。
__path__ = [os.path.join(_SRC, "xcode_ulinks")]


def main(argv: list[str] | None = None) -> int:
    from xcode_ulinks.cli import main as _main

    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
