"""
流程诊断输出。
"""


def log_step(message: str) -> None:
    """输出带工具前缀的流程提示。"""
    print(f"[xcode-ulinks] {message}")
