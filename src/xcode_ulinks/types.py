"""
宿主构建流程与补丁流程共享的轻量类型定义。
"""

from dataclasses import dataclass

from .build_settings import IOS_DEPLOYMENT_TARGET


@dataclass(frozen=True)
class PipelineContext:
    """描述一次补丁调用所需的全部输入，替代宿主的全局上下文对象。"""

    # Cordova 工程根目录（包含 `config.xml` 与 `platforms/ios`）。
    project_root: str
    # 为空时从 `config.xml` 读取。
    project_name: str = ""
    min_version: str = IOS_DEPLOYMENT_TARGET
    dry_run: bool = False
    verbose: bool = False
