"""
为 iOS 工程启用 Associated Domains（Universal Links）能力。

流程：
1) 加载 `platforms/ios/*.xcodeproj/project.pbxproj`。
2) 修改全部构建配置：部署目标至少为目标版本，写入签名权限文件路径。
3) 确保 `.entitlements` 文件在 `PBXFileReference` 表中。
4) 写回工程文件（dry-run 时跳过）。
"""

from __future__ import annotations

import posixpath

from .build_settings import patch_build_configurations
from .config_xml import read_project_name
from .console import log_step
from .file_refs import ensure_file_reference
from .project import ios_platform_path, load_project
from .types import PipelineContext


def resolve_project_name(context: PipelineContext) -> str:
    return context.project_name or read_project_name(context.project_root)


def entitlements_relative_path(project_name: str) -> str:
    """`MyApp` -> `MyApp/Resources/MyApp.entitlements`"""
    return posixpath.join(project_name, "Resources", f"{project_name}.entitlements")


def enable_capability(context: PipelineContext) -> None:
    """宿主构建流程的唯一入口：加载、两遍补丁、写回。"""
    project = load_project(ios_platform_path(context.project_root))
    if context.verbose:
        log_step(f"Loaded project file: {project.path}")

    entitlements_path = entitlements_relative_path(resolve_project_name(context))

    patch_build_configurations(
        project,
        min_version=context.min_version,
        entitlements_path=entitlements_path,
        verbose=context.verbose,
    )
    ensure_file_reference(project, posixpath.basename(entitlements_path))

    if context.dry_run:
        log_step("Dry-run mode enabled (project file not written)")
        return
    project.save()
