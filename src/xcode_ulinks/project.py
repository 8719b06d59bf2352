"""
iOS 平台工程文件（`project.pbxproj`）的加载、表格视图与写回。

基于 `pbxproj`（mod-pbxproj）解析与序列化；本模块只负责把它的对象模型
整理成补丁逻辑所需的形状：
- 每张表是 `{id: record, "<id>_comment": label}` 形式的字典。
- 记录里的字符串值以描述文件字面量的形式读写（含路径分隔符时带引号），
  写入时去掉包裹引号交给 `pbxproj` 序列化，避免二次转义。
"""

from __future__ import annotations

import glob
import json
import os
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from pbxproj import XcodeProject
from pbxproj.pbxextensions.ProjectFiles import FileOptions, TreeType

from .literals import quote_if_needed, unquote

FRAMEWORKS_MANIFEST = "frameworks.json"


class DescriptorNotFound(RuntimeError):
    """平台目录下找不到 `*.xcodeproj/project.pbxproj`。"""


def _literal(value: Any) -> Any:
    if isinstance(value, str):
        return quote_if_needed(value)
    return value


class _ObjectView(Mapping):
    """`pbxproj` 对象的只读映射视图。"""

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def __getitem__(self, key: str) -> Any:
        if key not in self._obj.get_keys():
            raise KeyError(key)
        return _literal(getattr(self._obj, key))

    def __iter__(self) -> Iterator[str]:
        return iter(self._obj.get_keys())

    def __len__(self) -> int:
        return len(self._obj.get_keys())


class _BuildSettingsView(_ObjectView, MutableMapping):
    """`buildSettings` 的可写视图；写入直接作用于已加载的工程对象。"""

    def __setitem__(self, key: str, value: Any) -> None:
        if isinstance(value, str):
            value = unquote(value)
        self._obj[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._obj.get_keys():
            raise KeyError(key)
        delattr(self._obj, key)


def ios_platform_path(project_root: str) -> str:
    return os.path.join(project_root, "platforms", "ios")


def find_project_file(platform_path: str) -> str:
    """在平台目录下定位 `project.pbxproj`，多个时取排序后的第一个。"""
    candidates = sorted(glob.glob(os.path.join(platform_path, "*.xcodeproj", "project.pbxproj")))
    if not candidates:
        raise DescriptorNotFound(
            f"{platform_path} does not appear to be an xcode project (no xcode project file)"
        )
    return candidates[0]


def write_project_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


def prune_frameworks_manifest(platform_path: str) -> bool:
    """`frameworks.json` 为空对象时删除它，返回是否删除。"""
    manifest = os.path.join(platform_path, FRAMEWORKS_MANIFEST)
    if not os.path.isfile(manifest):
        return False
    with open(manifest, encoding="utf-8") as f:
        frameworks = json.load(f)
    if frameworks:
        return False
    os.remove(manifest)
    return True


class XcodeProjectModel:
    """已加载工程的可变模型；由调用方独占，补丁完成后写回一次。"""

    def __init__(self, project: XcodeProject, path: str) -> None:
        self._project = project
        self.path = path

    @property
    def platform_path(self) -> str:
        return os.path.dirname(os.path.dirname(self.path))

    def _section(self, isa: str) -> list[Any]:
        return self._project.objects.get_objects_in_section(isa)

    def build_configurations(self) -> dict[str, Any]:
        """`XCBuildConfiguration` 表：`id -> buildSettings 视图`，注释为配置名。"""
        table: dict[str, Any] = {}
        for config in self._section("XCBuildConfiguration"):
            config_id = config.get_id()
            # 缺少 buildSettings 的记录在此处直接抛错。
            table[config_id] = _BuildSettingsView(getattr(config, "buildSettings"))
            table[f"{config_id}_comment"] = getattr(config, "name", config_id)
        return table

    def file_references(self) -> dict[str, Any]:
        """`PBXFileReference` 表：`id -> 只读视图`，注释为文件名。"""
        table: dict[str, Any] = {}
        for ref in self._section("PBXFileReference"):
            ref_id = ref.get_id()
            view = _ObjectView(ref)
            table[ref_id] = view
            label = getattr(ref, "name", None) or getattr(ref, "path", None) or ref_id
            table[f"{ref_id}_comment"] = os.path.basename(label)
        return table

    def add_resource_file(self, file_name: str) -> None:
        """
        在 `Resources` 组（没有时为主组）下新增文件引用。

        标识符分配与组成员关系由 `pbxproj` 负责；不生成构建文件，
        签名权限文件只在签名时读取，不需要拷贝进应用包。
        """
        groups = self._project.get_groups_by_name("Resources")
        parent = groups[0] if groups else None
        self._project.add_file(
            file_name,
            parent=parent,
            tree=TreeType.GROUP,
            force=False,
            file_options=FileOptions(create_build_files=False, ignore_unknown_type=True),
        )

    def serialize(self) -> bytes:
        # `XcodeProject` 的 repr 即完整的 pbxproj 文本（含 UTF8 头）。
        return f"{self._project!r}\n".encode("utf-8")

    def save(self) -> None:
        write_project_file(self.path, self.serialize())
        prune_frameworks_manifest(self.platform_path)


def load_project(platform_path: str) -> XcodeProjectModel:
    """定位并解析平台工程文件。"""
    path = find_project_file(platform_path)
    return XcodeProjectModel(XcodeProject.load(path), path)
