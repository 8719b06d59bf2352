"""
构建配置（`XCBuildConfiguration`）的补丁逻辑。

对每一个非注释的构建配置：
- 无条件写入 `CODE_SIGN_ENTITLEMENTS`（带引号的相对路径）。
- 当 `IPHONEOS_DEPLOYMENT_TARGET` 缺失或低于目标版本时，将其提升到目标版本。
"""

from __future__ import annotations

from .comments import strip_comments
from .console import log_step
from .literals import quote, unquote
from .versions import compare_versions, parse_version

IOS_DEPLOYMENT_TARGET = "9.0"
DEPLOYMENT_TARGET_KEY = "IPHONEOS_DEPLOYMENT_TARGET"
ENTITLEMENTS_KEY = "CODE_SIGN_ENTITLEMENTS"


def _needs_raise(current: str | None, min_version: str) -> bool | None:
    """
    部署目标缺失或严格低于目标版本时需要提升。

    无法按数值比较的值（如 `$(RECOMMENDED_IPHONEOS_DEPLOYMENT_TARGET)` 这类构建变量）
    返回 `None`，由调用方保持原值。
    """
    if current is None:
        return True
    try:
        return compare_versions(unquote(current), min_version) < 0
    except ValueError:
        return None


def patch_build_configurations(
    project,
    *,
    min_version: str = IOS_DEPLOYMENT_TARGET,
    entitlements_path: str,
    verbose: bool = False,
) -> bool:
    """修改工程内全部构建配置，返回是否有部署目标被提升。"""
    if not entitlements_path:
        raise ValueError("entitlements path must not be empty")
    parse_version(min_version)

    configurations = strip_comments(project.build_configurations())
    entitlements_value = quote(entitlements_path)
    updated = False

    for config_id, settings in configurations.items():
        settings[ENTITLEMENTS_KEY] = entitlements_value

        current = settings.get(DEPLOYMENT_TARGET_KEY)
        needs_raise = _needs_raise(current, min_version)
        if needs_raise is None:
            log_step(
                f"{config_id}: {DEPLOYMENT_TARGET_KEY} {current} is not a numeric version, "
                "left untouched"
            )
        elif needs_raise:
            settings[DEPLOYMENT_TARGET_KEY] = min_version
            updated = True
            if verbose:
                before = current if current is not None else "(unset)"
                log_step(f"{config_id}: {DEPLOYMENT_TARGET_KEY} {before} -> {min_version}")

    if updated:
        log_step(f"IOS project now has deployment target set as: {min_version}")
    log_step(f"IOS project Code Sign Entitlements now set to: {entitlements_path}")
    return updated
