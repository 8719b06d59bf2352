"""
`xcode-ulinks` 的命令行入口模块。

收集工程根目录与补丁参数，构造 `PipelineContext` 并调用 `enable_capability`。
"""

import argparse
import json
import os
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from .build_settings import IOS_DEPLOYMENT_TARGET
from .capability import enable_capability
from .console import log_step
from .project import FRAMEWORKS_MANIFEST, DescriptorNotFound
from .types import PipelineContext
from .versions import parse_version


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `xcode-ulinks` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="xcode-ulinks",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Enable Associated Domains (Universal Links) in a generated iOS project.\n"
            "Raises IPHONEOS_DEPLOYMENT_TARGET, sets CODE_SIGN_ENTITLEMENTS and "
            "registers the .entitlements file in project.pbxproj."
        ),
    )
    p.add_argument(
        "-r",
        "--project-root",
        default="",
        help="Project root containing config.xml and platforms/ios (default: current directory)",
    )
    p.add_argument(
        "-n",
        "--project-name",
        default="",
        help="Project name (default: <name> from config.xml)",
    )
    p.add_argument(
        "--min-version",
        default=IOS_DEPLOYMENT_TARGET,
        help=f"Minimum IPHONEOS_DEPLOYMENT_TARGET (default: {IOS_DEPLOYMENT_TARGET})",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Apply changes in memory only, do not write project.pbxproj",
    )
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、校验输入并执行补丁流程。"""
    ns = build_parser().parse_args(argv)

    project_root = os.path.abspath(os.path.expanduser(ns.project_root or os.getcwd()))
    if not os.path.isdir(project_root):
        raise SystemExit(f"Error: project root not found: {project_root}")

    min_version = ns.min_version.strip()
    try:
        parse_version(min_version)
    except ValueError as e:
        raise SystemExit(f"Error: invalid --min-version: {e}") from e

    context = PipelineContext(
        project_root=project_root,
        project_name=(ns.project_name or "").strip(),
        min_version=min_version,
        dry_run=bool(ns.dry_run),
        verbose=bool(ns.verbose),
    )

    log_step(f"Using project root: {project_root}")
    try:
        enable_capability(context)
    except DescriptorNotFound as e:
        raise SystemExit(
            f"Error: {e}\n"
            "Hint: run after the ios platform has been added (platforms/ios).\n"
        ) from e
    except RuntimeError as e:
        hint = "" if context.project_name else "Hint: pass the project name via -n/--project-name.\n"
        raise SystemExit(f"Error: {e}\n{hint}") from e
    except ET.ParseError as e:
        raise SystemExit(f"Error: invalid config.xml: {e}") from e
    except json.JSONDecodeError as e:
        # 此时 project.pbxproj 已写回，仅 frameworks.json 未处理。
        raise SystemExit(
            f"Error: invalid {FRAMEWORKS_MANIFEST}: {e}\n"
            "Note: project.pbxproj has already been written.\n"
        ) from e
    except ValueError as e:
        raise SystemExit(f"Error: {e}") from e
    return 0
