from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional


class VersionInfo(NamedTuple):
    version: Optional[str]
    commit: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _package_version() -> Optional[str]:
    try:
        return importlib.metadata.version("tedit")
    except importlib.metadata.PackageNotFoundError:
        return None


def get_version_info() -> VersionInfo:
    # Commit info is only available when running from a git checkout
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "HEAD"], cwd=here)
    dirty = False
    if commit:
        status = _run_git(["status", "--porcelain"], cwd=here)
        dirty = bool(status)
    return VersionInfo(version=_package_version(), commit=commit, dirty=dirty)


def get_version_string() -> str:
    info = get_version_info()
    version = info.version or "unknown"
    if not info.commit:
        return version
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes
    return f"{version} ({info.commit[:7]}{dirty_suffix})"
