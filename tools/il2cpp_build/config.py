from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

UNITY_ROOT_FILE = "unity-root.txt"
NDK_ROOT_FILE = "ndk-root.txt"

UNITY_ROOT_ENV = "IL2CPP_UNITY_ROOT"
NDK_ROOT_ENV = "IL2CPP_NDK_ROOT"


def is_windows_host() -> bool:
    return sys.platform.startswith("win")


def default_unity_root() -> Path:
    if is_windows_host():
        return Path(r"C:\Program Files\Unity\Hub\Editor")
    return Path.home() / "Unity" / "Hub" / "Editor"


def default_ndk_root() -> Path:
    if is_windows_host():
        local_app_data = os.environ.get("LOCALAPPDATA", "")
        if local_app_data:
            return Path(local_app_data) / "Android" / "Sdk" / "ndk"
    return Path.home() / "Android" / "Sdk" / "ndk"


def read_search_root(path: Path) -> Path | None:
    """Read a single-path config file. The last non-blank line wins."""
    if not path.is_file():
        return None
    lines = [line.strip() for line in path.read_text(encoding="utf-8", errors="ignore").splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return None
    return Path(os.path.expandvars(os.path.expanduser(lines[-1])))


def search_root(config_dir: Path, file_name: str, env_name: str, fallback: Path) -> Path:
    env_value = os.environ.get(env_name)
    if env_value:
        return Path(env_value)
    configured = read_search_root(config_dir / file_name)
    if configured is not None:
        return configured
    return fallback


@dataclass(frozen=True)
class SearchRoots:
    unity: Path
    ndk: Path


def load_search_roots(config_dir: Path) -> SearchRoots:
    return SearchRoots(
        unity=search_root(config_dir, UNITY_ROOT_FILE, UNITY_ROOT_ENV, default_unity_root()),
        ndk=search_root(config_dir, NDK_ROOT_FILE, NDK_ROOT_ENV, default_ndk_root()),
    )
