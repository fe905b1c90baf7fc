"""Find the Unity editor, its IL2CPP tools and the Android NDK on disk.

Resolution happens in two phases. ``probe_toolchain`` looks everything up and
records what it found, leaving absent paths as None. ``ProbeResult.require``
then turns missing mandatory paths into a ConfigurationError and returns the
immutable ToolchainLocation used by the rest of the run.
"""
from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass
from pathlib import Path

from il2cpp_build.config import SearchRoots, is_windows_host
from il2cpp_build.errors import ConfigurationError, InvalidVersion, NotFound
from il2cpp_build.profiles import ToolchainProfile, profile_for
from il2cpp_build.versions import Version, parse_version

LATEST = "latest"

BASELIB_DIRS = {
    "x86": "PlaybackEngines/windowsstandalonesupport/Variations/win32_nondevelopment_il2cpp",
    "x64": "PlaybackEngines/windowsstandalonesupport/Variations/win64_nondevelopment_il2cpp",
    "armv7": "PlaybackEngines/AndroidPlayer/Variations/il2cpp/Release/StaticLibs/armeabi-v7a",
    "arm64": "PlaybackEngines/AndroidPlayer/Variations/il2cpp/Release/StaticLibs/arm64-v8a",
}


def exe_name(name: str) -> str:
    return f"{name}.exe" if is_windows_host() else name


def is_explicit_path(selector: str) -> bool:
    return "/" in selector or "\\" in selector


def natural_key(name: str) -> list:
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", name)]


def resolve_install(search_root: Path, selector: str, what: str) -> Path:
    """Return the installation directory selected by ``selector``.

    A selector containing a path separator is used verbatim. Anything else is
    a glob matched against the immediate sub-directories of ``search_root``;
    the last match in natural-sort order wins.
    """
    if is_explicit_path(selector):
        return Path(selector)

    pattern = "*" if selector in ("", LATEST) else selector
    if not search_root.is_dir():
        raise NotFound(what, search_root, pattern)

    matches = [entry for entry in search_root.iterdir() if entry.is_dir() and fnmatch.fnmatch(entry.name, pattern)]
    if not matches:
        raise NotFound(what, search_root, pattern)
    matches.sort(key=lambda entry: natural_key(entry.name))
    return matches[-1]


def unity_version(unity_root: Path) -> Version:
    """Read the editor version from the install directory name.

    Explicit paths such as ``/opt/2019.4.40f1/unity`` carry the version one
    level up, so the parent name is tried before giving up.
    """
    try:
        return parse_version(unity_root.name)
    except InvalidVersion:
        if unity_root.parent.name:
            try:
                return parse_version(unity_root.parent.name)
            except InvalidVersion:
                pass
        raise


def existing(path: Path) -> Path | None:
    return path if path.exists() else None


@dataclass(frozen=True)
class ToolchainLocation:
    unity_root: Path
    version: Version
    data_dir: Path
    csc: Path
    il2cpp: Path
    linker: Path
    runtime_lib_dir: Path
    mscorlib: Path
    engine_lib: Path
    windows_support: Path | None = None
    android_player: Path | None = None
    ndk_root: Path | None = None
    baselib_dirs: tuple[tuple[str, Path], ...] = ()

    @property
    def android_available(self) -> bool:
        return self.ndk_root is not None and self.android_player is not None

    def baselib_dir(self, target_name: str) -> Path | None:
        for name, path in self.baselib_dirs:
            if name == target_name:
                return path
        return None


@dataclass(frozen=True)
class ProbeResult:
    unity_root: Path
    version: Version
    data_dir: Path
    expected: dict[str, Path]
    found: dict[str, Path | None]
    windows_support: Path | None
    android_player: Path | None
    ndk_root: Path | None
    baselib_dirs: dict[str, Path]

    def missing(self) -> list[str]:
        return [f"{name} ({self.expected[name]})" for name, path in self.found.items() if path is None]

    def require(self) -> ToolchainLocation:
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Unity {self.version} at {self.unity_root} is missing required components: " + ", ".join(missing)
            )
        return ToolchainLocation(
            unity_root=self.unity_root,
            version=self.version,
            data_dir=self.data_dir,
            csc=self.found["csc"],
            il2cpp=self.found["il2cpp"],
            linker=self.found["linker"],
            runtime_lib_dir=self.found["mscorlib"].parent,
            mscorlib=self.found["mscorlib"],
            engine_lib=self.found["engine_lib"],
            windows_support=self.windows_support,
            android_player=self.android_player,
            ndk_root=self.ndk_root,
            baselib_dirs=tuple(self.baselib_dirs.items()),
        )


def probe_install(search_root: Path, selector: str, what: str) -> Path | None:
    try:
        path = resolve_install(search_root, selector, what)
    except NotFound:
        return None
    return path if path.is_dir() else None


def probe_toolchain(roots: SearchRoots, unity_selector: str, ndk_selector: str) -> tuple[ProbeResult, ToolchainProfile]:
    """Look up every path the build may need.

    Only the Unity root and its version are mandatory at this stage; every
    other lookup records None when the path is absent.
    """
    unity_root = resolve_install(roots.unity, unity_selector, "Unity editor")
    if not unity_root.is_dir():
        raise NotFound("Unity editor", unity_root)
    version = unity_version(unity_root)
    profile = profile_for(version)

    data_dir = unity_root / "Editor" / "Data"
    tools_dir = data_dir.joinpath(*profile.tools_layout.split("/"))
    runtime_lib_dir = data_dir / "MonoBleedingEdge" / "lib" / "mono" / profile.runtime_layout

    expected = {
        "csc": data_dir / "Tools" / "Roslyn" / exe_name("csc"),
        "il2cpp": tools_dir / exe_name("il2cpp"),
        "linker": tools_dir / exe_name("UnityLinker"),
        "mscorlib": runtime_lib_dir / "mscorlib.dll",
        "engine_lib": data_dir / "Managed" / "UnityEngine.dll",
    }

    baselib_dirs = {}
    for target_name, relative in BASELIB_DIRS.items():
        found = existing(data_dir.joinpath(*relative.split("/")))
        if found is not None:
            baselib_dirs[target_name] = found

    probe = ProbeResult(
        unity_root=unity_root,
        version=version,
        data_dir=data_dir,
        expected=expected,
        found={name: existing(path) for name, path in expected.items()},
        windows_support=existing(data_dir / "PlaybackEngines" / "windowsstandalonesupport"),
        android_player=existing(data_dir / "PlaybackEngines" / "AndroidPlayer"),
        ndk_root=probe_install(roots.ndk, ndk_selector, "Android NDK"),
        baselib_dirs=baselib_dirs,
    )
    return probe, profile


def locate_toolchain(roots: SearchRoots, unity_selector: str, ndk_selector: str) -> tuple[ToolchainLocation, ToolchainProfile]:
    probe, profile = probe_toolchain(roots, unity_selector, ndk_selector)
    return probe.require(), profile
