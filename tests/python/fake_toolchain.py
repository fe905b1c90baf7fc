from __future__ import annotations

from pathlib import Path

from il2cpp_build.errors import StepFailed
from il2cpp_build.locate import BASELIB_DIRS, exe_name
from il2cpp_build.profiles import profile_for
from il2cpp_build.versions import parse_version


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def make_unity(editors_root: Path, version: str, android: bool = True, baselib: bool = True, skip: tuple = ()) -> Path:
    """Lay out the parts of a Unity editor install the build looks for."""
    profile = profile_for(parse_version(version))
    root = editors_root / version
    data = root / "Editor" / "Data"
    tools = data.joinpath(*profile.tools_layout.split("/"))

    files = {
        "csc": data / "Tools" / "Roslyn" / exe_name("csc"),
        "il2cpp": tools / exe_name("il2cpp"),
        "linker": tools / exe_name("UnityLinker"),
        "mscorlib": data / "MonoBleedingEdge" / "lib" / "mono" / profile.runtime_layout / "mscorlib.dll",
        "engine_lib": data / "Managed" / "UnityEngine.dll",
    }
    for name, path in files.items():
        if name not in skip:
            touch(path)

    (data / "PlaybackEngines" / "windowsstandalonesupport").mkdir(parents=True, exist_ok=True)
    if android:
        (data / "PlaybackEngines" / "AndroidPlayer").mkdir(parents=True, exist_ok=True)
    if baselib:
        for target_name, relative in BASELIB_DIRS.items():
            if target_name in ("armv7", "arm64") and not android:
                continue
            data.joinpath(*relative.split("/")).mkdir(parents=True, exist_ok=True)
    return root


def make_ndk(ndk_root: Path, name: str = "21.4.7075529") -> Path:
    ndk = ndk_root / name
    (ndk / "sysroot" / "usr" / "include").mkdir(parents=True, exist_ok=True)
    (ndk / "sources" / "cxx-stl" / "llvm-libc++" / "include").mkdir(parents=True, exist_ok=True)
    return ndk


class RecordingRunner:
    """Stands in for ProcessRunner; records every command and can fail on demand."""

    def __init__(self, fail_on: tuple[str, str] | None = None, exit_code: int = 1):
        self.calls: list[tuple[str, str, list[str]]] = []
        self.fail_on = fail_on
        self.exit_code = exit_code

    def run(self, step: str, identifier: str, command: list[str]) -> None:
        self.calls.append((step, identifier, command))
        if self.fail_on == (step, identifier):
            raise StepFailed(step, identifier, self.exit_code)

    def steps(self) -> list[str]:
        return [step for step, _, _ in self.calls]
