"""Version table for the Unity toolchain.

Every version-dependent choice the orchestrator makes lives in VERSION_TABLE.
It is evaluated once per run by ``profile_for`` and the resulting
``ToolchainProfile`` is handed to the argument builder, so no other module
compares versions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from il2cpp_build.versions import Version, at_least


@dataclass(frozen=True)
class Gate:
    feature: str
    threshold: Version
    before: Any
    since: Any


VERSION_TABLE: tuple[Gate, ...] = (
    Gate("tools_layout", Version(2019, 3, 0), "il2cpp/build", "il2cpp/build/deploy/net471"),
    Gate(
        "linker_flags",
        Version(2019, 3, 0),
        (),
        ("--dotnetruntime=il2cpp", "--dotnetprofile={profile}", "--rule-set=Minimal"),
    ),
    Gate("profile_flags", Version(2020, 1, 0), (), ("--dotnetprofile={profile}",)),
    Gate("uses_baselib", Version(2020, 1, 0), False, True),
    Gate("runtime_layout", Version(2021, 2, 0), "unityaot", "unityaot-win32"),
)


@dataclass(frozen=True)
class ToolchainProfile:
    version: Version
    tools_layout: str
    runtime_layout: str
    linker_flags: tuple[str, ...]
    profile_flags: tuple[str, ...]
    uses_baselib: bool


def profile_for(version: Version, table: tuple[Gate, ...] = VERSION_TABLE) -> ToolchainProfile:
    features = {}
    for gate in table:
        features[gate.feature] = gate.since if at_least(version, gate.threshold) else gate.before

    profile = features["runtime_layout"]
    return ToolchainProfile(
        version=version,
        tools_layout=features["tools_layout"],
        runtime_layout=profile,
        linker_flags=tuple(flag.format(profile=profile) for flag in features["linker_flags"]),
        profile_flags=tuple(flag.format(profile=profile) for flag in features["profile_flags"]),
        uses_baselib=features["uses_baselib"],
    )
