from __future__ import annotations

from dataclasses import dataclass

WINDOWS_DESKTOP = "WindowsDesktop"
ANDROID = "Android"


@dataclass(frozen=True)
class Target:
    name: str
    platform: str
    architecture: str

    @property
    def is_android(self) -> bool:
        return self.platform == ANDROID

    def binary_name(self, identifier: str) -> str:
        if self.is_android:
            return f"lib{identifier}.so"
        return f"{identifier}.dll"


TARGETS = {
    "x86": Target("x86", WINDOWS_DESKTOP, "x86"),
    "x64": Target("x64", WINDOWS_DESKTOP, "x64"),
    "armv7": Target("armv7", ANDROID, "ARMv7"),
    "arm64": Target("arm64", ANDROID, "ARM64"),
}


def parse_targets(values: list[str] | None) -> list[Target]:
    """Turn ``--targets`` values (repeated and/or comma separated) into descriptors.

    Order is preserved and duplicates are dropped. Unknown names raise ValueError.
    """
    result: list[Target] = []
    for value in values or []:
        for name in value.split(","):
            name = name.strip().lower()
            if not name:
                continue
            if name not in TARGETS:
                raise ValueError(f"unknown target '{name}' (choose from {', '.join(TARGETS)})")
            target = TARGETS[name]
            if target not in result:
                result.append(target)
    return result
