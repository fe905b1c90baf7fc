from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from il2cpp_build.targets import Target

BINARY_DIR_PREFIX = "native"


@dataclass(frozen=True)
class ArtifactLayout:
    """Where each pipeline stage writes, namespaced by identifier and target."""

    source_dir: Path
    output_dir: Path

    @property
    def managed_dir(self) -> Path:
        return self.output_dir / "managed"

    @property
    def stripped_root(self) -> Path:
        return self.output_dir / "stripped"

    @property
    def cpp_root(self) -> Path:
        return self.output_dir / "cpp"

    @property
    def bin_root(self) -> Path:
        return self.output_dir / "bin"

    @property
    def log_dir(self) -> Path:
        return self.output_dir / "logs"

    def source(self, identifier: str) -> Path:
        return self.source_dir / f"{identifier}.cs"

    def assembly(self, identifier: str) -> Path:
        return self.managed_dir / f"{identifier}.dll"

    def stripped_dir(self, identifier: str) -> Path:
        return self.stripped_root / identifier

    def cpp_dir(self, identifier: str) -> Path:
        return self.cpp_root / identifier

    def binary_dir(self, identifier: str, target: Target) -> Path:
        return self.bin_root / f"{BINARY_DIR_PREFIX}-{identifier}-{target.name}"

    def binary(self, identifier: str, target: Target) -> Path:
        return self.binary_dir(identifier, target) / target.binary_name(identifier)

    def cache_dir(self, identifier: str, target: Target) -> Path:
        return self.binary_dir(identifier, target) / "cache"


def discover_sources(source_dir: Path) -> list[str]:
    return sorted(path.stem for path in source_dir.glob("*.cs") if path.is_file())
