"""Sequential IL2CPP build: compile, strip, convert to C++, compile native.

Stages run strictly in order, one external process at a time. The first
failure moves the pipeline to FAILED and propagates; artifacts already written
are left in place.
"""
from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from il2cpp_build import console
from il2cpp_build.arguments import ArgumentBuilder
from il2cpp_build.config import SearchRoots, load_search_roots
from il2cpp_build.errors import ConfigurationError
from il2cpp_build.layout import ArtifactLayout, discover_sources
from il2cpp_build.locate import LATEST, ToolchainLocation, locate_toolchain
from il2cpp_build.profiles import ToolchainProfile
from il2cpp_build.runner import DryRunRunner, ProcessRunner
from il2cpp_build.targets import Target


class State(Enum):
    RESOLVE_PATHS = "ResolvePaths"
    COMPILE_SOURCES = "CompileSources"
    STRIP_ASSEMBLIES = "StripAssemblies"
    TRANSPILE_TO_NATIVE = "TranspileToNative"
    COMPILE_NATIVE_TARGETS = "CompileNativeTargets"
    DONE = "Done"
    FAILED = "Failed"


@dataclass(frozen=True)
class BuildRequest:
    source_dir: Path
    output_dir: Path
    config_dir: Path
    identifiers: tuple[str, ...] = ()
    unity_selector: str = LATEST
    ndk_selector: str = LATEST
    targets: tuple[Target, ...] = ()
    dry_run: bool = False


@dataclass(frozen=True)
class BuildContext:
    request: BuildRequest
    identifiers: tuple[str, ...]
    location: ToolchainLocation
    profile: ToolchainProfile
    layout: ArtifactLayout
    arguments: ArgumentBuilder


@dataclass
class PipelineReport:
    visited: list[State] = field(default_factory=list)
    skipped_targets: list[Target] = field(default_factory=list)
    binaries: list[Path] = field(default_factory=list)


class Pipeline:
    def __init__(self, request: BuildRequest, runner=None, roots: SearchRoots | None = None):
        self.request = request
        self.layout = ArtifactLayout(request.source_dir, request.output_dir)
        if runner is None:
            runner = DryRunRunner() if request.dry_run else ProcessRunner(self.layout.log_dir, cwd=request.source_dir)
        self.runner = runner
        self.roots = roots
        self.state = State.RESOLVE_PATHS
        self.report = PipelineReport()

    def enter(self, state: State) -> None:
        self.state = state
        self.report.visited.append(state)
        if state not in (State.DONE, State.FAILED):
            console.step(f"[{state.value}]")

    def run(self) -> PipelineReport:
        try:
            self.enter(State.RESOLVE_PATHS)
            context = self.resolve_paths()

            self.enter(State.COMPILE_SOURCES)
            self.compile_sources(context)

            self.enter(State.STRIP_ASSEMBLIES)
            self.strip_assemblies(context)

            self.enter(State.TRANSPILE_TO_NATIVE)
            self.transpile_to_native(context)

            if self.request.targets:
                self.enter(State.COMPILE_NATIVE_TARGETS)
                self.compile_native_targets(context)
            else:
                console.info("No targets requested, skipping native compilation.")
        except Exception:
            self.enter(State.FAILED)
            raise
        self.enter(State.DONE)
        return self.report

    def resolve_paths(self) -> BuildContext:
        request = self.request
        roots = self.roots or load_search_roots(request.config_dir)
        location, profile = locate_toolchain(roots, request.unity_selector, request.ndk_selector)
        console.info(f"Unity {location.version} at {location.unity_root}")
        if location.ndk_root is not None:
            console.info(f"Android NDK at {location.ndk_root}")
        else:
            console.info("Android NDK not found")

        identifiers = tuple(dict.fromkeys(request.identifiers or discover_sources(request.source_dir)))
        if not identifiers:
            raise ConfigurationError(f"No C# sources found in {request.source_dir}")
        for identifier in identifiers:
            if not self.layout.source(identifier).is_file():
                raise ConfigurationError(f"Source file not found: {self.layout.source(identifier)}")

        return BuildContext(
            request=request,
            identifiers=tuple(identifiers),
            location=location,
            profile=profile,
            layout=self.layout,
            arguments=ArgumentBuilder(location, profile, self.layout),
        )

    def make_dir(self, path: Path) -> None:
        if self.request.dry_run:
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(f"Cannot create output directory {path}: {exc}") from exc

    def remove_dir(self, path: Path) -> None:
        if self.request.dry_run or not path.exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise ConfigurationError(f"Cannot remove stale output {path}: {exc}") from exc

    def compile_sources(self, context: BuildContext) -> None:
        self.make_dir(context.layout.managed_dir)
        for identifier in context.identifiers:
            console.info(f"Compiling {identifier}.cs")
            self.runner.run("compile", identifier, context.arguments.compile_args(identifier))

    def strip_assemblies(self, context: BuildContext) -> None:
        for identifier in context.identifiers:
            console.info(f"Stripping {identifier}.dll")
            self.make_dir(context.layout.stripped_dir(identifier))
            self.runner.run("strip", identifier, context.arguments.strip_args(identifier))

    def transpile_to_native(self, context: BuildContext) -> None:
        for identifier in context.identifiers:
            cpp_dir = context.layout.cpp_dir(identifier)
            self.remove_dir(cpp_dir)
            self.make_dir(cpp_dir)
            console.info(f"Converting {identifier} to C++")
            self.runner.run("convert", identifier, context.arguments.convert_args(identifier))

    def compile_native_targets(self, context: BuildContext) -> None:
        targets = []
        for target in self.request.targets:
            if target.is_android and not context.location.android_available:
                console.warn(f"Android toolchain not available, skipping {target.name}")
                self.report.skipped_targets.append(target)
                continue
            targets.append(target)

        for identifier in context.identifiers:
            for target in targets:
                console.info(f"Compiling {identifier} for {target.platform} {target.architecture}")
                self.make_dir(context.layout.cache_dir(identifier, target))
                self.runner.run(
                    f"compile-{target.name}",
                    identifier,
                    context.arguments.compile_native_args(identifier, target),
                )
                self.report.binaries.append(context.layout.binary(identifier, target))
