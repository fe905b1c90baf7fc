"""Command lines for the C# compiler, UnityLinker and il2cpp."""
from __future__ import annotations

from pathlib import Path

from il2cpp_build.layout import ArtifactLayout
from il2cpp_build.locate import ToolchainLocation
from il2cpp_build.profiles import ToolchainProfile
from il2cpp_build.targets import Target

COMPILER_FLAGS = ("-target:library", "-nostdlib+", "-optimize+", "-unsafe+", "-langversion:latest")
LINKER_FLAGS = ("--i18n=none", "--core-action=link")
CONVERT_FLAGS = ("--convert-to-cpp", "--emit-null-checks", "--enable-array-bounds-check")
COMPILE_NATIVE_FLAGS = ("--compile-cpp", "--libil2cpp-static", "--configuration=Release")


class ArgumentBuilder:
    def __init__(self, location: ToolchainLocation, profile: ToolchainProfile, layout: ArtifactLayout):
        self.location = location
        self.profile = profile
        self.layout = layout

    def compile_args(self, identifier: str) -> list[str]:
        return [
            str(self.location.csc),
            *COMPILER_FLAGS,
            f"-reference:{self.location.mscorlib}",
            f"-reference:{self.location.engine_lib}",
            f"-out:{self.layout.assembly(identifier)}",
            str(self.layout.source(identifier)),
        ]

    def strip_args(self, identifier: str) -> list[str]:
        return [
            str(self.location.linker),
            f"--out={self.layout.stripped_dir(identifier)}",
            f"--include-directory={self.layout.managed_dir}",
            f"--include-directory={self.location.runtime_lib_dir}",
            f"--include-unity-root-assembly={self.layout.assembly(identifier)}",
            *LINKER_FLAGS,
            *self.profile.linker_flags,
        ]

    def convert_args(self, identifier: str) -> list[str]:
        return [
            str(self.location.il2cpp),
            *CONVERT_FLAGS,
            f"--directory={self.layout.stripped_dir(identifier)}",
            f"--generatedcppdir={self.layout.cpp_dir(identifier)}",
            *self.profile.profile_flags,
        ]

    def baselib_dir(self, target: Target) -> Path | None:
        if not self.profile.uses_baselib:
            return None
        return self.location.baselib_dir(target.name)

    def android_args(self) -> list[str]:
        ndk = self.location.ndk_root
        return [
            f"--tool-chain-path={ndk}",
            f"--additional-include-directories={ndk / 'sources' / 'cxx-stl' / 'llvm-libc++' / 'include'}",
            f"--additional-include-directories={ndk / 'sysroot' / 'usr' / 'include'}",
        ]

    def compile_native_args(self, identifier: str, target: Target) -> list[str]:
        args = [
            str(self.location.il2cpp),
            *COMPILE_NATIVE_FLAGS,
            f"--platform={target.platform}",
            f"--architecture={target.architecture}",
            f"--generatedcppdir={self.layout.cpp_dir(identifier)}",
            f"--outputpath={self.layout.binary(identifier, target)}",
            f"--cachedirectory={self.layout.cache_dir(identifier, target)}",
        ]
        baselib = self.baselib_dir(target)
        if baselib is not None:
            args.append(f"--baselib-directory={baselib}")
        if target.is_android:
            args.extend(self.android_args())
        args.extend(self.profile.profile_flags)
        return args
