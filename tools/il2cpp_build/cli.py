from __future__ import annotations

import argparse
from pathlib import Path

from il2cpp_build import __version__, console
from il2cpp_build.errors import Il2CppBuildError
from il2cpp_build.locate import LATEST
from il2cpp_build.pipeline import BuildRequest, Pipeline
from il2cpp_build.targets import TARGETS, parse_targets


def split_list(value: str) -> list[str]:
    return list(dict.fromkeys(item.strip() for item in value.split(",") if item.strip()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="il2cpp-build",
        description="Compile C# sources with Unity's IL2CPP toolchain into native libraries.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--assemblies",
        type=split_list,
        default=None,
        help="Comma separated source names without extension (default: every .cs in --source-dir)",
    )
    parser.add_argument(
        "--unity-version",
        default=LATEST,
        help="Unity version pattern such as 2019.4.* or a path to an editor install (default: latest)",
    )
    parser.add_argument(
        "--ndk-version",
        default=LATEST,
        help="Android NDK version pattern or a path to an NDK (default: latest)",
    )
    parser.add_argument(
        "--targets",
        nargs="+",
        action="extend",
        default=[],
        metavar="TARGET",
        help=f"Native targets to build: {', '.join(TARGETS)}.\nOmit to stop after C++ generation.",
    )
    parser.add_argument("--source-dir", type=Path, default=Path.cwd(), help="Directory holding the .cs files")
    parser.add_argument("--output-dir", type=Path, default=None, help="Build output root (default: <source-dir>/build)")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding unity-root.txt and ndk-root.txt (default: --source-dir)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the tool command lines without running them")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def request_from_args(args: argparse.Namespace) -> BuildRequest:
    source_dir = args.source_dir.resolve()
    return BuildRequest(
        source_dir=source_dir,
        output_dir=(args.output_dir or source_dir / "build").resolve(),
        config_dir=(args.config_dir or source_dir).resolve(),
        identifiers=tuple(args.assemblies or ()),
        unity_selector=args.unity_version,
        ndk_selector=args.ndk_version,
        targets=tuple(parse_targets(args.targets)),
        dry_run=args.dry_run,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        request = request_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    console.header("IL2CPP BUILD")
    try:
        report = Pipeline(request).run()
    except Il2CppBuildError as exc:
        console.error(str(exc))
        return 1

    for binary in report.binaries:
        console.info(f"Built {binary}")
    console.success("\n=== Build Finished ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
