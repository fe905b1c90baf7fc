from __future__ import annotations

import subprocess
import time
from pathlib import Path

from il2cpp_build import console
from il2cpp_build.errors import ConfigurationError, StepFailed

TAIL_LINES = 20


def now_stamp() -> str:
    return time.strftime("%Y%m%d_%H%M%S")


def safe_name(value: str) -> str:
    keep = []
    for ch in value:
        if ch.isalnum() or ch in ("-", "_"):
            keep.append(ch)
        else:
            keep.append("_")
    return "".join(keep)


class ProcessRunner:
    """Run one external tool at a time and keep its output in a log file."""

    def __init__(self, log_dir: Path, cwd: Path | None = None):
        self.log_dir = log_dir
        self.cwd = cwd

    def log_path(self, step: str, identifier: str) -> Path:
        return self.log_dir / f"{now_stamp()}_{safe_name(step)}_{safe_name(identifier)}.log"

    def run(self, step: str, identifier: str, command: list[str]) -> None:
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(f"Cannot create log directory {self.log_dir}: {exc}") from exc
        log_path = self.log_path(step, identifier)

        start = time.time()
        try:
            result = subprocess.run(
                command,
                cwd=str(self.cwd) if self.cwd else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            log_path.write_text(f"{' '.join(command)}\n{exc}\n", encoding="utf-8", errors="ignore")
            console.error(f"Could not start {command[0]}: {exc}")
            raise StepFailed(step, identifier, -1, log_path) from exc
        duration = time.time() - start

        output = (result.stdout or "") + (result.stderr or "")
        log_path.write_text(f"{' '.join(command)}\n\n{output}", encoding="utf-8", errors="ignore")

        if result.returncode != 0:
            for line in output.splitlines()[-TAIL_LINES:]:
                print(f"    {line}")
            raise StepFailed(step, identifier, result.returncode, log_path)
        console.info(f"{step} {identifier} done in {duration:.1f}s")


class DryRunRunner:
    """Print the command lines instead of executing them."""

    def run(self, step: str, identifier: str, command: list[str]) -> None:
        console.info(f"[dry-run] {step} {identifier}: {subprocess.list2cmdline(command)}")
