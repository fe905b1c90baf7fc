from __future__ import annotations

from pathlib import Path


class Il2CppBuildError(Exception):
    """Base class for every error the orchestrator reports to the operator."""


class ConfigurationError(Il2CppBuildError):
    """Raised before any external step runs: bad input or a missing mandatory tool."""


class NotFound(ConfigurationError):
    def __init__(self, what: str, where: str | Path, pattern: str | None = None):
        self.what = what
        self.where = str(where)
        self.pattern = pattern
        if pattern is None:
            message = f"{what} not found at {where}"
        else:
            message = f"{what} matching '{pattern}' not found under {where}"
        super().__init__(message)


class InvalidVersion(ConfigurationError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid version string: '{text}' (expected major.minor.build)")


class StepFailed(Il2CppBuildError):
    def __init__(self, step: str, identifier: str, exit_code: int, log_path: Path | None = None):
        self.step = step
        self.identifier = identifier
        self.exit_code = exit_code
        self.log_path = log_path
        message = f"{step} failed for '{identifier}' (exit code {exit_code})"
        if log_path is not None:
            message += f". Log: {log_path}"
        super().__init__(message)
