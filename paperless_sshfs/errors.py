from __future__ import annotations

from typing import Optional, Sequence


class SetupError(RuntimeError):
    """Fatal setup failure. Carries the process exit code."""

    def __init__(self, message: str, *, exit_code: int = 1, step_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.step_id = step_id


class PreconditionError(SetupError):
    """Pre-flight check failed or the operator aborted. Nothing was changed yet."""


class ConfigError(SetupError):
    pass


class CommandError(SetupError):
    """A required external command exited non-zero."""

    def __init__(self, message: str, *, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        super().__init__(message, exit_code=returncode or 1)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class SetupInterrupted(SetupError):
    """SIGINT/SIGTERM received while a step was running."""
