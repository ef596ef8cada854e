from __future__ import annotations

import argparse
import logging
import signal
from typing import Optional

from .config import SetupConfig, load_defaults
from .errors import SetupError, SetupInterrupted
from .lib.env import PATHS, Paths
from .lib.osinfo import is_root
from .lib.prompt import Prompter
from .logging_utils import DEFAULT_LOG_PATH, configure_logging, success
from .pipeline import PipelineResult, SetupContext, run_pipeline
from .steps import (
    ConfigureStep,
    CopyKeyStep,
    InstallSshfsStep,
    MountStep,
    PaperlessLayoutStep,
    PreconditionsStep,
    SshKeyStep,
    WriteFstabStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        PreconditionsStep(),
        ConfigureStep(),
        InstallSshfsStep(),
        SshKeyStep(),
        CopyKeyStep(),
        WriteFstabStep(),
        MountStep(),
        PaperlessLayoutStep(),
    ]


def build_context(
    *,
    defaults_path: Optional[str] = None,
    prompter: Optional[Prompter] = None,
    paths: Paths = PATHS,
    dry_run: bool = False,
    require_mount: bool = False,
) -> SetupContext:
    config = load_defaults(defaults_path) if defaults_path else SetupConfig()
    return SetupContext(
        config=config,
        prompter=prompter or Prompter(),
        paths=paths,
        dry_run=dry_run,
        require_mount=require_mount,
    )


def run(ctx: SetupContext) -> PipelineResult:
    """Run the whole setup once. Raises SetupError on any fatal failure."""

    result = run_pipeline(ctx=ctx, steps=build_steps())
    logger.info("Decisions: %s", result.ctx.decisions)
    success(logger, "SSHFS setup for Paperless NGX completed.")
    return result


def _report(e: SetupError, ctx: Optional[SetupContext]) -> int:
    step = e.step_id or (ctx.current_step if ctx else None) or "startup"
    logger.error("Error in step %s (exit code %d): %s", step, e.exit_code, e)
    return e.exit_code


def _raise_on_sigterm(signum, frame) -> None:
    raise SetupInterrupted("Terminated", exit_code=128 + signum)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="paperless-sshfs-setup",
        description="Interactive SSHFS storage setup for Paperless-ngx in a Proxmox LXC container.",
    )
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to setup log")
    p.add_argument("--defaults", default=None, help="YAML file with default answers")
    p.add_argument("--dry-run", action="store_true", help="Log commands and writes without executing them")
    p.add_argument(
        "--require-mount",
        action="store_true",
        help="Fail if the mount point is not active after mount -a",
    )

    args = p.parse_args(argv)

    # Non-root runs stop at the privilege check; keep them from leaving a log file behind.
    configure_logging(log_path=args.log, also_file=is_root())
    previous = signal.signal(signal.SIGTERM, _raise_on_sigterm)

    ctx: Optional[SetupContext] = None
    try:
        ctx = build_context(
            defaults_path=args.defaults,
            dry_run=bool(args.dry_run),
            require_mount=bool(args.require_mount),
        )
        run(ctx)
        return 0
    except KeyboardInterrupt:
        return _report(SetupInterrupted("Interrupted", exit_code=130), ctx)
    except SetupError as e:
        return _report(e, ctx)
    except Exception:
        step = (ctx.current_step if ctx else None) or "startup"
        logger.exception("Setup failed in step %s", step)
        return 1
    finally:
        signal.signal(signal.SIGTERM, previous)
