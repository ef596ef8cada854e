from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import CommandError
from .command import run_cmd

logger = logging.getLogger(__name__)


def ensure_mountpoint(path: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would create mountpoint %s (mode 755)", path)
        return
    Path(path).mkdir(parents=True, exist_ok=True)
    os.chmod(path, 0o755)


def activate_mounts(*, dry_run: bool = False) -> None:
    """mount -a. Any failure is fatal: we cannot tell which entry broke."""

    try:
        run_cmd(["mount", "-a"], dry_run=dry_run)
    except CommandError as e:
        raise CommandError(
            "mount -a failed. Please check /etc/fstab.",
            argv=e.argv,
            returncode=e.returncode,
            stderr=e.stderr,
        ) from e


def verify_mount(path: str, *, dry_run: bool = False) -> bool:
    r = run_cmd(["mountpoint", "-q", path], check=False, dry_run=dry_run)
    return r.returncode == 0
