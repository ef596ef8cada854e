from __future__ import annotations

import logging
import shutil
from typing import Optional, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def apt_update(*, dry_run: bool = False) -> None:
    run_cmd(["apt-get", "update"], capture=False, dry_run=dry_run)


def apt_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    if not packages:
        return
    run_cmd(["apt-get", "install", "-y", *packages], capture=False, dry_run=dry_run)


def has_executable(name: str) -> bool:
    return shutil.which(name) is not None


def ensure_executable(executable: str, package: Optional[str] = None, *, dry_run: bool = False) -> bool:
    """Install `package` with apt unless `executable` is already on PATH.

    Returns True when apt was invoked. Only presence of the executable is
    checked, not the package state.
    """

    if has_executable(executable):
        logger.info("%s already installed.", executable)
        return False

    apt_update(dry_run=dry_run)
    apt_install([package or executable], dry_run=dry_run)
    return True
