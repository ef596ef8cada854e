from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import SetupConfig

logger = logging.getLogger(__name__)

SSHFS_FSTYPE = "fuse"
SSHFS_OPTIONS = ("defaults", "_netdev", "allow_other")


@dataclass(frozen=True)
class FstabEntry:
    spec: str
    mountpoint: str
    fstype: str
    options: str
    dump: int = 0
    passno: int = 0

    def render(self) -> str:
        return f"{self.spec} {self.mountpoint} {self.fstype} {self.options} {self.dump} {self.passno}"


def compose_entry(cfg: SetupConfig) -> FstabEntry:
    """Build the sshfs line; its rendered text is the unit of idempotence."""

    return FstabEntry(
        spec=f"sshfs#{cfg.remote_user}@{cfg.remote_host}:{cfg.remote_path}",
        mountpoint=cfg.local_mount,
        fstype=SSHFS_FSTYPE,
        options=",".join([*SSHFS_OPTIONS, f"IdentityFile={cfg.ssh_key_path}"]),
    )


def already_contains(table: str, line: str) -> bool:
    """Exact line match; no semantic comparison of fstab fields."""

    return line in table.splitlines()


def persist_entry(
    line: str,
    table_path: str,
    *,
    backup_path: Optional[str] = None,
    dry_run: bool = False,
) -> bool:
    """Append line to the mount table unless it is already there.

    The table is copied to backup_path (default: <table>.bak) right before
    the append. A missing table is treated as empty and not backed up.
    Returns True when the line was appended.
    """

    p = Path(table_path)
    current = p.read_text(encoding="utf-8") if p.exists() else ""

    if already_contains(current, line):
        logger.info("Identical SSHFS entry already exists in %s.", table_path)
        return False

    backup = Path(backup_path or f"{table_path}.bak")
    if dry_run:
        logger.info("Would back up %s to %s and append: %s", table_path, str(backup), line)
        return True

    if p.exists():
        shutil.copy2(p, backup)
        logger.info("Backed up %s to %s", table_path, str(backup))

    sep = "" if not current or current.endswith("\n") else "\n"
    with p.open("a", encoding="utf-8") as f:
        f.write(f"{sep}{line}\n")
    return True
