from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    fstab: str = "/etc/fstab"
    fstab_backup: str = "/etc/fstab.bak"
    os_release: str = "/etc/os-release"
    fuse_device: str = "/dev/fuse"


PATHS = Paths()
