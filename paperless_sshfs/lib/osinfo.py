from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from ..errors import PreconditionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OsRelease:
    id: str
    id_like: Tuple[str, ...]
    name: str

    @property
    def is_debian_family(self) -> bool:
        return self.id == "debian" or "debian" in self.id_like


def parse_os_release(text: str) -> Dict[str, str]:
    """Parse os-release(5) KEY=value lines (quotes and comments allowed)."""

    out: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            parts = [raw.strip().strip("\"'")]
        out[key.strip()] = " ".join(parts)
    return out


def read_os_release(path: str = "/etc/os-release") -> OsRelease:
    p = Path(path)
    try:
        data = parse_os_release(p.read_text(encoding="utf-8", errors="ignore"))
    except OSError as e:
        raise PreconditionError(f"Unable to read {path} - OS detection failed.") from e

    os_id = data.get("ID", "").lower()
    release = OsRelease(
        id=os_id,
        id_like=tuple(data.get("ID_LIKE", "").lower().split()),
        name=data.get("PRETTY_NAME") or data.get("NAME") or os_id or "unknown",
    )
    logger.info("Detected OS: id=%s id_like=%s", release.id, ",".join(release.id_like) or "-")
    return release


def is_root() -> bool:
    return os.geteuid() == 0


def fuse_device_present(path: str = "/dev/fuse") -> bool:
    """Best-effort FUSE probe; the device node may exist yet be unusable."""

    return Path(path).exists()
