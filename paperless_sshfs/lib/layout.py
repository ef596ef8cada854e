from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)

# (Paperless environment variable, directory under the mount point)
PAPERLESS_DIRS: Tuple[Tuple[str, str], ...] = (
    ("PAPERLESS_CONSUMPTION_DIR", "consume"),
    ("PAPERLESS_DATA_DIR", "data"),
    ("PAPERLESS_MEDIA_ROOT", "media"),
    ("PAPERLESS_EMPTY_TRASH_DIR", "trash"),
)


def layout_paths(local_mount: str) -> List[Path]:
    return [Path(local_mount) / name for _, name in PAPERLESS_DIRS]


def create_layout(local_mount: str, *, dry_run: bool = False) -> List[Path]:
    """Create the Paperless subfolders if missing.

    Does not check that the mount is active: on a plain local directory this
    still succeeds.
    """

    paths = layout_paths(local_mount)
    for p in paths:
        if dry_run:
            logger.info("Would create %s", str(p))
            continue
        p.mkdir(mode=0o755, parents=True, exist_ok=True)
    return paths


def env_lines(local_mount: str) -> List[str]:
    return [f"{var}={Path(local_mount) / name}" for var, name in PAPERLESS_DIRS]
