from __future__ import annotations

import logging

from ..errors import SetupError
from ..lib.mount import activate_mounts, verify_mount
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class MountStep:
    step_id = "70_mount"

    def run(self, ctx: SetupContext) -> SetupContext:
        local_mount = ctx.config.local_mount

        logger.info("Trying to mount all %s entries (including SSHFS)...", ctx.paths.fstab)
        activate_mounts(dry_run=ctx.dry_run)

        mounted = verify_mount(local_mount, dry_run=ctx.dry_run)
        ctx.decisions["mounted"] = mounted
        if mounted:
            success(logger, "SSHFS successfully mounted at: %s", local_mount)
            return ctx

        msg = "SSHFS does not appear to be mounted. mountpoint check failed."
        if ctx.require_mount:
            raise SetupError(msg)
        # Folders created next would land on the local disk.
        logger.warning(msg)
        return ctx
