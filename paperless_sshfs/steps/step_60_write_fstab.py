from __future__ import annotations

import logging

from ..lib.fstab import compose_entry, persist_entry
from ..lib.mount import ensure_mountpoint
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class WriteFstabStep:
    step_id = "60_write_fstab"

    def run(self, ctx: SetupContext) -> SetupContext:
        cfg = ctx.config

        logger.info("Creating local mountpoint: %s", cfg.local_mount)
        ensure_mountpoint(cfg.local_mount, dry_run=ctx.dry_run)
        success(logger, "Mountpoint ready.")

        logger.info("Configuring %s for SSHFS...", ctx.paths.fstab)
        line = compose_entry(cfg).render()
        appended = persist_entry(
            line,
            ctx.paths.fstab,
            backup_path=ctx.paths.fstab_backup,
            dry_run=ctx.dry_run,
        )
        if appended:
            success(logger, "SSHFS entry added to %s.", ctx.paths.fstab)

        ctx.decisions["fstab_line"] = line
        ctx.decisions["fstab_appended"] = appended
        return ctx
