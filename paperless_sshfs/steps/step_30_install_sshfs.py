from __future__ import annotations

import logging

from ..lib.pkg import ensure_executable
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class InstallSshfsStep:
    step_id = "30_install_sshfs"

    def run(self, ctx: SetupContext) -> SetupContext:
        logger.info("Checking/installing sshfs...")
        if ensure_executable("sshfs", "sshfs", dry_run=ctx.dry_run):
            success(logger, "sshfs installed.")
        ctx.decisions["sshfs_installed"] = True
        return ctx
