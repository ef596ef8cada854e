from __future__ import annotations

import logging

from ..lib.sshkey import ensure_key
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class SshKeyStep:
    step_id = "40_ssh_key"

    def run(self, ctx: SetupContext) -> SetupContext:
        key = ctx.config.ssh_key_path
        logger.info("Checking/creating SSH key for the connection...")
        created = ensure_key(key, dry_run=ctx.dry_run)
        if created:
            success(logger, "SSH key created: %s", key)
        ctx.decisions["ssh_key_created"] = created
        return ctx
