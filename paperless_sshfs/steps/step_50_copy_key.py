from __future__ import annotations

import logging

from ..lib.sshkey import offer_key_transfer
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class CopyKeyStep:
    step_id = "50_copy_key"

    def run(self, ctx: SetupContext) -> SetupContext:
        cfg = ctx.config
        logger.info("Copying public key to SSH host (for passwordless authentication)...")
        # Non-fatal either way: the key may already be deployed out-of-band.
        copied = offer_key_transfer(
            ctx.prompter,
            cfg.public_key_path,
            cfg.remote_user,
            cfg.remote_host,
            dry_run=ctx.dry_run,
        )
        if copied:
            success(logger, "Public key transferred to %s.", cfg.remote_login)
        ctx.decisions["public_key_copied"] = copied
        return ctx
