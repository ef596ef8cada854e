from __future__ import annotations

import logging

from ..errors import PreconditionError
from ..lib.prompt import gather_config
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class ConfigureStep:
    step_id = "20_configure"

    def run(self, ctx: SetupContext) -> SetupContext:
        logger.info("SSHFS configuration parameters:")
        cfg = gather_config(ctx.config, ctx.prompter).validate()

        logger.info("Using configuration:")
        for name, value in cfg.items():
            ctx.prompter.echo(f"  {name}: {value}")

        # Last exit before anything on the system changes.
        if not ctx.prompter.ask_yes_no("Proceed with this configuration?"):
            raise PreconditionError("Aborted. No changes were made.")

        ctx.config = cfg
        return ctx
