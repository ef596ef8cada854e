from __future__ import annotations

import logging

from ..lib.layout import create_layout, env_lines
from ..logging_utils import success
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class PaperlessLayoutStep:
    step_id = "80_paperless_layout"

    def run(self, ctx: SetupContext) -> SetupContext:
        local_mount = ctx.config.local_mount
        out = ctx.prompter.echo

        logger.info("Creating Paperless subfolders on the share (if missing)...")
        paths = create_layout(local_mount, dry_run=ctx.dry_run)

        success(logger, "Directories created or already present:")
        for p in paths:
            out(f"  {p}")

        out()
        logger.info("Add the following values to your Paperless configuration (e.g. .env or docker-compose):")
        out()
        for line in env_lines(local_mount):
            out(f"  {line}")
        out()

        ctx.decisions["layout"] = [str(p) for p in paths]
        return ctx
