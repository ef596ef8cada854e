from __future__ import annotations

import logging

from ..errors import PreconditionError
from ..lib.osinfo import fuse_device_present, is_root, read_os_release
from ..pipeline import SetupContext

logger = logging.getLogger(__name__)


class PreconditionsStep:
    step_id = "10_preconditions"

    def run(self, ctx: SetupContext) -> SetupContext:
        if not is_root():
            raise PreconditionError("This script must be run as root.")

        release = read_os_release(ctx.paths.os_release)
        if not release.is_debian_family:
            raise PreconditionError(
                f"This script is intended for Debian-based containers. Detected: {release.name}"
            )

        # Proxmox: Container -> Options -> Features -> fuse. The answer is taken on trust.
        logger.info("Checking FUSE support (Proxmox LXC feature 'fuse').")
        if not ctx.prompter.ask_yes_no("Is FUSE enabled in the container?"):
            raise PreconditionError("Please enable FUSE in the Proxmox container and run the script again.")

        if not fuse_device_present(ctx.paths.fuse_device):
            logger.warning("%s not found; mounting will likely fail until FUSE is enabled.", ctx.paths.fuse_device)

        ctx.decisions["os_id"] = release.id
        return ctx
