from __future__ import annotations

import logging
import os
from pathlib import Path

from .command import run_cmd
from .prompt import Prompter

logger = logging.getLogger(__name__)

KEY_TYPE = "rsa"
KEY_BITS = 4096


def ensure_key_dir(key_path: str, *, dry_run: bool = False) -> Path:
    d = Path(key_path).parent
    if dry_run:
        logger.info("Would ensure %s (mode 700)", str(d))
        return d
    d.mkdir(parents=True, exist_ok=True)
    os.chmod(d, 0o700)
    return d


def ensure_key(key_path: str, *, dry_run: bool = False) -> bool:
    """Generate a passphrase-less RSA key pair at key_path if none exists.

    An existing private key is never touched. Returns True when a key was
    generated.
    """

    ensure_key_dir(key_path, dry_run=dry_run)

    if Path(key_path).is_file():
        logger.info("SSH key already exists: %s", key_path)
        return False

    run_cmd(
        ["ssh-keygen", "-t", KEY_TYPE, "-b", str(KEY_BITS), "-f", key_path, "-N", ""],
        dry_run=dry_run,
    )
    return True


def copy_public_key(pubkey_path: str, login: str, *, dry_run: bool = False) -> bool:
    """Run ssh-copy-id against login. Returns False on failure, never raises for it."""

    r = run_cmd(
        ["ssh-copy-id", "-i", pubkey_path, login],
        check=False,
        capture=False,
        dry_run=dry_run,
    )
    return r.returncode == 0


def offer_key_transfer(
    prompter: Prompter,
    pubkey_path: str,
    user: str,
    host: str,
    *,
    dry_run: bool = False,
) -> bool:
    """Ask whether to deploy the public key; True only if it was deployed."""

    if not prompter.ask_yes_no("Transfer public key automatically using ssh-copy-id?"):
        logger.warning(
            "Skipping ssh-copy-id. Ensure the public key is present on the remote host in ~/.ssh/authorized_keys."
        )
        return False

    if copy_public_key(pubkey_path, f"{user}@{host}", dry_run=dry_run):
        return True

    logger.warning(
        "ssh-copy-id failed. Copy %s to %s@%s:~/.ssh/authorized_keys manually.",
        pubkey_path,
        user,
        host,
    )
    return False
