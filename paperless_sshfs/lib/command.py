from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)

NOT_EXECUTABLE = 127


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    input_text: str | None = None,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False leaves stdin/stdout/stderr attached to the terminal
      (apt progress, ssh password prompts).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=pipe,
            stderr=pipe,
            env=dict(os.environ, **(env or {})),
        )
        returncode, stdout, stderr = p.returncode, p.stdout or "", p.stderr or ""
    except OSError as e:
        # Program missing or not executable: report it like a shell would (127).
        returncode, stdout, stderr = NOT_EXECUTABLE, "", str(e)

    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and returncode != 0:
        raise CommandError(
            f"Command failed ({returncode}): {fmt_argv(argv_list)}\n{stderr}".rstrip(),
            argv=argv_list,
            returncode=returncode,
            stderr=stderr,
        )

    return CmdResult(argv=argv_list, returncode=returncode, stdout=stdout, stderr=stderr)
