from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .config import SetupConfig
from .errors import SetupError, SetupInterrupted
from .lib.env import PATHS, Paths
from .lib.prompt import Prompter

logger = logging.getLogger(__name__)


@dataclass
class SetupContext:
    """Everything a step needs. `config` is replaced, never mutated."""

    config: SetupConfig
    prompter: Prompter
    paths: Paths = PATHS
    dry_run: bool = False
    require_mount: bool = False
    current_step: Optional[str] = None
    decisions: Dict[str, Any] = field(default_factory=dict)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: SetupContext) -> SetupContext:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ctx: SetupContext
    ran_steps: List[str]


def run_pipeline(*, ctx: SetupContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps strictly in order; the first failure stops the run."""

    ran: List[str] = []

    for step in steps:
        ctx.current_step = step.step_id
        logger.debug("Running step %s", step.step_id)
        try:
            ctx = step.run(ctx)
        except SetupError as e:
            if e.step_id is None:
                e.step_id = step.step_id
            raise
        except KeyboardInterrupt as e:
            raise SetupInterrupted("Interrupted", exit_code=130, step_id=step.step_id) from e
        ran.append(step.step_id)

    ctx.current_step = None
    return PipelineResult(ctx=ctx, ran_steps=ran)
