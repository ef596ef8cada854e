from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from ..config import SetupConfig

logger = logging.getLogger(__name__)


class Prompter:
    """Terminal questions with defaults.

    input_fn defaults to the builtin input(), looked up per call.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None) -> None:
        self._input_fn = input_fn

    def _ask(self, text: str) -> str:
        fn = self._input_fn or input
        return fn(text)

    def get_input(self, prompt: str, default: str) -> str:
        answer = self._ask(f"{prompt} (default: {default}): ").strip()
        value = answer or default
        logger.debug("Answer for %r: %r", prompt, value)
        return value

    def ask_yes_no(self, prompt: str, default: str = "y") -> bool:
        return self.get_input(f"{prompt} (y/n)", default) in {"y", "Y"}

    def echo(self, text: str = "") -> None:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()


def gather_config(base: SetupConfig, prompter: Prompter) -> SetupConfig:
    """Offer to change each value; empty answers keep the current value."""

    if not prompter.ask_yes_no("Modify default values?"):
        return base

    answers = {name: prompter.get_input(f"Value for {name}", value) for name, value in base.items()}
    return base.with_overrides(answers)
