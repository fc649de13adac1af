"""Shared pytest fixtures for the Whisk test suite.

Provides reusable fixtures for:
- Temporary output directories and configs pointing at them
- A scripted terminal that answers wizard prompts without a TTY
- A fresh wizard controller
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from whisk.config import Config
from whisk.scaffolder.archetypes import ArchetypeDescriptor
from whisk.wizard.controller import WizardController


# ---------------------------------------------------------------------------
# Paths & Config
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory the generated project is written into."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> Config:
    """Default configuration writing into ``output_dir``."""
    return Config(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Controller helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def controller(config: Config) -> WizardController:
    return WizardController(config)


# ---------------------------------------------------------------------------
# Scripted terminal
# ---------------------------------------------------------------------------

class ScriptedTerminal:
    """Terminal stand-in that replays queued answers.

    Each ``ask_*`` call pops the next answer; ``None`` simulates Ctrl+C.
    Every rendered screen is kept in ``screens``.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.screens: list[str] = []
        self.prompts: list[str] = []

    def render(self, screen: str) -> None:
        self.screens.append(screen)

    def _next(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self.answers.pop(0)

    async def ask_text(self, message: str, placeholder: str) -> str | None:
        return self._next(message)

    async def ask_select(
        self, message: str, items: Sequence[ArchetypeDescriptor], default: int
    ) -> int | None:
        return self._next(message)

    async def ask_confirm(self, message: str) -> bool | None:
        return self._next(message)

    async def pause(self, message: str) -> bool | None:
        return self._next(message)


@pytest.fixture
def scripted_terminal():
    """Factory for :class:`ScriptedTerminal` instances."""
    return ScriptedTerminal
