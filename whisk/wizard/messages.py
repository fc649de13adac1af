"""Messages consumed by the wizard controller and commands it returns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from whisk.scaffolder.generator import ScaffoldResult

CANCEL_KEYS = frozenset({"ctrl+c", "esc"})
CONFIRM_KEY = "enter"
BACKSPACE_KEY = "backspace"
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})


@dataclass(frozen=True)
class KeyMsg:
    """A key press: a named key (``"enter"``, ``"esc"``, ``"up"``...) or one printable character."""

    key: str

    @property
    def is_rune(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable()


@dataclass(frozen=True)
class SetValueMsg:
    """Replace the focused text field's value (a line editor's result)."""

    value: str


@dataclass(frozen=True)
class SelectMsg:
    """Move the selection cursor to *index*."""

    index: int


@dataclass(frozen=True)
class ProjectCreatedMsg:
    result: ScaffoldResult


@dataclass(frozen=True)
class ProjectFailedMsg:
    error: Exception


Msg = Union[KeyMsg, SetValueMsg, SelectMsg, ProjectCreatedMsg, ProjectFailedMsg]


class Command(str, Enum):
    """Side effects requested by the controller."""

    QUIT = "quit"
    CREATE_PROJECT = "create_project"
