"""Wizard state machine.

The controller owns one :class:`WizardSession` and advances it strictly
forward::

    AWAITING_NAME -> AWAITING_REPO -> AWAITING_TYPE -> CONFIRMING -> CREATING -> DONE

``update()`` applies one message and returns the command the event loop must
run, if any.  ``view()`` renders the current screen without side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.markup import escape

from whisk.config import Config
from whisk.scaffolder.archetypes import ARCHETYPES, Archetype, get_descriptor
from whisk.scaffolder.generator import ProjectConfig, ScaffoldResult
from .messages import (
    BACKSPACE_KEY,
    CANCEL_KEYS,
    CONFIRM_KEY,
    DOWN_KEYS,
    UP_KEYS,
    Command,
    KeyMsg,
    Msg,
    ProjectCreatedMsg,
    ProjectFailedMsg,
    SelectMsg,
    SetValueMsg,
)
from .widgets import SelectList, TextInput

TITLE = "Whisk Go Project Creator"


class WizardState(str, Enum):
    AWAITING_NAME = "awaiting_name"
    AWAITING_REPO = "awaiting_repo"
    AWAITING_TYPE = "awaiting_type"
    CONFIRMING = "confirming"
    CREATING = "creating"
    DONE = "done"


@dataclass
class WizardSession:
    """Mutable state collected during one wizard run."""

    state: WizardState = WizardState.AWAITING_NAME
    project_name: str = ""
    repository_path: str = ""
    archetype: Archetype = ARCHETYPES[0].archetype
    last_error: Exception | None = None
    result: ScaffoldResult | None = None

    def project_config(self) -> ProjectConfig:
        return ProjectConfig(
            name=self.project_name,
            repo_path=self.repository_path,
            archetype=self.archetype,
        )


class WizardController:
    """Applies input and outcome messages to a :class:`WizardSession`."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.theme = self.config.theme
        self.session = WizardSession()
        self.name_input = TextInput(self.config.name_input)
        self.repo_input = TextInput(self.config.repo_input)
        self.type_list = SelectList(ARCHETYPES, theme=self.theme)
        self.name_input.focus()

    @property
    def state(self) -> WizardState:
        return self.session.state

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, msg: Msg) -> Command | None:
        """Apply *msg* and return the command to run next, if any."""
        if isinstance(msg, ProjectCreatedMsg):
            return self._finish(result=msg.result)
        if isinstance(msg, ProjectFailedMsg):
            return self._finish(error=msg.error)

        if isinstance(msg, KeyMsg):
            if msg.key in CANCEL_KEYS:
                return Command.QUIT
            if msg.key == CONFIRM_KEY:
                return self._confirm()

        if self.session.state is WizardState.CREATING:
            return None

        self._edit(msg)
        return None

    def _confirm(self) -> Command | None:
        session = self.session
        state = session.state

        if state is WizardState.AWAITING_NAME:
            if self.name_input.value:
                session.project_name = self.name_input.value
                self.name_input.blur()
                self.repo_input.focus()
                session.state = WizardState.AWAITING_REPO
        elif state is WizardState.AWAITING_REPO:
            if self.repo_input.value:
                session.repository_path = self.repo_input.value
                self.repo_input.blur()
                session.state = WizardState.AWAITING_TYPE
        elif state is WizardState.AWAITING_TYPE:
            session.archetype = self.type_list.selected.archetype
            session.state = WizardState.CONFIRMING
        elif state is WizardState.CONFIRMING:
            session.state = WizardState.CREATING
            return Command.CREATE_PROJECT
        elif state is WizardState.DONE:
            return Command.QUIT
        return None

    def _edit(self, msg: Msg) -> None:
        """Route text edits and selection moves to the active widget."""
        state = self.session.state

        if state in (WizardState.AWAITING_NAME, WizardState.AWAITING_REPO):
            field = self.name_input if state is WizardState.AWAITING_NAME else self.repo_input
            if isinstance(msg, SetValueMsg):
                field.set_value(msg.value)
            elif isinstance(msg, KeyMsg):
                if msg.key == BACKSPACE_KEY:
                    field.backspace()
                elif msg.is_rune:
                    field.insert(msg.key)
        elif state is WizardState.AWAITING_TYPE:
            if isinstance(msg, SelectMsg):
                self.type_list.select(msg.index)
            elif isinstance(msg, KeyMsg):
                if msg.key in UP_KEYS:
                    self.type_list.move(-1)
                elif msg.key in DOWN_KEYS:
                    self.type_list.move(1)

    def _finish(
        self,
        result: ScaffoldResult | None = None,
        error: Exception | None = None,
    ) -> None:
        if self.session.state is not WizardState.CREATING:
            return None
        self.session.result = result
        self.session.last_error = error
        self.session.state = WizardState.DONE
        return None

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def view(self) -> str:
        """Render the current screen as Rich markup."""
        session = self.session
        name = escape(self.name_input.value)
        repo = escape(self.repo_input.value)
        lines = [f"[{self.theme.title_style}] {TITLE} [/]", ""]

        if session.state is WizardState.AWAITING_NAME:
            lines += ["Enter project name:", "", self.name_input.view(), ""]
            lines.append(self._info("Press Enter to continue, Ctrl+C to quit"))

        elif session.state is WizardState.AWAITING_REPO:
            lines += [f"Project name: {name}", ""]
            lines += ["Enter Git repository path:", "", self.repo_input.view(), ""]
            lines.append(self._info("Press Enter to continue, Ctrl+C to quit"))

        elif session.state is WizardState.AWAITING_TYPE:
            lines += [f"Project name: {name}", f"Git repository: {repo}", ""]
            lines += ["Select project type:", "", self.type_list.view()]

        elif session.state is WizardState.CONFIRMING:
            selected = get_descriptor(session.archetype)
            lines += ["Please confirm your choices:", ""]
            lines += [f"Project name: {name}", f"Git repository: {repo}"]
            lines += [f"Project type: {selected.name} ({escape(selected.description)})", ""]
            lines.append(self._info("Press Enter to create project, Ctrl+C to quit"))

        elif session.state is WizardState.CREATING:
            lines.append("Creating project...")

        elif session.state is WizardState.DONE:
            if session.last_error is not None:
                lines += [f"Error creating project: {escape(str(session.last_error))}", ""]
            else:
                lines += [f"[{self.theme.success_style}]✓ Project created successfully![/]", ""]
                root = session.result.project_root if session.result else self.name_input.value
                location = escape(str(root))
                lines += [f"Project created at: {location}", ""]
                lines += ["To get started:", ""]
                lines += [f"  cd {location}", "  go mod tidy", "  go run .", ""]
                skipped = session.result.skipped if session.result else []
                for path in skipped:
                    lines.append(f"[bold yellow]Skipped: {escape(str(path))}[/bold yellow]")
                if skipped:
                    lines.append("")
            lines.append(self._info("Press Enter to exit"))

        return "\n".join(lines)

    def _info(self, text: str) -> str:
        return f"[{self.theme.info_style}]{text}[/]"
