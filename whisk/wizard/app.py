"""Wizard event loop.

Input from the terminal and the generation outcome travel through one
``asyncio.Queue`` and are applied to the controller one at a time, in
arrival order.  ``CREATE_PROJECT`` spawns a single task that runs the
generator and posts exactly one outcome message back onto the queue.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, Sequence

import questionary
from questionary import Choice, Style

from whisk.config import Config
from whisk.scaffolder.archetypes import ArchetypeDescriptor
from whisk.scaffolder.generator import ProjectGenerator, ScaffoldError
from whisk.utils import console, create_status
from .controller import WizardController, WizardSession, WizardState
from .messages import (
    CONFIRM_KEY,
    Command,
    KeyMsg,
    Msg,
    ProjectCreatedMsg,
    ProjectFailedMsg,
    SelectMsg,
    SetValueMsg,
)

CANCEL = KeyMsg("esc")
CONFIRM = KeyMsg(CONFIRM_KEY)

STYLE = Style(
    [
        ("qmark", "fg:#7D56F4 bold"),
        ("question", "bold"),
        ("answer", "fg:#04B575 bold"),
        ("pointer", "fg:#7D56F4 bold"),
        ("highlighted", "fg:#7D56F4 bold"),
        ("selected", "fg:#04B575"),
    ]
)


# ---------------------------------------------------------------------------
# Terminal collaborator
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Prompts and rendering used by the wizard.

    Every ``ask_*`` method returns ``None`` when the user cancels.
    """

    def render(self, screen: str) -> None: ...

    async def ask_text(self, message: str, placeholder: str) -> str | None: ...

    async def ask_select(
        self, message: str, items: Sequence[ArchetypeDescriptor], default: int
    ) -> int | None: ...

    async def ask_confirm(self, message: str) -> bool | None: ...

    async def pause(self, message: str) -> bool | None: ...


class QuestionaryTerminal:
    """Terminal backed by questionary prompts and the Rich console."""

    def render(self, screen: str) -> None:
        console.clear()
        console.print(screen)
        console.print()

    async def ask_text(self, message: str, placeholder: str) -> str | None:
        return await questionary.text(
            message,
            instruction=f"({placeholder})" if placeholder else None,
            qmark=">",
            style=STYLE,
        ).ask_async(kbi_msg="")

    async def ask_select(
        self, message: str, items: Sequence[ArchetypeDescriptor], default: int
    ) -> int | None:
        choices = [
            Choice(f"{item.name} - {item.description}", value=index)
            for index, item in enumerate(items)
        ]
        return await questionary.select(
            message,
            choices=choices,
            default=choices[default],
            qmark=">",
            style=STYLE,
        ).ask_async(kbi_msg="")

    async def ask_confirm(self, message: str) -> bool | None:
        return await questionary.confirm(
            message, default=True, qmark=">", style=STYLE
        ).ask_async(kbi_msg="")

    async def pause(self, message: str) -> bool | None:
        # The prompt answers None whether or not a key was pressed, so
        # cancellation is detected from the interrupt itself.
        try:
            await questionary.press_any_key_to_continue(
                message, style=STYLE
            ).unsafe_ask_async()
        except KeyboardInterrupt:
            return None
        return True


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


class WizardApp:
    """Runs the controller against a terminal until it asks to quit."""

    def __init__(
        self,
        config: Config | None = None,
        terminal: Terminal | None = None,
    ) -> None:
        self.config = config or Config()
        self.terminal = terminal or QuestionaryTerminal()
        self.controller = WizardController(self.config)
        self.queue: asyncio.Queue[Msg] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None

    @property
    def session(self) -> WizardSession:
        return self.controller.session

    async def run(self) -> WizardSession:
        """Drive the wizard to completion and return the final session."""
        while True:
            self.terminal.render(self.controller.view())

            if self.queue.empty() and self.controller.state is not WizardState.CREATING:
                for msg in await self._read_input():
                    self.queue.put_nowait(msg)

            if self.controller.state is WizardState.CREATING:
                with create_status("Creating project..."):
                    # Re-raises anything other than a ScaffoldError.
                    if self._task is not None:
                        await self._task
                    msg = await self.queue.get()
            else:
                msg = await self.queue.get()

            command = self.controller.update(msg)
            # Apply anything else already queued from the same input before
            # rendering again.
            while command is None and not self.queue.empty():
                command = self.controller.update(self.queue.get_nowait())

            if command is Command.QUIT:
                break
            if command is Command.CREATE_PROJECT:
                self._task = asyncio.create_task(self._create_project())

        if self._task is not None:
            await self._task
        return self.session

    async def _read_input(self) -> list[Msg]:
        """Prompt for the current state and translate the answer into messages."""
        state = self.controller.state
        controller = self.controller

        if state is WizardState.AWAITING_NAME:
            value = await self.terminal.ask_text(
                "Project name", controller.name_input.placeholder
            )
            return [CANCEL] if value is None else [SetValueMsg(value.strip()), CONFIRM]

        if state is WizardState.AWAITING_REPO:
            value = await self.terminal.ask_text(
                "Git repository path", controller.repo_input.placeholder
            )
            return [CANCEL] if value is None else [SetValueMsg(value.strip()), CONFIRM]

        if state is WizardState.AWAITING_TYPE:
            index = await self.terminal.ask_select(
                "Project type", controller.type_list.items, controller.type_list.cursor
            )
            return [CANCEL] if index is None else [SelectMsg(index), CONFIRM]

        if state is WizardState.CONFIRMING:
            answer = await self.terminal.ask_confirm("Create project?")
            return [CONFIRM] if answer else [CANCEL]

        if state is WizardState.DONE:
            answer = await self.terminal.pause("Press Enter to exit")
            return [CANCEL] if answer is None else [CONFIRM]

        return []

    async def _create_project(self) -> None:
        """Run the generator and post its outcome back onto the queue."""
        generator = ProjectGenerator(
            self.session.project_config(), options=self.config.scaffold
        )
        try:
            result = await generator.generate(Path(self.config.output_dir))
        except ScaffoldError as exc:
            self.queue.put_nowait(ProjectFailedMsg(exc))
        else:
            self.queue.put_nowait(ProjectCreatedMsg(result))


async def run_wizard(
    config: Config | None = None, terminal: Terminal | None = None
) -> WizardSession:
    """Convenience wrapper: build a :class:`WizardApp` and run it."""
    return await WizardApp(config, terminal).run()
