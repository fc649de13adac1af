"""Whisk wizard -- collects project settings in the terminal.

Quick usage::

    from whisk.wizard import run_wizard

    session = await run_wizard()
    print(session.state, session.last_error)
"""

from whisk.wizard.app import QuestionaryTerminal, Terminal, WizardApp, run_wizard
from whisk.wizard.controller import WizardController, WizardSession, WizardState
from whisk.wizard.messages import (
    Command,
    KeyMsg,
    ProjectCreatedMsg,
    ProjectFailedMsg,
    SelectMsg,
    SetValueMsg,
)

__all__ = [
    "Command",
    "KeyMsg",
    "ProjectCreatedMsg",
    "ProjectFailedMsg",
    "QuestionaryTerminal",
    "SelectMsg",
    "SetValueMsg",
    "Terminal",
    "WizardApp",
    "WizardController",
    "WizardSession",
    "WizardState",
    "run_wizard",
]
