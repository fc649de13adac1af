"""Input widgets driven by the wizard controller.

Both widgets hold plain state and render to Rich markup strings; neither
talks to the terminal.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape

from whisk.config import InputConfig, ThemeConfig
from whisk.scaffolder.archetypes import ArchetypeDescriptor


class TextInput:
    """A single-line text field with a placeholder and a character limit."""

    def __init__(self, config: InputConfig) -> None:
        self.placeholder = config.placeholder
        self.char_limit = config.char_limit
        self.width = config.width
        self.focused = False
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value[: self.char_limit]

    def insert(self, text: str) -> None:
        self.set_value(self._value + text)

    def backspace(self) -> None:
        self._value = self._value[:-1]

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def view(self) -> str:
        """Render the prompt, the value (or dimmed placeholder) and a cursor."""
        cursor = "█" if self.focused else ""
        if self._value:
            # Show the tail when the value is wider than the field.
            visible = self._value[-self.width :]
            return f"> {escape(visible)}{cursor}"
        return f"> {cursor}[dim]{escape(self.placeholder[: self.width])}[/dim]"


class SelectList:
    """A single-selection list over a fixed set of archetypes."""

    def __init__(
        self,
        items: Sequence[ArchetypeDescriptor],
        title: str = "Select project type",
        theme: ThemeConfig | None = None,
    ) -> None:
        if not items:
            raise ValueError("SelectList needs at least one item")
        self.items = list(items)
        self.title = title
        self.theme = theme or ThemeConfig()
        self.cursor = 0

    @property
    def selected(self) -> ArchetypeDescriptor:
        return self.items[self.cursor]

    def move(self, delta: int) -> None:
        self.select(self.cursor + delta)

    def select(self, index: int) -> None:
        """Move the cursor to *index*, clamped to the list bounds."""
        self.cursor = max(0, min(index, len(self.items) - 1))

    def view(self) -> str:
        lines = [f"[{self.theme.title_style}] {escape(self.title)} [/]", ""]
        for index, item in enumerate(self.items):
            if index == self.cursor:
                lines.append(f"│ [{self.theme.selected_style}]{escape(item.name)}[/]")
                lines.append(f"│ [{self.theme.selected_desc_fg}]{escape(item.description)}[/]")
            else:
                lines.append(f"  {escape(item.name)}")
                lines.append(f"  [dim]{escape(item.description)}[/dim]")
            lines.append("")
        lines.append(f"[dim]{self.cursor + 1}/{len(self.items)} items[/dim]")
        return "\n".join(lines)
