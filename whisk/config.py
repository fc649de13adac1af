"""Whisk configuration.

Centralised, typed configuration for the wizard and the scaffolder. All
settings use Pydantic v2 models so they can be validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class InputConfig(BaseModel):
    """Settings for a single-line text input."""

    placeholder: str = Field(default="")
    char_limit: int = Field(default=50, ge=1)
    width: int = Field(default=30, ge=1)


def _name_input() -> InputConfig:
    return InputConfig(placeholder="my-awesome-project", char_limit=50, width=30)


def _repo_input() -> InputConfig:
    return InputConfig(
        placeholder="github.com/username/my-awesome-project",
        char_limit=100,
        width=40,
    )


class ThemeConfig(BaseModel):
    """Colours used when rendering the wizard.

    Purely cosmetic: nothing in the state machine depends on these values.
    """

    title_fg: str = Field(default="#FAFAFA")
    title_bg: str = Field(default="#7D56F4")
    info_fg: str = Field(default="#FAFAFA")
    success_fg: str = Field(default="#04B575")
    selected_fg: str = Field(default="#FFFFFF")
    selected_desc_fg: str = Field(default="#DDDDDD")

    @property
    def title_style(self) -> str:
        return f"bold {self.title_fg} on {self.title_bg}"

    @property
    def info_style(self) -> str:
        return f"italic {self.info_fg}"

    @property
    def success_style(self) -> str:
        return f"bold {self.success_fg}"

    @property
    def selected_style(self) -> str:
        return f"bold {self.selected_fg} on {self.title_bg}"


class ScaffoldConfig(BaseModel):
    """Knobs for the project generator."""

    go_version: str = Field(default="1.21", min_length=1, description="Version pinned in go.mod")
    dir_mode: int = Field(default=0o755, ge=0, le=0o777)
    file_mode: int = Field(default=0o644, ge=0, le=0o777)
    strict: bool = Field(
        default=False,
        description="Fail on archetype extras (subdirectories, handlers) instead of skipping them",
    )


class Config(BaseModel):
    """Global Whisk configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the wizard app and the generator.
    """

    output_dir: Path = Field(default=Path("."))
    name_input: InputConfig = Field(default_factory=_name_input)
    repo_input: InputConfig = Field(default_factory=_repo_input)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            WHISK_OUTPUT_DIR, WHISK_GO_VERSION, WHISK_STRICT.
        """
        scaffold_kwargs: dict[str, Any] = {}
        if os.environ.get("WHISK_GO_VERSION"):
            scaffold_kwargs["go_version"] = os.environ["WHISK_GO_VERSION"]
        if os.environ.get("WHISK_STRICT"):
            scaffold_kwargs["strict"] = os.environ["WHISK_STRICT"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

        return cls(
            output_dir=Path(os.environ.get("WHISK_OUTPUT_DIR", ".")),
            scaffold=ScaffoldConfig(**scaffold_kwargs),
        )
