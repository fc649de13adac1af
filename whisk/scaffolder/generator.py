"""Go project scaffolding.

Takes a ``ProjectConfig`` (name, module path, archetype) and writes the
project directory: ``go.mod``, ``main.go``, ``README.md``, ``.gitignore`` and
the archetype extras.  Steps run in order and stop at the first I/O failure;
nothing already written is rolled back.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from whisk.config import ScaffoldConfig
from .archetypes import Archetype
from .templates import TemplateRenderer
from whisk.utils import ensure_dir


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a required directory or file cannot be created.

    ``str(err)`` is the underlying error message so it can be shown to the
    user as-is.  The cause is an ``OSError``, or a ``ValueError`` for a path
    the OS cannot represent (an embedded NUL, for instance).
    """

    def __init__(self, path: Path, cause: OSError | ValueError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(str(cause))


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    name: str = Field(..., min_length=1, description="Project directory name")
    repo_path: str = Field(..., min_length=1, description="Go module path written to go.mod")
    archetype: Archetype = Field(default=Archetype.CLI)


class ScaffoldResult(BaseModel):
    """Outcome of a successful generation run."""

    project_root: Path
    files: list[Path] = Field(default_factory=list)
    directories: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(
        default_factory=list,
        description="Best-effort paths that could not be created",
    )


# Archetype -> (directories, (template, output) pairs) created after the
# required files.
_EXTRAS: dict[Archetype, tuple[list[str], list[tuple[str, str]]]] = {
    Archetype.CLI: (["cmd", "internal"], []),
    Archetype.SERVER: (
        ["api", "internal/handlers", "internal/middleware"],
        [("server/health.go.j2", "internal/handlers/health.go")],
    ),
    Archetype.LIBRARY: ([], []),
}


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a Go project skeleton for one archetype.

    Generated tree::

        <name>/
          go.mod
          main.go
          README.md
          .gitignore
          cmd/ internal/                                  (cli)
          api/ internal/handlers/ internal/middleware/
          internal/handlers/health.go                     (server)
    """

    def __init__(
        self,
        config: ProjectConfig,
        options: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.options = options or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path = ".") -> ScaffoldResult:
        """Generate the project structure.

        Args:
            output_dir: Parent directory where the project folder is created.

        Returns:
            A ``ScaffoldResult`` listing what was written.

        Raises:
            ScaffoldError: On the first failure creating the project root or
                one of the required files, or an extras failure in strict
                mode.
        """
        root = Path(output_dir) / self.config.name
        result = ScaffoldResult(project_root=root)
        context = self._build_context()

        # 1. Project root
        await self._mkdir(root, result)

        # 2-5. Required files
        for template_name, output_name in self._required_files():
            await self._render(template_name, root / output_name, context, result)

        # 6. Archetype extras
        await self._create_extras(root, context, result)

        return result

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": self.config.name,
            "repo_path": self.config.repo_path,
            "archetype": self.config.archetype.value,
            "go_version": self.options.go_version,
        }

    def _required_files(self) -> list[tuple[str, str]]:
        return [
            ("common/go.mod.j2", "go.mod"),
            (f"{self.config.archetype.value}/main.go.j2", "main.go"),
            ("common/README.md.j2", "README.md"),
            ("common/gitignore.j2", ".gitignore"),
        ]

    # -- Filesystem steps --------------------------------------------------

    async def _mkdir(self, path: Path, result: ScaffoldResult) -> None:
        try:
            await asyncio.to_thread(ensure_dir, path, self.options.dir_mode)
        except (OSError, ValueError) as exc:
            raise ScaffoldError(path, exc) from exc
        result.directories.append(path)

    async def _render(
        self,
        template_name: str,
        path: Path,
        context: dict[str, Any],
        result: ScaffoldResult,
    ) -> None:
        try:
            await self.renderer.render_to_file(
                template_name, path, context, mode=self.options.file_mode
            )
        except (OSError, ValueError) as exc:
            raise ScaffoldError(path, exc) from exc
        result.files.append(path)

    async def _create_extras(
        self, root: Path, context: dict[str, Any], result: ScaffoldResult
    ) -> None:
        """Create archetype subdirectories and handler files.

        Unless ``options.strict`` is set, failures are recorded in
        ``result.skipped`` and the remaining extras are still attempted.
        """
        directories, files = _EXTRAS[self.config.archetype]

        for rel in directories:
            path = root / rel
            try:
                await self._mkdir(path, result)
            except ScaffoldError:
                if self.options.strict:
                    raise
                result.skipped.append(path)

        for template_name, rel in files:
            path = root / rel
            try:
                await self._render(template_name, path, context, result)
            except ScaffoldError:
                if self.options.strict:
                    raise
                result.skipped.append(path)
