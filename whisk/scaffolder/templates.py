"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``whisk/scaffolder/templates/`` directory and renders them with project
context data.  Templates only substitute variables; they carry no loops or
conditionals.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Missing context variables raise instead of rendering
    as empty strings, so a broken template never produces a silently wrong
    file.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"server/main.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
        *,
        mode: int = 0o644,
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The file is created or truncated.  Its parent directory must already
        exist.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, content, mode)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def write_file(path: Path, content: str, mode: int = 0o644) -> None:
    """Synchronous helper: write *content* and apply *mode*."""
    path.write_text(content, encoding="utf-8")
    path.chmod(mode)
