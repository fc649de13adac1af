"""Whisk command-line entry point.

Usage::

    whisk
    whisk --output ./projects --go-version 1.22
    whisk --config whisk.json --strict
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from whisk.config import Config
from whisk.scaffolder.archetypes import get_descriptor
from whisk.utils import print_error, print_success, print_summary_table, print_warning
from whisk.wizard.app import run_wizard
from whisk.wizard.controller import WizardSession, WizardState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whisk",
        description="Whisk -- interactive Go project creator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  whisk\n"
            "  whisk -o ./projects\n"
            "  whisk --config whisk.json --strict\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--go-version",
        default=None,
        help="Go version pinned in go.mod (default: 1.21)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when archetype subdirectories or handlers cannot be created",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON configuration file (default: WHISK_* environment variables)",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the effective configuration: file or environment, then CLI flags."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.go_version:
        config.scaffold.go_version = args.go_version
    if args.strict:
        config.scaffold.strict = True
    return config


def report(session: WizardSession) -> None:
    """Print the closing report once the wizard has exited."""
    if session.state is not WizardState.DONE:
        print_warning("Cancelled, nothing was written.")
        return

    if session.last_error is not None or session.result is None:
        print_error(f"Error creating project: {escape(str(session.last_error))}")
        return

    result = session.result
    print_summary_table(
        {
            "Project root": escape(str(result.project_root)),
            "Module": escape(session.repository_path),
            "Project type": get_descriptor(session.archetype).name,
            "Files written": str(len(result.files)),
        },
        title="Project",
    )
    for path in result.skipped:
        print_warning(f"Skipped: {escape(str(path))}")
    print_success(f"Go project ready in {escape(str(result.project_root))}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``whisk`` and ``python -m whisk``.

    Exits 0 whether the wizard was cancelled, finished, or reported a
    generation error.  Only an unusable configuration exits 1.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    try:
        session = asyncio.run(run_wizard(config))
    except KeyboardInterrupt:
        pass
    else:
        report(session)
    sys.exit(0)


if __name__ == "__main__":
    main()
