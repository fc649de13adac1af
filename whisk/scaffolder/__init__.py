"""Whisk scaffolder -- generates Go project skeletons.

Quick usage::

    from whisk.scaffolder import Archetype, ProjectConfig, ProjectGenerator

    config = ProjectConfig(
        name="demo",
        repo_path="example.com/u/demo",
        archetype=Archetype.SERVER,
    )
    result = await ProjectGenerator(config).generate("/tmp/output")
"""

from whisk.scaffolder.archetypes import (
    ARCHETYPES,
    Archetype,
    ArchetypeDescriptor,
    get_descriptor,
)
from whisk.scaffolder.generator import (
    ProjectConfig,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldResult,
)
from whisk.scaffolder.templates import TemplateRenderer

__all__ = [
    "ARCHETYPES",
    "Archetype",
    "ArchetypeDescriptor",
    "ProjectConfig",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateRenderer",
    "get_descriptor",
]
