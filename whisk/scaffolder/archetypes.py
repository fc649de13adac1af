"""Project archetypes.

The archetype set is closed: every generator and view branch matches on
:class:`Archetype` exhaustively.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Archetype(str, Enum):
    """Kind of Go project to scaffold."""

    CLI = "cli"
    SERVER = "server"
    LIBRARY = "library"


class ArchetypeDescriptor(BaseModel):
    """Display metadata for an archetype."""

    model_config = ConfigDict(frozen=True)

    archetype: Archetype
    description: str

    @property
    def name(self) -> str:
        return self.archetype.value


# Display order; the first entry is the default selection.
ARCHETYPES: tuple[ArchetypeDescriptor, ...] = (
    ArchetypeDescriptor(archetype=Archetype.CLI, description="Command-line application"),
    ArchetypeDescriptor(archetype=Archetype.SERVER, description="HTTP/API server"),
    ArchetypeDescriptor(archetype=Archetype.LIBRARY, description="Reusable package/library"),
)


def get_descriptor(archetype: Archetype | str) -> ArchetypeDescriptor:
    """Return the descriptor for *archetype*.

    Raises:
        ValueError: If *archetype* is not a known archetype value.
    """
    kind = Archetype(archetype)
    for descriptor in ARCHETYPES:
        if descriptor.archetype is kind:
            return descriptor
    raise ValueError(f"Unknown archetype: {archetype!r}")
