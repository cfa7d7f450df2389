"""Per-artifact request state for the result screen.

Each generated artifact (press release text, poster, website) owns one
:class:`ArtifactSlot`. Starting a request hands out an :class:`ArtifactTicket`
carrying the slot's new epoch; a response is only committed when its ticket is
still the latest one for a slot of the same session generation. Older
responses (double clicks, interrupted reruns, answers arriving after a restart)
are dropped.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

ARTIFACT_TEXT = "text"
ARTIFACT_POSTER = "poster"
ARTIFACT_WEBSITE = "website"
ARTIFACT_NAMES = (ARTIFACT_TEXT, ARTIFACT_POSTER, ARTIFACT_WEBSITE)


class ArtifactStatus(str, Enum):
    NOT_REQUESTED = "not_requested"
    PENDING = "pending"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class ArtifactTicket:
    name: str
    generation: int
    epoch: int


@dataclass(slots=True)
class ArtifactSlot:
    name: str
    generation: int = 0
    status: ArtifactStatus = ArtifactStatus.NOT_REQUESTED
    value: Any = None
    epoch: int = 0

    def begin(self) -> ArtifactTicket:
        self.epoch += 1
        self.status = ArtifactStatus.PENDING
        return ArtifactTicket(name=self.name, generation=self.generation, epoch=self.epoch)

    def is_current(self, ticket: ArtifactTicket) -> bool:
        return (
            ticket.name == self.name
            and ticket.generation == self.generation
            and ticket.epoch == self.epoch
        )

    def commit(self, ticket: ArtifactTicket, value: Any) -> bool:
        """Store ``value`` if ``ticket`` is still the latest request."""

        if not self.is_current(ticket):
            return False
        self.value = value
        self.status = ArtifactStatus.READY
        return True

    @property
    def is_ready(self) -> bool:
        return self.status is ArtifactStatus.READY

    @property
    def has_value(self) -> bool:
        """Ready with something to show; a poster that came back empty has nothing."""
        return self.is_ready and self.value is not None


def new_slots(generation: int) -> dict[str, ArtifactSlot]:
    return {name: ArtifactSlot(name=name, generation=generation) for name in ARTIFACT_NAMES}


__all__ = [
    "ARTIFACT_NAMES",
    "ARTIFACT_POSTER",
    "ARTIFACT_TEXT",
    "ARTIFACT_WEBSITE",
    "ArtifactSlot",
    "ArtifactStatus",
    "ArtifactTicket",
    "new_slots",
]
