"""Classification of a trace: which disciplines survived it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    IMPOSSIBLE = "impossible"  # no discipline matches, or the trace is malformed
    UNCERTAIN = "uncertain"  # several disciplines match
    IDENTIFIED = "identified"  # exactly one discipline matches


@dataclass(frozen=True)
class Classification:
    """Outcome of one ``identify`` call.

    ``matching`` holds the surviving discipline names in registration order:
    empty when impossible, a single name when identified, two or more when
    uncertain.
    """

    status: Status
    matching: tuple[str, ...] = ()

    @classmethod
    def impossible(cls) -> Classification:
        return cls(Status.IMPOSSIBLE)

    @classmethod
    def uncertain(cls, names: Iterable[str]) -> Classification:
        return cls(Status.UNCERTAIN, tuple(names))

    @classmethod
    def identified(cls, name: str) -> Classification:
        return cls(Status.IDENTIFIED, (name,))

    @property
    def is_identified(self) -> bool:
        return self.status == Status.IDENTIFIED and len(self.matching) > 0

    @property
    def name(self) -> str | None:
        """The identified discipline, or None when not uniquely identified."""
        return self.matching[0] if self.is_identified else None
