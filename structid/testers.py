"""Structure testers: simulators of one removal discipline each.

A tester mirrors exactly what a real instance of its discipline would hold
after the same pushes and pops. The discipline set is closed; behaviour is
selected by matching on :class:`Discipline` rather than by subclassing.

    stack               LIFO
    queue               FIFO
    max-priority-queue  largest value first (binary max-heap)
    min-priority-queue  smallest value first (binary min-heap)
    fifo-deque          front removal from a double-ended queue
"""

from __future__ import annotations

import heapq
from collections import deque
from enum import Enum


class Discipline(Enum):
    STACK = "stack"
    QUEUE = "queue"
    MAX_PRIORITY_QUEUE = "max-priority-queue"
    MIN_PRIORITY_QUEUE = "min-priority-queue"
    FIFO_DEQUE = "fifo-deque"

    @property
    def label(self) -> str:
        """Polish display name kept for output compatibility."""
        return _LABELS[self]

    @classmethod
    def from_name(cls, text: str) -> Discipline | None:
        """Resolve an identifier (``"stack"``) or a label (``"stos"``)."""
        key = text.strip().lower()
        for discipline in cls:
            if key in (discipline.value, discipline.label.lower()):
                return discipline
        return None


_LABELS: dict[Discipline, str] = {
    Discipline.STACK: "stos",
    Discipline.QUEUE: "kolejka",
    Discipline.MAX_PRIORITY_QUEUE: "kolejka priorytetowa",
    Discipline.MIN_PRIORITY_QUEUE: "kolejka priorytetowa min",
    Discipline.FIFO_DEQUE: "deque (FIFO)",
}

DEFAULT_DISCIPLINES: tuple[Discipline, ...] = (
    Discipline.STACK,
    Discipline.QUEUE,
    Discipline.MAX_PRIORITY_QUEUE,
)

ALL_DISCIPLINES: tuple[Discipline, ...] = tuple(Discipline)


class StructureTester:
    """Simulated container for one discipline.

    ``peek`` and ``pop`` require a non-empty container and raise
    ``IndexError`` otherwise; ``test_pop`` is the guarded composite.
    """

    def __init__(self, discipline: Discipline):
        self.discipline = discipline
        self._items: list[int] | deque[int] = self._new_container()

    def __repr__(self) -> str:
        return f"StructureTester({self.discipline.value!r}, size={len(self)})"

    def __len__(self) -> int:
        return len(self._items)

    @property
    def name(self) -> str:
        return self.discipline.value

    def _new_container(self) -> list[int] | deque[int]:
        match self.discipline:
            case Discipline.QUEUE | Discipline.FIFO_DEQUE:
                return deque()
            case _:
                return []

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def reset(self) -> None:
        self._items = self._new_container()

    def push(self, value: int) -> None:
        match self.discipline, self._items:
            case Discipline.MAX_PRIORITY_QUEUE, list() as heap:
                # heapq is a min-heap; store negated values
                heapq.heappush(heap, -value)
            case Discipline.MIN_PRIORITY_QUEUE, list() as heap:
                heapq.heappush(heap, value)
            case _, items:
                items.append(value)

    def peek(self) -> int:
        if self.is_empty():
            raise IndexError(f"peek from empty {self.name}")
        match self.discipline:
            case Discipline.STACK:
                return self._items[-1]
            case Discipline.MAX_PRIORITY_QUEUE:
                return -self._items[0]
            case Discipline.QUEUE | Discipline.FIFO_DEQUE | Discipline.MIN_PRIORITY_QUEUE:
                return self._items[0]

    def pop(self) -> None:
        if self.is_empty():
            raise IndexError(f"pop from empty {self.name}")
        match self.discipline, self._items:
            case Discipline.STACK, list() as items:
                items.pop()
            case Discipline.QUEUE | Discipline.FIFO_DEQUE, deque() as items:
                items.popleft()
            case Discipline.MAX_PRIORITY_QUEUE | Discipline.MIN_PRIORITY_QUEUE, list() as heap:
                heapq.heappop(heap)
            case discipline, items:
                raise TypeError(
                    f"{discipline.value} tester holds a {type(items).__name__}"
                )

    def test_pop(self, expected: int) -> bool:
        """Pop and report whether the removed value equals ``expected``.

        An empty tester returns False without changing. Otherwise the
        tester always advances, whatever the comparison says, so its
        state stays aligned with the trace.
        """
        if self.is_empty():
            return False
        matches = self.peek() == expected
        self.pop()
        return matches
