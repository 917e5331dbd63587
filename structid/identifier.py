"""Identification engine.

Every registered tester sees the whole trace. Pushes go to all testers,
falsified or not, so that every tester has consumed the same pushes at every
point of the trace. Pops are checked against each tester with
``test_pop``; the first disagreement falsifies a tester for the rest of the
call. The surviving names reduce to a :class:`Classification`.

A pop while the first registered tester is empty makes the trace malformed
and the whole call impossible. All testers hold the same number of elements
at all times, so the first one stands in for the rest.

An engine is not reentrant: ``identify`` resets the shared tester state, so
calls on one instance must not overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from .classification import Classification
from .operations import Operation, Pop, Push, operations_from_pairs
from .parse import ParseError
from .result import Err, Ok, Result
from .testers import (
    ALL_DISCIPLINES,
    DEFAULT_DISCIPLINES,
    Discipline,
    StructureTester,
)

logger = logging.getLogger(__name__)


class StructureIdentifier:
    """Registry of testers plus the per-call validity flags."""

    def __init__(self) -> None:
        self._testers: list[StructureTester] = []
        self._valid: list[bool] = []

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._testers)
        return f"StructureIdentifier([{names}])"

    @property
    def tester_count(self) -> int:
        return len(self._testers)

    @property
    def disciplines(self) -> tuple[Discipline, ...]:
        """Registered disciplines in registration order."""
        return tuple(t.discipline for t in self._testers)

    def register_structure(self, discipline: Discipline) -> None:
        """Add a tester for ``discipline``. Call before any ``identify``."""
        if not isinstance(discipline, Discipline):
            raise TypeError(
                f"Expected Discipline, got {type(discipline).__name__}"
            )
        self._testers.append(StructureTester(discipline))
        self._valid.append(True)

    def identify(self, operations: Iterable[Operation]) -> Classification:
        """Run the trace through every tester and classify the survivors."""
        self._reset_all()

        has_invalid_op = False
        for i, op in enumerate(operations):
            match op:
                case Push(value):
                    self._push_all(value)
                case Pop(value):
                    if not self._testers or self._testers[0].is_empty():
                        logger.debug("Operation %d: pop %d from empty structure", i, value)
                        has_invalid_op = True
                        continue
                    self._test_pop_all(value, i)
                case _:
                    raise TypeError(f"Expected Operation, got {type(op).__name__}")

        return self._build_result(has_invalid_op)

    def identify_pairs(self, pairs: Iterable[tuple[int, int]]) -> Classification:
        """Identify a trace given as external ``(code, value)`` pairs."""
        return self.identify(operations_from_pairs(pairs))

    def identify_batch(
        self, tokens: Iterator[int], count: int
    ) -> Result[Classification, ParseError]:
        """Consume ``count`` pairs from a token stream and identify them.

        Returns ``Err(ParseError)`` when the stream ends before ``count``
        pairs were read.
        """
        pairs: list[tuple[int, int]] = []
        for _ in range(count):
            try:
                code = next(tokens)
                value = next(tokens)
            except StopIteration:
                return Err(
                    ParseError(
                        f"Expected {count} operations, stream ended after {len(pairs)}"
                    )
                )
            pairs.append((code, value))
        return Ok(self.identify_pairs(pairs))

    # ------------------------------------------------------------------

    def _reset_all(self) -> None:
        for tester in self._testers:
            tester.reset()
        self._valid = [True] * len(self._testers)

    def _push_all(self, value: int) -> None:
        for tester in self._testers:
            tester.push(value)

    def _test_pop_all(self, expected: int, index: int) -> None:
        for i, tester in enumerate(self._testers):
            if not tester.test_pop(expected) and self._valid[i]:
                logger.debug(
                    "Operation %d: %s falsified (expected pop %d)",
                    index,
                    tester.name,
                    expected,
                )
                self._valid[i] = False

    def _build_result(self, has_invalid_op: bool) -> Classification:
        matches = [
            tester.name
            for tester, valid in zip(self._testers, self._valid, strict=True)
            if valid
        ]

        match (has_invalid_op, matches):
            case (True, _) | (False, []):
                return Classification.impossible()
            case (False, [name]):
                return Classification.identified(name)
            case _:
                return Classification.uncertain(matches)


def create_identifier(disciplines: Sequence[Discipline]) -> StructureIdentifier:
    """Build an identifier with ``disciplines`` registered in order."""
    identifier = StructureIdentifier()
    for discipline in disciplines:
        identifier.register_structure(discipline)
    return identifier


def create_default_identifier() -> StructureIdentifier:
    """Stack, queue and max-priority-queue, in that order."""
    return create_identifier(DEFAULT_DISCIPLINES)


def create_full_identifier() -> StructureIdentifier:
    """Every available discipline."""
    return create_identifier(ALL_DISCIPLINES)
