"""Tests for structid/testers.py — per-discipline simulators."""

import pytest

from structid.testers import (
    ALL_DISCIPLINES,
    DEFAULT_DISCIPLINES,
    Discipline,
    StructureTester,
)


def drain(tester: StructureTester) -> list[int]:
    out = []
    while not tester.is_empty():
        out.append(tester.peek())
        tester.pop()
    return out


def filled(discipline: Discipline, values: list[int]) -> StructureTester:
    tester = StructureTester(discipline)
    for v in values:
        tester.push(v)
    return tester


class TestRemovalOrder:
    VALUES = [3, 1, 4, 1, 5, 9, 2, 6]

    def test_stack_is_lifo(self) -> None:
        assert drain(filled(Discipline.STACK, self.VALUES)) == list(reversed(self.VALUES))

    def test_queue_is_fifo(self) -> None:
        assert drain(filled(Discipline.QUEUE, self.VALUES)) == self.VALUES

    def test_fifo_deque_removes_from_front(self) -> None:
        assert drain(filled(Discipline.FIFO_DEQUE, self.VALUES)) == self.VALUES

    def test_max_priority_queue_is_descending(self) -> None:
        assert drain(filled(Discipline.MAX_PRIORITY_QUEUE, self.VALUES)) == sorted(
            self.VALUES, reverse=True
        )

    def test_min_priority_queue_is_ascending(self) -> None:
        assert drain(filled(Discipline.MIN_PRIORITY_QUEUE, self.VALUES)) == sorted(self.VALUES)

    def test_negative_values_in_max_heap(self) -> None:
        assert drain(filled(Discipline.MAX_PRIORITY_QUEUE, [-5, 0, -1])) == [0, -1, -5]

    def test_interleaved_pushes_and_pops(self) -> None:
        tester = filled(Discipline.MAX_PRIORITY_QUEUE, [2, 7])
        assert tester.peek() == 7
        tester.pop()
        tester.push(5)
        tester.push(1)
        assert drain(tester) == [5, 2, 1]


class TestTestPop:
    def test_match_advances(self) -> None:
        tester = filled(Discipline.STACK, [1, 2])
        assert tester.test_pop(2) is True
        assert len(tester) == 1
        assert tester.peek() == 1

    def test_mismatch_still_advances(self) -> None:
        tester = filled(Discipline.QUEUE, [1, 2])
        assert tester.test_pop(2) is False
        assert len(tester) == 1
        assert tester.peek() == 2

    def test_empty_returns_false_without_mutating(self) -> None:
        tester = StructureTester(Discipline.STACK)
        assert tester.test_pop(1) is False
        assert tester.is_empty()


@pytest.mark.parametrize("discipline", ALL_DISCIPLINES)
def test_peek_and_pop_on_empty_raise(discipline: Discipline) -> None:
    tester = StructureTester(discipline)
    with pytest.raises(IndexError):
        tester.peek()
    with pytest.raises(IndexError):
        tester.pop()


@pytest.mark.parametrize("discipline", ALL_DISCIPLINES)
def test_reset_empties(discipline: Discipline) -> None:
    tester = filled(discipline, [1, 2, 3])
    assert len(tester) == 3
    tester.reset()
    assert tester.is_empty()
    tester.push(4)
    assert tester.peek() == 4


def test_names_are_stable_identifiers() -> None:
    assert [StructureTester(d).name for d in ALL_DISCIPLINES] == [
        "stack",
        "queue",
        "max-priority-queue",
        "min-priority-queue",
        "fifo-deque",
    ]


def test_polish_labels() -> None:
    assert Discipline.STACK.label == "stos"
    assert Discipline.QUEUE.label == "kolejka"
    assert Discipline.MAX_PRIORITY_QUEUE.label == "kolejka priorytetowa"
    assert Discipline.MIN_PRIORITY_QUEUE.label == "kolejka priorytetowa min"
    assert Discipline.FIFO_DEQUE.label == "deque (FIFO)"


def test_from_name_accepts_identifier_and_label() -> None:
    assert Discipline.from_name("stack") is Discipline.STACK
    assert Discipline.from_name(" Kolejka ") is Discipline.QUEUE
    assert Discipline.from_name("deque (FIFO)") is Discipline.FIFO_DEQUE
    assert Discipline.from_name("DEQUE (fifo)") is Discipline.FIFO_DEQUE
    assert Discipline.from_name("heap") is None


def test_default_disciplines_order() -> None:
    assert DEFAULT_DISCIPLINES == (
        Discipline.STACK,
        Discipline.QUEUE,
        Discipline.MAX_PRIORITY_QUEUE,
    )
