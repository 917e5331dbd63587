"""Operations of a push/pop trace.

A trace is an ordered sequence of operations. Order is the only relation
between them:

    push 1, push 2, pop 2, pop 1

Externally each operation arrives as a ``(code, value)`` pair where code 1
is a push and code 2 is a pop of the claimed value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

logger = logging.getLogger(__name__)


class OpCode(Enum):
    PUSH = 1
    POP = 2


@dataclass(frozen=True)
class Push:
    """Insert ``value`` into the structure."""

    value: int


@dataclass(frozen=True)
class Pop:
    """Remove an element; ``value`` is what the trace claims came out."""

    value: int


Operation: TypeAlias = Push | Pop


def operation_from_pair(code: int, value: int) -> Operation | None:
    """Build an operation from an external pair. Unknown codes give None."""
    match code:
        case OpCode.PUSH.value:
            return Push(value)
        case OpCode.POP.value:
            return Pop(value)
        case _:
            return None


def operations_from_pairs(pairs: Iterable[tuple[int, int]]) -> list[Operation]:
    """Convert ``(code, value)`` pairs in order, dropping unknown codes."""
    ops: list[Operation] = []
    for i, (code, value) in enumerate(pairs):
        op = operation_from_pair(code, value)
        if op is None:
            logger.warning("Ignoring operation %d: unknown op code %d", i, code)
            continue
        ops.append(op)
    return ops
