"""Batch input format.

Input is a stream of whitespace-separated integers. Each batch is a count
``n`` followed by ``n`` pairs ``code value`` (1 = push, 2 = pop); batches
repeat until the end of the input:

    4
    1 1  1 2  2 2  2 1
    2
    1 5  2 3

Failures come back as ``Err(ParseError)`` rather than being raised;
:func:`iter_batches` delivers the batches read before the failure.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .operations import Operation, operations_from_pairs
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Malformed batch input."""


@dataclass(frozen=True)
class Batch:
    """One trace read from the input."""

    count: int
    """Number of pairs declared by the batch header."""

    operations: tuple[Operation, ...]
    """Operations in order, with unknown op codes already dropped."""


def _read_ints(raw: list[str], start: int, n: int) -> Result[list[int], ParseError]:
    values: list[int] = []
    for position in range(start, start + n):
        try:
            values.append(int(raw[position]))
        except ValueError:
            return Err(
                ParseError(f"Token {position} is not an integer: {raw[position]!r}")
            )
    return Ok(values)


def tokenize(text: str) -> Result[list[int], ParseError]:
    raw = text.split()
    return _read_ints(raw, 0, len(raw))


def iter_batches(text: str) -> Iterator[Result[Batch, ParseError]]:
    """Yield ``Ok(batch)`` for each complete batch, in input order.

    Stops after yielding a single ``Err`` at the first malformed batch, so
    the batches before it are still delivered.
    """
    raw = text.split()
    number = 1
    pos = 0
    while pos < len(raw):
        match _read_ints(raw, pos, 1):
            case Err() as err:
                yield err
                return
            case Ok([count]):
                pass
        pos += 1
        if count < 0:
            yield Err(ParseError(f"Batch {number} has a negative count: {count}"))
            return

        available = (len(raw) - pos) // 2
        if count > available:
            yield Err(
                ParseError(
                    f"Batch {number} declares {count} operations, "
                    f"input ends after {available}"
                )
            )
            return

        match _read_ints(raw, pos, 2 * count):
            case Err() as err:
                yield err
                return
            case Ok(flat):
                pass
        pos += 2 * count

        pairs = list(zip(flat[0::2], flat[1::2], strict=True))
        logger.debug("Batch %d: %d operations", number, count)
        yield Ok(Batch(count=count, operations=tuple(operations_from_pairs(pairs))))
        number += 1


def parse_batches(text: str) -> Result[list[Batch], ParseError]:
    """Split the whole input into batches; any malformed batch fails it all."""
    batches: list[Batch] = []
    for item in iter_batches(text):
        match item:
            case Err() as err:
                return err
            case Ok(batch):
                batches.append(batch)
    return Ok(batches)
