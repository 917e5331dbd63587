"""Rendering of verdicts: one-line messages, JSON and the batch table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

from .classification import Classification, Status
from .operations import Pop, Push
from .parse import Batch
from .testers import Discipline

# Verdict strings of the batch output format; consumers match on them exactly.
IMPOSSIBLE_PL = "niemozliwe"
UNCERTAIN_PL = "brak pewnosci"

LANGUAGES = ("pl", "en")


def discipline_label(name: str, lang: str = "pl") -> str:
    """Display name for a discipline identifier in ``lang``."""
    discipline = Discipline.from_name(name)
    if discipline is None:
        return name
    return discipline.label if lang == "pl" else discipline.value


def format_result(result: Classification, *, lang: str = "pl") -> str:
    """One-line verdict, as printed per batch."""
    match result.status, result.matching:
        case Status.IDENTIFIED, (name, *_):
            return discipline_label(name, lang)
        case Status.UNCERTAIN, _:
            return UNCERTAIN_PL if lang == "pl" else "uncertain"
        case _:
            return IMPOSSIBLE_PL if lang == "pl" else "impossible"


def report_json(
    result: Classification, *, index: int | None = None, lang: str = "pl"
) -> dict[str, Any]:
    """Machine-readable verdict for pipeline integration."""
    payload: dict[str, Any] = {
        "status": result.status.value,
        "matching": list(result.matching),
        "message": format_result(result, lang=lang),
    }
    if index is not None:
        payload["batch"] = index
    return payload


@dataclass(frozen=True)
class BatchRow:
    """A batch together with the verdict it received."""

    index: int
    batch: Batch
    result: Classification

    @property
    def pushes(self) -> int:
        return sum(1 for op in self.batch.operations if isinstance(op, Push))

    @property
    def pops(self) -> int:
        return sum(1 for op in self.batch.operations if isinstance(op, Pop))


def print_batch_table(rows: list[BatchRow], out: TextIO, *, lang: str = "pl") -> None:
    """Print a per-batch summary table.

    Columns: # | Ops | Push | Pop | Verdict | Matching
    """
    out.write("\n")
    out.write("     # │  Ops │ Push │  Pop │ Verdict    │ Matching\n")
    out.write("  ─────┼──────┼──────┼──────┼────────────┼─────────────────────────\n")

    counts = {status: 0 for status in Status}
    for r in rows:
        counts[r.result.status] += 1
        matching = ", ".join(discipline_label(n, lang) for n in r.result.matching) or "—"
        out.write(
            f"  {r.index:>4} │ {len(r.batch.operations):>4} │ {r.pushes:>4} │ {r.pops:>4} "
            f"│ {r.result.status.value:<10} │ {matching}\n"
        )

    out.write("  ─────┼──────┼──────┼──────┼────────────┼─────────────────────────\n")

    n = len(rows)
    identified_pct = (counts[Status.IDENTIFIED] / n) * 100 if n else 0.0
    out.write(
        f"  TOTALS ({n} batches)  identified: {counts[Status.IDENTIFIED]}  "
        f"uncertain: {counts[Status.UNCERTAIN]}  impossible: {counts[Status.IMPOSSIBLE]}\n"
    )
    out.write(f"\n  Identified rate:  {identified_pct:5.1f}%\n\n")
