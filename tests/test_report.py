"""Tests for structid/report.py — rendering of verdicts."""

import io

from structid.classification import Classification
from structid.operations import Pop, Push
from structid.parse import Batch
from structid.report import BatchRow, format_result, print_batch_table, report_json


def test_polish_output_strings() -> None:
    assert format_result(Classification.impossible()) == "niemozliwe"
    assert format_result(Classification.uncertain(["stack", "queue"])) == "brak pewnosci"
    assert format_result(Classification.identified("stack")) == "stos"
    assert format_result(Classification.identified("queue")) == "kolejka"
    assert (
        format_result(Classification.identified("max-priority-queue"))
        == "kolejka priorytetowa"
    )


def test_english_output() -> None:
    assert format_result(Classification.impossible(), lang="en") == "impossible"
    assert format_result(Classification.uncertain(["a", "b"]), lang="en") == "uncertain"
    assert format_result(Classification.identified("fifo-deque"), lang="en") == "fifo-deque"


def test_report_json() -> None:
    payload = report_json(Classification.uncertain(["stack", "max-priority-queue"]), index=3)
    assert payload == {
        "status": "uncertain",
        "matching": ["stack", "max-priority-queue"],
        "message": "brak pewnosci",
        "batch": 3,
    }


def test_report_json_without_index() -> None:
    assert "batch" not in report_json(Classification.impossible())


def test_batch_table() -> None:
    rows = [
        BatchRow(
            index=1,
            batch=Batch(4, (Push(1), Push(2), Pop(1), Pop(2))),
            result=Classification.identified("queue"),
        ),
        BatchRow(
            index=2,
            batch=Batch(1, (Pop(1),)),
            result=Classification.impossible(),
        ),
    ]
    out = io.StringIO()
    print_batch_table(rows, out)
    text = out.getvalue()

    assert "identified │ kolejka" in text
    assert "impossible │ —" in text
    assert "TOTALS (2 batches)  identified: 1  uncertain: 0  impossible: 1" in text
    assert "Identified rate:   50.0%" in text


def test_batch_row_counts() -> None:
    row = BatchRow(
        index=1,
        batch=Batch(3, (Push(1), Push(2), Pop(2))),
        result=Classification.identified("stack"),
    )
    assert row.pushes == 2
    assert row.pops == 1


def test_report_json_english_message() -> None:
    payload = report_json(Classification.identified("min-priority-queue"), lang="en")
    assert payload["message"] == "min-priority-queue"
