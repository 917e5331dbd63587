"""Replay the traces in golden/ and compare against the recorded output.

``<name>.in`` holds batch input and ``<name>.out`` the expected verdicts, one
per line. Files named ``full-*`` run against every discipline; the rest use
the default identifier.
"""

from pathlib import Path

import pytest

from structid.identifier import create_default_identifier, create_full_identifier
from structid.parse import parse_batches
from structid.report import format_result
from structid.result import Err, Ok

GOLDEN_DIR = Path(__file__).parent.parent / "golden"
GOLDEN_INPUTS = sorted(GOLDEN_DIR.glob("*.in"))


def test_golden_dir_is_populated() -> None:
    assert GOLDEN_INPUTS, f"No golden traces found in {GOLDEN_DIR}"


@pytest.mark.parametrize("path", GOLDEN_INPUTS, ids=lambda p: p.stem)
def test_golden_trace(path: Path) -> None:
    expected = path.with_suffix(".out").read_text().splitlines()

    match parse_batches(path.read_text()):
        case Err(e):
            pytest.fail(f"{path.name}: {e}")
        case Ok(batches):
            pass

    if path.stem.startswith("full-"):
        identifier = create_full_identifier()
    else:
        identifier = create_default_identifier()

    actual = [format_result(identifier.identify(b.operations)) for b in batches]
    assert actual == expected
