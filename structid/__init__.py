"""structid: identify a data structure discipline from a push/pop trace."""

from .operations import OpCode, Operation, Pop, Push, operation_from_pair, operations_from_pairs
from .testers import ALL_DISCIPLINES, DEFAULT_DISCIPLINES, Discipline, StructureTester
from .classification import Classification, Status
from .identifier import (
    StructureIdentifier,
    create_default_identifier,
    create_full_identifier,
    create_identifier,
)
from .parse import Batch, ParseError, parse_batches
from .report import format_result, report_json
from .result import Ok, Err, Result

__all__ = [
    # Operations
    "OpCode", "Operation", "Pop", "Push", "operation_from_pair", "operations_from_pairs",
    # Testers
    "ALL_DISCIPLINES", "DEFAULT_DISCIPLINES", "Discipline", "StructureTester",
    # Classification
    "Classification", "Status",
    # Engine
    "StructureIdentifier", "create_default_identifier", "create_full_identifier",
    "create_identifier",
    # Adapters
    "Batch", "ParseError", "parse_batches", "format_result", "report_json",
    # Result
    "Ok", "Err", "Result",
]
