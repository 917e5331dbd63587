import argparse
import json
import logging
import sys
from collections.abc import Sequence

from structid.config import Settings, load_settings, parse_disciplines, parse_log_level
from structid.identifier import create_identifier
from structid.parse import iter_batches
from structid.report import BatchRow, format_result, print_batch_table, report_json
from structid.result import Err, Ok, Result
from structid.testers import ALL_DISCIPLINES, Discipline

logger = logging.getLogger(__name__)


def read_input(files: Sequence[str]) -> Result[str, OSError]:
    """Concatenate the given files, or read stdin when none are given."""
    if not files or list(files) == ["-"]:
        return Ok(sys.stdin.read())

    chunks: list[str] = []
    for path in files:
        try:
            with open(path) as f:
                chunks.append(f.read())
        except OSError as e:
            return Err(e)
    return Ok("\n".join(chunks))


def handle_identify(
    files: Sequence[str],
    *,
    disciplines: Sequence[Discipline],
    lang: str,
    as_json: bool,
    verbose: bool,
) -> int:
    """Classify every batch in the input and print one verdict per batch."""
    match read_input(files):
        case Err(e):
            print(f"Could not read input: {e}", file=sys.stderr)
            return 1
        case Ok(text):
            pass

    identifier = create_identifier(disciplines)
    logger.info("Identifying batches with %r", identifier)

    # Verdicts are printed as batches are read; a malformed batch stops the
    # run after everything before it has been reported.
    status = 0
    rows: list[BatchRow] = []
    for i, item in enumerate(iter_batches(text), start=1):
        match item:
            case Err(e):
                print(f"Malformed input: {e}", file=sys.stderr)
                status = 1
                break
            case Ok(batch):
                pass
        result = identifier.identify(batch.operations)
        rows.append(BatchRow(index=i, batch=batch, result=result))
        if as_json:
            print(json.dumps(report_json(result, index=i, lang=lang)))
        else:
            print(format_result(result, lang=lang))

    if verbose:
        print_batch_table(rows, sys.stderr, lang=lang)

    return status


def handle_disciplines(disciplines: Sequence[Discipline]) -> int:
    for position, discipline in enumerate(disciplines, start=1):
        print(f"{position}. {discipline.value:<20} {discipline.label}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structid",
        description=(
            "Identify which data structure (stack, queue, priority queue, ...) "
            "is consistent with a trace of push/pop operations. "
            "Without a command, reads batches from stdin."
        ),
    )

    selection = argparse.ArgumentParser(add_help=False)
    group = selection.add_mutually_exclusive_group()
    group.add_argument(
        "--full",
        action="store_true",
        default=False,
        help="Test against every available discipline.",
    )
    group.add_argument(
        "--testers",
        type=str,
        metavar="LIST",
        help="Comma-separated disciplines to test, in display order.",
    )
    selection.add_argument(
        "--log-level",
        type=str,
        metavar="LEVEL",
        help="Logging level (default: STRUCTID_LOG_LEVEL or WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: identify
    identify_parser = subparsers.add_parser(
        "identify",
        parents=[selection],
        help="Classify each batch of operations read from FILE(s) or stdin.",
    )
    identify_parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input file(s). Reads stdin when omitted or '-'.",
    )
    identify_parser.add_argument(
        "--lang",
        choices=["pl", "en"],
        help="Verdict language (default: STRUCTID_LANG or pl).",
    )
    identify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print one JSON object per batch.",
    )
    identify_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Print a per-batch summary table to stderr.",
    )

    # Command: disciplines
    subparsers.add_parser(
        "disciplines",
        parents=[selection],
        help="List the disciplines that would be tested.",
    )

    return parser


def resolve_settings(args: argparse.Namespace) -> Result[Settings, ValueError]:
    """Environment settings with command-line flags applied on top."""
    match load_settings():
        case Err() as err:
            return err
        case Ok(settings):
            pass

    disciplines = settings.disciplines
    if getattr(args, "full", False):
        disciplines = ALL_DISCIPLINES
    elif getattr(args, "testers", None):
        match parse_disciplines(args.testers):
            case Err() as err:
                return err
            case Ok(disciplines):
                pass

    log_level = settings.log_level
    if getattr(args, "log_level", None):
        match parse_log_level(args.log_level):
            case Err() as err:
                return err
            case Ok(log_level):
                pass

    return Ok(
        Settings(
            disciplines=disciplines,
            lang=getattr(args, "lang", None) or settings.lang,
            log_level=log_level,
        )
    )


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match resolve_settings(args):
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1
        case Ok(settings):
            pass

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "identify":
            return handle_identify(
                args.files,
                disciplines=settings.disciplines,
                lang=settings.lang,
                as_json=args.json,
                verbose=args.verbose,
            )
        case "disciplines":
            return handle_disciplines(settings.disciplines)
        case None:
            return handle_identify(
                [],
                disciplines=settings.disciplines,
                lang=settings.lang,
                as_json=False,
                verbose=False,
            )
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Synchronous entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
