"""Command line interface for the psychometric scoring engine.

Scores a submission stored as JSON against a question bank stored as JSON
and prints the result to stdout. Errors are printed to stderr as JSON and
the process exits with a non-zero status.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from psychometrics.core.config import get_settings
from psychometrics.models.question import NormativeTable, QuestionBank
from psychometrics.models.submission import Submission
from psychometrics.services.scoring_service import ScoringService
from psychometrics.utils.constants import get_instrument_codes
from psychometrics.utils.exceptions import ScoringEngineError
from psychometrics.utils.logger import get_cli_logger

logger = get_cli_logger()


def load_json(path: str) -> Any:
    """Read a JSON document from a file, or from stdin when path is '-'."""
    if path == "-":
        return json.load(sys.stdin)
    with Path(path).open(encoding="utf-8") as handle:
        return json.load(handle)


def load_normative_table(path: str) -> NormativeTable:
    """Load normative data given as a list of entries or a factor mapping."""
    data = load_json(path)
    if isinstance(data, dict) and "entries" not in data:
        return NormativeTable.from_mapping(data)
    if isinstance(data, list):
        return NormativeTable.from_entries(data)
    return NormativeTable.from_dict(data)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="psychometrics",
        description="Psychometric test scoring and interpretation engine",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    instruments = ", ".join(get_instrument_codes())

    score = subparsers.add_parser("score", help="Score a submission")
    score.add_argument("--instrument", "-i", required=True, help=f"Instrument code ({instruments})")
    score.add_argument("--bank", "-b", required=True, help="Question bank JSON file")
    score.add_argument("--submission", "-s", required=True, help="Submission JSON file ('-' for stdin)")
    score.add_argument("--normative", "-n", help="Normative data JSON file (overrides the bank's)")
    score.add_argument("--allow-incomplete", action="store_true", default=None,
                       help="Score submissions with missing answers")
    score.add_argument("--compact", action="store_true", help="Print the result on one line")

    validate = subparsers.add_parser("validate", help="Check a submission without scoring it")
    validate.add_argument("--instrument", "-i", required=True, help=f"Instrument code ({instruments})")
    validate.add_argument("--bank", "-b", required=True, help="Question bank JSON file")
    validate.add_argument("--submission", "-s", required=True, help="Submission JSON file ('-' for stdin)")
    validate.add_argument("--allow-incomplete", action="store_true", default=None,
                          help="Accept submissions with missing answers")

    subparsers.add_parser("instruments", help="List the supported instruments")

    return parser


def _print_error(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2), file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command line usage.

    Args:
        argv: Arguments without the program name; defaults to sys.argv

    Returns:
        int: Process exit status
    """
    args = build_parser().parse_args(argv)
    service = ScoringService(get_settings())

    if args.command == "instruments":
        for instrument in service.supported_instruments():
            print(f"{instrument.value}\t{instrument.display_name}")
        return 0

    try:
        bank = QuestionBank.from_dict(load_json(args.bank))
        submission = Submission.from_dict(load_json(args.submission))

        if args.command == "validate":
            validation = service.validate_submission(
                args.instrument, submission, bank, allow_incomplete=args.allow_incomplete
            )
            report = validation.model_dump(exclude={"cleaned_value"})
            print(json.dumps(report, ensure_ascii=False, indent=2))
            return 0 if validation.is_valid else 1

        normative_table = load_normative_table(args.normative) if args.normative else None
        result = service.score_submission(
            args.instrument,
            submission,
            bank,
            normative_table=normative_table,
            allow_incomplete=args.allow_incomplete,
        )
        print(result.to_json() if args.compact else result.to_json(indent=2))
        return 0

    except ScoringEngineError as e:
        _print_error(e.to_dict())
        return 1
    except ValidationError as e:
        logger.error(f"Invalid input document: {e.error_count()} error(s)")
        _print_error({
            "error_type": "ValidationError",
            "message": "Invalid input document",
            "details": json.loads(e.json(include_url=False)),
        })
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read input: {e}")
        _print_error({"error_type": e.__class__.__name__, "message": str(e)})
        return 1
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
