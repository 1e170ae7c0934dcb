"""
Command-line interface for validating JSON records against constraint schemas.

Usage:
    python -m fieldcheck.cli.validate_cli check --constraints <yaml> --schema <name> --input <json> [options]
    python -m fieldcheck.cli.validate_cli rules
    python -m fieldcheck.cli.validate_cli parse "<declaration>"
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from fieldcheck.core.models import ValidationResult
from fieldcheck.core.rules import (
    ConstraintConfigLoader,
    RuleEngine,
    format_constraints,
    get_default_registry,
    parse_constraints,
)
from fieldcheck.observability.logger import get_logger
from fieldcheck.observability.metrics import (
    record_validation,
    track_duration,
    validation_duration_seconds,
    write_metrics,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_VIOLATIONS = 2

DEFAULT_CONSTRAINTS_PATH = "config/constraints.yaml"


def load_records(input_path: Path) -> list[dict[str, Any]]:
    """
    Read records from a JSON object, JSON array or JSON-lines file.

    Raises:
        ValueError: If the file is not valid JSON / JSON-lines, or a record is not a JSON object
    """
    text = input_path.read_text()
    stripped = text.strip()
    if not stripped:
        return []

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError:
        records = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_number}: {e}")
    else:
        records = data if isinstance(data, list) else [data]

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"record {index} is not a JSON object")
    return records


def check_command(args) -> int:
    """
    Validate every record in the input file.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return EXIT_ERROR

    try:
        constraints = ConstraintConfigLoader(args.constraints).load_schema(args.schema)
        records = load_records(input_path)
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(f"Cannot load input: {e}")
        return EXIT_ERROR

    logger.info(
        f"Validating {len(records)} record(s) against schema '{args.schema}'",
        extra={"schema": args.schema, "mode": args.mode, "records": len(records)},
    )

    engine = RuleEngine(get_default_registry())
    failed = 0

    with track_duration(validation_duration_seconds, schema=args.schema, mode=args.mode):
        for index, record in enumerate(records):
            if args.mode == "fail-fast":
                violation = engine.validate_fail_fast(record, constraints)
                result = ValidationResult(violations=() if violation is None else (violation,))
            else:
                result = engine.validate_all(record, constraints)

            record_validation(args.schema, result)
            if not result.passed:
                failed += 1

            report = {
                "index": index,
                "passed": result.passed,
                "violations": [v.model_dump(mode="json") for v in result.violations],
            }
            print(json.dumps(report))

    logger.info(
        f"Validation complete: {len(records) - failed} passed, {failed} failed",
        extra={"passed": len(records) - failed, "failed": failed},
    )

    if args.metrics_file:
        write_metrics(args.metrics_file)
        logger.info(f"Metrics written to {args.metrics_file}")

    return EXIT_VIOLATIONS if failed else EXIT_OK


def rules_command(args) -> int:
    """List registered rule names."""
    registry = get_default_registry()
    for name in registry:
        print(f"{name}\t{registry.get(name).rule_type}")
    return EXIT_OK


def parse_command(args) -> int:
    """Show how a declaration is parsed."""
    specs = parse_constraints(args.declaration)
    print(json.dumps({
        "rules": [spec.model_dump() for spec in specs],
        "canonical": format_constraints(specs),
    }))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldcheck-validate",
        description="Validate records against per-field constraint declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report every failing field of each record
  fieldcheck-validate check --constraints config/constraints.yaml --schema signup --input users.json

  # Stop at the first failing field of each record
  fieldcheck-validate check --schema signup --input users.jsonl --mode fail-fast

  # Show the canonical form of a declaration
  fieldcheck-validate parse "required, min=3,max=20"
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate records from a JSON file")
    check_parser.add_argument(
        "--constraints",
        default=os.getenv("FIELDCHECK_CONSTRAINTS", DEFAULT_CONSTRAINTS_PATH),
        help="Path to constraint YAML file (default: $FIELDCHECK_CONSTRAINTS or config/constraints.yaml)"
    )
    check_parser.add_argument(
        "--schema",
        required=True,
        help="Schema name inside the constraint file"
    )
    check_parser.add_argument(
        "--input",
        required=True,
        help="Path to JSON, JSON array or JSON-lines file of records"
    )
    check_parser.add_argument(
        "--mode",
        default="all",
        choices=["all", "fail-fast"],
        help="Report every failing field (all) or only the first (fail-fast)"
    )
    check_parser.add_argument(
        "--metrics-file",
        default=None,
        help="Write Prometheus metrics for this run to the given file"
    )

    subparsers.add_parser("rules", help="List registered rules")

    parse_parser = subparsers.add_parser("parse", help="Parse a constraint declaration")
    parse_parser.add_argument("declaration", help='Declaration string, e.g. "required,min=3"')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    commands = {
        "check": check_command,
        "rules": rules_command,
        "parse": parse_command,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
