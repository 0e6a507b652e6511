import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .env import Settings, load_env, parse_threshold
from .loader import load_contacts, read_table
from .logger import get_logger, reset_logger
from .report import write_report
from .resolver import ContactNotFoundError, Deduplicator
from .schema import ContactSchemaError, validate_columns
from .scoring import label_score


def _threshold_arg(value: str) -> float:
    try:
        return parse_threshold(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"threshold {e}")


def _input_path(args: argparse.Namespace) -> Path:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    return input_path


def _load(args: argparse.Namespace) -> Deduplicator:
    try:
        contacts = load_contacts(_input_path(args))
    except ContactSchemaError as e:
        raise SystemExit(f"Invalid contact table: {e}")
    return Deduplicator(contacts)


def cmd_report(args: argparse.Namespace) -> None:
    settings: Settings = args.settings
    threshold = settings.threshold if args.threshold is None else args.threshold
    use_labels = settings.use_labels if args.use_labels is None else args.use_labels

    dedup = _load(args)
    rows = dedup.generate_report(threshold=threshold, use_labels=use_labels)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="") as f:
            count = write_report(rows, f)
        get_logger().info("Report written", path=str(output_path), rows=count)
    else:
        write_report(rows, sys.stdout)
    get_logger().log_metrics_summary()


def cmd_explain(args: argparse.Namespace) -> None:
    dedup = _load(args)
    try:
        breakdown = dedup.compare(args.source, args.match)
    except ContactNotFoundError as e:
        raise SystemExit(str(e))
    print(f"Pair: {args.source},{args.match}")
    if breakdown.email_match:
        print("  Email: exact match (decisive)")
    else:
        print(f"  Email: {breakdown.email:.4f}")
        print(f"  Full name: {breakdown.full_name:.4f}")
        print(f"  Full address: {breakdown.full_address:.4f}")
    print(f"  Score: {breakdown.total:.2f} ({label_score(breakdown.total)})")


def cmd_validate(args: argparse.Namespace) -> None:
    try:
        df = read_table(_input_path(args))
        errors = validate_columns(df.columns)
    except ContactSchemaError as e:
        errors = e.errors
    if errors:
        print("Invalid:")
        for err in errors:
            print(f" - {err}")
        raise SystemExit(2)
    print(f"Valid ({len(df)} contacts)")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="contactdedup", description="Score contact pairs as potential duplicates")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    rep = subparsers.add_parser("report", help="Score every pair of contacts and write a CSV report")
    rep.add_argument("--input", required=True, help="Path to contacts CSV (columns: name,name1,email,postalZip,address)")
    rep.add_argument("--threshold", type=_threshold_arg, help="Hide pairs scoring below this value (default: 0)")
    mode = rep.add_mutually_exclusive_group()
    mode.add_argument("--labels", dest="use_labels", action="store_true", default=None, help="Render scores as labels (default)")
    mode.add_argument("--numeric", dest="use_labels", action="store_false", help="Render scores as two-decimal numbers")
    rep.add_argument("--output", help="Write the report to this path instead of stdout")
    rep.set_defaults(func=cmd_report, use_labels=None)

    exp = subparsers.add_parser("explain", help="Show how the score of one pair is built")
    exp.add_argument("--input", required=True, help="Path to contacts CSV")
    exp.add_argument("--source", required=True, type=int, help="Contact ID (row number from 0)")
    exp.add_argument("--match", required=True, type=int, help="Contact ID (row number from 0)")
    exp.set_defaults(func=cmd_explain)

    val = subparsers.add_parser("validate", help="Check that a contacts CSV has the expected columns")
    val.add_argument("--input", required=True, help="Path to contacts CSV")
    val.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    # Load .env if present (CONTACTDEDUP_THRESHOLD, CONTACTDEDUP_LOG_LEVEL, etc.)
    load_env()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise SystemExit(str(e))

    reset_logger()
    get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_dir is not None,
    )

    if hasattr(args, "func"):
        args.settings = settings
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
