"""Entry point of the src package. Allows python -m src."""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

import polars as pl

from src.catalog import CatalogError
from src.reports.registry import UnknownReportError

if TYPE_CHECKING:
    from src.reports import ReportEngine


def list_reports() -> None:
    """Print available reports."""
    from src.reports import REPORTS

    print("\nAvailable reports:")
    for name, definition in REPORTS.items():
        print(f"  {name:<32} {definition.title}")
    print(f"\nTotal: {len(REPORTS)}")


def build_engine(args: argparse.Namespace) -> "ReportEngine":
    """Load the catalog and build a report engine from CLI options."""
    from src.catalog import CatalogLoader
    from src.reports import ReportEngine

    catalog = CatalogLoader().load(args.csv)
    return ReportEngine(
        catalog,
        reference_date=args.reference_date,
        strict_parsing=True if args.strict else None,
    )


def output_reports(reports: dict[str, pl.DataFrame], args: argparse.Namespace) -> None:
    """Print or save report frames according to --format."""
    from src.reports import REPORTS, render_table, save_report
    from src.settings import settings

    fmt = args.format or settings.reports.output_format
    output_dir = Path(args.output_dir) if args.output_dir else settings.paths.output_dir

    for name, frame in reports.items():
        if fmt == "table":
            print(render_table(frame, title=f"\n{REPORTS[name].title}"))
        else:
            path = save_report(frame, output_dir, name, fmt)
            print(f"Saved {name} -> {path}")


def run_single(args: argparse.Namespace) -> None:
    """Run one report."""
    from src.reports import get_report, run_report

    get_report(args.name)

    engine = build_engine(args)
    output_reports({args.name: run_report(engine, args.name)}, args)


def run_every(args: argparse.Namespace) -> None:
    """Run all reports."""
    from src.reports import run_all

    engine = build_engine(args)
    output_reports(run_all(engine), args)


def _add_report_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by run and run-all."""
    parser.add_argument("--csv", type=Path, help="Catalog CSV (default: settings)")
    parser.add_argument("--format", choices=["table", "csv", "json"])
    parser.add_argument("--output-dir", type=Path)
    parser.add_argument("--reference-date", type=date.fromisoformat, help="YYYY-MM-DD")
    parser.add_argument("--strict", action="store_true", help="Fail on unparseable values")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Netflix catalog insight reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src list                                   # List reports
  python -m src run q04_top_countries                  # One report
  python -m src run-all --format csv --output-dir out  # Every report as CSV
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    subparsers.add_parser("list", help="List reports")

    run_parser = subparsers.add_parser("run", help="Run one report")
    run_parser.add_argument("name")
    _add_report_options(run_parser)

    all_parser = subparsers.add_parser("run-all", help="Run every report")
    _add_report_options(all_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "list":
            list_reports()
        elif args.command == "run":
            run_single(args)
        elif args.command == "run-all":
            run_every(args)

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except UnknownReportError as e:
        print(f"\nERROR: {e.args[0]}")
        return 1
    except CatalogError as e:
        print(f"\nERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
