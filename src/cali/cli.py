"""Command-line entry point for the nutrition log.

Usage:
    cali 500
    cali log water 16
    cali summary --date 2024-01-15
    cali history
    cali reset
"""

import argparse
import logging
import math
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rich.console import Console
from rich.text import Text

from cali.app_logging import configure_logging
from cali.config import Settings, resolve_log_level
from cali.containers import AppContainer, build_container
from cali.domain.records import NutritionCategory
from cali.services.reports import (
    format_history,
    format_logged,
    format_reset,
    format_summary,
)

try:
    __version__ = version("cali")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

_logger = logging.getLogger(__name__)

_AMOUNT_HELP = {
    NutritionCategory.CALORIES: ("amount", "Amount of calories"),
    NutritionCategory.WATER: ("fl_oz", "Amount of water in fluid ounces (fl oz)"),
    NutritionCategory.PROTEIN: ("grams", "Amount of protein in grams"),
    NutritionCategory.CARBS: ("grams", "Amount of carbohydrates in grams"),
    NutritionCategory.FAT: ("grams", "Amount of fat in grams"),
}

_CATEGORY_HELP = {
    NutritionCategory.CALORIES: "Log calories",
    NutritionCategory.WATER: "Log water intake in fluid ounces (fl oz)",
    NutritionCategory.PROTEIN: "Log protein intake in grams",
    NutritionCategory.CARBS: "Log carbohydrates intake in grams",
    NutritionCategory.FAT: "Log fat intake in grams",
}


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Path of the JSON data file (overrides CALI_DATA_DIR)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-parser per command."""
    parser = argparse.ArgumentParser(
        prog="cali",
        usage="%(prog)s [options] [calories] | %(prog)s [options] <command> ...",
        description="Log daily calories, water, protein, carbs and fat.",
        epilog="A bare number is shorthand for 'log calories VALUE'.",
    )
    _add_global_options(parser)
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    log_parser = subparsers.add_parser("log", help="Log nutrition data")
    categories = log_parser.add_subparsers(
        dest="category", metavar="<category>", required=True
    )
    for category in NutritionCategory:
        metavar, amount_help = _AMOUNT_HELP[category]
        category_parser = categories.add_parser(
            category.key, help=_CATEGORY_HELP[category]
        )
        category_parser.add_argument(
            "amount", type=finite_amount, metavar=metavar, help=amount_help
        )

    summary_parser = subparsers.add_parser("summary", help="Show nutrition summary")
    summary_parser.add_argument(
        "-d",
        "--date",
        default=None,
        help="Date to show summary for (format: YYYY-MM-DD), defaults to today",
    )

    subparsers.add_parser("history", help="Show all recorded nutrition data")
    subparsers.add_parser("reset", help="Reset today's nutrition data")
    return parser


def _parse_number(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def finite_amount(raw: str) -> float:
    """Argparse type for logged amounts; rejects inf and nan."""
    value = _parse_number(raw)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid amount: {raw!r}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments, treating a lone number as a calorie log."""
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_options(global_parser)
    options, rest = global_parser.parse_known_args(argv)
    if len(rest) == 1:
        amount = _parse_number(rest[0])
        if amount is not None:
            return argparse.Namespace(
                command="log",
                category=NutritionCategory.CALORIES.key,
                amount=amount,
                data_file=options.data_file,
                verbose=options.verbose,
            )
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace, container: AppContainer, console: Console) -> None:
    """Load the store, execute one command and persist if it mutated."""
    store = container.record_store
    log_service = container.log_service
    records = store.load()

    if args.command == "log":
        category = NutritionCategory.from_key(args.category)
        entry = log_service.log(records, category, args.amount)
        store.save(records)
        console.print(format_logged(entry))
    elif args.command == "summary":
        day = args.date if args.date is not None else log_service.today_key()
        console.print(format_summary(records, day))
    elif args.command == "history":
        console.print(format_history(records))
    elif args.command == "reset":
        reset = log_service.reset_today(records)
        store.save(records)
        console.print(format_reset(reset))


def main(
    argv: list[str] | None = None,
    container: AppContainer | None = None,
    console: Console | None = None,
    error_console: Console | None = None,
) -> int:
    """Run the CLI and return the process exit status."""
    args = parse_args(argv)
    if args.command is None:
        build_parser().print_help()
        return 0

    if container is None:
        container = build_container(Settings(), data_file=args.data_file)
    if args.verbose:
        configure_logging(logging.DEBUG)
    else:
        configure_logging(resolve_log_level(container.settings.log_level))

    if console is None:
        console = Console(highlight=False)
    if error_console is None:
        error_console = Console(stderr=True, highlight=False)
    try:
        run(args, container, console)
    except OSError as exc:
        _logger.debug("Record store failure", exc_info=True)
        error_console.print(Text(f"Error: {exc}", style="bold red"))
        return 1
    return 0
