# main.py

"""Entry point for the pricecompare application (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("pricecompare.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    labels = ", ".join([Settings.ALL_CATEGORIES, *Settings.CATEGORY_MAP])

    parser = argparse.ArgumentParser(
        prog="pricecompare",
        description="Compare product prices across vendors.",
        epilog=f"Categories: {labels}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query. Omit (and omit --category) to launch the TUI.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Show a category instead of searching.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Catalog JSON file or URL (default: PRICECOMPARE_CATALOG).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=Settings.RECOMMENDATION_LIMIT,
        help="Maximum recommendations (default: %(default)s).",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="Also write JSON and CSV exports of the results.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Export directory (default: results/).",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        default=False,
        dest="list_categories",
        help="List category labels and exit.",
    )
    return parser


def _run_tui(catalog_source: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import PriceCompareApp

    try:
        PriceCompareApp(catalog_source=catalog_source).run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("pricecompare TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search or category listing and exit."""
    from src.cli.runner import run_search

    exit_code = run_search(
        query=args.query,
        category=args.category,
        catalog_source=args.catalog,
        output_format=args.output_format,
        limit=args.limit,
        output_dir=args.output_dir,
        export=args.export,
    )
    sys.exit(exit_code)


def _run_list_categories() -> None:
    from src.cli.runner import run_list_categories

    sys.exit(run_list_categories())


def main() -> None:
    """Route to TUI (no query) or headless CLI."""
    log_file = setup_logging()
    logger.info("pricecompare starting — log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.list_categories:
        _run_list_categories()
    elif args.query is None and args.category is None:
        _run_tui(args.catalog)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
