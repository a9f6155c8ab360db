# src/cli/runner.py

"""Headless CLI runner — drives a SearchSession and prints results."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.catalog.loader import CatalogLoadError
from src.config.settings import Settings
from src.models.product import GroupedProduct
from src.services.search_session import SearchOutcome, SearchSession
from src.storage.file_manager import FileManager
from src.ui.presenter import build_card, build_recommendation

logger = logging.getLogger("pricecompare.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _outcome_to_dict(outcome: SearchOutcome) -> dict[str, object]:
    """Serialise an outcome to plain data for JSON output."""
    return {
        "label": outcome.label,
        "results": [asdict(g) for g in outcome.results],
        "recommendations": [asdict(g) for g in outcome.recommendations],
    }


def _print_results(groups: list[GroupedProduct]) -> None:
    """Render one row per vendor offer, best price highlighted."""
    table = Table(
        title="Price Comparison",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Product", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Vendor")
    table.add_column("Price", justify="right")
    table.add_column("Rating", justify="center")

    for idx, group in enumerate(groups, 1):
        card = build_card(group)
        for row_no, row in enumerate(card.vendors):
            first = row_no == 0
            price = (
                f"[bold green]{row.price} 🏆[/bold green]"
                if row.is_best
                else row.price
            )
            table.add_row(
                str(idx) if first else "",
                card.name if first else "",
                card.category if first else "",
                row.vendor,
                price,
                f"⭐ {row.rating}",
            )

    Console().print(table)


def _print_recommendations(groups: list[GroupedProduct]) -> None:
    """Render the suggestions table."""
    table = Table(title="You May Also Like", title_style="bold yellow")
    table.add_column("Product", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("From", justify="right", style="green")

    for group in groups:
        card = build_recommendation(group)
        table.add_row(card.name, card.category, card.price)

    Console().print(table)


def _export(outcome: SearchOutcome, output_dir: str | None) -> None:
    """Write JSON + CSV exports, reporting failures without aborting."""
    try:
        file_manager = FileManager(
            Path(output_dir) if output_dir else None
        )
        json_path = file_manager.save_json(outcome.label, outcome.results)
        csv_path = file_manager.export_csv(outcome.label, outcome.results)
        _err.print(f"[dim]Saved → {json_path}[/dim]")
        _err.print(f"[dim]Exported → {csv_path}[/dim]")
    except OSError as exc:
        logger.error("Export failed: %s", exc, exc_info=True)
        _err.print(f"[red]Export failed: {exc}[/red]")


def run_search(
    query: str | None,
    category: str | None,
    catalog_source: str | None,
    output_format: str,
    limit: int,
    output_dir: str | None = None,
    export: bool = False,
) -> int:
    """Run one search or category filter; return an exit code (0=ok, 1=fail)."""
    session = SearchSession(recommendation_limit=limit)
    try:
        catalog = session.load(catalog_source)
    except CatalogLoadError as exc:
        _err.print(f"[red]Could not load catalog: {exc}[/red]")
        return 1
    _err.print(f"[dim]{len(catalog)} listings loaded[/dim]")

    if category is not None:
        _err.print(f"[bold]Category:[/bold] {category}")
        outcome = session.filter_by_category(category)
    else:
        _err.print(f"[bold]Searching:[/bold] {query}")
        outcome = session.perform_search(query or "")

    if outcome.is_empty:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    _err.print(
        f"[green]✓ {len(outcome.results)} products"
        f" from {len(outcome.listings)} listings[/green]"
    )

    if export:
        _export(outcome, output_dir)

    if output_format == "table":
        _print_results(outcome.results)
        if outcome.recommendations:
            _print_recommendations(outcome.recommendations)
    else:
        json.dump(
            _outcome_to_dict(outcome),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


def run_list_categories() -> int:
    """Print the user-facing category labels and what they cover."""
    table = Table(title="Categories", title_style="bold cyan")
    table.add_column("Label", style="bold")
    table.add_column("Catalog categories", style="dim")
    table.add_row(Settings.ALL_CATEGORIES, "everything")
    for label, mapped in Settings.CATEGORY_MAP.items():
        table.add_row(label, ", ".join(mapped))
    Console().print(table)
    return 0
