# src/ui/app.py

"""Terminal UI for the pricecompare search tool."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from src.catalog.loader import CatalogLoadError
from src.services.search_session import SearchOutcome, SearchSession
from src.storage.file_manager import FileManager
from src.ui.presenter import build_card, build_recommendation

logger = logging.getLogger("pricecompare.ui")


class PriceCompareApp(App[object]):
    """Search box, category buttons, comparison and suggestion tables."""

    CSS_PATH = "styles.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "save", "Save JSON"),
        Binding("e", "export", "Export CSV"),
    ]

    def __init__(self, catalog_source: str | None = None) -> None:
        super().__init__()
        self.catalog_source = catalog_source
        self.session = SearchSession()
        self.outcome: SearchOutcome | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        category_buttons = [
            Button(label, id=f"cat_{label}", classes="category-btn")
            for label in self.session.category_filter.labels()
        ]

        yield Header()
        yield Container(
            Static("🛒 Price Comparison", id="title"),
            Horizontal(
                Input(placeholder="Search products...", id="search_input"),
                Button("Search", variant="primary", id="search_btn"),
                id="search_bar",
            ),
            Horizontal(*category_buttons, id="category_bar"),
            Static("Loading catalog...", id="status"),
            DataTable(id="results_table", zebra_stripes=True, cursor_type="row"),
            Static("You may also like", id="recs_title"),
            DataTable(id="recs_table", cursor_type="row"),
            id="main_container",
        )
        yield Footer()

    def _results_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )

    def _recs_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#recs_table", DataTable),
        )

    def _set_inputs_enabled(self, enabled: bool) -> None:
        for widget in self.query("#search_bar Input, #search_bar Button, .category-btn"):
            widget.disabled = not enabled

    def on_mount(self) -> None:
        """Set up table columns and start loading the catalog."""
        self._results_table().add_columns(
            "Product", "Category", "Vendor", "Price", "Rating"
        )
        self._recs_table().add_columns("Product", "Category", "From")
        self._set_inputs_enabled(False)
        self.run_worker(self._load_catalog(), exclusive=True)

    async def _load_catalog(self) -> None:
        """Load the catalog; inputs stay disabled if it fails."""
        status = self.query_one("#status", Static)
        try:
            catalog = await self.session.load_async(self.catalog_source)
        except CatalogLoadError as exc:
            status.update(f"❌ Could not load catalog: {exc}")
            self.notify("Catalog failed to load", severity="error")
            return
        self._set_inputs_enabled(True)
        status.update(f"✅ {len(catalog)} listings loaded")

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route search and category button clicks."""
        button_id = event.button.id or ""
        if button_id == "search_btn":
            self.perform_search(self.query_one("#search_input", Input).value)
        elif button_id.startswith("cat_"):
            self.show_category(button_id.removeprefix("cat_"))

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the search input."""
        if event.input.id == "search_input":
            self.perform_search(event.value)

    def perform_search(self, query: str) -> None:
        """Search the catalog and render the outcome."""
        query = query.strip()
        if not query:
            self.notify("Please enter a search term", severity="warning")
            return
        self.render_outcome(self.session.perform_search(query))

    def show_category(self, label: str) -> None:
        """Filter by category and mark the active button."""
        for button in self.query(".category-btn"):
            button.set_class(button.id == f"cat_{label}", "active")
        self.render_outcome(self.session.filter_by_category(label))

    def render_outcome(self, outcome: SearchOutcome) -> None:
        """Fill both tables and the status line from *outcome*."""
        self.outcome = outcome
        results = self._results_table()
        recs = self._recs_table()
        status = self.query_one("#status", Static)
        results.clear()
        recs.clear()

        if outcome.is_empty:
            status.update(f"❌ No products found for '{outcome.label}'")
            return

        for group in outcome.results:
            card = build_card(group)
            for row_no, row in enumerate(card.vendors):
                first = row_no == 0
                results.add_row(
                    card.name if first else "",
                    card.category if first else "",
                    row.vendor,
                    Text(
                        f"{row.price} 🏆" if row.is_best else row.price,
                        style="bold green" if row.is_best else "",
                    ),
                    f"⭐ {row.rating}",
                )

        for group in outcome.recommendations:
            rec = build_recommendation(group)
            recs.add_row(rec.name, rec.category, rec.price)

        status.update(
            f"✅ {len(outcome.results)} products for '{outcome.label}'"
        )

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Selecting a suggestion compares prices for that product."""
        if event.data_table.id != "recs_table" or self.outcome is None:
            return
        recommendations = self.outcome.recommendations
        if 0 <= event.cursor_row < len(recommendations):
            name = recommendations[event.cursor_row].name
            self.query_one("#search_input", Input).value = name
            self.perform_search(name)

    def action_save(self) -> None:
        """Save current results to a JSON file."""
        if self.outcome is None or self.outcome.is_empty:
            self.notify("No results to save", severity="warning")
            return
        try:
            path = FileManager().save_json(
                self.outcome.label, self.outcome.results
            )
            self.notify(f"Saved to {path}")
        except OSError as e:
            logger.error("Failed to save results", exc_info=True)
            self.notify(f"Save failed: {e}", severity="error")

    def action_export(self) -> None:
        """Export current results to a CSV file."""
        if self.outcome is None or self.outcome.is_empty:
            self.notify("No results to export", severity="warning")
            return
        try:
            path = FileManager().export_csv(
                self.outcome.label, self.outcome.results
            )
            self.notify(f"Exported to {path}")
        except OSError as e:
            logger.error("Failed to export results", exc_info=True)
            self.notify(f"Export failed: {e}", severity="error")
