# product_dashboard/ui/app.py

"""Terminal UI for the product management dashboard."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
    TextArea,
)

from product_dashboard.config.settings import Settings
from product_dashboard.filters.criteria_holder import FilterCriteriaHolder
from product_dashboard.filters.draft_validator import DraftValidator
from product_dashboard.models.filter_criteria import ALL_CATEGORIES
from product_dashboard.models.product import Product, ProductId
from product_dashboard.services.catalog_client import CatalogClient
from product_dashboard.services.product_store import ProductStore
from product_dashboard.ui.formatting import (
    category_label,
    format_price,
    rating_summary,
    truncate_description,
)

logger = logging.getLogger("product_dashboard.ui")

_TABLE_DESCRIPTION_LENGTH = 60


class ConfirmDeleteScreen(ModalScreen[bool]):
    """Ask before a product is deleted."""

    def __init__(self, product: Product) -> None:
        super().__init__()
        self.product = product

    def compose(self) -> ComposeResult:
        yield Container(
            Static(
                "Are you sure you want to delete this product?\n"
                f"#{self.product.id} {self.product.title}",
                id="confirm_text",
            ),
            Horizontal(
                Button("Delete", variant="error", id="confirm_delete"),
                Button("Cancel", id="cancel_delete"),
                id="confirm_buttons",
            ),
            id="confirm_dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm_delete")


class ProductDashboardApp(App[object]):
    """Form, search bar and product table over a ProductStore."""

    CSS_PATH = "styles.css"
    TITLE = "Product Management Dashboard"
    SUB_TITLE = "All your products in one place."

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reload", "Reload"),
        Binding("e", "edit", "Edit"),
        Binding("d", "delete", "Delete"),
        Binding("x", "dismiss_error", "Dismiss Error"),
        Binding("escape", "cancel_edit", "Cancel Edit", show=False),
    ]

    def __init__(self, store: ProductStore | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.store = (
            store if store is not None else ProductStore(CatalogClient())
        )
        self.filters = FilterCriteriaHolder(self.store)
        self.editing_product: Product | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree: form on the left, product list on the right."""
        default_category = self.settings.DEFAULT_CATEGORY

        yield Header()
        yield Container(
            Vertical(
                Static("Add New Product", id="form_title"),
                Input(placeholder="Product title *", id="title_input"),
                Input(
                    placeholder="Price (USD) *",
                    type="number",
                    id="price_input",
                ),
                Select(
                    [(category_label(default_category), default_category)],
                    allow_blank=False,
                    value=default_category,
                    id="category_input",
                ),
                Input(
                    value=self.settings.DEFAULT_IMAGE_URL,
                    placeholder="Image URL (optional)",
                    id="image_input",
                ),
                TextArea(id="description_input"),
                Horizontal(
                    Button("Add Product", variant="primary", id="submit_btn"),
                    Button("Clear Form", id="reset_btn"),
                    id="form_actions",
                ),
                Static("", id="form_message"),
                id="form_section",
            ),
            Vertical(
                Horizontal(
                    Input(
                        placeholder="Search products by title or description...",
                        id="search_input",
                    ),
                    Select(
                        [(category_label(ALL_CATEGORIES), ALL_CATEGORIES)],
                        allow_blank=False,
                        value=ALL_CATEGORIES,
                        id="category_filter",
                    ),
                    Button("Clear Filters", id="clear_filters_btn"),
                    id="search_bar",
                ),
                Static("Loading products...", id="status"),
                cast(
                    DataTable[str | Text],
                    DataTable(
                        id="product_table",
                        zebra_stripes=True,
                        cursor_type="row",
                    ),
                ),
                id="table_section",
            ),
            id="dashboard",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Set up table columns and start the initial load."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#product_table", DataTable),
        )
        table.add_columns(
            "ID", "Title", "Category", "Price", "Rating", "Description"
        )
        self.run_worker(self.reload(), exclusive=True)

    # ── Loading & rendering ──────────────────────────────

    async def reload(self) -> None:
        """Fetch everything from the catalog and reset the filters."""
        self.query_one("#status", Static).update("Loading products...")
        await self.store.load()
        self._refresh_category_options()
        self._reset_filter_widgets()
        self.filters.clear_filters()
        self.refresh_view()

    def _refresh_category_options(self) -> None:
        categories = self.store.categories
        if not categories:
            return

        form_select = cast(
            Select[str], self.query_one("#category_input", Select)
        )
        form_select.set_options(
            [(category_label(c), c) for c in categories]
        )
        if self.settings.DEFAULT_CATEGORY in categories:
            form_select.value = self.settings.DEFAULT_CATEGORY

        filter_select = cast(
            Select[str], self.query_one("#category_filter", Select)
        )
        filter_select.set_options(
            [
                (category_label(c), c)
                for c in FilterCriteriaHolder.category_options(categories)
            ]
        )

    def _reset_filter_widgets(self) -> None:
        self.query_one("#search_input", Input).value = ""
        cast(
            Select[str], self.query_one("#category_filter", Select)
        ).value = ALL_CATEGORIES

    def refresh_view(self) -> None:
        """Redraw the table and the status line from the store."""
        self.populate_table()
        status = self.query_one("#status", Static)
        products = self.store.filtered
        error = self.store.last_error

        if self.store.loading:
            status.update("Loading products...")
        elif error is not None:
            status.update(f"❌ {error.message} (x to dismiss)")
        elif not products:
            status.update(
                "No products found. Try a different search or add a new product."
            )
        else:
            status.update(f"{len(products)} products")

        self.query_one("#clear_filters_btn", Button).display = (
            self.filters.is_active
        )

    def populate_table(self) -> None:
        """Fill the DataTable with the filtered products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#product_table", DataTable),
        )
        table.clear()
        for p in self.store.filtered:
            table.add_row(
                str(p.id),
                Text(p.title[:60], style="bold"),
                p.category,
                Text(format_price(p.price), style="green"),
                rating_summary(p.rating),
                truncate_description(
                    p.description, _TABLE_DESCRIPTION_LENGTH
                ),
            )

    def _selected_product(self) -> Product | None:
        table = cast(
            DataTable[str | Text],
            self.query_one("#product_table", DataTable),
        )
        products = self.store.filtered
        if 0 <= table.cursor_row < len(products):
            return products[table.cursor_row]
        self.notify("Select a product first", severity="warning")
        return None

    # ── Filter events ────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search_input":
            self.filters.set_search_term(event.value)
            self.refresh_view()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "category_filter" and isinstance(
            event.value, str
        ):
            self.filters.set_category(event.value)
            self.refresh_view()

    # ── Form ─────────────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "submit_btn":
            await self.submit_form()
        elif event.button.id == "reset_btn":
            if self.editing_product is not None:
                self.action_cancel_edit()
            else:
                self.reset_form()
        elif event.button.id == "clear_filters_btn":
            self._reset_filter_widgets()
            self.filters.clear_filters()
            self.refresh_view()

    def reset_form(self) -> None:
        """Empty the form and leave edit mode."""
        self.editing_product = None
        self.query_one("#title_input", Input).value = ""
        self.query_one("#price_input", Input).value = ""
        self.query_one("#image_input", Input).value = (
            self.settings.DEFAULT_IMAGE_URL
        )
        self.query_one("#description_input", TextArea).load_text("")
        category_select = cast(
            Select[str], self.query_one("#category_input", Select)
        )
        if self.settings.DEFAULT_CATEGORY in self.store.categories:
            category_select.value = self.settings.DEFAULT_CATEGORY
        self.query_one("#form_title", Static).update("Add New Product")
        self.query_one("#submit_btn", Button).label = "Add Product"
        self.query_one("#reset_btn", Button).label = "Clear Form"

    def _fill_form(self, product: Product) -> None:
        self.query_one("#title_input", Input).value = product.title
        self.query_one("#price_input", Input).value = str(product.price)
        self.query_one("#image_input", Input).value = product.image
        self.query_one("#description_input", TextArea).load_text(
            product.description
        )
        category_select = cast(
            Select[str], self.query_one("#category_input", Select)
        )
        if product.category in self.store.categories:
            category_select.value = product.category
        self.query_one("#form_title", Static).update(
            f"Edit Product #{product.id}"
        )
        self.query_one("#submit_btn", Button).label = "Update Product"
        self.query_one("#reset_btn", Button).label = "Cancel Edit"

    async def submit_form(self) -> None:
        """Validate the form and create or update the product."""
        category = cast(
            Select[str], self.query_one("#category_input", Select)
        ).value
        draft, errors = DraftValidator.validate(
            title=self.query_one("#title_input", Input).value,
            price=self.query_one("#price_input", Input).value,
            description=self.query_one("#description_input", TextArea).text,
            category=category if isinstance(category, str) else "",
            image=self.query_one("#image_input", Input).value,
            rating=(
                self.editing_product.rating
                if self.editing_product is not None
                else None
            ),
        )
        if draft is None:
            for message in errors:
                self.notify(message, severity="warning")
            return

        message = self.query_one("#form_message", Static)
        editing = self.editing_product
        if editing is not None:
            if await self.store.update(editing.id, draft):
                self.reset_form()
                message.update("Product updated successfully!")
        elif await self.store.create(draft):
            self.reset_form()
            message.update("Product added successfully!")

        self.refresh_view()
        if self.store.last_error is not None:
            self.notify(self.store.last_error.message, severity="error")

    # ── Actions ──────────────────────────────────────────

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Enter on a row starts editing it."""
        self.action_edit()

    def action_edit(self) -> None:
        product = self._selected_product()
        if product is None:
            return
        self.editing_product = product
        self._fill_form(product)
        self.query_one("#form_message", Static).update("")

    def action_cancel_edit(self) -> None:
        if self.editing_product is not None:
            self.reset_form()

    def action_delete(self) -> None:
        """Delete the highlighted product after confirmation."""
        product = self._selected_product()
        if product is None:
            return

        def on_confirm(confirmed: bool | None) -> None:
            if confirmed:
                self.run_worker(self.delete_product(product.id))

        self.push_screen(ConfirmDeleteScreen(product), on_confirm)

    async def delete_product(self, product_id: ProductId) -> None:
        if await self.store.delete(product_id):
            self.notify(f"Deleted product #{product_id}")
            if (
                self.editing_product is not None
                and self.editing_product.id == product_id
            ):
                self.reset_form()
        else:
            self.notify(
                self.store.last_error.message
                if self.store.last_error
                else "Delete failed",
                severity="error",
            )
        self.refresh_view()

    def action_reload(self) -> None:
        self.run_worker(self.reload(), exclusive=True)

    def action_dismiss_error(self) -> None:
        self.store.clear_error()
        self.refresh_view()
