# product_dashboard/cli/runner.py

"""Headless listing of the catalog, driven through the same ProductStore."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from product_dashboard.config.settings import Settings
from product_dashboard.filters.criteria_holder import FilterCriteriaHolder
from product_dashboard.models.filter_criteria import ALL_CATEGORIES
from product_dashboard.models.product import Product
from product_dashboard.services.catalog_client import (
    CatalogClient,
    CatalogRequestError,
)
from product_dashboard.services.product_store import ProductStore
from product_dashboard.ui.formatting import (
    category_label,
    format_price,
    rating_stars,
    truncate_description,
)

logger = logging.getLogger("product_dashboard.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": p.price,
            "currency": Settings.CURRENCY,
            "description": p.description,
            "category": p.category,
            "image": p.image,
            "rating": {"rate": p.rating.rate, "count": p.rating.count},
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Product List",
        caption=f"{len(products)} products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Description", max_width=50, style="dim")

    for p in products:
        table.add_row(
            str(p.id),
            p.title,
            p.category,
            format_price(p.price),
            f"{rating_stars(p.rating.rate)}\n{p.rating.count} reviews",
            truncate_description(p.description),
        )

    Console().print(table)


async def cli_list(
    search: str | None,
    category: str | None,
    output_format: str,
    client: CatalogClient | None = None,
) -> int:
    """Load the catalog, apply filters and print the result (0=ok, 1=fail)."""
    store = ProductStore(client if client is not None else CatalogClient())
    filters = FilterCriteriaHolder(store)

    _err.print("[bold]Loading products...[/bold]")
    await store.load()
    if store.last_error is not None:
        _err.print(f"[red]{store.last_error.message}[/red]")
        return 1

    if category and category != ALL_CATEGORIES:
        known = store.categories
        if known and category not in known:
            _err.print(f"[red]Unknown category: {category}[/red]")
            _err.print(f"[dim]Available: {', '.join(known)}[/dim]")
            return 1
        filters.set_category(category)
    if search:
        filters.set_search_term(search)

    products = store.filtered
    if filters.is_active:
        _err.print(
            f"[green]✓ {len(products)} of {len(store.products)}"
            " products match[/green]"
        )
    else:
        _err.print(f"[green]✓ {len(products)} products[/green]")

    if not products:
        _err.print(
            "[yellow]No products found. Try a different search.[/yellow]"
        )
        return 1

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


def run_list_categories(client: CatalogClient | None = None) -> int:
    """Print the catalog's categories, one per line."""
    catalog = client if client is not None else CatalogClient()
    try:
        categories = catalog.fetch_categories()
    except CatalogRequestError as exc:
        logger.error("Error fetching categories: %s", exc, exc_info=True)
        _err.print(f"[red]Failed to fetch categories: {exc}[/red]")
        return 1

    for name in categories:
        sys.stdout.write(f"{name}\t{category_label(name)}\n")
    return 0
