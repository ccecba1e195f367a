# main.py

"""Entry point for the product dashboard (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from product_dashboard.config.logging_config import setup_logging
from product_dashboard.config.settings import Settings

logger = logging.getLogger("product_dashboard.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="product_dashboard",
        description="Product management dashboard for a remote catalog.",
        epilog=f"Catalog: {Settings.CATALOG_BASE_URL}",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the product list instead of launching the TUI.",
    )
    parser.add_argument(
        "-s",
        "--search",
        default=None,
        help="Only list products whose title or description contains this text.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Only list products of this category.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format for --list (default: table).",
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        default=False,
        help="Print the catalog's categories and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo INFO logs to stderr.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual dashboard."""
    from product_dashboard.ui.app import ProductDashboardApp

    try:
        app = ProductDashboardApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("Dashboard shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the (optionally filtered) product list and exit."""
    from product_dashboard.cli.runner import cli_list

    exit_code = asyncio.run(
        cli_list(
            search=args.search,
            category=args.category,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def _run_categories() -> None:
    from product_dashboard.cli.runner import run_list_categories

    sys.exit(run_list_categories())


def main() -> None:
    """Route to the TUI (default) or one of the headless commands."""
    args = _build_parser().parse_args()
    log_file = setup_logging(
        logging.INFO if args.verbose else logging.WARNING
    )
    logger.info("Dashboard starting, log file: %s", log_file)

    if args.categories:
        _run_categories()
    elif args.list_products or args.search or args.category:
        _run_list(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
