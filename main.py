# main.py

"""Entry point for the dropship storefront (TUI or headless CLI)."""

import argparse
import logging
import sys

from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    category_ids = [c["id"] for c in Settings.CATEGORIES]
    currency_ids = [c["id"] for c in Settings.CURRENCIES]
    sort_ids = [s["id"] for s in Settings.SORT_OPTIONS]

    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Bangladesh dropship catalog with a USD/BDT quote cart.",
        epilog=f"Categories: {', '.join(category_ids)}",
    )
    parser.add_argument(
        "search",
        nargs="?",
        default=None,
        help="Free-text search. Run with no arguments for the TUI.",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        default=False,
        help="Print the catalog view without a search term.",
    )
    parser.add_argument(
        "-c",
        "--category",
        choices=["all", *category_ids],
        default=Settings.DEFAULT_CATEGORY,
        help="Restrict to one category (default: all).",
    )
    parser.add_argument(
        "--currency",
        choices=["any", *currency_ids],
        default=Settings.DEFAULT_CURRENCY,
        help="Restrict to one pricing currency (default: any).",
    )
    parser.add_argument(
        "-m",
        "--max-price",
        type=float,
        default=Settings.DEFAULT_MAX_PRICE,
        dest="max_price",
        help="Budget cap in USD equivalent (default: %(default)s).",
    )
    parser.add_argument(
        "--sort",
        choices=sort_ids,
        default=Settings.DEFAULT_SORT,
        help="Ordering (default: recommended).",
    )
    parser.add_argument(
        "-s",
        "--select",
        default=None,
        help="Comma-separated product ids to add to the quote cart.",
    )
    parser.add_argument(
        "--select-all",
        action="store_true",
        default=False,
        dest="select_all",
        help="Add the full catalog to the quote cart.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table", "tsv"],
        default="json",
        dest="output_format",
        help="Output format (default: json). tsv prints the quote manifest.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        dest="catalog_path",
        help="Path to a catalog JSON file (default: bundled catalog).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual storefront."""
    from storefront.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("Storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Print the catalog view and cart, then exit."""
    from storefront.cli.runner import cli_view

    exit_code = cli_view(
        search=args.search,
        category=args.category,
        currency=args.currency,
        max_price=args.max_price,
        sort=args.sort,
        select_csv=args.select,
        select_all=args.select_all,
        output_format=args.output_format,
        catalog_path=args.catalog_path,
    )
    sys.exit(exit_code)


_HEADLESS_OPTIONS = (
    "category",
    "currency",
    "max_price",
    "sort",
    "select",
    "select_all",
    "output_format",
    "catalog_path",
)


def wants_tui(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> bool:
    """True when nothing on the command line asks for headless output.

    Any filter, selection or output option implies the CLI, even
    without a search term.
    """
    if args.search is not None or args.headless:
        return False
    return all(
        getattr(args, name) == parser.get_default(name)
        for name in _HEADLESS_OPTIONS
    )


def main(argv: list[str] | None = None) -> None:
    """Route to the TUI (bare invocation) or the headless CLI."""
    log_file = setup_logging()
    logger.info("Storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args(argv)

    if wants_tui(parser, args):
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
