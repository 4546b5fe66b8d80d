"""Command-line interface commands and utilities for LazyKeys."""

import argparse
import sys
import logging

from . import __version__
from .catalog import Category, CatalogError
from .config import MAX_DISPLAYED_RESULTS, get_start_mode
from .keyboard import KeyboardRenderer, RenderMode, markup_to_text
from .notation import describe_sequence, frame_labels, parse_notation

logger = logging.getLogger('LazyKeys')

NOTATION_COLUMN = 18


def print_search_results(lazykeys_instance, query: str, limit: int = MAX_DISPLAYED_RESULTS):
    """Print the ranked matches for a query as a plain table."""
    results = lazykeys_instance.search(query, limit=limit)
    if not results:
        print(f"No shortcuts match '{query}'")
        return

    for match in results:
        item = match.item
        print(f"{match.score:>5}  {item.notation:<{NOTATION_COLUMN}} │ {item.description}  [{item.category.label}]")


def print_notation(notation: str):
    """Print the parsed frames of a notation and the legend diagram."""
    frames = parse_notation(notation)
    print(f"{notation}: {describe_sequence(frames) or '(no keys)'}")
    for step, labels in enumerate(frame_labels(frames), start=1):
        print(f"  {step}. {' + '.join(labels)}")
    print()
    for line in KeyboardRenderer().render_legend(frames):
        print(markup_to_text(line))


def print_catalog_info(lazykeys_instance):
    """Print catalog counts per category."""
    info = lazykeys_instance.get_catalog_info()
    print(f"LazyKeys v{__version__} - {info['item_count']} shortcuts")
    print("=" * 45)
    for label, count in info['categories'].items():
        print(f"  {label:<12} {count}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LazyKeys: an animated, searchable keyboard shortcut cheat sheet.")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--catalog', metavar='PATH', help='Shortcut catalog JSON file (default: bundled LazyVim sheet).')
    parser.add_argument('--search', metavar='QUERY', help='Print the ranked matches for QUERY and exit.')
    parser.add_argument('--parse', metavar='NOTATION', help='Print the key frames of NOTATION and exit.')
    parser.add_argument('--category', metavar='NAME', help='Only use shortcuts of one category, e.g. "git" or "LSP".')
    parser.add_argument('--info', action='store_true', help='Show catalog statistics and exit.')
    parser.add_argument('--legend', action='store_true', help='Start the diagram in legend mode.')
    parser.add_argument('--verbose', action='store_true', help='Echo informational log messages to the console.')
    return parser


def resolve_start_mode(args) -> RenderMode:
    """--legend wins over LAZYKEYS_START_MODE."""
    if args.legend:
        return RenderMode.LEGEND
    return RenderMode(get_start_mode())


def handle_cli_commands(argv=None):
    """
    Handle command-line arguments and execute one-shot CLI commands.

    Returns:
        The parsed arguments when the interactive UI should run, else None
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    from .lazykeys import configure_logging
    configure_logging(verbose=args.verbose)
    logger.debug("CLI arguments: %s", vars(args))

    if args.parse is not None:
        print_notation(args.parse)
        return None

    category = None
    if args.category:
        try:
            category = Category.from_name(args.category)
        except ValueError as e:
            parser.error(str(e))

    if args.search is not None or args.info:
        from .lazykeys import LazyKeys
        try:
            lazykeys = LazyKeys(catalog_path=args.catalog, category=category)
        except CatalogError as e:
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)

        if args.info:
            print_catalog_info(lazykeys)
        else:
            print_search_results(lazykeys, args.search)
        return None

    try:
        args.start_mode = resolve_start_mode(args)
    except ValueError as e:
        parser.error(str(e))
    args.category_filter = category
    return args


def main(argv=None):
    """Main entry point for the application"""
    args = handle_cli_commands(argv)

    if args is None:
        # CLI command was handled, exit
        return

    from .lazykeys import interactive_search
    try:
        interactive_search(catalog_path=args.catalog, category=args.category_filter, mode=args.start_mode)
    except CatalogError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
