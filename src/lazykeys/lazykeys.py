import logging
from pathlib import Path
from typing import List, Optional, Union

from .catalog import Category, ShortcutItem, filter_by_category, load_catalog
from .config import get_log_path
from .keyboard import RenderMode
from .notation import Sequence, parse_notation
from .search_engine import RankedMatch, SearchEngine

logger = logging.getLogger('LazyKeys')

LOG_FORMAT = '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(log_path: Optional[Union[str, Path]] = None, verbose: bool = False) -> logging.Logger:
    """
    Attach the debug file handler and the console handler to the LazyKeys logger.

    Called once by the entry point; importing the package never touches logging.

    Args:
        log_path: Debug log file, defaults to config.get_log_path()
        verbose: Let INFO messages through to the console

    Returns:
        The configured 'LazyKeys' logger
    """
    log_path = Path(log_path) if log_path is not None else get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler for debug logging
    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    # Console handler for important messages only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.CRITICAL)
    console_handler.setFormatter(logging.Formatter('%(message)s'))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


class LazyKeys:
    """A loaded cheat sheet: catalog plus the search it is browsed with."""

    def __init__(self, catalog_path=None, category: Optional[Category] = None, catalog=None):
        if catalog is None:
            catalog = load_catalog(catalog_path)
        if category is not None:
            catalog = filter_by_category(catalog, category)
            logger.info("Restricted catalog to %s: %d shortcuts", category.label, len(catalog))
        self.catalog: List[ShortcutItem] = list(catalog)
        self.search_engine = SearchEngine()

    def search(self, query: str, limit: Optional[int] = None) -> List[RankedMatch]:
        return self.search_engine.rank(self.catalog, query, limit=limit)

    def parse(self, notation: str) -> Sequence:
        return parse_notation(notation)

    def get_catalog_info(self) -> dict:
        """Shortcut counts, overall and per category."""
        per_category = {}
        for item in self.catalog:
            per_category[item.category.label] = per_category.get(item.category.label, 0) + 1
        return {
            'item_count': len(self.catalog),
            'categories': per_category,
        }

    def tui(self, mode: RenderMode = RenderMode.ANIMATION):
        from .keys_tui import run_ui
        return run_ui(self.catalog, mode=mode)


def interactive_search(catalog_path=None, category: Optional[Category] = None,
                       mode: RenderMode = RenderMode.ANIMATION):
    """Load the catalog and run the interactive cheat sheet."""
    lazykeys = LazyKeys(catalog_path=catalog_path, category=category)
    logger.info("Loaded %d shortcuts", len(lazykeys.catalog))
    return lazykeys.tui(mode=mode)


def main():
    """Main entry point for the application"""
    from .cli_commands import main as cli_main
    cli_main()


if __name__ == '__main__':
    main()
