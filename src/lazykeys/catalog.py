"""
Shortcut catalog for LazyKeys.

Defines the ShortcutItem record together with its Category and Mode
enumerations, and loads the catalog from a JSON file.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from .config import get_catalog_path
from .error_handler_util import ErrorHandlerUtil

logger = logging.getLogger('LazyKeys.Catalog')
_errors = ErrorHandlerUtil.create_error_context('Catalog')


class CatalogError(Exception):
    """Raised when the shortcut catalog cannot be loaded."""


class Mode(Enum):
    """Editor mode a shortcut applies to."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Category(Enum):
    """The fixed set of shortcut categories."""

    GENERAL = "general"
    NAVIGATION = "navigation"
    SEARCH = "search"
    LSP = "lsp"
    GIT = "git"
    BUFFER = "buffer"
    WINDOW = "window"
    TAB = "tab"
    CODE = "code"
    DEBUG = "debug"
    TERMINAL = "terminal"
    UI = "ui"
    PLUGIN = "plugin"

    @property
    def label(self) -> str:
        """Display label used in the results list and for ranking."""
        return _CATEGORY_LABELS.get(self, self.value.capitalize())

    @classmethod
    def all(cls) -> List['Category']:
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> 'Category':
        """Look up a category by JSON value or display label, case-insensitively."""
        key = name.strip().lower()
        for category in cls:
            if key in (category.value, category.label.lower()):
                return category
        raise ValueError(f"Unknown category '{name}'. Available: {[c.value for c in cls]}")


_CATEGORY_LABELS = {
    Category.LSP: "LSP",
    Category.UI: "UI",
}


@dataclass(frozen=True)
class ShortcutItem:
    """One cheat-sheet entry: a notation plus what it does."""

    notation: str
    description: str
    category: Category
    mode: Mode = Mode.NORMAL

    @classmethod
    def from_dict(cls, data: dict) -> 'ShortcutItem':
        """
        Build an item from one JSON record.

        Args:
            data: Mapping with 'keys', 'description', 'category' and optional 'mode'

        Raises:
            KeyError: If a required field is missing
            ValueError: If category or mode is not a known value
        """
        return cls(
            notation=str(data['keys']),
            description=str(data['description']),
            category=Category(str(data['category']).lower()),
            mode=Mode(str(data.get('mode', Mode.NORMAL.value)).lower()),
        )


def load_catalog(path: Optional[Union[str, Path]] = None) -> List[ShortcutItem]:
    """
    Load the shortcut catalog.

    Args:
        path: JSON file to read. Defaults to config.get_catalog_path().

    Returns:
        List of ShortcutItem in file order

    Raises:
        CatalogError: If the file is unreadable or any record is invalid
    """
    catalog_path = Path(path) if path is not None else get_catalog_path()
    logger.debug("Loading catalog from %s", catalog_path)

    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except OSError as e:
        _errors.log_and_raise_operation_error(
            "Loading catalog", f"cannot read {catalog_path}: {e}", CatalogError, cause=e
        )
    except json.JSONDecodeError as e:
        _errors.log_and_raise(f"Invalid JSON in catalog {catalog_path}: {e}", CatalogError, cause=e)

    if not isinstance(records, list):
        _errors.log_and_raise(
            f"Catalog {catalog_path} must contain a list, got {type(records).__name__}",
            CatalogError
        )

    items = []
    for i, record in enumerate(records):
        try:
            items.append(ShortcutItem.from_dict(record))
        except (KeyError, ValueError, TypeError) as e:
            _errors.log_and_raise(f"Invalid catalog record {i} in {catalog_path}: {e!r}", CatalogError, cause=e)

    logger.info("Loaded %d shortcuts from %s", len(items), catalog_path)
    return items


def filter_by_category(catalog: List[ShortcutItem], category: Category) -> List[ShortcutItem]:
    """Return the items of one category, keeping catalog order."""
    return [item for item in catalog if item.category is category]
