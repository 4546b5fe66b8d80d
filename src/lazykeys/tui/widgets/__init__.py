"""
Reusable UI widgets for the LazyKeys TUI.
"""

from .help_dialog import HelpDialog
from .edit_widgets import WatermarkEdit
from .footer import StatusFooter
from .display import KeyboardDiagram, SearchPile, ShortcutResult

__all__ = [
    'HelpDialog',
    'WatermarkEdit',
    'StatusFooter',
    'KeyboardDiagram',
    'SearchPile',
    'ShortcutResult'
]
