"""
Footer widget for the LazyKeys TUI.
"""

from ...status_display_manager import StatusFooter

__all__ = ['StatusFooter']
