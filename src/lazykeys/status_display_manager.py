"""
Status Display Manager - Manages status information and display formatting.

Consolidates status tracking and footer management for the TUI.
"""

import urwid
from typing import Optional
from lazykeys.tui.key_bindings import KEY_HELP, KEY_TOGGLE_MODE

from lazykeys import __version__


def _key_label(key: str) -> str:
    """Footer label for an urwid key name, e.g. 'ctrl g' -> '^G'."""
    if key.startswith('ctrl '):
        return '^' + key[len('ctrl '):].upper()
    return key.upper()


class StatusInfo:
    """Data class to hold status information."""

    def __init__(self):
        self.item_count = 0
        self.results_count = 0
        self.query = ""
        self.mode = "animation"

    def update(self, **kwargs):
        """Update status fields from keyword arguments."""
        for key, value in kwargs.items():
            if hasattr(self, key) and value is not None:
                setattr(self, key, value)


class StatusDisplayManager:
    """Manages status information display and footer formatting."""

    def __init__(self):
        self.status_info = StatusInfo()
        self._left_text_widget: Optional[urwid.Text] = None
        self._right_text_widget: Optional[urwid.Text] = None

    def update_status(self, **kwargs):
        """Update status information."""
        self.status_info.update(**kwargs)
        self._refresh_display()

    def get_status_info(self) -> StatusInfo:
        """Get current status information."""
        return self.status_info

    def create_footer_widget(self) -> urwid.Widget:
        """Create the footer widget with current status."""
        self._left_text_widget = urwid.Text("")
        self._right_text_widget = urwid.Text("", align='right')

        footer_columns = urwid.Columns([self._left_text_widget, self._right_text_widget])
        self._refresh_display()
        return footer_columns

    def _refresh_display(self):
        """Refresh the footer display with current status."""
        if self._left_text_widget is None:
            return

        self._left_text_widget.set_text(self.format_left_text())
        self._right_text_widget.set_text(self._generate_key_bindings())

    def format_left_text(self) -> list:
        """Version, catalog size, match count and diagram mode."""
        left_text = [('dark cyan', f"LazyKeys v{__version__}")]

        if self.status_info.item_count > 0:
            left_text.append(('dark gray', f" • {self.status_info.item_count:,} shortcuts"))

        if self.status_info.query:
            left_text.append(('dark green', f" • {self.status_info.results_count} matches"))

        left_text.append(('yellow', f" • {self.status_info.mode}"))
        return left_text

    def _generate_key_bindings(self) -> list:
        """Generate key binding text for footer."""
        return [
            ('bold', _key_label(KEY_HELP)), ('dark gray', " help "),
            ('bold', _key_label(KEY_TOGGLE_MODE)), ('dark gray', " animation/legend "),
            ('bold', "↑↓"), ('dark gray', " navigate "),
            ('bold', "ESC"), ('dark gray', " clear/quit"),
        ]


class StatusFooter(urwid.WidgetWrap):
    """Footer widget that delegates to StatusDisplayManager."""

    def __init__(self):
        self._display_manager = StatusDisplayManager()
        super().__init__(self._display_manager.create_footer_widget())

    @property
    def status_info(self) -> StatusInfo:
        return self._display_manager.get_status_info()

    def update(self, item_count=None, results_count=None, query=None, mode=None):
        """Update footer with new status information."""
        self._display_manager.update_status(
            item_count=item_count,
            results_count=results_count,
            query=query,
            mode=mode,
        )
