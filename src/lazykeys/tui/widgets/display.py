"""
Display widgets for the LazyKeys TUI.
"""

import urwid
import logging
from typing import List

from ...catalog import ShortcutItem
from ...keyboard import Markup
from ..key_bindings import NAVIGATION_KEYS

logger = logging.getLogger('LazyKeys.TUI')

NOTATION_WIDTH = 18


class SearchPile(urwid.Pile):
    """Pile that keeps focus on the search box.

    urwid moves Pile focus on up/down; here the navigation keys go back
    to the application instead, which moves the controller's selection.
    """

    def keypress(self, size, key):
        if key in NAVIGATION_KEYS:
            return key
        return super().keypress(size, key)


class ShortcutResult(urwid.WidgetWrap):
    """Widget representing one catalog entry in the results list."""

    def __init__(self, item: ShortcutItem, selected=False):
        self.item = item
        self.selected = selected
        super().__init__(self._create_widget())

    def _create_widget(self):
        """Create the underlying widget for the current selection state."""
        left_text, right_text = self._build_text_content()

        columns = urwid.Columns([
            ('weight', 1, urwid.Text(left_text, wrap='clip')),
            ('pack', urwid.Text(right_text, align='right'))
        ])
        return urwid.AttrMap(columns, 'result_selected' if self.selected else None)

    def set_selected(self, selected: bool):
        """Redraw with or without the selection arrow."""
        if selected == self.selected:
            return
        self.selected = selected
        self._w = self._create_widget()

    def selectable(self):
        # Selection lives in the controller; rows never take focus
        return False

    def _build_text_content(self):
        """Build the text content for this row: keys │ description │ [Category]."""
        left_text = []
        if self.selected:
            left_text.append(('light cyan', "▶ "))
        else:
            left_text.append(('dark gray', "  "))

        left_text.append(('result_keys', self.item.notation.ljust(NOTATION_WIDTH)))
        left_text.append(('dark gray', " │ "))
        left_text.append(('default', self.item.description))

        right_text = [('result_category', f"[{self.item.category.label}]")]
        return left_text, right_text


class KeyboardDiagram(urwid.WidgetWrap):
    """Bordered keyboard diagram with the legend bar underneath."""

    def __init__(self):
        self._rows = urwid.Pile([])
        self._legend = urwid.Text("", align='center')
        self._box = urwid.LineBox(
            urwid.Pile([self._rows, urwid.Divider(), self._legend]),
            title='Keyboard'
        )
        super().__init__(self._box)

    def update(self, lines: List[Markup], legend: Markup, title: str = 'Keyboard'):
        """Replace the diagram rows, the legend bar and the box title."""
        self._rows.contents = [
            (urwid.Text(line or "", align='center', wrap='clip'), self._rows.options('pack'))
            for line in lines
        ]
        self._legend.set_text(legend or "")
        self._box.set_title(title)
