"""
Help dialog widget for the LazyKeys TUI.
"""

import urwid
from ..key_bindings import KEY_HELP, KEY_QUIT


class HelpDialog(urwid.WidgetWrap):
    """Help dialog listing the cheat sheet's own keys and the notation it reads"""

    def __init__(self):
        help_text = [
            ('bold', 'Keys:\n'),
            ('bold', '• Type: '), 'Fuzzy search descriptions, keys and categories\n',
            ('bold', '• ↑ ↓ / Shift+Tab Tab: '), 'Move the selection (wraps around)\n',
            ('bold', '• Ctrl+L: '), 'Switch between animation and legend\n',
            ('bold', '• ESC: '), 'Clear the search, quit when it is empty\n',
            ('bold', '• Ctrl+C: '), 'Quit\n\n',

            ('bold', 'Reading the diagram:\n'),
            ('kb_leader', ' Space '), ' leader key   ',
            ('kb_modifier', ' Ctrl '), ' modifier   ',
            ('kb_highlight', ' x '), ' key\n',
            'Legend mode colours every step of the sequence at once.\n\n',

            ('bold', 'Notation:\n'),
            ('bold', '• <leader>ff '), 'Space, then f, then f\n',
            ('bold', '• <C-w>v '), 'Ctrl+W together, then v\n',
            ('bold', '• gD '), 'g, then Shift+d\n\n',

            ('dark gray', 'Run "lazykeys --help" for catalog and output options\n\n'),
            ('dark gray', 'Press Ctrl+G or ESC to close')
        ]

        content = urwid.Text(help_text)
        padded = urwid.Padding(content, left=2, right=2)
        filled = urwid.Filler(padded, valign='top', top=1)

        box = urwid.LineBox(filled, title='Help')

        super().__init__(box)

    def keypress(self, size, key):
        if key in (KEY_QUIT, KEY_HELP):
            return 'close_help'
        return super().keypress(size, key)
