"""
Custom edit widgets for the LazyKeys TUI.
"""

import urwid
import logging

from ..key_bindings import INPUT_PASSTHROUGH_KEYS

logger = logging.getLogger('LazyKeys.TUI')


class WatermarkEdit(urwid.Edit):
    """Custom Edit widget with watermark text when empty."""

    def __init__(self, caption="", edit_text="", watermark_text="", **kwargs):
        super().__init__(caption, edit_text, **kwargs)
        self.watermark_text = watermark_text

    def render(self, size, focus=False):
        """Show the watermark while the query is empty."""
        if not self.edit_text and self.watermark_text:
            full_watermark = [self.caption, ('placeholder_text', self.watermark_text)]
            return urwid.Text(full_watermark, align='left').render(size, focus)
        return super().render(size, focus)

    def keypress(self, size, key):
        """Hand navigation and global commands to the parent, edit everything else."""
        if key in INPUT_PASSTHROUGH_KEYS:
            logger.debug("WatermarkEdit: passing '%s' to parent", key)
            return key
        return super().keypress(size, key)
