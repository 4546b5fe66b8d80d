"""
Cheat sheet controller.

Owns all mutable state of an interactive session: the query, the ranked
results, the selected row, the frame sequencer and the diagram mode. The
urwid front end only forwards input and ticks here and draws what it
gets back.
"""

import logging
from typing import List, Optional, Sequence

from .catalog import ShortcutItem
from .keyboard import KeyboardRenderer, Markup, RenderMode
from .notation import Sequence as KeySequence
from .notation import frame_labels, parse_notation
from .search_engine import RankedMatch, SearchEngine
from .sequencer import FrameSequencer

logger = logging.getLogger('LazyKeys.Controller')


class CheatSheetController:
    """Query, selection and animation state for one session."""

    def __init__(self, catalog: Sequence[ShortcutItem],
                 search_engine: Optional[SearchEngine] = None,
                 renderer: Optional[KeyboardRenderer] = None,
                 sequencer: Optional[FrameSequencer] = None,
                 mode: RenderMode = RenderMode.ANIMATION,
                 result_limit: Optional[int] = None):
        self.catalog = list(catalog)
        self.search_engine = search_engine or SearchEngine()
        self.renderer = renderer or KeyboardRenderer()
        self.sequencer = sequencer or FrameSequencer()
        self.mode = mode
        self.result_limit = result_limit

        self.query = ""
        self.results: List[RankedMatch] = []
        self.selected_position = 0
        self._shown_index: Optional[int] = None

        self._update_results()

    # Query editing

    def set_query(self, query: str):
        """Replace the query, re-rank and select the top result."""
        if query == self.query:
            return
        self.query = query
        self._update_results()

    def append_char(self, char: str):
        self.set_query(self.query + char)

    def backspace(self):
        self.set_query(self.query[:-1])

    def clear_query(self):
        self.set_query("")

    # Selection

    @property
    def visible_results(self) -> List[RankedMatch]:
        """Results the list shows; selection never leaves these rows."""
        if self.result_limit is None:
            return self.results
        return self.results[:self.result_limit]

    def select(self, position: int):
        """Select a visible row; out-of-range positions are ignored."""
        if 0 <= position < len(self.visible_results):
            self.selected_position = position
            self._sync_sequencer()

    def select_next(self):
        count = len(self.visible_results)
        if count:
            self.select((self.selected_position + 1) % count)

    def select_previous(self):
        count = len(self.visible_results)
        if count:
            self.select((self.selected_position - 1) % count)

    def select_first(self):
        self.select(0)

    def select_last(self):
        self.select(len(self.visible_results) - 1)

    @property
    def selected_match(self) -> Optional[RankedMatch]:
        if 0 <= self.selected_position < len(self.results):
            return self.results[self.selected_position]
        return None

    @property
    def selected_item(self) -> Optional[ShortcutItem]:
        match = self.selected_match
        return match.item if match else None

    @property
    def selected_index(self) -> Optional[int]:
        """Catalog index of the selected item."""
        match = self.selected_match
        return match.index if match else None

    # Animation and rendering

    def toggle_mode(self) -> RenderMode:
        self.mode = RenderMode.LEGEND if self.mode is RenderMode.ANIMATION else RenderMode.ANIMATION
        logger.info("Diagram mode switched to %s", self.mode.value)
        logger.debug("Sequencer state: %s", self.sequencer.snapshot())
        return self.mode

    def tick(self, delta: float) -> bool:
        """Advance the animation clock; True if a redraw is needed."""
        return self.sequencer.on_tick(delta)

    @property
    def current_frames(self) -> KeySequence:
        return self.sequencer.frames

    def keyboard_lines(self) -> List[Markup]:
        return self.renderer.render_mode(self.mode, self.sequencer.frames, self.sequencer.frame_index)

    def legend_bar(self) -> Markup:
        return self.renderer.render_legend_bar(self.sequencer.frames)

    # Internals

    def _update_results(self):
        self.results = self.search_engine.rank(self.catalog, self.query)
        self.selected_position = 0
        logger.debug("Query '%s' -> %d results", self.query, len(self.results))
        self._sync_sequencer()

    def _sync_sequencer(self):
        """Restart the animation when the selected catalog entry changes."""
        index = self.selected_index
        if index == self._shown_index:
            return
        self._shown_index = index

        item = self.selected_item
        frames = parse_notation(item.notation) if item else ()
        self.sequencer.on_selection_changed(frames)
        if item:
            logger.debug("Selected '%s' (%s): %s", item.notation, item.description, frame_labels(frames))
