"""
Keyboard diagram rendering.

Paints a fixed ASCII keyboard and highlights the keys of a shortcut.
Output lines are urwid text markup: lists of ``(attribute, text)``
tuples that ``urwid.Text`` draws as-is with the attributes in PALETTE.

Two modes:
- animation: one frame at a time, styled by key role (leader, modifier, plain)
- legend: every frame at once, each frame in its own colour
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .notation import Frame, Key, Sequence

logger = logging.getLogger('LazyKeys.Keyboard')

Markup = List[Tuple[str, str]]


class RenderMode(Enum):
    ANIMATION = "animation"
    LEGEND = "legend"


# Display attributes
STYLE_NORMAL = 'kb_normal'
STYLE_HIGHLIGHT = 'kb_highlight'
STYLE_LEADER = 'kb_leader'
STYLE_MODIFIER = 'kb_modifier'
STYLE_LEGEND_ARROW = 'legend_arrow'

# Per-frame colours for legend mode, cycled by frame index
FRAME_COLORS = (
    'brown',
    'dark green',
    'dark cyan',
    'dark magenta',
    'dark red',
    'dark blue',
    'yellow',
    'light green',
)
FRAME_STYLES = tuple(f'frame_{i}' for i in range(len(FRAME_COLORS)))
LEGEND_STYLES = tuple(f'legend_{i}' for i in range(len(FRAME_COLORS)))

PALETTE = [
    (STYLE_NORMAL, 'light gray', 'default'),
    (STYLE_HIGHLIGHT, 'black', 'brown'),
    (STYLE_LEADER, 'black', 'dark cyan'),
    (STYLE_MODIFIER, 'black', 'dark magenta'),
    (STYLE_LEGEND_ARROW, 'dark gray', 'default'),
] + [
    (style, 'black', color) for style, color in zip(FRAME_STYLES, FRAME_COLORS)
] + [
    (style, color, 'default') for style, color in zip(LEGEND_STYLES, FRAME_COLORS)
]

LEGEND_KEY_SEPARATOR = ' + '
LEGEND_FRAME_ARROW = ' → '
LEGEND_SPACE_GLYPH = '␣'

BOX_CHARS = frozenset('│┌┐└┘├┤┬┴┼─')

LAYOUT_UNSHIFTED = (
    "┌───┬──┬──┬──┬──┬──┬──┬──┬──┬──┬────┬───┬────┐",
    "│Esc│F1│F2│F3│F4│F5│F6│F7│F8│F9│ F10│F11│ F12│",
    "├───┴┬─┴┬─┴┬─┴┬─┴┬─┴┬──┬─┴┬─┴┬─┴┬──┬┴─┬─┴┬───┤",
    "│ `  │1 │2 │3 │4 │5 │6 │7 │8 │9 │0 │- │= │Bsp│",
    "├────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬──┤",
    "│Tab  │q │w │e │r │t │y │u │i │o │p │[ │] │\\ │",
    "├─────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴──┤",
    "│Caps  │a │s │d │f │g │h │j │k │l │; │' │Ent │",
    "├──────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴────┤",
    "│Shift  │z │x │c │v │b │n │m │, │. │/ │Shift │",
    "├────┬──┴┬─┴─┬┴──┴──┴──┴──┴──┴┬─┴─┬┴──┬───┬──┤",
    "│Ctrl│Sup│Alt│      Space     │Alt│Fn │Mnu│Ct│",
    "└────┴───┴───┴────────────────┴───┴───┴───┴──┘",
)

LAYOUT_SHIFTED = (
    "┌───┬──┬──┬──┬──┬──┬──┬──┬──┬──┬────┬───┬────┐",
    "│Esc│F1│F2│F3│F4│F5│F6│F7│F8│F9│ F10│F11│ F12│",
    "├───┴┬─┴┬─┴┬─┴┬─┴┬─┴┬──┬─┴┬─┴┬─┴┬──┬┴─┬─┴┬───┤",
    "│ ~  │! │@ │# │$ │% │^ │& │* │( │) │_ │+ │Bsp│",
    "├────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬──┤",
    "│Tab  │Q │W │E │R │T │Y │U │I │O │P │{ │} │| │",
    "├─────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴──┤",
    "│Caps  │A │S │D │F │G │H │J │K │L │: │\" │Ent │",
    "├──────┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴┬─┴────┤",
    "│Shift  │Z │X │C │V │B │N │M │< │> │? │Shift │",
    "├────┬──┴┬─┴─┬┴──┴──┴──┴──┴──┴┬─┴─┬┴──┬───┬──┤",
    "│Ctrl│Sup│Alt│      Space     │Alt│Fn │Mnu│Ct│",
    "└────┴───┴───┴────────────────┴───┴───┴───┴──┘",
)

# Abbreviated layout labels and the key names they stand for, both ways
_ALIAS_PAIRS = (
    ("bsp", "backsp"),
    ("ent", "enter"),
    ("ct", "ctrl"),
    ("mnu", "menu"),
    ("sup", "super"),
)
KEY_ALIASES: Dict[str, str] = {
    **{short: full for short, full in _ALIAS_PAIRS},
    **{full: short for short, full in _ALIAS_PAIRS},
}

# Glyphs sharing a keycap, unshifted first
_SHIFT_PAIRS = (
    ("`", "~"), ("1", "!"), ("2", "@"), ("3", "#"), ("4", "$"), ("5", "%"),
    ("6", "^"), ("7", "&"), ("8", "*"), ("9", "("), ("0", ")"), ("-", "_"),
    ("=", "+"), ("[", "{"), ("]", "}"), ("\\", "|"), (";", ":"), ("'", '"'),
    (",", "<"), (".", ">"), ("/", "?"),
)
SHIFT_PAIRS: Dict[str, str] = {
    **{plain: shifted for plain, shifted in _SHIFT_PAIRS},
    **{shifted: plain for plain, shifted in _SHIFT_PAIRS},
}

MODIFIER_LABELS = frozenset({"ctrl", "alt", "shift", "super"})


def _has_shift(labels: Iterable[str]) -> bool:
    return any(label.lower() == "shift" for label in labels)


def _append(spans: Markup, style: str, text: str):
    if spans and spans[-1][0] == style:
        spans[-1] = (style, spans[-1][1] + text)
    else:
        spans.append((style, text))


def resolve_label(label: str, mapping: Dict[str, object]) -> Optional[object]:
    """
    Find the entry for a layout label in a lowercase-keyed mapping.

    Tries an exact case-insensitive match, then the alias table, then
    for single glyphs the other glyph on the same keycap.
    """
    label_lower = label.lower()
    if label_lower in mapping:
        return mapping[label_lower]

    alias = KEY_ALIASES.get(label_lower)
    if alias is not None and alias in mapping:
        return mapping[alias]

    if len(label) == 1:
        pair = SHIFT_PAIRS.get(label)
        if pair is not None and pair.lower() in mapping:
            return mapping[pair.lower()]

    return None


def markup_to_text(line: Markup) -> str:
    """Drop the attributes from one markup line."""
    return "".join(text for _, text in line)


class KeyboardRenderer:
    """Renders the keyboard layout with shortcut keys highlighted."""

    def layout_lines(self, shift_active: bool) -> Tuple[str, ...]:
        return LAYOUT_SHIFTED if shift_active else LAYOUT_UNSHIFTED

    def render(self, keys: Frame) -> List[Markup]:
        """
        Animation mode: highlight the keys of a single frame.

        Args:
            keys: Keys pressed together; empty renders the bare layout

        Returns:
            One markup line per layout row
        """
        styles: Dict[str, str] = {}
        for key in keys:
            styles[key.label.lower()] = self._key_style(key)

        layout = self.layout_lines(_has_shift(key.label for key in keys))
        return [self._paint_line(line, lambda label: resolve_label(label, styles)) for line in layout]

    def render_legend(self, frames: Sequence) -> List[Markup]:
        """
        Legend mode: show every frame at once, coloured by frame index.

        A key used in several frames takes the colour of the last one.
        """
        key_to_frame: Dict[str, int] = {}
        for frame_index, frame in enumerate(frames):
            for key in frame:
                key_to_frame[key.label.lower()] = frame_index

        def frame_style(label: str) -> Optional[str]:
            frame_index = resolve_label(label, key_to_frame)
            if frame_index is None:
                return None
            return FRAME_STYLES[frame_index % len(FRAME_STYLES)]

        layout = self.layout_lines(_has_shift(key.label for frame in frames for key in frame))
        return [self._paint_line(line, frame_style) for line in layout]

    def render_legend_bar(self, frames: Sequence) -> Markup:
        """One-line summary of a sequence, e.g. ``␣ → F → F`` in frame colours."""
        spans: Markup = []
        for frame_index, frame in enumerate(frames):
            if frame_index:
                spans.append((STYLE_LEGEND_ARROW, LEGEND_FRAME_ARROW))
            text = LEGEND_KEY_SEPARATOR.join(self._legend_label(key) for key in frame)
            spans.append((LEGEND_STYLES[frame_index % len(LEGEND_STYLES)], text))
        return spans

    def render_mode(self, mode: RenderMode, frames: Sequence, frame_index: int = 0) -> List[Markup]:
        """Render the diagram for either mode."""
        if mode is RenderMode.LEGEND:
            return self.render_legend(frames)
        current = frames[frame_index] if frames else ()
        return self.render(current)

    @staticmethod
    def _key_style(key: Key) -> str:
        label_lower = key.label.lower()
        if key.is_leader or label_lower == "space":
            return STYLE_LEADER
        if key.is_modifier or label_lower in MODIFIER_LABELS:
            return STYLE_MODIFIER
        return STYLE_HIGHLIGHT

    @staticmethod
    def _legend_label(key: Key) -> str:
        if key.label.lower() == "space":
            return LEGEND_SPACE_GLYPH
        if len(key.label) == 1:
            return key.label.upper()
        return key.label

    @staticmethod
    def _paint_line(line: str, style_for: Callable[[str], Optional[str]]) -> Markup:
        """Split a layout row into cells and style each key label."""
        spans: Markup = []
        pos = 0
        while pos < len(line):
            char = line[pos]
            if char in BOX_CHARS or char == ' ':
                _append(spans, STYLE_NORMAL, char)
                pos += 1
                continue

            end = pos
            while end < len(line) and line[end] not in BOX_CHARS:
                end += 1
            cell = line[pos:end]
            _append(spans, style_for(cell.strip()) or STYLE_NORMAL, cell)
            pos = end
        return spans
