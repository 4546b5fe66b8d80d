"""
Shortcut notation parser.

Turns Vim-style notation such as ``<leader>ff`` or ``<C-w>v`` into a
sequence of frames, where each frame is the tuple of keys pressed
together at one step of the shortcut.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Key:
    """A single key as drawn on the diagram."""

    label: str
    is_modifier: bool = False
    is_leader: bool = False


Frame = Tuple[Key, ...]
Sequence = Tuple[Frame, ...]

SHIFT = Key("Shift", is_modifier=True)

# Single-token specials: <leader>, <CR>, <Esc> ...
_SPECIAL_KEYS = {
    "leader": "Space",
    "space": "Space",
    "cr": "Enter",
    "enter": "Enter",
    "return": "Enter",
    "esc": "Esc",
    "escape": "Esc",
    "bs": "Backsp",
    "backspace": "Backsp",
    "tab": "Tab",
}

_LEADER_TOKENS = frozenset({"leader", "space"})

_MODIFIERS = {
    "c": "Ctrl",
    "ctrl": "Ctrl",
    "control": "Ctrl",
    "s": "Shift",
    "shift": "Shift",
    "a": "Alt",
    "alt": "Alt",
    "m": "Alt",
    "meta": "Alt",
}

# Extra names accepted only as the target of a modifier combo
_TARGET_KEYS = {
    **_SPECIAL_KEYS,
    "up": "Up",
    "down": "Down",
    "left": "Left",
    "right": "Right",
}

_SEPARATORS = frozenset("-+")


def _special_key(body: str) -> Key:
    token = body.lower()
    if token in _SPECIAL_KEYS:
        return Key(_SPECIAL_KEYS[token], is_leader=token in _LEADER_TOKENS)
    return Key(body)


def _combo_frame(parts: List[str]) -> Frame:
    *modifier_parts, target = parts
    keys = [
        Key(_MODIFIERS[part.lower()], is_modifier=True)
        for part in modifier_parts
        if part.lower() in _MODIFIERS
    ]
    token = target.lower()
    keys.append(Key(_TARGET_KEYS.get(token, token), is_leader=token in _LEADER_TOKENS))
    return tuple(keys)


def _token_frame(body: str) -> Frame:
    # <C--> names the minus key itself
    if len(body) > 2 and body.endswith("--"):
        return _combo_frame(body[:-2].split("-") + ["-"])
    parts = body.split("-")
    if len(parts) == 1:
        return (_special_key(body),)
    return _combo_frame(parts)


def _literal_frame(char: str) -> Frame:
    if "A" <= char <= "Z":
        return (SHIFT, Key(char.lower()))
    return (Key(char),)


def parse_notation(notation: str) -> Sequence:
    """
    Parse a shortcut notation into frames.

    Never raises: an unterminated ``<`` token runs to the end of the
    string and unknown names pass through as literal labels.

    Args:
        notation: Shortcut string, e.g. "<leader>ff" or "<C-w>v"

    Returns:
        Tuple of frames in reading order
    """
    frames: List[Frame] = []
    pos = 0
    length = len(notation)

    while pos < length:
        char = notation[pos]
        if char == "<":
            end = notation.find(">", pos + 1)
            if end == -1:
                end = length
            frames.append(_token_frame(notation[pos + 1:end]))
            pos = end + 1
        elif char in _SEPARATORS:
            pos += 1
        else:
            frames.append(_literal_frame(char))
            pos += 1

    return tuple(frames)


def frame_labels(frames: Sequence) -> List[List[str]]:
    """Key labels of each frame, for logging and plain-text output."""
    return [[key.label for key in frame] for frame in frames]


def describe_sequence(frames: Sequence) -> str:
    """
    Plain-text rendering of a sequence, e.g. ``Ctrl+W → V``.

    Single-character keys are uppercased to read like keycaps.
    """
    steps = []
    for frame in frames:
        steps.append("+".join(
            key.label.upper() if len(key.label) == 1 else key.label
            for key in frame
        ))
    return " → ".join(steps)
