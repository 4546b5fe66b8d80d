"""LazyKeys: an animated, searchable keyboard-shortcut cheat sheet."""

__version__ = "1.0.0"
