"""
TUI components for LazyKeys.

This package contains the terminal user interface components:
- key_bindings: keyboard shortcuts of the cheat sheet itself
- widgets/: Reusable UI components
"""
