"""
Key binding constants for the LazyKeys TUI.
Centralized location for all keyboard shortcuts of the cheat sheet itself.
"""

# Leaving
KEY_QUIT = 'esc'  # Clears the query first, quits when it is already empty
KEY_FORCE_QUIT = 'ctrl c'

# Navigation
KEY_NAVIGATE_UP = 'up'
KEY_NAVIGATE_DOWN = 'down'
KEY_NEXT = 'tab'
KEY_PREVIOUS = 'shift tab'
KEY_HOME = 'home'
KEY_END = 'end'

# Display
KEY_TOGGLE_MODE = 'ctrl l'  # Animation <-> legend

# Help and Information
KEY_HELP = 'ctrl g'  # Guide/help

NEXT_KEYS = (KEY_NAVIGATE_DOWN, KEY_NEXT)
PREVIOUS_KEYS = (KEY_NAVIGATE_UP, KEY_PREVIOUS)

# Global Navigation Keys (passed through from input)
NAVIGATION_KEYS = NEXT_KEYS + PREVIOUS_KEYS + (KEY_HOME, KEY_END)

# Input handling - keys that should be passed through to parent
INPUT_PASSTHROUGH_KEYS = NAVIGATION_KEYS + (KEY_QUIT, KEY_FORCE_QUIT, KEY_TOGGLE_MODE, KEY_HELP)
