"""
Runtime configuration for LazyKeys.

Fixed timing constants live here together with the handful of settings
that can be overridden from the environment.
"""

import os
from pathlib import Path
from typing import Dict

# Animation clock
FRAME_DURATION = 0.5  # seconds each frame stays on screen
POLL_INTERVAL = 0.05  # host loop cadence in seconds

# Results list
MAX_DISPLAYED_RESULTS = 50

# Bundled LazyVim cheat sheet
DEFAULT_CATALOG_PATH = Path(__file__).parent / 'data' / 'commands.json'
DEFAULT_LOG_PATH = Path('~/.lazykeys/debug.log')

# Start modes understood by LAZYKEYS_START_MODE / --legend
START_MODES: Dict[str, str] = {
    "animation": "Replay the selected shortcut one frame at a time",
    "legend": "Show every frame at once, coloured by step",
}
DEFAULT_START_MODE = "animation"


def get_catalog_path() -> Path:
    """
    Get the catalog file to load.

    Returns:
        Path: LAZYKEYS_CATALOG if set, otherwise the bundled catalog
    """
    override = os.getenv('LAZYKEYS_CATALOG')
    if override:
        return Path(override).expanduser()
    return DEFAULT_CATALOG_PATH


def get_log_path() -> Path:
    """Get the debug log location (LAZYKEYS_LOG_FILE or ~/.lazykeys/debug.log)."""
    return Path(os.getenv('LAZYKEYS_LOG_FILE', str(DEFAULT_LOG_PATH))).expanduser()


def get_start_mode() -> str:
    """
    Get the diagram mode the TUI starts in.

    Returns:
        str: One of the START_MODES keys

    Raises:
        ValueError: If LAZYKEYS_START_MODE names an unknown mode
    """
    mode = os.getenv('LAZYKEYS_START_MODE', DEFAULT_START_MODE).strip().lower()
    if mode not in START_MODES:
        available = list(START_MODES.keys())
        raise ValueError(f"Unknown start mode '{mode}'. Available modes: {available}")
    return mode
