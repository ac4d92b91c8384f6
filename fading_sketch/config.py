"""
Global configuration for Fading Sketch

Canvas geometry, stroke styling and decay timing live here so the
core state machine and the Qt shell read the same values.
"""

import os
import sys
from pathlib import Path
from typing import Final


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Fading Sketch"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Fading Sketch"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Canvas settings
    CANVAS_WIDTH: Final[int] = 1280
    CANVAS_HEIGHT: Final[int] = 720
    CANVAS_BACKGROUND: Final[str] = "#FFFFFF"

    # Stroke styling
    DEFAULT_STROKE_COLOR: Final[str] = "#000000"  # Live stroke
    ACCENT_STROKE_COLOR: Final[str] = "red"       # Committed strokes
    STROKE_WIDTH: Final[float] = 1.0

    # Decay timing
    DECAY_DELAY_MS: Final[int] = 2000  # Committed path is cleared this long after commit

    # Logging
    LOG_FOLDER_NAME: Final[str] = "logs"
    LOG_FILE_NAME: Final[str] = "fading_sketch.log"

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux).
        """
        # If 'portable.txt' exists next to the package, stick to local folder
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'FadingSketch'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'FadingSketch'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'FadingSketch'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder the log file is written to."""
        return cls.get_user_data_dir() / cls.LOG_FOLDER_NAME


__all__ = ['Config']
