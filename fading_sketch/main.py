"""
Fading Sketch - Main Entry Point

Freehand drawing canvas whose committed strokes fade out after a delay.

Usage:
    python -m fading_sketch.main
"""

import sys
from PyQt6.QtWidgets import QApplication

from .config import Config
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication.instance() or QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    return app


def main():
    """
    Main entry point for Fading Sketch

    Creates the application, sets up the main window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path()}")

    app = setup_application()

    # Create and show main window
    from .widgets.main_window import MainWindow
    window = MainWindow()
    window.show()

    logger.info(f"Decay delay: {Config.DECAY_DELAY_MS} ms")

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
