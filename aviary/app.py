"""Application entry point for the Aviary escape room."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from aviary.core.config import load_room_config
from aviary.core.runtime import GameRuntime
from aviary.ui.main_window import MainWindow
from aviary.ui.scene import QtScheduler


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the room, wire the game runtime to the window and start Qt."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Aviary Escape")
    app.setApplicationDisplayName("Aviary Escape")

    config = load_room_config()
    window = MainWindow(config)
    runtime = GameRuntime(
        scene=window.scene,
        overlay=window.overlay,
        scheduler=QtScheduler(),
        config=config,
    )
    # The fallback start runs on its own clock, whether or not the scene has loaded.
    runtime.schedule_auto_start()
    window.scene_loaded.connect(runtime.init)

    window.resize(1360, 800)
    window.show()
    logging.info("Waiting for the aviary scene to load")

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
