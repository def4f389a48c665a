#!/usr/bin/env python3
import sys
import logging
from PyQt6.QtWidgets import QApplication

from core.config import get_settings
from core.i3 import I3WindowRegistry
from core.registry import RegistryPoller
from core.search import WindowSearchController
from ui.window import SwitcherWindow


def load_stylesheet(app):
    """Loads the QSS stylesheet."""
    try:
        with open("styles.qss", "r") as f:
            app.setStyleSheet(f.read())
    except FileNotFoundError:
        logging.getLogger("wswitch").info("styles.qss not found, using default style")


def main():
    settings = get_settings()
    level = "DEBUG" if "--debug" in sys.argv else settings["log_level"]
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("wswitch")

    # Load Styles
    load_stylesheet(app)

    registry = I3WindowRegistry(timeout=settings["i3_msg_timeout"])
    controller = WindowSearchController(registry)
    poller = RegistryPoller(registry, interval_ms=int(settings["poll_interval_ms"]))

    window = SwitcherWindow(controller, registry)
    window.show()

    # Ensure window is focused and on top (Linux/i3 specific hints sometimes needed)
    window.activateWindow()
    window.raise_()

    controller.update()
    poller.start()

    exit_code = app.exec()

    poller.stop()
    controller.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
