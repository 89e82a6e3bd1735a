import faulthandler
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from aboutsettings.gui.main_window import MainWindow


def run() -> None:
    faulthandler.enable()
    logging.basicConfig(
        level=os.environ.get("ABOUTSETTINGS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    app.setApplicationName("About This Device")

    w = MainWindow()
    w.show()

    raise SystemExit(app.exec())
