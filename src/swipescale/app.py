from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
import sys

ORG_ID = "swipescale"
APP_ID = "swipescale"

VISIBLE_APP_NAME = "SwipeScale"


def create_app() -> QApplication:
    """Create and configure the QApplication instance (reused if one exists)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
