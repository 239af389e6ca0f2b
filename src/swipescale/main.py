"""
Application Initialization
==========================
This module builds the window and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging.
2. Creates the Qt Application.
3. Instantiates the Main Window, which owns the stage and the animation
   controller.
"""
import argparse
import logging
import sys
from typing import List, Optional

from swipescale.app import create_app
from swipescale.logging_config import setup_logging


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="swipescale", description="DPI × sensitivity swipe visualiser")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    args, _qt_args = parser.parse_known_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # Imported after the QApplication exists
    from swipescale.view.main_window import MainWindow

    # 3. Initialize the Main Window
    window = MainWindow()
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
