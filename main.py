import sys
import os
import argparse

from locedit_logger import get_logger
logger = get_logger("main")

if getattr(sys, 'frozen', False):
    application_path = os.path.dirname(sys.executable)
    sys.path.insert(0, application_path)
    logger.debug(f"Running from bundle. Added to sys.path: {application_path}")
elif __file__:
    application_path = os.path.dirname(__file__)
    if application_path not in sys.path:
        sys.path.insert(0, application_path)
    logger.debug(f"Running from script. Added to sys.path: {application_path}")

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer

import locedit_config as config
from app_bootstrap import bootstrap


def main():
    parser = argparse.ArgumentParser(
        description="Line-oriented game localization editor (LocEdit).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    parser.add_argument(
        "input_file",
        help="Path to the localization file to open on startup (optional).",
        nargs='?',
        default=None
    )
    args = parser.parse_args()

    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)

    controller, window = bootstrap()
    logger.info("Bootstrap complete. Controller and View created.")

    window.show()
    logger.info("LocEdit GUI started.")

    if args.input_file:
        input_path = os.path.abspath(args.input_file)
        logger.debug(f"Scheduling loading for: {input_path}")
        # A missing file is reported by the window itself
        QTimer.singleShot(0, lambda f=input_path: window.load_file(f))

    exit_code = app.exec()
    logger.info(f"LocEdit GUI finished with exit code {exit_code}.")
    sys.exit(exit_code)

if __name__ == "__main__":
    logger.info(f"Starting LocEdit v{config.VERSION}...")
    main()
