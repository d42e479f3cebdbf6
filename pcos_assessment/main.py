# -*- coding: utf-8 -*-
"""
PCOS Risk Assessment - application entry point.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from pcos_assessment.app import Config, MainWindow, get_stylesheet
from pcos_assessment.utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)
        app.setStyleSheet(get_stylesheet())

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        if Config.INFERENCE_API_URL:
            logger.info(f"Inference service: {Config.INFERENCE_API_URL}")
        else:
            logger.info("No inference service configured, using mock results")
        logger.info("=" * 80)

        window = MainWindow()
        window.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
