# -*- coding: utf-8 -*-
"""Message boxes shown by the UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from pcos_assessment.services.error_mapper import CONTEXT_INFERENCE, map_exception
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Shows translated dialogs; exceptions go through map_exception first."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None, context: str = CONTEXT_INFERENCE) -> str:
        """
        Log an exception with its traceback and show the mapped message.

        Returns:
            The message shown to the user
        """
        logger.error(f"{context} failed: {error}", exc_info=error)
        message = map_exception(error, context)
        ErrorHandler.show_error(parent, message)
        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = None):
        QMessageBox.information(parent, title or tr("dialog.success"), message)

    @staticmethod
    def show_info(parent: QWidget, message: str, title: str = None):
        QMessageBox.information(parent, title or tr("dialog.info"), message)
