# -*- coding: utf-8 -*-
"""
Turns errors from submission and export into messages for the user.

Technical details are logged, never shown.
"""

from pcos_assessment.services.exceptions import ApiException, NetworkException
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)

CONTEXT_INFERENCE = "inference"
CONTEXT_EXPORT = "export"


def map_api_error(error: ApiException) -> str:
    """Message for a response the inference service sent back."""
    if error.is_unreadable:
        logger.warning(f"Unreadable inference result: {error}")
        return tr("error.api.invalid_response")

    status = error.status_code
    logger.warning(f"Inference service returned {status}: {error.response_data or error}")

    if status == 400:
        details = _rejection_details(error.response_data)
        if details:
            return tr("error.api.validation", details=details)
    if status >= 500:
        return tr("error.api.server")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = CONTEXT_INFERENCE) -> str:
    """
    Map an exception to a user-facing message.

    Args:
        error: What was raised
        context: CONTEXT_INFERENCE for submissions, CONTEXT_EXPORT for PDF export
    """
    if isinstance(error, ApiException):
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return tr("error.api.timeout") if error.timed_out else tr("error.api.connection")

    if context == CONTEXT_EXPORT and isinstance(error, OSError):
        return tr("error.export_failed", details=error.strerror or str(error))

    # ResultSummary.from_dict rejects result fields of the wrong type
    if context == CONTEXT_INFERENCE and isinstance(error, (ValueError, TypeError, KeyError)):
        logger.warning(f"Malformed inference result: {error}")
        return tr("error.api.invalid_response")

    logger.warning(f"Unexpected error during {context}: {error}")
    return tr("error.unexpected")


def _rejection_details(response_data: dict) -> str:
    """Field errors from a 400 response, one bullet per message."""
    errors = response_data.get("errors")
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if not isinstance(messages, list):
                messages = [messages]
            lines.extend(f"• {field}: {msg}" for msg in messages)
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("title", "")
