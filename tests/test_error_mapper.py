# -*- coding: utf-8 -*-
"""
Tests for exception to user message mapping.
"""

import pytest

from pcos_assessment.services.error_mapper import CONTEXT_EXPORT, CONTEXT_INFERENCE, map_exception
from pcos_assessment.services.exceptions import ApiException, NetworkException
from pcos_assessment.services.translation_manager import tr


class TestInferenceErrors:

    def test_server_error(self):
        assert map_exception(ApiException("boom", status_code=503)) == tr("error.api.server")

    def test_rejected_fields_are_listed(self):
        error = ApiException("bad", status_code=400, response_data={
            "errors": {"labs.glucose": ["must be positive"], "demographics.age": "required"}
        })
        message = map_exception(error, context=CONTEXT_INFERENCE)
        assert "• labs.glucose: must be positive" in message
        assert "• demographics.age: required" in message

    def test_rejection_title_is_used_without_field_errors(self):
        error = ApiException("bad", status_code=400, response_data={"title": "Unsupported payload"})
        assert map_exception(error) == tr("error.api.validation", details="Unsupported payload")

    def test_unreadable_response(self):
        assert map_exception(ApiException("Invalid JSON response")) == tr("error.api.invalid_response")

    def test_timeout(self):
        error = NetworkException("failed", original_error=TimeoutError("Read timed out"), timed_out=True)
        assert map_exception(error) == tr("error.api.timeout")

    def test_connection_refused(self):
        error = NetworkException("failed", original_error=ConnectionRefusedError("refused"))
        assert map_exception(error) == tr("error.api.connection")

    @pytest.mark.parametrize("error", [ValueError("bad float"), TypeError("not a list"), KeyError("factor")])
    def test_malformed_result_fields(self, error):
        assert map_exception(error, context=CONTEXT_INFERENCE) == tr("error.api.invalid_response")


class TestExportErrors:

    def test_os_error_keeps_reason(self):
        error = PermissionError(13, "Permission denied", "/reports/out.pdf")
        assert map_exception(error, context=CONTEXT_EXPORT) == tr(
            "error.export_failed", details="Permission denied"
        )

    def test_os_error_outside_export_is_unexpected(self):
        assert map_exception(OSError("disk"), context=CONTEXT_INFERENCE) == tr("error.unexpected")


def test_unexpected_error_hides_details():
    assert map_exception(RuntimeError("secret stack detail")) == tr("error.unexpected")
