# -*- coding: utf-8 -*-
"""Errors raised while submitting an assessment to the inference service."""


class InferenceError(Exception):
    """Base class for a failed inference request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiException(InferenceError):
    """
    The service answered, but not with a usable result.

    status_code is None when the response arrived but could not be read
    (invalid JSON, empty body).
    """

    def __init__(self, message: str, status_code: int = None, response_data: dict = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}

    @property
    def is_unreadable(self) -> bool:
        return self.status_code is None

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(InferenceError):
    """The service could not be reached, or did not answer in time."""

    def __init__(self, message: str, original_error: Exception = None, timed_out: bool = False):
        super().__init__(message)
        self.original_error = original_error
        self.timed_out = timed_out
