# -*- coding: utf-8 -*-
"""
PCOS Assessment Service Layer
"""

# Lazy imports to avoid pulling Qt into pure-logic callers
__all__ = [
    "SubmissionService",
    "ReportService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "SubmissionService":
        from .submission_service import SubmissionService
        return SubmissionService
    elif name == "ReportService":
        from .report_service import ReportService
        return ReportService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
