# -*- coding: utf-8 -*-
"""
PCOS Assessment Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_date, format_number, parse_number

__all__ = [
    "get_logger",
    "setup_logger",
    "format_date",
    "format_number",
    "parse_number",
]
