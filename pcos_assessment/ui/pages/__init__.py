# -*- coding: utf-8 -*-
"""Application pages."""

from .results_page import ResultsPage

__all__ = ['ResultsPage']
