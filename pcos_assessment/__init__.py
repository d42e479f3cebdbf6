# -*- coding: utf-8 -*-
"""
PCOS Risk Assessment - desktop clinical assessment wizard.
"""

__version__ = "1.0.0"
