# -*- coding: utf-8 -*-
"""
Application Core Module
"""

from .config import Config, Pages
from .main_window import MainWindow
from .styles import get_stylesheet

__all__ = ["Config", "Pages", "MainWindow", "get_stylesheet"]
