# -*- coding: utf-8 -*-
"""User interface package."""
