# -*- coding: utf-8 -*-
"""Wizards."""
