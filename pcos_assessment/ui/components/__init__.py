# -*- coding: utf-8 -*-
"""Reusable UI components."""

from .input_field import NumberField, OptionCombo
from .cards import Card, AdvisoryLabel, MetricLabel

__all__ = [
    'NumberField',
    'OptionCombo',
    'Card',
    'AdvisoryLabel',
    'MetricLabel',
]
