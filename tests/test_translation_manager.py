# -*- coding: utf-8 -*-
"""
Tests for UI text lookup.
"""

import logging

from pcos_assessment.services.translation_manager import TranslationManager, tr


def test_singleton():
    assert TranslationManager() is TranslationManager()


def test_format_arguments():
    assert tr("wizard.progress", current=2, total=7, title="Demographics") == "Step 2 of 7: Demographics"


def test_missing_format_argument_returns_template():
    assert tr("wizard.progress", current=2) == "Step {current} of {total}: {title}"


def test_missing_key_is_returned_and_logged_once(caplog):
    with caplog.at_level(logging.WARNING, logger="pcos_assessment"):
        assert tr("labs.no_such_panel") == "labs.no_such_panel"
        assert tr("labs.no_such_panel") == "labs.no_such_panel"

    warnings = [r.getMessage() for r in caplog.records if "labs.no_such_panel" in r.getMessage()]
    assert warnings == ["Missing UI text: labs.no_such_panel"]
