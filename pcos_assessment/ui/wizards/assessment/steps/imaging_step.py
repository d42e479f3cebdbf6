# -*- coding: utf-8 -*-
"""
Imaging Step - Step 6 of the Assessment Wizard.

Only the name and byte size of a selected file are recorded; the file
contents are never opened.
"""

import os
from typing import Dict, Any, Iterable, List

from PyQt5.QtWidgets import (
    QFileDialog, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt

from pcos_assessment.app.config import Config
from pcos_assessment.models.assessment import ImagingRecord, UploadedFile, SECTION_IMAGING
from pcos_assessment.services.clinical_metrics import meets_rotterdam_follicle_criterion
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.components import AdvisoryLabel, Card, NumberField
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.utils.helpers import format_file_size
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class ImagingStep(BaseStep):
    """Step 6: Medical imaging."""

    section_name = SECTION_IMAGING

    def __init__(self, context, parent=None):
        super().__init__(context, parent)
        self._files: List[UploadedFile] = []

    def setup_ui(self):
        self.create_header(tr("imaging.heading"), tr("imaging.description"))

        # Upload area
        upload_card = Card()
        upload_card.setStyleSheet(f"""
            QFrame#card {{
                background-color: white;
                border: 2px dashed {Config.BORDER_COLOR};
                border-radius: 10px;
            }}
        """)
        prompt = QLabel(tr("imaging.upload_prompt"))
        prompt.setAlignment(Qt.AlignCenter)
        prompt.setStyleSheet("font-weight: bold; border: none;")
        hint = QLabel(tr("imaging.upload_hint"))
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
        self.choose_button = QPushButton(tr("imaging.choose_files"))
        self.choose_button.clicked.connect(self._choose_files)
        upload_card.content_layout.addWidget(prompt)
        upload_card.content_layout.addWidget(hint)
        upload_card.content_layout.addWidget(self.choose_button, 0, Qt.AlignCenter)
        self.main_layout.addWidget(upload_card)

        self.upload_status = AdvisoryLabel(variant="success")
        self.upload_status.hide()
        self.main_layout.addWidget(self.upload_status)

        # Uploaded file list
        self.files_card = Card(tr("imaging.uploaded", count=0))
        self.files_container = QWidget()
        self.files_layout = QVBoxLayout(self.files_container)
        self.files_layout.setContentsMargins(0, 0, 0, 0)
        self.files_layout.setSpacing(6)
        self.files_card.content_layout.addWidget(self.files_container)
        self.files_card.hide()
        self.main_layout.addWidget(self.files_card)

        # Measurements
        measurements = Card(tr("imaging.measurements"))
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        self.ovarian_volume_input = NumberField(tr("imaging.ovarian_volume.placeholder"))
        self.follicle_count_input = NumberField(tr("imaging.follicle_count.placeholder"))
        grid.addWidget(QLabel(tr("imaging.ovarian_volume")), 0, 0)
        grid.addWidget(self.ovarian_volume_input, 1, 0)
        grid.addWidget(QLabel(tr("imaging.follicle_count")), 0, 1)
        grid.addWidget(self.follicle_count_input, 1, 1)
        measurements.content_layout.addLayout(grid)

        self.rotterdam_label = AdvisoryLabel(tr("imaging.rotterdam"), variant="info")
        self.rotterdam_label.hide()
        measurements.content_layout.addWidget(self.rotterdam_label)
        self.main_layout.addWidget(measurements)

        self.ovarian_volume_input.textChanged.connect(self.on_input_changed)
        self.follicle_count_input.textChanged.connect(self.on_input_changed)

        self.main_layout.addStretch()

    # =========================================================================
    # Files
    # =========================================================================

    def _choose_files(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self,
            tr("imaging.file_dialog_title"),
            "",
            tr("imaging.file_dialog_filter")
        )
        if paths:
            self.add_files(paths)

    def add_files(self, paths: Iterable[str]) -> int:
        """
        Append file references in selection order.

        Returns:
            Number of files added
        """
        added = 0
        for path in paths:
            try:
                size = os.path.getsize(path)
            except OSError as e:
                logger.warning(f"Skipping unreadable file {path}: {e}")
                continue
            self._files.append(UploadedFile(name=os.path.basename(path), size=size))
            added += 1

        if added:
            logger.info(f"{added} ultrasound file(s) added")
            self.upload_status.setText(tr("imaging.files_added", count=added))
            self.upload_status.show()
        self._refresh_file_list()
        return added

    def remove_file(self, index: int):
        """Remove the file at a position; other files keep their order."""
        if 0 <= index < len(self._files):
            removed = self._files.pop(index)
            logger.debug(f"Removed ultrasound file {removed.name}")
            self._refresh_file_list()

    def file_names(self) -> List[str]:
        return [f.name for f in self._files]

    def _refresh_file_list(self):
        while self.files_layout.count():
            item = self.files_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        for index, uploaded in enumerate(self._files):
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(8, 4, 8, 4)
            name = QLabel(uploaded.name)
            name.setStyleSheet("border: none;")
            size = QLabel(format_file_size(uploaded.size))
            size.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
            remove = QPushButton(tr("imaging.remove"))
            remove.clicked.connect(lambda checked=False, i=index: self.remove_file(i))
            row_layout.addWidget(name, 1)
            row_layout.addWidget(size)
            row_layout.addWidget(remove)
            self.files_layout.addWidget(row)

        self.files_card.title_label.setText(tr("imaging.uploaded", count=len(self._files)))
        self.files_card.setVisible(bool(self._files))

    # =========================================================================
    # Step contract
    # =========================================================================

    def update_derived_values(self):
        follicles = self.follicle_count_input.value()
        self.rotterdam_label.setVisible(meets_rotterdam_follicle_criterion(follicles))

    def is_rotterdam_shown(self) -> bool:
        return not self.rotterdam_label.isHidden()

    def populate_data(self):
        record = self.get_section(ImagingRecord())
        self.ovarian_volume_input.set_value(record.ovarian_volume)
        self.follicle_count_input.set_value(record.follicle_count)
        self._files = list(record.ultrasound_files)
        self.upload_status.hide()
        self._refresh_file_list()
        self.update_derived_values()

    def collect_data(self) -> Dict[str, Any]:
        return {SECTION_IMAGING: ImagingRecord(
            ovarian_volume=self.ovarian_volume_input.value(),
            follicle_count=self.follicle_count_input.value(),
            ultrasound_files=list(self._files),
        )}

    def get_step_title(self) -> str:
        return tr("wizard.step.imaging")
