# -*- coding: utf-8 -*-
"""
LocEdit Display Settings Dialog

Font family, font size and alignment for the original and translation panes.
"""

from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QFormLayout

from qfluentwidgets import (
    SubtitleLabel, BodyLabel, CardWidget, ComboBox, SpinBox,
    PushButton, PrimaryPushButton
)

import locedit_config as config
from locedit_enums import TextAlignment
from locedit_logger import get_logger
from models.settings_model import DisplaySettings

logger = get_logger("gui.settings_dialog")

ALIGNMENT_LABELS = [
    ("Left", TextAlignment.LEFT),
    ("Center", TextAlignment.CENTER),
    ("Right", TextAlignment.RIGHT),
    ("Justify", TextAlignment.JUSTIFY),
]


class SettingsDialog(QDialog):
    """
    Modal dialog editing a DisplaySettings value.

    The dialog never persists anything itself; the caller reads settings()
    after exec() and dispatches a SaveSettings command.
    """

    def __init__(self, settings: DisplaySettings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Display Settings")
        self.setMinimumWidth(420)

        self._setup_ui()
        self.apply(settings)
        logger.debug("SettingsDialog initialized")

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(SubtitleLabel("Display Settings"))

        card = CardWidget()
        form = QFormLayout(card)
        form.setContentsMargins(16, 16, 16, 16)
        form.setSpacing(12)

        self.original_font_combo = self._font_combo()
        self.original_size_spin = self._size_spin()
        self.translation_font_combo = self._font_combo()
        self.translation_size_spin = self._size_spin()

        self.alignment_combo = ComboBox()
        for label, alignment in ALIGNMENT_LABELS:
            self.alignment_combo.addItem(label, userData=alignment.value)

        form.addRow(BodyLabel("Original font"), self.original_font_combo)
        form.addRow(BodyLabel("Original size"), self.original_size_spin)
        form.addRow(BodyLabel("Translation font"), self.translation_font_combo)
        form.addRow(BodyLabel("Translation size"), self.translation_size_spin)
        form.addRow(BodyLabel("Text alignment"), self.alignment_combo)
        layout.addWidget(card)

        buttons = QHBoxLayout()
        self.reset_btn = PushButton("Reset to defaults")
        self.reset_btn.clicked.connect(self._on_reset)
        buttons.addWidget(self.reset_btn)
        buttons.addStretch()

        self.cancel_btn = PushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        buttons.addWidget(self.cancel_btn)

        self.save_btn = PrimaryPushButton("Save")
        self.save_btn.clicked.connect(self.accept)
        buttons.addWidget(self.save_btn)
        layout.addLayout(buttons)

    def _font_combo(self) -> ComboBox:
        combo = ComboBox()
        for name, value, group in config.FONT_CHOICES:
            combo.addItem(f"{name} ({group})", userData=value)
        return combo

    def _size_spin(self) -> SpinBox:
        spin = SpinBox()
        spin.setRange(config.MIN_FONT_SIZE, config.MAX_FONT_SIZE)
        return spin

    @staticmethod
    def _select_data(combo: ComboBox, value: str):
        for index in range(combo.count()):
            if combo.itemData(index) == value:
                combo.setCurrentIndex(index)
                return
        logger.debug(f"Value {value!r} not offered, keeping current selection")

    def apply(self, settings: DisplaySettings):
        """Show the given settings in the controls."""
        self._select_data(self.original_font_combo, settings.original_font)
        self.original_size_spin.setValue(settings.original_size)
        self._select_data(self.translation_font_combo, settings.translation_font)
        self.translation_size_spin.setValue(settings.translation_size)
        self._select_data(self.alignment_combo, settings.text_alignment)

    def settings(self) -> DisplaySettings:
        """Settings as currently shown in the controls."""
        return DisplaySettings(
            original_font=self.original_font_combo.currentData(),
            original_size=self.original_size_spin.value(),
            translation_font=self.translation_font_combo.currentData(),
            translation_size=self.translation_size_spin.value(),
            text_alignment=self.alignment_combo.currentData(),
        )

    def _on_reset(self):
        self.apply(DisplaySettings())
