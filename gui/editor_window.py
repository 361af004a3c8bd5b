# -*- coding: utf-8 -*-
"""
LocEdit Editor Window

Single-entry editing surface:
- Header card with file name, statistics and progress bar
- Navigation and action controls
- Read-only original pane and translation input
- Keyboard model: Enter commits and advances, Shift+Enter goes back,
  Ctrl+D copies the original
"""

import re

from PySide6.QtCore import Qt, QEvent
from PySide6.QtGui import QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QTextEdit, QFileDialog, QMessageBox
)

from qfluentwidgets import (
    SubtitleLabel, BodyLabel, CaptionLabel, CardWidget, PushButton,
    PrimaryPushButton, ProgressBar, InfoBar, InfoBarPosition
)

import locedit_config as config
from locedit_enums import TextAlignment
from locedit_exceptions import SourceFileError
from locedit_logger import get_logger
from controllers.commands import ExportFile, LoadSettings, SaveSettings
from gui.settings_dialog import SettingsDialog
from models.settings_model import DisplaySettings

logger = get_logger("gui.editor_window")

LINE_BREAKS = re.compile(r"\r\n|\r|\n")

GENERIC_FAMILIES = {
    'monospace': QFont.StyleHint.Monospace,
    'sans-serif': QFont.StyleHint.SansSerif,
    'serif': QFont.StyleHint.Serif,
}

ALIGNMENT_FLAGS = {
    TextAlignment.LEFT.value: Qt.AlignmentFlag.AlignLeft,
    TextAlignment.CENTER.value: Qt.AlignmentFlag.AlignHCenter,
    TextAlignment.RIGHT.value: Qt.AlignmentFlag.AlignRight,
    TextAlignment.JUSTIFY.value: Qt.AlignmentFlag.AlignJustify,
}


def font_from_setting(value: str, size: int) -> QFont:
    """Build a QFont from a CSS-style family list such as "'Consolas', monospace"."""
    families = []
    hint = None
    for part in value.split(','):
        name = part.strip().strip('\'"')
        if not name:
            continue
        if name in GENERIC_FAMILIES:
            hint = GENERIC_FAMILIES[name]
        else:
            families.append(name)

    font = QFont()
    if families:
        font.setFamilies(families)
    if hint is not None:
        font.setStyleHint(hint)
    font.setPointSize(size)
    return font


def flatten_line_breaks(text: str) -> str:
    """Replace each line break with a space; entries are single-line."""
    return LINE_BREAKS.sub(' ', text)


class TranslationInput(QTextEdit):
    """Plain-text translation editor that never holds a line break."""

    def insertFromMimeData(self, source):
        if source.hasText():
            self.insertPlainText(flatten_line_breaks(source.text()))


class EditorWindow(QMainWindow):
    """
    Main window bound to an EditorController and its CommandDispatcher.

    The window keeps no entry state of its own: the panes are refreshed from
    the controller whenever the current entry or the statistics change.
    """

    def __init__(self, controller, dispatcher, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.dispatcher = dispatcher

        self.setWindowTitle(f"{config.WINDOW_TITLE} - {config.APP_NAME} v{config.VERSION}")
        self.resize(900, 640)

        self._setup_ui()
        self._connect_signals()
        self._apply_settings(self.dispatcher.dispatch(LoadSettings()))
        self._show_empty_state()

        logger.debug("EditorWindow initialized")

    # =========================================================================
    # UI SETUP
    # =========================================================================

    def _setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._create_header())
        layout.addLayout(self._create_controls())
        layout.addWidget(self._create_original_card(), 1)
        layout.addWidget(self._create_translation_card(), 1)

        self.help_label = CaptionLabel(
            "Enter: save and next  |  Shift+Enter: previous  |  Ctrl+D: copy original"
        )
        layout.addWidget(self.help_label)

        self.setCentralWidget(central)

        self.copy_shortcut = QShortcut(QKeySequence("Ctrl+D"), self)
        self.copy_shortcut.activated.connect(self._on_copy_original)

    def _create_header(self) -> CardWidget:
        header = CardWidget()
        header_layout = QVBoxLayout(header)
        header_layout.setContentsMargins(16, 12, 16, 12)
        header_layout.setSpacing(8)

        title_row = QHBoxLayout()
        self.title_label = SubtitleLabel(config.WINDOW_TITLE)
        title_row.addWidget(self.title_label)
        title_row.addStretch()
        self.open_btn = PushButton("Open file")
        self.open_btn.clicked.connect(self._on_open_clicked)
        title_row.addWidget(self.open_btn)
        header_layout.addLayout(title_row)

        self.filename_label = BodyLabel("")
        header_layout.addWidget(self.filename_label)

        self.stats_label = BodyLabel("")
        header_layout.addWidget(self.stats_label)

        self.progress_bar = ProgressBar()
        self.progress_bar.setRange(0, 100)
        header_layout.addWidget(self.progress_bar)
        return header

    def _create_controls(self) -> QHBoxLayout:
        controls = QHBoxLayout()

        self.prev_btn = PushButton("Previous")
        self.prev_btn.clicked.connect(self._on_prev_clicked)
        controls.addWidget(self.prev_btn)

        self.page_label = BodyLabel("0 / 0")
        controls.addWidget(self.page_label)

        self.next_btn = PushButton("Next")
        self.next_btn.clicked.connect(self._on_next_clicked)
        controls.addWidget(self.next_btn)

        controls.addStretch()

        self.jump_btn = PushButton("Jump to incomplete")
        self.jump_btn.clicked.connect(self._on_jump_clicked)
        controls.addWidget(self.jump_btn)

        self.settings_btn = PushButton("Settings")
        self.settings_btn.clicked.connect(self._on_settings_clicked)
        controls.addWidget(self.settings_btn)

        self.export_btn = PrimaryPushButton("Export")
        self.export_btn.clicked.connect(self._on_export_clicked)
        controls.addWidget(self.export_btn)
        return controls

    def _create_original_card(self) -> CardWidget:
        card = CardWidget()
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)

        row = QHBoxLayout()
        row.addWidget(BodyLabel("Original"))
        self.entry_info_label = CaptionLabel("")
        row.addWidget(self.entry_info_label)
        row.addStretch()
        self.copy_btn = PushButton("Copy original")
        self.copy_btn.clicked.connect(self._on_copy_original)
        row.addWidget(self.copy_btn)
        card_layout.addLayout(row)

        # Plain QTextEdit so the configured font is not replaced by fluent stylesheets
        self.original_view = QTextEdit()
        self.original_view.setReadOnly(True)
        card_layout.addWidget(self.original_view)
        return card

    def _create_translation_card(self) -> CardWidget:
        card = CardWidget()
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)
        card_layout.addWidget(BodyLabel("Translation"))

        self.translation_input = TranslationInput()
        self.translation_input.setAcceptRichText(False)
        self.translation_input.installEventFilter(self)
        card_layout.addWidget(self.translation_input)
        return card

    def _connect_signals(self):
        self.controller.file_opened.connect(self._on_file_opened)
        self.controller.current_changed.connect(self._on_current_changed)
        self.controller.stats_updated.connect(self._on_stats_updated)
        self.controller.export_finished.connect(self._on_export_finished)
        self.controller.save_failed.connect(self._on_save_failed)
        self.controller.settings.subscribe(self._apply_settings)

    # =========================================================================
    # KEYBOARD
    # =========================================================================

    def eventFilter(self, obj, event):
        if obj is self.translation_input and event.type() == QEvent.Type.KeyPress:
            if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
                if not self.controller.has_file:
                    return True
                if event.modifiers() & Qt.KeyboardModifier.ShiftModifier:
                    self.controller.go_back(self._input_text())
                else:
                    self.controller.commit_and_advance(self._input_text())
                    self._refresh_entry()
                return True
        return super().eventFilter(obj, event)

    def _input_text(self) -> str:
        return flatten_line_breaks(self.translation_input.toPlainText())

    # =========================================================================
    # FILE LOADING
    # =========================================================================

    def load_file(self, file_path: str) -> bool:
        """
        Open a file in the editor.

        Returns:
            False if the source could not be read
        """
        try:
            self.controller.open_file(file_path)
        except SourceFileError as e:
            QMessageBox.critical(self, "File Error", f"Could not open file:\n{e.message}")
            self._show_empty_state()
            return False
        return True

    def _on_open_clicked(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open localization file", "", "Text files (*.txt);;All files (*)"
        )
        if file_path:
            self.load_file(file_path)

    def _show_empty_state(self):
        has_file = self.controller.has_file
        for widget in (self.prev_btn, self.next_btn, self.jump_btn, self.export_btn,
                       self.copy_btn, self.translation_input):
            widget.setEnabled(has_file)
        if not has_file:
            self.filename_label.setText("No file open")
            self.stats_label.setText("")
            self.page_label.setText("0 / 0")
            self.entry_info_label.setText("")
            self.original_view.clear()
            self.translation_input.clear()
            self.progress_bar.setValue(0)

    # =========================================================================
    # CONTROLLER SIGNALS
    # =========================================================================

    def _on_file_opened(self, localization_file):
        self.filename_label.setText(localization_file.filename)
        self._show_empty_state()
        self._refresh_entry()
        if localization_file.entry_count == 0:
            InfoBar.warning(
                title="No entries",
                content="The file contains no translatable lines",
                parent=self,
                duration=3000,
                position=InfoBarPosition.TOP
            )

    def _on_current_changed(self, index: int):
        self._refresh_entry()

    def _on_stats_updated(self, stats: dict):
        self.stats_label.setText(
            f"Total: {stats['total']}  |  Completed: {stats['completed']}  |  {stats['percent']}%"
        )
        self.progress_bar.setValue(stats['percent'])

    def _on_export_finished(self, path: str):
        InfoBar.success(
            title="Exported",
            content=f"Saved to {path}",
            parent=self,
            duration=3000,
            position=InfoBarPosition.TOP
        )

    def _on_save_failed(self, message: str):
        InfoBar.error(
            title="Save failed",
            content=message,
            parent=self,
            duration=5000,
            position=InfoBarPosition.TOP
        )

    def _refresh_entry(self):
        """Show the controller's current entry in the panes."""
        if not self.controller.has_file:
            return
        localization_file = self.controller.active_file
        total = localization_file.entry_count
        if total == 0:
            self.page_label.setText("0 / 0")
            self.entry_info_label.setText("")
            self.original_view.clear()
            self.translation_input.clear()
            self.translation_input.setEnabled(False)
            return

        index = localization_file.current_index
        entry = localization_file.get_entry(index)

        self.page_label.setText(f"{index + 1} / {total}")
        status = " - completed" if entry.completed else ""
        self.entry_info_label.setText(f"#{index + 1} (line {entry.line_number}){status}")
        self.original_view.setPlainText(entry.original)
        self.translation_input.setPlainText(entry.translation)
        self.translation_input.setFocus()

        self.prev_btn.setEnabled(index > 0)
        self.next_btn.setEnabled(index < total - 1)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def _on_prev_clicked(self):
        self.controller.go_back(self._input_text())

    def _on_next_clicked(self):
        self.controller.commit_and_advance(self._input_text())
        self._refresh_entry()

    def _on_jump_clicked(self):
        if not self.controller.jump_to_first_incomplete(self._input_text()):
            InfoBar.success(
                title="All done",
                content="Every entry is completed",
                parent=self,
                duration=2000,
                position=InfoBarPosition.TOP
            )

    def _on_copy_original(self):
        if not self.controller.has_file or self.controller.active_file.entry_count == 0:
            return
        self.translation_input.setPlainText(self.controller.copy_original())

    def _on_export_clicked(self):
        if not self.controller.has_file:
            return
        localization_file = self.controller.active_file
        if localization_file.entry_count:
            index = localization_file.current_index
            if localization_file.get_entry(index).translation != self._input_text():
                self.controller.set_translation(index, self._input_text())
        snapshot = [entry.copy() for entry in localization_file.entries]
        self.dispatcher.dispatch(ExportFile(snapshot))

    def _on_settings_clicked(self):
        dialog = SettingsDialog(self.controller.settings.current, self)
        if dialog.exec():
            if not self.dispatcher.dispatch(SaveSettings(dialog.settings())):
                self._on_save_failed("Display settings could not be saved")

    # =========================================================================
    # DISPLAY SETTINGS
    # =========================================================================

    def _apply_settings(self, settings: DisplaySettings):
        self.original_view.setFont(font_from_setting(settings.original_font, settings.original_size))
        self.translation_input.setFont(
            font_from_setting(settings.translation_font, settings.translation_size)
        )

        flag = ALIGNMENT_FLAGS.get(settings.text_alignment, Qt.AlignmentFlag.AlignLeft)
        for editor in (self.original_view, self.translation_input):
            option = editor.document().defaultTextOption()
            option.setAlignment(flag)
            editor.document().setDefaultTextOption(option)

    def closeEvent(self, event):
        self.controller.settings.unsubscribe(self._apply_settings)
        super().closeEvent(event)
