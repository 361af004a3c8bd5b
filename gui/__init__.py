# -*- coding: utf-8 -*-
"""
LocEdit GUI Package

PySide6 + qfluentwidgets editing surface.
"""

from gui.editor_window import EditorWindow
from gui.settings_dialog import SettingsDialog

__all__ = [
    'EditorWindow',
    'SettingsDialog',
]
