# -*- coding: utf-8 -*-
"""
LocEdit Models Package

This package contains the data models used throughout the application,
implementing the Model layer of MVC/MVP architecture.
"""

from models.entry import TranslationEntry
from models.progress import ProgressRecord
from models.localization_file import LocalizationFile
from models.settings_model import DisplaySettings, SettingsModel

__all__ = [
    'TranslationEntry',
    'ProgressRecord',
    'LocalizationFile',
    'DisplaySettings',
    'SettingsModel',
]
