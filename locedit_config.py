from pathlib import Path

VERSION = "0.2.0"
APP_NAME = "LocEdit"
WINDOW_TITLE = "Game Localization Editor"

SETTINGS_DIR = Path.home() / ".locedit"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

# Source file convention: '<original>' -> '<translation>'<suffix>
ENTRY_SEPARATOR = " -> "
FILE_ENCODING = "utf-8"

# Sibling files: name.txt -> name_translated.txt, name_progress.json
TRANSLATED_SUFFIX = "_translated"
PROGRESS_SUFFIX = "_progress"
PROGRESS_EXTENSION = ".json"

# Characters of the original kept in a progress record (identification only)
ORIGINAL_PREFIX_LENGTH = 50

DEFAULT_FONT = "'Courier New', monospace"
DEFAULT_FONT_SIZE = 16
MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 24
DEFAULT_TEXT_ALIGNMENT = "left"

DISPLAY_DEFAULTS = {
    "original_font": DEFAULT_FONT,
    "original_size": DEFAULT_FONT_SIZE,
    "translation_font": DEFAULT_FONT,
    "translation_size": DEFAULT_FONT_SIZE,
    "text_alignment": DEFAULT_TEXT_ALIGNMENT,
}

# (display name, CSS-style family value, group)
FONT_CHOICES = [
    ("Courier New", "'Courier New', monospace", "Monospace"),
    ("Consolas", "'Consolas', monospace", "Monospace"),
    ("Monaco", "'Monaco', monospace", "Monospace"),
    ("D2Coding", "'D2Coding', monospace", "Monospace"),
    ("Malgun Gothic", "'Malgun Gothic', sans-serif", "Korean"),
    ("NanumGothic", "'NanumGothic', sans-serif", "Korean"),
    ("Pretendard", "'Pretendard', sans-serif", "Korean"),
    ("Dotum", "'Dotum', sans-serif", "Korean"),
    ("Gulim", "'Gulim', sans-serif", "Korean"),
    ("Arial", "'Arial', sans-serif", "Latin"),
    ("Times New Roman", "'Times New Roman', serif", "Latin"),
    ("Verdana", "'Verdana', sans-serif", "Latin"),
    ("Georgia", "'Georgia', serif", "Latin"),
]

STYLE_DEFAULTS = {
    "completed_color": "#4caf50",
    "accent_color": "#007acc",
    "muted_text_color": "#808080",
}

__all__ = [
    "VERSION", "APP_NAME", "WINDOW_TITLE",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "ENTRY_SEPARATOR", "FILE_ENCODING",
    "TRANSLATED_SUFFIX", "PROGRESS_SUFFIX", "PROGRESS_EXTENSION",
    "ORIGINAL_PREFIX_LENGTH",
    "DEFAULT_FONT", "DEFAULT_FONT_SIZE", "MIN_FONT_SIZE", "MAX_FONT_SIZE",
    "DEFAULT_TEXT_ALIGNMENT", "DISPLAY_DEFAULTS", "FONT_CHOICES",
    "STYLE_DEFAULTS", "Path",
]

# Import logger at the end to avoid circular imports
from locedit_logger import get_logger
_logger = get_logger("config")
_logger.debug("locedit_config.py loaded")
