# -*- coding: utf-8 -*-
"""
LocEdit Settings Model

Display preferences for the editor panes:
- Explicit DisplaySettings object with defaults
- Validation of persisted values
- Load/save round trip through a persistent key-value store
- Change notifications (Observer pattern)
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

from locedit_logger import get_logger
from locedit_enums import TextAlignment
from locedit_exceptions import SettingsLoadError, SettingsSaveError
import locedit_config as config

logger = get_logger("models.settings")


@dataclass
class DisplaySettings:
    """Font and alignment used to render the original and translation panes."""
    original_font: str = config.DEFAULT_FONT
    original_size: int = config.DEFAULT_FONT_SIZE
    translation_font: str = config.DEFAULT_FONT
    translation_size: int = config.DEFAULT_FONT_SIZE
    text_alignment: str = config.DEFAULT_TEXT_ALIGNMENT

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> 'DisplaySettings':
        """
        Build settings from persisted data, replacing invalid fields with defaults.
        """
        settings = cls()
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Display settings are not a mapping, using defaults")
            return settings

        for key in ('original_font', 'translation_font'):
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, str) and value.strip():
                setattr(settings, key, value)
            else:
                logger.warning(f"Invalid '{key}' value ({value!r}). Using default.")

        for key in ('original_size', 'translation_size'):
            value = data.get(key)
            if value is None:
                continue
            size = _coerce_size(value)
            if size is None:
                logger.warning(f"Invalid '{key}' value ({value!r}). Using default.")
            else:
                setattr(settings, key, size)

        alignment = data.get('text_alignment')
        if alignment is not None:
            try:
                settings.text_alignment = TextAlignment(alignment).value
            except ValueError:
                logger.warning(f"Invalid 'text_alignment' value ({alignment!r}). Using default.")

        return settings


def _coerce_size(value: Any) -> Optional[int]:
    """Accept ints and digit strings; clamp to the supported range."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not value.strip().isdigit():
            return None
        value = int(value.strip())
    if not isinstance(value, int):
        return None
    return max(config.MIN_FONT_SIZE, min(value, config.MAX_FONT_SIZE))


# =============================================================================
# KEY-VALUE STORES
# =============================================================================

class SettingsStore(Protocol):
    """Persistent key-value capability provided by the host."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def update(self, key: str, value: Any) -> None:
        ...


class MemorySettingsStore:
    """In-memory store for tests and headless sessions."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def update(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonSettingsStore:
    """Key-value store persisted as one JSON object (~/.locedit/settings.json)."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path else config.SETTINGS_FILE_PATH

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open('r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsLoadError(f"Settings file corrupted: {self._path}", details=str(e)) from e
        except OSError as e:
            raise SettingsLoadError(f"Settings file unreadable: {self._path}", details=str(e)) from e
        if not isinstance(loaded, dict):
            raise SettingsLoadError(f"Settings file format invalid: {self._path}")
        return loaded

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def update(self, key: str, value: Any) -> None:
        try:
            data = self._read_all()
        except SettingsLoadError as e:
            logger.warning(f"Overwriting unreadable settings file: {e}")
            data = {}
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open('w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
        except OSError as e:
            raise SettingsSaveError(f"Settings could not be saved: {self._path}", details=str(e)) from e


# =============================================================================
# MODEL
# =============================================================================

class SettingsModel:
    """
    Display settings bound to a key-value store.

    Not a singleton: the composition root creates one and passes it to the
    controller and the window.
    """

    KEY_DISPLAY = "localization_settings"

    def __init__(self, store: Optional[SettingsStore] = None):
        self._store = store if store is not None else JsonSettingsStore()
        self._current = DisplaySettings()
        self._observers: List[Callable[[DisplaySettings], None]] = []
        logger.debug("SettingsModel initialized")

    @property
    def current(self) -> DisplaySettings:
        return self._current

    @staticmethod
    def defaults() -> DisplaySettings:
        return DisplaySettings()

    def load(self) -> DisplaySettings:
        """Load settings from the store, or defaults if absent or invalid."""
        try:
            raw = self._store.get(self.KEY_DISPLAY)
        except SettingsLoadError as e:
            logger.error(f"{e}. Using defaults.")
            raw = None
        self._current = DisplaySettings.from_dict(raw)
        logger.debug(f"Display settings loaded: {self._current}")
        return self._current

    def save(self, settings: DisplaySettings) -> bool:
        """
        Persist settings, then make them current and notify observers.

        Returns:
            False on write failure; the current settings are left unchanged
        """
        settings = DisplaySettings.from_dict(settings.to_dict())
        try:
            self._store.update(self.KEY_DISPLAY, settings.to_dict())
        except SettingsSaveError as e:
            logger.error(f"Failed to save settings: {e}")
            return False
        self._current = settings
        self._notify(settings)
        logger.info("Settings saved successfully")
        return True

    def reset(self) -> DisplaySettings:
        self.save(DisplaySettings())
        return self._current

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def subscribe(self, callback: Callable[[DisplaySettings], None]):
        self._observers.append(callback)

    def unsubscribe(self, callback: Callable[[DisplaySettings], None]):
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, settings: DisplaySettings):
        for callback in self._observers:
            try:
                callback(settings)
            except Exception as e:
                logger.error(f"Error in settings observer: {e}")


