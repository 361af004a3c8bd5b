# -*- coding: utf-8 -*-
"""
LocEdit LocalizationFile Model

The entry set of one editing session:
- Source, working, translated and progress paths
- Fixed, line-ordered list of TranslationEntry objects
- Current entry index
- Observer pattern for change notifications
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional

from locedit_logger import get_logger
from models.entry import TranslationEntry
from utils import path_utils

logger = get_logger("models.localization_file")


class LocalizationFile:
    """
    Represents an opened script file and its translation entries.

    The entry list is fixed once parsed: entries are never added or removed,
    so an index always refers to the same source line for the whole session.
    """

    def __init__(
        self,
        source_path: str,
        entries: List[TranslationEntry],
        working_path: Optional[str] = None,
        line_count: int = 0
    ):
        """
        Initialize a LocalizationFile model.

        Args:
            source_path: Path of the untranslated source file.
            entries: Parsed entries in ascending line order.
            working_path: File the entries were parsed from (translated copy or source).
            line_count: Number of lines in the working file.
        """
        self._source_path = str(source_path)
        self._working_path = str(working_path or source_path)
        self._entries = entries
        self._line_count = line_count

        self._current_index = 0

        self._observers: Dict[str, List[Callable]] = {
            'entry_updated': [],
            'current_changed': [],
        }

        logger.debug(f"LocalizationFile created: {self.filename} ({len(entries)} entries)")

    # =============================================================================
    # PROPERTIES
    # =============================================================================

    @property
    def source_path(self) -> str:
        return self._source_path

    @property
    def working_path(self) -> str:
        return self._working_path

    @property
    def translated_path(self) -> Path:
        return path_utils.translated_path_for(self._source_path)

    @property
    def progress_path(self) -> Path:
        return path_utils.progress_path_for(self._source_path)

    @property
    def entries(self) -> List[TranslationEntry]:
        return self._entries

    @property
    def line_count(self) -> int:
        return self._line_count

    @property
    def current_index(self) -> int:
        return self._current_index

    @current_index.setter
    def current_index(self, value: int):
        if not self._entries:
            return
        value = max(0, min(value, len(self._entries) - 1))
        if self._current_index != value:
            self._current_index = value
            self._notify('current_changed', value)

    @property
    def filename(self) -> str:
        """Name of the file the entries were read from."""
        return Path(self._working_path).name

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def subscribe(self, event: str, callback: Callable):
        """
        Subscribe to an event.

        Args:
            event: Event name ('entry_updated', 'current_changed')
            callback: Function to call when event occurs
        """
        if event in self._observers:
            self._observers[event].append(callback)
        else:
            logger.warning(f"Unknown event type: {event}")

    def unsubscribe(self, event: str, callback: Callable):
        """Unsubscribe from an event."""
        if event in self._observers and callback in self._observers[event]:
            self._observers[event].remove(callback)

    def _notify(self, event: str, *args):
        """Notify all subscribers of an event."""
        for callback in self._observers.get(event, []):
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Error in observer callback for '{event}': {e}")

    # =============================================================================
    # ENTRY OPERATIONS
    # =============================================================================

    def get_entry(self, index: int) -> TranslationEntry:
        """Get entry at index. Raises IndexError when out of bounds."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Entry index {index} out of range (0..{len(self._entries) - 1})")
        return self._entries[index]

    def get_current_entry(self) -> Optional[TranslationEntry]:
        if not self._entries:
            return None
        return self._entries[self._current_index]

    def update_translation(self, index: int, text: str):
        """Store new text for an entry; clears its completion."""
        self.get_entry(index).set_translation(text)
        self._notify('entry_updated', index)

    def mark_completed(self, index: int) -> bool:
        """Mark an entry completed. Returns False when its translation is empty."""
        marked = self.get_entry(index).mark_completed()
        if marked:
            self._notify('entry_updated', index)
        return marked

    def first_incomplete_index(self) -> Optional[int]:
        for i, entry in enumerate(self._entries):
            if not entry.completed:
                return i
        return None

    def get_stats(self) -> Dict[str, int]:
        """
        Completion statistics. Pure: recomputed from the entries on every call.

        Returns:
            Dict with 'total', 'completed', 'translated' and 'percent'
        """
        total = len(self._entries)
        completed = sum(1 for e in self._entries if e.completed)
        translated = sum(1 for e in self._entries if e.has_translation)
        percent = int(completed / total * 100 + 0.5) if total else 0
        return {
            'total': total,
            'completed': completed,
            'translated': translated,
            'percent': percent,
        }

    def __repr__(self) -> str:
        return f"LocalizationFile({self.filename}, entries={len(self._entries)})"
