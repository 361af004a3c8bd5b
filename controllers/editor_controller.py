# -*- coding: utf-8 -*-
"""
LocEdit Editor Controller

Owns the single active editing session:
- Opening and parsing a file, merging saved progress
- Translation edits and completion (the collaborator operations)
- Navigation between entries
- Export and progress persistence
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from PySide6.QtCore import QObject, Signal

from locedit_logger import get_logger
from locedit_exceptions import (
    ExportError, FileOperationError, NoActiveFileError, SaveError, SourceFileError
)
from models.entry import TranslationEntry
from models.localization_file import LocalizationFile
from models.settings_model import SettingsModel
from parser.core import parse_lines, split_lines
from core import file_io
from core.exporter import Exporter, ExportResult
from core.progress_store import ProgressStore
from utils import path_utils

logger = get_logger("controllers.editor")


class EditorController(QObject):
    """
    Controller for one localization file at a time.

    Every operation runs synchronously and saves progress before returning.
    Write failures leave the in-memory entries as they are so the user can
    retry.

    Signals:
        file_opened(LocalizationFile): Emitted when a file is parsed and progress merged
        entry_changed(int): Emitted with the index of an edited or completed entry
        current_changed(int): Emitted when navigation moves to another entry
        stats_updated(dict): Emitted with fresh statistics after any change
        export_finished(str): Emitted with the written path
        save_failed(str): Emitted with a message when progress or export writing fails
        file_error(str): Emitted with a message when the source cannot be opened
    """

    file_opened = Signal(object)
    entry_changed = Signal(int)
    current_changed = Signal(int)
    stats_updated = Signal(dict)
    export_finished = Signal(str)
    save_failed = Signal(str)
    file_error = Signal(str)

    def __init__(
        self,
        settings: Optional[SettingsModel] = None,
        progress_store_factory: Callable[[Path], ProgressStore] = ProgressStore,
        exporter: Optional[Exporter] = None
    ):
        """
        Initialize the editor controller.

        Args:
            settings: Display settings model
            progress_store_factory: Builds the store for a progress file path
            exporter: Export policy implementation
        """
        super().__init__()
        self._settings = settings or SettingsModel()
        self._progress_store_factory = progress_store_factory
        self._exporter = exporter or Exporter()

        self._file: Optional[LocalizationFile] = None
        self._progress_store: Optional[ProgressStore] = None

        logger.debug("EditorController initialized")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def settings(self) -> SettingsModel:
        return self._settings

    @property
    def active_file(self) -> Optional[LocalizationFile]:
        return self._file

    @property
    def has_file(self) -> bool:
        return self._file is not None

    @property
    def current_index(self) -> int:
        return self._require_file().current_index

    def _require_file(self) -> LocalizationFile:
        if self._file is None:
            raise NoActiveFileError("No localization file is open")
        return self._file

    # =========================================================================
    # FILE OPENING
    # =========================================================================

    def open_file(self, file_path: str) -> LocalizationFile:
        """
        Open a source file, preferring its translated copy when one exists.

        The session starts at the first entry not yet completed.

        Raises:
            SourceFileError: the file is missing or unreadable
        """
        source = Path(file_path)
        working = path_utils.resolve_working_path(source)

        try:
            content = file_io.read_text(working)
        except FileOperationError as e:
            logger.error(f"Error opening file {working}: {e.message}")
            self.file_error.emit(e.message)
            raise SourceFileError(e.message, file_path=str(working)) from e

        lines = split_lines(content)
        entries = parse_lines(lines)

        store = self._progress_store_factory(path_utils.progress_path_for(source))
        store.load(entries)

        self._file = LocalizationFile(
            source_path=str(source),
            entries=entries,
            working_path=str(working),
            line_count=len(lines),
        )
        # Resume at the first entry left incomplete
        resume_index = self._file.first_incomplete_index()
        if resume_index is not None:
            self._file.current_index = resume_index
        self._progress_store = store

        logger.info(f"Opened file: {working.name} (lines: {len(lines)}, entries: {len(entries)})")
        self.file_opened.emit(self._file)
        self._emit_stats()
        return self._file

    # =========================================================================
    # COLLABORATOR OPERATIONS
    # =========================================================================

    def get_entries(self) -> List[TranslationEntry]:
        """Current entry list of the active session."""
        return self._require_file().entries

    def set_translation(self, index: int, text: str) -> bool:
        """
        Store translation text for an entry and clear its completion.

        Returns:
            True if progress was saved
        """
        self._require_file().update_translation(index, text)
        self.entry_changed.emit(index)
        return self._save_progress()

    def mark_completed(self, index: int) -> bool:
        """
        Mark an entry completed if its translation is non-empty.

        Returns:
            True if the entry was marked
        """
        marked = self._require_file().mark_completed(index)
        if marked:
            self.entry_changed.emit(index)
            self._save_progress()
        else:
            logger.debug(f"Entry {index} not marked: translation is empty")
        return marked

    def export_now(self, snapshot: Optional[Sequence[Any]] = None) -> Optional[ExportResult]:
        """
        Sync a snapshot of entries by index, export, and save progress.

        Args:
            snapshot: Entries as the editing surface sees them
                      (TranslationEntry objects or dicts with
                      'translation'/'completed'). None exports as is.

        Returns:
            ExportResult, or None if writing failed
        """
        parsed_file = self._require_file()
        if snapshot is not None:
            self._apply_snapshot(parsed_file.entries, snapshot)

        try:
            result = self._exporter.export(parsed_file.source_path, parsed_file.entries)
        except ExportError as e:
            logger.error(f"Export failed: {e}")
            self.save_failed.emit(e.message)
            return None

        self._save_progress()
        self._emit_stats()
        self.export_finished.emit(str(result.path))
        return result

    def _apply_snapshot(self, entries: List[TranslationEntry], snapshot: Sequence[Any]):
        for index, client_entry in enumerate(snapshot):
            if index >= len(entries):
                break
            if isinstance(client_entry, dict):
                translation = client_entry.get('translation')
                completed = client_entry.get('completed')
            else:
                translation = getattr(client_entry, 'translation', None)
                completed = getattr(client_entry, 'completed', None)
            if translation is not None:
                entries[index].translation = translation
            if completed is not None:
                entries[index].completed = bool(completed)

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def commit_and_advance(self, text: str) -> int:
        """
        Store the current text, mark the entry completed when non-empty, and
        move to the next entry unless this is the last one.

        Returns:
            The new current index
        """
        parsed_file = self._require_file()
        if not parsed_file.entries:
            return 0
        index = parsed_file.current_index

        entry = parsed_file.get_entry(index)
        if text != entry.translation:
            parsed_file.update_translation(index, text)
        parsed_file.mark_completed(index)
        self.entry_changed.emit(index)
        self._save_progress()

        if index >= parsed_file.entry_count - 1:
            return index
        return self._move_to(index + 1)

    def go_back(self, text: str) -> int:
        """Store the current text and move to the previous entry."""
        parsed_file = self._require_file()
        index = parsed_file.current_index
        if index <= 0:
            return index

        self._store_if_changed(index, text)
        return self._move_to(index - 1)

    def jump_to_first_incomplete(self, text: str) -> bool:
        """
        Store the current text and move to the first entry not completed.

        Returns:
            False when every entry is completed
        """
        parsed_file = self._require_file()
        self._store_if_changed(parsed_file.current_index, text)

        target = parsed_file.first_incomplete_index()
        if target is None:
            return False
        self._move_to(target)
        return True

    def copy_original(self) -> str:
        """Replace the current translation with the original text."""
        parsed_file = self._require_file()
        index = parsed_file.current_index
        original = parsed_file.get_entry(index).original
        self.set_translation(index, original)
        return original

    def _store_if_changed(self, index: int, text: str):
        parsed_file = self._require_file()
        if not parsed_file.entries:
            return
        if parsed_file.get_entry(index).translation != text:
            self.set_translation(index, text)

    def _move_to(self, index: int) -> int:
        parsed_file = self._require_file()
        parsed_file.current_index = index
        self.current_changed.emit(parsed_file.current_index)
        self._emit_stats()
        return parsed_file.current_index

    # =========================================================================
    # STATISTICS / PERSISTENCE
    # =========================================================================

    def get_stats(self) -> Dict[str, int]:
        return self._require_file().get_stats()

    def _emit_stats(self):
        if self._file is not None:
            self.stats_updated.emit(self._file.get_stats())

    def _save_progress(self) -> bool:
        """Save progress; failures are reported, never raised."""
        if self._file is None or self._progress_store is None:
            return False
        try:
            self._progress_store.save(self._file.entries)
        except SaveError as e:
            logger.error(f"Failed to save progress: {e}")
            self.save_failed.emit(e.message)
            return False
        finally:
            self._emit_stats()
        return True

    def __repr__(self) -> str:
        name = self._file.filename if self._file else None
        return f"EditorController(file={name})"
