# -*- coding: utf-8 -*-
"""
LocEdit Progress Store

Persists per-entry completion next to the source file (name_progress.json)
and merges it back onto freshly parsed entries by line number.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from locedit_exceptions import FileOperationError, ProgressLoadError, SaveError
from locedit_logger import get_logger
from models.entry import TranslationEntry
from models.progress import ProgressRecord
from core import file_io

logger = get_logger("core.progress_store")


def merge_progress(entries: List[TranslationEntry], records: Iterable[ProgressRecord]) -> int:
    """
    Restore completion flags onto entries.

    Line number is the only join key; the stored original prefix is not
    compared. Entries without a record keep their parser default.

    Returns:
        Number of entries restored as completed
    """
    by_line = {}
    for record in records:
        # First record wins for a duplicated line number
        by_line.setdefault(record.line_number, record)

    restored = 0
    for entry in entries:
        record = by_line.get(entry.line_number)
        if record is not None:
            entry.completed = record.completed
            if record.completed:
                restored += 1
    return restored


def build_progress_records(entries: Iterable[TranslationEntry],
                           now: Optional[datetime] = None) -> List[ProgressRecord]:
    """Derive one record per entry, all sharing the same timestamp."""
    moment = now or datetime.now().astimezone()
    return [ProgressRecord.from_entry(entry, moment) for entry in entries]


def parse_progress_data(data: Any, file_path: Optional[str] = None) -> List[ProgressRecord]:
    """
    Convert decoded JSON into records.

    Raises:
        ProgressLoadError: top level is not a list
    """
    if not isinstance(data, list):
        raise ProgressLoadError("Progress data is not a list", file_path=file_path)

    records = []
    ignored = 0
    for item in data:
        record = ProgressRecord.from_dict(item)
        if record is None:
            ignored += 1
            continue
        records.append(record)

    if ignored:
        logger.warning(f"Ignored {ignored} malformed progress record(s) in {file_path}")
    return records


class ProgressStore:
    """
    Progress file for one source file.

    Loading never fails: a missing, unreadable or malformed file means
    "no progress". Saving overwrites the whole file.
    """

    def __init__(self, progress_path: Union[str, Path]):
        self._path = Path(progress_path)

    @property
    def path(self) -> Path:
        return self._path

    def read_records(self) -> List[ProgressRecord]:
        """
        Read persisted records.

        Raises:
            ProgressLoadError: file unreadable or not valid progress JSON
        """
        if not self._path.is_file():
            return []
        try:
            data = json.loads(file_io.read_text(self._path))
        except FileOperationError as e:
            raise ProgressLoadError(f"Progress file unreadable: {e.message}", file_path=str(self._path)) from e
        except json.JSONDecodeError as e:
            raise ProgressLoadError(f"Progress file corrupted (invalid JSON): {e}", file_path=str(self._path)) from e
        return parse_progress_data(data, str(self._path))

    def load(self, entries: List[TranslationEntry]) -> int:
        """
        Merge saved progress onto entries.

        Returns:
            Number of entries restored as completed
        """
        if not self._path.is_file():
            logger.debug(f"No progress file at {self._path}")
            return 0

        try:
            records = self.read_records()
        except ProgressLoadError as e:
            logger.warning(f"{e.message}. Starting with no progress.")
            for entry in entries:
                entry.completed = False
            return 0

        restored = merge_progress(entries, records)
        logger.info(f"Progress loaded: {self._path} ({restored}/{len(entries)} completed)")
        return restored

    def save(self, entries: List[TranslationEntry], now: Optional[datetime] = None) -> List[ProgressRecord]:
        """
        Write the full record set, replacing any previous content.

        Raises:
            SaveError: the progress file could not be written
        """
        records = build_progress_records(entries, now)
        payload = json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)

        try:
            file_io.write_text(self._path, payload)
        except FileOperationError as e:
            raise SaveError(f"Progress could not be saved: {e.message}", file_path=str(self._path)) from e

        completed = sum(1 for r in records if r.completed)
        translated = sum(1 for r in records if r.has_translation)
        logger.debug(f"Progress saved: {self._path}")
        logger.debug(f"- completed: {completed}/{len(records)}")
        logger.debug(f"- translated: {translated}/{len(records)}")
        return records
