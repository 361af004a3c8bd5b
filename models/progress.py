# -*- coding: utf-8 -*-
"""
LocEdit Progress Record

Persisted per-entry completion state, keyed by line number.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import locedit_config as config
from models.entry import TranslationEntry


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


@dataclass
class ProgressRecord:
    """
    Write-mostly projection of a TranslationEntry.

    Only `completed` is ever read back; `original_prefix` and `has_translation`
    identify the entry for humans inspecting the file.
    """
    line_number: int
    original_prefix: str
    completed: bool
    has_translation: bool
    last_modified: str

    @classmethod
    def from_entry(cls, entry: TranslationEntry, now: Optional[datetime] = None) -> 'ProgressRecord':
        moment = now or datetime.now(timezone.utc)
        return cls(
            line_number=entry.line_number,
            original_prefix=entry.original[:config.ORIGINAL_PREFIX_LENGTH],
            completed=bool(entry.completed),
            has_translation=entry.has_translation,
            last_modified=format_timestamp(moment),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['ProgressRecord']:
        """
        Build a record from its JSON form.

        Returns None when the object has no integral lineNumber
        (2 and 2.0 are both accepted).
        """
        if not isinstance(data, dict):
            return None
        line_number = data.get('lineNumber')
        if isinstance(line_number, float) and line_number.is_integer():
            line_number = int(line_number)
        if not isinstance(line_number, int) or isinstance(line_number, bool):
            return None
        return cls(
            line_number=line_number,
            original_prefix=str(data.get('original') or ''),
            completed=bool(data.get('completed', False)),
            has_translation=bool(data.get('hasTranslation', False)),
            last_modified=str(data.get('lastModified') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lineNumber': self.line_number,
            'original': self.original_prefix,
            'completed': self.completed,
            'hasTranslation': self.has_translation,
            'lastModified': self.last_modified,
        }
