# -*- coding: utf-8 -*-
"""
LocEdit Translation Entry

One translatable unit anchored to a specific source line.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class TranslationEntry:
    """
    Represents a single `'original' -> 'translation'` line of a script file.

    Attributes:
        original (str): Text inside the first quoted span. Never changed after parsing.
        translation (str): Text inside the second quoted span. Edited by the user.
        line_number (int): 1-based source line. Identity key across save/reload.
        full_line (Optional[str]): The trimmed source line, kept for diagnostics.
        completed (bool): Set only by an explicit commit with non-empty translation,
                          cleared on every translation edit.
    """
    original: str
    translation: str
    line_number: int
    full_line: Optional[str] = None
    completed: bool = False

    @property
    def has_translation(self) -> bool:
        return self.translation.strip() != ""

    def set_translation(self, value: str):
        """Store new translation text. Any edit clears completion."""
        self.translation = value
        self.completed = False

    def mark_completed(self) -> bool:
        """
        Mark the entry as completed.

        Returns:
            True if the flag was set, False if the translation is empty.
        """
        if not self.has_translation:
            return False
        self.completed = True
        return True

    def to_dict(self) -> dict:
        return {
            'original': self.original,
            'translation': self.translation,
            'lineNumber': self.line_number,
            'fullLine': self.full_line,
            'completed': self.completed,
        }

    def copy(self) -> 'TranslationEntry':
        return replace(self)
