# -*- coding: utf-8 -*-
"""
Entry Parser

Extracts `'original' -> 'translation'` pairs from script/dialogue files.
"""

from typing import List

from locedit_logger import get_logger
import locedit_config as config
from models.entry import TranslationEntry
from parser.patterns import EntryPatterns

logger = get_logger("parser.entry")


class EntryParser:
    """
    Parser for line-oriented localization files.

    One entry per matching line:
        "Hello, traveler!" -> "Hello, traveler!"
        'Open the door.' -> ''  // cmd_042

    Lines that merely contain the separator without two correctly quoted
    spans are skipped. Content after the translation's closing quote is
    not stored; the exporter re-reads it from the file.
    """

    def __init__(self):
        self._entries: List[TranslationEntry] = []
        self._skipped = 0

    @property
    def skipped_count(self) -> int:
        """Lines that contained the separator but did not match the entry shape."""
        return self._skipped

    def parse(self, lines: List[str]) -> List[TranslationEntry]:
        """
        Parse lines into entries in ascending line order.

        Args:
            lines: File lines, without separators. Index 0 is line 1.
        """
        self.reset()

        for i, line in enumerate(lines):
            self._process_line(i + 1, line)

        logger.debug(f"Parsed {len(self._entries)} entries, skipped {self._skipped} separator lines")
        return self._entries

    def reset(self):
        self._entries = []
        self._skipped = 0

    def _process_line(self, line_number: int, line: str):
        stripped = EntryPatterns.trim(line)

        if not stripped or config.ENTRY_SEPARATOR not in stripped:
            return

        match = EntryPatterns.ENTRY.match(stripped)
        if not match:
            self._skipped += 1
            return

        original = match.group(2)
        # Nothing to translate
        if original.strip() == '':
            return

        self._entries.append(TranslationEntry(
            original=original,
            translation=match.group(4),
            line_number=line_number,
            full_line=stripped,
            completed=False,
        ))
