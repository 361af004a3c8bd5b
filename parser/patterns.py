# -*- coding: utf-8 -*-
"""
Localization Entry Patterns

Centralized regex patterns for `'original' -> 'translation'` lines.
"""

import re


class EntryPatterns:
    """
    Collection of regex patterns for the entry line convention.

    ENTRY is matched against a trimmed line and drives parsing.
    LINE_ENTRY is the same shape on the raw line, with the leading
    whitespace and the separator captured, so the exporter can splice a new
    translation between the quotes and keep every other character.
    """

    # Groups: 1 quote, 2 original, 3 quote, 4 translation, 5 trailing
    ENTRY = re.compile(r'^([\'"])(.*?)\1\s*->\s*([\'"])(.*?)\3(.*)$')

    # Groups: 1 leading, 2 quote, 3 original, 4 separator, 5 quote, 6 translation, 7 trailing
    LINE_ENTRY = re.compile(r'^([\s\ufeff]*)([\'"])(.*?)\2(\s*->\s*)([\'"])(.*?)\5(.*)$')

    TRANSLATION_GROUP = 6

    # Whitespace plus a byte-order mark at either end of a line
    _TRIM = re.compile(r'^[\s\ufeff]+|[\s\ufeff]+$')

    @classmethod
    def trim(cls, line: str) -> str:
        return cls._TRIM.sub('', line)
