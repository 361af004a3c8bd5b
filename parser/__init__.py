# -*- coding: utf-8 -*-
"""
LocEdit Parser Package

Parser for line-oriented `'original' -> 'translation'` localization files.
"""

from parser.entry_parser import EntryParser
from parser.patterns import EntryPatterns

from parser.core import (
    parse_text,
    parse_lines,
    split_lines,
    join_lines,
)

__all__ = [
    'EntryParser',
    'EntryPatterns',
    'parse_text',
    'parse_lines',
    'split_lines',
    'join_lines',
]
