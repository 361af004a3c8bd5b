# -*- coding: utf-8 -*-
"""
Parser Core Functions

Main entry points for parsing, plus the line split/join shared with the exporter.
"""

from typing import List

from locedit_logger import get_logger
from models.entry import TranslationEntry
from parser.entry_parser import EntryParser

logger = get_logger("parser.core")

LINE_SEPARATOR = '\n'


def split_lines(raw_text: str) -> List[str]:
    """
    Split file text on '\\n' only.

    A '\\r' from CRLF files stays at the end of its line, so joining the
    result with join_lines() gives back the exact input.
    """
    return raw_text.split(LINE_SEPARATOR)


def join_lines(lines: List[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def parse_lines(lines: List[str]) -> List[TranslationEntry]:
    """
    Parse already split lines.

    Args:
        lines: List of file lines (index 0 is line 1)

    Returns:
        Entries in ascending line_number order
    """
    return EntryParser().parse(lines)


def parse_text(raw_text: str) -> List[TranslationEntry]:
    """
    Parse full file content.

    Args:
        raw_text: File content using '\\n' line separators

    Returns:
        Entries in ascending line_number order
    """
    return parse_lines(split_lines(raw_text))
