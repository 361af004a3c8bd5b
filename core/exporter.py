# -*- coding: utf-8 -*-
"""
LocEdit Exporter

Writes current translations back into the script text. Lines are addressed
by index (line_number - 1) in a fresh split of the file text, so duplicate
lines are patched independently and untouched lines keep their exact bytes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

import locedit_config as config
from locedit_enums import ExportMode
from locedit_exceptions import ExportError, FileOperationError
from locedit_logger import get_logger
from models.entry import TranslationEntry
from parser.core import split_lines, join_lines
from parser.patterns import EntryPatterns
from utils import path_utils
from core import file_io

logger = get_logger("core.exporter")


@dataclass
class ExportResult:
    """Outcome of patching one file body."""
    text: str
    patched: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)
    path: Optional[Path] = None
    mode: Optional[ExportMode] = None

    @property
    def patched_count(self) -> int:
        return len(self.patched)


def has_line_break(text: str) -> bool:
    return '\n' in text or '\r' in text


def patch_line(line: str, translation: str) -> Optional[str]:
    """
    Replace the text between the translation quotes of one line.

    Args:
        line: Untrimmed source line (may keep a trailing '\\r')
        translation: New translation text, inserted verbatim

    Returns:
        The patched line, or None when the separator or a quote anchor is missing
    """
    if config.ENTRY_SEPARATOR not in line:
        return None

    match = EntryPatterns.LINE_ENTRY.match(line)
    if not match:
        return None

    start = match.start(EntryPatterns.TRANSLATION_GROUP)
    end = match.end(EntryPatterns.TRANSLATION_GROUP)
    return line[:start] + translation + line[end:]


def export_text(original_text: str, entries: Iterable[TranslationEntry]) -> ExportResult:
    """
    Produce a new file body with translations substituted in place.

    Only entries with a non-empty translation are patched. Entries whose line
    is gone or no longer has the entry shape, and translations containing a
    line break, are skipped; the rest continue.
    """
    lines = split_lines(original_text)
    result = ExportResult(text=original_text)

    for entry in entries:
        if not entry.has_translation:
            continue

        index = entry.line_number - 1
        if not 0 <= index < len(lines):
            logger.debug(f"Line {entry.line_number} is out of range, skipped")
            result.skipped.append(entry.line_number)
            continue

        # A line break would split the entry and shift every later line number
        if has_line_break(entry.translation):
            logger.warning(f"Translation for line {entry.line_number} contains a line break, skipped")
            result.skipped.append(entry.line_number)
            continue

        new_line = patch_line(lines[index], entry.translation)
        if new_line is None:
            logger.debug(f"Line {entry.line_number} has no entry anchors, skipped")
            result.skipped.append(entry.line_number)
            continue

        quote = EntryPatterns.LINE_ENTRY.match(lines[index]).group(5)
        if quote in entry.translation:
            logger.warning(
                f"Translation for line {entry.line_number} contains {quote!r}; "
                f"it will not read back unchanged"
            )

        lines[index] = new_line
        result.patched.append(entry.line_number)

    result.text = join_lines(lines)
    if result.skipped:
        logger.warning(f"{len(result.skipped)} entr(ies) skipped during export: {result.skipped}")
    return result


class Exporter:
    """
    Applies the destination policy for a source file.

    - translated copy exists: read it and overwrite it
    - otherwise: read the source and create the translated copy
    """

    def resolve_destination(self, source_path: Union[str, Path]) -> ExportMode:
        translated = path_utils.translated_path_for(source_path)
        return ExportMode.OVERWRITE if translated.is_file() else ExportMode.NEW_FILE

    def export(self, source_path: Union[str, Path], entries: List[TranslationEntry]) -> ExportResult:
        """
        Export entries for a source file.

        Raises:
            ExportError: base text unreadable or destination unwritable
        """
        translated = path_utils.translated_path_for(source_path)
        mode = self.resolve_destination(source_path)
        base_path = translated if mode == ExportMode.OVERWRITE else Path(source_path)

        logger.info(f"Export started: {len(entries)} entries, "
                    f"{sum(1 for e in entries if e.completed)} completed, "
                    f"{sum(1 for e in entries if e.has_translation)} translated")

        try:
            original_text = file_io.read_text(base_path)
        except FileOperationError as e:
            raise ExportError(e.message, file_path=e.file_path, operation='read') from e

        result = export_text(original_text, entries)

        try:
            file_io.write_text(translated, result.text)
        except FileOperationError as e:
            raise ExportError(e.message, file_path=e.file_path, operation='write') from e

        result.path = translated
        result.mode = mode
        logger.info(f"Exported {result.patched_count} translation(s) to {translated} ({mode.value})")
        return result
