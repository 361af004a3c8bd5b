# -*- coding: utf-8 -*-
"""
Unit Tests for LocEdit Models

Tests for TranslationEntry and LocalizationFile.
"""

import pytest

from models import LocalizationFile, TranslationEntry


@pytest.fixture
def localization_file(entries):
    return LocalizationFile(source_path="/work/dialogue.txt", entries=entries, line_count=8)


class TestTranslationEntry:
    """Tests for TranslationEntry dataclass."""

    def test_edit_clears_completion(self):
        entry = TranslationEntry(original="A", translation="a", line_number=1, completed=True)
        entry.set_translation("b")
        assert entry.translation == "b"
        assert not entry.completed

    def test_mark_completed_requires_text(self):
        entry = TranslationEntry(original="A", translation="  ", line_number=1)
        assert entry.mark_completed() is False
        assert not entry.completed

        entry.set_translation("a")
        assert entry.mark_completed() is True
        assert entry.completed

    def test_completed_independent_of_equality(self):
        """A translation equal to the original is not implicitly completed."""
        entry = TranslationEntry(original="OK", translation="OK", line_number=1)
        assert entry.has_translation
        assert not entry.completed

    def test_to_dict(self):
        entry = TranslationEntry(original="A", translation="a", line_number=3, full_line="'A' -> 'a'")
        assert entry.to_dict() == {
            'original': "A",
            'translation': "a",
            'lineNumber': 3,
            'fullLine': "'A' -> 'a'",
            'completed': False,
        }

    def test_copy_is_independent(self):
        entry = TranslationEntry(original="A", translation="a", line_number=1)
        clone = entry.copy()
        clone.translation = "b"
        assert entry.translation == "a"


class TestLocalizationFile:
    """Tests for LocalizationFile model."""

    def test_paths(self, localization_file):
        assert localization_file.filename == "dialogue.txt"
        assert localization_file.translated_path.name == "dialogue_translated.txt"
        assert localization_file.progress_path.name == "dialogue_progress.json"

    def test_get_entry_out_of_range(self, localization_file):
        with pytest.raises(IndexError):
            localization_file.get_entry(99)
        with pytest.raises(IndexError):
            localization_file.get_entry(-1)

    def test_update_notifies(self, localization_file):
        seen = []
        localization_file.subscribe('entry_updated', seen.append)
        localization_file.update_translation(1, "문을 열어라.")
        assert seen == [1]

    def test_current_index_clamped(self, localization_file):
        seen = []
        localization_file.subscribe('current_changed', seen.append)
        localization_file.current_index = 10
        assert localization_file.current_index == 2
        assert seen == [2]

    def test_first_incomplete(self, localization_file):
        localization_file.mark_completed(0)
        assert localization_file.first_incomplete_index() == 1
        localization_file.update_translation(1, "x")
        localization_file.mark_completed(1)
        localization_file.mark_completed(2)
        assert localization_file.first_incomplete_index() is None

    def test_stats(self, localization_file):
        localization_file.mark_completed(0)
        stats = localization_file.get_stats()
        assert stats == {'total': 3, 'completed': 1, 'translated': 2, 'percent': 33}

    def test_stats_empty(self):
        empty = LocalizationFile(source_path="/work/empty.txt", entries=[])
        assert empty.get_stats() == {'total': 0, 'completed': 0, 'translated': 0, 'percent': 0}
        assert empty.get_current_entry() is None
