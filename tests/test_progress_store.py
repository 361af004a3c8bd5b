# -*- coding: utf-8 -*-
"""
Unit Tests for the LocEdit Progress Store

Tests for merging, malformed progress data and the saved JSON shape.
"""

import json
from datetime import datetime, timezone

import pytest

from core.progress_store import (
    ProgressStore, build_progress_records, merge_progress, parse_progress_data
)
from locedit_exceptions import ProgressLoadError, SaveError
from models.entry import TranslationEntry
from models.progress import ProgressRecord, format_timestamp


def make_entries(*line_numbers):
    return [
        TranslationEntry(original=f"line {n}", translation=f"t{n}", line_number=n)
        for n in line_numbers
    ]


class TestMergeProgress:
    """Tests for restoring completion flags by line number."""

    def test_only_matching_line_restored(self):
        entries = make_entries(1, 2, 3)
        records = [ProgressRecord(2, "line 2", True, True, "")]

        restored = merge_progress(entries, records)

        assert restored == 1
        assert [e.completed for e in entries] == [False, True, False]

    def test_unknown_line_ignored(self):
        entries = make_entries(1)
        merge_progress(entries, [ProgressRecord(7, "gone", True, True, "")])
        assert not entries[0].completed

    def test_first_record_wins(self):
        entries = make_entries(1)
        merge_progress(entries, [
            ProgressRecord(1, "", True, True, ""),
            ProgressRecord(1, "", False, True, ""),
        ])
        assert entries[0].completed

    def test_original_text_not_compared(self):
        entries = make_entries(1)
        merge_progress(entries, [ProgressRecord(1, "something else", True, True, "")])
        assert entries[0].completed


class TestParseProgressData:
    """Tests for decoding stored records."""

    def test_not_a_list(self):
        with pytest.raises(ProgressLoadError):
            parse_progress_data({"lineNumber": 1})

    def test_records_without_line_number_ignored(self):
        records = parse_progress_data([
            {"lineNumber": 3, "completed": True},
            {"completed": True},
            {"lineNumber": "3", "completed": True},
            {"lineNumber": True, "completed": True},
            "junk",
        ])
        assert [r.line_number for r in records] == [3]

    def test_integral_float_line_number(self):
        records = parse_progress_data([
            {"lineNumber": 2.0, "completed": True},
            {"lineNumber": 2.5, "completed": True},
        ])
        assert [r.line_number for r in records] == [2]
        assert isinstance(records[0].line_number, int)

    def test_float_line_number_merges(self):
        entries = make_entries(1, 2)
        merge_progress(entries, parse_progress_data([{"lineNumber": 2.0, "completed": True}]))
        assert [e.completed for e in entries] == [False, True]

    def test_truthy_completed(self):
        records = parse_progress_data([{"lineNumber": 1, "completed": 1}])
        assert records[0].completed is True


class TestProgressStore:
    """Tests for the progress file."""

    def test_missing_file(self, tmp_path):
        entries = make_entries(1, 2)
        assert ProgressStore(tmp_path / "none_progress.json").load(entries) == 0
        assert not any(e.completed for e in entries)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad_progress.json"
        path.write_text("{not json", encoding='utf-8')
        entries = make_entries(1, 2)
        entries[0].completed = True

        assert ProgressStore(path).load(entries) == 0
        assert not any(e.completed for e in entries)

    def test_top_level_not_list(self, tmp_path):
        path = tmp_path / "obj_progress.json"
        path.write_text('{"lineNumber": 1, "completed": true}', encoding='utf-8')
        entries = make_entries(1)
        assert ProgressStore(path).load(entries) == 0
        assert not entries[0].completed

    def test_save_format(self, tmp_path):
        path = tmp_path / "dialogue_progress.json"
        entries = make_entries(2, 5)
        entries[0].original = "x" * 80
        entries[0].completed = True
        entries[1].translation = " "
        moment = datetime(2024, 3, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)

        ProgressStore(path).save(entries, now=moment)
        data = json.loads(path.read_text(encoding='utf-8'))

        assert data == [
            {
                "lineNumber": 2,
                "original": "x" * 50,
                "completed": True,
                "hasTranslation": True,
                "lastModified": "2024-03-01T12:30:15.250Z",
            },
            {
                "lineNumber": 5,
                "original": "line 5",
                "completed": False,
                "hasTranslation": False,
                "lastModified": "2024-03-01T12:30:15.250Z",
            },
        ]

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "dialogue_progress.json"
        store = ProgressStore(path)
        entries = make_entries(1, 2, 3)
        entries[1].completed = True
        store.save(entries)

        reloaded = make_entries(1, 2, 3)
        assert store.load(reloaded) == 1
        assert [e.completed for e in reloaded] == [False, True, False]

    def test_save_failure(self, tmp_path):
        store = ProgressStore(tmp_path / "missing_dir" / "x_progress.json")
        with pytest.raises(SaveError):
            store.save(make_entries(1))

    def test_non_ascii_kept(self, tmp_path):
        path = tmp_path / "ko_progress.json"
        entries = [TranslationEntry(original="문을 열어라", translation="", line_number=1)]
        ProgressStore(path).save(entries)
        assert "문을 열어라" in path.read_text(encoding='utf-8')


class TestTimestamps:
    """Tests for record timestamps."""

    def test_format_converts_to_utc(self):
        from datetime import timedelta
        moment = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone(timedelta(hours=9)))
        assert format_timestamp(moment) == "2024-01-01T00:00:00.000Z"

    def test_records_share_timestamp(self):
        records = build_progress_records(make_entries(1, 2))
        assert records[0].last_modified == records[1].last_modified
