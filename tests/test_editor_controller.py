# -*- coding: utf-8 -*-
"""
Unit Tests for the LocEdit Editor Controller

Tests for opening files, collaborator operations, navigation and
failure paths.
"""

import json

import pytest
from unittest.mock import patch

from locedit_exceptions import NoActiveFileError, SaveError, SourceFileError


class TestOpenFile:
    """Tests for opening a file."""

    def test_open_parses_entries(self, controller, source_file, qtbot):
        with qtbot.waitSignal(controller.file_opened) as blocker:
            localization_file = controller.open_file(str(source_file))

        assert blocker.args == [localization_file]
        assert localization_file.entry_count == 3
        assert localization_file.line_count == 8
        assert controller.current_index == 0

    def test_open_missing_file(self, controller, tmp_path, qtbot):
        with qtbot.waitSignal(controller.file_error):
            with pytest.raises(SourceFileError):
                controller.open_file(str(tmp_path / "missing.txt"))
        assert not controller.has_file

    def test_prefers_translated_copy(self, controller, source_file):
        translated = source_file.with_name("dialogue_translated.txt")
        translated.write_text("'Hello' -> '안녕'\n", encoding='utf-8')

        localization_file = controller.open_file(str(source_file))

        assert localization_file.filename == "dialogue_translated.txt"
        assert controller.get_entries()[0].translation == "안녕"

    def test_progress_merged_on_open(self, controller, source_file):
        progress = source_file.with_name("dialogue_progress.json")
        progress.write_text(json.dumps([{"lineNumber": 5, "completed": True}]), encoding='utf-8')

        controller.open_file(str(source_file))

        assert [e.completed for e in controller.get_entries()] == [False, False, True]

    def test_resumes_at_first_incomplete(self, controller, source_file):
        progress = source_file.with_name("dialogue_progress.json")
        progress.write_text(json.dumps([{"lineNumber": 2, "completed": True}]), encoding='utf-8')

        controller.open_file(str(source_file))

        assert controller.current_index == 1

    def test_all_completed_starts_at_first(self, controller, source_file):
        progress = source_file.with_name("dialogue_progress.json")
        records = [{"lineNumber": n, "completed": True} for n in (2, 4, 5)]
        progress.write_text(json.dumps(records), encoding='utf-8')

        controller.open_file(str(source_file))

        assert controller.current_index == 0

    def test_line_break_translation_not_exported(self, opened_controller, source_file):
        """A multi-line translation leaves the exported file's line layout intact."""
        opened_controller.set_translation(1, "문을\n열어라.")
        result = opened_controller.export_now()

        assert result.skipped == [4]
        content = source_file.with_name("dialogue_translated.txt").read_bytes()
        assert content == source_file.read_bytes()

    def test_operations_require_file(self, controller):
        with pytest.raises(NoActiveFileError):
            controller.get_entries()
        with pytest.raises(NoActiveFileError):
            controller.set_translation(0, "x")


class TestCollaboratorOperations:
    """Tests for translation edits, completion and export."""

    def test_set_translation_saves_progress(self, opened_controller, source_file):
        assert opened_controller.set_translation(1, "문을 열어라.")

        entry = opened_controller.get_entries()[1]
        assert entry.translation == "문을 열어라."
        assert not entry.completed

        data = json.loads(source_file.with_name("dialogue_progress.json").read_text(encoding='utf-8'))
        assert [r["lineNumber"] for r in data] == [2, 4, 5]
        assert data[1]["hasTranslation"] is True

    def test_set_translation_out_of_range(self, opened_controller):
        with pytest.raises(IndexError):
            opened_controller.set_translation(3, "x")

    def test_mark_completed_empty_translation(self, opened_controller):
        assert opened_controller.mark_completed(1) is False
        assert not opened_controller.get_entries()[1].completed

    def test_edit_after_completion_clears_flag(self, opened_controller):
        assert opened_controller.mark_completed(0)
        opened_controller.set_translation(0, "Hi")
        assert not opened_controller.get_entries()[0].completed

    def test_stats_signal(self, opened_controller, qtbot):
        with qtbot.waitSignal(opened_controller.stats_updated) as blocker:
            opened_controller.mark_completed(0)
        assert blocker.args[0]['completed'] == 1
        assert opened_controller.get_stats()['percent'] == 33

    def test_export_with_snapshot(self, opened_controller, source_file, qtbot):
        snapshot = [entry.to_dict() for entry in opened_controller.get_entries()]
        snapshot[1]['translation'] = "문을 열어라."
        snapshot[1]['completed'] = True

        with qtbot.waitSignal(opened_controller.export_finished) as blocker:
            result = opened_controller.export_now(snapshot)

        translated = source_file.with_name("dialogue_translated.txt")
        assert blocker.args == [str(translated)]
        assert result.patched == [2, 4, 5]
        lines = translated.read_text(encoding='utf-8').split('\n')
        assert lines[3] == "'Open the door.' -> '문을 열어라.'  // cmd_042"
        assert opened_controller.get_entries()[1].completed

        data = json.loads(source_file.with_name("dialogue_progress.json").read_text(encoding='utf-8'))
        assert data[1]["completed"] is True

    def test_export_twice_overwrites(self, opened_controller, source_file):
        opened_controller.set_translation(1, "첫 번째")
        opened_controller.export_now()
        opened_controller.set_translation(1, "두 번째")
        opened_controller.export_now()

        content = source_file.with_name("dialogue_translated.txt").read_text(encoding='utf-8')
        assert "'Open the door.' -> '두 번째'  // cmd_042" in content

    def test_progress_save_failure(self, opened_controller, qtbot):
        with patch('core.progress_store.ProgressStore.save', side_effect=SaveError("disk full")):
            with qtbot.waitSignal(opened_controller.save_failed) as blocker:
                saved = opened_controller.set_translation(0, "Hi")

        assert saved is False
        assert blocker.args == ["disk full"]
        # Entries stay edited so the user can retry
        assert opened_controller.get_entries()[0].translation == "Hi"

    def test_export_failure(self, opened_controller, source_file, qtbot):
        source_file.unlink()
        with qtbot.waitSignal(opened_controller.save_failed):
            assert opened_controller.export_now() is None


class TestNavigation:
    """Tests for the editing surface's event model."""

    def test_commit_and_advance(self, opened_controller, qtbot):
        with qtbot.waitSignal(opened_controller.current_changed) as blocker:
            index = opened_controller.commit_and_advance("Hi, traveler!")

        assert index == 1
        assert blocker.args == [1]
        entry = opened_controller.get_entries()[0]
        assert entry.translation == "Hi, traveler!"
        assert entry.completed

    def test_commit_empty_does_not_complete(self, opened_controller):
        opened_controller.commit_and_advance("Hello, traveler!")
        opened_controller.commit_and_advance("")
        assert not opened_controller.get_entries()[1].completed
        assert opened_controller.current_index == 2

    def test_commit_on_last_entry(self, opened_controller):
        opened_controller.active_file.current_index = 2
        assert opened_controller.commit_and_advance("늦었어.") == 2
        assert opened_controller.get_entries()[2].completed

    def test_go_back(self, opened_controller):
        opened_controller.commit_and_advance("Hello, traveler!")
        assert opened_controller.go_back("문") == 0
        entry = opened_controller.get_entries()[1]
        assert entry.translation == "문"
        assert not entry.completed

    def test_go_back_at_start(self, opened_controller):
        assert opened_controller.go_back("") == 0

    def test_unchanged_text_keeps_completion(self, opened_controller):
        opened_controller.commit_and_advance("Hello, traveler!")
        opened_controller.go_back("")
        # Moving away from entry 0 without editing it keeps it completed
        opened_controller.jump_to_first_incomplete("Hello, traveler!")
        assert opened_controller.get_entries()[0].completed
        assert opened_controller.current_index == 1

    def test_jump_when_all_completed(self, opened_controller):
        opened_controller.commit_and_advance("Hello, traveler!")
        opened_controller.commit_and_advance("문을 열어라.")
        opened_controller.commit_and_advance("늦었어.")
        assert opened_controller.jump_to_first_incomplete("늦었어.") is False

    def test_copy_original(self, opened_controller):
        opened_controller.active_file.current_index = 1
        assert opened_controller.copy_original() == "Open the door."
        assert opened_controller.get_entries()[1].translation == "Open the door."
