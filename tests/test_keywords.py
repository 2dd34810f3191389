"""Tests for the priority and status keyword classifiers."""

from voicetask.schemas import TaskPriority, TaskStatus
from voicetask.services.keywords import (
    PRIORITY_KEYWORDS,
    STATUS_KEYWORDS,
    KeywordClassifier,
    classify_priority,
    classify_status,
)


class TestPriorityClassifier:
    def test_urgent_group(self):
        for text in ["this is urgent", "do it urgently", "asap please", "critical bug", "emergency"]:
            assert classify_priority(text) == TaskPriority.URGENT

    def test_high_group(self):
        assert classify_priority("high priority finish backend") == TaskPriority.HIGH
        assert classify_priority("important meeting prep") == TaskPriority.HIGH

    def test_medium_group(self):
        assert classify_priority("medium priority cleanup") == TaskPriority.MEDIUM
        assert classify_priority("normal errand") == TaskPriority.MEDIUM

    def test_low_group(self):
        assert classify_priority("low priority cleanup") == TaskPriority.LOW
        assert classify_priority("whenever you can") == TaskPriority.LOW

    def test_no_keyword_is_none(self):
        assert classify_priority("call mom tomorrow at 3pm") is None
        assert classify_priority("") is None

    def test_not_urgent_is_claimed_by_urgent(self):
        """'urgent' is listed first and matches inside 'not urgent'."""
        assert classify_priority("not urgent, just a reminder") == TaskPriority.URGENT

    def test_substring_matching(self):
        assert classify_priority("highlight the doc") == TaskPriority.HIGH
        assert classify_priority("follow up with sam") == TaskPriority.LOW

    def test_first_keyword_in_table_wins(self):
        # Both present; urgent comes first in the table
        assert classify_priority("low effort but urgent") == TaskPriority.URGENT


class TestStatusClassifier:
    def test_todo_group(self):
        assert classify_status("add to do item") == TaskStatus.TODO
        assert classify_status("pending review") == TaskStatus.TODO

    def test_in_progress_group(self):
        assert classify_status("report is in progress") == TaskStatus.IN_PROGRESS
        assert classify_status("working on slides") == TaskStatus.IN_PROGRESS
        assert classify_status("already started") == TaskStatus.IN_PROGRESS
        assert classify_status("ongoing migration") == TaskStatus.IN_PROGRESS

    def test_done_group(self):
        assert classify_status("mark taxes done") == TaskStatus.DONE
        assert classify_status("completed the draft") == TaskStatus.DONE
        assert classify_status("finished reading") == TaskStatus.DONE

    def test_not_started_before_started(self):
        assert classify_status("not started yet") == TaskStatus.TODO

    def test_default_is_todo(self):
        assert classify_status("buy milk") == TaskStatus.TODO
        assert classify_status("") == TaskStatus.TODO

    def test_finish_is_not_done(self):
        assert classify_status("finish backend") == TaskStatus.TODO


class TestKeywordTables:
    def test_tables_are_ordered_pairs(self):
        assert PRIORITY_KEYWORDS[0] == ("urgent", TaskPriority.URGENT)
        assert PRIORITY_KEYWORDS[-1] == ("not urgent", TaskPriority.LOW)
        assert STATUS_KEYWORDS[0] == ("to do", TaskStatus.TODO)
        assert STATUS_KEYWORDS[-1] == ("complete", TaskStatus.DONE)

    def test_custom_classifier(self):
        classifier = KeywordClassifier((("b", 2), ("a", 1)), "test")
        assert classifier.classify("ab") == 2
        assert classifier.classify("a") == 1
        assert classifier.classify("c") is None
