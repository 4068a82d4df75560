"""Tests for backend/app/services/task_parser.py

The heuristic parser runs in three stages per line (normalize, filter,
extract) and falls back to sentence splitting when no line yields a task.
"""

from unittest.mock import patch

import pytest

from backend.app.services.task_parser import (
    extract_task,
    extract_tasks_from_sentences,
    is_not_a_task,
    normalize_line,
    parse_tasks,
)


# ─────────────────────────────────────────────────────────────────────────────
# Line normalization
# ─────────────────────────────────────────────────────────────────────────────


class TestNormalizeLine:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("- Buy milk", "Buy milk"),
            ("• Buy milk", "Buy milk"),
            ("3) Send report", "Send report"),
            ("12. Send report", "Send report"),
            ("b. Call the bank", "Call the bank"),
            ("C) Call the bank", "Call the bank"),
            ("iv. Book flights", "Book flights"),
            ("XII) Book flights", "Book flights"),
            ("TODO: write tests", "write tests"),
            ("need to fix the sink", "fix the sink"),
            ("Must: renew passport", "renew passport"),
        ],
    )
    def test_strips_markers_and_prefixes(self, line, expected):
        assert normalize_line(line) == expected

    def test_strips_stacked_markers_in_order(self):
        assert normalize_line("* 1. todo: Write docs") == "Write docs"

    def test_prefix_must_be_a_whole_word(self):
        assert normalize_line("Download the report") == "Download the report"
        assert normalize_line("Document the API") == "Document the API"
        assert normalize_line("Steps to reproduce the bug") == "Steps to reproduce the bug"

    def test_non_ascii_digits_are_not_list_numbers(self):
        assert normalize_line("١. Buy milk") == "١. Buy milk"

    def test_bare_prefix_becomes_empty(self):
        assert normalize_line("todo") == ""

    @pytest.mark.parametrize(
        "line",
        ["- Buy milk", "2) need to fix the sink", "a. Review the budget", "Plain line"],
    )
    def test_is_idempotent(self, line):
        once = normalize_line(line)
        assert normalize_line(once) == once


# ─────────────────────────────────────────────────────────────────────────────
# Task-likeness filter
# ─────────────────────────────────────────────────────────────────────────────


class TestIsNotATask:
    @pytest.mark.parametrize(
        "line",
        [
            "MEETING NOTES",
            "Agenda:",
            "TOTAL: 500",
            "12/05/2024 standup",
            "1-2-24 retro",
            "10:30 meeting with the whole team",
            "mail bob@corp.com about the invoice",
            "see https://example.com for details",
            "read http://example.com/a-long-article-title",
            "Groceries",
        ],
    )
    def test_rejects_non_tasks(self, line):
        assert is_not_a_task(line) is True

    @pytest.mark.parametrize(
        "line",
        [
            "Buy milk",
            "Review the quarterly budget",
            "Note: the long version of this header is fine",
            "١٢/٠٥/٢٠٢٤ standup review",
            "١٠:٣٠ standup with the team",
        ],
    )
    def test_keeps_task_like_lines(self, line):
        assert is_not_a_task(line) is False


# ─────────────────────────────────────────────────────────────────────────────
# Extraction
# ─────────────────────────────────────────────────────────────────────────────


class TestExtractTask:
    def test_strips_lone_trailing_period(self):
        task = extract_task("Call the dentist.")

        assert task.title == "Call the dentist"
        assert task.description == ""
        assert task.priority == "medium"

    def test_keeps_trailing_period_when_others_exist(self):
        task = extract_task("Mail the form to the U.S. office.")
        assert task.title == "Mail the form to the U.S. office."

    def test_truncates_long_lines(self):
        line = "Prepare " + "a very detailed plan " * 10
        line = line.strip()
        assert len(line) > 100

        task = extract_task(line)

        assert len(task.title) == 100
        assert task.title == line[:97] + "..."
        assert task.description == line

    def test_line_of_exactly_one_hundred_chars_is_not_truncated(self):
        line = "Write " + "x" * 94
        task = extract_task(line)
        assert task.title == line
        assert task.description == ""

    @pytest.mark.parametrize(
        "line, priority",
        [
            ("Finish the report ASAP", "high"),
            ("Fix the critical login bug", "high"),
            ("Maybe repaint the fence", "low"),
            ("Clean the garage someday", "low"),
            ("Urgent but optional cleanup", "high"),
            ("Water the plants", "medium"),
        ],
    )
    def test_infers_priority(self, line, priority):
        assert extract_task(line).priority == priority

    def test_accepts_lowercase_action_verb(self):
        assert extract_task("buy eggs").title == "buy eggs"

    def test_accepts_imperative_cue(self):
        assert extract_task("we must go").title == "we must go"

    @pytest.mark.parametrize("line", ["ok", "hm!", "go running", "a. b."])
    def test_rejects_short_lines_without_cues(self, line):
        assert extract_task(line) is None

    def test_rejects_titles_shorter_than_three_chars(self):
        assert extract_task("Ab.") is None


# ─────────────────────────────────────────────────────────────────────────────
# Driver
# ─────────────────────────────────────────────────────────────────────────────


class TestParseTasks:
    @pytest.mark.parametrize("text", [None, "", 42, ["Buy milk"], {"text": "Buy milk"}])
    def test_non_string_input_returns_empty(self, text):
        assert parse_tasks(text) == []

    def test_filters_emails_urls_and_headers(self):
        text = "1. Buy milk\n2. asdf@example.com\n3. http://example.com\n4. TOTAL: 500"

        tasks = parse_tasks(text)

        assert [t.title for t in tasks] == ["Buy milk"]

    def test_urgent_line_gets_high_priority(self):
        text = "- urgent\nReview the quarterly budget urgent deadline"

        tasks = parse_tasks(text)

        assert len(tasks) == 1
        assert tasks[0].title == "Review the quarterly budget urgent deadline"
        assert tasks[0].priority == "high"

    def test_skips_repeated_raw_lines(self):
        tasks = parse_tasks("Buy milk\nBuy milk\n   Buy milk   \n")
        assert [t.title for t in tasks] == ["Buy milk"]

    def test_same_task_with_different_markers_is_kept_twice(self):
        tasks = parse_tasks("- Buy milk\n* Buy milk")
        assert [t.title for t in tasks] == ["Buy milk", "Buy milk"]

    def test_handles_windows_line_endings(self):
        tasks = parse_tasks("- Send invoice\r\n- Call the plumber\r\n")
        assert [t.title for t in tasks] == ["Send invoice", "Call the plumber"]

    def test_prose_line_is_taken_whole(self):
        tasks = parse_tasks("The weather was nice today. We went for a walk.")
        assert [t.title for t in tasks] == ["The weather was nice today. We went for a walk."]

    def test_titles_and_priorities_stay_in_bounds(self):
        text = "\n".join([
            "NOTES",
            "- " + "Review the draft and leave comments " * 5,
            "* maybe clean up the backlog",
            "a) Submit the expense report asap.",
            "todo: x",
            "ii. Plan the sprint",
        ])

        tasks = parse_tasks(text)

        assert tasks
        for task in tasks:
            assert 3 <= len(task.title) <= 100
            assert task.priority in {"low", "medium", "high"}


class TestSentenceFallback:
    def test_not_used_when_lines_yield_tasks(self):
        with patch(
            "backend.app.services.task_parser.extract_tasks_from_sentences"
        ) as fallback:
            tasks = parse_tasks("- Buy milk")

        fallback.assert_not_called()
        assert len(tasks) == 1

    def test_runs_after_empty_line_pass_and_may_find_nothing(self):
        text = "ok.\nhm!"
        with patch(
            "backend.app.services.task_parser.extract_tasks_from_sentences",
            wraps=extract_tasks_from_sentences,
        ) as fallback:
            tasks = parse_tasks(text)

        fallback.assert_called_once_with(text)
        assert tasks == []

    def test_sentences_skip_the_filter(self):
        tasks = parse_tasks("see https://x.io now. then call bob about it!")

        assert [t.title for t in tasks] == ["see https://x.io now", "then call bob about it!"]

    def test_splits_on_all_terminal_punctuation(self):
        tasks = extract_tasks_from_sentences("Pay rent! Is the car insured? Wash the car.")
        assert [t.title for t in tasks] == ["Pay rent", "Is the car insured", "Wash the car"]
