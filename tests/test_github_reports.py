"""Tests for the PyGithub-backed comment and check run stores."""

from __future__ import annotations

from unittest.mock import MagicMock

from shared.github_reports import CHECK_RUN_NAME, CheckRunReportStore, CommentReportStore
from shared.models import ReportRecord
from security.utils.publisher import publish_report
from security.utils.report_builder import REPORT_MARKER


def _comment(comment_id: int, body: str | None) -> MagicMock:
    comment = MagicMock()
    comment.id = comment_id
    comment.body = body
    return comment


def _check_run(run_id: int, name: str, summary: str = "") -> MagicMock:
    check_run = MagicMock()
    check_run.id = run_id
    check_run.name = name
    check_run.output.summary = summary
    return check_run


class TestCommentReportStore:
    def test_find_first_marker_comment(self):
        issue = MagicMock(number=12)
        issue.get_comments.return_value = [
            _comment(1, None),
            _comment(2, "LGTM"),
            _comment(3, f"{REPORT_MARKER}\nold"),
            _comment(4, f"{REPORT_MARKER}\nolder"),
        ]
        record = CommentReportStore(issue).find(REPORT_MARKER)
        assert record == ReportRecord(id=3, body=f"{REPORT_MARKER}\nold")

    def test_find_none(self):
        issue = MagicMock(number=12)
        issue.get_comments.return_value = [_comment(1, "hello")]
        assert CommentReportStore(issue).find(REPORT_MARKER) is None

    def test_update_edits_found_comment(self):
        existing = _comment(3, f"{REPORT_MARKER}\nold")
        issue = MagicMock(number=12)
        issue.get_comments.return_value = [existing]

        outcome = publish_report(CommentReportStore(issue), REPORT_MARKER, f"{REPORT_MARKER}\nnew")

        existing.edit.assert_called_once_with(f"{REPORT_MARKER}\nnew")
        issue.create_comment.assert_not_called()
        assert outcome.record.id == 3

    def test_create_posts_comment(self):
        issue = MagicMock(number=12)
        issue.get_comments.return_value = []
        issue.create_comment.return_value = _comment(55, "")

        outcome = publish_report(CommentReportStore(issue), REPORT_MARKER, f"{REPORT_MARKER}\nnew")

        issue.create_comment.assert_called_once_with(f"{REPORT_MARKER}\nnew")
        assert outcome.created is True
        assert outcome.record.id == 55


class TestCheckRunReportStore:
    def test_creates_completed_check_run(self):
        repo = MagicMock()
        repo.get_commit.return_value.get_check_runs.return_value = [_check_run(1, "lint")]
        repo.create_check_run.return_value = _check_run(77, CHECK_RUN_NAME)

        store = CheckRunReportStore(repo, "abc123", "failure")
        outcome = publish_report(store, CHECK_RUN_NAME, "report")

        repo.get_commit.assert_called_once_with("abc123")
        repo.create_check_run.assert_called_once_with(
            name=CHECK_RUN_NAME,
            head_sha="abc123",
            status="completed",
            conclusion="failure",
            output={"title": "Code Scanning Alerts", "summary": "report"},
        )
        assert outcome.created is True
        assert outcome.record.id == 77

    def test_updates_existing_check_run(self):
        existing = _check_run(5, CHECK_RUN_NAME, "old")
        repo = MagicMock()
        repo.get_commit.return_value.get_check_runs.return_value = [_check_run(4, "build"), existing]

        store = CheckRunReportStore(repo, "abc123", "success")
        outcome = publish_report(store, CHECK_RUN_NAME, "new report")

        existing.edit.assert_called_once_with(
            status="completed",
            conclusion="success",
            output={"title": "Code Scanning Alerts", "summary": "new report"},
        )
        repo.create_check_run.assert_not_called()
        assert outcome.record == ReportRecord(id=5, body="new report")
