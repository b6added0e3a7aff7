#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""GitHub-backed report stores (PyGithub) – pull request comments located
by a body marker, and check runs located by name on a revision.

Both implement the ``find`` / ``create`` / ``update`` store interface used by
``security.utils.publisher``.
"""

from __future__ import annotations

from typing import Any

from github.CheckRun import CheckRun
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.Repository import Repository

from .common import vprint
from .models import ReportRecord

CHECK_RUN_NAME = "Code Scanning Alerts"
CHECK_RUN_TITLE = "Code Scanning Alerts"


class CommentReportStore:
    """Report stored as a comment on a pull request (issue comments API)."""

    def __init__(self, issue: Issue) -> None:
        self._issue = issue
        self._comments: dict[int, IssueComment] = {}

    def find(self, criteria: str) -> ReportRecord | None:
        for comment in self._issue.get_comments():
            body = comment.body or ""
            if body.startswith(criteria):
                vprint(f"Found existing report comment {comment.id} on PR #{self._issue.number}")
                self._comments[comment.id] = comment
                return ReportRecord(id=comment.id, body=body)
        return None

    def create(self, body: str) -> ReportRecord:
        comment = self._issue.create_comment(body)
        self._comments[comment.id] = comment
        print(f"Created a new comment on PR #{self._issue.number}")
        return ReportRecord(id=comment.id, body=body)

    def update(self, record: ReportRecord, body: str) -> ReportRecord:
        comment = self._comments.get(record.id) or self._issue.get_comment(record.id)
        comment.edit(body)
        print(f"Updated existing comment (ID: {record.id}) on PR #{self._issue.number}")
        return ReportRecord(id=record.id, body=body)


class CheckRunReportStore:
    """Report stored as the output of a completed check run on a revision."""

    def __init__(self, repo: Repository, revision: str, conclusion: str) -> None:
        self._repo = repo
        self._revision = revision
        self._conclusion = conclusion
        self._check_runs: dict[int, CheckRun] = {}

    def _output(self, body: str) -> dict[str, Any]:
        return {"title": CHECK_RUN_TITLE, "summary": body}

    def find(self, criteria: str) -> ReportRecord | None:
        commit = self._repo.get_commit(self._revision)
        for check_run in commit.get_check_runs():
            if check_run.name == criteria:
                vprint(f"Found existing check run {check_run.id} on {self._revision}")
                self._check_runs[check_run.id] = check_run
                summary = check_run.output.summary if check_run.output is not None else ""
                return ReportRecord(id=check_run.id, body=summary or "")
        return None

    def create(self, body: str) -> ReportRecord:
        check_run = self._repo.create_check_run(
            name=CHECK_RUN_NAME,
            head_sha=self._revision,
            status="completed",
            conclusion=self._conclusion,
            output=self._output(body),
        )
        self._check_runs[check_run.id] = check_run
        print(f"Created check run {check_run.id} on {self._revision}")
        return ReportRecord(id=check_run.id, body=body)

    def update(self, record: ReportRecord, body: str) -> ReportRecord:
        check_run = self._check_runs.get(record.id) or self._repo.get_check_run(record.id)
        check_run.edit(
            status="completed",
            conclusion=self._conclusion,
            output=self._output(body),
        )
        print(f"Updated existing check run (ID: {record.id}) on {self._revision}")
        return ReportRecord(id=record.id, body=body)
