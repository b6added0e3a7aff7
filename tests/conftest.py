"""Shared fixtures for the code scanning gate tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from types import SimpleNamespace

import pytest

from shared.models import ReportRecord
from security.utils.models import Alert


def make_alert(severity: str = "critical", path: str = "", description: str = "Issue") -> Alert:
    return Alert(
        severity=severity,
        description=description,
        detail_url=f"https://example.com/{severity}/{path or 'none'}",
        file_path=path,
    )


def make_codescan_alert(
    severity: str | None = "critical",
    path: str | None = "src/app.js",
    state: str = "open",
    description: str = "Critical issue",
    number: int = 1,
):
    """Attribute-style stand-in for a PyGithub ``CodeScanAlert``."""
    location = SimpleNamespace(path=path) if path is not None else None
    return SimpleNamespace(
        state=state,
        rule=SimpleNamespace(security_severity_level=severity, severity=None, description=description),
        html_url=f"https://github.com/o/r/security/code-scanning/{number}",
        most_recent_instance=SimpleNamespace(location=location),
    )


class FakeReportStore:
    """In-memory report store keyed by insertion order."""

    def __init__(self, records: list[ReportRecord] | None = None) -> None:
        self.records: list[ReportRecord] = list(records or [])
        self.created = 0
        self.updated = 0
        self._next_id = max((r.id for r in self.records), default=0) + 1

    def find(self, criteria: str) -> ReportRecord | None:
        for record in self.records:
            if record.body.startswith(criteria):
                return record
        return None

    def create(self, body: str) -> ReportRecord:
        record = ReportRecord(id=self._next_id, body=body)
        self._next_id += 1
        self.records.append(record)
        self.created += 1
        return record

    def update(self, record: ReportRecord, body: str) -> ReportRecord:
        updated = ReportRecord(id=record.id, body=body)
        self.records = [updated if r.id == record.id else r for r in self.records]
        self.updated += 1
        return updated


@pytest.fixture
def fake_store() -> FakeReportStore:
    return FakeReportStore()


@pytest.fixture
def gate_env(monkeypatch, tmp_path: Path):
    """Clean GitHub Actions environment with a temporary ``$GITHUB_OUTPUT``."""
    for key in ("GITHUB_EVENT_PATH", "GITHUB_REPOSITORY", "GITHUB_TOKEN", "RUNNER_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key, raising=False)

    output_file = tmp_path / "github_output"
    output_file.write_text("")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    inputs = {
        "GITHUB_TOKEN": "fake-token",
        "OWNER": "test-owner",
        "REPO": "test-repo",
        "DO_NOT_BREAK_PR_CHECK": "false",
        "MAX_CRITICAL_ALERTS": "0",
        "MAX_HIGH_ALERTS": "0",
        "MAX_MEDIUM_ALERTS": "0",
        "MAX_LOW_ALERTS": "0",
        "MAX_NOTE_ALERTS": "0",
    }
    for key, value in inputs.items():
        monkeypatch.setenv(f"INPUT_{key}", value)

    def set_pr_event(number: int) -> None:
        event_path = tmp_path / "event.json"
        event_path.write_text(json.dumps({"pull_request": {"number": number}}))
        monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))

    def read_outputs() -> dict[str, str]:
        outputs: dict[str, str] = {}
        for line in output_file.read_text().splitlines():
            key, value = line.split("=", 1)
            outputs[key] = value
        return outputs

    return SimpleNamespace(
        set_input=lambda name, value: monkeypatch.setenv(f"INPUT_{name.upper()}", value),
        set_pr_event=set_pr_event,
        read_outputs=read_outputs,
        tmp_path=tmp_path,
    )
