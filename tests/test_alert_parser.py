"""Tests for raw alert conversion and alerts file loading."""

from __future__ import annotations

import json

import pytest
from conftest import make_codescan_alert

from security.utils.alert_parser import load_alerts_file, parse_alert, resolve_severity


def _rest_alert(**rule) -> dict:
    return {
        "state": "open",
        "rule": {"description": "Desc", **rule},
        "html_url": "https://github.com/o/r/security/code-scanning/1",
        "most_recent_instance": {"location": {"path": "src/a.py"}},
    }


class TestResolveSeverity:
    def test_security_severity_level_wins(self):
        assert resolve_severity({"security_severity_level": "High", "severity": "warning"}) == "high"

    def test_falls_back_to_rule_severity(self):
        assert resolve_severity({"security_severity_level": None, "severity": "note"}) == "note"

    def test_unknown_when_absent(self):
        assert resolve_severity({}) == "unknown"
        assert resolve_severity(None) == "unknown"


class TestParseAlert:
    def test_rest_dict(self):
        alert = parse_alert(_rest_alert(security_severity_level="critical"))
        assert alert.severity == "critical"
        assert alert.description == "Desc"
        assert alert.detail_url.endswith("/1")
        assert alert.file_path == "src/a.py"

    def test_missing_location_gives_empty_path(self):
        raw = _rest_alert(severity="error")
        raw["most_recent_instance"] = {}
        assert parse_alert(raw).file_path == ""

    def test_pygithub_style_object(self):
        alert = parse_alert(make_codescan_alert(severity="medium", path=None))
        assert alert.severity == "medium"
        assert alert.file_path == ""


class TestLoadAlertsFile:
    def test_list_payload_filters_closed(self, tmp_path):
        closed = _rest_alert(severity="error")
        closed["state"] = "dismissed"
        path = tmp_path / "alerts.json"
        path.write_text(json.dumps([_rest_alert(security_severity_level="low"), closed]))
        alerts = load_alerts_file(str(path))
        assert [a.severity for a in alerts] == ["low"]

    def test_object_payload(self, tmp_path):
        path = tmp_path / "alerts.json"
        path.write_text(json.dumps({"repo": {"full_name": "o/r"}, "alerts": [_rest_alert(severity="note")]}))
        assert [a.severity for a in load_alerts_file(str(path))] == ["note"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit, match="not found"):
            load_alerts_file(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "alerts.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit, match="invalid JSON"):
            load_alerts_file(str(path))
