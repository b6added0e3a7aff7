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

"""Alert data parsing – turning raw code scanning alerts (REST JSON dicts or
PyGithub ``CodeScanAlert`` objects) into :class:`Alert` values, and loading a
pre-collected alerts JSON file.
"""

from __future__ import annotations

import json
import os
from typing import Any

from shared.common import vprint

from .models import UNKNOWN_SEVERITY, Alert

# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------

def _field(obj: Any, name: str) -> Any:
    """Read *name* from a dict or an attribute-style object; ``None`` if absent."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def resolve_severity(rule: Any) -> str:
    """Pick the alert severity: security level, then rule severity, then unknown."""
    raw = _field(rule, "security_severity_level") or _field(rule, "severity") or UNKNOWN_SEVERITY
    return str(raw).strip().lower() or UNKNOWN_SEVERITY


def resolve_path(alert: Any) -> str:
    location = _field(_field(alert, "most_recent_instance"), "location")
    return str(_field(location, "path") or "")


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def parse_alert(raw: Any) -> Alert:
    """Build an :class:`Alert`; missing fields degrade to empty defaults."""
    rule = _field(raw, "rule")
    return Alert(
        severity=resolve_severity(rule),
        description=str(_field(rule, "description") or ""),
        detail_url=str(_field(raw, "html_url") or ""),
        file_path=resolve_path(raw),
    )


def parse_alerts(raw_alerts: list[Any]) -> list[Alert]:
    return [parse_alert(raw) for raw in raw_alerts]


def is_open(raw: Any) -> bool:
    state = _field(raw, "state")
    return state is None or str(state).lower() == "open"


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

def load_alerts_file(path: str) -> list[Alert]:
    """Load open alerts from a JSON file.

    Accepts either a plain list of REST alert objects or an object with an
    ``alerts`` list (the shape written by ``collect_alert.sh``).
    """
    if not os.path.exists(path):
        raise SystemExit(f"ERROR: alerts file not found: {path}")

    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"ERROR: invalid JSON in alerts file {path}: {exc}") from exc

    raw_alerts = data.get("alerts") if isinstance(data, dict) else data
    if not isinstance(raw_alerts, list):
        raise SystemExit(f"ERROR: no alerts list found in {path}")

    open_alerts = [a for a in raw_alerts if isinstance(a, dict) and is_open(a)]
    print(f"Loaded {len(raw_alerts)} alerts from {path}")
    vprint(f"Found {len(open_alerts)} open alerts")
    return parse_alerts(open_alerts)
