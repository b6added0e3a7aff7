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

"""GitHub Actions runner I/O – reading ``INPUT_*`` values, writing step
outputs to ``$GITHUB_OUTPUT``, failure annotations, and loading the
triggering event payload.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from typing import Any

from .common import vprint


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the action input *name* the way the runner exposes it.

    The runner upper-cases the input name and replaces spaces with
    underscores: ``max_high_alerts`` -> ``INPUT_MAX_HIGH_ALERTS``.
    """
    source = os.environ if env is None else env
    key = "INPUT_" + name.replace(" ", "_").upper()
    return (source.get(key) or "").strip()


def set_output(name: str, value: Any) -> None:
    """Emit a step output; falls back to a log line outside of a runner."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    line = f"{name}={value}"
    if not output_path:
        print(f"output: {line}")
        return
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(line + "\n")


def set_failed(message: str) -> None:
    """Print an ``::error::`` workflow command; the caller sets the exit code."""
    print(f"::error::{message}")
    sys.stdout.flush()


def load_event(path: str | None = None) -> dict[str, Any]:
    """Load the JSON event payload that triggered the workflow.

    Returns an empty dict when no payload is available (e.g. local runs).
    """
    event_path = path or os.environ.get("GITHUB_EVENT_PATH")
    if not event_path or not os.path.exists(event_path):
        vprint("No GITHUB_EVENT_PATH payload available")
        return {}
    with open(event_path, encoding="utf-8") as fh:
        event = json.load(fh)
    return event if isinstance(event, dict) else {}


def pull_request_number(event: Mapping[str, Any]) -> int | None:
    pr = event.get("pull_request") or {}
    number = pr.get("number") if isinstance(pr, dict) else None
    if number is None:
        return None
    try:
        return int(number)
    except (TypeError, ValueError):
        return None
