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

"""Gate configuration – assembling a validated :class:`GateConfig` from
action inputs, with ``GITHUB_TOKEN`` / ``GITHUB_REPOSITORY`` fallbacks.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

from shared.common import parse_bool

from .models import GateConfig, ReportMode
from .thresholds import parse_thresholds


def _split_repository(full_name: str) -> tuple[str, str]:
    if "/" not in full_name:
        return "", ""
    owner, repo = full_name.split("/", 1)
    return owner.strip(), repo.strip()


def parse_report_mode(raw: str | None) -> ReportMode:
    value = (raw or "").strip().lower().replace("-", "_")
    if not value:
        return ReportMode.COMMENT
    try:
        return ReportMode(value)
    except ValueError:
        allowed = ", ".join(m.value for m in ReportMode)
        raise ValueError(f"Unsupported report_mode: {raw!r} (expected one of: {allowed})") from None


def load_config(
    get_value: Callable[[str], str | None],
    env: Mapping[str, str] | None = None,
) -> GateConfig:
    """Build the run configuration; raises ``ValueError`` on missing or bad inputs."""
    environ = os.environ if env is None else env

    def value(name: str) -> str:
        return (get_value(name) or "").strip()

    alerts_file = value("alerts_file") or None
    dry_run = parse_bool(value("dry_run"), name="dry_run")

    # A dry run over a local alerts file never calls the API.
    token = value("github_token") or value("token") or environ.get("GITHUB_TOKEN", "")
    if not token and not (alerts_file and dry_run):
        raise ValueError("Input required and not supplied: github_token")

    default_owner, default_repo = _split_repository(environ.get("GITHUB_REPOSITORY", ""))
    owner = value("owner") or default_owner
    repo = value("repo") or default_repo
    if not owner:
        raise ValueError("Input required and not supplied: owner")
    if not repo:
        raise ValueError("Input required and not supplied: repo")

    return GateConfig(
        token=token,
        owner=owner,
        repo=repo,
        thresholds=parse_thresholds(value),
        do_not_break_pr_check=parse_bool(value("do_not_break_pr_check"), name="do_not_break_pr_check"),
        report_mode=parse_report_mode(value("report_mode")),
        revision=value("revision") or None,
        alerts_file=alerts_file,
        dry_run=dry_run,
    )
