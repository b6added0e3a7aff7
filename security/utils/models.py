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

"""Code scanning gate data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# Severities that carry a configurable threshold and a step output.
KNOWN_SEVERITIES: tuple[str, ...] = ("critical", "high", "medium", "low", "note")

UNKNOWN_SEVERITY = "unknown"


class Conclusion(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


class ReportMode(StrEnum):
    COMMENT = "comment"
    CHECK_RUN = "check_run"


@dataclass(frozen=True)
class Alert:
    """One open code scanning finding, reduced to what the gate needs."""
    severity: str
    description: str
    detail_url: str
    file_path: str = ""

    def render_line(self) -> str:
        return f"**{self.severity.upper()}** - {self.description} - [Details]({self.detail_url})"


@dataclass
class ClassificationResult:
    """Output of :func:`classify_alerts`; every list keeps fetch order."""
    severity_counts: dict[str, int] = field(default_factory=dict)
    breaking_alerts: list[str] = field(default_factory=list)
    non_breaking_alerts: list[str] = field(default_factory=list)
    breaking_alerts_in_pr: list[str] = field(default_factory=list)
    non_breaking_alerts_in_pr: list[str] = field(default_factory=list)
    retained_alerts: list[Alert] = field(default_factory=list)

    @property
    def total_alerts(self) -> int:
        return len(self.retained_alerts)

    @property
    def has_breaking(self) -> bool:
        return bool(self.breaking_alerts)

    @property
    def has_pr_file_alerts(self) -> bool:
        return bool(self.breaking_alerts_in_pr or self.non_breaking_alerts_in_pr)


@dataclass(frozen=True)
class RunContext:
    """Where the gate runs: the pull request and/or revision being checked."""
    pr_number: int | None = None
    revision: str | None = None

    @property
    def is_pr(self) -> bool:
        return self.pr_number is not None


@dataclass
class GateConfig:
    """Validated inputs of a single gate run."""
    token: str
    owner: str
    repo: str
    thresholds: dict[str, int | None]
    do_not_break_pr_check: bool = False
    report_mode: ReportMode = ReportMode.COMMENT
    revision: str | None = None
    alerts_file: str | None = None
    dry_run: bool = False

    @property
    def repo_full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
