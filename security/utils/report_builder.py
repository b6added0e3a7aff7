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

"""Report rendering – the Markdown summary of a classification and the
marker-prefixed, length-bounded body that gets published.
"""

from __future__ import annotations

from .models import ClassificationResult
from .thresholds import describe_threshold, threshold_for

REPORT_MARKER = "<!-- Code Scanning Alerts Comment -->"
MAX_REPORT_LENGTH = 65530

SUMMARY_TITLE_SUCCESS = "# 🟢 CodeScanning Alerts 🟢"
SUMMARY_TITLE_FAILURE = "# 🚨 CodeScanning Alerts 🚨"

BREAKING_HEADER = "## Please address these issues before merging this PR:"
NON_BREAKING_HEADER = "## Please consider these issues for the upcoming service update:"
PR_FILES_HEADER = (
    "### The following alerts are for files that are part of this PR, because of this "
    "their status on main are not being validated, but take in consideration that if "
    "the fixes are not being done, the next release maybe blocked until solution:"
)


def truncation_notice(owner: str, repo: str) -> str:
    return f"\n**Truncated:** [Go to CodeScanning](https://github.com/{owner}/{repo}/security/code-scanning)."


def _section(header: str, lines: list[str]) -> str:
    return header + "\n" + "\n".join(lines)


def build_severity_lines(result: ClassificationResult, thresholds: dict[str, int | None]) -> list[str]:
    lines: list[str] = []
    for severity, count in result.severity_counts.items():
        threshold = threshold_for(thresholds, severity)
        lines.append(
            f"- {severity[:1].upper() + severity[1:]} Total Alerts: {count}, "
            f"Threshold: {describe_threshold(threshold)}"
        )
    return lines


def build_summary(result: ClassificationResult, thresholds: dict[str, int | None]) -> str:
    """Render the human-readable summary (without the report marker)."""
    parts: list[str] = [
        SUMMARY_TITLE_FAILURE if result.has_breaking else SUMMARY_TITLE_SUCCESS,
        "## Summary",
        f"- Total Alerts: {result.total_alerts}",
        *build_severity_lines(result, thresholds),
    ]

    sections: list[str] = []
    if result.breaking_alerts:
        sections.append(_section(BREAKING_HEADER, result.breaking_alerts))
    if result.non_breaking_alerts:
        sections.append(_section(NON_BREAKING_HEADER, result.non_breaking_alerts))
    if result.has_pr_file_alerts:
        sections.append(
            _section(PR_FILES_HEADER, result.breaking_alerts_in_pr + result.non_breaking_alerts_in_pr)
        )

    return "\n\n".join(["\n".join(parts), *sections]) + "\n"


def build_report_body(
    summary: str,
    owner: str,
    repo: str,
    max_length: int = MAX_REPORT_LENGTH,
) -> str:
    """Prefix *summary* with the report marker and bound it to *max_length*.

    Oversized summaries are cut so that the marker line stays intact at the
    start and the truncation notice closes the body.
    """
    head = REPORT_MARKER + "\n"
    body = head + summary
    if len(body) <= max_length:
        return body

    tail = "...\n" + truncation_notice(owner, repo)
    keep = max(0, max_length - len(head) - len(tail))
    return head + summary[:keep] + tail
