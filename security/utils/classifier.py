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

"""Alert classification – counts alerts per severity, routes each alert to
breaking / non-breaking, and exempts alerts located in files changed by the
current pull request.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from shared.common import vprint

from .models import Alert, ClassificationResult
from .thresholds import is_over_threshold, threshold_for


def count_by_severity(alerts: Sequence[Alert]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for alert in alerts:
        counts[alert.severity] = counts.get(alert.severity, 0) + 1
    return counts


def classify_alerts(
    alerts: Sequence[Alert],
    pr_files: Collection[str],
    thresholds: dict[str, int | None],
) -> ClassificationResult:
    """Partition *alerts* into the four routing lists.

    The over-threshold test reads the live per-severity count, which is
    decremented every time an alert in a PR file is exempted. An exemption
    can therefore turn a later alert of the same severity from breaking into
    non-breaking; results depend on alert order.
    """
    result = ClassificationResult(severity_counts=count_by_severity(alerts))
    counts = result.severity_counts
    pr_file_set = set(pr_files)

    for alert in alerts:
        severity = alert.severity
        over = is_over_threshold(counts.get(severity, 0), threshold_for(thresholds, severity))
        line = alert.render_line()

        # Empty paths never match a changed file.
        if alert.file_path and alert.file_path in pr_file_set:
            if over:
                result.breaking_alerts_in_pr.append(line)
            else:
                result.non_breaking_alerts_in_pr.append(line)
            counts[severity] -= 1
            vprint(f"Exempted {severity} alert in PR file {alert.file_path}")
            continue

        if over:
            result.breaking_alerts.append(line)
        else:
            result.non_breaking_alerts.append(line)
        result.retained_alerts.append(alert)

    return result
