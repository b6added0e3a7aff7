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

"""Gate decision – the pass/fail conclusion and the step outputs of a run."""

from __future__ import annotations

from .models import KNOWN_SEVERITIES, ClassificationResult, Conclusion
from .thresholds import is_over_threshold, threshold_output_value

FAILURE_MESSAGE = "Code scanning alerts exceed the allowed thresholds"
SUCCESS_MESSAGE = "Code Scanning Alerts threshold not exceeded"


def decide_conclusion(
    severity_counts: dict[str, int],
    thresholds: dict[str, int | None],
    *,
    do_not_break_pr_check: bool,
    is_pr: bool,
) -> Conclusion:
    """Return ``failure`` when any known severity exceeds its threshold.

    On a PR run with *do_not_break_pr_check* the sweep is skipped and the
    run always succeeds; the report still lists breaking alerts.
    """
    if is_pr and do_not_break_pr_check:
        return Conclusion.SUCCESS

    for severity in KNOWN_SEVERITIES:
        if is_over_threshold(severity_counts.get(severity, 0), thresholds.get(severity)):
            return Conclusion.FAILURE
    return Conclusion.SUCCESS


def gate_outputs(
    result: ClassificationResult,
    thresholds: dict[str, int | None],
    conclusion: Conclusion,
) -> dict[str, int | str]:
    outputs: dict[str, int | str] = {"total_alerts": result.total_alerts}
    for severity in KNOWN_SEVERITIES:
        outputs[f"{severity}_alerts"] = result.severity_counts.get(severity, 0)
        outputs[f"{severity}_alerts_threshold"] = threshold_output_value(thresholds.get(severity))
    outputs["conclusion"] = str(conclusion)
    return outputs
