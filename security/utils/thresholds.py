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

"""Severity thresholds – parsing the ``max_<severity>_alerts`` inputs into
per-severity integer ceilings and describing them for reports and outputs.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .models import KNOWN_SEVERITIES

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_threshold(raw: str | None) -> int | None:
    """Parse a threshold value; ``None`` means "unset" (notify only).

    Parsing is lenient: the leading integer is used and any trailing text is
    ignored (``"10 alerts"`` -> 10). Values without a leading integer, such as
    ``""`` or ``"none"``, are unset.
    """
    match = _LEADING_INT_RE.match(raw or "")
    if not match:
        return None
    return int(match.group(1))


def parse_thresholds(get_value: Callable[[str], str | None]) -> dict[str, int | None]:
    """Read ``max_<severity>_alerts`` for every known severity via *get_value*."""
    return {
        severity: parse_threshold(get_value(f"max_{severity}_alerts"))
        for severity in KNOWN_SEVERITIES
    }


def threshold_for(thresholds: dict[str, int | None], severity: str) -> int | None:
    return thresholds.get(severity.lower())


def is_over_threshold(count: int, threshold: int | None) -> bool:
    return threshold is not None and count > threshold


def threshold_output_value(threshold: int | None) -> int:
    return -1 if threshold is None else threshold


def describe_threshold(threshold: int | None) -> str:
    if threshold is None:
        return "Notify only"
    return f"Breaks when > {threshold}"
