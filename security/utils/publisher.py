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

"""Report publishing – keeps exactly one live report per pull request (or
per revision) by updating the existing record when one is found and creating
it otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from shared.models import ReportRecord


class ReportStore(Protocol):
    """Where reports live (PR comments, check runs, or an in-memory fake)."""

    def find(self, criteria: str) -> ReportRecord | None: ...

    def create(self, body: str) -> ReportRecord: ...

    def update(self, record: ReportRecord, body: str) -> ReportRecord: ...


@dataclass(frozen=True)
class PublishOutcome:
    record: ReportRecord
    created: bool


def publish_report(store: ReportStore, criteria: str, body: str) -> PublishOutcome:
    """Upsert *body*: update the first record matching *criteria*, or create one."""
    existing = store.find(criteria)
    if existing is not None:
        return PublishOutcome(record=store.update(existing, body), created=False)
    return PublishOutcome(record=store.create(body), created=True)
