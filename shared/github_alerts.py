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

"""GitHub REST reads (PyGithub) – open code scanning alerts of a repository
and the files changed by a pull request. Pagination is handled by PyGithub's
``PaginatedList``.
"""

from __future__ import annotations

from github import Auth, Github
from github.CodeScanAlert import CodeScanAlert
from github.Repository import Repository

from .common import vprint

PER_PAGE = 100


def get_repository(token: str, repo_full_name: str) -> Repository:
    gh = Github(auth=Auth.Token(token), per_page=PER_PAGE)
    return gh.get_repo(repo_full_name)


def list_open_codescan_alerts(repo: Repository) -> list[CodeScanAlert]:
    """Return open code scanning alerts in API order."""
    alerts = list(repo.get_codescan_alerts(state="open"))
    print(f"Fetched {len(alerts)} open code scanning alerts for {repo.full_name}")
    return alerts


def list_pull_request_files(repo: Repository, pr_number: int) -> list[str]:
    files = [f.filename for f in repo.get_pull(pr_number).get_files()]
    vprint(f"PR #{pr_number} changes {len(files)} file(s)")
    return files
