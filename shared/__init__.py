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

"""GitHub-facing helpers shared by the automation scripts.

Modules
-------
common          Logging control (``RUNNER_DEBUG`` / ``vprint``) and flag parsing.
actions         GitHub Actions I/O (inputs, outputs, failure annotation, event payload).
models          Shared dataclasses (ReportRecord).
github_alerts   Code scanning alerts and PR changed files via PyGithub.
github_reports  PR comment and check run report stores via PyGithub.
"""
