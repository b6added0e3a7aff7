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

"""Code scanning gate utilities.

Modules
-------
models          Core dataclasses and enums (Alert, ClassificationResult, RunContext, GateConfig).
thresholds      ``max_<severity>_alerts`` parsing and threshold descriptions.
config          GateConfig assembly from action inputs.
alert_parser    Raw alert (REST dict / PyGithub object) conversion and alerts file loading.
classifier      Severity counting, breaking / non-breaking routing, PR-file exemption.
report_builder  Markdown summary rendering and marker-prefixed, length-bounded report body.
publisher       Report store interface and the find -> update-or-create upsert.
gate            Pass / fail conclusion and step outputs.
"""
