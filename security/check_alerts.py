#!/usr/bin/env python3
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

"""Gate a workflow on open Code Scanning alerts.

Reads the open code scanning alerts of a repository, compares the number of
alerts per severity with the configured ``max_<severity>_alerts`` thresholds
and fails the step when a threshold is exceeded.

On pull requests, alerts located in files changed by the PR are exempted from
the counts (the PR may be fixing them) and listed separately.

The summary is published either as a single PR comment (``report_mode=comment``,
located by a hidden marker and updated in place on re-runs) or as a single
check run on ``revision`` (``report_mode=check_run``).

Inputs are read the GitHub Actions way (``INPUT_<NAME>`` environment
variables); each can be overridden on the command line.

Outputs (``$GITHUB_OUTPUT``):
  total_alerts, <severity>_alerts, <severity>_alerts_threshold (-1 = unset),
  conclusion

Usage:
  python3 check_alerts.py --owner my-org --repo my-repo --max-critical-alerts 0

Draft / debug (no writes):
  python3 check_alerts.py --alerts-file alerts.json --owner o --repo r --dry-run
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache

from github.Repository import Repository

from shared.actions import get_input, load_event, pull_request_number, set_failed, set_output
from shared.common import parse_runner_debug, set_verbose_enabled, vprint
from shared.github_alerts import get_repository, list_open_codescan_alerts, list_pull_request_files
from shared.github_reports import CHECK_RUN_NAME, CheckRunReportStore, CommentReportStore

from security.utils.alert_parser import load_alerts_file, parse_alerts
from security.utils.classifier import classify_alerts
from security.utils.config import load_config
from security.utils.gate import FAILURE_MESSAGE, SUCCESS_MESSAGE, decide_conclusion, gate_outputs
from security.utils.models import Alert, ClassificationResult, Conclusion, GateConfig, ReportMode, RunContext
from security.utils.publisher import ReportStore, publish_report
from security.utils.report_builder import REPORT_MARKER, build_report_body, build_summary

# Action inputs that can be overridden on the command line.
CLI_INPUTS: tuple[str, ...] = (
    "github_token",
    "owner",
    "repo",
    "revision",
    "report_mode",
    "do_not_break_pr_check",
    "max_critical_alerts",
    "max_high_alerts",
    "max_medium_alerts",
    "max_low_alerts",
    "max_note_alerts",
    "alerts_file",
)


@dataclass
class GateRun:
    """Everything a gate run computed, before any side effect."""
    result: ClassificationResult
    summary: str
    body: str
    conclusion: Conclusion


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fail a workflow when open Code Scanning alerts exceed thresholds")
    for name in CLI_INPUTS:
        p.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None, help=f"Overrides input {name!r}")
    p.add_argument("--pr-number", type=int, default=None, help="Pull request number (default: from event payload)")
    p.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Do not create/update the report; only print it",
    )
    p.add_argument("--verbose", action="store_true", help="Verbose logging (also enabled by RUNNER_DEBUG=1)")
    return p.parse_args(argv)


def input_reader(args: argparse.Namespace) -> Callable[[str], str | None]:
    """CLI flags win over ``INPUT_*`` environment values."""
    def read(name: str) -> str | None:
        override = getattr(args, name, None)
        if override is not None:
            return str(override)
        return get_input(name)

    return read


def resolve_context(config: GateConfig, pr_number: int | None) -> RunContext:
    if pr_number is None:
        pr_number = pull_request_number(load_event())
    return RunContext(pr_number=pr_number, revision=config.revision)


def fetch_alerts(config: GateConfig, repo: Callable[[], Repository]) -> list[Alert]:
    if config.alerts_file:
        return load_alerts_file(config.alerts_file)
    return parse_alerts(list_open_codescan_alerts(repo()))


def fetch_pr_files(context: RunContext, repo: Callable[[], Repository]) -> list[str]:
    if context.pr_number is None:
        return []
    files = list_pull_request_files(repo(), context.pr_number)
    print(
        "This is a PR Check. The following files are not being validated as it might have fixes: "
        + ", ".join(files)
    )
    return files


def evaluate(
    config: GateConfig,
    context: RunContext,
    alerts: list[Alert],
    pr_files: list[str],
) -> GateRun:
    result = classify_alerts(alerts, pr_files, config.thresholds)
    summary = build_summary(result, config.thresholds)
    body = build_report_body(summary, config.owner, config.repo)
    conclusion = decide_conclusion(
        result.severity_counts,
        config.thresholds,
        do_not_break_pr_check=config.do_not_break_pr_check,
        is_pr=context.is_pr,
    )
    return GateRun(result=result, summary=summary, body=body, conclusion=conclusion)


def has_report_target(mode: ReportMode, context: RunContext) -> bool:
    if mode == ReportMode.CHECK_RUN:
        return bool(context.revision)
    return context.pr_number is not None


def build_report_store(
    repo: Repository,
    mode: ReportMode,
    context: RunContext,
    conclusion: Conclusion,
) -> tuple[ReportStore, str]:
    """Return the store for *mode* and the criteria that locate its report."""
    if mode == ReportMode.CHECK_RUN:
        return CheckRunReportStore(repo, context.revision, str(conclusion)), CHECK_RUN_NAME
    return CommentReportStore(repo.get_issue(context.pr_number)), REPORT_MARKER


def publish(config: GateConfig, context: RunContext, run: GateRun, repo: Callable[[], Repository]) -> None:
    if not has_report_target(config.report_mode, context):
        what = "revision" if config.report_mode == ReportMode.CHECK_RUN else "PR number"
        print(f"No {what} found. Skipping {config.report_mode} creation.")
        return

    if config.dry_run:
        print(f"DRY-RUN: would publish {config.report_mode} report")
        print("DRY-RUN: body_preview_begin")
        print(run.body)
        print("DRY-RUN: body_preview_end")
        return

    store, criteria = build_report_store(repo(), config.report_mode, context, run.conclusion)
    outcome = publish_report(store, criteria, run.body)
    vprint(f"Report record {outcome.record.id} ({'created' if outcome.created else 'updated'})")


def run_gate(config: GateConfig, context: RunContext) -> GateRun:
    @cache
    def repo() -> Repository:
        if not config.token:
            raise ValueError("Input required and not supplied: github_token")
        return get_repository(config.token, config.repo_full_name)

    alerts = fetch_alerts(config, repo)
    pr_files = fetch_pr_files(context, repo)
    run = evaluate(config, context, alerts, pr_files)
    publish(config, context, run, repo)
    return run


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        set_verbose_enabled(args.verbose or parse_runner_debug())
        config = load_config(input_reader(args))
        context = resolve_context(config, args.pr_number)
        run = run_gate(config, context)
    except (Exception, SystemExit) as exc:
        set_failed(str(exc))
        return 1

    for name, value in gate_outputs(run.result, config.thresholds, run.conclusion).items():
        set_output(name, value)
    print(f"summary: {run.summary}")

    if run.conclusion == Conclusion.FAILURE:
        set_failed(FAILURE_MESSAGE)
        return 1
    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
