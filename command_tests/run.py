"""Orchestrator for all command tests."""
from __future__ import annotations

import datetime
import importlib
import json
import os
import sys
import time
import traceback

# Ensure repo root is on sys.path so `pgmgr.*` imports work.
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from termcolor import colored  # noqa: E402

from command_tests.helpers.env import make_env  # noqa: E402
from command_tests.helpers.modules import COMMAND_TEST_MODULES, suffix_from_module  # noqa: E402
from command_tests.helpers.result import CommandReport  # noqa: E402


def _bold(text: str) -> str:
    return colored(str(text), attrs=["bold"])


def run_module(module_path: str) -> CommandReport:
    """Run one command module's checks in a fresh environment."""
    suffix = suffix_from_module(module_path)
    env = make_env(suffix)
    started = time.perf_counter()
    try:
        report = importlib.import_module(module_path).run(env)
    except Exception as e:
        report = CommandReport(
            command_name=suffix,
            error=f"{type(e).__name__}: {e}",
            traceback=traceback.format_exc(),
        )
    finally:
        env.cleanup()
    report.seconds = time.perf_counter() - started
    return report


def _print_report(report: CommandReport) -> None:
    print(f"\n  {_bold(colored(report.command_name, 'white'))}  {colored(f'{report.seconds:.2f}s', 'dark_grey')}")

    if report.error:
        print(f"  {_bold(colored('ERROR', 'red'))} - {colored(report.error, 'red')}")
        if report.traceback:
            for line in report.traceback.splitlines():
                print(f"    {colored(line, 'yellow')}")
        return

    passed = len(report.checks) - len(report.failed_checks)
    badge = _bold(colored("PASS", "green")) if report.success else _bold(colored("FAIL", "red"))
    print(f"  {badge} ({passed}/{len(report.checks)})")

    for check in report.checks:
        num_name = f"{check.number}. {check.name}"
        print(f"\n    {colored(num_name, 'green' if check.passed else 'red')}")
        print(f"       {colored(check.description, 'dark_grey')}")
        if not check.passed and check.detail:
            print(f"       {colored('  detail: ' + check.detail, 'yellow')}")


def _write_report(reports: list[CommandReport], results_dir: str) -> None:
    os.makedirs(results_dir, exist_ok=True)
    payload = {
        "timestamp": datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "total": len(reports),
        "passed": sum(1 for r in reports if r.success),
        "failed": sum(1 for r in reports if not r.success),
        "results": [r.to_dict() for r in reports],
    }
    with open(os.path.join(results_dir, "results.json"), "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def main() -> int:
    results_dir = os.path.join(_REPO_ROOT, "test_results")

    print(f"\n{_bold('Starting command tests...')}")

    reports = [run_module(m) for m in COMMAND_TEST_MODULES]
    for report in reports:
        _print_report(report)
    failed = [r.command_name for r in reports if not r.success]

    try:
        _write_report(reports, results_dir)
        print(f"\n  {colored('Report written to', 'cyan')} test_results/results.json")
    except OSError as e:
        print(f"  {colored('WARNING: could not write report: ' + str(e), 'yellow')}")

    print(f"\n\n{_bold('== Summary ==')}")
    print(
        f"  Passed:  {colored(str(len(reports) - len(failed)), 'green')}/{len(reports)}   "
        f"Failed: {colored(str(len(failed)), 'red' if failed else 'green')}"
    )
    if failed:
        print(f"  Failures: {colored(', '.join(failed), 'red')}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
