from __future__ import annotations

import traceback as _traceback
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Check:
    number: int
    name: str
    description: str
    passed: bool
    detail: str = ""


@dataclass
class CommandReport:
    """Outcome of one command module's checks, as printed and saved by run.py."""

    command_name: str
    checks: list[Check] = field(default_factory=list)
    error: Optional[str] = None
    traceback: Optional[str] = None
    seconds: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None and all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[Check]:
        return [c for c in self.checks if not c.passed]

    def to_dict(self) -> dict:
        return {
            "command_name": self.command_name,
            "success": self.success,
            "checks_run": len(self.checks),
            "checks_failed": len(self.failed_checks),
            "seconds": round(self.seconds, 3),
            "error": self.error,
            "traceback": self.traceback,
            "checks": [
                {
                    "number": c.number,
                    "name": c.name,
                    "description": c.description,
                    "passed": c.passed,
                    "detail": c.detail,
                }
                for c in self.checks
            ],
        }


class CheckList:
    """Accumulates named checks for a single command module."""

    def __init__(self, command_name: str) -> None:
        self._command_name = command_name
        self._checks: list[Check] = []
        self._error: Optional[str] = None
        self._traceback: Optional[str] = None

    def check(
        self,
        name: str,
        description: str,
        condition: bool,
        detail: str = "",
    ) -> None:
        self._checks.append(
            Check(
                number=len(self._checks) + 1,
                name=name,
                description=description,
                passed=bool(condition),
                detail=detail if not condition else "",
            )
        )

    def record_exception(self, exc: BaseException) -> None:
        self._error = f"{type(exc).__name__}: {exc}"
        self._traceback = _traceback.format_exc()

    def result(self) -> CommandReport:
        return CommandReport(
            command_name=self._command_name,
            checks=list(self._checks),
            error=self._error,
            traceback=self._traceback,
        )
