from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from deploycheck.common.diffing import DiffSegment

CheckStatus = Literal["passed", "failed"]


@dataclass(frozen=True)
class CheckResult:
    status: CheckStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "passed"

    @classmethod
    def passed(cls, message: str) -> "CheckResult":
        return cls("passed", message)

    @classmethod
    def failed(cls, message: str) -> "CheckResult":
        return cls("failed", message)


@dataclass(frozen=True)
class BundleComparison:
    result: CheckResult
    checked: Tuple[str, ...] = ()
    changed_file: Optional[str] = None
    segments: Tuple[DiffSegment, ...] = ()
    cache_check: Optional[CheckResult] = None
