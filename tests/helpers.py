"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: failure payloads and a recording
callable cover nearly every combinator contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import enum
from typing import Any


class TestError(enum.Enum):
    """Non-exception failure payload, like an error enum in calling code."""

    __test__ = False

    empty = "empty"


class AnyError(Exception):
    """Exception payload with value equality so failures compare by content."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(("AnyError", self.code))


class DescribedError(Exception):
    """Exception exposing the localized text attributes."""

    error_description = "Disk is full"
    failure_reason = "No space left on device"
    help_anchor = "storage-quota"
    recovery_suggestion = "Free some space and retry"


@dataclass
class CallRecorder:
    """Callable double that records its arguments and returns or raises."""

    returns: Any = None
    raises: BaseException | None = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.raises is not None:
            raise self.raises
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)
