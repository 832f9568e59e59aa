"""Exception hierarchy for resultext."""

from __future__ import annotations


class ResultExtError(Exception):
    """Base exception for all resultext errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultExtError):
    """Configuration validation or resolution failed."""


class ContractViolationError(ResultExtError, TypeError):
    """A caught exception does not match the declared failure type.

    Raised by ``catching``/``attempt`` when the caller promised that every
    exception raised by the body is an ``error_type``. This is a bug in the
    calling code, never a recoverable outcome.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: type[BaseException],
        actual: BaseException,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.expected = expected
        self.actual = actual


class UnraisableFailureError(ResultExtError):
    """A failure payload that is not an exception was escalated to a raise.

    The original payload is kept on ``error`` so handlers can still inspect it.
    """

    def __init__(self, error: object) -> None:
        super().__init__(f"Outcome failed with non-exception payload: {error!r}")
        self.error = error
