"""Type-erased failures for outcomes with heterogeneous error types.

``ErasedFailure`` lets one failure type stand in for any other, e.g. across a
chain of ``try_map`` calls whose transforms raise unrelated exceptions.
Wrapping is idempotent: erasing an already-erased failure returns it as-is, so
payloads never end up boxed more than once.
"""

from __future__ import annotations

from typing import Protocol, Self, TypeGuard, runtime_checkable

__all__ = [
    "ErasedFailure",
    "ErrorConvertible",
    "LocalizedError",
    "erase",
    "is_error_convertible",
]


@runtime_checkable
class ErrorConvertible(Protocol):
    """A failure type that can be built from any raised exception.

    Classes satisfying this protocol can be passed as ``into=`` to
    ``try_map`` to normalize whatever the transform raises.
    """

    @classmethod
    def from_error(cls, error: Exception) -> Self: ...


@runtime_checkable
class LocalizedError(Protocol):
    """Human-facing text an error may expose. Any attribute may be ``None``."""

    @property
    def error_description(self) -> str | None: ...

    @property
    def failure_reason(self) -> str | None: ...

    @property
    def help_anchor(self) -> str | None: ...

    @property
    def recovery_suggestion(self) -> str | None: ...


def is_error_convertible(obj: object) -> TypeGuard[type[ErrorConvertible]]:
    """Return True if ``obj`` is a class exposing a callable ``from_error``."""
    return isinstance(obj, type) and callable(getattr(obj, "from_error", None))


class ErasedFailure(Exception):
    """A failure wrapping an arbitrary underlying error value.

    ``ErasedFailure(ErasedFailure(x))`` is the same object as
    ``ErasedFailure(x)``; the constructor flattens instead of nesting.
    Equality and hashing follow the underlying value.
    """

    _error: object

    def __new__(cls, error: object) -> ErasedFailure:
        if isinstance(error, ErasedFailure):
            return error
        return super().__new__(cls, error)

    def __init__(self, error: object) -> None:
        # __init__ still runs on the instance __new__ handed back.
        if error is self:
            return
        super().__init__(error)
        self._error = error

    @classmethod
    def from_error(cls, error: Exception) -> ErasedFailure:
        return cls(error)

    @property
    def error(self) -> object:
        """The wrapped failure value."""
        return self._error

    def __str__(self) -> str:
        return str(self._error)

    def __repr__(self) -> str:
        return f"ErasedFailure({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErasedFailure):
            return NotImplemented
        return bool(self._error == other._error)

    def __hash__(self) -> int:
        try:
            return hash((ErasedFailure, self._error))
        except TypeError:
            # Unhashable payloads (lists, dicts) hash by type; equal values share one.
            return hash((ErasedFailure, type(self._error)))

    # --- Localized text, delegated to the underlying error ---

    def _delegate(self, name: str) -> str | None:
        value = getattr(self._error, name, None)
        return value if isinstance(value, str) else None

    @property
    def error_description(self) -> str | None:
        """A message describing what went wrong."""
        return self._delegate("error_description")

    @property
    def failure_reason(self) -> str | None:
        """A message describing why the failure happened."""
        return self._delegate("failure_reason")

    @property
    def help_anchor(self) -> str | None:
        return self._delegate("help_anchor")

    @property
    def recovery_suggestion(self) -> str | None:
        """How one might recover; falls back to an actionable ``hint``."""
        suggestion = self._delegate("recovery_suggestion")
        if suggestion is not None:
            return suggestion
        return self._delegate("hint")


def erase(error: object) -> ErasedFailure:
    """Erase ``error`` to an ``ErasedFailure``, returning erased input as-is."""
    return ErasedFailure(error)
