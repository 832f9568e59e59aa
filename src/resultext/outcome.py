"""Outcome type with combinators for explicit error handling.

An ``Outcome`` is either a ``Success`` carrying a value or a ``Failure``
carrying an error. Both variants are frozen dataclasses and expose the same
combinator surface, so call sites can chain transformations, recoveries and
case analysis without branching on the variant themselves.

Every combinator is pure: it dispatches on the variant and calls the supplied
callables at most once, in the caller's context. Callables whose result is
not needed (the fallback of a successful ``recover``, the ``other`` of a
failed ``fanout``) are never called.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import TYPE_CHECKING, Any, NoReturn

from resultext.config import resolve_config
from resultext.erasure import is_error_convertible
from resultext.errors import UnraisableFailureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultext.erasure import ErrorConvertible

__all__ = ["Failure", "Outcome", "Success"]

logger = logging.getLogger(__name__)

S = typing.TypeVar("S")
F = typing.TypeVar("F")


def _trace_capture(exc: Exception, *, site: str) -> None:
    if resolve_config(lenient=True).trace_captures:
        logger.debug("%s captured %s: %s", site, type(exc).__name__, exc)


def _check_into(into: object) -> None:
    if into is not None and not is_error_convertible(into):
        raise TypeError(
            "try_map(into=...) expects a class with a 'from_error' classmethod, "
            f"got {into!r}"
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Success[S]:
    """A successful outcome holding ``value``."""

    value: S

    def __str__(self) -> str:
        return f"success({self.value})"

    # --- Inspection ---

    @property
    def error(self) -> None:
        return None

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def result(self) -> Success[S]:
        """The outcome itself."""
        return self

    # --- Transformers ---

    def map[U](self, transform: Callable[[S], U]) -> Success[U]:
        return Success(transform(self.value))

    def flat_map[U, E](
        self, transform: Callable[[S], Success[U] | Failure[E]]
    ) -> Success[U] | Failure[E]:
        return transform(self.value)

    def map_error(self, transform: Callable[[Any], Any]) -> Success[S]:
        return self

    def flat_map_error(self, transform: Callable[[Any], Any]) -> Success[S]:
        return self

    def compact_map[U](self, transform: Callable[[S | None], U]) -> Success[U]:
        """Apply ``transform`` to the value; failures pass through untouched."""
        return Success(transform(self.value))

    def compact_map_error(self, transform: Callable[[Any], Any]) -> Success[S]:
        """Re-wrap the value untouched; ``transform`` only applies to failures."""
        return self

    def bimap[U](
        self, success: Callable[[S], U], failure: Callable[[Any], Any]
    ) -> Success[U]:
        return Success(success(self.value))

    def fanout[U, E](
        self, other: Callable[[], Success[U] | Failure[E]]
    ) -> Success[tuple[S, U]] | Failure[E]:
        """Pair this value with ``other()``'s, evaluating ``other`` lazily."""
        return other().map(lambda right: (self.value, right))

    def analysis[R](
        self, if_success: Callable[[S], R], if_failure: Callable[[Any], R]
    ) -> R:
        return if_success(self.value)

    def try_map[T](
        self,
        transform: Callable[[S], T],
        *,
        into: type[ErrorConvertible] | None = None,
    ) -> Success[T] | Failure[Any]:
        """Apply a transform that may raise, capturing the exception as a failure.

        Without ``into`` the raised exception becomes the failure payload as-is.
        With ``into`` it is normalized through ``into.from_error``.
        """
        _check_into(into)
        if into is None:
            try:
                return Success(transform(self.value))
            except Exception as exc:
                _trace_capture(exc, site="try_map")
                return Failure(exc)

        def _step(value: S) -> Success[T] | Failure[Any]:
            try:
                return Success(transform(value))
            except Exception as exc:
                _trace_capture(exc, site="try_map")
                return Failure(into.from_error(exc))

        return self.flat_map(_step)

    # --- Recovery ---

    def recover(self, fallback: Callable[[], S]) -> S:
        return self.value

    def recover_with(self, fallback: Callable[[], Any]) -> Success[S]:
        return self

    # --- Control-flow interop ---

    def unwrap_or_raise(self) -> S:
        return self.value

    get = unwrap_or_raise


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[F]:
    """A failed outcome holding ``error``."""

    error: F

    def __str__(self) -> str:
        return f"failure({self.error})"

    # --- Inspection ---

    @property
    def value(self) -> None:
        return None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def result(self) -> Failure[F]:
        """The outcome itself."""
        return self

    # --- Transformers ---

    def map(self, transform: Callable[[Any], Any]) -> Failure[F]:
        return self

    def flat_map(self, transform: Callable[[Any], Any]) -> Failure[F]:
        return self

    def map_error[E](self, transform: Callable[[F], E]) -> Failure[E]:
        return Failure(transform(self.error))

    def flat_map_error[T, E](
        self, transform: Callable[[F], Success[T] | Failure[E]]
    ) -> Success[T] | Failure[E]:
        return transform(self.error)

    def compact_map(self, transform: Callable[[Any], Any]) -> Failure[F]:
        """Re-wrap the error untouched; ``transform`` is never called."""
        return self

    def compact_map_error[E](self, transform: Callable[[F | None], E]) -> Failure[E]:
        """Apply ``transform`` to the error."""
        return Failure(transform(self.error))

    def bimap[E](
        self, success: Callable[[Any], Any], failure: Callable[[F], E]
    ) -> Failure[E]:
        return Failure(failure(self.error))

    def fanout(self, other: Callable[[], Any]) -> Failure[F]:
        return self

    def analysis[R](
        self, if_success: Callable[[Any], R], if_failure: Callable[[F], R]
    ) -> R:
        return if_failure(self.error)

    def try_map(
        self,
        transform: Callable[[Any], Any],
        *,
        into: type[ErrorConvertible] | None = None,
    ) -> Failure[F]:
        _check_into(into)
        return self

    # --- Recovery ---

    def recover[S](self, fallback: Callable[[], S]) -> S:
        return fallback()

    def recover_with[S, E](
        self, fallback: Callable[[], Success[S] | Failure[E]]
    ) -> Success[S] | Failure[E]:
        return fallback()

    # --- Control-flow interop ---

    def unwrap_or_raise(self) -> NoReturn:
        """Raise the error; non-exception payloads raise ``UnraisableFailureError``."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnraisableFailureError(self.error)

    get = unwrap_or_raise


Outcome = Success[S] | Failure[F]
