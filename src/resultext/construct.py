"""Constructors bridging plain values and exceptions into outcomes."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from resultext.config import resolve_config
from resultext.erasure import ErasedFailure, erase
from resultext.errors import ContractViolationError
from resultext.outcome import Failure, Success, _trace_capture

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["attempt", "catching", "failure", "from_optional", "success"]

logger = logging.getLogger(__name__)


def success[S](value: S) -> Success[S]:
    """Construct a success wrapping ``value``."""
    return Success(value)


def failure[F](error: F) -> Failure[F]:
    """Construct a failure wrapping ``error``."""
    return Failure(error)


def from_optional[S, F](
    value: S | None, fail_with: Callable[[], F]
) -> Success[S] | Failure[F]:
    """Succeed with ``value`` unless it is ``None``; otherwise fail lazily.

    ``fail_with`` is only called on the ``None`` branch.
    """
    if value is not None:
        return Success(value)
    return Failure(fail_with())


def _validate_error_type(error_type: object) -> None:
    if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
        raise TypeError(f"error_type must be an exception class, got {error_type!r}")


def _convert_caught(exc: Exception, error_type: type[BaseException]) -> Any:
    """Map a caught exception onto ``error_type``.

    Must be called from inside the ``except`` block that caught ``exc`` so the
    re-raise paths keep the original traceback.
    """
    if error_type is ErasedFailure:
        return erase(exc)
    if isinstance(exc, error_type):
        return exc

    logger.warning(
        "Body declared to raise %s raised %s instead",
        error_type.__name__,
        type(exc).__name__,
    )
    if not resolve_config(lenient=True).strict_contracts:
        raise exc
    raise ContractViolationError(
        f"Expected {error_type.__name__}, caught {type(exc).__name__}: {exc}",
        expected=error_type,
        actual=exc,
        hint=(
            f"Widen error_type, use ErasedFailure, or handle {type(exc).__name__} "
            "inside the body."
        ),
    ) from exc


def catching[S](
    body: Callable[[], S], error_type: type[BaseException] = Exception
) -> Success[S] | Failure[Any]:
    """Run ``body``, turning a raised exception into a failure.

    - ``error_type`` is ``ErasedFailure``: the exception is erased.
    - The exception is an ``error_type``: it becomes the payload as-is.
    - Anything else breaks the caller's contract and raises
      ``ContractViolationError`` (or the original exception when
      ``strict_contracts`` is disabled).

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt`` and
    friends propagate.
    """
    _validate_error_type(error_type)
    try:
        value = body()
    except Exception as exc:
        _trace_capture(exc, site="catching")
        return Failure(_convert_caught(exc, error_type))
    return Success(value)


def attempt[**P, S](
    error_type: type[BaseException] = Exception,
) -> Callable[[Callable[P, S]], Callable[P, Success[S] | Failure[Any]]]:
    """Decorator form of ``catching``: the wrapped function returns an outcome.

    Example:
        @attempt(ValueError)
        def parse(raw: str) -> int:
            return int(raw)

        parse("12")   # Success(value=12)
        parse("x")    # Failure(error=ValueError(...))
    """
    _validate_error_type(error_type)

    def decorator(func: Callable[P, S]) -> Callable[P, Success[S] | Failure[Any]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Success[S] | Failure[Any]:
            return catching(lambda: func(*args, **kwargs), error_type)

        return wrapper

    return decorator
