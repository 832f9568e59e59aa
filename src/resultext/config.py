"""Configuration: frozen Config resolved from explicit overrides or environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from resultext.errors import ConfigurationError

load_dotenv()

__all__ = ["Config", "resolve_config"]

logger = logging.getLogger(__name__)

_TRACE_CAPTURES_ENV = "RESULTEXT_TRACE_CAPTURES"
_STRICT_CONTRACTS_ENV = "RESULTEXT_STRICT_CONTRACTS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable runtime switches for resultext.

    Example:
        config = resolve_config(trace_captures=True)
        # captured exceptions are now logged at DEBUG on the "resultext" logger
    """

    #: Log every exception captured by ``catching``/``try_map`` at DEBUG.
    trace_captures: bool = False
    #: Raise ``ContractViolationError`` on mismatched exceptions; when off,
    #: the original exception is re-raised untouched.
    strict_contracts: bool = True


def _env_flag(name: str, default: bool, *, lenient: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    if lenient:
        logger.warning("Ignoring invalid boolean for %s: %r", name, raw)
        return default
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        hint="Use one of 1/0, true/false, yes/no, on/off.",
    )


def resolve_config(
    *,
    trace_captures: bool | None = None,
    strict_contracts: bool | None = None,
    lenient: bool = False,
) -> Config:
    """Resolve a Config; explicit arguments take precedence over the environment.

    Invalid environment values raise ``ConfigurationError`` unless ``lenient``
    is set, in which case they log a warning and fall back to the default.
    Exception-capture paths resolve leniently so a bad flag never turns a
    ``Failure`` into a raise.
    """
    defaults = Config()
    return Config(
        trace_captures=(
            bool(trace_captures)
            if trace_captures is not None
            else _env_flag(
                _TRACE_CAPTURES_ENV, defaults.trace_captures, lenient=lenient
            )
        ),
        strict_contracts=(
            bool(strict_contracts)
            if strict_contracts is not None
            else _env_flag(
                _STRICT_CONTRACTS_ENV, defaults.strict_contracts, lenient=lenient
            )
        ),
    )
