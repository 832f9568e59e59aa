"""resultext: combinators for success/failure outcomes.

Public API:
    - Success / Failure / Outcome: the two-variant outcome type
    - success(), failure(), from_optional(): explicit constructors
    - catching(), attempt(): turn raised exceptions into failures
    - ErasedFailure / erase(): uniform wrapper for heterogeneous errors
    - Config / resolve_config(): runtime switches
"""

from __future__ import annotations

import logging

from resultext.config import Config, resolve_config
from resultext.construct import attempt, catching, failure, from_optional, success
from resultext.erasure import (
    ErasedFailure,
    ErrorConvertible,
    LocalizedError,
    erase,
    is_error_convertible,
)
from resultext.errors import (
    ConfigurationError,
    ContractViolationError,
    ResultExtError,
    UnraisableFailureError,
)
from resultext.outcome import Failure, Outcome, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultext")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultext").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "ContractViolationError",
    "ErasedFailure",
    "ErrorConvertible",
    "Failure",
    "LocalizedError",
    "Outcome",
    "ResultExtError",
    "Success",
    "UnraisableFailureError",
    "attempt",
    "catching",
    "erase",
    "failure",
    "from_optional",
    "is_error_convertible",
    "resolve_config",
    "success",
]
