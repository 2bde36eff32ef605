"""Configures how the media type entry points report a failure."""

import enum
import logging
from typing import Any, TypeGuard

from attrs import frozen

from .exceptions import MatchRegexIsBroken, MediaTypeError

_logger = logging.getLogger(__name__)


class FailurePolicy(enum.StrEnum):
    """Selects what an entry point does when validation fails."""

    RAISE = "raise"
    """Abort the call by raising the error."""

    REPORT = "report"
    """Return a `Failure` describing the error instead of raising."""


@frozen
class Failure:
    """A failed result, returned instead of raising when the policy is `FailurePolicy.REPORT`."""

    error: MediaTypeError

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def context(self) -> dict[str, Any]:
        return self.error.context


def is_failure(result: object) -> TypeGuard[Failure]:
    """Checks whether a result returned under `FailurePolicy.REPORT` is a failure.

    Args:
        result (object): The result of an entry point.

    Returns:
        TypeGuard[Failure]: `True` if `result` is a `Failure`.
    """
    return isinstance(result, Failure)


def handle_failure(error: MediaTypeError, policy: FailurePolicy) -> Failure:
    """Signals `error` according to `policy`.

    Args:
        error (MediaTypeError): The error to signal.
        policy (FailurePolicy): How to signal it.

    Raises:
        MediaTypeError: `error` itself, when `policy` is `FailurePolicy.RAISE`.

    Returns:
        Failure: `error` wrapped in a `Failure`, when `policy` is `FailurePolicy.REPORT`.
    """
    if isinstance(error, MatchRegexIsBroken):
        _logger.error("%s", error.message)
    else:
        _logger.debug("%s", error.message)

    if FailurePolicy(policy) is FailurePolicy.RAISE:
        raise error
    return Failure(error)
