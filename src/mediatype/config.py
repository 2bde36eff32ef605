"""Configuration for the media type checker."""

from collections.abc import Callable
from typing import Any, TypeVar

import environ

from .policy import FailurePolicy

T = TypeVar("T")


def _or_default(convert: Callable[[Any], T], default: T) -> Callable[[Any], T]:
    """Wraps `convert` so that an empty value, such as a blank line in a `.env` file, gives `default`."""
    def _convert(value: Any) -> T:  # noqa: ANN401
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return default
        return convert(value)

    return _convert


@environ.config(prefix="MEDIATYPE")
class CheckerConfig:
    """Configuration for the `python -m mediatype` checker."""

    log_levels: str = environ.var(
        ":WARNING", help="Log levels for named loggers, e.g. 'mediatype:DEBUG,:WARNING'.",
    )
    policy: FailurePolicy = environ.var(
        FailurePolicy.REPORT,
        converter=_or_default(FailurePolicy, FailurePolicy.REPORT),
        help="Stop at the first invalid media type ('raise') or report every one ('report').",
    )
    json_indent: int = environ.var(2, converter=_or_default(int, 2), help="Indentation of the JSON output.")
