"""Validates and decomposes media type strings."""

import logging
from typing import Literal, overload

from .exceptions import MalformedParameters, MatchRegexIsBroken, NotAMediaType
from .grammar import match_media_type
from .models import MediaTypeParts
from .parameters import parse_parameters
from .policy import Failure, FailurePolicy, handle_failure

_logger = logging.getLogger(__name__)


def is_media_type(value: object) -> bool:
    """Checks whether `value` is a string that satisfies the media type grammar.

    Args:
        value (object): The candidate media type.

    Returns:
        bool: `True` if `value` is a media type. `None`, non-strings and malformed strings give `False`.
    """
    return match_media_type(value) is not None


@overload
def parse_media_type(value: object, policy: Literal[FailurePolicy.RAISE] = ...) -> MediaTypeParts: ...


@overload
def parse_media_type(value: object, policy: FailurePolicy) -> MediaTypeParts | Failure: ...


def parse_media_type(value: object, policy: FailurePolicy = FailurePolicy.RAISE) -> MediaTypeParts | Failure:
    """Decomposes a media type into its named parts.

    Args:
        value (object): The media type to parse, e.g. ``"application/vnd.api+json; charset=UTF-8"``.
        policy (FailurePolicy, optional): How to signal a failure. Defaults to `FailurePolicy.RAISE`.

    Raises:
        NotAMediaType: `value` is not a media type and `policy` is `FailurePolicy.RAISE`.
        MatchRegexIsBroken: The grammar matched `value` but captured parts that cannot form a media type.

    Returns:
        MediaTypeParts | Failure: The parts of the media type, or a `Failure` under `FailurePolicy.REPORT`.
    """
    match = match_media_type(value)
    if match is None:
        return handle_failure(NotAMediaType(value), policy)

    if not match.type or not match.subtype:
        return handle_failure(MatchRegexIsBroken(value, "type or subtype captured as empty"), policy)

    try:
        parameters = parse_parameters(match.parameters)
    except MalformedParameters as ex:
        broken = MatchRegexIsBroken(value, f"matched parameter block was rejected: {ex.reason}")
        broken.__cause__ = ex
        return handle_failure(broken, policy)

    _logger.debug("Parsed media type %r", value)
    return MediaTypeParts(
        type=match.type,
        tree=match.tree,
        subtype=match.subtype,
        suffix=match.suffix,
        parameters=parameters,
    )


@overload
def must_be_media_type(value: object, policy: Literal[FailurePolicy.RAISE] = ...) -> None: ...


@overload
def must_be_media_type(value: object, policy: FailurePolicy) -> Failure | None: ...


def must_be_media_type(value: object, policy: FailurePolicy = FailurePolicy.RAISE) -> Failure | None:
    """Asserts that `value` is a media type, without returning its parts.

    Args:
        value (object): The candidate media type.
        policy (FailurePolicy, optional): How to signal a failure. Defaults to `FailurePolicy.RAISE`.

    Raises:
        NotAMediaType: `value` is not a media type and `policy` is `FailurePolicy.RAISE`.

    Returns:
        Failure | None: `None` on success, or a `Failure` under `FailurePolicy.REPORT`.
    """
    result = parse_media_type(value, policy)
    if isinstance(result, Failure):
        return result
    return None
