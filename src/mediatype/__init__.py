"""Validation and decomposition of media types such as ``text/html; charset=UTF-8``."""

from .exceptions import MalformedParameters, MatchRegexIsBroken, MediaTypeError, NotAMediaType
from .grammar import MediaTypeMatch, match_media_type
from .media_type import MediaType
from .models import MediaTypeParts
from .parameters import parse_parameters, split_parameters, unquote
from .parser import is_media_type, must_be_media_type, parse_media_type
from .policy import Failure, FailurePolicy, is_failure

__all__ = [
    "Failure",
    "FailurePolicy",
    "MalformedParameters",
    "MatchRegexIsBroken",
    "MediaType",
    "MediaTypeError",
    "MediaTypeMatch",
    "MediaTypeParts",
    "NotAMediaType",
    "is_failure",
    "is_media_type",
    "match_media_type",
    "must_be_media_type",
    "parse_media_type",
    "parse_parameters",
    "split_parameters",
    "unquote",
]
