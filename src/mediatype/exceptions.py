"""This module contains the exceptions raised when validating and parsing media types."""

from typing import Any, ClassVar


class MediaTypeError(Exception):
    """The base class for all errors raised by this package.

    Every error carries a machine-readable `kind`, a human-readable `message` and a `context` dictionary holding the
    structured data that caused it.
    """

    kind: ClassVar[str] = "media-type-error"

    def __init__(self, message: str, **context: Any) -> None:  # noqa: ANN401
        """Creates a new instance of `MediaTypeError`.

        Args:
            message (str): Indicates the error that occurred.
            context (Any): Structured data describing the error.
        """
        self.message = message
        self.context = context
        super().__init__(self.message)


class NotAMediaType(MediaTypeError, ValueError):  # noqa: N818
    """The exception raised when a string does not satisfy the media type grammar."""

    kind: ClassVar[str] = "not-a-media-type"

    def __init__(self, value: Any) -> None:  # noqa: ANN401
        """Creates a new instance of `NotAMediaType`.

        Args:
            value (Any): The offending input.
        """
        self.input = value
        message = f"{value!r} is not a media type; expected 'type/[tree.]subtype[+suffix][; key=value]*'"
        super().__init__(message, input=value)


class MatchRegexIsBroken(MediaTypeError):  # noqa: N818
    """The exception raised when the media type grammar produces an impossible match.

    This indicates a defect in the grammar itself, never bad input from the caller.
    """

    kind: ClassVar[str] = "match-regex-is-broken"

    def __init__(self, value: Any, details: str) -> None:  # noqa: ANN401
        """Creates a new instance of `MatchRegexIsBroken`.

        Args:
            value (Any): The input that was being matched.
            details (str): Describes the inconsistency that was detected.
        """
        self.input = value
        self.details = details
        super().__init__(f"Media type grammar is broken while matching {value!r}: {details}", input=value, details=details)


class MalformedParameters(MediaTypeError, ValueError):  # noqa: N818
    """The exception raised when a parameter block cannot be split into key/value pairs."""

    kind: ClassVar[str] = "malformed-parameters"

    def __init__(self, parameters: str, reason: str) -> None:
        """Creates a new instance of `MalformedParameters`.

        Args:
            parameters (str): The raw parameter block.
            reason (str): Why the block was rejected.
        """
        self.parameters = parameters
        self.reason = reason
        super().__init__(f"Malformed media type parameters {parameters!r}: {reason}", parameters=parameters, reason=reason)
