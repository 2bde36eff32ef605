"""A string that is guaranteed to be a valid media type."""

from typing import Literal, Self, overload

from attrs import field, frozen

from . import validators
from .exceptions import NotAMediaType
from .models import MediaTypeParts
from .parser import parse_media_type
from .policy import Failure, FailurePolicy, handle_failure


@frozen(repr=False)
class MediaType:
    """A media type string that has passed validation.

    An instance can only be created from a string that satisfies the media type grammar, so code that receives a
    `MediaType` never has to validate it again. The original string, casing and whitespace included, is kept as-is.

    Raises:
        NotAMediaType: The string passed to the initializer is not a media type.
    """

    _value: str = field(validator=validators.is_media_type(allow_value_type=False))

    @overload
    @classmethod
    def from_string(cls, value: object, policy: Literal[FailurePolicy.RAISE] = ...) -> Self: ...

    @overload
    @classmethod
    def from_string(cls, value: object, policy: FailurePolicy) -> "Self | Failure": ...

    @classmethod
    def from_string(cls, value: object, policy: FailurePolicy = FailurePolicy.RAISE) -> "Self | Failure":
        """Creates a `MediaType`, signalling an invalid `value` according to `policy`.

        Args:
            value (object): The media type string.
            policy (FailurePolicy, optional): How to signal a failure. Defaults to `FailurePolicy.RAISE`.

        Returns:
            Self | Failure: The new instance, or a `Failure` under `FailurePolicy.REPORT`.
        """
        try:
            return cls(value)  # type: ignore[arg-type]
        except NotAMediaType as ex:
            return handle_failure(ex, policy)

    @property
    def value(self) -> str:
        """The media type string exactly as it was given."""
        return self._value

    @overload
    def parse(self, policy: Literal[FailurePolicy.RAISE] = ...) -> MediaTypeParts: ...

    @overload
    def parse(self, policy: FailurePolicy) -> MediaTypeParts | Failure: ...

    def parse(self, policy: FailurePolicy = FailurePolicy.RAISE) -> MediaTypeParts | Failure:
        """Decomposes the media type into its named parts.

        The value was validated on construction, so the only possible failure is `MatchRegexIsBroken`.
        """
        return parse_media_type(self._value, policy)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"MediaType({self._value!r})"
