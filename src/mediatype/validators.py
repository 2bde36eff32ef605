from typing import Any

import attrs
from attrs import define

from .exceptions import NotAMediaType
from .parser import is_media_type as _is_media_type


@define(repr=False, frozen=True, slots=True)
class _MediaTypeValidator:
    allow_value_type: bool

    def __call__(self, inst: Any, attr: attrs.Attribute, value: Any) -> None:  # noqa: ANN401
        """We use a callable class to be able to change the ``__repr__``."""
        from .media_type import MediaType

        if self.allow_value_type and isinstance(value, MediaType):
            return
        if not _is_media_type(value):
            raise NotAMediaType(value)

    def __repr__(self) -> str:
        return "<media type validator>"


def is_media_type(*, allow_value_type: bool = True) -> _MediaTypeValidator:
    """A validator that raises `NotAMediaType` if the initializer value is not a media type.

    Args:
        allow_value_type (bool, optional): Whether an already-validated `MediaType` is accepted as well as a
            media type string. Defaults to `True`.
    """
    return _MediaTypeValidator(allow_value_type)
