"""The decomposed parts of a media type."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import attrs
from attrs import converters, field, frozen


def _validate_not_blank(_instance: Any, attribute: attrs.Attribute, value: str) -> None:  # noqa: ANN401
    if not value:
        raise ValueError(f"'{attribute.name}' must not be empty")


def _read_only_copy(parameters: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(parameters))


@frozen(kw_only=True)
class MediaTypeParts:
    """The named parts of a valid media type.

    Optional parts that the media type does not have are `None`, never an empty string or an empty mapping. The
    `parameters` mapping is a read-only copy of whatever was passed in.
    """

    type: str = field(validator=_validate_not_blank)
    subtype: str = field(validator=_validate_not_blank)
    tree: str | None = None
    suffix: str | None = None
    parameters: Mapping[str, str] | None = field(
        default=None, converter=converters.optional(_read_only_copy), hash=False,
    )

    def __str__(self) -> str:
        tree = f"{self.tree}." if self.tree is not None else ""
        suffix = f"+{self.suffix}" if self.suffix is not None else ""
        parameters = "".join(f"; {key}={value}" for key, value in (self.parameters or {}).items())
        return f"{self.type}/{tree}{self.subtype}{suffix}{parameters}"
