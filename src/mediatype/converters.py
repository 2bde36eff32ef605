"""This module configures the converters for JSON serialization and deserialization of media types."""

from typing import Any

from cattrs.preconf.json import JsonConverter, make_converter

from .media_type import MediaType
from .models import MediaTypeParts


def _unstructure_parts(parts: MediaTypeParts) -> dict[str, Any]:
    """Unstructures `MediaTypeParts`, leaving out the optional parts it does not have."""
    result: dict[str, Any] = {"type": parts.type}
    if parts.tree is not None:
        result["tree"] = parts.tree
    result["subtype"] = parts.subtype
    if parts.suffix is not None:
        result["suffix"] = parts.suffix
    if parts.parameters is not None:
        result["parameters"] = dict(parts.parameters)
    return result


def make_media_type_converter() -> JsonConverter:
    """Creates a JSON converter that knows about media types.

    `MediaType` values are (un)structured as their plain string, and validated when structured. `MediaTypeParts` are
    unstructured without the optional parts they do not have.

    Returns:
        JsonConverter: The JSON converter.
    """
    converter = make_converter()

    @converter.register_structure_hook
    def _structure_media_type(val: str, _: type[MediaType]) -> MediaType:
        return MediaType(val)

    converter.register_unstructure_hook(MediaType, str)
    converter.register_unstructure_hook(MediaTypeParts, _unstructure_parts)
    return converter
