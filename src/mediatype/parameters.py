"""Decomposes the parameter block of a media type into key/value pairs."""

import logging
import re

from .exceptions import MalformedParameters

_logger = logging.getLogger(__name__)

_QUOTED_PAIR = re.compile(r"\\(.)", re.DOTALL)


def _split_top_level(block: str, separator: str) -> list[str]:
    segments: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False
    for ch in block:
        if escaped:
            escaped = False
        elif in_quotes and ch == "\\":
            escaped = True
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == separator and not in_quotes:
            segments.append("".join(current))
            current = []
            continue
        current.append(ch)
    if in_quotes:
        raise MalformedParameters(block, "unterminated quoted string")
    segments.append("".join(current))
    return segments


def split_parameters(block: str) -> list[tuple[str, str]]:
    """Splits a raw parameter block into an ordered list of key/value pairs.

    Semicolons and equals signs inside a quoted-string value do not split it. Whitespace around each segment and
    around the "=" is trimmed; keys and values are otherwise returned exactly as written, quotes included.

    Args:
        block (str): The parameter block, e.g. ``"; charset=UTF-8; format=flowed"``. A leading ";" is optional.

    Raises:
        MalformedParameters: A segment is empty, has no "=", or has an empty key or value.

    Returns:
        list[tuple[str, str]]: The parameters in the order they were written, duplicates included.
    """
    text = block.strip()
    if text.startswith(";"):
        text = text[1:]

    pairs: list[tuple[str, str]] = []
    for segment in _split_top_level(text, ";"):
        segment = segment.strip()  # noqa: PLW2901
        if not segment:
            raise MalformedParameters(block, "empty parameter")
        key, sep, value = segment.partition("=")
        if not sep:
            raise MalformedParameters(block, f"parameter {segment!r} has no '='")
        key = key.strip()
        value = value.strip()
        if not key:
            raise MalformedParameters(block, f"parameter {segment!r} has no name")
        if not value:
            raise MalformedParameters(block, f"parameter {key!r} has no value")
        pairs.append((key, value))
    return pairs


def parse_parameters(block: str | None) -> dict[str, str] | None:
    """Parses a raw parameter block into a mapping.

    Keys are case-sensitive as written. When a key occurs more than once, the last occurrence wins.

    Args:
        block (str | None): The parameter block captured from a media type, or `None` if there was none.

    Raises:
        MalformedParameters: The block is present but cannot be decomposed.

    Returns:
        dict[str, str] | None: The parameters, or `None` when there is no block at all.
    """
    if block is None or block == "":
        return None
    parameters: dict[str, str] = {}
    for key, value in split_parameters(block):
        if key in parameters:
            _logger.debug("Duplicate media type parameter %s, keeping last value %s", key, value)
        parameters[key] = value
    return parameters


def unquote(value: str) -> str:
    """Returns the content of a quoted-string parameter value.

    Values that are not quoted are returned unchanged.
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':  # noqa: PLR2004
        return _QUOTED_PAIR.sub(r"\1", value[1:-1])
    return value
