"""Regular expressions that define the media type grammar of RFC 2045 and RFC 6838.

    media-type = type "/" [tree "."] subtype ["+" suffix] *(OWS ";" OWS parameter) OWS

The fragments are built up the same way the RFCs build up their ABNF, then composed into one whole-string pattern
with a named group for each part of a media type.
"""

import functools
import logging
import re

from attrs import frozen

from .exceptions import MatchRegexIsBroken

_logger = logging.getLogger(__name__)

WS = "[ \t]"
OWS = WS + "*"

# RFC 6838 Section 4.2 "Naming Requirements":
# restricted-name       = restricted-name-first *126restricted-name-chars
# restricted-name-first = ALPHA / DIGIT
# restricted-name-chars = ALPHA / DIGIT / "!" / "#" / "$" / "&" / "-" / "^" / "_" / "." / "+"
RESTRICTED_NAME_FIRST = "[A-Za-z0-9]"
RESTRICTED_NAME_CHARS = r"[A-Za-z0-9!#$&^_.+\-]"
RESTRICTED_NAME = RESTRICTED_NAME_FIRST + RESTRICTED_NAME_CHARS + "{0,126}"

# Subtypes and suffixes may not contain "+", otherwise the suffix would be ambiguous.
SUBTYPE_NAME_CHARS = r"[A-Za-z0-9!#$&^_.\-]"
SUBTYPE_NAME = RESTRICTED_NAME_FIRST + SUBTYPE_NAME_CHARS + "{0,126}"

# RFC 6838 Section 3 "Registration Trees and Subtype Names": vendor, personal and unregistered.
TREE = "(?ai:vnd|prs|x)"

# RFC 2045 Section 5.1 "Syntax of the Content-Type Header Field":
# token    = 1*<any (US-ASCII) CHAR except SPACE, CTLs, or tspecials>
# tspecials = "(" / ")" / "<" / ">" / "@" / "," / ";" / ":" / "\" / <"> / "/" / "[" / "]" / "?" / "="
TCHAR = r"[!#$%&'*+\-.^_`{|}~0-9A-Za-z]"
TOKEN = TCHAR + "+"

# RFC 822 Section 3.3: quoted-string = <"> *(qtext/quoted-pair) <">
# qtext = <any CHAR excepting <">, "\" & CR>; LF is excluded too
QUOTED_PAIR = r"\\[\x00-\x7f]"
QTEXT = r"[\x00-\x09\x0b\x0c\x0e-\x21\x23-\x5b\x5d-\x7f]"
QUOTED_STRING = '"(?:' + QTEXT + "|" + QUOTED_PAIR + ')*"'

# parameter = attribute "=" value ; value = token / quoted-string
PARAMETER = TOKEN + OWS + "=" + OWS + "(?:" + TOKEN + "|" + QUOTED_STRING + ")"
PARAMETERS = "(?:" + OWS + ";" + OWS + PARAMETER + ")+" + OWS

MEDIA_TYPE = (
    "(?P<type>" + RESTRICTED_NAME + ")"
    "/"
    r"(?:(?P<tree>" + TREE + r")\.)?"
    "(?P<subtype>" + SUBTYPE_NAME + ")"
    r"(?:\+(?P<suffix>" + SUBTYPE_NAME + "))?"
    "(?P<parameters>" + PARAMETERS + ")?"
)


@frozen
class MediaTypeMatch:
    """The groups captured by matching a string against the media type grammar.

    `parameters` is the raw, unsplit parameter block starting at the first top-level ";".
    """

    type: str
    tree: str | None
    subtype: str
    suffix: str | None
    parameters: str | None


@functools.cache
def media_type_pattern() -> re.Pattern[str]:
    """Compiles the media type grammar.

    Raises:
        MatchRegexIsBroken: The grammar does not compile.

    Returns:
        re.Pattern[str]: The compiled grammar.
    """
    try:
        return re.compile(MEDIA_TYPE, re.ASCII)
    except re.error as ex:
        _logger.error("Media type grammar failed to compile", exc_info=ex)
        raise MatchRegexIsBroken(MEDIA_TYPE, f"pattern does not compile: {ex}") from ex


def match_media_type(value: object) -> MediaTypeMatch | None:
    """Matches `value` as a whole against the media type grammar.

    Args:
        value (object): The candidate media type. Anything other than a `str` never matches.

    Returns:
        MediaTypeMatch | None: The captured groups, or `None` when `value` is not a media type.
    """
    if not isinstance(value, str):
        return None
    m = media_type_pattern().fullmatch(value)
    if m is None:
        return None
    return MediaTypeMatch(
        type=m.group("type"),
        tree=m.group("tree"),
        subtype=m.group("subtype"),
        suffix=m.group("suffix"),
        parameters=m.group("parameters"),
    )
