"""Placeholder kinds and parameter value handling.

Route templates use bracket placeholders::

    [slug]        dynamic: exactly one path segment
    [...parts]    catch-all: one or more trailing segments
    [[...parts]]  optional catch-all: zero or more trailing segments
"""

from collections.abc import Sequence
from enum import Enum

from localeroute.errors import InvalidParameterError


class SegmentKind(Enum):
    """Kind of a compiled template segment."""

    LITERAL = "literal"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch-all"
    OPTIONAL_CATCH_ALL = "optional-catch-all"

    @property
    def is_catch_all(self) -> bool:
        return self in (SegmentKind.CATCH_ALL, SegmentKind.OPTIONAL_CATCH_ALL)


# Capture regex for a dynamic placeholder inside a segment
DYNAMIC_PATTERN = r"[^/]+"

# Placeholder name: letters, digits, "_" and "-"
NAME_PATTERN = r"[A-Za-z_][A-Za-z0-9_\-]*"

type ParamValue = str | tuple[str, ...]
type Params = dict[str, ParamValue]

# Values accepted when building hrefs
type ParamInput = str | int | Sequence[str | int]


def format_value(name: str, value: str | int) -> str:
    """Convert a single parameter value to its path text.

    Raises ``InvalidParameterError`` for values that would not survive
    a round trip through the matcher: empty values, and values containing
    ``/`` or the ``?`` and ``#`` that start a query string or fragment.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidParameterError(name, value, "expected str or int")
    text = str(value)
    if not text:
        raise InvalidParameterError(name, value, "value is empty")
    if "/" in text:
        raise InvalidParameterError(name, value, "value contains '/'")
    for char in "?#":
        if char in text:
            raise InvalidParameterError(name, value, f"value contains {char!r}")
    return text


def format_segments(name: str, value: ParamInput) -> tuple[str, ...]:
    """Convert a catch-all parameter value to its ordered segments.

    A string is split on ``/``; a sequence supplies one segment per item.
    """
    if isinstance(value, str):
        return tuple(format_value(name, part) for part in value.split("/") if part)
    if isinstance(value, int) and not isinstance(value, bool):
        return (format_value(name, value),)
    if not isinstance(value, Sequence):
        raise InvalidParameterError(name, value, "expected a sequence of segments")
    return tuple(format_value(name, item) for item in value)

